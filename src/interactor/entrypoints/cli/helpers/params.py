"""Build a parameter bag from ``-p KEY=VALUE`` options and a JSON object.

Values are decoded as JSON when possible (``-p count=3`` gives ``3``,
``-p tags='["a"]'`` gives a list) and kept as plain strings otherwise.
"""

import json
from collections.abc import Iterable
from typing import Any

import click

from interactor.domain.parameters import ParameterBag


def _decode(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def build_params(pairs: Iterable[str], params_json: str | None = None) -> ParameterBag:
    """Merge ``params_json`` and ``KEY=VALUE`` pairs into a `ParameterBag`.

    Pairs are applied after the JSON object, so they win on conflicts.

    Raises:
        click.BadParameter: On a malformed pair or a JSON value that is not an object.
    """

    data: dict[str, Any] = {}
    if params_json:
        try:
            loaded = json.loads(params_json)
        except json.JSONDecodeError as e:
            raise click.BadParameter(
                f"not valid JSON: {e.msg}", param_hint="--params-json"
            ) from e
        if not isinstance(loaded, dict):
            raise click.BadParameter("expected a JSON object", param_hint="--params-json")
        data.update(loaded)

    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"Expected KEY=VALUE, got {pair!r}", param_hint="--param")
        data[key] = _decode(raw)

    return ParameterBag(data)
