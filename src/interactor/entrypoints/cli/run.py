"""``interactor run``: call a service from the command line.

Loads the service named by ``MODULE:ATTRIBUTE``, calls it in direct-result
mode with the given parameters and renders the outcome.

Behavior
- Success: the value is printed to **stdout** as JSON, a status line goes to
  stderr, exit code 0. Mapping keys that are not strings are written with
  ``str()``; values JSON cannot encode are written with ``repr()``.
- Failure: a status line with the tag (if any) and the payload go to
  **stderr**, exit code 1.
- A bad target or malformed parameters: usage error, exit code 2.
- The service raised a programming error (a step returned something that is
  not an outcome, an invariant was broken): the error is logged and reported
  on stderr, exit code 3.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import click

from interactor.bootstrap import ServiceTargetError, load_service
from interactor.domain.errors import InteractorError
from interactor.domain.outcome import Failure, Success
from interactor.utils.naming import callable_name

from .helpers import build_params, failure, success

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1
EXIT_SERVICE_ERROR = 3


def _jsonable(value: Any) -> Any:
    """Return ``value`` with every mapping key turned into a string."""
    match value:
        case Mapping():
            return {
                key if isinstance(key, str) else str(key): _jsonable(item)
                for key, item in value.items()
            }
        case list() | tuple():
            return [_jsonable(item) for item in value]
        case _:
            return value


def _to_json(value: Any) -> str:
    return json.dumps(_jsonable(value), default=repr, indent=2, sort_keys=True)


@click.command()
@click.argument("target")
@click.option(
    "--param",
    "-p",
    "pairs",
    multiple=True,
    metavar="KEY=VALUE",
    help="Parameter passed to the service. Repeatable; VALUE is decoded as JSON when possible.",
)
@click.option(
    "--params-json",
    "params_json",
    metavar="JSON",
    help="JSON object of parameters, applied before any --param.",
)
@click.pass_context
def run(
    ctx: click.Context, target: str, pairs: tuple[str, ...], params_json: str | None
) -> None:
    """Call the service at TARGET (MODULE:ATTRIBUTE) and report its outcome."""

    try:
        service = load_service(target)
    except ServiceTargetError as e:
        raise click.BadParameter(str(e), param_hint="TARGET") from e

    params = build_params(pairs, params_json)
    logger.info("Running %s from %s with parameters %s", service.name, target, sorted(params))
    logger.debug(
        "%r validator=%s",
        service.sequencer,
        callable_name(service.validator) if service.validator is not None else "<none>",
    )

    try:
        outcome = service.call(params)
    except InteractorError as e:
        logger.exception("%s raised %s", service.name, type(e).__name__)
        failure(f"{service.name} raised {type(e).__name__}: {e}")
        ctx.exit(EXIT_SERVICE_ERROR)

    match outcome:
        case Success(value):
            click.echo(_to_json(value))
            success(f"{service.name} succeeded")
        case Failure(error, tag):
            label = f" [{tag}]" if tag is not None else ""
            failure(f"{service.name} failed{label}")
            click.echo(_to_json(error), err=True)
            ctx.exit(EXIT_FAILURE)
