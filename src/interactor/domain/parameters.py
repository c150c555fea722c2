"""Immutable parameter bag passed to validators and steps."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any


class ParameterBag(Mapping[str, Any]):
    """A read-only mapping of parameter names to values.

    The bag copies its input on construction, so later changes to the source
    mapping are not visible through it. Steps read only the keys they need.

    Example:
        >>> bag = ParameterBag({"title": "Hi"}, body="There")
        >>> bag["title"], len(bag)
        ('Hi', 2)
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None, /, **kwargs: Any) -> None:
        merged: dict[str, Any] = dict(data or {})
        merged.update(kwargs)
        self._data = merged

    @classmethod
    def coerce(cls, params: Mapping[str, Any] | None) -> ParameterBag:
        """Return ``params`` unchanged if it is already a bag, else wrap it."""
        if isinstance(params, cls):
            return params
        return cls(params)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ParameterBag({self._data!r})"

    def pick(self, *keys: str) -> ParameterBag:
        """Return a new bag holding only ``keys``.

        Raises:
            KeyError: If any of ``keys`` is missing.
        """
        return ParameterBag({key: self._data[key] for key in keys})

    def to_dict(self) -> dict[str, Any]:
        """Return a shallow, mutable copy of the parameters."""
        return dict(self._data)
