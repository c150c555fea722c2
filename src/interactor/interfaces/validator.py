"""Validator capability consumed by the validation gate.

Any callable that accepts the parameter bag and returns a `ValidationReport`
qualifies as a validator. The library that builds the validator is
irrelevant; only this call contract matters.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from interactor.domain.parameters import ParameterBag

# pylint: disable=too-few-public-methods


@runtime_checkable
class ValidationReport(Protocol):
    """The result of running a validator over a parameter bag."""

    def is_failure(self) -> bool:
        """Return True if the parameters were rejected."""
        ...  # pylint: disable=unnecessary-ellipsis

    def errors(self) -> Any:
        """Return the structured error report (e.g. ``{field: [messages]}``)."""
        ...  # pylint: disable=unnecessary-ellipsis


class Validator(Protocol):
    """A callable capability that checks a parameter bag."""

    def __call__(self, params: ParameterBag) -> ValidationReport: ...
