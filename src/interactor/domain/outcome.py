"""The two-variant result value returned by steps and services.

An outcome is exactly one of:

* ``Success(value)`` -- the operation succeeded and produced ``value``.
* ``Failure(error, tag)`` -- the operation did not succeed. ``error`` is the
  payload; ``tag`` is an optional caller-chosen label used only to route the
  failure to a specific handler at dispatch time.

Both variants are frozen dataclasses and support structural pattern matching::

    match outcome:
        case Success(post):
            ...
        case Failure(errors, tag=None):
            ...
"""

from __future__ import annotations

import abc
from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .errors import InvariantViolation

T = TypeVar("T")
E = TypeVar("E")


class Outcome(abc.ABC, Generic[T, E]):
    """Common base of `Success` and `Failure`. Not instantiable on its own."""

    __slots__ = ()

    @abc.abstractmethod
    def is_success(self) -> bool:
        """Return True if this outcome is a Success."""

    def is_failure(self) -> bool:
        """Return True if this outcome is a Failure."""
        return not self.is_success()

    @abc.abstractmethod
    def unwrap_success(self) -> T:
        """Return the success value.

        Raises:
            InvariantViolation: If called on a Failure.
        """

    @abc.abstractmethod
    def unwrap_failure(self) -> E:
        """Return the failure payload.

        Raises:
            InvariantViolation: If called on a Success.
        """


@dataclass(frozen=True, slots=True)
class Success(Outcome[T, Any]):
    """A successful outcome carrying ``value``."""

    value: T

    def is_success(self) -> bool:
        return True

    def unwrap_success(self) -> T:
        return self.value

    def unwrap_failure(self) -> Any:
        raise InvariantViolation(f"Cannot unwrap a failure from {self!r}.")


@dataclass(frozen=True, slots=True)
class Failure(Outcome[Any, E]):
    """A failed outcome carrying ``error`` and an optional routing ``tag``."""

    error: E
    tag: Hashable | None = None

    def is_success(self) -> bool:
        return False

    def unwrap_success(self) -> Any:
        raise InvariantViolation(f"Cannot unwrap a success from {self!r}.")

    def unwrap_failure(self) -> E:
        return self.error

    def has_tag(self, tag: Hashable) -> bool:
        """Return True if this failure carries exactly ``tag``."""
        return self.tag is not None and self.tag == tag


def success(value: T) -> Success[T]:
    """Construct a Success."""
    return Success(value)


def failure(error: E, tag: Hashable | None = None) -> Failure[E]:
    """Construct a Failure, optionally tagged for dispatch routing."""
    return Failure(error, tag)
