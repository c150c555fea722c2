"""Validation gate run before a service's own steps."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from interactor.domain.errors import InvariantViolation
from interactor.domain.outcome import Outcome, failure, success
from interactor.interfaces.validator import ValidationReport

if TYPE_CHECKING:
    from interactor.domain.parameters import ParameterBag
    from interactor.interfaces.validator import Validator

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class HasValidator(Protocol):
    """Anything carrying an optional validator capability (e.g. a Service)."""

    @property
    def validator(self) -> Validator | None: ...


class ValidationGate:
    """Turn a service's optional validator into an Outcome.

    The result is fed to the sequencer ahead of the service's steps, so a
    Failure here means none of the steps run.
    """

    @staticmethod
    def run(service: HasValidator, params: ParameterBag) -> Outcome[Any, Any]:
        """Validate ``params`` for ``service``.

        Returns:
            ``Success(params)`` when the service has no validator or the
            validator accepts the parameters; otherwise an untagged
            ``Failure`` carrying the validator's errors.

        Raises:
            InvariantViolation: If the validator does not return a report with
                ``is_failure()`` and ``errors()``.
        """
        validator = service.validator
        if validator is None:
            return success(params)

        report = validator(params)
        if not isinstance(report, ValidationReport):
            raise InvariantViolation(
                f"Validator returned {type(report).__name__}, "
                "expected an object with is_failure() and errors()."
            )

        if report.is_failure():
            errors = report.errors()
            logger.debug("Validation rejected parameters: %s", errors)
            return failure(dict(errors) if isinstance(errors, Mapping) else errors)

        return success(params)
