"""Validator implementations.

* `ValidationResult` -- a plain report for hand-written validators.
* `PydanticValidator` -- checks the parameter bag against a pydantic model.

Both report errors as ``{field: [message, ...]}``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from pydantic import BaseModel, ValidationError

if TYPE_CHECKING:
    from interactor.domain.parameters import ParameterBag

logger = logging.getLogger(__name__)

BASE_ERROR_KEY = "base"  # errors that are not attached to a single field


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """A validation report holding per-field error messages.

    The report is a failure iff at least one field has at least one message.
    """

    messages: Mapping[str, Sequence[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = {
            name: tuple(msgs) for name, msgs in self.messages.items() if msgs
        }
        object.__setattr__(self, "messages", MappingProxyType(frozen))

    @classmethod
    def ok(cls) -> ValidationResult:
        """Return a passing report."""
        return cls()

    def is_failure(self) -> bool:
        return bool(self.messages)

    def errors(self) -> dict[str, list[str]]:
        return {name: list(msgs) for name, msgs in self.messages.items()}


class PydanticValidator:
    """Validate parameter bags against a pydantic model.

    Args:
        model: The pydantic model class describing acceptable parameters.

    Example:
        >>> from pydantic import Field
        >>> class PostParams(BaseModel):
        ...     title: str = Field(min_length=1)
        >>> validator = PydanticValidator(PostParams)
        >>> validator({"title": ""}).is_failure()
        True
    """

    def __init__(self, model: type[BaseModel]) -> None:
        self.model = model

    def __repr__(self) -> str:
        return f"PydanticValidator({self.model.__name__})"

    def __call__(self, params: ParameterBag) -> ValidationResult:
        try:
            self.model.model_validate(dict(params))
        except ValidationError as exc:
            logger.debug(
                "%s rejected parameters with %d error(s)",
                self.model.__name__,
                exc.error_count(),
            )
            messages: dict[str, list[str]] = {}
            for error in exc.errors():
                key = ".".join(str(part) for part in error["loc"]) or BASE_ERROR_KEY
                messages.setdefault(key, []).append(error["msg"])
            return ValidationResult(messages)
        return ValidationResult.ok()
