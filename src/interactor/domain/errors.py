"""Programming-error definitions.

Expected failures never raise; they travel as `Failure` outcomes. The errors
below signal that a service author broke the contract (unwrapping the wrong
variant, a step returning something that is not an outcome, a service with
nothing to run). They abort the invocation and are never turned into a
`Failure`.
"""

from collections.abc import Hashable
from typing import Any

# ============================================================================
#                           General errors
# ============================================================================


class InteractorError(Exception):
    """Base class for all interactor programming errors."""


class InvariantViolation(InteractorError):
    """Raised when a caller breaks an invariant of an outcome or handler set."""


class DuplicateHandlerError(InvariantViolation):
    """Raised when a handler slot of a HandlerSet is registered twice."""

    def __init__(self, slot: str, tag: Hashable | None = None) -> None:
        if tag is None:
            message = f"A {slot} handler is already registered."
        else:
            message = f"A {slot} handler is already registered for tag {tag!r}."
        super().__init__(message)
        self.slot = slot
        self.tag = tag


# ============================================================================
#                           Sequencing errors
# ============================================================================


class NoOutcomeProduced(InteractorError):
    """Raised when a service or sequencer has nothing that produces an outcome."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} produced no outcome: at least one step is required.")
        self.name = name


class InvalidStepResult(InteractorError):
    """Raised when a step returns something other than a Success or Failure."""

    def __init__(self, step_name: str, result: Any) -> None:
        super().__init__(
            f"Step {step_name} returned {type(result).__name__}, "
            "expected a Success or Failure outcome."
        )
        self.step_name = step_name
        self.result = result
