"""Services: an optional validator plus an ordered list of steps.

A `Service` is an immutable descriptor assembled explicitly, either with the
constructor or with `ServiceBuilder`::

    create_post = (
        ServiceBuilder("create_post")
        .validate_with(post_validator)
        .step(check_title)
        .step(save_post)
        .build()
    )

    outcome = create_post.call({"title": "Hi", "body": "There"})

Every call creates a fresh `Invocation` that walks the pipeline
``validate -> execute`` and is discarded once the outcome is known.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, overload

from interactor.domain.errors import InvariantViolation, NoOutcomeProduced
from interactor.domain.parameters import ParameterBag

from .dispatcher import HandlerSet, dispatch
from .sequencer import Sequencer, Step
from .validation import ValidationGate

if TYPE_CHECKING:
    from interactor.domain.outcome import Outcome
    from interactor.interfaces.validator import Validator

logger = logging.getLogger(__name__)


# ============================================================================
#                               Invocation
# ============================================================================


class InvocationState(enum.Enum):
    """States an invocation passes through."""

    START = "start"
    VALIDATING = "validating"
    VALIDATION_FAILED = "validation_failed"
    VALIDATED = "validated"
    EXECUTING = "executing"
    STEP_FAILED = "step_failed"
    ALL_STEPS_SUCCEEDED = "all_steps_succeeded"

    @property
    def is_terminal(self) -> bool:
        """True for the states that carry the final outcome."""
        return self in _TERMINAL_STATES


_TERMINAL_STATES = frozenset(
    {
        InvocationState.VALIDATION_FAILED,
        InvocationState.STEP_FAILED,
        InvocationState.ALL_STEPS_SUCCEEDED,
    }
)

_TRANSITIONS: dict[InvocationState, frozenset[InvocationState]] = {
    InvocationState.START: frozenset({InvocationState.VALIDATING}),
    InvocationState.VALIDATING: frozenset(
        {InvocationState.VALIDATION_FAILED, InvocationState.VALIDATED}
    ),
    InvocationState.VALIDATED: frozenset({InvocationState.EXECUTING}),
    InvocationState.EXECUTING: frozenset(
        {InvocationState.STEP_FAILED, InvocationState.ALL_STEPS_SUCCEEDED}
    ),
}


class Invocation:
    """A single run of a service against one parameter bag.

    Not reusable: `run` may be called once. The final outcome and the path
    taken are kept on the instance for inspection.
    """

    def __init__(self, service: Service, params: ParameterBag) -> None:
        self.service = service
        self.params = params
        self.state = InvocationState.START
        self.history: list[InvocationState] = [InvocationState.START]
        self.outcome: Outcome[Any, Any] | None = None

    def __repr__(self) -> str:
        return f"Invocation({self.service.name!r}, state={self.state.value})"

    def _transition(self, new_state: InvocationState) -> None:
        if new_state not in _TRANSITIONS.get(self.state, frozenset()):
            raise InvariantViolation(
                f"Invocation of {self.service.name} cannot move from "
                f"{self.state.value} to {new_state.value}."
            )
        logger.debug(
            "%s: %s -> %s", self.service.name, self.state.value, new_state.value
        )
        self.state = new_state
        self.history.append(new_state)

    def run(self) -> Outcome[Any, Any]:
        """Validate the parameters, then run the service's steps.

        Returns:
            The terminal outcome.
        """

        self._transition(InvocationState.VALIDATING)
        gate_outcome = ValidationGate.run(self.service, self.params)
        if gate_outcome.is_failure():
            self._transition(InvocationState.VALIDATION_FAILED)
        else:
            self._transition(InvocationState.VALIDATED)
            self._transition(InvocationState.EXECUTING)

        # The gate outcome seeds the sequencer: a validation failure
        # short-circuits before the first step.
        outcome = self.service.sequencer.run(self.params, seed=gate_outcome)

        if self.state is InvocationState.EXECUTING:
            self._transition(
                InvocationState.STEP_FAILED
                if outcome.is_failure()
                else InvocationState.ALL_STEPS_SUCCEEDED
            )
        self.outcome = outcome
        return outcome


# ============================================================================
#                               Service
# ============================================================================


@dataclass(frozen=True)
class Service:
    """An optional validator and a non-empty, ordered list of steps.

    Args:
        name: Identifies the service in logs and errors.
        steps: The steps run after validation, in order.
        validator: Optional capability checked before any step runs.

    Raises:
        NoOutcomeProduced: If ``steps`` is empty.
    """

    name: str
    steps: tuple[Step, ...]
    validator: Validator | None = None
    sequencer: Sequencer = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        steps = tuple(self.steps)
        if not steps:
            raise NoOutcomeProduced(self.name)
        object.__setattr__(self, "steps", steps)
        object.__setattr__(self, "sequencer", Sequencer(steps, name=self.name))

    def execute(self, params: Mapping[str, Any] | None) -> Outcome[Any, Any]:
        """Run validation and the steps; return the outcome."""
        return Invocation(self, ParameterBag.coerce(params)).run()

    @overload
    def call(self, params: Mapping[str, Any] | None) -> Outcome[Any, Any]: ...
    @overload
    def call(self, params: Mapping[str, Any] | None, handlers: HandlerSet) -> None: ...
    def call(
        self, params: Mapping[str, Any] | None, handlers: HandlerSet | None = None
    ) -> Outcome[Any, Any] | None:
        """Execute the service.

        Without ``handlers`` the outcome is returned (direct-result mode).
        With ``handlers`` the outcome is dispatched and nothing is returned.
        """
        outcome = self.execute(params)
        if handlers is None:
            return outcome
        dispatch(outcome, handlers)
        return None

    __call__ = call


class ServiceBuilder:
    """Fluent assembly of a `Service`."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._steps: list[Step] = []
        self._validator: Validator | None = None

    def validate_with(self, validator: Validator) -> ServiceBuilder:
        """Set the validator capability."""
        if self._validator is not None:
            raise InvariantViolation(f"{self.name} already has a validator.")
        self._validator = validator
        return self

    def step(self, *steps: Step) -> ServiceBuilder:
        """Append one or more steps, in order."""
        self._steps.extend(steps)
        return self

    def build(self) -> Service:
        """Return the assembled service.

        Raises:
            NoOutcomeProduced: If no step was added.
        """
        return Service(self.name, tuple(self._steps), validator=self._validator)
