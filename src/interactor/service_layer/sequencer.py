"""Short-circuiting step evaluation.

A step is a callable ``(ParameterBag) -> Outcome``. The sequencer runs steps in
order, handing each the same parameter bag, and stops at the first Failure.
Service authors can therefore write every step as if the previous ones always
succeeded.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from interactor.domain.errors import InvalidStepResult, NoOutcomeProduced
from interactor.domain.outcome import Outcome
from interactor.domain.parameters import ParameterBag
from interactor.utils.naming import callable_name

logger = logging.getLogger(__name__)

type Step = Callable[[ParameterBag], Outcome[Any, Any]]


class Sequencer:
    """Evaluate an ordered list of steps with early exit on failure.

    Args:
        steps: The steps to run, in order.
        name: Label used in log lines and in `NoOutcomeProduced`.

    Note:
        Earlier Success values are discarded, not merged. The overall result
        is the Outcome of the last step.
    """

    def __init__(self, steps: Iterable[Step], name: str = "sequencer") -> None:
        self.steps: tuple[Step, ...] = tuple(steps)
        self.name = name

    def __repr__(self) -> str:
        names = ", ".join(callable_name(step) for step in self.steps)
        return f"Sequencer({self.name!r}, steps=[{names}])"

    def then(self, step: Step) -> Sequencer:
        """Return a new sequencer with ``step`` appended."""
        return Sequencer((*self.steps, step), name=self.name)

    def run(
        self, params: ParameterBag, seed: Outcome[Any, Any] | None = None
    ) -> Outcome[Any, Any]:
        """Run the steps against ``params``.

        Args:
            params: The parameter bag handed to every step.
            seed: An outcome evaluated before the first step. A Failure seed is
                returned unchanged and no step runs.

        Returns:
            The first Failure produced, or the last step's Outcome if every
            step succeeded.

        Raises:
            NoOutcomeProduced: If there is neither a seed nor any step.
            InvalidStepResult: If a step returns something that is not an Outcome.
        """

        outcome = seed
        if outcome is not None:
            _check_outcome("seed", outcome)
            if outcome.is_failure():
                logger.debug("%s: seed failed; skipping all steps", self.name)
                return outcome

        for index, step in enumerate(self.steps, start=1):
            step_name = callable_name(step)
            logger.debug("%s: running step %d %s", self.name, index, step_name)
            outcome = step(params)
            _check_outcome(step_name, outcome)
            if outcome.is_failure():
                logger.debug(
                    "%s: step %d %s failed; short-circuiting", self.name, index, step_name
                )
                return outcome

        if outcome is None:
            raise NoOutcomeProduced(self.name)
        return outcome


def _check_outcome(step_name: str, result: object) -> None:
    if not isinstance(result, Outcome):
        raise InvalidStepResult(step_name, result)
