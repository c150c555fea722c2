"""INTERACTOR

A small composition convention for operations that may fail. A service runs
an optional validator and then an ordered list of fallible steps,
short-circuiting on the first failure, and exposes its outcome either
directly or through registered success/failure handlers.
"""

from interactor.domain.errors import (
    DuplicateHandlerError,
    InteractorError,
    InvalidStepResult,
    InvariantViolation,
    NoOutcomeProduced,
)
from interactor.domain.outcome import Failure, Outcome, Success, failure, success
from interactor.domain.parameters import ParameterBag
from interactor.service_layer.dispatcher import HandlerSet, dispatch
from interactor.service_layer.sequencer import Sequencer
from interactor.service_layer.service import Service, ServiceBuilder
from interactor.service_layer.validation import ValidationGate

__all__ = [
    "DuplicateHandlerError",
    "Failure",
    "HandlerSet",
    "InteractorError",
    "InvalidStepResult",
    "InvariantViolation",
    "NoOutcomeProduced",
    "Outcome",
    "ParameterBag",
    "Sequencer",
    "Service",
    "ServiceBuilder",
    "Success",
    "ValidationGate",
    "__version__",
    "dispatch",
    "failure",
    "success",
]
__version__ = "0.1.0"
