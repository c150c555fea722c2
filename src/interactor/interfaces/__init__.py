"""Interfaces (application boundary) for INTERACTOR.

Defines the framework-free contracts that the service layer consumes and
adapters implement, such as the validator capability.

Dependency rule: this package may import `interactor.domain` only. It may be
imported by `interactor.service_layer`, `interactor.adapters` and
`interactor.bootstrap`.
"""

from .validator import ValidationReport, Validator

__all__ = ["ValidationReport", "Validator"]
