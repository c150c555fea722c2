"""Domain layer for INTERACTOR.

Contains the value types every service works with: the Success/Failure
outcome, the immutable parameter bag, and the programming-error hierarchy.
This package is deliberately free of I/O.

Dependency rule: do not import from `interactor.adapters`,
`interactor.service_layer` or `interactor.entrypoints`.
"""
