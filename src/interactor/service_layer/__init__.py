"""Service layer for INTERACTOR.

Implements the pipeline every service runs through: the validation gate,
the short-circuiting sequencer, the per-call invocation and the outcome
dispatcher.

Dependency rule: may import `interactor.domain` and `interactor.interfaces`,
but not `interactor.adapters` or `interactor.entrypoints`.
"""
