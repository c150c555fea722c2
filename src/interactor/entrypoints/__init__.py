"""Entrypoints (inbound adapters) for INTERACTOR.

Expose services to the outside world. Parse inputs, call services through
`interactor.bootstrap`, and present their outcomes.

Dependency rule: may import `interactor.bootstrap` and
`interactor.service_layer`; avoid importing `interactor.adapters` directly.
"""
