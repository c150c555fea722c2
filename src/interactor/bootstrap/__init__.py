"""Bootstrap (composition root) for INTERACTOR.

Resolves services named by import target (``package.module:attribute``) so
that entrypoints can run them without importing them directly.

Import rules:
- Entry points import *this* package.
- This package may import `interactor.service_layer` and `interactor.domain`.
- Inner layers must not import `interactor.bootstrap`.
"""

from .bootstrap import ServiceTargetError, load_service

__all__ = ["ServiceTargetError", "load_service"]
