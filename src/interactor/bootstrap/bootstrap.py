"""Resolve a `Service` from an import target."""

from __future__ import annotations

import importlib
import logging

from interactor.service_layer.service import Service

logger = logging.getLogger(__name__)


class ServiceTargetError(LookupError):
    """Raised when an import target does not name a Service."""

    def __init__(self, target: str, reason: str) -> None:
        super().__init__(f"Cannot load service {target!r}: {reason}")
        self.target = target
        self.reason = reason


def load_service(target: str) -> Service:
    """Import and return the service named by ``target``.

    Args:
        target: ``"package.module:attribute"``. The attribute may be dotted
            (``"pkg.mod:Namespace.service"``).

    Raises:
        ServiceTargetError: If the target is malformed, cannot be imported,
            or does not resolve to a `Service`.
    """

    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise ServiceTargetError(target, "expected MODULE:ATTRIBUTE")

    try:
        obj: object = importlib.import_module(module_name)
    except ImportError as e:
        raise ServiceTargetError(target, f"module {module_name!r} not found") from e

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise ServiceTargetError(target, f"no attribute {part!r}") from e

    if not isinstance(obj, Service):
        raise ServiceTargetError(
            target, f"{type(obj).__name__} is not a Service"
        )

    logger.debug("Loaded service %s from %s", obj.name, target)
    return obj
