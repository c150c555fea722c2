"""Outcome dispatch to registered handlers.

Callers register at most one success handler, any number of tagged failure
handlers and at most one generic failure handler, then hand an outcome to
`dispatch`. Exactly one applicable handler runs, chosen in this order:

1. Success -> the success handler.
2. Failure with a tag -> the handler registered for that exact tag.
3. Failure -> the generic failure handler.

If nothing applies, dispatch does nothing. Register a generic failure handler
to make dispatch exhaustive for failures.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from typing import Any, TypeVar

from interactor.domain.errors import DuplicateHandlerError, InvariantViolation
from interactor.domain.outcome import Failure, Outcome, Success
from interactor.utils.naming import callable_name

logger = logging.getLogger(__name__)

H = TypeVar("H", bound=Callable[[Any], Any])


class HandlerSet:
    """Per-dispatch registry of outcome handlers.

    Registration methods return the handler, so they double as decorators::

        handlers = HandlerSet()

        @handlers.on_success
        def created(post): ...

        @handlers.on_failure(tag="inappropriate_title")
        def rejected(reason): ...

    Handlers may also be passed to the constructor.

    Raises:
        DuplicateHandlerError: When a slot is registered twice.
        InvariantViolation: When ``tagged`` has a ``None`` key. ``None`` means
            "untagged"; pass that handler as ``failure``.
    """

    def __init__(
        self,
        success: Callable[[Any], Any] | None = None,
        failure: Callable[[Any], Any] | None = None,
        tagged: dict[Hashable, Callable[[Any], Any]] | None = None,
    ) -> None:
        if tagged and None in tagged:
            raise InvariantViolation(
                "A tagged failure handler needs a tag; pass the generic handler as failure=."
            )
        self._success = success
        self._failure = failure
        self._tagged: dict[Hashable, Callable[[Any], Any]] = dict(tagged or {})

    def __repr__(self) -> str:
        return (
            f"HandlerSet(success={self._success is not None}, "
            f"failure={self._failure is not None}, tags={list(self._tagged)})"
        )

    @property
    def success_handler(self) -> Callable[[Any], Any] | None:
        """The registered success handler, if any."""
        return self._success

    @property
    def failure_handler(self) -> Callable[[Any], Any] | None:
        """The registered generic failure handler, if any."""
        return self._failure

    def tagged_handler(self, tag: Hashable) -> Callable[[Any], Any] | None:
        """Return the handler registered for exactly ``tag``, if any."""
        return self._tagged.get(tag)

    def on_success(self, handler: H) -> H:
        """Register the success handler."""
        if self._success is not None:
            raise DuplicateHandlerError("success")
        self._success = handler
        return handler

    def on_failure(
        self, handler: H | None = None, *, tag: Hashable | None = None
    ) -> Any:
        """Register a failure handler, generic or for one ``tag``.

        Usable as ``handlers.on_failure(fn)``, ``handlers.on_failure(fn, tag=...)``,
        ``@handlers.on_failure`` or ``@handlers.on_failure(tag=...)``.
        """

        def register(fn: H) -> H:
            if tag is None:
                if self._failure is not None:
                    raise DuplicateHandlerError("failure")
                self._failure = fn
            else:
                if tag in self._tagged:
                    raise DuplicateHandlerError("failure", tag)
                self._tagged[tag] = fn
            return fn

        if handler is None:
            return register
        return register(handler)

    def select(self, outcome: Outcome[Any, Any]) -> tuple[Callable[[Any], Any], Any] | None:
        """Return the applicable handler and its argument, or None.

        Raises:
            InvariantViolation: If ``outcome`` is not an Outcome.
        """
        match outcome:
            case Success(value):
                if self._success is not None:
                    return self._success, value
            case Failure(error, tag):
                if tag is not None and (handler := self._tagged.get(tag)) is not None:
                    return handler, error
                if self._failure is not None:
                    return self._failure, error
            case _:
                raise InvariantViolation(
                    f"Cannot dispatch {type(outcome).__name__}: expected an outcome."
                )
        return None


def dispatch(outcome: Outcome[Any, Any], handlers: HandlerSet) -> None:
    """Invoke the single handler in ``handlers`` that applies to ``outcome``.

    Args:
        outcome: The outcome to route.
        handlers: The caller's registered handlers.

    Raises:
        InvariantViolation: If ``outcome`` is not an Outcome.
        Exception: Whatever the selected handler raises.
    """

    if (selected := handlers.select(outcome)) is None:
        logger.debug("No handler registered for %r; nothing dispatched", outcome)
        return

    handler, argument = selected
    handler_name = callable_name(handler)
    logger.debug("Dispatching %r to handler %s", outcome, handler_name)
    try:
        handler(argument)
    except Exception:  # pylint: disable=broad-except
        logger.exception("Exception in handler %s for %r", handler_name, outcome)
        raise
