"""Bridging helpers for completion-callback APIs.

Legacy APIs usually hand their ``(success, failure)`` pair to a callback
rather than returning it. These helpers put a ``TupleResult`` on the other
side of that callback.
"""

from __future__ import annotations

from collections.abc import Callable
import functools
import logging
from typing import Any

from tupleresult.errors import InvariantViolationError
from tupleresult.tuple_result import TupleResult

__all__ = ["completion_handler", "resolve"]

logger = logging.getLogger(__name__)


def completion_handler[S, F: Exception, R](
    handler: Callable[[TupleResult[S, F]], R],
) -> Callable[[S | None, F | None], R]:
    """Wrap ``handler`` so it can be passed where a tuple-style callback is expected.

    The returned callback adapts its ``(success, failure)`` arguments into a
    ``TupleResult`` and forwards it to ``handler``. Usable as a decorator:

        @completion_handler
        def on_done(result: TupleResult[bytes, OSError]) -> None:
            ...

        legacy_fetch(url, on_done)
    """

    @functools.wraps(handler)
    def callback(success: S | None = None, failure: F | None = None) -> R:
        return handler(TupleResult(success, failure))

    return callback


def resolve[S, F: Exception](
    invoke: Callable[[Callable[[S | None, F | None], None]], Any],
) -> TupleResult[S, F]:
    """Run a synchronous callback-style call and return its adapted result.

    ``invoke`` receives the completion callback and must call it exactly once
    before returning:

        result = resolve(lambda done: legacy_parse(text, done))

    Raises:
        InvariantViolationError: The callback was never called, was called
            more than once, or was called with both sides ``None``.
    """
    captured: list[TupleResult[S, F]] = []

    def callback(success: S | None = None, failure: F | None = None) -> None:
        if captured:
            raise InvariantViolationError(
                "completion callback invoked more than once",
                hint="Tuple-style APIs must report their outcome exactly once",
            )
        captured.append(TupleResult(success, failure))

    invoke(callback)
    if not captured:
        raise InvariantViolationError(
            "completion callback was never invoked",
            hint="resolve() only supports APIs that complete before returning",
        )
    logger.debug("Resolved tuple-style call to %s", type(captured[0].value).__name__)
    return captured[0]
