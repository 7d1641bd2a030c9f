"""Exception hierarchy for tupleresult."""

from __future__ import annotations


class TupleResultError(Exception):
    """Base exception for all tupleresult errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        """Return the message followed by the hint, when one is set."""
        msg = super().__str__()
        return f"{msg}. {self.hint}" if self.hint else msg


class InvariantViolationError(TupleResultError, AssertionError):
    """Raised when a caller breaks the tuple-style result protocol.

    Signals impossible states that indicate a bug upstream, e.g. a completion
    callback invoked with neither a success value nor a failure. This is not a
    domain failure: it is never wrapped in a ``Failure`` and should not be
    caught by application code.
    """
