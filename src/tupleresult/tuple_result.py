"""Adapter from tuple-style callback results to a two-state result.

Legacy callback APIs report their outcome as a pair of optional values,
``(success, failure)``, with at most one side populated. ``TupleResult``
normalizes such a pair once, at construction, into exactly one of
``Success`` or ``Failure``:

    TupleResult(1, None).value        # Success(value=1)
    TupleResult(None, err).value      # Failure(error=err)
    TupleResult(1, err).value         # Failure(error=err), failure wins

A pair with neither side populated is a bug in the producing API and raises
``InvariantViolationError`` instead of producing a value.
"""

from __future__ import annotations

from collections.abc import Callable
import dataclasses
import logging
import os
import typing

from tupleresult._dev_flags import abort_on_invariant_enabled, warn_dual_input_enabled
from tupleresult.errors import InvariantViolationError
from tupleresult.result_primitives import Failure, Result, Success

__all__ = ["TupleResult", "result_from_tuple"]

logger = logging.getLogger(__name__)

_MISSING_BOTH = "success or failure must be not None"


def result_from_tuple[S, F: Exception](
    success: S | None, failure: F | None
) -> Result[S, F]:
    """Build a native result from a ``(success, failure)`` pair.

    Failure takes precedence when both sides are populated. Only ``None``
    counts as absent, so falsy payloads such as ``0`` or ``""`` are kept.

    Raises:
        InvariantViolationError: Both sides are ``None``. When
            ``TUPLERESULT_ABORT_ON_INVARIANT=1`` the process is aborted instead.
    """
    if failure is not None:
        if success is not None:
            _report_discarded_success(success, failure)
        return Failure(failure)
    if success is not None:
        return Success(success)
    _violate(_MISSING_BOTH)


def _report_discarded_success(success: object, failure: Exception) -> None:
    level = logging.WARNING if warn_dual_input_enabled() else logging.DEBUG
    logger.log(
        level,
        "Failure %s takes precedence; discarding success value of type %s",
        type(failure).__name__,
        type(success).__name__,
    )


def _violate(reason: str) -> typing.NoReturn:
    if abort_on_invariant_enabled():
        logger.critical("Tuple result invariant violated: %s; aborting", reason)
        os.abort()
    raise InvariantViolationError(
        reason,
        hint="The producing API must populate exactly one side of the pair",
    )


@dataclasses.dataclass(frozen=True, slots=True, init=False)
class TupleResult[S, F: Exception]:
    """A result built from a ``(success, failure)`` pair.

    Holds exactly one native variant in ``value``. Equality, hashing and
    pattern matching all go through that projection:

        match TupleResult(payload, error):
            case TupleResult(Success(v)):
                ...
            case TupleResult(Failure(e)):
                ...
    """

    #: Lossless projection into the native ``Success | Failure`` result.
    value: Result[S, F]

    def __init__(self, success: S | None = None, failure: F | None = None) -> None:
        object.__setattr__(self, "value", result_from_tuple(success, failure))

    @classmethod
    def from_pair(cls, pair: tuple[S | None, F | None]) -> TupleResult[S, F]:
        """Adapt a ``(value, error)`` pair returned by a legacy API."""
        if not isinstance(pair, (tuple, list)) or len(pair) != 2:
            raise TypeError(
                f"expected a (success, failure) pair, got {type(pair).__name__}"
            )
        success, failure = pair
        return cls(success, failure)

    def is_success(self) -> bool:
        return self.value.is_success()

    def is_failure(self) -> bool:
        return self.value.is_failure()

    # --- Forwarding transformations ---

    def map[U](self, transform: Callable[[S], U]) -> Result[U, F]:
        """Map the success value; failures pass through unchanged."""
        return self.value.map(transform)

    def map_error[E: Exception](self, transform: Callable[[F], E]) -> Result[S, E]:
        """Map the failure value; successes pass through unchanged."""
        return self.value.map_error(transform)

    def flat_map[U](self, transform: Callable[[S], Result[U, F]]) -> Result[U, F]:
        """Chain a result-returning step on the success value."""
        return self.value.flat_map(transform)

    def flat_map_error[E: Exception](
        self, transform: Callable[[F], Result[S, E]]
    ) -> Result[S, E]:
        """Chain a result-returning step on the failure value."""
        return self.value.flat_map_error(transform)

    def unwrap_or_raise(self) -> S:
        """Return the success value, or raise the carried failure."""
        return self.value.unwrap_or_raise()
