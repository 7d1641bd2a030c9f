"""Native two-state result.

``Success`` and ``Failure`` are the result type every adapter projects into.
Both variants share one small combinator surface so callers can chain
transformations without branching on the variant:

    Success(4).map(str)                          # Success(value="4")
    Success(4).flat_map(lambda n: Success(n + 1))  # Success(value=5)
    Failure(err).map(str)                        # Failure(error=err)
"""

from __future__ import annotations

from collections.abc import Callable
import dataclasses
import typing

TSuccess = typing.TypeVar("TSuccess")
TFailure = typing.TypeVar("TFailure", bound=Exception)


@dataclasses.dataclass(frozen=True, slots=True)
class Success[TSuccess]:
    """A successful result, carrying its payload."""

    value: TSuccess

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def map[U](self, transform: Callable[[TSuccess], U]) -> Success[U]:
        """Return a new success holding ``transform(value)``."""
        return Success(transform(self.value))

    def map_error(
        self, transform: Callable[[typing.Any], Exception]
    ) -> Success[TSuccess]:
        """Return self; there is no error to transform."""
        del transform
        return self

    def flat_map[U, E: Exception](
        self, transform: Callable[[TSuccess], Result[U, E]]
    ) -> Result[U, E]:
        """Return the result produced by ``transform``, without re-wrapping it."""
        return transform(self.value)

    def flat_map_error(
        self, transform: Callable[[typing.Any], Result[TSuccess, Exception]]
    ) -> Success[TSuccess]:
        """Return self; ``transform`` is never called."""
        del transform
        return self

    def unwrap_or_raise(self) -> TSuccess:
        """Return the success payload."""
        return self.value


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[TFailure: Exception]:
    """A failed result, carrying the error."""

    error: TFailure

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def map(self, transform: Callable[[typing.Any], typing.Any]) -> Failure[TFailure]:
        """Return self; there is no success value to transform."""
        del transform
        return self

    def map_error[E: Exception](self, transform: Callable[[TFailure], E]) -> Failure[E]:
        """Return a new failure holding ``transform(error)``."""
        return Failure(transform(self.error))

    def flat_map(
        self, transform: Callable[[typing.Any], Result[typing.Any, TFailure]]
    ) -> Failure[TFailure]:
        """Return self; ``transform`` is never called."""
        del transform
        return self

    def flat_map_error[T, E: Exception](
        self, transform: Callable[[TFailure], Result[T, E]]
    ) -> Result[T, E]:
        """Return the result produced by ``transform``, without re-wrapping it."""
        return transform(self.error)

    def unwrap_or_raise(self) -> typing.NoReturn:
        """Raise the carried error."""
        raise self.error


Result = Success[TSuccess] | Failure[TFailure]
