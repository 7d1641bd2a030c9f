"""Test helpers (small, reusable doubles).

Keep this file tiny and purpose-built: one equatable error type and one
tuple-style API double cover every suite.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
import enum
from typing import Any


class StubError(Exception):
    """Equatable domain error used as the failure payload in tests."""

    def __init__(self, code: str = "some_error") -> None:
        super().__init__(code)
        self.code = code

    def __eq__(self, other: object) -> bool:
        return isinstance(other, StubError) and other.code == self.code

    def __hash__(self) -> int:
        return hash(("StubError", self.code))


class Outcome(enum.Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    BOTH = "both"
    NEITHER = "neither"


@dataclass
class FakeLegacyAPI:
    """Tuple-style API double.

    Invokes its completion callback with a pair chosen by ``outcome`` and
    records every pair it delivered.
    """

    outcome: Outcome = Outcome.SUCCESS
    payload: Any = 1
    error: Exception = field(default_factory=StubError)
    delivered: list[tuple[Any, Any]] = field(default_factory=list)

    def fetch(self, completion: Callable[[Any, Any], Any]) -> Any:
        pair = {
            Outcome.SUCCESS: (self.payload, None),
            Outcome.FAILURE: (None, self.error),
            Outcome.BOTH: (self.payload, self.error),
            Outcome.NEITHER: (None, None),
        }[self.outcome]
        self.delivered.append(pair)
        return completion(*pair)
