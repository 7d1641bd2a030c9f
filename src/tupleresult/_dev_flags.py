"""Internal helpers for development-time feature flags.

Both flags are read at call time so tests and long-running processes can
toggle them through the environment.
"""

from __future__ import annotations

import os

__all__ = ["abort_on_invariant_enabled", "warn_dual_input_enabled"]


def abort_on_invariant_enabled(*, override: bool | None = None) -> bool:
    """Return True when invariant violations should terminate the process.

    - If ``override`` is provided, it takes precedence.
    - Otherwise, returns True when the environment variable
      ``TUPLERESULT_ABORT_ON_INVARIANT`` is exactly ``"1"``.
    """
    if override is not None:
        return bool(override)
    return os.getenv("TUPLERESULT_ABORT_ON_INVARIANT") == "1"


def warn_dual_input_enabled(*, override: bool | None = None) -> bool:
    """Return True when a discarded success value should be logged as a warning.

    Semantics:
    - If ``override`` is provided, it takes precedence.
    - Otherwise, returns True when the environment variable
      ``TUPLERESULT_WARN_DUAL_INPUT`` is exactly ``"1"``.
    """
    if override is not None:
        return bool(override)
    return os.getenv("TUPLERESULT_WARN_DUAL_INPUT") == "1"
