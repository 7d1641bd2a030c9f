"""tupleresult: adapt tuple-style callback results into a two-state result.

Public API:
    - TupleResult: Adapter built from a ``(success, failure)`` pair
    - result_from_tuple(): Same rule, returning the native result directly
    - Success / Failure / Result: The native two-state result
    - completion_handler() / resolve(): Callback bridging helpers
"""

from __future__ import annotations

import logging

from tupleresult.callbacks import completion_handler, resolve
from tupleresult.errors import InvariantViolationError, TupleResultError
from tupleresult.result_primitives import Failure, Result, Success
from tupleresult.tuple_result import TupleResult, result_from_tuple

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("tupleresult")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("tupleresult").addHandler(logging.NullHandler())

__all__ = [
    "Failure",
    "InvariantViolationError",
    "Result",
    "Success",
    "TupleResult",
    "TupleResultError",
    "completion_handler",
    "resolve",
    "result_from_tuple",
]
