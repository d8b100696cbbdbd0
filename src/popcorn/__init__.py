"""Popcorn: combinators for threading success/failure outcomes.

Public API:
    - ok() / error(): Wrap a value or a failure reason
    - chain() (alias bind, operator ``>>``): Run the next step on success only
    - maybe(): Run a step unless the value is None
    - tuple_wrap() / wrap_errors(): Turn raised exceptions into Failure
    - and_then_keep() / or_else_keep() (operators ``&`` / ``|``)
    - Success, Failure, Signal: The Result shapes
"""

from __future__ import annotations

import logging

from popcorn.combinators import (
    and_then_keep,
    bind,
    chain,
    ensure_is_result,
    error,
    id,  # noqa: A004
    identity,
    maybe,
    ok,
    or_else_keep,
    tuple_wrap,
    wrap_errors,
)
from popcorn.config import Config
from popcorn.errors import ConfigurationError, InvalidShapeError, PopcornError
from popcorn.result import (
    PLAIN_ERROR,
    PLAIN_OK,
    Failure,
    Result,
    Signal,
    Success,
    is_result,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("popcorn-result")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("popcorn").addHandler(logging.NullHandler())

# ``id`` is importable by name but left out of __all__ so that star imports
# do not shadow the builtin.
__all__ = [
    "PLAIN_ERROR",
    "PLAIN_OK",
    "Config",
    "ConfigurationError",
    "Failure",
    "InvalidShapeError",
    "PopcornError",
    "Result",
    "Signal",
    "Success",
    "and_then_keep",
    "bind",
    "chain",
    "ensure_is_result",
    "error",
    "identity",
    "is_result",
    "maybe",
    "ok",
    "or_else_keep",
    "tuple_wrap",
    "wrap_errors",
]
