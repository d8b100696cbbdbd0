"""Exception hierarchy for Popcorn.

Domain failures travel as ``Failure`` values. The exceptions here are for
defects in how the library is used and are never turned into ``Failure``.
"""

from __future__ import annotations


class PopcornError(Exception):
    """Base exception for all Popcorn errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class InvalidShapeError(PopcornError, TypeError):
    """A value passed where a Result is expected matches no Result shape."""

    def __init__(
        self,
        message: str,
        *,
        value: object = None,
        operation: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.value = value
        self.operation = operation


class ConfigurationError(PopcornError, ValueError):
    """Configuration validation or resolution failed."""


def _describe(value: object) -> str:
    """Short, bounded description of an offending value for error messages."""
    try:
        text = repr(value)
    except Exception:
        text = object.__repr__(value)
    if len(text) > 80:
        text = text[:77] + "..."
    return f"{type(value).__name__} {text}"


def invalid_shape(operation: str, value: object, *, expected: str) -> InvalidShapeError:
    """Build the Invalid-Shape defect raised by *operation*."""
    return InvalidShapeError(
        f"{operation}() expected {expected}, got {_describe(value)}",
        value=value,
        operation=operation,
        hint="Wrap plain values with ok()/error() before combining them.",
    )
