"""Result shapes threaded through the combinators.

A Result is exactly one of:

- ``Success(value)``: a success carrying a payload.
- ``Failure(reason)``: a failure carrying a message or a symbolic tag.
- ``Signal.OK``: a payload-less success, valid as a Result but not as
  input to ``chain``.
- ``Signal.ERROR``: a payload-less failure marker.

The shapes double as operator sugar: ``>>`` chains, ``&`` keeps the first
failure and ``|`` keeps the first success.
"""

from __future__ import annotations

import dataclasses
from enum import Enum
import typing

if typing.TYPE_CHECKING:
    from collections.abc import Callable

TSuccess = typing.TypeVar("TSuccess")
TReason = typing.TypeVar("TReason")


@dataclasses.dataclass(frozen=True, slots=True)
class Success(typing.Generic[TSuccess]):
    """A successful outcome carrying ``value``."""

    value: TSuccess

    def __rshift__(self, step: Callable[[TSuccess], Result]) -> Result:
        from popcorn.combinators import chain

        return chain(self, step)

    def __and__(self, other: Result) -> Result:
        from popcorn.combinators import and_then_keep

        return and_then_keep(self, other)

    def __or__(self, other: Result) -> Result:
        from popcorn.combinators import or_else_keep

        return or_else_keep(self, other)


@dataclasses.dataclass(frozen=True, slots=True)
class Failure(typing.Generic[TReason]):
    """A failed outcome carrying ``reason`` (a message or a symbolic tag)."""

    reason: TReason

    def __rshift__(self, step: Callable[[typing.Any], Result]) -> Result:
        from popcorn.combinators import chain

        return chain(self, step)

    def __and__(self, other: Result) -> Result:
        from popcorn.combinators import and_then_keep

        return and_then_keep(self, other)

    def __or__(self, other: Result) -> Result:
        from popcorn.combinators import or_else_keep

        return or_else_keep(self, other)


class Signal(Enum):
    """Payload-less outcomes.

    ``OK`` only says "it worked"; there is no value to hand to a next step,
    so chaining from it is a usage error. ``ERROR`` short-circuits a chain
    exactly like a ``Failure``.
    """

    OK = "ok"
    ERROR = "error"

    def __rshift__(self, step: Callable[[typing.Any], Result]) -> Result:
        from popcorn.combinators import chain

        return chain(self, step)

    def __and__(self, other: Result) -> Result:
        from popcorn.combinators import and_then_keep

        return and_then_keep(self, other)

    def __or__(self, other: Result) -> Result:
        from popcorn.combinators import or_else_keep

        return or_else_keep(self, other)


PLAIN_OK = Signal.OK
PLAIN_ERROR = Signal.ERROR

Result = Success[typing.Any] | Failure[typing.Any] | Signal

_RESULT_TYPES = (Success, Failure, Signal)


def is_result(value: object) -> bool:
    """Return True if *value* is one of the four Result shapes."""
    return isinstance(value, _RESULT_TYPES)
