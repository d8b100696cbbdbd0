"""Combinators for threading Results through a sequence of steps.

Two error channels stay separate here:

- Domain failures are ``Failure``/``Signal.ERROR`` values and flow through
  ``chain``, ``and_then_keep`` and ``or_else_keep`` as plain data.
- Misuse (a value that is not a Result where one is required) raises
  ``InvalidShapeError`` and is never folded into a ``Failure``.

``tuple_wrap`` is the only place where a raised exception becomes data.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING, Any, TypeVar, overload

from popcorn.config import Config, default_config
from popcorn.errors import invalid_shape
from popcorn.result import Failure, Result, Signal, Success, is_result

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")
U = TypeVar("U")

logger = logging.getLogger(__name__)

_ANY_RESULT = "Success, Failure, Signal.OK or Signal.ERROR"


def ok(value: T) -> Success[T]:
    """Wrap *value* in ``Success``. Handy as the last stage of a pipeline."""
    return Success(value)


def error(reason: T) -> Failure[T]:
    """Wrap *reason* (a message or a symbolic tag) in ``Failure`` unchanged."""
    return Failure(reason)


def _checked(value: Any, operation: str, expected: str) -> Result:
    if not is_result(value):
        raise invalid_shape(operation, value, expected=expected)
    return value


def ensure_is_result(value: Any) -> Result:
    """Return *value* unchanged if it is a Result, else raise ``InvalidShapeError``."""
    return _checked(value, "ensure_is_result", _ANY_RESULT)


def chain(result: Result, step: Callable[[Any], Result]) -> Result:
    """Feed the payload of a ``Success`` into *step*; pass failures through.

    ``step`` runs only for ``Success``; its return value must itself be a
    Result. ``Failure`` and ``Signal.ERROR`` come back untouched without
    calling ``step``. ``Signal.OK`` has no payload to feed forward and is
    rejected, as is anything that is not a Result.

    Example:
        >>> chain(ok([1, 2, 3]), lambda xs: ok(xs[0]))
        Success(value=1)
        >>> chain(error("invalid"), lambda v: ok(str(v)))
        Failure(reason='invalid')
    """
    match result:
        case Success(value):
            return _checked(step(value), "chain", f"step to return {_ANY_RESULT}")
        case Failure() | Signal.ERROR:
            return result
        case _:
            raise invalid_shape(
                "chain", result, expected="Success, Failure or Signal.ERROR"
            )


bind = chain


def maybe(value: T | None, step: Callable[[T], U]) -> U | None:
    """Apply *step* to *value* unless it is ``None``.

    The return value of ``step`` is passed back as-is; it need not be a
    Result.
    """
    if value is None:
        return None
    return step(value)


def _reason_from(exc: BaseException) -> Any:
    # Prefer an explicit ``message`` attribute (kept as-is, so symbolic tags
    # survive), then the exception text, then the exception class name.
    try:
        message = getattr(exc, "message", None)
        if message is not None:
            return message
        text = str(exc)
    except Exception:
        return type(exc).__name__
    return text if text else type(exc).__name__


def tuple_wrap(thunk: Callable[[], T], *, config: Config | None = None) -> Result:
    """Run *thunk* and convert its outcome into a Result.

    Returns ``Success(value)`` when the thunk returns normally and
    ``Failure(reason)`` when it raises one of ``config.catch``. A thunk that
    already returns a Result gets it back unchanged.

    Example:
        >>> tuple_wrap(lambda: 5 + 5)
        Success(value=10)
        >>> tuple_wrap(lambda: 1 / 0)
        Failure(reason='division by zero')
    """
    cfg = config if config is not None else default_config()
    try:
        value = thunk()
    except cfg.catch as exc:
        reason = _reason_from(exc)
        logger.log(
            cfg.capture_log_level,
            "Captured %s as Failure: %s",
            type(exc).__name__,
            reason,
            exc_info=cfg.log_tracebacks,
        )
        return Failure(reason)
    if is_result(value):
        return value
    return Success(value)


@overload
def wrap_errors(
    func: Callable[..., T], *, config: Config | None = None
) -> Callable[..., Result]: ...


@overload
def wrap_errors(
    func: None = None, *, config: Config | None = None
) -> Callable[[Callable[..., T]], Callable[..., Result]]: ...


def wrap_errors(
    func: Callable[..., T] | None = None, *, config: Config | None = None
) -> Any:
    """Decorator form of ``tuple_wrap``: every call returns a Result.

    Usable bare (``@wrap_errors``) or with options
    (``@wrap_errors(config=Config(catch=(ValueError,)))``).
    """

    def decorate(fn: Callable[..., T]) -> Callable[..., Result]:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Result:
            return tuple_wrap(lambda: fn(*args, **kwargs), config=config)

        return wrapper

    if func is None:
        return decorate
    return decorate(func)


def and_then_keep(first: Result, second: Result) -> Result:
    """Keep the first failure, otherwise the second operand.

    Both operands are already evaluated; this is a value-level ``and``.
    ``first`` must be ``Success`` or ``Failure`` and ``second`` any Result.
    """
    match first:
        case Success():
            return _checked(second, "and_then_keep", _ANY_RESULT)
        case Failure():
            _checked(second, "and_then_keep", _ANY_RESULT)
            return first
        case _:
            raise invalid_shape("and_then_keep", first, expected="Success or Failure")


def or_else_keep(first: Result, second: Result) -> Result:
    """Keep the first success, otherwise the second operand.

    Same operand rules as ``and_then_keep``.
    """
    match first:
        case Success():
            _checked(second, "or_else_keep", _ANY_RESULT)
            return first
        case Failure():
            return _checked(second, "or_else_keep", _ANY_RESULT)
        case _:
            raise invalid_shape("or_else_keep", first, expected="Success or Failure")


def identity(term: T) -> T:
    """Return *term* unchanged; a no-op stage for pipelines."""
    return term


id = identity  # noqa: A001
