"""Configuration: frozen Config for the exception-to-Result boundary."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache
import logging
import os

from dotenv import load_dotenv

from popcorn.errors import ConfigurationError

load_dotenv()

_LOG_LEVEL_ENV_VAR = "POPCORN_CAPTURE_LOG_LEVEL"
_TRACEBACKS_ENV_VAR = "POPCORN_LOG_TRACEBACKS"

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True)
class Config:
    """Immutable settings for ``tuple_wrap`` and ``wrap_errors``.

    Only exceptions matching ``catch`` are converted into ``Failure``;
    anything else propagates. Log settings are auto-resolved from
    ``POPCORN_CAPTURE_LOG_LEVEL`` and ``POPCORN_LOG_TRACEBACKS`` when *None*.

    Example:
        config = Config(catch=(ValueError, KeyError))
        result = tuple_wrap(lambda: int("x"), config=config)
    """

    catch: tuple[type[BaseException], ...] = (Exception,)
    #: Level used to log captured exceptions; DEBUG when unset.
    capture_log_level: int | str | None = None
    log_tracebacks: bool | None = None

    def __post_init__(self) -> None:
        """Resolve env-backed fields and validate."""
        if isinstance(self.catch, type):
            object.__setattr__(self, "catch", (self.catch,))
        else:
            object.__setattr__(self, "catch", tuple(self.catch))
        if not self.catch:
            raise ConfigurationError(
                "catch must name at least one exception type",
                hint="Use catch=(Exception,) to capture every ordinary error.",
            )
        for exc_type in self.catch:
            if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
                raise ConfigurationError(
                    f"catch entries must be exception classes, got {exc_type!r}",
                    hint="Pass classes such as ValueError, not instances or names.",
                )

        level = self.capture_log_level
        if level is None:
            level = os.environ.get(_LOG_LEVEL_ENV_VAR) or logging.DEBUG
        object.__setattr__(self, "capture_log_level", _resolve_level(level))

        if self.log_tracebacks is None:
            raw = os.environ.get(_TRACEBACKS_ENV_VAR, "")
            object.__setattr__(self, "log_tracebacks", _parse_bool(raw))


def _resolve_level(level: int | str) -> int:
    if isinstance(level, bool):
        raise ConfigurationError(
            f"capture_log_level must be a level name or number, got {level!r}",
            hint="Use a logging level such as 'DEBUG' or 10.",
        )
    if isinstance(level, int):
        return level
    text = str(level).strip()
    if text.isdigit():
        return int(text)
    resolved = logging.getLevelName(text.upper())
    if not isinstance(resolved, int):
        raise ConfigurationError(
            f"Unknown log level: {level!r}",
            hint=f"Set {_LOG_LEVEL_ENV_VAR} to DEBUG, INFO, WARNING, ERROR or a number.",
        )
    return resolved


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigurationError(
        f"Invalid boolean for {_TRACEBACKS_ENV_VAR}: {raw!r}",
        hint="Use one of 1/0, true/false, yes/no, on/off.",
    )


@cache
def default_config() -> Config:
    """Process-wide Config used when callers pass none.

    Resolved once; call ``default_config.cache_clear()`` after changing the
    environment.
    """
    return Config()
