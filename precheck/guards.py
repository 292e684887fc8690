"""Guard functions called at the top of a routine to validate its arguments.

Every guard either returns the checked value unchanged (the same object) or
raises :class:`InvalidArgument`. Failures are logged at DEBUG before raising,
including refusals and template errors raised by helpers.
"""
from __future__ import annotations

from types import TracebackType
from typing import TypeVar

from precheck.emptiness import is_null_or_empty
from precheck.errors import InvalidArgument
from precheck.logging import get_logger
from precheck.messages import (
    EXPRESSION_NOT_VALID,
    MUST_NOT_BE_NULL,
    MUST_NOT_BE_NULL_OR_EMPTY,
    format_message,
    named_not_null,
    named_not_null_or_empty,
)

T = TypeVar("T")

_logger = get_logger(__name__)


class _LoggedFailure:
    """Log an InvalidArgument leaving the block; never suppresses it."""

    def __init__(self, check: str) -> None:
        self.check = check

    def __enter__(self) -> None:
        return None

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if isinstance(exc, InvalidArgument):
            _logger.debug(exc.message, extra={"check": self.check})


def _message(default: str, message: object | None, args: tuple[object, ...]) -> str:
    if message is None and not args:
        return default
    return format_message(message, *args)


def require_non_null(value: T | None, message: object | None = None, *args: object) -> T:
    """Return ``value`` if it is not None.

    ``message`` replaces the default ``"must not be null!"``; when ``args`` are
    given it is treated as a ``%`` template.
    """
    with _LoggedFailure("require_non_null"):
        if value is None:
            raise InvalidArgument(_message(MUST_NOT_BE_NULL, message, args))
    return value


def require_non_null_or_empty(
    value: T | None, message: object | None = None, *args: object
) -> T:
    """Return ``value`` if it is neither None nor empty.

    Raises for values that have no notion of emptiness, see
    :func:`precheck.emptiness.is_null_or_empty`.
    """
    with _LoggedFailure("require_non_null_or_empty"):
        if value is None or is_null_or_empty(value):
            raise InvalidArgument(_message(MUST_NOT_BE_NULL_OR_EMPTY, message, args))
    return value


def require_named_non_null(value: T | None, name: str) -> T:
    with _LoggedFailure("require_named_non_null"):
        if value is None:
            raise InvalidArgument(named_not_null(name))
    return value


def require_named_non_null_or_empty(value: T | None, name: str) -> T:
    with _LoggedFailure("require_named_non_null_or_empty"):
        if value is None or is_null_or_empty(value):
            raise InvalidArgument(named_not_null_or_empty(name))
    return value


def require_expression(condition: bool, message: object | None = None, *args: object) -> None:
    """Raise unless ``condition`` holds."""
    with _LoggedFailure("require_expression"):
        if not condition:
            raise InvalidArgument(_message(EXPRESSION_NOT_VALID, message, args))
