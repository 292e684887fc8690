from __future__ import annotations

import re

from precheck.errors import InvalidArgument

MUST_NOT_BE_NULL = "must not be null!"
MUST_NOT_BE_NULL_OR_EMPTY = "must not be null or empty!"
EXPRESSION_NOT_VALID = "expression not valid!"
NOT_CHECKABLE = "parameter must be type Object"
EMPTY_MESSAGE_FALLBACK = "error message is empty!"

# One printf-style conversion; groups hold '*' width/precision and the type.
_CONVERSION = re.compile(
    r"%(?:\([^)]*\))?[#0 +\-]*(\*|\d+)?(?:\.(\*|\d*))?[hlL]?([diouxXeEfFgGcrsa%])"
)


def named_not_null(name: str) -> str:
    return f"parameter '{name}' must not be null!"


def named_not_null_or_empty(name: str) -> str:
    return f"parameter '{name}' must not be null or empty"


def _text_of(message: object) -> str | None:
    if message is None:
        return None
    text = str(message)
    return text if text.strip() else None


def count_arguments(template: str) -> int:
    """Return how many positional arguments ``template`` consumes."""
    count = 0
    for width, precision, kind in _CONVERSION.findall(template):
        if kind == "%":
            continue
        count += 1 + (width == "*") + (precision == "*")
    return count


def format_message(template: object, *args: object) -> str:
    """Build a failure message from a printf-style template.

    Without ``args`` the template is used literally, so a ``%`` in a plain
    message is never interpreted. With ``args`` each conversion specifier is
    bound left to right, e.g. ``format_message("the value of %s is %d",
    "parameter", 1)`` gives ``"the value of parameter is 1"``. Arguments the
    template does not use are ignored. A missing or blank template yields
    ``"error message is empty!"``.
    """
    text = _text_of(template)
    if text is None:
        return EMPTY_MESSAGE_FALLBACK
    if not args:
        return text
    try:
        return text % args[: count_arguments(text)]
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(
            f"invalid error message template {text!r}: {exc}"
        ) from exc
