from __future__ import annotations

import array
from collections.abc import Callable, Collection, Mapping, Sized

from precheck.errors import InvalidArgument
from precheck.messages import NOT_CHECKABLE

# Returns whether the value is empty, or None when the value is not its kind.
EmptinessCheck = Callable[[object], "bool | None"]


def _fixed_size_empty(value: object) -> bool | None:
    if isinstance(value, memoryview):
        return value.nbytes == 0
    if isinstance(value, (tuple, bytes, bytearray, array.array)):
        return len(value) == 0
    return None


def _text_empty(value: object) -> bool | None:
    if isinstance(value, str):
        return value == ""
    return None


def _collection_empty(value: object) -> bool | None:
    if isinstance(value, Collection) and not isinstance(value, Mapping):
        return not any(True for _ in value)
    return None


def _mapping_empty(value: object) -> bool | None:
    if isinstance(value, Mapping):
        return len(value.keys()) == 0
    return None


def _sized_empty(value: object) -> bool | None:
    if isinstance(value, Sized):
        return len(value) == 0
    return None


# Order matters: first match wins.
_DISPATCH: tuple[tuple[str, EmptinessCheck], ...] = (
    ("fixed-size sequence", _fixed_size_empty),
    ("text", _text_empty),
    ("collection", _collection_empty),
    ("mapping", _mapping_empty),
    ("sized", _sized_empty),
)


def _classify(value: object) -> tuple[str, bool] | None:
    for kind, check in _DISPATCH:
        empty = check(value)
        if empty is not None:
            return kind, empty
    return None


def kind_of(value: object) -> str | None:
    """Return the emptiness kind of ``value``, or ``None`` if it has none."""
    found = _classify(value)
    return None if found is None else found[0]


def is_null_or_empty(value: object) -> bool:
    """Return True if ``value`` is None or has no elements.

    Values with no notion of emptiness (numbers, booleans, generators, plain
    objects) are refused with :class:`InvalidArgument` rather than treated as
    non-empty.
    """
    if value is None:
        return True
    found = _classify(value)
    if found is None:
        raise InvalidArgument(NOT_CHECKABLE)
    return found[1]
