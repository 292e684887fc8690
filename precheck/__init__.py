"""Fail-fast guard functions for method arguments and invariants.

Each guard returns the checked value unchanged or raises
:class:`~precheck.errors.InvalidArgument` with a descriptive message.
"""
from __future__ import annotations

from precheck.emptiness import is_null_or_empty
from precheck.errors import InvalidArgument
from precheck.guards import (
    require_expression,
    require_named_non_null,
    require_named_non_null_or_empty,
    require_non_null,
    require_non_null_or_empty,
)
from precheck.messages import format_message

__all__ = [
    "InvalidArgument",
    "format_message",
    "is_null_or_empty",
    "require_expression",
    "require_named_non_null",
    "require_named_non_null_or_empty",
    "require_non_null",
    "require_non_null_or_empty",
]
