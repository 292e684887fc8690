from __future__ import annotations

import os
from dataclasses import dataclass

_DEFAULT_ROOTS = "precheck,tests,tools"


@dataclass(frozen=True)
class Settings:
    """Settings loaded from ``PRECHECK_*`` environment variables."""

    log_level: str
    guard_roots: tuple[str, ...]

    @staticmethod
    def from_env() -> Settings:
        prefix = "PRECHECK_"
        log_level = os.getenv(f"{prefix}LOG_LEVEL", "INFO").strip() or "INFO"
        raw_roots = os.getenv(f"{prefix}GUARD_ROOTS", _DEFAULT_ROOTS)
        roots = tuple(r.strip() for r in raw_roots.split(",") if r.strip())
        return Settings(log_level=log_level, guard_roots=roots or tuple(_DEFAULT_ROOTS.split(",")))
