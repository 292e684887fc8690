from __future__ import annotations

from collections.abc import Callable

from precheck.config import Settings
from precheck.logging import get_logger, setup_logging
from tools.guards import assert_guard, exceptions_guard, logging_guard, typing_guard

Runner = Callable[[list[str]], int]

RUNNERS: tuple[tuple[str, Runner], ...] = (
    ("typing", typing_guard.run),
    ("exceptions", exceptions_guard.run),
    ("logging", logging_guard.run),
    ("assert", assert_guard.run),
)


def run_guards(roots: list[str]) -> int:
    logger = get_logger(__name__)
    for name, runner in RUNNERS:
        rc = runner(roots)
        if rc != 0:
            logger.error("guard failed", extra={"check": name})
            return rc
    logger.info("all guards passed")
    return 0


def main() -> int:
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    return run_guards(list(settings.guard_roots))


if __name__ == "__main__":
    raise SystemExit(main())
