"""Repository standard checks for the precheck code base.

- No use of typing.Any, cast() or "type: ignore"
- No bare except; every handler re-raises
- No print; use precheck.logging
- No assert outside tests; validate arguments with precheck guards

Run with ``python -m tools.guard``.
"""
