"""Guard runners. Each exposes ``run(roots: list[str]) -> int``, non-zero on violations."""
