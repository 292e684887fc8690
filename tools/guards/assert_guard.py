"""Flag ``assert`` statements in non-test code.

Asserts vanish under ``python -O``; argument checks belong in
``precheck.require_expression`` and friends.
"""
from __future__ import annotations

import ast
import sys
from pathlib import Path

from tools.guards._files import iter_python_files, parse, report


def is_test_file(path: Path, root: Path) -> bool:
    """Judge by the path below the scanned root, root name included."""
    relative = path.relative_to(root.parent)
    return (
        "tests" in relative.parts
        or path.name.startswith("test_")
        or path.name == "conftest.py"
    )


def check_path(path: Path, root: Path) -> list[str]:
    if is_test_file(path, root):
        return []
    _, tree = parse(path)
    return [
        f"{path}:{n.lineno} 'assert' is forbidden; use precheck.require_expression"
        for n in ast.walk(tree)
        if isinstance(n, ast.Assert)
    ]


def run(roots: list[str]) -> int:
    errors: list[str] = []
    for root in roots:
        for path in iter_python_files([root]):
            errors.extend(check_path(path, Path(root)))
    return report(errors)


if __name__ == "__main__":
    raise SystemExit(run(sys.argv[1:]))
