#!/usr/bin/env python
"""Check that a module's public surface is declared once, last.

A file that defines `__all__` must bind it with a single top-level
assignment and nothing may follow it. Mutations such as `__all__ += [...]`
or `__all__.append(...)` are rejected. Files without `__all__` are skipped.
"""

from __future__ import annotations

import ast
import sys
import argparse
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
DEFAULT_DIRS = ("logflare_mcp", "tests")


def _names_all(node: ast.AST | None) -> bool:
    return isinstance(node, ast.Name) and node.id == "__all__"


def _is_declaration(node: ast.stmt) -> bool:
    if isinstance(node, ast.Assign):
        return len(node.targets) == 1 and _names_all(node.targets[0])
    return isinstance(node, ast.AnnAssign) and _names_all(node.target) and node.value is not None


def _is_mutation(node: ast.stmt) -> bool:
    if _is_declaration(node):
        return False
    if isinstance(node, ast.Assign):
        return any(_names_all(t) for t in node.targets)
    if isinstance(node, (ast.AnnAssign, ast.AugAssign)):
        return _names_all(node.target)
    if isinstance(node, ast.Delete):
        return any(_names_all(t) for t in node.targets)
    if isinstance(node, ast.Expr) and isinstance(node.value, ast.Call):
        func = node.value.func
        return isinstance(func, ast.Attribute) and _names_all(func.value)
    return False


def _label(node: ast.stmt) -> str:
    name = getattr(node, "name", None)
    if name:
        return f"{type(node).__name__} `{name}`"
    return type(node).__name__


def check_file(filepath: Path, root: Path = ROOT) -> list[str]:
    try:
        tree = ast.parse(filepath.read_text(encoding="utf-8"), filename=str(filepath))
    except (OSError, UnicodeDecodeError, SyntaxError):
        return []

    rel = filepath.relative_to(root) if filepath.is_relative_to(root) else filepath
    declarations = [i for i, node in enumerate(tree.body) if _is_declaration(node)]
    mutations = [node for node in tree.body if _is_mutation(node)]
    if not declarations and not mutations:
        return []

    problems = [f"  {rel}:{node.lineno} `__all__` mutated; declare it once at the bottom" for node in mutations]
    if len(declarations) != 1:
        problems.append(f"  {rel}: expected one `__all__` declaration, found {len(declarations)}")
        return problems

    index = declarations[0]
    value = tree.body[index].value
    if value is not None and any(_names_all(n) for n in ast.walk(value)):
        problems.append(f"  {rel}:{tree.body[index].lineno} `__all__` built from itself")
    for node in tree.body[index + 1 :]:
        problems.append(f"  {rel}:{node.lineno} {_label(node)} after `__all__`")
    return problems


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--dirs", nargs="+", default=list(DEFAULT_DIRS), help="directories to scan")
    parser.add_argument("--root", default=str(ROOT), help="project root")
    args = parser.parse_args(argv)

    root = Path(args.root).resolve()
    problems: list[str] = []
    for directory in args.dirs:
        scan_dir = root / directory
        if not scan_dir.is_dir():
            continue
        for py_file in sorted(scan_dir.rglob("*.py")):
            if "__pycache__" not in py_file.parts:
                problems.extend(check_file(py_file, root))

    if problems:
        print("__all__ placement violations:", file=sys.stderr)
        for problem in problems:
            print(problem, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
