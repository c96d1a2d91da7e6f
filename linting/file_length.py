#!/usr/bin/env python
"""Enforce maximum code-line limits per package module.

Python files in logflare_mcp/ must not exceed 300 code lines. Blank lines,
comment-only lines and docstring lines are excluded from the count.
__init__.py barrel-export files (only imports and __all__) are exempt.
"""

from __future__ import annotations

import ast
import sys
import tokenize
from pathlib import Path

SRC_LIMIT = 300

ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT / "logflare_mcp"


def _comment_lines(filepath: Path) -> set[int]:
    comments: set[int] = set()
    try:
        with filepath.open("rb") as f:
            for tok in tokenize.tokenize(f.readline):
                if tok.type == tokenize.COMMENT:
                    comments.add(tok.start[0])
    except tokenize.TokenError:
        pass
    return comments


def _docstring_lines(tree: ast.Module) -> set[int]:
    lines: set[int] = set()
    for node in ast.walk(tree):
        if (
            isinstance(node, (ast.Module, ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef))
            and node.body
            and isinstance(node.body[0], ast.Expr)
            and isinstance(node.body[0].value, ast.Constant)
            and isinstance(node.body[0].value.value, str)
        ):
            doc = node.body[0]
            lines.update(range(doc.lineno, (doc.end_lineno or doc.lineno) + 1))
    return lines


def _is_barrel_init(filepath: Path, tree: ast.Module) -> bool:
    if filepath.name != "__init__.py":
        return False
    for node in tree.body:
        if isinstance(node, (ast.Import, ast.ImportFrom, ast.Pass)):
            continue
        if isinstance(node, ast.Expr) and isinstance(node.value, ast.Constant):
            continue
        if isinstance(node, (ast.Assign, ast.AnnAssign)):
            targets = node.targets if isinstance(node, ast.Assign) else [node.target]
            if [t.id for t in targets if isinstance(t, ast.Name)] == ["__all__"]:
                continue
        return False
    return True


def count_code_lines(filepath: Path) -> int | None:
    """Non-blank, non-comment, non-docstring lines; None for exempt or unreadable files."""
    try:
        source = filepath.read_text(encoding="utf-8")
        tree = ast.parse(source, filename=str(filepath))
    except (OSError, UnicodeDecodeError, SyntaxError):
        return None
    if _is_barrel_init(filepath, tree):
        return None

    skipped = _comment_lines(filepath) | _docstring_lines(tree)
    return sum(1 for i, line in enumerate(source.splitlines(), start=1) if line.strip() and i not in skipped)


def main() -> int:
    if not SRC_DIR.is_dir():
        print(f"[file-length] Missing package directory: {SRC_DIR}", file=sys.stderr)
        return 1

    violations: list[str] = []
    for py_file in sorted(SRC_DIR.rglob("*.py")):
        if "__pycache__" in py_file.parts:
            continue
        code_lines = count_code_lines(py_file)
        if code_lines is not None and code_lines > SRC_LIMIT:
            violations.append(f"  {py_file.relative_to(ROOT)}: {code_lines} code lines (limit {SRC_LIMIT})")

    if violations:
        print("File length violations:", file=sys.stderr)
        for v in violations:
            print(v, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
