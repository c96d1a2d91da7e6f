#!/usr/bin/env python
"""Reject module-level runtime state in package modules.

Session tables and other per-process state belong on `RuntimeDeps`, built by
the application lifespan. Flags, at module top level:

- classes named `*Singleton` and `get_instance` / `reset_instance` functions
- `*_instance = None` placeholders
- mutable containers (dict/list/set literals or constructor calls) bound to a
  name containing `session` or `connection`
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT / "logflare_mcp"

SINGLETON_CLASS_SUFFIX = "Singleton"
SINGLETON_FN_NAMES = {"get_instance", "reset_instance"}
STATEFUL_NAME_MARKERS = ("session", "connection")
MUTABLE_CONSTRUCTORS = {"dict", "list", "set", "defaultdict", "OrderedDict", "deque"}


def _top_level_targets(node: ast.Assign | ast.AnnAssign) -> list[str]:
    if isinstance(node, ast.AnnAssign):
        return [node.target.id] if isinstance(node.target, ast.Name) else []
    return [target.id for target in node.targets if isinstance(target, ast.Name)]


def _is_mutable_container(value: ast.expr | None) -> bool:
    if isinstance(value, (ast.Dict, ast.List, ast.Set, ast.DictComp, ast.ListComp, ast.SetComp)):
        return True
    if isinstance(value, ast.Call):
        func = value.func
        name = func.id if isinstance(func, ast.Name) else func.attr if isinstance(func, ast.Attribute) else ""
        return name in MUTABLE_CONSTRUCTORS
    return False


def _assignment_violation(node: ast.Assign | ast.AnnAssign) -> str | None:
    names = _top_level_targets(node)
    if not names:
        return None
    value = node.value
    if isinstance(value, ast.Constant) and value.value is None:
        lazy = [name for name in names if name.lower().endswith("_instance")]
        if lazy:
            return f"lazy singleton placeholder: {', '.join(lazy)}"
    if _is_mutable_container(value):
        stateful = [name for name in names if any(m in name.lower() for m in STATEFUL_NAME_MARKERS)]
        if stateful:
            return f"module-level mutable state: {', '.join(stateful)}"
    return None


def collect_violations(filepath: Path) -> list[str]:
    try:
        tree = ast.parse(filepath.read_text(encoding="utf-8"), filename=str(filepath))
    except (OSError, UnicodeDecodeError, SyntaxError):
        return []

    violations: list[str] = []
    rel = filepath.relative_to(ROOT) if filepath.is_relative_to(ROOT) else filepath

    for node in tree.body:
        if isinstance(node, ast.ClassDef) and node.name.endswith(SINGLETON_CLASS_SUFFIX):
            violations.append(f"  {rel}:{node.lineno} class `{node.name}` uses singleton naming")
        elif isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)) and node.name in SINGLETON_FN_NAMES:
            violations.append(f"  {rel}:{node.lineno} function `{node.name}` suggests singleton lifecycle")
        elif isinstance(node, (ast.Assign, ast.AnnAssign)):
            problem = _assignment_violation(node)
            if problem:
                violations.append(f"  {rel}:{node.lineno} {problem}")

    return violations


def main() -> int:
    if not SRC_DIR.is_dir():
        print(f"[no-runtime-singletons] Missing package directory: {SRC_DIR}", file=sys.stderr)
        return 1

    violations: list[str] = []
    for py_file in sorted(SRC_DIR.rglob("*.py")):
        if "__pycache__" in py_file.parts:
            continue
        violations.extend(collect_violations(py_file))

    if not violations:
        return 0

    print("Runtime state violations:", file=sys.stderr)
    for violation in violations:
        print(violation, file=sys.stderr)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
