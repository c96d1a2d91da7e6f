from __future__ import annotations

import importlib.util
from pathlib import Path
from types import ModuleType

import pytest

ROOT = Path(__file__).resolve().parents[2]
LINTING = ROOT / "linting"


def _load(script: str) -> ModuleType:
    spec = importlib.util.spec_from_file_location(f"linting_{Path(script).stem}", LINTING / script)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.mark.parametrize("script", ["file_length.py", "no_runtime_singletons.py"])
def test_package_passes_policy(script: str) -> None:
    assert _load(script).main() == 0


def test_all_is_declared_last() -> None:
    assert _load("all_at_bottom.py").main(["--root", str(ROOT)]) == 0


def test_runtime_state_policy_flags_module_level_session_table(tmp_path: Path) -> None:
    module = tmp_path / "bad.py"
    module.write_text("ACTIVE_SESSIONS = {}\n_client_instance = None\n", encoding="utf-8")

    problems = _load("no_runtime_singletons.py").collect_violations(module)

    assert len(problems) == 2


def test_all_policy_flags_trailing_statements(tmp_path: Path) -> None:
    module = tmp_path / "bad.py"
    module.write_text('__all__ = ["x"]\nx = 1\n', encoding="utf-8")

    problems = _load("all_at_bottom.py").check_file(module, tmp_path)

    assert problems == ["  bad.py:2 Assign after `__all__`"]
