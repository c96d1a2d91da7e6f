from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def pytest_configure() -> None:
    # Import `logflare_mcp` from the checkout even when it is not installed.
    root = str(ROOT)
    if root not in sys.path:
        sys.path.insert(0, root)
