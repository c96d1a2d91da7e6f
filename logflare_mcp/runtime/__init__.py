"""Runtime package.

Keep this module dependency-light: importing `logflare_mcp.runtime.*` from unit
tests should not open network clients or start background tasks.
"""

__all__: list[str] = []
