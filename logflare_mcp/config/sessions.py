"""Session lifetime configuration."""

from __future__ import annotations

# Fixed idle window: measured from creation or the last inbound message.
SESSION_IDLE_TIMEOUT_S: float = 30 * 60.0

ENV_SESSION_SWEEP_TICK_S = "SESSION_SWEEP_TICK_S"
DEFAULT_SESSION_SWEEP_TICK_S = 30.0

__all__ = [
    "DEFAULT_SESSION_SWEEP_TICK_S",
    "ENV_SESSION_SWEEP_TICK_S",
    "SESSION_IDLE_TIMEOUT_S",
]
