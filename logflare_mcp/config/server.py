"""HTTP server configuration (env names and defaults only)."""

from __future__ import annotations

ENV_HOST = "HOST"
ENV_PORT = "PORT"
ENV_CORS_ALLOW_ORIGINS = "CORS_ALLOW_ORIGINS"

DEFAULT_HOST = "0.0.0.0"
# The container image overrides this with PORT=8080.
DEFAULT_PORT = 3000
DEFAULT_CORS_ALLOW_ORIGINS = "*"

__all__ = [
    "DEFAULT_CORS_ALLOW_ORIGINS",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "ENV_CORS_ALLOW_ORIGINS",
    "ENV_HOST",
    "ENV_PORT",
]
