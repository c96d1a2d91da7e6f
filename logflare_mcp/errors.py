"""Shared error types for the Logflare MCP bridge."""

from __future__ import annotations

from dataclasses import dataclass

from logflare_mcp.config.logflare import LOGFLARE_ERROR_PREFIX


@dataclass(frozen=True, slots=True)
class LogflareApiError(Exception):
    """Raised when the Logflare API answers with a non-success status."""

    status_code: int
    body: str

    def __str__(self) -> str:
        return f"{LOGFLARE_ERROR_PREFIX}: {self.body}"


@dataclass(frozen=True, slots=True)
class QueryValidationError(Exception):
    """Raised when caller SQL does not have the shape a tool requires."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class TimeExpressionError(Exception):
    """Raised when a time expression matches none of the accepted forms."""

    value: str

    def __str__(self) -> str:
        return (
            f"Invalid time format: {self.value}. Use ISO 8601, relative time (e.g., '1 hour ago'), "
            "or Unix timestamp."
        )


@dataclass(frozen=True, slots=True)
class MessageParseError(Exception):
    """Raised by a transport when a posted body is not a JSON-RPC message."""

    message: str

    def __str__(self) -> str:
        return self.message


__all__ = ["LogflareApiError", "MessageParseError", "QueryValidationError", "TimeExpressionError"]
