"""Tool catalog entries (dataclass only)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from dataclasses import dataclass
from collections.abc import Callable, Awaitable

from pydantic import BaseModel

from .credentials import LogflareCredentials

if TYPE_CHECKING:
    from logflare_mcp.logflare.client import LogflareClient

ToolHandler = Callable[["LogflareClient", Any, LogflareCredentials], Awaitable[Any]]


@dataclass(frozen=True, slots=True)
class ToolSpec:
    name: str
    description: str
    params_model: type[BaseModel]
    handler: ToolHandler


__all__ = ["ToolHandler", "ToolSpec"]
