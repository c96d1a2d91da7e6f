"""Per-session MCP server construction."""

from __future__ import annotations

from typing import Any

from mcp import types
from mcp.server.lowlevel import Server

from logflare_mcp.tools.registry import ToolRegistry
from logflare_mcp.state.credentials import LogflareCredentials
from logflare_mcp.config.sse import MCP_SERVER_NAME, MCP_SERVER_VERSION


def build_protocol_server(registry: ToolRegistry, credentials: LogflareCredentials) -> Server:
    """Return a fresh MCP server whose tool calls run under *credentials*.

    The registry is shared by all sessions; only the credentials differ.
    """
    server: Server = Server(MCP_SERVER_NAME, version=MCP_SERVER_VERSION)

    @server.list_tools()
    async def _list_tools() -> list[types.Tool]:
        return registry.list_tools()

    @server.call_tool()
    async def _call_tool(name: str, arguments: dict[str, Any]) -> types.CallToolResult:
        return await registry.call(name, arguments, credentials)

    return server


__all__ = ["build_protocol_server"]
