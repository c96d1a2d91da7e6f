"""Logflare MCP bridge: MCP tools over SSE backed by the Logflare query API."""
