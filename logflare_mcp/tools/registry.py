"""Tool registry: one catalog per process, parameterized per call by credentials."""

from __future__ import annotations

import logging
from typing import Any
from collections.abc import Iterable

from mcp import types
from pydantic import ValidationError

from logflare_mcp.state.tools import ToolSpec
from logflare_mcp.logflare.client import LogflareClient
from logflare_mcp.state.credentials import LogflareCredentials
from logflare_mcp.errors import LogflareApiError, TimeExpressionError, QueryValidationError

from .catalog import TOOL_SPECS
from .results import error_result, success_result

logger = logging.getLogger(__name__)


def _validation_message(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "arguments"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "Invalid arguments: " + "; ".join(parts)


class ToolRegistry:
    def __init__(self, client: LogflareClient, specs: Iterable[ToolSpec] = TOOL_SPECS) -> None:
        self._client = client
        self._specs: dict[str, ToolSpec] = {}
        for spec in specs:
            if spec.name in self._specs:
                raise ValueError(f"duplicate tool name: {spec.name}")
            self._specs[spec.name] = spec

    def list_tools(self) -> list[types.Tool]:
        return [
            types.Tool(
                name=spec.name,
                description=spec.description,
                inputSchema=spec.params_model.model_json_schema(by_alias=True),
            )
            for spec in self._specs.values()
        ]

    async def call(
        self,
        name: str,
        arguments: dict[str, Any] | None,
        credentials: LogflareCredentials,
    ) -> types.CallToolResult:
        """Run one tool. Never raises: failures come back as error results."""
        spec = self._specs.get(name)
        if spec is None:
            return error_result(f"Unknown tool: {name}")

        try:
            params = spec.params_model.model_validate(arguments or {})
        except ValidationError as exc:
            return error_result(_validation_message(exc))

        try:
            payload = await spec.handler(self._client, params, credentials)
        except (QueryValidationError, TimeExpressionError) as exc:
            logger.info("tool %s rejected input: %s", name, exc)
            return error_result(str(exc))
        except LogflareApiError as exc:
            logger.warning("tool %s backend error status=%s", name, exc.status_code)
            return error_result(str(exc))
        except Exception as exc:
            logger.warning("tool %s failed: %s", name, exc, exc_info=True)
            return error_result(str(exc) or type(exc).__name__)
        return success_result(payload)


__all__ = ["ToolRegistry"]
