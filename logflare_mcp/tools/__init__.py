from .catalog import TOOL_SPECS
from .registry import ToolRegistry

__all__ = ["TOOL_SPECS", "ToolRegistry"]
