from .tools import ToolSpec
from .session import Session
from .fields import FieldInfo
from .runtime import RuntimeDeps
from .settings import AppSettings
from .credentials import LogflareCredentials

__all__ = ["AppSettings", "FieldInfo", "LogflareCredentials", "RuntimeDeps", "Session", "ToolSpec"]
