from .messages import handle_session_message
from .connection import handle_sse_connection
from .transport import SseSessionTransport

__all__ = ["SseSessionTransport", "handle_session_message", "handle_sse_connection"]
