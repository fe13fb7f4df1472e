from .events import InsightEventType, SSEEvent
from .manager import StreamManager

__all__ = ["InsightEventType", "SSEEvent", "StreamManager"]
