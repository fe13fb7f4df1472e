"""SSE event types and serialization for insight generation."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class InsightEventType(str, Enum):
    """All event types emitted while an insight is generated."""

    INSIGHT_STARTED = "insight_started"
    INSIGHT_CHUNK = "insight_chunk"
    INSIGHT_COMPLETED = "insight_completed"
    INSIGHT_ERROR = "insight_error"

    @property
    def is_terminal(self) -> bool:
        return self in (InsightEventType.INSIGHT_COMPLETED, InsightEventType.INSIGHT_ERROR)


@dataclass
class SSEEvent:
    """A single Server-Sent Event ready for wire serialization."""

    event_type: InsightEventType
    data: dict[str, Any]
    sequence_id: int
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=timezone.utc))

    def to_sse_string(self) -> str:
        """Serialize to SSE wire format.

        Format:
            event: <type>
            data: <json>
            id: <seq>

            (terminated by double newline)
        """
        payload = {
            **self.data,
            "timestamp": self.timestamp.isoformat(),
        }
        data_json = json.dumps(payload, default=str)
        return f"event: {self.event_type.value}\ndata: {data_json}\nid: {self.sequence_id}\n\n"
