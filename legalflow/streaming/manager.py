"""StreamManager: per-insight event buffering and SSE subscriber management."""

from __future__ import annotations

import asyncio
from collections import defaultdict
from typing import AsyncGenerator

from .events import SSEEvent


class StreamManager:
    """Manages SSE event distribution for insight sessions.

    Each insight_id has:
    - A list of subscriber queues (asyncio.Queue instances)
    - A buffer of all emitted events for replay on reconnect
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[asyncio.Queue[SSEEvent]]] = defaultdict(list)
        self._buffers: dict[str, list[SSEEvent]] = defaultdict(list)

    async def subscribe(self, insight_id: str) -> asyncio.Queue[SSEEvent]:
        """Create and return a new subscriber queue for an insight."""
        queue: asyncio.Queue[SSEEvent] = asyncio.Queue()
        self._subscribers[insight_id].append(queue)
        return queue

    async def unsubscribe(self, insight_id: str, queue: asyncio.Queue[SSEEvent]) -> None:
        subs = self._subscribers.get(insight_id)
        if subs is None:
            return
        if queue in subs:
            subs.remove(queue)
        if not subs:
            del self._subscribers[insight_id]

    async def emit(self, insight_id: str, event: SSEEvent) -> None:
        """Broadcast an event to all subscribers and buffer it for replay."""
        self._buffers[insight_id].append(event)
        for queue in self._subscribers.get(insight_id, []):
            await queue.put(event)

    def discard(self, insight_id: str) -> None:
        """Forget an insight's replay buffer and subscriber queues."""
        self._buffers.pop(insight_id, None)
        self._subscribers.pop(insight_id, None)

    def is_tracked(self, insight_id: str) -> bool:
        return insight_id in self._buffers or insight_id in self._subscribers

    def is_finished(self, insight_id: str) -> bool:
        buffer = self._buffers.get(insight_id)
        return bool(buffer) and buffer[-1].event_type.is_terminal

    async def event_generator(
        self, insight_id: str, last_event_id: int | None = None
    ) -> AsyncGenerator[str, None]:
        """Async generator yielding SSE strings for an insight.

        If last_event_id is provided, replays buffered events with
        sequence_id > last_event_id before switching to live events. The
        stream ends after a terminal event.
        """
        queue = await self.subscribe(insight_id)
        try:
            # SSE comment as connection heartbeat (ignored by browsers)
            yield ": connected\n\n"

            last_sent = last_event_id
            if last_event_id is not None or self.is_finished(insight_id):
                since = last_event_id if last_event_id is not None else -1
                for event in list(self._buffers.get(insight_id, [])):
                    if event.sequence_id > since:
                        yield event.to_sse_string()
                        last_sent = event.sequence_id
                        if event.event_type.is_terminal:
                            return

            while True:
                event = await queue.get()
                # Already delivered from the replay buffer
                if last_sent is not None and event.sequence_id <= last_sent:
                    continue
                yield event.to_sse_string()
                if event.event_type.is_terminal:
                    return
        finally:
            await self.unsubscribe(insight_id, queue)
