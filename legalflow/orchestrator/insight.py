"""InsightOrchestrator: runs insight generation and streams progress as SSE."""

from __future__ import annotations

import logging
from typing import Any, Optional

from legalflow.engine.result import CalculationResults
from legalflow.hooks.audit_hooks import log_integration_call
from legalflow.hooks.progress_hooks import get_progress_message
from legalflow.integrations.insight_generator import (
    ERROR_FALLBACK,
    InsightGenerator,
    is_fallback,
)
from legalflow.models.inputs import CalculationInputs
from legalflow.streaming.events import InsightEventType, SSEEvent
from legalflow.streaming.manager import StreamManager

logger = logging.getLogger(__name__)


class InsightOrchestrator:
    """Generates one insight and emits started/chunk/completed events.

    A static fallback from the generator ends the stream with an error
    event carrying the fallback text.
    """

    def __init__(
        self,
        stream_manager: Optional[StreamManager] = None,
        generator: Optional[InsightGenerator] = None,
    ) -> None:
        self._stream_manager = stream_manager
        self._generator = generator or InsightGenerator()
        self._seq = 0

    async def run(
        self,
        insight_id: str,
        inputs: CalculationInputs,
        results: CalculationResults,
        progress_message: Optional[str] = None,
    ) -> str:
        """Generate the insight text; always returns displayable text."""
        await self._emit(insight_id, InsightEventType.INSIGHT_STARTED, {
            "insight_id": insight_id,
            "progress_message": progress_message or get_progress_message(),
        })

        async def on_chunk(text: str) -> None:
            await self._emit(insight_id, InsightEventType.INSIGHT_CHUNK, {"text": text})

        try:
            text = await self._generator.generate(inputs, results, on_chunk=on_chunk)
        except Exception as e:
            logger.exception(f"Insight generation failed for {insight_id}")
            log_integration_call(
                insight_id, self._generator.name, inputs.as_dict(), result=str(e), succeeded=False
            )
            await self._emit(insight_id, InsightEventType.INSIGHT_ERROR, {
                "insight_id": insight_id,
                "text": ERROR_FALLBACK,
                "error": str(e),
            })
            return ERROR_FALLBACK

        if is_fallback(text):
            logger.warning(f"Insight {insight_id} fell back to static text: {text}")
            log_integration_call(
                insight_id, self._generator.name, inputs.as_dict(), result=text, succeeded=False
            )
            await self._emit(insight_id, InsightEventType.INSIGHT_ERROR, {
                "insight_id": insight_id,
                "text": text,
                "error": text,
            })
            return text

        log_integration_call(insight_id, self._generator.name, inputs.as_dict(), result=text)
        await self._emit(insight_id, InsightEventType.INSIGHT_COMPLETED, {
            "insight_id": insight_id,
            "text": text,
        })
        return text

    async def _emit(
        self,
        insight_id: str,
        event_type: InsightEventType,
        data: dict[str, Any],
    ) -> None:
        """Emit an SSE event if a stream manager is available."""
        if self._stream_manager is None:
            return
        self._seq += 1
        event = SSEEvent(
            event_type=event_type,
            data=data,
            sequence_id=self._seq,
        )
        await self._stream_manager.emit(insight_id, event)
