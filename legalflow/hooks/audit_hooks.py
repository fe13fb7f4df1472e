"""Audit hooks: logs outbound integration calls."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

logger = logging.getLogger(__name__)


def log_integration_call(
    session_id: str,
    integration: str,
    payload: dict[str, Any] | None = None,
    result: Any = None,
    succeeded: bool = True,
) -> dict[str, Any]:
    """Record an outbound call (webhook forward, insight request).

    Returns the audit entry dict so callers can attach it to their state.
    """
    entry = {
        "session_id": session_id,
        "integration": integration,
        "payload_keys": sorted((payload or {}).keys()),
        "timestamp": datetime.now(tz=timezone.utc).isoformat(),
        "succeeded": succeeded,
        "result_summary": str(result)[:500] if result is not None else None,
    }
    if succeeded:
        logger.info("Integration audit: %s → %s", integration, session_id)
    else:
        logger.warning("Integration audit: %s failed → %s", integration, session_id)
    return entry
