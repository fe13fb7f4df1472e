"""Lead webhook client -- forwards captured leads to the marketing endpoint."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from legalflow.config.settings import Settings, get_settings

from .base import IntegrationBase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WebhookResult:
    success: bool
    status_code: Optional[int] = None
    message: str = ""


class LeadWebhookClient(IntegrationBase):
    """POSTs JSON payloads to the configured webhook URL.

    Failures are logged and returned as an unsuccessful ``WebhookResult``;
    nothing is raised to the caller.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
        self._client = httpx.AsyncClient(timeout=self._settings.webhook_timeout_seconds)

    @property
    def name(self) -> str:
        return "lead_webhook"

    def is_configured(self) -> bool:
        return bool(self._settings.webhook_url)

    async def forward(self, payload: dict[str, Any]) -> WebhookResult:
        if not self.is_configured():
            logger.warning("Webhook URL not configured; lead not forwarded")
            return WebhookResult(success=False, message="Webhook URL not configured")

        try:
            resp = await self._client.post(
                self._settings.webhook_url,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Webhook rejected lead: {e.response.status_code}")
            return WebhookResult(
                success=False,
                status_code=e.response.status_code,
                message=e.response.text,
            )
        except httpx.HTTPError as e:
            logger.error(f"Failed to send to webhook: {e}")
            return WebhookResult(success=False, message=str(e))

        return WebhookResult(success=True, status_code=resp.status_code, message=resp.text)

    async def aclose(self) -> None:
        await self._client.aclose()
