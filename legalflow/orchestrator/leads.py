"""Lead capture: email gate validation and webhook forwarding."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from legalflow.engine.result import CalculationResults
from legalflow.hooks.audit_hooks import log_integration_call
from legalflow.integrations.webhook_client import LeadWebhookClient
from legalflow.models.inputs import CalculationInputs

logger = logging.getLogger(__name__)


def is_valid_email(email: Optional[str]) -> bool:
    """The gate only checks that something was typed and it contains "@"."""
    return bool(email) and "@" in email


def build_lead_payload(
    email: str,
    inputs: CalculationInputs,
    results: CalculationResults,
    timestamp: Optional[datetime] = None,
) -> dict[str, Any]:
    timestamp = timestamp or datetime.now(tz=timezone.utc)
    return {
        "email": email,
        "timestamp": timestamp.isoformat(),
        "calculatorInputs": inputs.to_payload(),
        "calculatorResults": results.to_payload(),
    }


class LeadCaptureOrchestrator:
    """Forwards an unlocked lead to the webhook.

    Runs after the results are already returned to the visitor, so a
    failed forward only shows up in the logs.
    """

    def __init__(self, webhook_client: Optional[LeadWebhookClient] = None) -> None:
        self._webhook_client = webhook_client

    @property
    def webhook_client(self) -> LeadWebhookClient:
        if self._webhook_client is None:
            self._webhook_client = LeadWebhookClient()
        return self._webhook_client

    async def forward(
        self,
        lead_id: str,
        email: str,
        inputs: CalculationInputs,
        results: CalculationResults,
    ) -> dict[str, Any]:
        payload = build_lead_payload(email, inputs, results)
        try:
            outcome = await self.webhook_client.forward(payload)
        except Exception as e:
            logger.exception(f"Lead forward crashed for {lead_id}")
            return log_integration_call(
                lead_id, "lead_webhook", payload, result=str(e), succeeded=False
            )
        return log_integration_call(
            lead_id,
            "lead_webhook",
            payload,
            result=outcome.message or outcome.status_code,
            succeeded=outcome.success,
        )
