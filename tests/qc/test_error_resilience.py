"""Tests for error resilience -- integrations failing never touch the numbers."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from legalflow.config.settings import Settings
from legalflow.engine.calculator import compute
from legalflow.engine.projection import project
from legalflow.integrations.insight_generator import ERROR_FALLBACK
from legalflow.main import app
from legalflow.models.inputs import CalculationInputs
from legalflow.orchestrator.insight import InsightOrchestrator
from legalflow.orchestrator.leads import LeadCaptureOrchestrator
from legalflow.integrations.webhook_client import LeadWebhookClient
from legalflow.streaming.manager import StreamManager


class TestErrorResilience:
    """Verify side effects fail gracefully around the pure core."""

    @pytest.mark.asyncio
    async def test_webhook_down_still_unlocks(self):
        """The lead forward runs after the response; its failure is only logged."""
        with patch("legalflow.main.LeadWebhookClient") as MockClient:
            instance = MagicMock()
            instance.forward = AsyncMock(side_effect=httpx.ConnectError("webhook unreachable"))
            instance.aclose = AsyncMock()
            MockClient.return_value = instance

            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                resp = await client.post("/api/leads", json={"email": "jane@firm.law"})

        assert resp.status_code == 200
        assert resp.json()["unlocked"] is True
        assert resp.json()["results"]["annual_savings"] == pytest.approx(97_200)

    @pytest.mark.asyncio
    async def test_webhook_timeout_does_not_raise(self):
        with patch("legalflow.integrations.webhook_client.httpx.AsyncClient") as MockClient:
            mock_client = AsyncMock()
            mock_client.post = AsyncMock(side_effect=httpx.ReadTimeout("slow webhook"))
            MockClient.return_value = mock_client

            client = LeadWebhookClient(settings=Settings(webhook_url="https://hooks.example.test"))
            inputs = CalculationInputs.defaults()
            entry = await LeadCaptureOrchestrator(client).forward(
                "lead-timeout", "jane@firm.law", inputs, compute(inputs)
            )

        assert entry["succeeded"] is False

    @pytest.mark.asyncio
    async def test_insight_service_failure_gives_fallback(self):
        generator = MagicMock()
        generator.name = "insight_generator"
        generator.generate = AsyncMock(side_effect=TimeoutError("AI timed out"))
        inputs = CalculationInputs.defaults()
        results = compute(inputs)

        text = await InsightOrchestrator(StreamManager(), generator).run("ins", inputs, results)

        assert text == ERROR_FALLBACK
        # Results object is untouched by the failed side effect
        assert results == compute(inputs)

    def test_core_total_over_zero_and_huge_inputs(self):
        for value in (0, 1e-9, 1e12):
            inputs = CalculationInputs(
                hourly_rate=value,
                monthly_volume=value,
                hours_per_doc_manual=value,
                minutes_per_doc_auto=value,
                setup_cost=value,
            )
            compute(inputs)
            series = project(inputs)
            assert len(series.points) == 13
