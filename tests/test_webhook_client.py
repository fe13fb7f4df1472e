"""Tests for LeadWebhookClient -- all mocked, no network needed."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from legalflow.config.settings import Settings
from legalflow.integrations.webhook_client import LeadWebhookClient

WEBHOOK_URL = "https://hooks.example.test/lead"


def _client(mock_client, url=WEBHOOK_URL):
    client = LeadWebhookClient(settings=Settings(webhook_url=url))
    client._client = mock_client
    return client


class TestLeadWebhookClient:

    @pytest.mark.asyncio
    async def test_posts_payload_as_json(self):
        with patch("legalflow.integrations.webhook_client.httpx.AsyncClient") as MockClient:
            mock_client = AsyncMock()
            mock_resp = MagicMock()
            mock_resp.status_code = 200
            mock_resp.text = "Workflow was started"
            mock_client.post = AsyncMock(return_value=mock_resp)
            MockClient.return_value = mock_client

            client = _client(mock_client)
            result = await client.forward({"email": "jane@firm.law"})

            assert result.success
            assert result.status_code == 200
            assert result.message == "Workflow was started"
            args, kwargs = mock_client.post.call_args
            assert args[0] == WEBHOOK_URL
            assert kwargs["json"] == {"email": "jane@firm.law"}
            assert kwargs["headers"]["Content-Type"] == "application/json"

    @pytest.mark.asyncio
    async def test_network_error_returns_failure(self):
        with patch("legalflow.integrations.webhook_client.httpx.AsyncClient") as MockClient:
            mock_client = AsyncMock()
            mock_client.post = AsyncMock(side_effect=httpx.ConnectError("Network error"))
            MockClient.return_value = mock_client

            client = _client(mock_client)
            result = await client.forward({"email": "jane@firm.law"})

            assert not result.success
            assert "Network error" in result.message

    @pytest.mark.asyncio
    async def test_error_status_returns_failure(self):
        with patch("legalflow.integrations.webhook_client.httpx.AsyncClient") as MockClient:
            mock_client = AsyncMock()
            mock_resp = MagicMock()
            mock_resp.status_code = 500
            mock_resp.text = "internal error"
            mock_resp.raise_for_status.side_effect = httpx.HTTPStatusError(
                "server error", request=MagicMock(), response=mock_resp
            )
            mock_client.post = AsyncMock(return_value=mock_resp)
            MockClient.return_value = mock_client

            client = _client(mock_client)
            result = await client.forward({"email": "jane@firm.law"})

            assert not result.success
            assert result.status_code == 500
            assert result.message == "internal error"

    @pytest.mark.asyncio
    async def test_unconfigured_skips_request(self):
        with patch("legalflow.integrations.webhook_client.httpx.AsyncClient") as MockClient:
            mock_client = AsyncMock()
            MockClient.return_value = mock_client

            client = _client(mock_client, url="")
            result = await client.forward({"email": "jane@firm.law"})

            assert not client.is_configured()
            assert not result.success
            mock_client.post.assert_not_called()

    def test_name(self):
        with patch("legalflow.integrations.webhook_client.httpx.AsyncClient"):
            assert LeadWebhookClient(settings=Settings()).name == "lead_webhook"
