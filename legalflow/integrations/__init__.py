from .base import IntegrationBase
from .insight_generator import InsightGenerator
from .webhook_client import LeadWebhookClient, WebhookResult

__all__ = ["IntegrationBase", "InsightGenerator", "LeadWebhookClient", "WebhookResult"]
