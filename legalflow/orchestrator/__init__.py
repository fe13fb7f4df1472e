from .insight import InsightOrchestrator
from .leads import LeadCaptureOrchestrator, build_lead_payload, is_valid_email

__all__ = [
    "InsightOrchestrator",
    "LeadCaptureOrchestrator",
    "build_lead_payload",
    "is_valid_email",
]
