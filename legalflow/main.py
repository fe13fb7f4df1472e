"""FastAPI application for the LegalFlow ROI calculator: REST endpoints and SSE streaming."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import asdict
from typing import Any
from uuid import uuid4

from fastapi import BackgroundTasks, Body, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import BaseModel, Field, field_validator

from legalflow.config.settings import get_settings
from legalflow.engine.calculator import compute
from legalflow.engine.formatting import summary_cards
from legalflow.engine.projection import project
from legalflow.engine.result import CalculationResults
from legalflow.hooks.progress_hooks import get_progress_message
from legalflow.integrations.insight_generator import is_fallback
from legalflow.integrations.webhook_client import LeadWebhookClient
from legalflow.models.inputs import SLIDERS, CalculationInputs, get_slider
from legalflow.orchestrator.insight import InsightOrchestrator
from legalflow.orchestrator.leads import LeadCaptureOrchestrator, is_valid_email
from legalflow.streaming import StreamManager

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title="LegalFlow ROI API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Singleton stream manager
stream_manager = StreamManager()

# In-memory insight store, lives only as long as the process
_insights: dict[str, dict] = {}


# Keeps every product in the ROI model finite
MAX_INPUT = 1e9


def _default(field: str) -> float:
    return get_slider(field).default


class CalculationRequest(BaseModel):
    hourly_rate: float = Field(
        default=_default("hourly_rate"), ge=0, le=MAX_INPUT, allow_inf_nan=False
    )
    monthly_volume: float = Field(
        default=_default("monthly_volume"), ge=0, le=MAX_INPUT, allow_inf_nan=False
    )
    hours_per_doc_manual: float = Field(
        default=_default("hours_per_doc_manual"), ge=0, le=MAX_INPUT, allow_inf_nan=False
    )
    minutes_per_doc_auto: float = Field(
        default=_default("minutes_per_doc_auto"), ge=0, le=MAX_INPUT, allow_inf_nan=False
    )
    setup_cost: float = Field(
        default=_default("setup_cost"), ge=0, le=MAX_INPUT, allow_inf_nan=False
    )

    def to_inputs(self) -> CalculationInputs:
        return CalculationInputs(**self.model_dump())


class LeadRequest(BaseModel):
    email: str
    inputs: CalculationRequest = Field(default_factory=CalculationRequest)

    @field_validator("email")
    @classmethod
    def email_must_contain_at(cls, value: str) -> str:
        value = value.strip()
        if not is_valid_email(value):
            raise ValueError("Please enter a valid email address")
        return value


class InsightResponse(BaseModel):
    insight_id: str
    status: str
    progress_message: str


def _calculation_payload(inputs: CalculationInputs, results: CalculationResults) -> dict[str, Any]:
    projection = project(inputs)
    return {
        "inputs": asdict(inputs),
        "results": asdict(results),
        "projection": projection.to_dict(),
        "display": summary_cards(inputs, results, projection.break_even),
    }


async def forward_lead(
    lead_id: str,
    email: str,
    inputs: CalculationInputs,
    results: CalculationResults,
):
    """Background task: forward the lead to the marketing webhook."""
    client = LeadWebhookClient()
    try:
        await LeadCaptureOrchestrator(client).forward(lead_id, email, inputs, results)
    finally:
        await client.aclose()


async def run_insight(
    insight_id: str,
    inputs: CalculationInputs,
    results: CalculationResults,
    progress_message: str,
):
    """Background task: generate the AI insight and emit SSE events."""
    orchestrator = InsightOrchestrator(stream_manager=stream_manager)
    try:
        text = await orchestrator.run(insight_id, inputs, results, progress_message)
        _insights[insight_id]["status"] = "error" if is_fallback(text) else "completed"
        _insights[insight_id]["text"] = text
    except Exception as e:
        logger.exception(f"Insight run failed for {insight_id}")
        _insights[insight_id]["status"] = "error"
        _insights[insight_id]["error"] = str(e)
    finally:
        asyncio.get_running_loop().call_later(
            get_settings().insight_retention_seconds, _evict_insight, insight_id
        )


def _evict_insight(insight_id: str) -> None:
    """Drop a finished insight and its replay buffer."""
    _insights.pop(insight_id, None)
    stream_manager.discard(insight_id)


@app.get("/api/sliders")
async def list_sliders():
    """Slider bounds and defaults for the input panel."""
    return {"sliders": [asdict(slider) for slider in SLIDERS]}


@app.post("/api/calculate")
async def calculate(body: CalculationRequest):
    """Recompute results and the cost projection for the given inputs."""
    inputs = body.to_inputs()
    return _calculation_payload(inputs, compute(inputs))


@app.post("/api/leads")
async def capture_lead(body: LeadRequest, background_tasks: BackgroundTasks):
    """Email gate: unlock results and forward the lead in the background."""
    inputs = body.inputs.to_inputs()
    results = compute(inputs)
    payload = _calculation_payload(inputs, results)
    lead_id = str(uuid4())

    background_tasks.add_task(forward_lead, lead_id, body.email, inputs, results)

    return {"lead_id": lead_id, "unlocked": True, **payload}


@app.post("/api/webhook")
async def webhook_proxy(payload: dict[str, Any] = Body(...)):
    """Forward an arbitrary JSON body to the configured webhook."""
    client = LeadWebhookClient()
    try:
        outcome = await client.forward(payload)
    finally:
        await client.aclose()

    if not outcome.success:
        return JSONResponse(status_code=502, content={"error": "Failed to send to webhook"})
    return {"success": True, "message": outcome.message}


@app.post("/api/insights", response_model=InsightResponse)
async def create_insight(body: CalculationRequest, background_tasks: BackgroundTasks):
    """Start generating an AI summary for the given inputs."""
    inputs = body.to_inputs()
    results = compute(inputs)
    insight_id = str(uuid4())
    progress_message = get_progress_message()
    _insights[insight_id] = {
        "insight_id": insight_id,
        "status": "started",
        "text": None,
    }

    background_tasks.add_task(run_insight, insight_id, inputs, results, progress_message)

    return InsightResponse(
        insight_id=insight_id, status="started", progress_message=progress_message
    )


@app.get("/api/insights/{insight_id}/stream")
async def stream_insight(insight_id: str, request: Request):
    """SSE endpoint: streams insight generation events."""
    if insight_id not in _insights:
        return JSONResponse(status_code=404, content={"error": "Insight not found"})

    last_event_id: int | None = None
    raw = request.headers.get("Last-Event-ID") or request.headers.get("last-event-id")
    if raw is not None:
        try:
            last_event_id = int(raw)
        except ValueError:
            pass

    generator = stream_manager.event_generator(insight_id, last_event_id=last_event_id)
    return StreamingResponse(generator, media_type="text/event-stream")


@app.get("/api/insights/{insight_id}")
async def get_insight(insight_id: str):
    """Return insight state (polling fallback)."""
    insight = _insights.get(insight_id)
    if insight is None:
        return JSONResponse(status_code=404, content={"error": "Insight not found"})
    return insight


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}
