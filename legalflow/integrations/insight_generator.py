"""AI insight generator -- a short witty summary of the calculation via Claude."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Optional

from claude_agent_sdk import AssistantMessage, ClaudeAgentOptions, ClaudeSDKClient, TextBlock

from legalflow.config.settings import Settings, get_settings
from legalflow.engine.result import CalculationResults
from legalflow.models.inputs import CalculationInputs
from legalflow.prompts.insight_prompt import SYSTEM_PROMPT, format_insight_prompt

from .base import IntegrationBase

logger = logging.getLogger(__name__)

UNCONFIGURED_FALLBACK = "AI insights unavailable. Please configure your Anthropic API key."
EMPTY_RESPONSE_FALLBACK = "Unable to generate insight at this time."
ERROR_FALLBACK = "Analysis unavailable. Please try again."

FALLBACK_MESSAGES = frozenset({UNCONFIGURED_FALLBACK, EMPTY_RESPONSE_FALLBACK, ERROR_FALLBACK})

# Claude Code built-ins; the insight is a single text-only completion
BUILTIN_TOOLS = [
    "Bash",
    "BashOutput",
    "KillShell",
    "Read",
    "Write",
    "Edit",
    "MultiEdit",
    "NotebookEdit",
    "Glob",
    "Grep",
    "WebFetch",
    "WebSearch",
    "Task",
    "TodoWrite",
    "SlashCommand",
    "ExitPlanMode",
]

ChunkCallback = Callable[[str], Awaitable[None]]


def is_fallback(text: str) -> bool:
    """True when ``text`` is one of the static strings shown instead of an insight."""
    return text in FALLBACK_MESSAGES


class InsightGenerator(IntegrationBase):
    """Sends the insight prompt to Claude and returns display text.

    The returned string is opaque: it is never parsed. Every failure path
    yields one of the static fallback strings instead of raising.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()

    @property
    def name(self) -> str:
        return "insight_generator"

    def is_configured(self) -> bool:
        return bool(self._settings.anthropic_api_key)

    def _options(self) -> ClaudeAgentOptions:
        return ClaudeAgentOptions(
            system_prompt=SYSTEM_PROMPT,
            allowed_tools=[],
            disallowed_tools=list(BUILTIN_TOOLS),
            max_turns=1,
            model=self._settings.insight_model or None,
            env={"ANTHROPIC_API_KEY": self._settings.anthropic_api_key},
        )

    async def generate(
        self,
        inputs: CalculationInputs,
        results: CalculationResults,
        on_chunk: Optional[ChunkCallback] = None,
    ) -> str:
        if not self.is_configured():
            return UNCONFIGURED_FALLBACK

        prompt = format_insight_prompt(inputs, results)
        chunks: list[str] = []
        try:
            async with ClaudeSDKClient(self._options()) as client:
                await client.query(prompt)
                async for msg in client.receive_response():
                    if not isinstance(msg, AssistantMessage):
                        continue
                    for block in msg.content:
                        if isinstance(block, TextBlock) and block.text:
                            chunks.append(block.text)
                            if on_chunk is not None:
                                await on_chunk(block.text)
        except Exception as e:
            logger.error(f"Error generating insight: {e}")
            return ERROR_FALLBACK

        text = "".join(chunks).strip()
        return text or EMPTY_RESPONSE_FALLBACK
