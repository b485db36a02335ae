"""
Discovery Accelerator: prompt -> architecture draft -> follow-up chat
"""
import json
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Sequence

import structlog
from pydantic import ValidationError

from ..config import COST_MULTIPLIER_CONFIG, Settings
from ..exceptions import ArchitectureParseError, PromptRejectedError
from ..models.schemas import ArchitectureResponse, ArchVariant, ChatMessage
from .blueprint_matcher import BlueprintMatch, match_blueprints
from .cost_model import round_half_up
from .llm_client import NvidiaClient, first_choice_content
from .prompt_guard import check_prompt
from .prompts import ARCHITECTURE_SYSTEM_PROMPT, CHAT_FALLBACK_REPLY, build_chat_system_prompt
from .request_tracking import RequestSequencer

logger = structlog.get_logger()

_FENCE_START = re.compile(r"^```(?:json)?\n?")
_FENCE_END = re.compile(r"\n?```$")


def strip_code_fences(content: str) -> str:
    content = content.strip()
    content = _FENCE_START.sub("", content)
    content = _FENCE_END.sub("", content)
    return content.strip()


def parse_architecture(content: str) -> ArchitectureResponse:
    """Decode a model reply into an ArchitectureResponse"""
    cleaned = strip_code_fences(content)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ArchitectureParseError(f"Model returned invalid JSON: {e.msg}", raw_content=content) from e

    if not isinstance(data, dict):
        raise ArchitectureParseError("Model returned JSON that is not an object", raw_content=content)

    try:
        return ArchitectureResponse.model_validate(data)
    except ValidationError as e:
        raise ArchitectureParseError(
            f"Model reply does not match the architecture schema ({e.error_count()} errors)",
            raw_content=content,
        ) from e


@dataclass
class GenerationResult:
    architecture: ArchitectureResponse
    blueprints: List[BlueprintMatch]
    generation_token: Optional[int] = None
    stale: bool = False
    created_at: datetime = field(default_factory=datetime.now)


@dataclass
class ChatResult:
    reply: str
    generation_token: Optional[int] = None
    stale: bool = False


@dataclass(frozen=True)
class CostEstimate:
    variant_name: str
    multiplier: float
    monthly_cost: int
    queries_per_day_label: str


def scale_monthly_cost(variant: ArchVariant, multiplier: float) -> CostEstimate:
    """Scale a variant's monthly cost by a query-volume multiplier"""
    low = COST_MULTIPLIER_CONFIG["min"]
    high = COST_MULTIPLIER_CONFIG["max"]
    step = COST_MULTIPLIER_CONFIG["step"]

    if not low <= multiplier <= high:
        raise ValueError(f"Multiplier must be between {low} and {high}")
    steps = multiplier / step
    if abs(steps - round(steps)) > 1e-9:
        raise ValueError(f"Multiplier must be a multiple of {step}")

    base = variant.estimated_monthly_cost or COST_MULTIPLIER_CONFIG["default_monthly_cost"]
    volume = round_half_up(multiplier * COST_MULTIPLIER_CONFIG["queries_per_day_at_1x"])
    return CostEstimate(
        variant_name=variant.variant_name,
        multiplier=multiplier,
        monthly_cost=round_half_up(base * multiplier),
        queries_per_day_label=f"{volume}K/day",
    )


class DiscoveryService:
    """Runs guarded architecture generation and SAD-grounded chat"""

    GENERATE = "generate"
    CHAT = "chat"

    def __init__(self, client: NvidiaClient, settings: Settings, sequencer: Optional[RequestSequencer] = None):
        self.client = client
        self.settings = settings
        self.sequencer = sequencer or RequestSequencer(settings.REQUEST_TRACKING_MAX_SESSIONS)

    async def _issue(self, session_id: Optional[str], operation: str) -> Optional[int]:
        if session_id is None:
            return None
        return await self.sequencer.issue(session_id, operation)

    def _is_stale(self, session_id: Optional[str], operation: str, token: Optional[int]) -> bool:
        if session_id is None or token is None:
            return False
        return not self.sequencer.is_current(session_id, operation, token)

    async def generate_architecture(self, prompt: str, session_id: Optional[str] = None) -> GenerationResult:
        """
        Draft an architecture for a free-text use case.

        The guard runs first; a rejected prompt raises PromptRejectedError
        without any network call.
        """
        verdict = check_prompt(prompt)
        if not verdict.accepted:
            raise PromptRejectedError(verdict.reason, verdict.message)

        token = await self._issue(session_id, self.GENERATE)
        logger.info("Generating architecture", session_id=session_id, generation_token=token)

        completion = await self.client.create_chat_completion(
            messages=[
                {"role": "system", "content": ARCHITECTURE_SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            temperature=self.settings.ARCHITECTURE_TEMPERATURE,
            max_tokens=self.settings.ARCHITECTURE_MAX_TOKENS,
            operation="generate_architecture",
        )
        content = first_choice_content(completion) or "{}"
        architecture = parse_architecture(content)

        blueprints = match_blueprints(architecture.use_case_title, architecture.sad.overview)
        stale = self._is_stale(session_id, self.GENERATE, token)
        if stale:
            logger.info("Architecture response superseded", session_id=session_id, generation_token=token)

        return GenerationResult(
            architecture=architecture,
            blueprints=blueprints,
            generation_token=token,
            stale=stale,
        )

    async def chat(
        self,
        sad_context: ArchitectureResponse,
        messages: Sequence[ChatMessage],
        session_id: Optional[str] = None,
    ) -> ChatResult:
        token = await self._issue(session_id, self.CHAT)

        payload = [{"role": "system", "content": build_chat_system_prompt(sad_context)}]
        payload.extend({"role": m.role.value, "content": m.content} for m in messages)

        completion = await self.client.create_chat_completion(
            messages=payload,
            temperature=self.settings.CHAT_TEMPERATURE,
            max_tokens=self.settings.CHAT_MAX_TOKENS,
            operation="chat",
            error_label="Chat API error",
            include_body=False,
        )
        reply = first_choice_content(completion) or CHAT_FALLBACK_REPLY

        return ChatResult(
            reply=reply,
            generation_token=token,
            stale=self._is_stale(session_id, self.CHAT, token),
        )
