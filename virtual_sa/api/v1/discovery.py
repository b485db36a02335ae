"""
Discovery Accelerator API Endpoints
"""
from typing import List

import httpx
from fastapi import APIRouter, Depends, HTTPException, status
import structlog

from ...data.blueprints import BLUEPRINTS
from ...dependencies import get_discovery_service
from ...exceptions import (
    LLMError,
    MissingCredentialError,
    PromptRejectedError,
    UpstreamAPIError,
)
from ...models.schemas import (
    BlueprintInfo,
    BlueprintMatchRequest,
    BlueprintRecommendation,
    ChatRequest,
    ChatResponse,
    CostEstimateRequest,
    CostEstimateResponse,
    ErrorResponse,
    GenerateRequest,
    GenerateResponse,
    GuardRequest,
    GuardResponse,
)
from ...services.blueprint_matcher import BlueprintMatch, match_blueprints
from ...services.discovery_service import DiscoveryService, scale_monthly_cost
from ...services.prompt_guard import check_prompt
from ...services.prompts import EXAMPLE_PROMPTS

logger = structlog.get_logger()
router = APIRouter()

INVALID_KEY_MESSAGE = "Missing or invalid NVIDIA API key. Set NVIDIA_API_KEY in .env."

LLM_ERROR_RESPONSES = {
    422: {"model": ErrorResponse, "description": "Prompt rejected by the off-topic guard"},
    500: {"model": ErrorResponse, "description": "NVIDIA API key missing or invalid"},
    502: {"model": ErrorResponse, "description": "Upstream LLM failure"},
}


def llm_http_error(exc: Exception, failure_prefix: str) -> HTTPException:
    """Map an LLM-side failure to the HTTP error the client sees"""
    if isinstance(exc, MissingCredentialError):
        return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INVALID_KEY_MESSAGE)
    if isinstance(exc, UpstreamAPIError):
        if exc.status_code == 401:
            return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INVALID_KEY_MESSAGE)
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=f"{failure_prefix}: {exc}")


def to_recommendation(match: BlueprintMatch) -> BlueprintRecommendation:
    return BlueprintRecommendation(
        id=match.blueprint.id,
        title=match.blueprint.title,
        summary=match.blueprint.summary,
        score=match.score,
        matched_keywords=match.matched_keywords,
    )


@router.get(
    "/examples",
    response_model=List[str],
    summary="Example prompts"
)
async def list_examples():
    return EXAMPLE_PROMPTS


@router.post(
    "/guard",
    response_model=GuardResponse,
    summary="Check a prompt",
    description="Run the off-topic guard without calling the LLM"
)
async def guard_prompt(request: GuardRequest):
    result = check_prompt(request.prompt)
    return GuardResponse(
        accepted=result.accepted,
        reason=result.reason,
        message=result.message,
        matched=result.matched,
    )


@router.post(
    "/generate",
    response_model=GenerateResponse,
    summary="Generate architecture",
    description="Draft architecture variants and a Solution Architecture Document for a use case",
    responses=LLM_ERROR_RESPONSES
)
async def generate_architecture(
    request: GenerateRequest,
    service: DiscoveryService = Depends(get_discovery_service),
):
    try:
        result = await service.generate_architecture(request.prompt, session_id=request.session_id)
    except PromptRejectedError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.message)
    except (LLMError, httpx.HTTPError) as e:
        logger.error("Architecture generation failed", error=str(e), error_type=type(e).__name__)
        raise llm_http_error(e, "Architecture generation failed")

    logger.info(
        "Architecture generated",
        title=result.architecture.use_case_title,
        variants=len(result.architecture.variants),
        blueprints=len(result.blueprints),
        stale=result.stale,
    )
    return GenerateResponse(
        architecture=result.architecture,
        blueprints=[to_recommendation(m) for m in result.blueprints],
        generation_token=result.generation_token,
        stale=result.stale,
        created_at=result.created_at,
    )


@router.post(
    "/chat",
    response_model=ChatResponse,
    summary="Chat about a SAD",
    description="Answer a follow-up question grounded in a generated architecture",
    responses=LLM_ERROR_RESPONSES
)
async def chat_with_sad(
    request: ChatRequest,
    service: DiscoveryService = Depends(get_discovery_service),
):
    try:
        result = await service.chat(request.sad_context, request.messages, session_id=request.session_id)
    except (LLMError, httpx.HTTPError) as e:
        logger.error("SAD chat failed", error=str(e), error_type=type(e).__name__)
        raise llm_http_error(e, "Chat failed")

    return ChatResponse(reply=result.reply, generation_token=result.generation_token, stale=result.stale)


@router.get(
    "/blueprints",
    response_model=List[BlueprintInfo],
    summary="List blueprints"
)
async def list_blueprints():
    return [
        BlueprintInfo(id=b.id, title=b.title, summary=b.summary, keywords=list(b.keywords))
        for b in BLUEPRINTS
    ]


@router.post(
    "/blueprints",
    response_model=List[BlueprintRecommendation],
    summary="Recommend blueprints",
    description="Match a SAD title and overview against the blueprint catalog"
)
async def recommend_blueprints(request: BlueprintMatchRequest):
    return [to_recommendation(m) for m in match_blueprints(request.use_case_title, request.overview)]


@router.post(
    "/cost-estimate",
    response_model=CostEstimateResponse,
    summary="Scale a variant's monthly cost",
    responses={400: {"model": ErrorResponse, "description": "Multiplier out of range"}}
)
async def estimate_cost(request: CostEstimateRequest):
    try:
        estimate = scale_monthly_cost(request.variant, request.multiplier)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return CostEstimateResponse(
        variant_name=estimate.variant_name,
        multiplier=estimate.multiplier,
        monthly_cost=estimate.monthly_cost,
        queries_per_day_label=estimate.queries_per_day_label,
    )
