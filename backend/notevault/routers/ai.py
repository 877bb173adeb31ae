"""
AI Router - summarize, improve, generate tags, generate content.

Each route:
    1. Validates the request body
    2. Runs the feature through the assist service (one model call)
    3. Returns the result; summary and tags are also cached on the page

Improved and generated text is never saved here; the user reviews it first.
"""
from fastapi import APIRouter, Depends, Request

from .dependencies import get_assist_service
from ..api.dto import (
    SummarizeRequest,
    ImproveRequest,
    TagsRequest,
    GenerateRequest,
    AIResultDTO,
    envelope,
)
from ..core.auth import CurrentUser, get_current_user
from ..core.config import RATE_LIMIT_PER_MINUTE
from ..domain.entities import Summary, Tags, result_value
from ..gateway.rate_limit import limiter
from ..services.assist_service import AssistService
from ..services.reconciler import ReconcileOutcome
from ..core.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/ai", dependencies=[Depends(get_current_user)])

_ai_limit = limiter.limit(f"{RATE_LIMIT_PER_MINUTE}/minute")


def _respond(outcome: ReconcileOutcome):
    cached = outcome.persisted if isinstance(outcome.result, (Summary, Tags)) else None
    data = AIResultDTO(result=result_value(outcome.result), cached=cached)
    return envelope(data.model_dump(exclude_none=True), message=outcome.warning)


@router.post("/summarize")
@_ai_limit
async def summarize(
    request: Request,
    body: SummarizeRequest,
    user: CurrentUser = Depends(get_current_user),
    assist: AssistService = Depends(get_assist_service)
):
    outcome = await assist.summarize(user.id, body.pageId, body.content, body.title)
    return _respond(outcome)


@router.post("/improve")
@_ai_limit
async def improve(
    request: Request,
    body: ImproveRequest,
    user: CurrentUser = Depends(get_current_user),
    assist: AssistService = Depends(get_assist_service)
):
    outcome = await assist.improve(user.id, body.content, body.selection)
    return _respond(outcome)


@router.post("/tags")
@_ai_limit
async def generate_tags(
    request: Request,
    body: TagsRequest,
    user: CurrentUser = Depends(get_current_user),
    assist: AssistService = Depends(get_assist_service)
):
    outcome = await assist.generate_tags(user.id, body.pageId, body.content, body.title)
    return _respond(outcome)


@router.post("/generate")
@_ai_limit
async def generate(
    request: Request,
    body: GenerateRequest,
    user: CurrentUser = Depends(get_current_user),
    assist: AssistService = Depends(get_assist_service)
):
    outcome = await assist.generate(user.id, body.prompt, body.title, body.content)
    return _respond(outcome)
