"""
Assist Service - AI features as the HTTP layer sees them.

Coordinates the page store, the AI orchestrator and the reconciler:
    1. Check the target page belongs to the caller (features that cache)
    2. Ask the AI service for a completion
    3. Hand the raw output to the reconciler
"""
from typing import Optional

from .ai_service import AIService
from .reconciler import ResponseReconciler, ReconcileOutcome
from ..api.exceptions import PageNotFoundError
from ..domain.value_objects import AIFeature, OwnerId, PageId
from ..repositories.interfaces import IPageRepository
from ..utils import validators
from ..core.logging_config import get_logger

logger = get_logger(__name__)


class AssistService:
    """
    Runs one AI feature end to end for an authenticated owner.
    """

    def __init__(self, ai_service: AIService, page_repo: IPageRepository):
        self._ai = ai_service
        self._repo = page_repo
        self._reconciler = ResponseReconciler(page_repo)

    async def _require_page(self, owner_id: OwnerId, page_id: PageId) -> None:
        if await self._repo.find_one(owner_id, page_id) is None:
            raise PageNotFoundError()

    async def summarize(
        self,
        owner_id: OwnerId,
        page_id: Optional[PageId],
        content: Optional[str],
        title: Optional[str] = None
    ) -> ReconcileOutcome:
        validators.require_page_content(page_id, content)
        validators.validate_summarize(content)
        await self._require_page(owner_id, page_id)

        raw = await self._ai.summarize(title, content)
        return await self._reconciler.reconcile(AIFeature.SUMMARIZE, raw, owner_id, page_id)

    async def generate_tags(
        self,
        owner_id: OwnerId,
        page_id: Optional[PageId],
        content: Optional[str],
        title: Optional[str] = None
    ) -> ReconcileOutcome:
        validators.require_page_content(page_id, content)
        validators.validate_tags(content)
        await self._require_page(owner_id, page_id)

        raw = await self._ai.generate_tags(title, content)
        return await self._reconciler.reconcile(AIFeature.TAGS, raw, owner_id, page_id)

    async def improve(
        self,
        owner_id: OwnerId,
        content: Optional[str],
        selection: Optional[str] = None
    ) -> ReconcileOutcome:
        raw = await self._ai.improve(content, selection)
        return await self._reconciler.reconcile(AIFeature.IMPROVE, raw, owner_id)

    async def generate(
        self,
        owner_id: OwnerId,
        prompt: Optional[str],
        title: Optional[str] = None,
        content: Optional[str] = None
    ) -> ReconcileOutcome:
        raw = await self._ai.generate(prompt, title, content)
        return await self._reconciler.reconcile(AIFeature.GENERATE, raw, owner_id)
