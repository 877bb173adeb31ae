"""
Response Reconciler - turns raw completions into AI results and decides
where they go.

Summary and Tags results are cached on the page. Improved and generated text
is handed back untouched so the user can review it before inserting.
"""
from dataclasses import dataclass
from typing import Optional

from ..api.exceptions import AIEmptyResponseError, TagParseError
from ..domain.entities import AIResult, Summary, ImprovedText, Tags, GeneratedText
from ..domain.value_objects import AIFeature, OwnerId, PageId
from ..repositories.interfaces import IPageRepository
from ..utils.tag_parser import parse_tags
from ..core.logging_config import get_logger

logger = get_logger(__name__)

CACHE_WARNING = "Result generated but could not be saved to the page"


@dataclass
class ReconcileOutcome:
    result: AIResult
    persisted: bool = False
    warning: Optional[str] = None


def to_result(feature: AIFeature, raw: Optional[str]) -> AIResult:
    """
    Parse raw model output into the result type for ``feature``.

    Raises:
        AIEmptyResponseError: Text features with nothing left after trimming
        TagParseError: No usable tags in the output
    """
    if feature is AIFeature.TAGS:
        tags = parse_tags(raw)
        if not tags:
            logger.warning(f"No tags recovered from model output: {raw!r}")
            raise TagParseError()
        return Tags(tags)

    text = (raw or "").strip()
    if not text:
        raise AIEmptyResponseError()

    if feature is AIFeature.SUMMARIZE:
        return Summary(text)
    if feature is AIFeature.IMPROVE:
        return ImprovedText(text)
    return GeneratedText(text)


class ResponseReconciler:
    """Parses AI output and persists the cacheable kinds."""

    def __init__(self, page_repo: IPageRepository):
        self._repo = page_repo

    async def reconcile(
        self,
        feature: AIFeature,
        raw: Optional[str],
        owner_id: OwnerId,
        page_id: Optional[PageId] = None
    ) -> ReconcileOutcome:
        result = to_result(feature, raw)

        if isinstance(result, Summary):
            fields = {"summary": result.text}
        elif isinstance(result, Tags):
            fields = {"tags": list(result.tags)}
        else:
            return ReconcileOutcome(result)

        if not page_id:
            return ReconcileOutcome(result, warning=CACHE_WARNING)

        # The caller already has a good result; a failed cache write is only a warning
        try:
            page = await self._repo.update(owner_id, page_id, fields)
        except Exception as e:
            logger.error(f"Failed to cache {feature.value} for page {page_id}: {e}", exc_info=True)
            return ReconcileOutcome(result, warning=CACHE_WARNING)

        if page is None:
            logger.warning(f"Page {page_id} disappeared before {feature.value} could be cached")
            return ReconcileOutcome(result, warning=CACHE_WARNING)

        logger.info(f"Cached {feature.value} on page {page_id}")
        return ReconcileOutcome(result, persisted=True)
