"""
AI Service - builds feature prompts, calls the provider once, classifies failures.

The service never parses or persists results; see ``reconciler.py`` for that.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional

from starlette.concurrency import run_in_threadpool

from .providers import AIProvider, AIProviderFactory
from .prompts import (
    get_summarize_prompt,
    get_improve_prompt,
    get_tags_prompt,
    get_generate_prompt,
)
from ..api.exceptions import AIRateLimitError, AIProviderError, AIEmptyResponseError
from ..domain.value_objects import AIFeature, DEFAULT_TITLE
from ..utils import validators
from ..core.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FeatureSettings:
    max_tokens: int
    temperature: float
    failure_message: str


FEATURE_SETTINGS: Dict[AIFeature, FeatureSettings] = {
    AIFeature.SUMMARIZE: FeatureSettings(200, 0.3, "Failed to generate summary"),
    AIFeature.IMPROVE: FeatureSettings(2000, 0.4, "Failed to improve text"),
    AIFeature.TAGS: FeatureSettings(100, 0.3, "Failed to generate tags"),
    AIFeature.GENERATE: FeatureSettings(1500, 0.7, "Failed to generate content"),
}


class AIService:
    """
    AI request orchestrator.

    Each public method validates its input, builds the feature prompt and
    issues exactly one completion request. Validation failures raise before
    the provider is touched.
    """

    def __init__(self, provider: Optional[AIProvider] = None):
        self.provider = provider or AIProviderFactory.get_provider()
        logger.info(f"Initialized AIService with provider: {type(self.provider).__name__}")

    async def summarize(self, title: Optional[str], content: str) -> str:
        validators.validate_summarize(content)
        return await self._complete(
            AIFeature.SUMMARIZE,
            get_summarize_prompt(title or DEFAULT_TITLE, content),
        )

    async def improve(self, content: Optional[str], selection: Optional[str] = None) -> str:
        validators.validate_improve(content, selection)
        return await self._complete(
            AIFeature.IMPROVE,
            get_improve_prompt(content or "", selection),
        )

    async def generate_tags(self, title: Optional[str], content: str) -> str:
        validators.validate_tags(content)
        return await self._complete(
            AIFeature.TAGS,
            get_tags_prompt(title or DEFAULT_TITLE, content),
        )

    async def generate(
        self,
        prompt: str,
        title: Optional[str] = None,
        content: Optional[str] = None
    ) -> str:
        validators.validate_generate(prompt)
        return await self._complete(
            AIFeature.GENERATE,
            get_generate_prompt(prompt, title, content),
        )

    async def _complete(self, feature: AIFeature, messages: List[Dict[str, str]]) -> str:
        """
        Send one completion request and classify what comes back.

        Raises:
            AIRateLimitError: Provider rate-limited the request
            AIProviderError: Any other provider failure
            AIEmptyResponseError: Provider answered with no text
        """
        settings = FEATURE_SETTINGS[feature]
        logger.debug(
            f"AI {feature.value}: sending {sum(len(m['content']) for m in messages)} prompt chars"
        )

        try:
            # SDK clients are blocking; keep the event loop free
            raw = await run_in_threadpool(
                self.provider.complete,
                messages,
                settings.max_tokens,
                settings.temperature,
            )
        except Exception as e:
            if self.provider.is_rate_limited(e):
                logger.warning(f"AI {feature.value} rate limited: {e}")
                raise AIRateLimitError() from e
            logger.error(f"AI {feature.value} failed: {e}", exc_info=True)
            raise AIProviderError(settings.failure_message) from e

        if not raw or not raw.strip():
            logger.warning(f"AI {feature.value} returned an empty completion")
            raise AIEmptyResponseError()

        logger.debug(f"AI {feature.value}: received {len(raw)} chars")
        return raw
