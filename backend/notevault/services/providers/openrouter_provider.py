"""
OpenRouter AI Provider.

Provides AI capabilities using the OpenRouter API, which speaks the OpenAI
chat-completions protocol and fronts many models.
"""
from typing import Dict, List, Optional
import openai
from openai import OpenAI
from ...core.config import (
    OPENROUTER_API_KEY,
    OPENROUTER_BASE_URL,
    OPENROUTER_MODEL,
    APP_URL,
    APP_TITLE,
)
from ...core.logging_config import get_logger
from .base import AIProvider

logger = get_logger(__name__)


class OpenRouterProvider(AIProvider):
    """
    AI Provider using OpenRouter API.

    The OpenAI client is created once and reused for every request.
    """

    rate_limit_errors = (openai.RateLimitError,)

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        """Initialize OpenRouter provider with API key."""
        self.api_key = api_key or OPENROUTER_API_KEY
        self.model = model or OPENROUTER_MODEL
        if self.api_key:
            self.client = OpenAI(
                base_url=OPENROUTER_BASE_URL,
                api_key=self.api_key,
                default_headers={
                    # Used for rankings on openrouter.ai
                    "HTTP-Referer": APP_URL,
                    "X-Title": APP_TITLE,
                },
            )
        else:
            self.client = None

    def complete(
        self,
        messages: List[Dict[str, str]],
        max_tokens: int,
        temperature: float
    ) -> Optional[str]:
        if not self.client:
            raise ValueError("OpenRouter API key not configured")

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                max_tokens=max_tokens,
                temperature=temperature,
            )
        except Exception as e:
            logger.error(f"OpenRouter API Error: {e}")
            raise

        if not response.choices:
            return None
        choice = response.choices[0]
        logger.debug(f"OpenRouter finish_reason: {choice.finish_reason}")
        return choice.message.content if choice.message else None
