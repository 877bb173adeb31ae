"""
Anthropic AI Provider.

Provides AI capabilities using Anthropic's Claude API directly.
"""
from typing import Dict, List, Optional
import anthropic
from ...core.config import ANTHROPIC_API_KEY, ANTHROPIC_MODEL
from ...core.logging_config import get_logger
from .base import AIProvider

logger = get_logger(__name__)


class AnthropicProvider(AIProvider):
    """
    AI Provider using Anthropic Claude API directly.

    Claude takes the system prompt as a separate argument, so the leading
    system message is lifted out of the message list.
    """

    rate_limit_errors = (anthropic.RateLimitError,)

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        """Initialize Anthropic provider with API key."""
        self.api_key = api_key or ANTHROPIC_API_KEY
        self.model = model or ANTHROPIC_MODEL
        if self.api_key:
            self.client = anthropic.Anthropic(api_key=self.api_key)
        else:
            self.client = None

    def complete(
        self,
        messages: List[Dict[str, str]],
        max_tokens: int,
        temperature: float
    ) -> Optional[str]:
        if not self.client:
            raise ValueError("Anthropic API key not configured")

        system = "\n\n".join(m["content"] for m in messages if m["role"] == "system")
        chat = [m for m in messages if m["role"] != "system"]

        try:
            message = self.client.messages.create(
                model=self.model,
                system=system,
                messages=chat,
                max_tokens=max_tokens,
                temperature=temperature,
            )
        except Exception as e:
            logger.error(f"Anthropic API Error: {e}")
            raise

        logger.debug(f"Anthropic stop_reason: {message.stop_reason}")
        return "".join(
            block.text for block in message.content if getattr(block, "type", None) == "text"
        )
