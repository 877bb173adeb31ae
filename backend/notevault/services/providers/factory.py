"""
AI Provider Factory.

Manages provider selection and initialization based on configuration.
Uses the Factory pattern to provide plug-and-play AI provider support.
"""
from ...core.config import (
    OPENROUTER_API_KEY,
    ANTHROPIC_API_KEY,
    AI_PROVIDER
)
from ...core.logging_config import get_logger
from .base import AIProvider
from .openrouter_provider import OpenRouterProvider
from .anthropic_provider import AnthropicProvider
from .mock_provider import MockProvider

logger = get_logger(__name__)


class AIProviderFactory:
    """
    Factory for creating AI provider instances.

    Automatically selects the appropriate provider based on:
    1. AI_PROVIDER configuration
    2. Available API keys
    3. Fallback to MockProvider if no keys available
    """

    @staticmethod
    def get_provider(provider_type: str = None) -> AIProvider:
        """
        Get the appropriate AI provider based on configuration.

        Returns:
            AIProvider instance (OpenRouterProvider, AnthropicProvider, or MockProvider)
        """
        provider_type = (provider_type or AI_PROVIDER).lower()

        if provider_type == "mock":
            logger.info("Using MockProvider (configured)")
            return MockProvider()

        if provider_type == "anthropic" and ANTHROPIC_API_KEY:
            logger.info("Using Anthropic provider")
            return AnthropicProvider()
        if provider_type == "openrouter" and OPENROUTER_API_KEY:
            logger.info("Using OpenRouter provider")
            return OpenRouterProvider()

        if provider_type not in ("anthropic", "openrouter"):
            logger.warning(f"Unknown provider '{provider_type}', checking available API keys...")
        else:
            logger.warning(f"{provider_type} API key not configured, checking alternatives...")

        # Fall back to whichever key is available
        if OPENROUTER_API_KEY:
            logger.info("Auto-selecting OpenRouter provider")
            return OpenRouterProvider()
        if ANTHROPIC_API_KEY:
            logger.info("Auto-selecting Anthropic provider")
            return AnthropicProvider()

        logger.warning("No API keys configured, using MockProvider")
        return MockProvider()
