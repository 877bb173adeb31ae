"""
Mock AI Provider.

Provides canned responses for development and fallback scenarios.
Does not make actual API calls.
"""
from typing import Dict, List, Optional
import json
from ...core.logging_config import get_logger
from .base import AIProvider

logger = get_logger(__name__)


class MockProvider(AIProvider):
    """
    Mock AI Provider for offline development.

    Looks at the system prompt to guess which feature is asking and answers
    in the expected shape.
    """

    def complete(
        self,
        messages: List[Dict[str, str]],
        max_tokens: int,
        temperature: float
    ) -> Optional[str]:
        system = next((m["content"] for m in messages if m["role"] == "system"), "")
        user = next((m["content"] for m in messages if m["role"] == "user"), "")

        if "JSON array" in system:
            words = []
            for word in user.lower().split():
                if len(word) > 4 and word.isalpha() and word not in words:
                    words.append(word)
                if len(words) >= 5:
                    break
            return json.dumps(words or ["notes"])
        if "summarizer" in system:
            return "This is a MOCK summary. The note appears to be about: " + user[:100]
        if "Please improve this text:" in user:
            return user.split("Please improve this text:", 1)[1].strip()
        return "This is MOCK generated content for: " + user[:100]
