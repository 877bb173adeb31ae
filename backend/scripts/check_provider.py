#!/usr/bin/env python3
"""
Check AI Provider Configuration
Sends one short summarize request through the configured provider.
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from notevault.core.config import AI_PROVIDER, OPENROUTER_MODEL, ANTHROPIC_MODEL
from notevault.api.exceptions import NoteVaultError
from notevault.services.ai_service import AIService

SAMPLE_NOTE = (
    "Meeting notes: we agreed to ship the editor auto-save first, "
    "then add AI summaries and tag suggestions in the next sprint."
)


async def check_provider(provider_type: str = None) -> bool:
    print("=" * 60)
    print("AI Provider Check")
    print("=" * 60)
    print(f"  Configured provider: {provider_type or AI_PROVIDER}")
    print(f"  OpenRouter model:    {OPENROUTER_MODEL}")
    print(f"  Anthropic model:     {ANTHROPIC_MODEL}")
    print()

    from notevault.services.providers import AIProviderFactory
    service = AIService(AIProviderFactory.get_provider(provider_type))
    print(f"✓ Using {type(service.provider).__name__}")

    try:
        summary = await service.summarize("Sprint planning", SAMPLE_NOTE)
    except NoteVaultError as e:
        print(f"✗ Request failed ({e.status_code}): {e.message}")
        return False

    print("✓ API call successful!")
    print(f"  Summary: {summary.strip()}")
    return True


if __name__ == "__main__":
    provider = sys.argv[1] if len(sys.argv) > 1 else None
    ok = asyncio.run(check_provider(provider))
    sys.exit(0 if ok else 1)
