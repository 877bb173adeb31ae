"""
Base AI Provider Interface.

All AI providers must inherit from this base class and implement
all abstract methods.
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple, Type


class AIProvider(ABC):
    """
    Abstract base class for AI providers.

    A provider turns a role-structured message list into one completion.
    It does not retry and keeps no conversation state.
    """

    #: SDK exception types that mean "slow down" for this provider
    rate_limit_errors: Tuple[Type[BaseException], ...] = ()

    @abstractmethod
    def complete(
        self,
        messages: List[Dict[str, str]],
        max_tokens: int,
        temperature: float
    ) -> Optional[str]:
        """
        Run a single chat completion.

        Args:
            messages: ``[{"role": ..., "content": ...}]``, system message first
            max_tokens: Completion token cap
            temperature: Sampling temperature

        Returns:
            The completion text, or None/"" when the model produced nothing
        """
        pass

    def is_rate_limited(self, error: BaseException) -> bool:
        """Whether ``error`` is the provider telling us to back off."""
        if self.rate_limit_errors and isinstance(error, self.rate_limit_errors):
            return True
        if getattr(error, "status_code", None) == 429:
            return True
        return "rate limit" in str(error).lower()
