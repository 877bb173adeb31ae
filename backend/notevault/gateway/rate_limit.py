"""
Rate limiting for the AI routes.

Model calls cost money and the upstream provider has its own limits, so
each caller gets a per-minute budget.
"""
from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from ..core.config import RATE_LIMIT_ENABLED
from ..core.logging_config import get_logger

logger = get_logger(__name__)


def get_rate_limit_key(request: Request) -> str:
    """
    Get rate limit key for request.

    Authenticated requests are limited per user; anything else per IP.
    """
    user = getattr(request.state, "user", None)
    if user is not None:
        return f"user:{user.id}"

    return get_remote_address(request)


limiter = Limiter(
    key_func=get_rate_limit_key,
    enabled=RATE_LIMIT_ENABLED
)
