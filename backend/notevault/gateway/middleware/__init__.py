"""
Gateway Middleware Module
"""
from .request_logging import RequestLoggingMiddleware
from .request_id import RequestIDMiddleware

__all__ = [
    "RequestLoggingMiddleware",
    "RequestIDMiddleware",
]
