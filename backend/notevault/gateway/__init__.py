"""
API Gateway Module

Single entry point for all API requests:
- Middleware (request ids, logging, CORS)
- Error envelopes
- Rate limiting
- Router registration and health checks
"""
from .gateway import APIGateway
from .rate_limit import limiter

__all__ = ["APIGateway", "limiter"]
