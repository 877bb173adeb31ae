"""
Custom exceptions for API layer.
Separates business exceptions from HTTP exceptions.
"""
from fastapi import HTTPException, status


class NoteVaultError(Exception):
    """Base class for business errors that map onto an HTTP status."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Something went wrong"

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class ValidationError(NoteVaultError):
    """Raised when caller input fails a precondition."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class AIValidationError(ValidationError):
    """Raised when an AI request is rejected before reaching the provider."""
    pass


class UnauthorizedError(NoteVaultError):
    """Raised when the caller has no valid session."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized. Please log in to continue."


class PageNotFoundError(NoteVaultError):
    """Raised when a page is missing or owned by someone else."""
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Page not found"


class AIRateLimitError(NoteVaultError):
    """Raised when the AI provider rate-limits us."""
    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    default_message = "AI rate limit reached. Please try again in a moment."


class AIProviderError(NoteVaultError):
    """Raised when the AI provider call fails for any other reason."""
    default_message = "AI request failed"


class AIEmptyResponseError(NoteVaultError):
    """Raised when the provider answered but produced no text."""
    default_message = "AI returned an empty response"


class TagParseError(NoteVaultError):
    """Raised when no usable tags can be recovered from model output."""
    default_message = "AI could not generate tags"


class PersistenceError(NoteVaultError):
    """Raised when a store write fails."""
    default_message = "Failed to save page"


def handle_business_exception(e: Exception) -> HTTPException:
    """
    Convert business exceptions to HTTP exceptions.
    This keeps business logic clean of HTTP concerns.
    """
    if isinstance(e, NoteVaultError):
        return HTTPException(status_code=e.status_code, detail=e.message)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error"
    )
