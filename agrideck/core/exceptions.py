"""
Exception hierarchy for the AgriDeck admin service.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any

QUOTA_EXCEEDED_MESSAGE = (
    "Quota exceeded. Please try again later or add billing to your Google Cloud project."
)


class AgriDeckError(Exception):
    """Base exception for all AgriDeck application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return the human-readable message (details stay in logs)."""
        return self.message


class ValidationError(AgriDeckError):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class EntityNotFoundError(AgriDeckError):
    """Raised when a row or draft cannot be found."""

    def __init__(self, kind: str, identifier: Any) -> None:
        super().__init__(f"{kind} not found: {identifier}", {"kind": kind, "id": str(identifier)})


class ConflictError(AgriDeckError):
    """Raised when a write collides with an existing unique row."""

    pass


class PersistenceError(AgriDeckError):
    """Raised when a batch write to the database fails part-way."""

    def __init__(
        self,
        message: str,
        applied: int = 0,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize persistence error.

        Args:
            message: Error message
            applied: Number of writes already committed before the failure
            details: Additional context
        """
        details = details or {}
        details["applied"] = applied
        self.applied = applied
        super().__init__(message, details)


class GeminiError(AgriDeckError):
    """Base exception for generative AI gateway failures."""

    pass


class GeminiNotConfiguredError(GeminiError):
    """Raised when no Gemini API key is configured."""

    def __init__(self) -> None:
        super().__init__("Gemini API is not configured. Please set GEMINI_API_KEY")


class QuotaExceededError(GeminiError):
    """Raised when the upstream quota is still exhausted after retries."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__(QUOTA_EXCEEDED_MESSAGE, details)


class ImageGenerationError(GeminiError):
    """Raised when the model returns no usable image."""

    pass
