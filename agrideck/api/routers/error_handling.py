"""
Router error handling utilities.

Decorators that map domain exceptions to HTTP responses, so every
endpoint logs and reports failures the same way.

- handle_admin_errors: raises HTTPException ({"detail": ...})
- handle_gemini_errors: returns JSONResponse({"error": ...}), the wire
  format the dashboard's AI calls expect
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from agrideck.core.exceptions import (
    AgriDeckError,
    ConflictError,
    EntityNotFoundError,
    QuotaExceededError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])

MISSING_FIELDS_MESSAGE = "Missing required fields"


def handle_admin_errors(func: F) -> F:
    """
    Decorator to transform domain errors into HTTPExceptions.

    ValidationError -> 400, EntityNotFoundError -> 404, ConflictError -> 409,
    QuotaExceededError -> 429, anything else -> 500.
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except EntityNotFoundError as e:
            logger.warning("Resource not found", extra={"error": str(e), **e.details})
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

        except ValidationError as e:
            logger.warning("Invalid request", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        except ConflictError as e:
            logger.warning("Conflicting write", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

        except QuotaExceededError as e:
            logger.warning("Gemini quota exhausted", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_429_TOO_MANY_REQUESTS, detail=str(e))

        except AgriDeckError as e:
            logger.error(
                f"Operation failed: {type(e).__name__}",
                extra={"error": str(e), **e.details},
            )
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

        except Exception as e:
            logger.exception("Unexpected failure in admin operation", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"An internal error occurred: {str(e)}",
            )

    return wrapper  # type: ignore


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def handle_gemini_errors(func: F) -> F:
    """
    Decorator to turn Gemini proxy failures into {"error": message} bodies.

    Bad input -> 400, exhausted quota -> 429, anything else -> 500 with
    the underlying message.
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except PydanticValidationError as e:
            logger.warning("Gemini request failed validation", extra={"error": str(e)})
            return _error(status.HTTP_400_BAD_REQUEST, MISSING_FIELDS_MESSAGE)

        except ValidationError as e:
            logger.warning("Invalid Gemini request", extra={"error": str(e)})
            return _error(status.HTTP_400_BAD_REQUEST, str(e))

        except QuotaExceededError as e:
            logger.warning("Gemini quota exhausted", extra={"error": str(e)})
            return _error(status.HTTP_429_TOO_MANY_REQUESTS, str(e))

        except Exception as e:
            logger.exception("Gemini request failed", extra={"error": str(e)})
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e) or "Failed to generate translation")

    return wrapper  # type: ignore
