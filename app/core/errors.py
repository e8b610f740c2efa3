"""
Mapping of Supabase / PostgREST errors to HTTP errors.
"""

from fastapi import HTTPException
from postgrest.exceptions import APIError
from typing import Optional
import logging

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"
NO_ROWS = "PGRST116"  # .single() matched zero rows


def is_unique_violation(exc: Exception) -> bool:
    return isinstance(exc, APIError) and exc.code == UNIQUE_VIOLATION


def is_not_found(exc: Exception) -> bool:
    return isinstance(exc, APIError) and exc.code == NO_ROWS


def to_http_exception(
    exc: Exception,
    not_found: str = "Not found",
    conflict: Optional[str] = None,
) -> HTTPException:
    """Translate an SDK exception raised inside a service into an HTTPException."""
    if isinstance(exc, HTTPException):
        return exc
    if is_not_found(exc):
        return HTTPException(status_code=404, detail=not_found)
    if is_unique_violation(exc):
        return HTTPException(status_code=409, detail=conflict or exc.message or "Already exists")
    if isinstance(exc, APIError):
        logger.error(f"Supabase API error ({exc.code}): {exc.message}")
        return HTTPException(status_code=500, detail=exc.message or str(exc))
    logger.error(f"Unexpected error: {exc}")
    return HTTPException(status_code=500, detail=str(exc))
