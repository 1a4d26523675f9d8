"""
API key authentication for protected endpoints.
"""

import logging
import secrets

from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyHeader

from .config import Settings, get_settings

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-api-key"

api_key_header = APIKeyHeader(name=API_KEY_HEADER, auto_error=False)


def is_valid_api_key(provided: str | None, expected: str | None) -> bool:
    """
    Check a client-supplied key against the configured secret.

    A missing or empty configured secret never matches.
    """
    if not expected or provided is None:
        return False
    return secrets.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


async def require_api_key(
    api_key: str | None = Depends(api_key_header),
    settings: Settings = Depends(get_settings),
) -> None:
    """
    Dependency that rejects requests without the shared secret.

    Usage in FastAPI:
        @router.post("/extract", dependencies=[Depends(require_api_key)])

    Raises:
        HTTPException: 401 if the x-api-key header does not match.
    """
    if not is_valid_api_key(api_key, settings.api_key):
        if not settings.api_key:
            logger.warning("Rejected request: API_KEY is not configured")
        else:
            logger.warning("Rejected request with missing or invalid API key")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
