import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from core.exceptions import AuthError
from .utils import verify_api_key

logger = logging.getLogger(__name__)

api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def require_api_key(request: Request, api_key: Optional[str] = Depends(api_key_header)) -> str:
    settings = request.app.state.settings

    if not verify_api_key(api_key, settings.api_key):
        client_host = request.client.host if request.client else "unknown"
        logger.warning(f"Unauthorized access attempt from {client_host}")
        raise AuthError("Unauthorized: Missing or invalid API key")
    return api_key
