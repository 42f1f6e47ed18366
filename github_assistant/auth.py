# github_assistant/auth.py
import logging

from fastapi import Request

from .config import Settings
from .errors import AuthorizationError

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-api-key"


def authorize(request: Request, settings: Settings) -> bool:
    provided = request.headers.get(API_KEY_HEADER)
    return bool(provided) and settings.api_key is not None and provided == settings.api_key


def require_api_key(request: Request) -> None:
    """Dependency for protected routes. Runs before the route touches GitHub."""
    if not authorize(request, request.app.state.settings):
        client_ip = request.client.host if request.client else "unknown"
        logger.warning("Rejected %s %s from %s: bad API key", request.method, request.url.path, client_ip)
        raise AuthorizationError("Unauthorized - Invalid API key")
