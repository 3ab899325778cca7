# api/dependencies.py
"""
This module defines reusable dependencies for the API: access to the shared
clients built at startup, the caller's tag, and the mapping from core errors
to HTTP errors.
"""
import logging
from typing import Optional

from fastapi import Header, HTTPException, Request, status

from core.ai_orchestrator import DotaAssistant
from core.exceptions import ConfigurationError, DotaBotError, NotFoundError, UpstreamError
from services.dota_logic.api_client import OpenDotaClient
from services.movie_client import MovieClient

logger = logging.getLogger(__name__)


def get_dota_client(request: Request) -> OpenDotaClient:
    return request.app.state.dota_client


def get_movie_client(request: Request) -> MovieClient:
    return request.app.state.movie_client


def get_assistant(request: Request) -> DotaAssistant:
    """
    Returns the assistant, or answers 503 when OpenAI is not configured.
    """
    assistant: Optional[DotaAssistant] = getattr(request.app.state, "assistant", None)
    if assistant is None:
        logger.error("Assistant requested but OPENAI_API_KEY is not configured.")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="The AI assistant is not configured on the backend."
        )
    return assistant


async def get_user_tag(x_user_tag: Optional[str] = Header(default=None)) -> Optional[str]:
    """The messaging-platform tag of the caller, used only for logging."""
    return x_user_tag


def to_http_exception(error: DotaBotError, user_message: str) -> HTTPException:
    """
    Converts a core error into the HTTP error the client sees.

    `user_message` is shown for upstream failures; not-found and configuration
    errors carry their own message.
    """
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=error.message)
    if isinstance(error, ConfigurationError):
        return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=error.message)
    if isinstance(error, UpstreamError):
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=user_message)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=user_message)
