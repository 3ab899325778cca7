# services/upstream.py
"""
This module is solely responsible for making the raw GET requests to the
external data providers and classifying what comes back.

Nothing here retries: a failure is logged once and surfaced to the caller as
one of the typed errors from `core.exceptions`.
"""
import logging
from typing import Any, Dict, Optional

import httpx

from core.exceptions import NotFoundError, ParseError, UpstreamError

logger = logging.getLogger(__name__)


async def get_json(
        client: httpx.AsyncClient,
        url: str,
        *,
        provider: str,
        params: Optional[Dict[str, Any]] = None,
        not_found_message: Optional[str] = None,
) -> Any:
    """
    Performs an asynchronous GET request and returns the decoded JSON body.

    Args:
        client (httpx.AsyncClient): The shared HTTP client.
        url (str): Absolute URL of the resource.
        provider (str): Human-readable provider name used in errors and logs.
        params (Optional[Dict[str, Any]]): Query-string parameters.
        not_found_message (Optional[str]): When given, a 404 is reported as a
            NotFoundError with this message instead of a generic UpstreamError.

    Raises:
        UpstreamError: The provider could not be reached or answered non-2xx.
        NotFoundError: The provider answered 404 and the caller gave it a meaning.
        ParseError: The body was not valid JSON.
    """
    logger.info(f"Making {provider} API request to: {url}")
    try:
        response = await client.get(url, params=params)
    except httpx.RequestError as e:
        logger.error(f"Could not reach the {provider} API at {url}: {e}")
        raise UpstreamError(f"Could not connect to the {provider} API", context={"url": url}) from e

    if response.status_code == 404 and not_found_message:
        logger.warning(f"{provider} API reported 404 for {url}.")
        raise NotFoundError(not_found_message, context={"url": url})

    if not response.is_success:
        logger.error(f"{provider} API error for {url}: {response.status_code} {response.reason_phrase}")
        raise UpstreamError(
            f"{provider} API error: {response.status_code} {response.reason_phrase}",
            status=response.status_code,
        )

    try:
        return response.json()
    except ValueError as e:
        logger.error(f"Failed to decode JSON from {url}", exc_info=True)
        raise ParseError(f"Received invalid data from the {provider} API", status=response.status_code) from e
