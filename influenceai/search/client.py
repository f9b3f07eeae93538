"""SerpAPI search client.

API docs: https://serpapi.com/search-api
One request per lookup; results are never cached.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from influenceai.models.entities import Celebrity
from influenceai.profile.normalize import build_celebrity

logger = logging.getLogger(__name__)


class SearchError(Exception):
    """Base class for lookup failures."""


class SearchProviderError(SearchError):
    """The provider answered with an ``error`` field in its payload."""


class SearchRequestError(SearchError):
    """The outbound call failed or returned something unparseable."""


def _redact(url: str, api_key: str) -> str:
    return url.replace(api_key, "HIDDEN_KEY") if api_key else url


async def fetch_search_results(
    query: str,
    api_key: str,
    config: Dict[str, Any],
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Dict[str, Any]:
    """Run a single search against the provider.

    Args:
        query: Search text, usually a person's name.
        api_key: Provider API key.
        config: Loaded configuration; the ``search`` section is used.
        transport: Optional httpx transport override.

    Returns:
        The raw JSON response as a dict.

    Raises:
        SearchProviderError: The payload carried an ``error`` message.
        SearchRequestError: Network failure, bad status or non-JSON body.
    """
    search_config = config.get("search", {})
    endpoint = search_config.get("endpoint", "https://serpapi.com/search")
    params = {
        "api_key": api_key,
        "engine": search_config.get("engine", "google"),
        "q": query,
    }
    timeout = httpx.Timeout(
        search_config.get("timeout_seconds", 30.0),
        connect=search_config.get("connect_timeout_seconds", 10.0),
    )

    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            request = client.build_request("GET", endpoint, params=params)
            logger.info("Fetching from URL: %s", _redact(str(request.url), api_key))
            response = await client.send(request)
    except httpx.HTTPError as exc:
        raise SearchRequestError(f"Search request failed: {exc}") from exc

    try:
        data = response.json()
    except ValueError as exc:
        raise SearchRequestError(
            f"Search provider returned a non-JSON body (HTTP {response.status_code})"
        ) from exc

    if not isinstance(data, dict):
        raise SearchRequestError("Search provider returned an unexpected payload")

    if data.get("error"):
        logger.error("SerpAPI error: %s", data["error"])
        raise SearchProviderError(str(data["error"]))

    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise SearchRequestError(f"Search provider returned HTTP {response.status_code}") from exc

    return data


async def lookup_celebrity(
    name: str,
    api_key: str,
    config: Dict[str, Any],
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Celebrity:
    """Search for a name and normalize the response."""
    query = (name or "").strip()
    if not query:
        raise ValueError("Celebrity name is required")

    data = await fetch_search_results(query, api_key, config, transport=transport)
    return build_celebrity(data, query)
