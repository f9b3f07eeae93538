"""Celebrity lookup endpoint."""

import logging
from typing import Any, Dict, Optional

import httpx
from fastapi import APIRouter, Depends, HTTPException, Query

from influenceai.config.loader import get_api_key
from influenceai.search.client import (
    SearchProviderError,
    SearchRequestError,
    lookup_celebrity,
)
from influenceai.server.dependencies import get_config, get_search_transport
from influenceai.server.models.celebrity import CelebrityResponse
from influenceai.server.models.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["celebrity"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get("/celebrity", response_model=CelebrityResponse, responses=ERROR_RESPONSES)
async def get_celebrity(
    name: Optional[str] = Query(None),
    config: Dict[str, Any] = Depends(get_config),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_search_transport),
):
    """Look up a public figure and return facts plus influence score."""
    if not name or not name.strip():
        raise HTTPException(status_code=400, detail="Celebrity name is required")

    api_key = get_api_key(config)
    if not api_key:
        logger.error("Search API key is not configured (set %s)", config.get("api_key_env"))
        raise HTTPException(status_code=500, detail="API key is not configured")

    try:
        celebrity = await lookup_celebrity(name, api_key, config, transport=transport)
    except SearchProviderError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    except SearchRequestError as exc:
        logger.exception("Celebrity lookup failed for %r", name)
        raise HTTPException(
            status_code=500, detail="Failed to fetch celebrity information"
        ) from exc

    return CelebrityResponse.from_entity(celebrity)
