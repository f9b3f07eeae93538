"""Health check endpoint."""

import time
from typing import Any, Dict

from fastapi import APIRouter, Depends

from influenceai import __version__
from influenceai.config.loader import get_api_key
from influenceai.server.dependencies import get_config

router = APIRouter(prefix="/api", tags=["health"])

_start_time = time.time()


@router.get("/health")
async def health_check(config: Dict[str, Any] = Depends(get_config)):
    """Health check: returns status, uptime, and whether search is configured."""
    uptime = int(time.time() - _start_time)

    return {
        "status": "ok",
        "uptime_seconds": uptime,
        "search_configured": get_api_key(config) is not None,
        "version": __version__,
    }
