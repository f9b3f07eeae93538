"""FastAPI dependency injection for config and the search transport."""

from typing import Any, Dict, Optional

import httpx
from fastapi import Request


def get_config(request: Request) -> Dict[str, Any]:
    """Get the loaded config from app state."""
    return request.app.state.config


def get_search_transport(request: Request) -> Optional[httpx.AsyncBaseTransport]:
    """Get the outbound transport override, if any (tests install a mock)."""
    return getattr(request.app.state, "search_transport", None)
