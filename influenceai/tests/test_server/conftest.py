"""Test fixtures for server tests.

Builds the app with a fixed config and replaces the search provider with an
httpx.MockTransport that serves canned SerpAPI payloads keyed by query.
"""

import copy

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from influenceai.config.loader import DEFAULT_CONFIG
from influenceai.server.app import create_app

PROVIDER_RESPONSES = {
    "Taylor Swift": {
        "knowledge_graph": {
            "title": "Taylor Swift",
            "description": "American singer-songwriter",
            "thumbnail": "https://example.com/ts-thumb.jpg",
            "attributes": {"height": "1.8 m"},
            "born": "December 13, 1989 (age 36), West Reading, PA",
            "profiles": [
                {"name": "Instagram", "link": "https://www.instagram.com/taylorswift", "image": "https://example.com/ig.png"},
                {"name": "X (Twitter)", "link": "https://twitter.com/taylorswift13"},
            ],
        },
        "organic_results": [{"title": f"result {i}"} for i in range(10)],
        "news_results": [{"title": f"news {i}"} for i in range(3)],
    },
    "Unknown Person": {
        "organic_results": [{"title": "result 1"}, {"title": "result 2"}],
    },
    "Quota Exceeded": {
        "error": "Your account has run out of searches.",
    },
}


def provider_handler(request: httpx.Request) -> httpx.Response:
    query = request.url.params.get("q")
    if query == "Broken Upstream":
        return httpx.Response(502, text="<html>Bad Gateway</html>")
    if query == "Network Down":
        raise httpx.ConnectError("connection refused", request=request)
    return httpx.Response(200, json=PROVIDER_RESPONSES.get(query, {}))


@pytest.fixture
def test_config():
    config = copy.deepcopy(DEFAULT_CONFIG)
    config["api_key_env"] = "INFLUENCEAI_TEST_SERPAPI_KEY"
    return config


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("INFLUENCEAI_TEST_SERPAPI_KEY", "test-key")
    return "test-key"


@pytest.fixture
def app(test_config):
    app = create_app(config=test_config)
    app.state.search_transport = httpx.MockTransport(provider_handler)
    return app


@pytest_asyncio.fixture
async def client(app):
    """Create an async test client for the app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
