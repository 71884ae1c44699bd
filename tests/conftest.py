"""
Test fixtures for video-metadata-api.

Outbound HTTP never leaves the process: every request the service makes is
answered by FakeUpstream through an httpx.MockTransport.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Set, Union

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Repo root: .../video-metadata-api
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ importable so tests can do `import video_metadata_api...`
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from video_metadata_api.main import app
from video_metadata_api.services.http_client import build_client, get_http_client


TIKTOK_OEMBED_HOST = "www.tiktok.com"
INSTAGRAM_OEMBED_HOST = "api.instagram.com"
YOUTUBE_OEMBED_HOST = "www.youtube.com"

# A dict is served as a 200 JSON body, an int as a bare status code, an
# exception is raised, and an httpx.Response is returned as-is.
OEmbedAnswer = Union[Dict[str, Any], int, Exception, httpx.Response]


class FakeUpstream:
    """Canned answers for oEmbed endpoints and redirect resolution."""

    def __init__(self):
        self.oembed: Dict[str, OEmbedAnswer] = {}
        self.redirects: Dict[str, str] = {}
        self.unreachable: Set[str] = set()
        self.head_rejected: Set[str] = set()
        self.requests: List[httpx.Request] = []

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url)

        if request.url.path == "/oembed":
            answer = self.oembed.get(request.url.host, 404)
            if isinstance(answer, Exception):
                raise answer
            if isinstance(answer, httpx.Response):
                return answer
            if isinstance(answer, int):
                return httpx.Response(answer, json={"error": "upstream error"})
            return httpx.Response(200, json=answer)

        if url in self.unreachable:
            raise httpx.ConnectError("connection refused", request=request)
        if request.method == "HEAD" and url in self.head_rejected:
            raise httpx.RemoteProtocolError("HEAD not supported", request=request)
        if url in self.redirects:
            return httpx.Response(301, headers={"Location": self.redirects[url]})
        return httpx.Response(200)

    def oembed_requests(self, host: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.host == host and r.url.path == "/oembed"]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)


# ---------------------------------------------------------------------------
# Upstream / HTTP client
# ---------------------------------------------------------------------------


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest_asyncio.fixture
async def http_client(upstream):
    """AsyncClient wired to the fake upstream, for service-level tests."""
    async with build_client(transport=upstream.transport()) as client:
        yield client


# ---------------------------------------------------------------------------
# Core Test Client
# ---------------------------------------------------------------------------


@pytest.fixture
def client(upstream) -> TestClient:
    """FastAPI TestClient whose outbound requests go to the fake upstream."""

    async def override_http_client():
        async with build_client(transport=upstream.transport()) as http:
            yield http

    app.dependency_overrides[get_http_client] = override_http_client
    yield TestClient(app)
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Sample oEmbed payloads
# ---------------------------------------------------------------------------


@pytest.fixture
def tiktok_oembed() -> Dict[str, Any]:
    return {
        "title": "Scramble up ur name & I'll try to guess it #foryoupage",
        "author_unique_id": "scout2015",
        "author_name": "Scout, Suki & Stella",
        "author_url": "https://www.tiktok.com/@scout2015",
        "thumbnail_url": "https://p16-sign.tiktokcdn-us.com/obj/thumb.jpeg",
    }


@pytest.fixture
def instagram_oembed() -> Dict[str, Any]:
    return {
        "title": "Leg day, no excuses",
        "author_name": "fitcoach",
        "thumbnail_url": "https://scontent.cdninstagram.com/v/thumb.jpg",
    }


@pytest.fixture
def youtube_oembed() -> Dict[str, Any]:
    return {
        "title": "Never Gonna Give You Up",
        "author_name": "Rick Astley",
        "author_url": "https://www.youtube.com/@RickAstleyYT",
        "thumbnail_url": "https://i.ytimg.com/vi/dQw4w9WgXcQ/hqdefault.jpg",
    }
