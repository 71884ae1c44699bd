"""Tests for YouTubeExtractor."""
import pytest

from video_metadata_api.services.extractors import ExtractionError
from video_metadata_api.services.extractors.youtube_extractor import YouTubeExtractor

from conftest import YOUTUBE_OEMBED_HOST


SHORT_URL = "https://youtu.be/dQw4w9WgXcQ"
WATCH_URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


def test_platform_name():
    assert YouTubeExtractor.platform_name() == "youtube"


@pytest.mark.asyncio
async def test_extract_full_metadata(upstream, http_client, youtube_oembed):
    upstream.oembed[YOUTUBE_OEMBED_HOST] = youtube_oembed

    result = await YouTubeExtractor(http_client).extract(WATCH_URL + "&t=42s")

    assert result.success is True
    assert result.platform == "youtube"
    assert result.creator == "Rick Astley"
    assert result.creator_url == "https://www.youtube.com/@RickAstleyYT"
    assert result.title == "Never Gonna Give You Up"
    assert result.thumbnail == youtube_oembed["thumbnail_url"]
    assert result.deep_link == WATCH_URL


@pytest.mark.asyncio
async def test_thumbnail_is_built_from_video_id(upstream, http_client):
    upstream.oembed[YOUTUBE_OEMBED_HOST] = {
        "author_name": "Rick Astley",
        "title": "Never Gonna Give You Up",
    }

    result = await YouTubeExtractor(http_client).extract(SHORT_URL)

    assert result.creator == "Rick Astley"
    assert result.creator_url == ""
    assert result.deep_link == WATCH_URL
    assert result.thumbnail == "https://img.youtube.com/vi/dQw4w9WgXcQ/hqdefault.jpg"


@pytest.mark.asyncio
async def test_shorts_url_gets_watch_deep_link(upstream, http_client):
    upstream.oembed[YOUTUBE_OEMBED_HOST] = {}

    result = await YouTubeExtractor(http_client).extract("https://www.youtube.com/shorts/dQw4w9WgXcQ")

    assert result.creator == "Unknown Channel"
    assert result.deep_link == WATCH_URL


@pytest.mark.asyncio
async def test_url_without_video_id_keeps_resolved_url(upstream, http_client):
    channel_url = "https://www.youtube.com/@RickAstleyYT"
    upstream.oembed[YOUTUBE_OEMBED_HOST] = {"author_name": "Rick Astley"}

    result = await YouTubeExtractor(http_client).extract(channel_url)

    assert result.deep_link == channel_url
    assert result.thumbnail == ""


@pytest.mark.asyncio
async def test_404_raises_extraction_error(upstream, http_client):
    upstream.oembed[YOUTUBE_OEMBED_HOST] = 404

    with pytest.raises(ExtractionError) as exc_info:
        await YouTubeExtractor(http_client).extract(SHORT_URL)

    assert exc_info.value.status_code == 404
    assert str(exc_info.value) == "YouTube oEmbed failed: 404"
