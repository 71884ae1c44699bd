"""Instagram platform extractor: oEmbed with a URL-parsing fallback.

Instagram's public oEmbed endpoint is unreliable without an app token, so a
failed oEmbed call is not an error here. The extractor falls back to what
can be read from the URL itself and still reports success.
"""
from __future__ import annotations

import logging
from typing import Optional

from video_metadata_api.models import VideoMetadata
from video_metadata_api.services.oembed_service import OEmbedResponse
from video_metadata_api.services.redirect_resolver import resolve_redirects
from video_metadata_api.services.video_url_normalizer import (
    extract_instagram_post_id,
    extract_instagram_username,
    instagram_profile_url,
    instagram_reel_url,
)
from .base import PlatformExtractor
from . import register_extractor

logger = logging.getLogger(__name__)


class InstagramExtractor(PlatformExtractor):
    @staticmethod
    def platform_name() -> str:
        return "instagram"

    async def extract(self, url: str, original_url: Optional[str] = None) -> VideoMetadata:
        resolved_url = await resolve_redirects(self.client, url)
        original = original_url if original_url is not None else url

        oembed = await self.oembed.fetch_instagram_oembed(resolved_url)
        if oembed.success:
            return self._from_oembed(oembed, resolved_url, original)

        logger.info(f"Instagram oEmbed unavailable for {resolved_url}, parsing URL instead")
        return self._from_url(resolved_url, original)

    @staticmethod
    def _from_oembed(oembed: OEmbedResponse, resolved_url: str, original_url: str) -> VideoMetadata:
        username = oembed.text("author_name") or extract_instagram_username(resolved_url)
        return VideoMetadata(
            success=True,
            platform="instagram",
            creator=f"@{username}",
            creator_url=instagram_profile_url(username),
            title=oembed.text("title"),
            thumbnail=oembed.text("thumbnail_url"),
            original_url=original_url,
            deep_link=resolved_url,
        )

    @staticmethod
    def _from_url(resolved_url: str, original_url: str) -> VideoMetadata:
        username = extract_instagram_username(resolved_url)
        profile_url = instagram_profile_url(username)
        post_id = extract_instagram_post_id(resolved_url)
        return VideoMetadata(
            success=True,
            platform="instagram",
            creator=f"@{username}",
            creator_url=profile_url,
            original_url=original_url,
            deep_link=instagram_reel_url(post_id) if post_id else profile_url,
        )


register_extractor(InstagramExtractor)
