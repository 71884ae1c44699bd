"""
Multi-platform video URL detection and parsing utilities.

Handles platform detection, identifier extraction and canonical URL
building for:
- TikTok (tiktok.com, vm.tiktok.com)
- Instagram (instagram.com reels, posts, profiles)
- YouTube (youtube.com, youtu.be)
"""

import re
from typing import List, Optional

from video_metadata_api.models import Platform


# --------------------------------------------------------------------------
# Platform Detection
# --------------------------------------------------------------------------

TIKTOK_DOMAINS = ("tiktok.com", "vm.tiktok")
INSTAGRAM_DOMAINS = ("instagram.com",)
YOUTUBE_DOMAINS = ("youtube.com", "youtu.be")


def detect_platform(url: Optional[str]) -> Optional[Platform]:
    """
    Detect which platform a URL belongs to.

    Matching is a case-insensitive substring check on known domain
    fragments, tried in order TikTok, Instagram, YouTube.

    Returns: "tiktok", "instagram", "youtube", or None when nothing matches
    """
    if not url:
        return None

    url_lower = url.lower()

    if any(domain in url_lower for domain in TIKTOK_DOMAINS):
        return "tiktok"

    if any(domain in url_lower for domain in INSTAGRAM_DOMAINS):
        return "instagram"

    if any(domain in url_lower for domain in YOUTUBE_DOMAINS):
        return "youtube"

    return None


# --------------------------------------------------------------------------
# TikTok
# --------------------------------------------------------------------------

TIKTOK_VIDEO_ID_RE = re.compile(r"/video/(\d+)")
TIKTOK_USERNAME_RE = re.compile(r"@([^/?]+)")


def extract_tiktok_video_id(url: str) -> Optional[str]:
    """
    Extract the numeric video ID from a resolved TikTok URL.

    Only full URLs (https://www.tiktok.com/@user/video/1234567890) carry the
    ID; short vm.tiktok.com links must be resolved first.
    """
    match = TIKTOK_VIDEO_ID_RE.search(url)
    return match.group(1) if match else None


def extract_tiktok_username(url: str) -> str:
    """Extract the @username segment of a TikTok URL, or "unknown"."""
    match = TIKTOK_USERNAME_RE.search(url)
    return match.group(1) if match else "unknown"


def tiktok_profile_url(username: str) -> str:
    return f"https://www.tiktok.com/@{username}"


def tiktok_video_url(username: str, video_id: str) -> str:
    return f"https://www.tiktok.com/@{username}/video/{video_id}"


# --------------------------------------------------------------------------
# Instagram
# --------------------------------------------------------------------------

# Profile URLs end in a single path segment: instagram.com/<username>/
INSTAGRAM_PROFILE_RE = re.compile(r"instagram\.com/([^/?]+)/?$")
INSTAGRAM_POST_ID_RE = re.compile(r"/(reel|p)/([^/?]+)")

# Path segments that look like a username but are not
INSTAGRAM_RESERVED_SEGMENTS = {"reel", "p", "stories"}

INSTAGRAM_DEFAULT_USERNAME = "instagram_user"


def extract_instagram_username(url: str) -> str:
    """
    Extract the username from an Instagram profile URL.

    Post and reel URLs do not carry the author, so anything other than
    https://www.instagram.com/<username>/ yields "instagram_user".
    """
    match = INSTAGRAM_PROFILE_RE.search(url)
    if match and match.group(1) not in INSTAGRAM_RESERVED_SEGMENTS:
        return match.group(1)
    return INSTAGRAM_DEFAULT_USERNAME


def extract_instagram_post_id(url: str) -> Optional[str]:
    """
    Extract the shortcode of an Instagram post or reel.

    Supported formats:
    - https://www.instagram.com/reel/SHORTCODE/
    - https://www.instagram.com/p/SHORTCODE/
    """
    match = INSTAGRAM_POST_ID_RE.search(url)
    return match.group(2) if match else None


def instagram_profile_url(username: str) -> str:
    return f"https://www.instagram.com/{username}/"


def instagram_reel_url(post_id: str) -> str:
    return f"https://www.instagram.com/reel/{post_id}/"


# --------------------------------------------------------------------------
# YouTube
# --------------------------------------------------------------------------

# Tried in order, first match wins
YOUTUBE_VIDEO_ID_PATTERNS: List[re.Pattern] = [
    re.compile(r"youtube\.com/watch\?v=([^&]+)"),
    re.compile(r"youtu\.be/([^?]+)"),
    re.compile(r"youtube\.com/embed/([^?]+)"),
    re.compile(r"youtube\.com/shorts/([^?]+)"),
]


def extract_youtube_video_id(url: str) -> Optional[str]:
    """
    Extract YouTube video ID from the supported URL formats.

    Supported formats:
    - https://www.youtube.com/watch?v=VIDEO_ID
    - https://youtu.be/VIDEO_ID
    - https://www.youtube.com/embed/VIDEO_ID
    - https://www.youtube.com/shorts/VIDEO_ID
    """
    for pattern in YOUTUBE_VIDEO_ID_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)
    return None


def youtube_watch_url(video_id: str) -> str:
    return f"https://www.youtube.com/watch?v={video_id}"


def youtube_thumbnail_url(video_id: str) -> str:
    return f"https://img.youtube.com/vi/{video_id}/hqdefault.jpg"
