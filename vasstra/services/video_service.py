# vasstra/services/video_service.py
"""
Video source classification for banners, reels and product videos.

Supported sources: HTML5 files, YouTube, Vimeo, Instagram reels/posts
and TikTok. One classifier (parse_video_source) produces a VideoSource;
platform specifics live in the _PLATFORMS table.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class VideoType(str, Enum):
    HTML5 = "html5"
    YOUTUBE = "youtube"
    INSTAGRAM = "instagram"
    TIKTOK = "tiktok"
    VIMEO = "vimeo"
    UNKNOWN = "unknown"


class VideoSource(BaseModel):
    """
    Playable descriptor for a video URL.

    A missing embed_url means the player cannot render it; callers
    should fall back to linking direct_url.
    """

    type: VideoType
    embed_url: str | None = None
    direct_url: str | None = None
    video_id: str | None = None


# ---- id extraction ----

_YOUTUBE_PATTERNS = [
    re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/)([a-zA-Z0-9_-]{11})"),
    re.compile(r"youtube\.com/embed/([a-zA-Z0-9_-]{11})"),
    re.compile(r"youtube\.com/v/([a-zA-Z0-9_-]{11})"),
    re.compile(r"youtube\.com/shorts/([a-zA-Z0-9_-]{11})"),
]

_INSTAGRAM_PATTERNS = [
    re.compile(r"instagram\.com/(?:reel|p)/([a-zA-Z0-9_-]+)"),
]

_TIKTOK_PATTERNS = [
    re.compile(r"tiktok\.com/.*/video/(\d+)"),
    re.compile(r"vm\.tiktok\.com/([a-zA-Z0-9]+)"),
    re.compile(r"vt\.tiktok\.com/([a-zA-Z0-9]+)"),
]

_VIMEO_PATTERNS = [
    re.compile(r"vimeo\.com/(\d+)"),
    re.compile(r"player\.vimeo\.com/video/(\d+)"),
]


def _first_match(url: str, patterns: list[re.Pattern]) -> str | None:
    if not url:
        return None
    for pattern in patterns:
        match = pattern.search(url)
        if match and match.group(1):
            return match.group(1)
    return None


def extract_youtube_id(url: str) -> str | None:
    """
    watch?v=, youtu.be/, /embed/, /v/ and /shorts/ URLs.
    """
    return _first_match(url, _YOUTUBE_PATTERNS)


def extract_instagram_id(url: str) -> str | None:
    return _first_match(url, _INSTAGRAM_PATTERNS)


def extract_tiktok_id(url: str) -> str | None:
    """
    tiktok.com/@user/video/<id> and the vm./vt. short links.
    """
    return _first_match(url, _TIKTOK_PATTERNS)


def extract_vimeo_id(url: str) -> str | None:
    return _first_match(url, _VIMEO_PATTERNS)


@dataclass(frozen=True)
class _Platform:
    markers: tuple[str, ...]
    extract_id: Callable[[str], str | None]
    embed_template: str


# Checked in order; the first platform whose marker appears wins.
_PLATFORMS: dict[VideoType, _Platform] = {
    VideoType.YOUTUBE: _Platform(
        markers=("youtube.com", "youtu.be"),
        extract_id=extract_youtube_id,
        embed_template=(
            "https://www.youtube.com/embed/{id}"
            "?autoplay=1&mute=1&controls=1&modestbranding=1"
        ),
    ),
    VideoType.INSTAGRAM: _Platform(
        markers=("instagram.com",),
        extract_id=extract_instagram_id,
        embed_template="https://www.instagram.com/p/{id}/embed",
    ),
    VideoType.TIKTOK: _Platform(
        markers=("tiktok.com",),
        extract_id=extract_tiktok_id,
        embed_template="https://www.tiktok.com/embed/v2/{id}",
    ),
    VideoType.VIMEO: _Platform(
        markers=("vimeo.com",),
        extract_id=extract_vimeo_id,
        embed_template="https://player.vimeo.com/video/{id}?autoplay=1&mute=1",
    ),
}


def detect_video_type(url: str) -> VideoType:
    """
    Classify a URL by domain marker.

    Anything that is not a known platform is treated as a direct HTML5
    source (.mp4/.webm/.ogg/.mov files, stock-video CDNs and unknown
    hosts alike); only an empty string is `unknown`.
    """
    if not url:
        return VideoType.UNKNOWN

    lower_url = url.lower()
    for video_type, platform in _PLATFORMS.items():
        if any(marker in lower_url for marker in platform.markers):
            return video_type

    return VideoType.HTML5


def parse_video_source(url: str) -> VideoSource:
    video_type = detect_video_type(url)

    if video_type is VideoType.UNKNOWN:
        return VideoSource(type=video_type, direct_url=url or None)

    if video_type is VideoType.HTML5:
        return VideoSource(type=video_type, embed_url=url, direct_url=url)

    platform = _PLATFORMS[video_type]
    video_id = platform.extract_id(url)
    return VideoSource(
        type=video_type,
        direct_url=url,
        video_id=video_id,
        embed_url=platform.embed_template.format(id=video_id) if video_id else None,
    )


def supports_autoplay(video_type: VideoType) -> bool:
    # Instagram and TikTok embeds ignore autoplay parameters.
    return video_type not in (VideoType.INSTAGRAM, VideoType.TIKTOK)


# ---- <video> element errors ----

# HTMLMediaElement MediaError codes
MEDIA_ERR_ABORTED = 1
MEDIA_ERR_NETWORK = 2
MEDIA_ERR_DECODE = 3
MEDIA_ERR_SRC_NOT_SUPPORTED = 4

_MEDIA_ERROR_MESSAGES: dict[int, str] = {
    MEDIA_ERR_ABORTED: "Video playback was aborted",
    MEDIA_ERR_NETWORK: "Network error occurred while loading video",
    MEDIA_ERR_DECODE: "Video format not supported or corrupted",
    MEDIA_ERR_SRC_NOT_SUPPORTED: "Video source not supported",
}


@dataclass(frozen=True)
class MediaError:
    code: int
    message: str = ""


def get_video_error_message(error: MediaError | None) -> str:
    if error is None:
        return "Unknown video error"
    return _MEDIA_ERROR_MESSAGES.get(error.code) or error.message or "Unknown video error"


def safe_video_url(url: Any, current_src: Any = None) -> str:
    """
    Printable URL for logs.

    Non-string values (e.g. a whole media object passed by mistake) are
    replaced by a placeholder instead of being stringified.
    """
    if isinstance(url, str) and url:
        return url
    if url is not None and not isinstance(url, str):
        return "Invalid URL (object provided)"
    if isinstance(current_src, str) and current_src:
        return current_src
    return "No valid URL provided"


def handle_video_error(
    error: MediaError | None,
    url: Any = None,
    current_src: Any = None,
) -> str:
    """
    Log a <video> load failure and return the shopper-facing message.

    Only errors that carry a code are logged.
    """
    message = get_video_error_message(error)
    if error is not None and error.code:
        logger.warning(
            f"Video load error: {message} "
            f"(url={safe_video_url(url, current_src)}, code={error.code})"
        )
    return message
