"""
Video URL parsing for YouTube and Vimeo embeds.
"""

import re
from typing import NamedTuple, Optional
from urllib.parse import urlparse, parse_qs

YOUTUBE_HOSTS = {"youtube.com", "www.youtube.com", "m.youtube.com", "music.youtube.com"}
YOUTUBE_SHORT_HOSTS = {"youtu.be", "www.youtu.be"}
VIMEO_HOSTS = {"vimeo.com", "www.vimeo.com", "player.vimeo.com"}

YOUTUBE_ID = re.compile(r"^[A-Za-z0-9_-]{11}$")
VIMEO_ID = re.compile(r"^\d+$")


class VideoRef(NamedTuple):
    platform: str
    video_id: str


def parse_video_url(url: str) -> Optional[VideoRef]:
    """
    Extract the platform and video id from a YouTube or Vimeo URL.

    Handles watch, share, embed and shorts links for YouTube, and page or
    player links for Vimeo.

    Args:
        url: Video page URL

    Returns:
        VideoRef, or None when the URL is not a recognised video link
    """
    if not url:
        return None

    parsed = urlparse(url.strip())
    host = (parsed.hostname or "").lower()
    segments = [s for s in parsed.path.split("/") if s]

    if host in YOUTUBE_SHORT_HOSTS and segments:
        candidate = segments[0]
    elif host in YOUTUBE_HOSTS:
        if parsed.path == "/watch":
            candidate = parse_qs(parsed.query).get("v", [""])[0]
        elif len(segments) >= 2 and segments[0] in ("embed", "shorts", "live", "v"):
            candidate = segments[1]
        else:
            return None
    elif host in VIMEO_HOSTS:
        # vimeo.com/<id>, vimeo.com/channels/<name>/<id>, player.vimeo.com/video/<id>
        numeric = [s for s in segments if VIMEO_ID.match(s)]
        if not numeric:
            return None
        return VideoRef("vimeo", numeric[-1])
    else:
        return None

    if YOUTUBE_ID.match(candidate):
        return VideoRef("youtube", candidate)
    return None
