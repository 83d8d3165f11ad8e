"""YouTube URL parsing."""

from typing import Optional
from urllib.parse import parse_qs, urlparse

from .errors import InvalidVideoUrlError


def _host(parsed) -> str:
    return (parsed.hostname or "").lower()


def extract_video_id(url: str) -> Optional[str]:
    """Extract the video identifier from a YouTube URL.

    Handles the two standard shapes:
    - youtube.com/watch?v=<id> (any youtube.com host)
    - youtu.be/<id> (short links)

    Returns None for any other shape or an unparseable string.
    """
    if not url or not isinstance(url, str):
        return None
    try:
        parsed = urlparse(url.strip())
        host = _host(parsed)
    except ValueError:
        return None

    if not parsed.scheme or not host:
        return None

    if "youtube.com" in host:
        values = parse_qs(parsed.query).get("v")
        return values[0] if values and values[0] else None

    if host == "youtu.be":
        video_id = parsed.path[1:]
        return video_id or None

    return None


def require_video_id(url: str) -> str:
    """Like extract_video_id, but raises InvalidVideoUrlError instead of returning None."""
    video_id = extract_video_id(url)
    if not video_id:
        raise InvalidVideoUrlError(url)
    return video_id
