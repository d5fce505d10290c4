"""
Video ID extraction for YouTube style URLs.

Everything here is plain string matching, no network access is involved.
"""

import logging
import re
from urllib.parse import parse_qs, urlsplit

from thumbgrab.errors import InvalidUrlError, VideoIdError

logger = logging.getLogger('thumbgrab')

VIDEO_ID_PATTERN = re.compile(r'[0-9A-Za-z_-]{11}')

YOUTUBE_HOSTS = (
    'youtube.com',
    'www.youtube.com',
    'm.youtube.com',
    'music.youtube.com',
    'youtube-nocookie.com',
    'www.youtube-nocookie.com',
)
YOUTUBE_SHORT_HOSTS = ('youtu.be', 'www.youtu.be')

# Path segments that are followed directly by the video ID
ID_PATH_PREFIXES = ('embed', 'v', 'e', 'shorts', 'live')

SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")


class VideoUrlParser:
    """Recognizes video URLs for one platform and pulls the video ID out of them.

    ``hosts`` are the canonical hosts (``/watch?v=``, ``/embed/<id>`` ...),
    ``short_hosts`` are short-link hosts where the ID is the first path segment.
    """

    def __init__(self, hosts=YOUTUBE_HOSTS, short_hosts=YOUTUBE_SHORT_HOSTS):
        self.hosts = tuple(host.lower() for host in hosts)
        self.short_hosts = tuple(host.lower() for host in short_hosts)

    def _split(self, text):
        if not text:
            return None
        text = text.strip()
        if not text or any(char.isspace() for char in text):
            return None

        # Protocol-relative and scheme-less links are common when pasting
        if text.startswith('//'):
            text = 'https:' + text
        elif not SCHEME_PATTERN.match(text):
            text = 'https://' + text

        try:
            parts = urlsplit(text)
            hostname = parts.hostname
        except ValueError:
            return None
        # Fully qualified names may end with a dot
        hostname = (hostname or '').rstrip('.')
        if parts.scheme not in ('http', 'https') or not hostname:
            return None
        return parts, hostname

    def is_video_url(self, text):
        """Check whether the text is a URL on one of this platform's hosts."""
        split = self._split(text)
        if split is None:
            return False
        host = split[1]
        return host in self.hosts or host in self.short_hosts

    def extract_video_id(self, text):
        """Return the video ID from any recognized URL shape, or None."""
        split = self._split(text)
        if split is None:
            return None

        parts, host = split
        segments = [segment for segment in parts.path.split('/') if segment]
        candidate = None

        if host in self.short_hosts:
            if segments:
                candidate = segments[0]
        elif host in self.hosts and segments:
            first = segments[0].lower()
            if first == 'watch':
                candidate = _query_value(parts.query, 'v')
            elif first in ID_PATH_PREFIXES and len(segments) > 1:
                candidate = segments[1]

        if candidate and VIDEO_ID_PATTERN.fullmatch(candidate):
            return candidate
        return None

    def parse(self, text):
        """Validate the input and return its video ID.

        Raises InvalidUrlError when the text is not a URL for this platform and
        VideoIdError when it is, but carries no usable video ID.
        """
        if not self.is_video_url(text):
            raise InvalidUrlError(f"Not a recognizable video URL: {text!r}")

        video_id = self.extract_video_id(text)
        if video_id is None:
            raise VideoIdError(f"Could not extract a video ID from: {text!r}")

        logger.debug(f"Extracted video ID {video_id} from {text.strip()}")
        return video_id


def _query_value(query, key):
    """First value of a query parameter, matching the key case-insensitively."""
    for name, values in parse_qs(query).items():
        if name.lower() == key:
            return values[0]
    return None


default_parser = VideoUrlParser()


def is_video_url(text, parser=None):
    return (parser or default_parser).is_video_url(text)


def extract_video_id(text, parser=None):
    return (parser or default_parser).extract_video_id(text)


def parse_video_id(text, parser=None):
    return (parser or default_parser).parse(text)


def is_valid_video_id(video_id):
    return bool(video_id) and VIDEO_ID_PATTERN.fullmatch(video_id) is not None
