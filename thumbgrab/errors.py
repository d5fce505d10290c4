class ThumbgrabError(Exception):
    pass


class InvalidUrlError(ThumbgrabError):
    """The input is not a recognizable video URL."""
    code = "invalid_url"


class VideoIdError(ThumbgrabError):
    """The input looked like a video URL but no video ID could be derived."""
    code = "extract_id"


class UnknownVariantError(ThumbgrabError):
    pass
