from collections import OrderedDict

from thumbgrab.errors import UnknownVariantError

DEFAULT_IMAGE_HOST = "img.youtube.com"

THUMBNAIL_TEMPLATE = "https://{host}/vi/{video_id}/{suffix}.jpg"

# Variant name -> file name on the image server
VARIANTS = OrderedDict([
    ('maxres', 'maxresdefault'),
    ('hq', 'hqdefault'),
    ('mq', 'mqdefault'),
    ('sd', 'sddefault'),
    ('default', 'default'),
    ('medium', 'mqdefault'),
    ('high', 'hqdefault'),
])

# (size label, variant) pairs offered as direct downloads
DOWNLOAD_SIZES = (
    ('1280x720', 'maxres'),
    ('480x360', 'hq'),
    ('320x180', 'mq'),
    ('640x480', 'sd'),
)

# (kind, size label, variant, download file name)
ADDITIONAL_TYPES = (
    ('profile', '120x120', 'default', 'youtube-profile-120x120'),
    ('cover', '1280x720', 'maxres', 'youtube-cover-1280x720'),
)


def thumbnail_url(video_id, variant, image_host=DEFAULT_IMAGE_HOST):
    """Build the image URL for a single variant."""
    if variant not in VARIANTS:
        raise UnknownVariantError(f"Unknown thumbnail variant: {variant}")
    return THUMBNAIL_TEMPLATE.format(host=image_host, video_id=video_id, suffix=VARIANTS[variant])


def build_thumbnail_links(video_id, image_host=DEFAULT_IMAGE_HOST):
    """Build the full link set for a video ID.

    The images are not checked for existence, some videos have no maxres thumbnail.
    """
    return OrderedDict(
        (variant, thumbnail_url(video_id, variant, image_host)) for variant in VARIANTS
    )


def download_filename(variant):
    return f"youtube-thumbnail-{variant}"


def download_sizes(links):
    """Labelled download entries for the download-by-size buttons."""
    return [
        {
            'size': size,
            'variant': variant,
            'url': links.get(variant),
            'filename': download_filename(variant),
        }
        for size, variant in DOWNLOAD_SIZES
    ]


def additional_types(links):
    return [
        {
            'kind': kind,
            'size': size,
            'variant': variant,
            'url': links.get(variant),
            'filename': filename,
        }
        for kind, size, variant, filename in ADDITIONAL_TYPES
    ]
