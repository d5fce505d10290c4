import asyncio
import logging
import os
import re

import aiohttp

logger = logging.getLogger('thumbgrab')

DEFAULT_TIMEOUT = 10


def sanitize_filename(filename):
    filename = re.sub(r'[<>:"/\\|?*\x00-\x1f]', '', filename)
    filename = filename.strip().strip('.')
    return filename[:200] if len(filename) > 200 else filename


def attachment_filename(name, fallback="youtube-thumbnail"):
    """Turn a requested download name into a safe ``.jpg`` file name."""
    name = sanitize_filename(name or "")
    if name.lower().endswith('.jpg'):
        name = name[:-4]
    return f"{name or fallback}.jpg"


async def _read_image(session, url, timeout):
    async with session.get(url, timeout=aiohttp.ClientTimeout(total=timeout)) as response:
        if response.status != 200:
            logger.warning(f"Thumbnail request for {url} returned HTTP {response.status}")
            return None
        data = await response.read()

    if not data:
        logger.warning(f"Thumbnail at {url} is empty")
        return None

    logger.info(f"Fetched thumbnail {url} ({len(data)} bytes)")
    return data


async def fetch_thumbnail(url, session=None, timeout=DEFAULT_TIMEOUT):
    """Fetch a thumbnail image.

    Returns the image bytes, or None when the image could not be retrieved.
    Failures are only logged, callers are expected to carry on without the image.
    """
    try:
        if session is None:
            async with aiohttp.ClientSession() as session:
                return await _read_image(session, url, timeout)
        return await _read_image(session, url, timeout)
    except asyncio.TimeoutError:
        logger.error(f"Timed out after {timeout}s downloading thumbnail {url}")
    except Exception as e:
        logger.error(f"Error downloading thumbnail {url}: {e}")
    return None


async def download_thumbnail(url, output_path, session=None, timeout=DEFAULT_TIMEOUT):
    """Download a thumbnail to ``output_path``. Returns True on success."""
    data = await fetch_thumbnail(url, session=session, timeout=timeout)
    if data is None:
        return False

    try:
        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(output_path, 'wb') as f:
            f.write(data)
    except OSError as e:
        logger.error(f"Error saving thumbnail to {output_path}: {e}")
        return False

    logger.info(f"Saved thumbnail to {output_path}")
    return True
