"""Content fetcher service.

This module downloads a document over HTTP and returns its body as text.
"""

import logging

import httpx

from eng_blogs.exceptions import BodyDecodeError, NetworkError, NonSuccessStatusError

logger = logging.getLogger(__name__)


async def fetch_text(url: str) -> str:
    """Download a URL and return the response body as text.

    Only a 200 response counts as success. No retries are attempted.

    Args:
        url: Absolute URL to fetch

    Returns:
        Response body decoded strictly using the response charset

    Raises:
        NonSuccessStatusError: If the status code is not exactly 200
        BodyDecodeError: If the body cannot be decoded as text
        NetworkError: On connection or other transport failures
    """
    logger.debug(f"Fetching: {url}")

    async with httpx.AsyncClient(follow_redirects=True, timeout=30.0) as client:
        try:
            response = await client.get(url)
        except httpx.DecodingError as e:
            logger.error(f"Failed to decode response from {url}: {e}")
            raise BodyDecodeError(url, str(e)) from e
        except httpx.HTTPError as e:
            logger.error(f"Failed to fetch {url}: {e}")
            raise NetworkError(url, str(e)) from e

    if response.status_code != 200:
        logger.error(f"Failed to fetch {url}: status code {response.status_code}")
        raise NonSuccessStatusError(response.status_code, url)

    encoding = response.encoding or "utf-8"
    try:
        return response.content.decode(encoding, errors="strict")
    except UnicodeDecodeError as e:
        logger.error(f"Failed to decode response from {url} as {encoding}: {e}")
        raise BodyDecodeError(url, str(e)) from e
