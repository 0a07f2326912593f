"""
Page Retrieval

Fetches a page's HTML with requests and turns transport failures into
typed RetrievalErrors. Only successfully retrieved markup is handed
to the analyzer.
"""

import logging
from typing import Optional
from urllib.parse import urlparse

import requests

from .errors import (
    InvalidURLError,
    PageStatusError,
    PageTimeoutError,
    PageUnreachableError,
    RetrievalError,
)
from .models import Config

logger = logging.getLogger(__name__)


def validate_url(url: str) -> str:
    """
    Check that url is an absolute http(s) URL.

    Raises:
        InvalidURLError: For empty, relative or non-http(s) URLs
    """
    if not url or not url.strip():
        raise InvalidURLError("URL is required", url or "")

    url = url.strip()
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidURLError(f"Not an http(s) URL: {url}", url)
    return url


def fetch_markup(url: str, config: Optional[Config] = None) -> str:
    """
    Download the HTML of a page.

    Args:
        url: Absolute http(s) URL
        config: Supplies user agent and timeout (defaults if None)

    Returns:
        Response body as text

    Raises:
        InvalidURLError: URL rejected before any request
        PageUnreachableError: DNS or connection failure
        PageTimeoutError: No answer within config.timeout
        PageStatusError: Non-2xx response
        RetrievalError: Any other transport failure

    Example:
        html = fetch_markup("https://example.com")
    """
    config = config or Config()
    url = validate_url(url)

    try:
        response = requests.get(
            url,
            headers={"User-Agent": config.user_agent},
            timeout=config.timeout
        )
    except requests.exceptions.Timeout as e:
        logger.warning("Timed out fetching %s", url)
        raise PageTimeoutError(
            f"Website did not respond within {config.timeout:g} seconds.", url
        ) from e
    except requests.exceptions.ConnectionError as e:
        logger.warning("Could not connect to %s: %s", url, e)
        raise PageUnreachableError(
            "Could not connect to the website. Please check the URL and try again.", url
        ) from e
    except requests.exceptions.RequestException as e:
        logger.warning("Request to %s failed: %s", url, e)
        raise RetrievalError(f"Failed to fetch website: {e}", url) from e

    if not 200 <= response.status_code < 300:
        logger.warning("%s answered with status %d", url, response.status_code)
        raise PageStatusError(url, response.status_code)

    logger.debug("Fetched %s (%d bytes)", url, len(response.content))
    return response.text
