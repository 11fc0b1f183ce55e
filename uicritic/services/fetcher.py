import logging

import requests

from uicritic.config import get_settings
from uicritic.exceptions import ResourceFetchError
from uicritic.http_client import get_session

logger = logging.getLogger(__name__)


def fetch(url: str) -> bytes:
    """Download ``url`` and return the response body.

    Every call is a fresh request; nothing is cached.
    """
    try:
        resp = get_session().get(url, timeout=get_settings().fetch_timeout)
    except requests.RequestException as e:
        raise ResourceFetchError(str(e)) from e
    if not 200 <= resp.status_code < 300:
        logger.info("Image fetch failed with HTTP %s: %s", resp.status_code, url)
        raise ResourceFetchError(resp.reason or f"HTTP {resp.status_code}")
    return resp.content
