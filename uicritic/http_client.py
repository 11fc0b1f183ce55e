"""Shared HTTP client for image downloads."""

import requests
from requests.adapters import HTTPAdapter

_session: requests.Session | None = None


def get_session() -> requests.Session:
    """Return a shared requests.Session.

    Retries are disabled: a failed download is reported to the caller,
    who re-issues the whole analysis.
    """
    global _session
    if _session is None:
        _session = requests.Session()
        adapter = HTTPAdapter(max_retries=0)
        _session.mount("http://", adapter)
        _session.mount("https://", adapter)
    return _session
