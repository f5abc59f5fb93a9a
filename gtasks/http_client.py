"""Shared HTTP transport. One attempt per call, no retry adapter."""

import requests
from requests.adapters import HTTPAdapter

from gtasks.config import get_settings


def build_session(pool_maxsize: int | None = None, user_agent: str | None = None) -> requests.Session:
    """Return a requests.Session with a pooled adapter and JSON default headers.

    The session holds no per-call state and can be shared between threads and `Service`s.
    """
    settings = get_settings()
    pool_maxsize = pool_maxsize or settings.pool_maxsize
    session = requests.Session()
    adapter = HTTPAdapter(pool_connections=pool_maxsize, pool_maxsize=pool_maxsize, max_retries=0)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.headers.update({
        "Accept": "application/json",
        "User-Agent": user_agent or settings.user_agent,
    })
    return session
