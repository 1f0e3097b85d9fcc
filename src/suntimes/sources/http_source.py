"""HTTP data source backed by requests."""

from typing import Any, Dict, Optional

import requests

from ..core.errors import FetchFailed
from ..utils.logging import get_logger
from .base import DataSource

logger = get_logger(__name__)


class HttpSource(DataSource):
    """Fetch API bodies over HTTP."""

    def __init__(self, user_agent: str, timeout: Optional[float] = None):
        """Initialize HTTP source.

        Args:
            user_agent: User-Agent header for every request
            timeout: Request timeout in seconds, None waits indefinitely
        """
        self.user_agent = user_agent
        self.timeout = timeout

    @property
    def name(self) -> str:
        return "http"

    def retrieve(self, api: str, url: str, params: Optional[Dict[str, Any]] = None) -> bytes:
        logger.info(f"Fetching {api}: {url}")

        # One session per call, nothing is reused between the two lookups
        with requests.Session() as session:
            session.headers.update({'User-Agent': self.user_agent})
            try:
                response = session.get(url, params=params, timeout=self.timeout)
                response.raise_for_status()
            except requests.RequestException as e:
                logger.error(f"Failed to fetch {api}: {e}")
                raise FetchFailed(api, str(e)) from e

            logger.debug(f"Received {len(response.content)} bytes from {response.url}")
            return response.content
