"""
Abstract base class for data sources.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class DataSource(ABC):
    """Retrieves the raw body of a named API.

    The resolver and the times fetcher only see bytes, so the same code runs
    against the network or against local fixture files.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Source type identifier."""
        pass

    @abstractmethod
    def retrieve(self, api: str, url: str, params: Optional[Dict[str, Any]] = None) -> bytes:
        """Retrieve the body for a named API.

        Args:
            api: Logical API name ('ipapi' or 'suntimes')
            url: Endpoint URL
            params: Query parameters

        Returns:
            Raw response body

        Raises:
            FetchFailed: If the body cannot be retrieved
        """
        pass
