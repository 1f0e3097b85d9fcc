"""Offline data source reading local fixture files."""

from pathlib import Path
from typing import Any, Dict, Optional

from ..config.settings import FIXTURE_ENV_PREFIX
from ..core.errors import FetchFailed
from ..utils.logging import get_logger
from .base import DataSource

logger = get_logger(__name__)


class FixtureSource(DataSource):
    """Serve API bodies from fixture files, one file per API name."""

    def __init__(self, fixtures: Dict[str, Path]):
        """Initialize fixture source.

        Args:
            fixtures: Mapping of API name to fixture file path
        """
        self.fixtures = dict(fixtures)

    @property
    def name(self) -> str:
        return "fixture"

    def fixture_path(self, api: str) -> Path:
        """Get the fixture file for an API.

        Raises:
            FetchFailed: If no fixture is configured or the file does not exist
        """
        if api not in self.fixtures:
            raise FetchFailed(api, f"environment variable `{FIXTURE_ENV_PREFIX}{api}` is not set")

        path = Path(self.fixtures[api])
        if not path.is_file():
            raise FetchFailed(api, f"file not exists: `{path}`")
        return path

    def retrieve(self, api: str, url: str, params: Optional[Dict[str, Any]] = None) -> bytes:
        path = self.fixture_path(api)
        logger.info(f"Reading {api} fixture instead of {url}: {path}")

        try:
            return path.read_bytes()
        except OSError as e:
            raise FetchFailed(api, str(e)) from e
