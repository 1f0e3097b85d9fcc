"""
Data sources for the geolocation and sun times APIs.

A source is chosen once per run from the settings: the network by default,
or local fixture files when offline mode is enabled.
"""

from ..config.settings import Settings
from .base import DataSource
from .fixture_source import FixtureSource
from .http_source import HttpSource


def create_source(settings: Settings) -> DataSource:
    """Create the data source selected by the settings.

    Args:
        settings: Application settings

    Returns:
        Fixture source in offline mode, HTTP source otherwise
    """
    if settings.offline.enabled:
        return FixtureSource(settings.offline.fixtures)
    return HttpSource(user_agent=settings.api.user_agent, timeout=settings.api.timeout)


__all__ = [
    'DataSource',
    'FixtureSource',
    'HttpSource',
    'create_source',
]
