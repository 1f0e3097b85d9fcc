"""Run a sun times lookup from location resolution to rendered report."""

from datetime import date
from typing import Optional

from .config.settings import Settings
from .core.location import LocationResolver
from .core.models import Location, SunApiResponse
from .core.times import TimesFetcher
from .report.renderer import ReportRenderer
from .sources import DataSource, create_source
from .utils.logging import get_logger

logger = get_logger(__name__)


class SuntimesService:
    """Wire the resolver, the fetcher and the renderer for one run."""

    def __init__(
        self,
        settings: Settings,
        source: Optional[DataSource] = None,
        renderer: Optional[ReportRenderer] = None
    ):
        """Initialize the service.

        Args:
            settings: Application settings
            source: Data source (created from the settings if None)
            renderer: Report renderer
        """
        self.settings = settings
        self.source = source or create_source(settings)
        self.resolver = LocationResolver(self.source, settings.api.ip_lookup_url)
        self.fetcher = TimesFetcher(self.source, settings.api.times_url)
        self.renderer = renderer or ReportRenderer()

        logger.debug(f"Using {self.source.name} data source")

    def resolve_location(
        self,
        detect_location: bool,
        city: Optional[str] = None,
        timezone: Optional[str] = None,
        coordinates: Optional[str] = None
    ) -> Location:
        """Resolve the location, filling input left as None from the configured defaults.

        An empty string is a value, not a missing one, and is validated as given.
        """
        defaults = self.settings.defaults
        return self.resolver.resolve(
            detect_location,
            defaults.city if city is None else city,
            defaults.timezone if timezone is None else timezone,
            defaults.coordinates if coordinates is None else coordinates,
        )

    def fetch_times(self, location: Location, on_date: date) -> SunApiResponse:
        """Fetch sun times for a resolved location."""
        return self.fetcher.fetch(location, on_date.strftime("%Y-%m-%d"))

    def report(
        self,
        on_date: date,
        detect_location: bool = False,
        city: Optional[str] = None,
        timezone: Optional[str] = None,
        coordinates: Optional[str] = None
    ) -> str:
        """Produce the rendered report.

        Nothing is rendered unless every step succeeds.

        Raises:
            SuntimesError: If any step fails
        """
        location = self.resolve_location(detect_location, city, timezone, coordinates)
        response = self.fetch_times(location, on_date)
        return self.renderer.render(location, on_date, response.results)
