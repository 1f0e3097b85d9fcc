"""Client for the sunrise-sunset.org times API."""

import json
from typing import Any, Dict, Optional

from ..config.settings import settings
from ..sources.base import DataSource
from ..utils.logging import get_logger
from .codec import decode_duration, decode_timestamp
from .errors import CodecError, DecodeFailed
from .models import DURATION_FIELDS, TIMESTAMP_FIELDS, Location, SunApiResponse, TimeOfDayReport

logger = get_logger(__name__)

TIMES_API = "suntimes"


class TimesFetcher:
    """Fetch and decode sun times for a location and date."""

    def __init__(self, source: DataSource, base_url: Optional[str] = None):
        """Initialize times fetcher.

        Args:
            source: Data source used for the times lookup
            base_url: Times API endpoint (uses settings default if None)
        """
        self.source = source
        self.base_url = base_url or settings.api.times_url

    def build_params(self, location: Location, date: str) -> Dict[str, Any]:
        """Build the query parameters for a lookup.

        ``formatted=0`` asks the API for full ISO-8601 timestamps and a day
        length in seconds.
        """
        return {
            "lat": f"{location.latitude:f}",
            "lng": f"{location.longitude:f}",
            "tzid": location.timezone,
            "formatted": 0,
            "date": date,
        }

    def fetch(self, location: Location, date: str) -> SunApiResponse:
        """Fetch sun times for a location.

        Args:
            location: Resolved location
            date: Date in YYYY-MM-DD format, already validated by the caller

        Returns:
            Decoded API response

        Raises:
            FetchFailed: If the lookup fails
            DecodeFailed: If the response cannot be decoded
        """
        # NOTE: the API computes times from the coordinates, so two points
        # in the same city can differ slightly.
        logger.info(
            f"Fetching sun times for {location.city} ({location.timezone}) "
            f"{location.latitude},{location.longitude} on {date}"
        )
        body = self.source.retrieve(TIMES_API, self.base_url, self.build_params(location, date))
        return self.decode_response(body)

    def decode_response(self, body: bytes) -> SunApiResponse:
        """Decode a times API response body.

        Every field is decoded explicitly; a single bad field fails the whole
        response.

        Raises:
            DecodeFailed: If the body is not valid JSON, has the wrong shape,
                reports a non-OK status, or a field fails to decode
        """
        try:
            data = json.loads(body)
        except ValueError as e:
            raise DecodeFailed(TIMES_API, f"invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise DecodeFailed(TIMES_API, f"expected a JSON object, got {type(data).__name__}")

        status = data.get("status")
        if status is not None and status != "OK":
            raise DecodeFailed(TIMES_API, f"API returned status {status}")

        results = data.get("results")
        if not isinstance(results, dict):
            raise DecodeFailed(TIMES_API, "expected a results object", field="results")

        return SunApiResponse(
            results=self.decode_results(results),
            status=status,
            tzid=data.get("tzid"),
        )

    def decode_results(self, results: Dict[str, Any]) -> TimeOfDayReport:
        """Decode the ``results`` object into a report.

        Absent keys decode to None the same way JSON nulls do.
        """
        decoded = {}
        try:
            for field in TIMESTAMP_FIELDS:
                decoded[field] = decode_timestamp(results.get(field))
            for field in DURATION_FIELDS:
                decoded[field] = decode_duration(results.get(field))
        except CodecError as e:
            raise DecodeFailed(TIMES_API, str(e), field=field) from e

        logger.debug(f"Decoded sun times: {decoded}")
        return TimeOfDayReport(**decoded)
