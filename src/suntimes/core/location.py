"""Resolve the location a report is computed for."""

import json
import math
from typing import Any, Dict, Optional

from ..config.settings import settings
from ..sources.base import DataSource
from ..utils.logging import get_logger
from .errors import (
    DecodeFailed,
    FetchFailed,
    InvalidCoordinateFormat,
    InvalidNumber,
    MissingField,
    OutOfRange,
    TypeMismatch,
)
from .models import Location

logger = get_logger(__name__)

IP_API = "ipapi"

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


def parse_coordinate(field: str, text: str) -> float:
    """Parse one coordinate component.

    Raises:
        InvalidNumber: If the text is not a finite number
    """
    try:
        value = float(text.strip())
    except ValueError:
        raise InvalidNumber(field, text) from None

    if math.isnan(value):
        raise InvalidNumber(field, text)
    return value


def check_range(field: str, value: float, bounds: tuple) -> float:
    """Validate a coordinate against inclusive bounds.

    Raises:
        OutOfRange: If the value lies outside the bounds or is NaN
    """
    minimum, maximum = bounds
    if math.isnan(value) or value < minimum or value > maximum:
        raise OutOfRange(field, value, minimum, maximum)
    return value


class LocationResolver:
    """Build a Location from user input or from an IP geolocation lookup."""

    def __init__(self, source: DataSource, ip_lookup_url: Optional[str] = None):
        """Initialize location resolver.

        Args:
            source: Data source used for the geolocation lookup
            ip_lookup_url: Geolocation endpoint (uses settings default if None)
        """
        self.source = source
        self.ip_lookup_url = ip_lookup_url or settings.api.ip_lookup_url

    def from_input(self, city: str, timezone: str, coordinates: str) -> Location:
        """Build a location from command line values.

        Args:
            city: City label
            timezone: Timezone name
            coordinates: Coordinates in ``lat,lon`` format

        Returns:
            Validated location

        Raises:
            InvalidCoordinateFormat: If coordinates are not a pair
            InvalidNumber: If a component is not a number
            OutOfRange: If a component is outside its range
        """
        parts = coordinates.split(",", 1)
        if len(parts) < 2:
            raise InvalidCoordinateFormat(coordinates)

        latitude = check_range("latitude", parse_coordinate("latitude", parts[0]), LATITUDE_RANGE)
        longitude = check_range("longitude", parse_coordinate("longitude", parts[1]), LONGITUDE_RANGE)

        return Location(city=city, timezone=timezone, latitude=latitude, longitude=longitude)

    def from_ip(self) -> Location:
        """Look up the location of the current IP address.

        Returns:
            Location reported by the geolocation service

        Raises:
            FetchFailed: If the lookup fails
            DecodeFailed: If the body is not a JSON object
            MissingField: If an expected key is absent
            TypeMismatch: If a field has the wrong JSON type
        """
        body = self.source.retrieve(IP_API, self.ip_lookup_url)

        try:
            data = json.loads(body)
        except ValueError as e:
            raise DecodeFailed(IP_API, str(e)) from e

        if not isinstance(data, dict):
            raise DecodeFailed(IP_API, f"expected a JSON object, got {type(data).__name__}")

        if data.get("status") == "fail":
            raise FetchFailed(IP_API, data.get("message", "lookup failed"))

        city = self._field(data, "city", str, "string")
        timezone = self._field(data, "timezone", str, "string")
        latitude = self._field(data, "lat", (int, float), "number")
        longitude = self._field(data, "lon", (int, float), "number")

        logger.info(f"Detected location: {city} ({timezone}) {latitude},{longitude}")

        return Location(
            city=city,
            timezone=timezone,
            latitude=check_range("latitude", float(latitude), LATITUDE_RANGE),
            longitude=check_range("longitude", float(longitude), LONGITUDE_RANGE),
        )

    @staticmethod
    def _field(data: Dict[str, Any], key: str, types, expected: str) -> Any:
        if key not in data:
            raise MissingField(key, IP_API)

        value = data[key]
        # bool is an int subclass but never a valid coordinate
        if isinstance(value, bool) or not isinstance(value, types):
            raise TypeMismatch(key, expected, value, IP_API)
        return value

    def resolve(self, detect_location: bool, city: str, timezone: str, coordinates: str) -> Location:
        """Resolve the location from exactly one of the two sources.

        Args:
            detect_location: Use the IP geolocation lookup instead of the input values
            city: City label
            timezone: Timezone name
            coordinates: Coordinates in ``lat,lon`` format

        Returns:
            Resolved location
        """
        if detect_location:
            return self.from_ip()
        return self.from_input(city, timezone, coordinates)
