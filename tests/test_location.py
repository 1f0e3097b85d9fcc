"""Tests for location resolution."""

import json
from unittest.mock import Mock

import pytest
from pydantic import ValidationError

from suntimes.core.errors import (
    DecodeFailed,
    FetchFailed,
    InvalidCoordinateFormat,
    InvalidNumber,
    MissingField,
    OutOfRange,
    TypeMismatch,
)
from suntimes.core.location import LocationResolver
from suntimes.core.models import Location

IP_URL = "http://ip-api.example/json"


def make_resolver(body=None):
    source = Mock()
    source.retrieve.return_value = body
    return LocationResolver(source, ip_lookup_url=IP_URL), source


def ip_body(**overrides):
    data = {"status": "success", "city": "Karachi", "timezone": "Asia/Karachi", "lat": 24.8546, "lon": 67.0207}
    data.update(overrides)
    return json.dumps({k: v for k, v in data.items() if v is not ...}).encode()


class TestFromInput:
    """Test locations built from command line values."""

    def setup_method(self):
        self.resolver, self.source = make_resolver()

    def test_valid(self):
        loc = self.resolver.from_input("Karachi", "Asia/Karachi", "24.85468,67.02071")
        assert loc == Location(city="Karachi", timezone="Asia/Karachi", latitude=24.85468, longitude=67.02071)
        self.source.retrieve.assert_not_called()

    def test_whitespace_around_components(self):
        loc = self.resolver.from_input("Oslo", "Europe/Oslo", "59.91, 10.75")
        assert (loc.latitude, loc.longitude) == (59.91, 10.75)

    def test_missing_longitude(self):
        with pytest.raises(InvalidCoordinateFormat):
            self.resolver.from_input("Karachi", "Asia/Karachi", "24.85")

    def test_splits_on_first_comma(self):
        """Anything after the first comma belongs to the longitude."""
        with pytest.raises(InvalidNumber) as exc_info:
            self.resolver.from_input("Karachi", "Asia/Karachi", "24.85,67.02,10")
        assert exc_info.value.field == "longitude"

    @pytest.mark.parametrize("coordinates, field", [
        ("north,67.02", "latitude"),
        ("24.85,east", "longitude"),
        (",67.02", "latitude"),
        ("nan,67.02", "latitude"),
    ])
    def test_invalid_number(self, coordinates, field):
        with pytest.raises(InvalidNumber) as exc_info:
            self.resolver.from_input("Karachi", "Asia/Karachi", coordinates)
        assert exc_info.value.field == field

    @pytest.mark.parametrize("coordinates", ["91.0,0", "-91.0,0"])
    def test_latitude_out_of_range(self, coordinates):
        with pytest.raises(OutOfRange) as exc_info:
            self.resolver.from_input("Nowhere", "UTC", coordinates)
        assert exc_info.value.field == "latitude"
        assert (exc_info.value.minimum, exc_info.value.maximum) == (-90.0, 90.0)

    def test_longitude_boundary_inclusive(self):
        assert self.resolver.from_input("Dateline", "UTC", "0,180.0").longitude == 180.0
        assert self.resolver.from_input("Dateline", "UTC", "0,-180.0").longitude == -180.0
        assert self.resolver.from_input("Pole", "UTC", "90,0").latitude == 90.0

    def test_longitude_out_of_range(self):
        with pytest.raises(OutOfRange) as exc_info:
            self.resolver.from_input("Dateline", "UTC", "0,180.01")
        assert exc_info.value.field == "longitude"
        assert exc_info.value.value == 180.01
        assert "180.01" in str(exc_info.value)

    def test_location_is_immutable(self):
        loc = self.resolver.from_input("Karachi", "Asia/Karachi", "24.85,67.02")
        with pytest.raises(ValidationError):
            loc.city = "Lahore"


class TestFromIp:
    """Test locations from the IP geolocation lookup."""

    def test_valid(self, fixtures_dir):
        resolver, source = make_resolver((fixtures_dir / "ipapi_karachi.json").read_bytes())

        loc = resolver.from_ip()

        assert loc == Location(city="Karachi", timezone="Asia/Karachi", latitude=24.8546, longitude=67.0207)
        source.retrieve.assert_called_once_with("ipapi", IP_URL)

    def test_integer_coordinates(self):
        resolver, _ = make_resolver(ip_body(lat=24, lon=67))
        loc = resolver.from_ip()
        assert (loc.latitude, loc.longitude) == (24.0, 67.0)

    @pytest.mark.parametrize("field", ["city", "timezone", "lat", "lon"])
    def test_missing_field(self, field):
        resolver, _ = make_resolver(ip_body(**{field: ...}))
        with pytest.raises(MissingField) as exc_info:
            resolver.from_ip()
        assert exc_info.value.field == field
        assert field in str(exc_info.value)

    @pytest.mark.parametrize("field, value", [
        ("city", 42),
        ("timezone", None),
        ("lat", "24.85"),
        ("lon", None),
        ("lat", True),
    ])
    def test_type_mismatch(self, field, value):
        resolver, _ = make_resolver(ip_body(**{field: value}))
        with pytest.raises(TypeMismatch) as exc_info:
            resolver.from_ip()
        assert exc_info.value.field == field

    def test_out_of_range_coordinates(self):
        resolver, _ = make_resolver(ip_body(lat=123.0))
        with pytest.raises(OutOfRange):
            resolver.from_ip()

    def test_failed_lookup(self):
        body = json.dumps({"status": "fail", "message": "private range", "query": "10.0.0.1"}).encode()
        resolver, _ = make_resolver(body)
        with pytest.raises(FetchFailed, match="private range"):
            resolver.from_ip()

    def test_invalid_json(self):
        resolver, _ = make_resolver(b"<html>rate limited</html>")
        with pytest.raises(DecodeFailed):
            resolver.from_ip()

    @pytest.mark.parametrize("field", ["lat", "lon"])
    def test_nan_coordinate(self, field):
        """NaN is valid JSON for the decoder but never a coordinate."""
        data = {"city": "X", "timezone": "UTC", "lat": 0, "lon": 0}
        body = json.dumps({**data, field: float("nan")}).encode()
        assert b"NaN" in body
        resolver, _ = make_resolver(body)

        with pytest.raises(OutOfRange) as exc_info:
            resolver.from_ip()

        assert exc_info.value.field == ("latitude" if field == "lat" else "longitude")

    def test_not_an_object(self):
        resolver, _ = make_resolver(b"[1, 2]")
        with pytest.raises(DecodeFailed):
            resolver.from_ip()

    def test_fetch_failure_propagates(self):
        resolver, source = make_resolver()
        source.retrieve.side_effect = FetchFailed("ipapi", "connection refused")
        with pytest.raises(FetchFailed):
            resolver.from_ip()


class TestResolve:
    """Test selecting the location source."""

    def test_uses_input_when_not_detecting(self):
        resolver, source = make_resolver(ip_body())
        loc = resolver.resolve(False, "Oslo", "Europe/Oslo", "59.91,10.75")
        assert loc.city == "Oslo"
        source.retrieve.assert_not_called()

    def test_uses_ip_lookup_when_detecting(self):
        resolver, source = make_resolver(ip_body())
        loc = resolver.resolve(True, "Oslo", "Europe/Oslo", "not,used")
        assert loc.city == "Karachi"
        source.retrieve.assert_called_once()
