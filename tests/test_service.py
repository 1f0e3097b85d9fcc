"""Tests for the report service."""

from datetime import date
from unittest.mock import Mock

import pytest

from suntimes.config.settings import Settings
from suntimes.core.errors import DecodeFailed, InvalidCoordinateFormat, OutOfRange
from suntimes.service import SuntimesService
from suntimes.sources import FixtureSource, HttpSource


@pytest.fixture
def offline_service(fixtures_dir):
    source = FixtureSource({
        "ipapi": fixtures_dir / "ipapi_karachi.json",
        "suntimes": fixtures_dir / "suntimes_karachi.json",
    })
    return SuntimesService(Settings(), source=source)


class TestSuntimesService:
    """Test the resolver, fetcher and renderer working together."""

    def test_report_from_input(self, offline_service):
        text = offline_service.report(
            date(2025, 6, 21), city="Karachi", timezone="Asia/Karachi", coordinates="24.8546,67.0207"
        )
        lines = text.splitlines()

        assert lines[0] == "Karachi 24.855,67.021 (Asia/Karachi)"
        assert lines[1] == "Saturday, Jun 21, 2025"
        assert "Sunrise                       05:12:03" in lines
        assert "Day length                    12h 30m 0s" in lines

    def test_report_from_ip(self, offline_service):
        text = offline_service.report(date(2025, 6, 21), detect_location=True)
        assert text.startswith("Karachi 24.855,67.021 (Asia/Karachi)\n")

    def test_defaults_fill_missing_input(self, offline_service):
        location = offline_service.resolve_location(False)
        assert location.city == "Unknown"
        assert (location.latitude, location.longitude) == (24.85468, 67.02071)
        assert location.timezone == offline_service.settings.defaults.timezone

    def test_fetch_uses_iso_date(self, karachi, karachi_body):
        source = Mock()
        source.retrieve.return_value = karachi_body
        service = SuntimesService(Settings(), source=source)

        service.fetch_times(karachi, date(2025, 6, 1))

        _, _, params = source.retrieve.call_args[0]
        assert params["date"] == "2025-06-01"

    def test_no_fetch_after_invalid_location(self):
        source = Mock()
        service = SuntimesService(Settings(), source=source)

        with pytest.raises(OutOfRange):
            service.report(date(2025, 6, 21), coordinates="95,0")

        source.retrieve.assert_not_called()

    def test_no_partial_report(self, fixtures_dir):
        source = FixtureSource({"suntimes": fixtures_dir / "suntimes_truncated.json"})
        service = SuntimesService(Settings(), source=source)

        with pytest.raises(DecodeFailed):
            service.report(date(2025, 6, 21), coordinates="24.8546,67.0207")

    def test_empty_coordinates_not_defaulted(self, offline_service):
        with pytest.raises(InvalidCoordinateFormat):
            offline_service.resolve_location(False, coordinates="")

    def test_empty_city_kept(self, offline_service):
        location = offline_service.resolve_location(False, city="", timezone="")
        assert location.city == ""
        assert location.timezone == ""

    def test_source_created_from_settings(self):
        assert isinstance(SuntimesService(Settings()).source, HttpSource)
