"""Shared test fixtures."""

from pathlib import Path

import pytest

from suntimes.core.models import Location

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def karachi() -> Location:
    return Location(city="Karachi", timezone="Asia/Karachi", latitude=24.8546, longitude=67.0207)


@pytest.fixture
def karachi_body() -> bytes:
    return (FIXTURES_DIR / "suntimes_karachi.json").read_bytes()
