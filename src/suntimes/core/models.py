"""Data models shared by the resolver, fetcher and renderer."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

TIMESTAMP_FIELDS = (
    "sunrise",
    "sunset",
    "solar_noon",
    "civil_twilight_begin",
    "civil_twilight_end",
    "nautical_twilight_begin",
    "nautical_twilight_end",
    "astronomical_twilight_begin",
    "astronomical_twilight_end",
)
DURATION_FIELDS = ("day_length",)


class Location(BaseModel):
    """Place the report is computed for."""

    model_config = ConfigDict(frozen=True)

    city: str = Field(description="City label shown in the report header")
    timezone: str = Field(description="Timezone name passed to the API")
    latitude: float = Field(ge=-90.0, le=90.0, description="Latitude in degrees")
    longitude: float = Field(ge=-180.0, le=180.0, description="Longitude in degrees")


class TimeOfDayReport(BaseModel):
    """Decoded sun times for a single day.

    Timestamps hold a ``hh:mm:ss`` clock time, ``day_length`` holds a
    ``"<H>h <M>m <S>s"`` breakdown. None marks a value the API left null,
    which is normal for twilight at extreme latitudes.
    """

    model_config = ConfigDict(frozen=True)

    sunrise: Optional[str] = None
    sunset: Optional[str] = None
    solar_noon: Optional[str] = None
    day_length: Optional[str] = None
    civil_twilight_begin: Optional[str] = None
    civil_twilight_end: Optional[str] = None
    nautical_twilight_begin: Optional[str] = None
    nautical_twilight_end: Optional[str] = None
    astronomical_twilight_begin: Optional[str] = None
    astronomical_twilight_end: Optional[str] = None


class SunApiResponse(BaseModel):
    """Envelope of a sunrise-sunset API response."""

    model_config = ConfigDict(frozen=True)

    results: TimeOfDayReport
    status: Optional[str] = None
    tzid: Optional[str] = None
