"""Exception hierarchy for suntimes.

Every failure of a run surfaces as a subclass of :class:`SuntimesError`; only
the CLI decides to turn one into a process exit.
"""

from typing import Optional


class SuntimesError(Exception):
    """Base class for all suntimes errors."""


class CodecError(SuntimesError, ValueError):
    """A raw JSON scalar could not be decoded."""

    def __init__(self, value, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"{reason}: {value!r}")


class MalformedTimestamp(CodecError):
    """Timestamp is not in ``YYYY-MM-DDThh:mm:ss±hh:mm`` form."""


class MalformedDuration(CodecError):
    """Duration is not an integer count of seconds."""


class LocationError(SuntimesError, ValueError):
    """User supplied location is invalid."""


class InvalidCoordinateFormat(LocationError):
    """Coordinates are not a ``lat,lon`` pair."""

    def __init__(self, coordinates: str):
        self.coordinates = coordinates
        super().__init__(f"invalid coordinates {coordinates!r}, expected 'lat,lon'")


class InvalidNumber(LocationError):
    """A coordinate component is not a number."""

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"invalid {field}: {value!r} is not a number")


class OutOfRange(LocationError):
    """A coordinate lies outside its valid range."""

    def __init__(self, field: str, value: float, minimum: float, maximum: float):
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(f"invalid {field}: {value:f} (must be between {minimum:g} and {maximum:g})")


class MissingField(SuntimesError, KeyError):
    """An expected key is absent from a response object."""

    def __init__(self, field: str, source: str):
        self.field = field
        self.source = source
        super().__init__(field)

    def __str__(self) -> str:
        return f"{self.source} response is missing field {self.field!r}"


class TypeMismatch(SuntimesError, TypeError):
    """A response field has the wrong JSON type."""

    def __init__(self, field: str, expected: str, value, source: str):
        self.field = field
        self.expected = expected
        self.value = value
        self.source = source
        super().__init__(
            f"{source} response field {field!r} should be a {expected}, got {type(value).__name__} {value!r}"
        )


class FetchFailed(SuntimesError):
    """Retrieving data from a source failed."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"failed to fetch {source}: {reason}")


class DecodeFailed(SuntimesError):
    """A response body could not be decoded into a report."""

    def __init__(self, source: str, reason: str, field: Optional[str] = None):
        self.source = source
        self.reason = reason
        self.field = field
        where = f" (field {field!r})" if field else ""
        super().__init__(f"failed to decode {source} response{where}: {reason}")
