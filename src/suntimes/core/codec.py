"""Decoders for the scalar values returned by the sunrise-sunset API.

Timestamps arrive as ISO-8601 strings with a UTC offset and are reduced to
their local clock time. Durations arrive as a count of seconds and are
broken down into hours, minutes and seconds. A JSON ``null`` decodes to
``None`` for both.
"""

import math
import re
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional

from .errors import MalformedDuration, MalformedTimestamp

TIMESTAMP_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[+-]\d{2}:\d{2}$")
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
CLOCK_FORMAT = "%H:%M:%S"

DURATION_PATTERN = re.compile(r"^[+-]?\d+(\.\d+)?$")


def _unquote(raw: Any) -> str:
    """Strip whitespace and JSON string quotes from a raw scalar."""
    return str(raw).strip().strip('"')


def decode_timestamp(raw: Any) -> Optional[str]:
    """Decode an ISO-8601 timestamp into its ``hh:mm:ss`` clock time.

    Args:
        raw: Decoded JSON value or raw JSON token text

    Returns:
        Local time of day in 24-hour form, or None for null

    Raises:
        MalformedTimestamp: If the value is not ``YYYY-MM-DDThh:mm:ss±hh:mm``
    """
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise MalformedTimestamp(raw, "timestamp must be a string")

    text = _unquote(raw)
    if text == "null":
        return None

    if not TIMESTAMP_PATTERN.match(text):
        raise MalformedTimestamp(raw, "expected YYYY-MM-DDThh:mm:ss±hh:mm")

    try:
        moment = datetime.strptime(text, TIMESTAMP_FORMAT)
    except ValueError as e:
        raise MalformedTimestamp(raw, str(e)) from e

    # The offset stays attached to the instant, so this is the wall clock there.
    return moment.strftime(CLOCK_FORMAT)


def format_duration(seconds: int) -> str:
    """Format whole seconds as ``"<H>h <M>m <S>s"``.

    Negative values are decomposed on their magnitude and every component
    carries the sign.
    """
    sign = -1 if seconds < 0 else 1
    hours, remainder = divmod(abs(seconds), 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{sign * hours}h {sign * minutes}m {sign * secs}s"


def _to_seconds(raw: Any) -> Decimal:
    if isinstance(raw, bool):
        raise MalformedDuration(raw, "duration must be a number of seconds")
    if isinstance(raw, int):
        return Decimal(raw)
    if isinstance(raw, float):
        if not math.isfinite(raw):
            raise MalformedDuration(raw, "duration must be finite")
        return Decimal(str(raw))

    text = _unquote(raw)
    if not DURATION_PATTERN.match(text):
        raise MalformedDuration(raw, "duration must be a number of seconds")
    return Decimal(text)


def decode_duration(raw: Any) -> Optional[str]:
    """Decode a count of seconds into an ``"<H>h <M>m <S>s"`` breakdown.

    Args:
        raw: Decoded JSON value (int, numeric string) or raw JSON token text

    Returns:
        Human readable duration, or None for null

    Raises:
        MalformedDuration: If the value is not numeric
    """
    if raw is None:
        return None
    if isinstance(raw, str) and _unquote(raw) == "null":
        return None

    seconds = _to_seconds(raw).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return format_duration(int(seconds))
