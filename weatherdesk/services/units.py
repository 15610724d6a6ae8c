"""Unit conversions and rounding used when normalizing upstream data."""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone

DEFAULT_VISIBILITY_M = 10000


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2)."""

    return int(math.floor(value + 0.5))


def mps_to_kmh(speed_mps: float) -> int:
    return round_half_up(speed_mps * 3.6)


def meters_to_km(distance_m: float | None) -> int:
    if distance_m is None:
        distance_m = DEFAULT_VISIBILITY_M
    return round_half_up(distance_m / 1000)


def offset_timezone(offset_seconds: int | None) -> timezone:
    """Fixed-offset tzinfo for an upstream ``timezone`` shift in seconds."""

    return timezone(timedelta(seconds=offset_seconds or 0))


def format_clock(epoch_seconds: int, offset_seconds: int | None = None) -> str:
    """Format a UNIX timestamp as ``hh:mm AM/PM`` in the given UTC offset."""

    moment = datetime.fromtimestamp(epoch_seconds, tz=offset_timezone(offset_seconds))
    return moment.strftime("%I:%M %p")


__all__ = [
    "DEFAULT_VISIBILITY_M",
    "format_clock",
    "meters_to_km",
    "mps_to_kmh",
    "offset_timezone",
    "round_half_up",
]
