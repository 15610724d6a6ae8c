"""Classify raw location input as coordinates or a free-text place name."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

_COORDINATES_RE = re.compile(r"-?\d+\.?\d*,-?\d+\.?\d*", re.ASCII)


class LocationKind(str, Enum):
    COORDINATES = "coordinates"
    NAME = "name"


@dataclass(frozen=True)
class ResolvedLocation:
    """Location input after classification."""

    kind: LocationKind
    raw: str
    lat: Optional[float] = None
    lon: Optional[float] = None

    @property
    def is_coordinates(self) -> bool:
        return self.kind is LocationKind.COORDINATES


def resolve_location(raw: str) -> ResolvedLocation:
    """Return coordinates for ``"lat,lon"`` input, otherwise a name lookup.

    Anything that is not exactly two plain decimal numbers separated by one
    comma falls through to a name, including input with whitespace.
    """

    if _COORDINATES_RE.fullmatch(raw):
        lat, lon = raw.split(",")
        return ResolvedLocation(
            kind=LocationKind.COORDINATES, raw=raw, lat=float(lat), lon=float(lon)
        )
    return ResolvedLocation(kind=LocationKind.NAME, raw=raw)


__all__ = ["LocationKind", "ResolvedLocation", "resolve_location"]
