"""Domain definitions for WeatherDesk."""

from .errors import (
    LocationNotFound,
    NoData,
    NotFound,
    UnsupportedFormat,
    UpstreamAuthError,
    UpstreamUnavailable,
    ValidationError,
    WeatherDeskError,
)
from .formats import MEDIA_TYPES, ExportFormat
from .location import LocationKind, ResolvedLocation, resolve_location

__all__ = [
    "ExportFormat",
    "LocationKind",
    "LocationNotFound",
    "MEDIA_TYPES",
    "NoData",
    "NotFound",
    "ResolvedLocation",
    "UnsupportedFormat",
    "UpstreamAuthError",
    "UpstreamUnavailable",
    "ValidationError",
    "WeatherDeskError",
    "resolve_location",
]
