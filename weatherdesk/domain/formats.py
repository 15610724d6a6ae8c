"""Export format definitions."""

from __future__ import annotations

from enum import Enum

from weatherdesk.domain.errors import UnsupportedFormat


class ExportFormat(str, Enum):
    """Supported history export formats."""

    JSON = "json"
    CSV = "csv"
    XML = "xml"

    @classmethod
    def parse(cls, token: str) -> "ExportFormat":
        """Match a format token case-insensitively. Padded tokens do not match."""

        try:
            return cls(token.lower())
        except ValueError:
            raise UnsupportedFormat() from None


MEDIA_TYPES: dict[ExportFormat, str] = {
    ExportFormat.JSON: "application/json",
    ExportFormat.CSV: "text/csv",
    ExportFormat.XML: "application/xml",
}

__all__ = ["ExportFormat", "MEDIA_TYPES"]
