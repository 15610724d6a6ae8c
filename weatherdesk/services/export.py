"""Serialize the weather search history as JSON, CSV or XML."""

from __future__ import annotations

import csv
import io
import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Optional, Sequence
from xml.sax.saxutils import escape, quoteattr

from weatherdesk.domain import MEDIA_TYPES, ExportFormat, NoData

CSV_HEADER = (
    "ID",
    "Location",
    "Date Searched",
    "Temperature",
    "Condition",
    "Humidity",
    "Wind Speed",
    "Visibility",
    "UV Index",
)

# (element name, raw column) pairs emitted for every XML record
XML_FIELDS = (
    ("id", "id"),
    ("location", "location"),
    ("dateSearched", "date_searched"),
    ("temperature", "temperature"),
    ("condition", "condition"),
    ("humidity", "humidity"),
    ("windSpeed", "wind_speed"),
    ("visibility", "visibility"),
    ("uvIndex", "uv_index"),
)


@dataclass(frozen=True)
class ExportPayload:
    content: bytes
    media_type: str
    filename: str

    @property
    def content_disposition(self) -> str:
        return f"attachment; filename={self.filename}"


def _timestamp(exported_at: Optional[datetime]) -> str:
    moment = exported_at or datetime.now(timezone.utc)
    return moment.isoformat().replace("+00:00", "Z")


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def to_json(records: Sequence[dict[str, Any]], exported_at: str) -> str:
    return json.dumps(
        {"exportDate": exported_at, "totalRecords": len(records), "data": list(records)},
        indent=2,
        ensure_ascii=False,
    )


def to_csv(records: Sequence[dict[str, Any]], exported_at: str) -> str:
    buffer = io.StringIO()
    buffer.write(",".join(CSV_HEADER) + "\n")
    # QUOTE_NONNUMERIC: text columns are always quoted, numbers never are.
    writer = csv.writer(buffer, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    writer.writerows(
        [
            row["id"],
            _text(row["location"]),
            _text(row["date_searched"]),
            row["temperature"],
            _text(row["condition"]),
            row["humidity"],
            row["wind_speed"],
            row["visibility"],
            row["uv_index"],
        ]
        for row in records
    )
    return buffer.getvalue().rstrip("\n")


def _cdata(value: Any) -> str:
    # "]]>" cannot appear inside a CDATA section, so split it across two.
    return "<![CDATA[" + _text(value).replace("]]>", "]]]]><![CDATA[>") + "]]>"


def to_xml(records: Sequence[dict[str, Any]], exported_at: str) -> str:
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f"<weatherData exportDate={quoteattr(exported_at)} totalRecords=\"{len(records)}\">",
    ]
    for row in records:
        lines.append("  <record>")
        for element, column in XML_FIELDS:
            if column == "location":
                content = _cdata(row[column])
            else:
                content = escape(_text(row[column]))
            lines.append(f"    <{element}>{content}</{element}>")
        lines.append("  </record>")
    lines.append("</weatherData>")
    return "\n".join(lines)


_SERIALIZERS: dict[ExportFormat, Callable[[Sequence[dict[str, Any]], str], str]] = {
    ExportFormat.JSON: to_json,
    ExportFormat.CSV: to_csv,
    ExportFormat.XML: to_xml,
}


def export_records(
    records: Sequence[dict[str, Any]],
    fmt: str | ExportFormat,
    *,
    exported_at: Optional[datetime] = None,
) -> ExportPayload:
    """Serialize raw history rows in the requested format.

    Raises ``UnsupportedFormat`` for anything other than json/csv/xml (any
    case) and ``NoData`` when there is nothing to export. Rows are written in
    the order given.
    """

    export_format = fmt if isinstance(fmt, ExportFormat) else ExportFormat.parse(fmt)
    if not records:
        raise NoData()

    body = _SERIALIZERS[export_format](records, _timestamp(exported_at))
    return ExportPayload(
        content=body.encode("utf-8"),
        media_type=MEDIA_TYPES[export_format],
        filename=f"weather-data.{export_format.value}",
    )


__all__ = ["CSV_HEADER", "ExportPayload", "export_records", "to_csv", "to_json", "to_xml"]
