"""Validated persistence for saved weather searches."""

from __future__ import annotations

from datetime import datetime
import logging
from threading import Lock
from typing import Any, Optional

from sqlalchemy import select

from weatherdesk import db_models
from weatherdesk.config import settings
from weatherdesk.db import Storage
from weatherdesk.domain import NotFound, ValidationError
from weatherdesk.models.history import (
    DateRange,
    WeatherSearchCreate,
    WeatherSearchRecord,
    WeatherSearchUpdate,
    WeatherSnapshotData,
)
from weatherdesk.models.weather import Coordinates

logger = logging.getLogger("weatherdesk.history")

MIN_TEMPERATURE_C = -100
MAX_TEMPERATURE_C = 60

# Columns an update may touch; date range and coordinates are fixed at creation.
UPDATABLE_FIELDS = (
    "location",
    "temperature",
    "condition",
    "humidity",
    "wind_speed",
    "visibility",
    "uv_index",
)


def _validate_core(location: Optional[str], temperature: Optional[float]) -> str:
    if not location or not location.strip() or temperature is None:
        raise ValidationError("Location and temperature are required")
    if not (MIN_TEMPERATURE_C <= temperature <= MAX_TEMPERATURE_C):
        raise ValidationError("Temperature must be between -100°C and 60°C")
    return location.strip()


def _validate_date_range(candidate: WeatherSearchCreate) -> None:
    start, end = candidate.date_range_start, candidate.date_range_end
    if (start is None) != (end is None):
        raise ValidationError("Date range requires both a start and an end date")
    if start is not None and end is not None and start > end:
        raise ValidationError("Start date must be before end date")


def _to_record(row: db_models.WeatherSearch) -> WeatherSearchRecord:
    date_range = None
    if row.date_range_start is not None and row.date_range_end is not None:
        date_range = DateRange(start=row.date_range_start, end=row.date_range_end)

    coordinates = None
    if row.coordinates_lat is not None and row.coordinates_lng is not None:
        coordinates = Coordinates(lat=row.coordinates_lat, lng=row.coordinates_lng)

    return WeatherSearchRecord(
        id=row.id,
        location=row.location,
        date_searched=row.date_searched,
        date_range=date_range,
        weather_data=WeatherSnapshotData(
            temperature=row.temperature,
            condition=row.condition,
            humidity=row.humidity,
            wind_speed=row.wind_speed,
            visibility=row.visibility,
            uv_index=row.uv_index,
            sunrise=row.sunrise,
            sunset=row.sunset,
            coordinates=coordinates,
        ),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_raw(row: db_models.WeatherSearch) -> dict[str, Any]:
    """Flat column mapping of a row, as used by the export formats."""

    raw: dict[str, Any] = {}
    for column in db_models.WeatherSearch.__table__.columns:
        value = getattr(row, column.key)
        raw[column.key] = value.isoformat() if hasattr(value, "isoformat") else value
    return raw


class HistoryStore:
    """CRUD over the ``weather_searches`` table.

    The store never hands out ORM instances; callers always get detached
    pydantic records or plain dicts. Writes go through a single lock so two
    requests cannot interleave a partial update of the same row.
    """

    def __init__(self, storage: Storage, *, list_limit: int | None = None) -> None:
        self.storage = storage
        self.list_limit = list_limit or settings.history_list_limit
        self._write_lock = Lock()

    def save(self, candidate: WeatherSearchCreate) -> int:
        location = _validate_core(candidate.location, candidate.temperature)
        _validate_date_range(candidate)

        now = datetime.utcnow()
        row = db_models.WeatherSearch(
            location=location,
            date_searched=now,
            date_range_start=candidate.date_range_start,
            date_range_end=candidate.date_range_end,
            temperature=candidate.temperature,
            condition=candidate.condition or "unknown",
            humidity=candidate.humidity or 0,
            wind_speed=candidate.wind_speed or 0,
            visibility=candidate.visibility or 0,
            uv_index=candidate.uv_index or 0,
            sunrise=candidate.sunrise or "",
            sunset=candidate.sunset or "",
            coordinates_lat=candidate.coordinates.lat if candidate.coordinates else None,
            coordinates_lng=candidate.coordinates.lng if candidate.coordinates else None,
            created_at=now,
            updated_at=now,
        )
        with self._write_lock, self.storage.session() as db:
            db.add(row)
            db.flush()
            record_id = row.id

        logger.info("Saved weather search %s for %r", record_id, location)
        return record_id

    def list(self) -> list[WeatherSearchRecord]:
        """Most recent searches first, capped at ``list_limit``."""

        with self.storage.session() as db:
            rows = db.scalars(self._ordered().limit(self.list_limit)).all()
            return [_to_record(row) for row in rows]

    def list_all(self) -> list[dict[str, Any]]:
        """Every stored row as a flat dict, most recent first."""

        with self.storage.session() as db:
            rows = db.scalars(self._ordered()).all()
            return [_to_raw(row) for row in rows]

    def get(self, record_id: int) -> WeatherSearchRecord:
        with self.storage.session() as db:
            row = db.get(db_models.WeatherSearch, record_id)
            if row is None:
                raise NotFound()
            return _to_record(row)

    def update(self, record_id: int, changes: WeatherSearchUpdate) -> None:
        location = _validate_core(changes.location, changes.temperature)

        values = {
            "location": location,
            "temperature": changes.temperature,
            "condition": changes.condition or "unknown",
            "humidity": changes.humidity or 0,
            "wind_speed": changes.wind_speed or 0,
            "visibility": changes.visibility or 0,
            "uv_index": changes.uv_index or 0,
        }
        with self._write_lock, self.storage.session() as db:
            row = db.get(db_models.WeatherSearch, record_id)
            if row is None:
                raise NotFound()
            for field in UPDATABLE_FIELDS:
                setattr(row, field, values[field])
            row.updated_at = datetime.utcnow()

        logger.info("Updated weather search %s", record_id)

    def delete(self, record_id: int) -> None:
        with self._write_lock, self.storage.session() as db:
            row = db.get(db_models.WeatherSearch, record_id)
            if row is None:
                raise NotFound()
            db.delete(row)

        logger.info("Deleted weather search %s", record_id)

    @staticmethod
    def _ordered():
        return select(db_models.WeatherSearch).order_by(
            db_models.WeatherSearch.date_searched.desc(),
            db_models.WeatherSearch.id.desc(),
        )


__all__ = ["HistoryStore", "MAX_TEMPERATURE_C", "MIN_TEMPERATURE_C", "UPDATABLE_FIELDS"]
