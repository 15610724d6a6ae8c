"""Collapse 3-hour forecast samples into daily summaries."""

from __future__ import annotations

from datetime import date
from typing import Iterable

from weatherdesk.models.weather import ForecastDay, ForecastSample
from weatherdesk.services.units import round_half_up

FORECAST_DAYS = 5


def day_label(day: date) -> str:
    """Short label such as ``"Mon, Jan 1"``."""

    return f"{day:%a}, {day:%b} {day.day}"


def bucket_forecast(
    samples: Iterable[ForecastSample], *, days: int = FORECAST_DAYS
) -> list[ForecastDay]:
    """Reduce ordered interval samples to at most ``days`` daily aggregates.

    Samples are grouped by the calendar date of their own timestamp. Within a
    day the arrival order is kept, and the representative condition is the
    one at index ``len(conditions) // 2`` of that order. Days come out sorted
    by date; fewer distinct days in the input simply yield fewer entries.
    """

    temps: dict[date, list[float]] = {}
    conditions: dict[date, list[str]] = {}
    for sample in samples:
        key = sample.timestamp.date()
        temps.setdefault(key, []).append(sample.temperature)
        conditions.setdefault(key, []).append(sample.condition)

    summary: list[ForecastDay] = []
    for key in sorted(temps)[:days]:
        day_conditions = conditions[key]
        summary.append(
            ForecastDay(
                date=day_label(key),
                high=round_half_up(max(temps[key])),
                low=round_half_up(min(temps[key])),
                condition=day_conditions[len(day_conditions) // 2],
            )
        )
    return summary


__all__ = ["FORECAST_DAYS", "bucket_forecast", "day_label"]
