"""SQLAlchemy ORM models for the WeatherDesk backend."""

from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import Date, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from weatherdesk.db import Base


class WeatherSearch(Base):
    """A saved weather search with a snapshot of the observation."""

    __tablename__ = "weather_searches"
    # AUTOINCREMENT keeps SQLite from handing out the id of a deleted row again.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    location: Mapped[str] = mapped_column(Text, nullable=False)
    date_searched: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False, index=True
    )
    date_range_start: Mapped[date | None] = mapped_column(Date, nullable=True)
    date_range_end: Mapped[date | None] = mapped_column(Date, nullable=True)

    temperature: Mapped[float] = mapped_column(Float, nullable=False)
    condition: Mapped[str] = mapped_column(String(64), nullable=False, default="unknown")
    humidity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    wind_speed: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    visibility: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    uv_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    sunrise: Mapped[str] = mapped_column(String(16), nullable=False, default="")
    sunset: Mapped[str] = mapped_column(String(16), nullable=False, default="")
    coordinates_lat: Mapped[float | None] = mapped_column(Float, nullable=True)
    coordinates_lng: Mapped[float | None] = mapped_column(Float, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<WeatherSearch {self.id} {self.location!r} {self.temperature}>"
