"""Saved weather search endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from weatherdesk.api.dependencies import get_history_store
from weatherdesk.models import (
    HistoryCreateResponse,
    MessageResponse,
    WeatherSearchCreate,
    WeatherSearchRecord,
    WeatherSearchUpdate,
)
from weatherdesk.services import HistoryStore

router = APIRouter(prefix="/api/weather/history", tags=["history"])


@router.post("", response_model=HistoryCreateResponse, summary="Save a weather search")
async def create_search(
    payload: WeatherSearchCreate, store: HistoryStore = Depends(get_history_store)
) -> HistoryCreateResponse:
    record_id = store.save(payload)
    return HistoryCreateResponse(id=record_id)


@router.get(
    "",
    response_model=list[WeatherSearchRecord],
    summary="List the most recent saved searches",
)
async def list_searches(
    store: HistoryStore = Depends(get_history_store),
) -> list[WeatherSearchRecord]:
    return store.list()


@router.get(
    "/{record_id}", response_model=WeatherSearchRecord, summary="Fetch one saved search"
)
async def get_search(
    record_id: int, store: HistoryStore = Depends(get_history_store)
) -> WeatherSearchRecord:
    return store.get(record_id)


@router.put("/{record_id}", response_model=MessageResponse, summary="Edit a saved search")
async def update_search(
    record_id: int,
    payload: WeatherSearchUpdate,
    store: HistoryStore = Depends(get_history_store),
) -> MessageResponse:
    store.update(record_id, payload)
    return MessageResponse(message="Weather data updated successfully")


@router.delete("/{record_id}", response_model=MessageResponse, summary="Delete a saved search")
async def delete_search(
    record_id: int, store: HistoryStore = Depends(get_history_store)
) -> MessageResponse:
    store.delete(record_id)
    return MessageResponse(message="Weather data deleted successfully")
