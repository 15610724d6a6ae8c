"""History export endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response

from weatherdesk.api.dependencies import get_history_store
from weatherdesk.domain import ExportFormat
from weatherdesk.services import HistoryStore, export_records

router = APIRouter(prefix="/api/export", tags=["export"])

logger = logging.getLogger("weatherdesk.api.export")


@router.get("/{export_format}", summary="Download the full history as json, csv or xml")
async def export_history(
    export_format: str, store: HistoryStore = Depends(get_history_store)
) -> Response:
    """Serialize every saved search; the 100-row list cap does not apply."""

    fmt = ExportFormat.parse(export_format)
    payload = export_records(store.list_all(), fmt)
    logger.info("Exported history as %s (%d bytes)", fmt.value, len(payload.content))
    return Response(
        content=payload.content,
        media_type=payload.media_type,
        headers={"Content-Disposition": payload.content_disposition},
    )
