"""
Export API Router

Print-ready HTML export and share links.
"""

import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse

from core.export import (
    ExportOptions,
    ExportSharePayload,
    build_share_url,
    read_share_payload,
    render_print_document,
)

from .models import ExportOptionsModel, ExportRequest, SharePayloadModel, ShareRequest, ShareResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/export", tags=["Export"])


def _to_options(model: ExportOptionsModel) -> ExportOptions:
    return ExportOptions(
        title=model.title,
        quality=model.quality,
        compression=model.compression,
        include_metadata=model.include_metadata,
        watermark=model.watermark,
    )


@router.post("/html", response_class=HTMLResponse)
async def export_html(request: ExportRequest):
    """Render the document as print-ready HTML"""
    html = render_print_document(request.content, _to_options(request.options))
    logger.info(f"Rendered print document ({len(html)} bytes)")
    return HTMLResponse(content=html)


@router.post("/share", response_model=ShareResponse)
async def create_share_link(request: ShareRequest):
    """Pack the export into a link; url is null when it would be too long"""
    payload = ExportSharePayload(
        title=request.title,
        content=request.content,
        options=_to_options(request.options),
    )
    url = build_share_url(request.base_url, payload)
    return ShareResponse(url=url, too_long=url is None)


@router.get("/share", response_model=SharePayloadModel)
async def open_share_link(request: Request):
    """Read an export back from share link query parameters (view=pdf&share=...)"""
    payload = read_share_payload(request.query_params)
    if payload is None:
        raise HTTPException(status_code=404, detail="No valid share payload in link")

    options = payload.options
    return SharePayloadModel(
        title=payload.title,
        content=payload.content,
        options=ExportOptionsModel(
            title=options.title,
            quality=min(max(options.quality, 0), 100),
            compression=options.compression,
            include_metadata=options.include_metadata,
            watermark=options.watermark,
        ),
        created_at=payload.created_at,
    )
