"""
Layout API Router

Pagination, preflight, preview, templates and asset compilation.
"""

import logging
from typing import Optional

from fastapi import APIRouter, File, Form, HTTPException, UploadFile

from config.settings import settings
from core.assets import (
    AssetKind,
    build_asset,
    classify_asset,
    compile_preview,
    data_url,
    format_bytes,
    import_into_buffer,
)
from core.errors import AssetImportError, AssetTooLargeError, TemplateNotFoundError, UnsupportedAssetError
from core.layout import LayoutFormat, TemplateFactory, build_preview_pages, soft_limit_for
from core.paging import count_pages, replace_page, split_content_into_pages
from core.preflight import PreflightAnalyzer

from .models import (
    AssetModel,
    CompileRequest,
    CompileResponse,
    ImportResponse,
    PaginateRequest,
    PaginateResponse,
    PreflightRequest,
    PreflightResponse,
    PreviewRequest,
    PreviewResponse,
    ReplacePageRequest,
    ReplacePageResponse,
    TemplateListResponse,
    TemplateModel,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Layout"])


def _soft_limit(layout_format: LayoutFormat) -> int:
    return soft_limit_for(layout_format, settings.editor_soft_limit, settings.catalogue_soft_limit)


# ==================== PAGINATION ====================

@router.post("/paginate", response_model=PaginateResponse)
async def paginate(request: PaginateRequest):
    """Split content into pages at page breaks and the soft limit"""
    pages = split_content_into_pages(request.content, request.soft_limit)
    return PaginateResponse(pages=pages, total_pages=count_pages(request.content, request.soft_limit))


@router.post("/pages/replace", response_model=ReplacePageResponse)
async def replace_single_page(request: ReplacePageRequest):
    """Replace one page and return the rebuilt document"""
    try:
        content = replace_page(request.content, request.page_index, request.new_text, request.soft_limit)
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return ReplacePageResponse(
        content=content,
        pages=split_content_into_pages(content, request.soft_limit),
    )


# ==================== PREFLIGHT ====================

@router.post("/preflight", response_model=PreflightResponse)
async def preflight(request: PreflightRequest):
    """Check a document for structure and page-size problems"""
    page_target = request.page_target if request.page_target is not None else settings.preflight_page_target
    analyzer = PreflightAnalyzer(
        page_target=page_target,
        oversize_factor=settings.preflight_oversize_factor,
    )
    report = analyzer.analyze(request.content)
    if report.issues:
        logger.info(f"Preflight {report.severity.value}: {', '.join(report.issue_ids())}")
    return report.to_dict()


# ==================== PREVIEW ====================

@router.post("/preview", response_model=PreviewResponse)
async def preview(request: PreviewRequest):
    """Lay content out into preview page slots for a format"""
    result = build_preview_pages(
        request.content,
        layout_format=request.layout_format,
        full_book_preview=request.full_book_preview,
        preview_page_count=request.preview_page_count,
        soft_limit=_soft_limit(request.layout_format),
    )
    return result.to_dict()


# ==================== TEMPLATES ====================

@router.get("/templates", response_model=TemplateListResponse)
async def list_templates(category: Optional[LayoutFormat] = None):
    """List starter templates, optionally for one format"""
    templates = [t.to_dict() for t in TemplateFactory.list_templates(category)]
    return {"templates": templates, "total": len(templates)}


@router.get("/templates/{template_id}", response_model=TemplateModel)
async def get_template(template_id: str):
    """Get one starter template"""
    try:
        return TemplateFactory.get_template(template_id).to_dict()
    except TemplateNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


# ==================== ASSETS ====================

@router.post("/compile", response_model=CompileResponse)
async def compile_assets(request: CompileRequest):
    """Compile loaded assets into a document for the selected format"""
    assets = [
        build_asset(
            item.name,
            item.size,
            content_type=item.content_type,
            text=item.text,
            object_url=item.object_url,
        )
        for item in request.assets
    ]
    content = compile_preview(request.content, request.title, request.layout_format, assets)
    soft_limit = _soft_limit(request.layout_format)
    return CompileResponse(
        content=content,
        assets=[AssetModel(**asset.to_dict()) for asset in assets],
        total_pages=count_pages(content, soft_limit),
    )


@router.post("/import", response_model=ImportResponse)
async def import_file(
    file: UploadFile = File(...),
    content: str = Form(default=""),
):
    """
    Import a file into the editor buffer.

    Text files replace the buffer; images are appended on their own page
    as an inline data: URL.
    """
    filename = file.filename or "upload"
    data = await file.read()
    content_type = file.content_type or ""

    try:
        # Reject before decoding or base64-encoding the upload
        if len(data) > settings.max_import_size_bytes:
            raise AssetTooLargeError(filename, len(data), settings.max_import_size_bytes)

        text = None
        image_url = None
        if classify_asset(filename, content_type) is AssetKind.IMAGE:
            image_url = data_url(filename, data, content_type)
        else:
            text = data.decode("utf-8", errors="replace")

        new_content = import_into_buffer(
            content,
            filename,
            len(data),
            content_type=content_type,
            text=text,
            image_url=image_url,
            max_size=settings.max_import_size_bytes,
        )
    except AssetTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))
    except UnsupportedAssetError as e:
        raise HTTPException(status_code=415, detail=str(e))
    except AssetImportError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ImportResponse(content=new_content, filename=filename, size_label=format_bytes(len(data)))
