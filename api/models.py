"""
DocKernel API Models

Pydantic request/response models for the pagination, preflight, layout,
preset and export endpoints.
"""

from pydantic import BaseModel, Field
from typing import List, Optional

from config.constants import (
    PAGINATION_SOFT_LIMIT,
    PREVIEW_DEFAULT_PAGES,
    PREVIEW_PAGE_COUNT_DEFAULT,
)
from core.layout import LayoutFormat


# ==================== PAGINATION ====================

class PaginateRequest(BaseModel):
    """Split a document into pages"""
    content: str = Field(default="", description="Document text (Markdown)")
    soft_limit: int = Field(default=PAGINATION_SOFT_LIMIT, description="Soft character limit per page")

    class Config:
        json_schema_extra = {
            "example": {
                "content": "# Title\n\nFirst paragraph.\n\n<!-- pagebreak -->\n\nSecond page.",
                "soft_limit": 1800,
            }
        }


class PaginateResponse(BaseModel):
    """Pages produced by the paginator"""
    pages: List[str]
    total_pages: int


class ReplacePageRequest(BaseModel):
    """Replace the text of one page and rebuild the document"""
    content: str = Field(default="", description="Current document text")
    page_index: int = Field(..., ge=0, description="Zero-based page index")
    new_text: str = Field(default="", description="Replacement page text")
    soft_limit: int = Field(default=PAGINATION_SOFT_LIMIT, description="Soft character limit per page")


class ReplacePageResponse(BaseModel):
    """Rebuilt document and its pages"""
    content: str
    pages: List[str]


# ==================== PREFLIGHT ====================

class PreflightRequest(BaseModel):
    """Check a document before export"""
    content: str = Field(default="", description="Document text")
    page_target: Optional[int] = Field(default=None, description="Override for the page size target")


class PreflightIssueModel(BaseModel):
    """Single preflight finding"""
    id: str
    title: str
    text: str
    severity: str


class PreflightStatusModel(BaseModel):
    """Status line shown next to the export button"""
    state: str
    title: str
    subtext: str


class PreflightResponse(BaseModel):
    """Preflight result"""
    severity: str
    issues: List[PreflightIssueModel]
    hints: List[PreflightIssueModel]
    export_safe: bool
    status: PreflightStatusModel


# ==================== PREVIEW & TEMPLATES ====================

class PreviewRequest(BaseModel):
    """Lay a document out for the preview surface"""
    content: str = Field(default="", description="Document text")
    layout_format: LayoutFormat = Field(default=LayoutFormat.ZINE, description="Output format")
    full_book_preview: bool = Field(default=False, description="Show more than the first spread")
    preview_page_count: int = Field(default=PREVIEW_DEFAULT_PAGES, description="Slots for full-book preview (2-24)")


class PageFrameModel(BaseModel):
    width: int
    height: int


class PreviewResponse(BaseModel):
    """Preview page slots"""
    layout_format: LayoutFormat
    frame: PageFrameModel
    soft_limit: int
    total_pages: int
    pages: List[str]


class TemplateModel(BaseModel):
    """Starter template"""
    id: str
    name: str
    category: LayoutFormat
    description: str
    starter_content: str


class TemplateListResponse(BaseModel):
    templates: List[TemplateModel]
    total: int


# ==================== ASSETS ====================

class AssetInput(BaseModel):
    """Asset loaded into the paginator"""
    name: str = Field(..., description="File name including extension")
    size: int = Field(default=0, ge=0, description="File size in bytes")
    content_type: str = Field(default="", description="MIME type")
    text: Optional[str] = Field(default=None, description="Decoded content of a text asset")
    object_url: Optional[str] = Field(default=None, description="Where an image asset can be loaded from")


class AssetModel(BaseModel):
    id: str
    name: str
    kind: str
    size_label: str
    object_url: Optional[str] = None
    text_content: Optional[str] = None


class CompileRequest(BaseModel):
    """Compile loaded assets into a document"""
    content: str = Field(default="", description="Current editor content")
    title: str = Field(default="", description="Document name")
    layout_format: LayoutFormat = Field(default=LayoutFormat.ZINE, description="Output format")
    assets: List[AssetInput] = Field(default_factory=list)


class CompileResponse(BaseModel):
    """Compiled document and the assets it was built from"""
    content: str
    assets: List[AssetModel]
    total_pages: int


class ImportResponse(BaseModel):
    """Editor buffer after importing a file"""
    content: str
    filename: str
    size_label: str


# ==================== PRESETS ====================

class PresetCreateRequest(BaseModel):
    """Save the current layout settings"""
    layout_format: LayoutFormat = Field(default=LayoutFormat.ZINE)
    full_book_preview: bool = Field(default=False)
    preview_page_count: int = Field(default=PREVIEW_PAGE_COUNT_DEFAULT)
    name: Optional[str] = Field(default=None, description="Defaults to 'Layout Preset N'")


class PresetModel(BaseModel):
    id: str
    name: str
    format: LayoutFormat
    full_book_preview: bool
    preview_page_count: int


class PresetListResponse(BaseModel):
    presets: List[PresetModel]
    total: int


# ==================== EXPORT ====================

class ExportOptionsModel(BaseModel):
    """Print export settings"""
    title: Optional[str] = Field(default=None, description="Document title (max 120 chars used)")
    quality: int = Field(default=90, ge=0, le=100)
    compression: bool = True
    include_metadata: bool = True
    watermark: bool = False


class ExportRequest(BaseModel):
    """Render a print-ready HTML document"""
    content: str = Field(default="", description="Document text")
    options: ExportOptionsModel = Field(default_factory=ExportOptionsModel)


class ShareRequest(BaseModel):
    """Build a share link for an export"""
    base_url: str = Field(..., description="Editor URL the link should open")
    title: str = Field(default="")
    content: str = Field(default="")
    options: ExportOptionsModel = Field(default_factory=ExportOptionsModel)


class ShareResponse(BaseModel):
    """Share link, or null when the document is too large for a link"""
    url: Optional[str] = None
    too_long: bool = False


class SharePayloadModel(BaseModel):
    """Export reopened from a share link"""
    title: str
    content: str
    options: ExportOptionsModel
    created_at: str
