#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Layout Formats - Page frames and preview slots per output format.

Manages:
- Output formats (zine, book, catalogue, report, custom)
- Page frame sizes in preview pixels
- Soft pagination limit per format
- Preview page slots, spreads and zoom fitting
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from config.constants import (
    PAGINATION_SOFT_LIMIT,
    CATALOGUE_SOFT_LIMIT,
    PREVIEW_DEFAULT_PAGES,
    PREVIEW_MIN_PAGES,
    PREVIEW_MAX_PAGES,
    PREVIEW_SPREAD_GAP_PX,
    PREVIEW_VIEWPORT_PADDING_PX,
    ZOOM_MIN,
    ZOOM_MAX,
    ZOOM_FIT_MAX,
)
from ..paging import split_content_into_pages


class LayoutFormat(str, Enum):
    """Supported output formats"""
    ZINE = "zine"
    BOOK = "book"
    CATALOGUE = "catalogue"
    REPORT = "report"
    CUSTOM = "custom"

    @property
    def label(self) -> str:
        return self.value.capitalize()


# =============================================================================
# DATA CLASSES
# =============================================================================

@dataclass
class PageFrame:
    """Preview page size in CSS pixels."""
    width: int
    height: int

    def to_dict(self) -> Dict[str, int]:
        return {"width": self.width, "height": self.height}


PAGE_FRAMES: Dict[LayoutFormat, PageFrame] = {
    LayoutFormat.BOOK: PageFrame(width=794, height=1123),
    LayoutFormat.ZINE: PageFrame(width=680, height=960),
    LayoutFormat.CATALOGUE: PageFrame(width=860, height=1123),
    LayoutFormat.REPORT: PageFrame(width=794, height=1123),
    LayoutFormat.CUSTOM: PageFrame(width=794, height=1123),
}


@dataclass
class PreviewPages:
    """Pages laid out for the preview surface."""
    layout_format: LayoutFormat
    frame: PageFrame
    soft_limit: int
    total_pages: int
    pages: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            "layout_format": self.layout_format.value,
            "frame": self.frame.to_dict(),
            "soft_limit": self.soft_limit,
            "total_pages": self.total_pages,
            "pages": list(self.pages),
        }


# =============================================================================
# FUNCTIONS
# =============================================================================

def soft_limit_for(
    layout_format: LayoutFormat,
    editor_limit: int = PAGINATION_SOFT_LIMIT,
    catalogue_limit: int = CATALOGUE_SOFT_LIMIT,
) -> int:
    """Catalogue pages are shorter to leave room for images."""
    if LayoutFormat(layout_format) is LayoutFormat.CATALOGUE:
        return catalogue_limit
    return editor_limit


def preview_slot_count(full_book_preview: bool, preview_page_count: int) -> int:
    """
    Number of page slots the preview shows.

    Without full-book preview only the first spread (2 pages) is shown;
    otherwise the requested count is clamped into [2, 24].
    """
    if not full_book_preview:
        return PREVIEW_DEFAULT_PAGES
    return min(max(preview_page_count, PREVIEW_MIN_PAGES), PREVIEW_MAX_PAGES)


def build_preview_pages(
    content: str,
    layout_format: LayoutFormat = LayoutFormat.ZINE,
    full_book_preview: bool = False,
    preview_page_count: int = PREVIEW_DEFAULT_PAGES,
    soft_limit: Optional[int] = None,
) -> PreviewPages:
    """
    Paginate content for the preview and fit it to the slot count.

    Pages beyond the slot count are cut; missing slots are padded with
    empty pages.

    Args:
        content: Document text.
        layout_format: Output format driving frame size and soft limit.
        full_book_preview: Show more than the first spread.
        preview_page_count: Requested slots when full_book_preview is on.
        soft_limit: Override for the per-format soft limit.

    Returns:
        PreviewPages with exactly preview_slot_count() pages.
    """
    layout_format = LayoutFormat(layout_format)
    limit = soft_limit if soft_limit is not None else soft_limit_for(layout_format)
    chunks = split_content_into_pages(content, limit)
    target = preview_slot_count(full_book_preview, preview_page_count)

    if len(chunks) >= target:
        pages = chunks[:target]
    else:
        pages = chunks + [""] * (target - len(chunks))

    return PreviewPages(
        layout_format=layout_format,
        frame=PAGE_FRAMES[layout_format],
        soft_limit=limit,
        total_pages=len(chunks),
        pages=pages,
    )


def spread_indices(current_page: int, page_count: int, spread_view: bool) -> Tuple[int, int]:
    """
    Left and right page indices shown for the current page.

    In spread view the left page is the even page of the pair. Outside
    spread view the right index is simply the next page, clamped.
    """
    max_index = max(0, page_count - 1)
    current_page = min(max(current_page, 0), max_index)
    left = (current_page // 2) * 2 if spread_view else current_page
    right = min(max_index, left + 1)
    return left, right


def clamp_zoom(value: float) -> float:
    return min(ZOOM_MAX, max(ZOOM_MIN, value))


def fit_zoom(
    viewport_width: float,
    viewport_height: float,
    layout_format: LayoutFormat,
    spread_view: bool = False,
) -> float:
    """Zoom level that fits one page (or one spread) into the viewport."""
    frame = PAGE_FRAMES[LayoutFormat(layout_format)]
    page_width = frame.width * 2 + PREVIEW_SPREAD_GAP_PX if spread_view else frame.width
    fit_scale = min(
        (viewport_width - PREVIEW_VIEWPORT_PADDING_PX) / page_width,
        (viewport_height - PREVIEW_VIEWPORT_PADDING_PX) / frame.height,
        ZOOM_FIT_MAX,
    )
    return clamp_zoom(fit_scale)
