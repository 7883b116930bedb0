#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Layout Module

Output formats, preview page slots and starter templates.

Usage:
    from core.layout import LayoutFormat, build_preview_pages, TemplateFactory

    preview = build_preview_pages(text, LayoutFormat.BOOK, full_book_preview=True,
                                  preview_page_count=12)
    template = TemplateFactory.get_template("book-print")
"""

from .formats import (
    LayoutFormat,
    PageFrame,
    PreviewPages,
    PAGE_FRAMES,
    soft_limit_for,
    preview_slot_count,
    build_preview_pages,
    spread_indices,
    clamp_zoom,
    fit_zoom,
)
from .templates import TemplateDefinition, TemplateFactory, DEFAULT_TEMPLATES

__all__ = [
    # Formats
    "LayoutFormat",
    "PageFrame",
    "PreviewPages",
    "PAGE_FRAMES",
    "soft_limit_for",
    "preview_slot_count",
    "build_preview_pages",
    "spread_indices",
    "clamp_zoom",
    "fit_zoom",
    # Templates
    "TemplateDefinition",
    "TemplateFactory",
    "DEFAULT_TEMPLATES",
]
