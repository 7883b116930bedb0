"""
DocKernel core - pagination, preflight and layout collaborators.

Usage:
    from core import split_content_into_pages, analyze_document

    pages = split_content_into_pages(text, 1800)
    report = analyze_document(text)
"""

from .paging import (
    PAGE_BREAK_TOKEN,
    split_content_into_pages,
    split_into_paragraphs,
    paginate_segments,
    replace_page,
    count_pages,
)
from .preflight import (
    Severity,
    PreflightIssue,
    PreflightReport,
    PreflightAnalyzer,
    analyze_document,
)

__all__ = [
    # Paginator
    "PAGE_BREAK_TOKEN",
    "split_content_into_pages",
    "split_into_paragraphs",
    "paginate_segments",
    "replace_page",
    "count_pages",
    # Preflight
    "Severity",
    "PreflightIssue",
    "PreflightReport",
    "PreflightAnalyzer",
    "analyze_document",
]
