"""
Preflight - structural analysis of a document before export.

Usage:
    from core.preflight import analyze_document, Severity

    report = analyze_document(text)
    print(report.severity, [issue.id for issue in report.issues])
"""

from .models import Severity, PreflightIssue, PreflightReport, STATUS_MESSAGES
from .detectors import (
    ContentDetector,
    RegexDetector,
    StructureDetector,
    CatalogueDetector,
)
from .analyzer import (
    PreflightAnalyzer,
    analyze_document,
    UNSTRUCTURED_CONTENT,
    OVERSIZED_PAGE,
    DANGLING_PAGE_BREAK,
    NO_CATALOGUE_ITEMS,
)

__all__ = [
    # Model
    "Severity",
    "PreflightIssue",
    "PreflightReport",
    "STATUS_MESSAGES",
    # Detectors
    "ContentDetector",
    "RegexDetector",
    "StructureDetector",
    "CatalogueDetector",
    # Analyzer
    "PreflightAnalyzer",
    "analyze_document",
    # Issue ids
    "UNSTRUCTURED_CONTENT",
    "OVERSIZED_PAGE",
    "DANGLING_PAGE_BREAK",
    "NO_CATALOGUE_ITEMS",
]
