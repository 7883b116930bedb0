#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
PreflightAnalyzer - Structural checks run before export.

Checks, in detection order:
- Structure: non-empty content with no headings, lists or paragraph breaks
- Oversized page: a page far above the nominal page size after pagination
- Dangling page break: a marker with no content on one of its sides
- Catalogue readiness: no images or lists (hint only, never raises severity)

The analyzer is a pure classification: the same buffer always yields the same
severity and the same issues in the same order.

Usage:
    from core.preflight import analyze_document

    report = analyze_document(text)
    if report.severity is Severity.MAJOR:
        ...

    # Stricter structure detection
    analyzer = PreflightAnalyzer(structure_detector=MyParserDetector())
    report = analyzer.analyze(text)
"""

import logging
from typing import List, Optional

from config.constants import (
    PAGE_BREAK_TOKEN,
    PREFLIGHT_PAGE_TARGET,
    PREFLIGHT_OVERSIZE_FACTOR,
)
from ..paging import split_content_into_pages
from .detectors import ContentDetector, StructureDetector, CatalogueDetector
from .models import Severity, PreflightIssue, PreflightReport

logger = logging.getLogger(__name__)


# Stable issue identifiers
UNSTRUCTURED_CONTENT = "unstructured-content"
OVERSIZED_PAGE = "oversized-page"
DANGLING_PAGE_BREAK = "dangling-page-break"
NO_CATALOGUE_ITEMS = "no-catalogue-items"


class PreflightAnalyzer:
    """
    Heuristic layout analyzer producing a severity and an issue list.

    Attributes:
        structure_detector: Decides whether the buffer has block structure.
        catalogue_detector: Decides whether the buffer has catalogue items.
        page_target: Nominal page size in characters.
        oversize_factor: A page longer than page_target * oversize_factor
            is reported as an overflow.
    """

    def __init__(
        self,
        structure_detector: Optional[ContentDetector] = None,
        catalogue_detector: Optional[ContentDetector] = None,
        page_target: int = PREFLIGHT_PAGE_TARGET,
        oversize_factor: float = PREFLIGHT_OVERSIZE_FACTOR,
    ):
        self.structure_detector = structure_detector or StructureDetector()
        self.catalogue_detector = catalogue_detector or CatalogueDetector()
        self.page_target = page_target
        self.oversize_factor = oversize_factor

    def analyze(self, buffer: str) -> PreflightReport:
        """
        Run every check against the buffer.

        Args:
            buffer: Raw document text (markers included).

        Returns:
            PreflightReport; empty or whitespace-only input gives severity
            NONE with no issues and no hints.
        """
        buffer = buffer or ""
        if not buffer.strip():
            return PreflightReport()

        issues: List[PreflightIssue] = []
        hints: List[PreflightIssue] = []

        for check in (
            self._check_structure,
            self._check_oversized_pages,
            self._check_dangling_markers,
        ):
            issue = check(buffer)
            if issue is not None:
                issues.append(issue)

        hint = self._check_catalogue_items(buffer)
        if hint is not None:
            hints.append(hint)

        severity = Severity.highest(issue.severity for issue in issues)
        logger.debug(
            f"Preflight: severity={severity.value}, issues={[i.id for i in issues]}, "
            f"hints={[h.id for h in hints]}"
        )
        return PreflightReport(severity=severity, issues=issues, hints=hints)

    # ------------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------------

    def _check_structure(self, buffer: str) -> Optional[PreflightIssue]:
        if self.structure_detector.detect(buffer):
            return None
        return PreflightIssue(
            id=UNSTRUCTURED_CONTENT,
            title="No document structure detected",
            text=(
                "Add headings, lists or blank lines between paragraphs. "
                "Content may render as an unstructured blob."
            ),
            severity=Severity.MINOR,
        )

    def _check_oversized_pages(self, buffer: str) -> Optional[PreflightIssue]:
        if self.page_target <= 0:
            return None

        threshold = self.page_target * self.oversize_factor
        pages = split_content_into_pages(buffer, self.page_target)
        oversized = [index + 1 for index, page in enumerate(pages) if len(page) > threshold]
        if not oversized:
            return None

        page_list = ", ".join(str(number) for number in oversized)
        return PreflightIssue(
            id=OVERSIZED_PAGE,
            title="Content overflows the page",
            text=(
                f"Page(s) {page_list} exceed {int(threshold)} characters. "
                "Split long paragraphs or insert page breaks to avoid overflow."
            ),
            severity=Severity.MAJOR,
        )

    def _check_dangling_markers(self, buffer: str) -> Optional[PreflightIssue]:
        segments = buffer.split(PAGE_BREAK_TOKEN)
        dangling = sum(
            1
            for before, after in zip(segments, segments[1:])
            if not before.strip() or not after.strip()
        )
        if not dangling:
            return None

        noun = "page break" if dangling == 1 else "page breaks"
        return PreflightIssue(
            id=DANGLING_PAGE_BREAK,
            title="Empty page break",
            text=(
                f"{dangling} {noun} with no content on one side. "
                "It was probably inserted by accident."
            ),
            severity=Severity.MINOR,
        )

    def _check_catalogue_items(self, buffer: str) -> Optional[PreflightIssue]:
        if self.catalogue_detector.detect(buffer):
            return None
        return PreflightIssue(
            id=NO_CATALOGUE_ITEMS,
            title="No catalogue items detected",
            text="Add sections with images or lists to enable catalogue layout options.",
            severity=Severity.NONE,
        )


_default_analyzer = PreflightAnalyzer()


def analyze_document(buffer: str, page_target: Optional[int] = None) -> PreflightReport:
    """
    Analyze a buffer with the default detectors.

    Args:
        buffer: Raw document text.
        page_target: Nominal page size; defaults to PREFLIGHT_PAGE_TARGET.

    Returns:
        PreflightReport with severity, issues and hints.
    """
    if page_target is None or page_target == _default_analyzer.page_target:
        return _default_analyzer.analyze(buffer)
    return PreflightAnalyzer(page_target=page_target).analyze(buffer)
