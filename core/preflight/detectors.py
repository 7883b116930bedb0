#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Content Detectors - Pluggable heuristics used by the preflight analyzer.

Each detector answers a single yes/no question about a buffer. The default
implementations are regex based and deliberately approximate; stricter
parsers can be swapped in through PreflightAnalyzer without touching the
severity aggregation.

Supports:
- Markdown headings (# .. ######)
- Bullet lists (-, *) and numbered lists (1. 2. 3.)
- Paragraph breaks (blank lines)
- Markdown image references (![alt](url))
"""

import re
from abc import ABC, abstractmethod
from typing import Union


# =============================================================================
# PATTERNS
# =============================================================================

HEADING_PATTERN = r'^#{1,6}\s'
BULLET_PATTERN = r'^[-*]\s'
NUMBERED_PATTERN = r'^\d+\.\s'
PARAGRAPH_BREAK_PATTERN = r'\n\s*\n'
IMAGE_REFERENCE_PATTERN = r'!\[[^\]]*\]\([^)]+\)'

# Headings, lists or paragraph breaks
STRUCTURE_PATTERN = re.compile(
    '|'.join([HEADING_PATTERN, PARAGRAPH_BREAK_PATTERN, BULLET_PATTERN, NUMBERED_PATTERN]),
    re.MULTILINE,
)

# Images or lists
CATALOGUE_PATTERN = re.compile(
    '|'.join([IMAGE_REFERENCE_PATTERN, BULLET_PATTERN, NUMBERED_PATTERN]),
    re.MULTILINE,
)


# =============================================================================
# DETECTORS
# =============================================================================

class ContentDetector(ABC):
    """Single-capability interface: does the buffer show a given shape?"""

    @abstractmethod
    def detect(self, buffer: str) -> bool:
        """Return True when the buffer matches"""
        pass


class RegexDetector(ContentDetector):
    """
    Detector backed by one regular expression.

    Usage:
        detector = RegexDetector(r'^#{1,6}\\s', flags=re.MULTILINE)
        detector.detect("# Title")  # True
    """

    def __init__(self, pattern: Union[str, re.Pattern], flags: int = 0):
        if isinstance(pattern, str):
            pattern = re.compile(pattern, flags)
        self.pattern = pattern

    def detect(self, buffer: str) -> bool:
        return bool(self.pattern.search(buffer or ""))

    def __repr__(self) -> str:
        return f"RegexDetector({self.pattern.pattern!r})"


class StructureDetector(RegexDetector):
    """Recognizable block structure: headings, lists or paragraph breaks"""

    def __init__(self):
        super().__init__(STRUCTURE_PATTERN)

    def detect(self, buffer: str) -> bool:
        return bool((buffer or "").strip()) and super().detect(buffer)


class CatalogueDetector(RegexDetector):
    """Catalogue-style content: image references or list items"""

    def __init__(self):
        super().__init__(CATALOGUE_PATTERN)
