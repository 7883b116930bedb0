#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Paginator - Split a flat text buffer into page-sized chunks.

Pages are built greedily from paragraphs:
- The page-break marker always closes a page and is never emitted
- Paragraphs (blank-line separated) are never split, even when one alone
  exceeds the soft limit
- Whitespace-only paragraphs are dropped
- At least one page is always returned ("" for an empty buffer)

Usage:
    from core.paging import split_content_into_pages, PAGE_BREAK_TOKEN

    pages = split_content_into_pages(text, 1800)

    # Editing surface: write one page back into the buffer
    text = replace_page(text, 2, edited_page, 1800)
"""

import re
from typing import List

from config.constants import PAGE_BREAK_TOKEN

PARAGRAPH_SEPARATOR = "\n\n"

_PARAGRAPH_BREAK = re.compile(r'\n\s*\n')


def split_into_paragraphs(text: str) -> List[str]:
    """
    Split text into paragraphs.

    A paragraph boundary is two or more newlines, optionally with
    whitespace-only lines in between.

    Args:
        text: Input text to split.

    Returns:
        List of non-empty, stripped paragraph strings.
    """
    paragraphs = _PARAGRAPH_BREAK.split(text or "")
    return [p.strip() for p in paragraphs if p.strip()]


def _paginate_segment(segment: str, soft_limit: int) -> List[str]:
    pages = []
    current = ""

    for para in split_into_paragraphs(segment):
        if not current:
            # A page always takes at least one paragraph
            current = para
        elif len(current) + len(PARAGRAPH_SEPARATOR) + len(para) <= soft_limit:
            current = current + PARAGRAPH_SEPARATOR + para
        else:
            pages.append(current)
            current = para

    if current:
        pages.append(current)

    return pages


def paginate_segments(buffer: str, soft_limit: int) -> List[List[str]]:
    """
    Paginate each marker-delimited segment separately.

    Args:
        buffer: Document text, possibly containing page-break markers.
        soft_limit: Target maximum characters per page. Values <= 0 give
            one paragraph per page.

    Returns:
        One list of pages per segment, in document order. Segments with no
        content (e.g. between two adjacent markers) yield empty lists.
    """
    return [
        _paginate_segment(segment, soft_limit)
        for segment in (buffer or "").split(PAGE_BREAK_TOKEN)
    ]


def split_content_into_pages(buffer: str, soft_limit: int) -> List[str]:
    """
    Convert a text buffer into an ordered sequence of page strings.

    Total over all inputs: never raises, always returns at least one page.

    Args:
        buffer: Document text.
        soft_limit: Target maximum characters per page (a preference, not a
            hard cap).

    Returns:
        List of trimmed page strings; [""] when the buffer has no content.
    """
    pages = [page for group in paginate_segments(buffer, soft_limit) for page in group]
    return pages or [""]


def count_pages(buffer: str, soft_limit: int) -> int:
    """Number of pages split_content_into_pages would produce."""
    return len(split_content_into_pages(buffer, soft_limit))


def replace_page(buffer: str, page_index: int, new_text: str, soft_limit: int) -> str:
    """
    Write an edited page back into the buffer.

    Boundaries created by page-break markers survive the edit; boundaries
    created by the soft limit do not (pages inside a segment are re-joined
    with blank lines and re-split on the next read). A page edited down to
    whitespace is removed together with its marker, so no empty segment is
    left between two page breaks.

    Args:
        buffer: Current document text.
        page_index: Index of the edited page, as returned by
            split_content_into_pages(buffer, soft_limit).
        new_text: Replacement content for that page.
        soft_limit: The soft limit the pages were produced with.

    Returns:
        The new document text.

    Raises:
        IndexError: If page_index does not address an existing page.
    """
    groups = paginate_segments(buffer, soft_limit)
    total = sum(len(group) for group in groups)

    # An empty document still shows one (empty) page
    if not 0 <= page_index < max(total, 1):
        raise IndexError(f"Page index {page_index} out of range for {max(total, 1)} pages")

    if total == 0:
        groups[0] = [new_text]
    else:
        offset = page_index
        for group in groups:
            if offset < len(group):
                group[offset] = new_text
                break
            offset -= len(group)

    segments = [
        PARAGRAPH_SEPARATOR.join(page.strip() for page in group if page.strip())
        for group in groups
    ]
    marker_joint = f"{PARAGRAPH_SEPARATOR}{PAGE_BREAK_TOKEN}{PARAGRAPH_SEPARATOR}"
    return marker_joint.join(segment for segment in segments if segment).strip()
