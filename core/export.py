#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Export - Print-ready HTML and shareable export links.

Provides:
- Print document rendering (A4, escaped body, optional metadata and watermark)
- Markdown URL sanitizing for previews
- Share payloads packed into a URL (base64url JSON, no padding)

Share payloads keep the same JSON keys as links produced by the web editor
(camelCase), so links round-trip between the two.
"""

import base64
import binascii
import html
import json
import logging
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from config.constants import (
    EXPORT_DEFAULT_TITLE,
    EXPORT_TITLE_MAX_CHARS,
    EXPORT_EMPTY_BODY,
    SHARE_URL_MAX_LENGTH,
)
from .errors import SharePayloadError

logger = logging.getLogger(__name__)

SHARE_VIEW = "pdf"

_SAFE_URL_PATTERN = re.compile(r'^(blob:|data:|https?:|mailto:|tel:|/|\./|\.\./|#)', re.IGNORECASE)


# ========== Options & Payloads ==========

@dataclass
class ExportOptions:
    """Print export settings"""
    title: Optional[str] = None
    quality: int = 90
    compression: bool = True
    include_metadata: bool = True
    watermark: bool = False

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "quality": self.quality,
            "compression": self.compression,
            "includeMetadata": self.include_metadata,
            "watermark": self.watermark,
        }
        if self.title is not None:
            data["title"] = self.title
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExportOptions":
        """
        Build options from their wire form.

        Raises:
            ValueError: title is not a string, or quality is not a finite number.
        """
        defaults = cls()
        title = data.get("title")
        if title is not None and not isinstance(title, str):
            raise ValueError(f"title must be a string, got {type(title).__name__}")
        try:
            quality = int(data.get("quality", defaults.quality))
        except OverflowError as e:
            raise ValueError(f"quality out of range: {e}") from e
        return cls(
            title=title,
            quality=quality,
            compression=bool(data.get("compression", defaults.compression)),
            include_metadata=bool(data.get("includeMetadata", defaults.include_metadata)),
            watermark=bool(data.get("watermark", defaults.watermark)),
        )


@dataclass
class ExportSharePayload:
    """Everything needed to reopen an export from a link"""
    title: str
    content: str
    options: ExportOptions = field(default_factory=ExportOptions)
    created_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "content": self.content,
            "options": self.options.to_dict(),
            "createdAt": self.created_at,
        }


# ========== Print Document ==========

def quality_hint(quality: int) -> str:
    """Map a 0-100 quality value to high / medium / draft."""
    if quality >= 85:
        return "high"
    if quality >= 60:
        return "medium"
    return "draft"


def _document_title(options: ExportOptions) -> str:
    return ((options.title or "").strip() or EXPORT_DEFAULT_TITLE)[:EXPORT_TITLE_MAX_CHARS]


PRINT_STYLES = """
      @page { size: A4; margin: 18mm; }
      body {
        font-family: Inter, Arial, sans-serif;
        color: #111827;
        background: #ffffff;
        margin: 0;
        padding: 0;
      }
      .page {
        position: relative;
        padding: 0;
        margin: 0 auto;
        max-width: 210mm;
      }
      h1 {
        font-size: 20px;
        margin: 0 0 6px;
      }
      .meta {
        font-size: 12px;
        color: #6b7280;
        margin-bottom: 14px;
      }
      .preflight {
        font-size: 11px;
        color: #6b7280;
        margin-bottom: 14px;
      }
      .content {
        font-size: 13px;
        line-height: 1.55;
        white-space: pre-wrap;
        word-break: break-word;
      }
      .watermark {
        position: fixed;
        inset: 0;
        display: flex;
        justify-content: center;
        align-items: center;
        font-size: 48px;
        color: rgba(17, 24, 39, 0.08);
        letter-spacing: 2px;
        transform: rotate(-24deg);
        pointer-events: none;
        user-select: none;
      }
"""


def render_print_document(content: str, options: Optional[ExportOptions] = None) -> str:
    """
    Render a print-ready HTML document.

    The body is escaped and kept as preformatted text; the browser's print
    dialog turns it into a PDF.

    Args:
        content: Document text.
        options: Export settings (defaults when omitted).

    Returns:
        Complete HTML document.
    """
    options = options or ExportOptions()
    title = html.escape(_document_title(options), quote=True)
    body_text = (content or "").strip() or EXPORT_EMPTY_BODY
    body = html.escape(body_text, quote=True)

    metadata_block = f'<div class="meta">Title: {title}</div>' if options.include_metadata else ""
    watermark_block = '<div class="watermark">DocKernel</div>' if options.watermark else ""
    compression = "enabled" if options.compression else "disabled"

    return f"""<!doctype html>
<html>
  <head>
    <meta charset="utf-8" />
    <title>{title}</title>
    <style>{PRINT_STYLES}    </style>
  </head>
  <body>
    <div class="page">
      <h1>{title}</h1>
      {metadata_block}
      <div class="preflight">Quality: {quality_hint(options.quality)} | Compression: {compression}</div>
      <div class="content">{body}</div>
    </div>
    {watermark_block}
  </body>
</html>"""


def markdown_url_transform(url: Optional[str]) -> str:
    """
    Allow only link and image URLs that are safe to render.

    Returns the trimmed URL for blob:, data:, http(s):, mailto:, tel:,
    relative and fragment URLs; anything else becomes an empty string.
    """
    trimmed = (url or "").strip()
    if not trimmed:
        return ""
    if _SAFE_URL_PATTERN.match(trimmed):
        return trimmed
    return ""


# ========== Share Links ==========

def encode_share_payload(payload: ExportSharePayload) -> str:
    """JSON-encode the payload as unpadded base64url."""
    raw = json.dumps(payload.to_dict(), ensure_ascii=False, separators=(",", ":"))
    encoded = base64.urlsafe_b64encode(raw.encode("utf-8")).decode("ascii")
    return encoded.rstrip("=")


def decode_share_payload(value: str) -> ExportSharePayload:
    """
    Decode a share string produced by encode_share_payload.

    Raises:
        SharePayloadError: Value is not valid base64url JSON with string
            title and content.
    """
    padded = value + "=" * (-len(value) % 4)
    try:
        data = json.loads(base64.urlsafe_b64decode(padded.encode("ascii")).decode("utf-8"))
    except (binascii.Error, UnicodeError, ValueError) as e:
        raise SharePayloadError(f"Malformed share payload: {e}") from e

    if not isinstance(data, dict):
        raise SharePayloadError("Share payload must be an object")
    title = data.get("title")
    content = data.get("content")
    if not isinstance(title, str) or not isinstance(content, str):
        raise SharePayloadError("Share payload needs string title and content")

    options = data.get("options")
    try:
        parsed_options = ExportOptions.from_dict(options) if isinstance(options, dict) else ExportOptions()
    except (TypeError, ValueError, OverflowError) as e:
        raise SharePayloadError(f"Invalid export options: {e}") from e

    created_at = data.get("createdAt")
    return ExportSharePayload(
        title=title,
        content=content,
        options=parsed_options,
        created_at=created_at if isinstance(created_at, str) else "",
    )


def build_share_url(base_url: str, payload: ExportSharePayload) -> Optional[str]:
    """
    Build a link that reopens the export in print view.

    Existing query parameters of base_url are kept; view and share are set.

    Returns:
        The URL, or None when it would exceed SHARE_URL_MAX_LENGTH.
    """
    parts = urlsplit(base_url)
    query = dict(parse_qsl(parts.query, keep_blank_values=True))
    query["view"] = SHARE_VIEW
    query["share"] = encode_share_payload(payload)
    url = urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(query), parts.fragment))

    if len(url) > SHARE_URL_MAX_LENGTH:
        logger.info(f"Share URL too long ({len(url)} chars), document must be exported directly")
        return None
    return url


def read_share_payload(query: Mapping[str, str]) -> Optional[ExportSharePayload]:
    """
    Read a share payload from query parameters.

    Returns None unless view=pdf and a well-formed share value is present.
    """
    if query.get("view") != SHARE_VIEW:
        return None
    share = query.get("share")
    if not share:
        return None
    try:
        return decode_share_payload(share)
    except SharePayloadError as e:
        logger.warning(f"Ignoring share link: {e}")
        return None
