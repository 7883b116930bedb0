#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Assets - Imported files and the compiled paginator preview.

Handles:
- Classifying imported files (image, text, other)
- Human-readable size labels
- Importing a file into the editor buffer (size and type checks)
- Compiling loaded assets into a previewable document per layout format

The core never owns asset bytes: images are referenced by URL (an uploaded
location or a data: URL) and text assets carry their decoded content.

Usage:
    from core.assets import build_asset, compile_preview

    assets = [build_asset("cover.png", 20480, object_url="/files/cover.png")]
    text = compile_preview(content, "Spring Catalogue", LayoutFormat.CATALOGUE, assets)
"""

import base64
import logging
import mimetypes
import uuid
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath
from typing import Any, Dict, List, Optional

from config.constants import (
    PAGE_BREAK_TOKEN,
    MAX_IMPORT_SIZE_BYTES,
    TEXT_ASSET_MAX_CHARS,
    IMAGE_EXTENSIONS,
    TEXT_ASSET_EXTENSIONS,
    EDITOR_TEXT_EXTENSIONS,
)
from .errors import AssetImportError, AssetTooLargeError, UnsupportedAssetError
from .layout.formats import LayoutFormat

logger = logging.getLogger(__name__)

DEFAULT_COMPILED_TITLE = "Compiled Document"

# Section header per format; catalogue has its own compiled layout
FORMAT_HEADERS = {
    LayoutFormat.ZINE: "## Zine Structure",
    LayoutFormat.BOOK: "## Book Manuscript",
    LayoutFormat.REPORT: "## Report Body",
    LayoutFormat.CUSTOM: "## Custom Template",
}


class AssetKind(str, Enum):
    """What an imported file is used as"""
    IMAGE = "image"
    TEXT = "text"
    OTHER = "other"


@dataclass
class Asset:
    """
    A file loaded for pagination.

    Attributes:
        id: Unique identifier.
        name: Original file name.
        kind: image, text or other.
        size_label: Human-readable size ("12 KB").
        object_url: Where an image can be loaded from.
        text_content: Decoded text, truncated to TEXT_ASSET_MAX_CHARS.
    """
    id: str
    name: str
    kind: AssetKind
    size_label: str
    object_url: Optional[str] = None
    text_content: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "kind": self.kind.value,
            "size_label": self.size_label,
            "object_url": self.object_url,
            "text_content": self.text_content,
        }


def format_bytes(size: int) -> str:
    """
    Format a byte count the way the asset list shows it.

    Examples:
        512 -> "512 B", 2048 -> "2 KB", 3355443 -> "3.2 MB"
    """
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{int(size / 1024 + 0.5)} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def _extension(filename: str) -> str:
    return PurePath(filename.lower()).suffix


def classify_asset(filename: str, content_type: str = "") -> AssetKind:
    """
    Classify a file by MIME type first, then by extension.

    Args:
        filename: File name including extension.
        content_type: MIME type reported by the upload, if any.
    """
    content_type = (content_type or "").lower()
    extension = _extension(filename)

    if content_type.startswith("image/") or extension in IMAGE_EXTENSIONS:
        return AssetKind.IMAGE
    if extension in TEXT_ASSET_EXTENSIONS or content_type.startswith("text/"):
        return AssetKind.TEXT
    return AssetKind.OTHER


def build_asset(
    filename: str,
    size: int,
    content_type: str = "",
    text: Optional[str] = None,
    object_url: Optional[str] = None,
) -> Asset:
    """
    Create an Asset for the paginator asset list.

    Text content is truncated to TEXT_ASSET_MAX_CHARS; image URLs are kept
    only for images.
    """
    kind = classify_asset(filename, content_type)
    asset = Asset(
        id=str(uuid.uuid4()),
        name=filename,
        kind=kind,
        size_label=format_bytes(size),
    )
    if kind is AssetKind.IMAGE:
        asset.object_url = object_url
    elif kind is AssetKind.TEXT:
        asset.text_content = (text or "")[:TEXT_ASSET_MAX_CHARS]
    return asset


def data_url(filename: str, data: bytes, content_type: str = "") -> str:
    """Inline an image as a base64 data: URL."""
    mime = content_type or mimetypes.guess_type(filename)[0] or "application/octet-stream"
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime};base64,{encoded}"


def import_into_buffer(
    buffer: str,
    filename: str,
    size: int,
    content_type: str = "",
    text: Optional[str] = None,
    image_url: Optional[str] = None,
    max_size: int = MAX_IMPORT_SIZE_BYTES,
) -> str:
    """
    Import a file into the editor buffer.

    Text files replace the buffer. Images are appended as a Markdown image
    on a page of their own (page breaks on both sides).

    Args:
        buffer: Current document text.
        filename: Imported file name.
        size: File size in bytes.
        content_type: MIME type, if known.
        text: Decoded content for text files.
        image_url: Location of the image for image files.
        max_size: Size limit in bytes.

    Returns:
        The new buffer.

    Raises:
        AssetTooLargeError: File is larger than max_size.
        UnsupportedAssetError: File is neither a supported text nor an image.
        AssetImportError: An image was given without a URL.
    """
    if size > max_size:
        raise AssetTooLargeError(filename, size, max_size)

    extension = _extension(filename)
    is_image = (content_type or "").lower().startswith("image/") or extension in IMAGE_EXTENSIONS
    is_text = extension in EDITOR_TEXT_EXTENSIONS
    if not (is_image or is_text):
        raise UnsupportedAssetError(filename)

    if is_image:
        if not image_url:
            raise AssetImportError(f"No image URL given for {filename}")
        previous = (buffer or "").strip()
        prefix = f"{previous}\n\n{PAGE_BREAK_TOKEN}\n\n" if previous else ""
        logger.info(f"Imported image {filename} into document")
        return f"{prefix}![{filename}]({image_url})\n\n{PAGE_BREAK_TOKEN}"

    logger.info(f"Imported text file {filename} ({format_bytes(size)})")
    return text or ""


def _image_block(asset: Asset) -> str:
    if not asset.object_url:
        return ""
    return f"![{asset.name}]({asset.object_url})\n\n{PAGE_BREAK_TOKEN}"


def compile_preview(
    content: str,
    title: str,
    layout_format: LayoutFormat,
    assets: List[Asset],
) -> str:
    """
    Compile loaded assets into a document for the selected format.

    Catalogue: one item block per image (image page, heading, SKU and price).
    Other formats: format header, text assets as sections (or the editor
    content when there are none), then visual assets and attachments.

    Args:
        content: Current editor content.
        title: Document name; "Compiled Document" when blank.
        layout_format: Selected output format.
        assets: Loaded assets in load order.

    Returns:
        The compiled document, or content unchanged when no assets are loaded.
    """
    if not assets:
        return content

    layout_format = LayoutFormat(layout_format)
    title = (title or "").strip() or DEFAULT_COMPILED_TITLE
    text_assets = [a for a in assets if a.kind is AssetKind.TEXT]
    image_assets = [a for a in assets if a.kind is AssetKind.IMAGE]
    other_assets = [a for a in assets if a.kind is AssetKind.OTHER]

    if layout_format is LayoutFormat.CATALOGUE:
        if image_assets:
            blocks = "\n\n".join(
                f"{_image_block(asset)}\n\n"
                f"### Item {index}: {asset.name}\n\n"
                f"- SKU: CAT-{index:03d}\n"
                f"- Price: ${index * 19}"
                for index, asset in enumerate(image_assets, start=1)
            )
        else:
            blocks = "No image assets loaded yet."
        return f"# {title}\n\n## Catalogue Layout\n\n{blocks}"

    if text_assets:
        text_section = "\n\n".join(
            f"## Section {index}: {asset.name}\n\n{asset.text_content or ''}"
            for index, asset in enumerate(text_assets, start=1)
        )
    else:
        text_section = content

    image_section = ""
    if image_assets:
        image_blocks = "\n\n".join(
            f"### {asset.name}\n\n{_image_block(asset)}" for asset in image_assets
        )
        image_section = f"\n\n## Visual Assets\n\n{image_blocks}"

    attachment_section = ""
    if other_assets:
        attachments = "\n".join(f"- {asset.name} ({asset.size_label})" for asset in other_assets)
        attachment_section = f"\n\n## Attachments\n\n{attachments}"

    header = FORMAT_HEADERS[layout_format]
    return f"# {title}\n\n{header}\n\n{text_section}{image_section}{attachment_section}"
