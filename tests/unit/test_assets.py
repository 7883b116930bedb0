"""
Unit tests for core/assets.py - asset import and compiled previews
"""
import pytest

from core.assets import (
    Asset,
    AssetKind,
    build_asset,
    classify_asset,
    compile_preview,
    data_url,
    format_bytes,
    import_into_buffer,
)
from core.errors import AssetImportError, AssetTooLargeError, UnsupportedAssetError
from core.layout import LayoutFormat
from core.paging import PAGE_BREAK_TOKEN, split_content_into_pages


class TestFormatBytes:
    """Test size labels."""

    @pytest.mark.parametrize("size, expected", [
        (0, "0 B"),
        (512, "512 B"),
        (1023, "1023 B"),
        (1024, "1 KB"),
        (1536, "2 KB"),
        (20480, "20 KB"),
        (1024 * 1024, "1.0 MB"),
        (3355443, "3.2 MB"),
    ])
    def test_format_bytes(self, size, expected):
        assert format_bytes(size) == expected


class TestClassifyAsset:
    """Test asset classification."""

    @pytest.mark.parametrize("filename, content_type, expected", [
        ("cover.PNG", "", AssetKind.IMAGE),
        ("photo.jpeg", "", AssetKind.IMAGE),
        ("blob", "image/webp", AssetKind.IMAGE),
        ("notes.md", "", AssetKind.TEXT),
        ("data.yaml", "", AssetKind.TEXT),
        ("readme", "text/plain", AssetKind.TEXT),
        ("brochure.pdf", "application/pdf", AssetKind.OTHER),
        ("letter.rtf", "", AssetKind.OTHER),
    ])
    def test_classify(self, filename, content_type, expected):
        assert classify_asset(filename, content_type) is expected

    def test_build_text_asset_truncates(self):
        asset = build_asset("long.txt", 30000, text="z" * 20000)
        assert asset.kind is AssetKind.TEXT
        assert len(asset.text_content) == 12000
        assert asset.size_label == "29 KB"

    def test_build_image_asset_keeps_url(self):
        asset = build_asset("cover.png", 100, object_url="/files/cover.png", text="ignored")
        assert asset.object_url == "/files/cover.png"
        assert asset.text_content is None

    def test_asset_ids_unique(self):
        assert build_asset("a.txt", 1).id != build_asset("a.txt", 1).id


class TestImportIntoBuffer:
    """Test editor file import."""

    def test_text_replaces_buffer(self):
        assert import_into_buffer("old", "notes.md", 10, text="# New") == "# New"

    def test_rtf_accepted_as_text(self):
        assert import_into_buffer("", "letter.rtf", 10, text="hello") == "hello"

    def test_image_appended_on_own_page(self):
        result = import_into_buffer("  Intro text  ", "cover.png", 10, image_url="/c.png")
        assert result == (
            f"Intro text\n\n{PAGE_BREAK_TOKEN}\n\n![cover.png](/c.png)\n\n{PAGE_BREAK_TOKEN}"
        )
        assert split_content_into_pages(result, 1800) == ["Intro text", "![cover.png](/c.png)"]

    def test_image_into_empty_buffer(self):
        result = import_into_buffer("", "cover.png", 10, image_url="/c.png")
        assert result == f"![cover.png](/c.png)\n\n{PAGE_BREAK_TOKEN}"

    def test_too_large(self):
        with pytest.raises(AssetTooLargeError) as exc_info:
            import_into_buffer("", "big.md", 2 * 1024 * 1024 + 1, text="x")
        assert exc_info.value.limit == 2 * 1024 * 1024

    def test_exactly_at_limit_accepted(self):
        assert import_into_buffer("", "big.md", 2 * 1024 * 1024, text="x") == "x"

    def test_custom_limit(self):
        with pytest.raises(AssetTooLargeError):
            import_into_buffer("", "a.md", 11, text="x", max_size=10)

    def test_unsupported(self):
        with pytest.raises(UnsupportedAssetError):
            import_into_buffer("", "brochure.pdf", 10, content_type="application/pdf")

    def test_image_without_url(self):
        with pytest.raises(AssetImportError):
            import_into_buffer("", "cover.png", 10)

    def test_data_url(self):
        assert data_url("dot.png", b"\x00\x01") == "data:image/png;base64,AAE="


class TestCompilePreview:
    """Test compiled paginator previews."""

    @pytest.fixture
    def image(self):
        return Asset(id="1", name="cover.png", kind=AssetKind.IMAGE, size_label="2 KB", object_url="/c.png")

    @pytest.fixture
    def text(self):
        return Asset(id="2", name="intro.md", kind=AssetKind.TEXT, size_label="1 KB", text_content="Hello.")

    @pytest.fixture
    def other(self):
        return Asset(id="3", name="terms.pdf", kind=AssetKind.OTHER, size_label="3.2 MB")

    def test_no_assets_returns_content(self):
        assert compile_preview("# Draft", "Title", LayoutFormat.BOOK, []) == "# Draft"

    def test_catalogue_items(self, image):
        result = compile_preview("", "Shop", LayoutFormat.CATALOGUE, [image])
        assert result == (
            "# Shop\n\n## Catalogue Layout\n\n"
            f"![cover.png](/c.png)\n\n{PAGE_BREAK_TOKEN}\n\n"
            "### Item 1: cover.png\n\n- SKU: CAT-001\n- Price: $19"
        )

    def test_catalogue_numbering(self, image):
        second = Asset(id="4", name="back.png", kind=AssetKind.IMAGE, size_label="2 KB")
        result = compile_preview("", "Shop", "catalogue", [image, second])
        assert "### Item 2: back.png\n\n- SKU: CAT-002\n- Price: $38" in result

    def test_catalogue_without_images(self, text):
        result = compile_preview("", "", LayoutFormat.CATALOGUE, [text])
        assert result == "# Compiled Document\n\n## Catalogue Layout\n\nNo image assets loaded yet."

    def test_book_sections(self, image, text, other):
        result = compile_preview("ignored", "My Book", LayoutFormat.BOOK, [text, image, other])
        assert result == (
            "# My Book\n\n## Book Manuscript\n\n"
            "## Section 1: intro.md\n\nHello."
            "\n\n## Visual Assets\n\n"
            f"### cover.png\n\n![cover.png](/c.png)\n\n{PAGE_BREAK_TOKEN}"
            "\n\n## Attachments\n\n- terms.pdf (3.2 MB)"
        )

    def test_editor_content_used_without_text_assets(self, other):
        result = compile_preview("# Draft\n\nBody", "Z", LayoutFormat.ZINE, [other])
        assert result.startswith("# Z\n\n## Zine Structure\n\n# Draft\n\nBody")

    @pytest.mark.parametrize("layout_format, header", [
        (LayoutFormat.REPORT, "## Report Body"),
        (LayoutFormat.CUSTOM, "## Custom Template"),
    ])
    def test_format_headers(self, other, layout_format, header):
        assert header in compile_preview("", "T", layout_format, [other])
