"""
Integration tests for API endpoints (api/main.py)
"""
import base64

import pytest

from config.settings import settings
from core.paging import PAGE_BREAK_TOKEN


class TestAPIBasics:
    """Test basic API functionality."""

    def test_health_check(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_openapi_lists_routes(self, client):
        paths = client.get("/openapi.json").json()["paths"]
        assert "/api/paginate" in paths
        assert "/api/presets/{preset_id}" in paths


class TestLayoutEndpoints:
    """Test pagination, preflight and preview endpoints."""

    # ========================================================================
    # Test: POST /api/paginate
    # ========================================================================

    def test_paginate(self, client):
        response = client.post("/api/paginate", json={
            "content": f"A\n\n{PAGE_BREAK_TOKEN}\n\nB",
            "soft_limit": 1000,
        })
        assert response.status_code == 200
        assert response.json() == {"pages": ["A", "B"], "total_pages": 2}

    def test_paginate_empty(self, client):
        response = client.post("/api/paginate", json={})
        assert response.json() == {"pages": [""], "total_pages": 1}

    # ========================================================================
    # Test: POST /api/pages/replace
    # ========================================================================

    def test_replace_page(self, client):
        response = client.post("/api/pages/replace", json={
            "content": f"A\n\n{PAGE_BREAK_TOKEN}\n\nB",
            "page_index": 1,
            "new_text": "C",
        })
        assert response.status_code == 200
        data = response.json()
        assert data["pages"] == ["A", "C"]
        assert data["content"] == f"A\n\n{PAGE_BREAK_TOKEN}\n\nC"

    def test_replace_page_out_of_range(self, client):
        response = client.post("/api/pages/replace", json={
            "content": "A",
            "page_index": 3,
            "new_text": "C",
        })
        assert response.status_code == 404

    def test_replace_page_negative_index_rejected(self, client):
        response = client.post("/api/pages/replace", json={"content": "A", "page_index": -1})
        assert response.status_code == 422

    # ========================================================================
    # Test: POST /api/preflight
    # ========================================================================

    def test_preflight_clean(self, client):
        response = client.post("/api/preflight", json={"content": "# Title\n\n- item"})
        data = response.json()
        assert data["severity"] == "none"
        assert data["issues"] == []
        assert data["export_safe"] is True
        assert data["status"]["state"] == "All good"

    def test_preflight_major(self, client):
        response = client.post("/api/preflight", json={"content": "# T\n\n" + "x" * 3700})
        data = response.json()
        assert data["severity"] == "major"
        assert [issue["id"] for issue in data["issues"]] == ["oversized-page"]
        assert data["export_safe"] is False

    def test_preflight_page_target_override(self, client):
        response = client.post("/api/preflight", json={
            "content": "# T\n\n" + "x" * 300,
            "page_target": 100,
        })
        assert response.json()["severity"] == "major"

    # ========================================================================
    # Test: POST /api/preview
    # ========================================================================

    def test_preview_catalogue(self, client):
        response = client.post("/api/preview", json={
            "content": "Hello",
            "layout_format": "catalogue",
            "full_book_preview": True,
            "preview_page_count": 4,
        })
        data = response.json()
        assert data["frame"] == {"width": 860, "height": 1123}
        assert data["soft_limit"] == 1400
        assert data["pages"] == ["Hello", "", "", ""]

    def test_preview_uses_configured_soft_limit(self, client, monkeypatch):
        monkeypatch.setattr(settings, "catalogue_soft_limit", 3)
        response = client.post("/api/preview", json={
            "content": "aa\n\nbb",
            "layout_format": "catalogue",
        })
        data = response.json()
        assert data["soft_limit"] == 3
        assert data["pages"] == ["aa", "bb"]

    def test_preview_unknown_format(self, client):
        response = client.post("/api/preview", json={"layout_format": "poster"})
        assert response.status_code == 422


class TestTemplateEndpoints:
    """Test /api/templates endpoints."""

    def test_list_templates(self, client):
        data = client.get("/api/templates").json()
        assert data["total"] == 9

    def test_list_templates_by_category(self, client):
        data = client.get("/api/templates", params={"category": "book"}).json()
        assert [t["id"] for t in data["templates"]] == ["book-print", "book-manuscript", "book-trade"]

    def test_get_template(self, client):
        response = client.get("/api/templates/zine-a5")
        assert response.status_code == 200
        assert response.json()["name"] == "A5 Booklet"

    def test_get_missing_template(self, client):
        assert client.get("/api/templates/missing").status_code == 404


class TestAssetEndpoints:
    """Test /api/compile and /api/import."""

    def test_compile_catalogue(self, client):
        response = client.post("/api/compile", json={
            "title": "Shop",
            "layout_format": "catalogue",
            "assets": [{"name": "cover.png", "size": 2048, "object_url": "/c.png"}],
        })
        assert response.status_code == 200
        data = response.json()
        assert data["content"].startswith("# Shop\n\n## Catalogue Layout")
        assert data["assets"][0]["kind"] == "image"
        assert data["assets"][0]["size_label"] == "2 KB"
        assert data["total_pages"] == 2

    def test_compile_without_assets(self, client):
        response = client.post("/api/compile", json={"content": "# Draft"})
        assert response.json()["content"] == "# Draft"

    def test_import_text(self, client):
        response = client.post(
            "/api/import",
            files={"file": ("notes.md", b"# Notes\n\nBody", "text/markdown")},
            data={"content": "old"},
        )
        assert response.status_code == 200
        assert response.json()["content"] == "# Notes\n\nBody"

    def test_import_image(self, client):
        response = client.post(
            "/api/import",
            files={"file": ("dot.png", b"\x00\x01", "image/png")},
            data={"content": "Intro"},
        )
        assert response.status_code == 200
        content = response.json()["content"]
        assert content.startswith(f"Intro\n\n{PAGE_BREAK_TOKEN}\n\n![dot.png](data:image/png;base64,AAE=)")
        assert content.endswith(PAGE_BREAK_TOKEN)

    def test_import_unsupported(self, client):
        response = client.post(
            "/api/import",
            files={"file": ("brochure.pdf", b"%PDF-1.4", "application/pdf")},
        )
        assert response.status_code == 415

    def test_import_too_large(self, client):
        response = client.post(
            "/api/import",
            files={"file": ("big.txt", b"x" * (2 * 1024 * 1024 + 1), "text/plain")},
        )
        assert response.status_code == 413

    def test_import_image_too_large(self, client, monkeypatch):
        def fail_encoding(*args, **kwargs):
            raise AssertionError("oversized upload was encoded")

        monkeypatch.setattr("api.layout_router.data_url", fail_encoding)
        response = client.post(
            "/api/import",
            files={"file": ("big.png", b"\x00" * (2 * 1024 * 1024 + 1), "image/png")},
            data={"content": "Intro"},
        )
        assert response.status_code == 413
        assert "big.png" in response.json()["detail"]


class TestPresetEndpoints:
    """Test /api/presets endpoints."""

    def test_save_and_list(self, client):
        response = client.post("/api/presets", json={
            "layout_format": "book",
            "full_book_preview": True,
            "preview_page_count": 16,
        })
        assert response.status_code == 201
        preset = response.json()
        assert preset["name"] == "Layout Preset 1"
        assert preset["format"] == "book"

        data = client.get("/api/presets").json()
        assert data["total"] == 1
        assert data["presets"][0]["id"] == preset["id"]

    def test_get_and_delete(self, client, preset_manager):
        saved = preset_manager.save_current("zine", False, 12)

        assert client.get(f"/api/presets/{saved.id}").json()["format"] == "zine"
        assert client.delete(f"/api/presets/{saved.id}").status_code == 200
        assert client.get(f"/api/presets/{saved.id}").status_code == 404

    def test_delete_missing(self, client):
        assert client.delete("/api/presets/missing").status_code == 404


class TestExportEndpoints:
    """Test /api/export endpoints."""

    def test_export_html(self, client):
        response = client.post("/api/export/html", json={
            "content": "<b>bold</b>",
            "options": {"title": "Zine", "watermark": True},
        })
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "&lt;b&gt;bold&lt;/b&gt;" in response.text
        assert '<div class="watermark">DocKernel</div>' in response.text

    def test_export_quality_validated(self, client):
        response = client.post("/api/export/html", json={"options": {"quality": 101}})
        assert response.status_code == 422

    def test_share_round_trip(self, client):
        response = client.post("/api/export/share", json={
            "base_url": "https://app.example/editor",
            "title": "Zine",
            "content": "# Zine\n\nHello",
            "options": {"quality": 70},
        })
        data = response.json()
        assert data["too_long"] is False

        query = data["url"].split("?", 1)[1]
        opened = client.get(f"/api/export/share?{query}")
        assert opened.status_code == 200
        payload = opened.json()
        assert payload["title"] == "Zine"
        assert payload["content"] == "# Zine\n\nHello"
        assert payload["options"]["quality"] == 70

    def test_share_too_long(self, client):
        response = client.post("/api/export/share", json={
            "base_url": "https://app.example/",
            "content": "x" * 8000,
        })
        assert response.json() == {"url": None, "too_long": True}

    @pytest.mark.parametrize("query", ["", "view=pdf", "view=editor&share=abc", "view=pdf&share=%25%25"])
    def test_open_invalid_share(self, client, query):
        assert client.get(f"/api/export/share?{query}").status_code == 404

    @pytest.mark.parametrize("raw", [
        '{"title":"t","content":"c","options":{"quality":1e400}}',
        '{"title":"t","content":"c","options":{"title":5}}',
    ])
    def test_open_share_with_bad_options(self, client, raw):
        share = base64.urlsafe_b64encode(raw.encode("utf-8")).decode("ascii").rstrip("=")
        response = client.get("/api/export/share", params={"view": "pdf", "share": share})
        assert response.status_code == 404
