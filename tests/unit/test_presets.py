"""
Unit tests for core/presets.py - layout presets and their stores
"""
import json
import pytest

from core.errors import PresetNotFoundError
from core.layout import LayoutFormat
from core.presets import JsonFilePresetStore, LayoutPreset, PresetManager


class TestPresetManager:
    """Test preset operations over an in-memory store."""

    def test_starts_empty(self, memory_preset_manager):
        assert memory_preset_manager.list() == []

    def test_save_current_names_sequentially(self, memory_preset_manager):
        first = memory_preset_manager.save_current(LayoutFormat.BOOK, True, 16)
        second = memory_preset_manager.save_current(LayoutFormat.ZINE, False, 12)
        assert first.name == "Layout Preset 1"
        assert second.name == "Layout Preset 2"

    def test_newest_first(self, memory_preset_manager):
        first = memory_preset_manager.save_current(LayoutFormat.BOOK, True, 16)
        second = memory_preset_manager.save_current("catalogue", False, 12)
        assert [p.id for p in memory_preset_manager.list()] == [second.id, first.id]
        assert second.format is LayoutFormat.CATALOGUE

    def test_custom_name(self, memory_preset_manager):
        preset = memory_preset_manager.save_current(LayoutFormat.REPORT, False, 8, name="Quarterly")
        assert preset.name == "Quarterly"

    def test_get(self, memory_preset_manager):
        saved = memory_preset_manager.save_current(LayoutFormat.BOOK, True, 20)
        preset = memory_preset_manager.get(saved.id)
        assert preset.format is LayoutFormat.BOOK
        assert preset.full_book_preview is True
        assert preset.preview_page_count == 20

    def test_get_missing_raises(self, memory_preset_manager):
        with pytest.raises(PresetNotFoundError):
            memory_preset_manager.get("nope")

    def test_delete(self, memory_preset_manager):
        saved = memory_preset_manager.save_current(LayoutFormat.BOOK, True, 20)
        memory_preset_manager.delete(saved.id)
        assert memory_preset_manager.list() == []

    def test_delete_missing_raises(self, memory_preset_manager):
        with pytest.raises(PresetNotFoundError):
            memory_preset_manager.delete("nope")


class TestJsonFilePresetStore:
    """Test JSON file persistence."""

    def test_missing_file_is_empty(self, preset_file):
        assert JsonFilePresetStore(preset_file).load() == []

    def test_persists_across_instances(self, file_preset_manager, preset_file):
        saved = file_preset_manager.save_current(LayoutFormat.ZINE, True, 8)

        reloaded = PresetManager(JsonFilePresetStore(preset_file))
        assert reloaded.get(saved.id).to_dict() == saved.to_dict()

    def test_file_format(self, file_preset_manager, preset_file):
        file_preset_manager.save_current(LayoutFormat.CATALOGUE, False, 12)
        data = json.loads(preset_file.read_text(encoding="utf-8"))
        assert data[0]["format"] == "catalogue"
        assert data[0]["name"] == "Layout Preset 1"

    def test_corrupt_file_is_empty(self, preset_file):
        preset_file.parent.mkdir(parents=True)
        preset_file.write_text("{not json", encoding="utf-8")
        assert JsonFilePresetStore(preset_file).load() == []

    def test_non_list_file_is_empty(self, preset_file):
        preset_file.parent.mkdir(parents=True)
        preset_file.write_text('{"id": "x"}', encoding="utf-8")
        assert JsonFilePresetStore(preset_file).load() == []

    def test_invalid_entries_skipped(self, preset_file):
        valid = LayoutPreset(id="a", name="Kept", format=LayoutFormat.BOOK)
        preset_file.parent.mkdir(parents=True)
        preset_file.write_text(
            json.dumps([valid.to_dict(), {"name": "no id"}, {"id": "b", "name": "x", "format": "poster"}]),
            encoding="utf-8",
        )
        presets = JsonFilePresetStore(preset_file).load()
        assert [p.id for p in presets] == ["a"]

    def test_saving_after_corrupt_file_recovers(self, preset_file):
        preset_file.parent.mkdir(parents=True)
        preset_file.write_text("garbage", encoding="utf-8")
        manager = PresetManager(JsonFilePresetStore(preset_file))
        preset = manager.save_current(LayoutFormat.BOOK, False, 12)
        assert manager.list() == [preset]
