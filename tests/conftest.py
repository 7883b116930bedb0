"""
Pytest configuration and shared fixtures for DocKernel tests.
"""
import sys
import pytest
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.constants import PAGE_BREAK_TOKEN
from core.layout import TemplateFactory
from core.presets import InMemoryPresetStore, JsonFilePresetStore, PresetManager


# ============================================================================
# Fixtures: Documents
# ============================================================================

@pytest.fixture
def marker() -> str:
    """The page-break marker."""
    return PAGE_BREAK_TOKEN


@pytest.fixture
def structured_document() -> str:
    """Small document with headings, lists and a page break."""
    return (
        "# Spring Catalogue\n\n"
        "Welcome to the new season.\n\n"
        f"{PAGE_BREAK_TOKEN}\n\n"
        "## Featured\n\n"
        "- Linen shirt\n"
        "- Canvas tote"
    )


@pytest.fixture
def long_paragraph() -> str:
    """A single paragraph far above any page budget."""
    return "Lorem ipsum dolor sit amet. " * 200


# ============================================================================
# Fixtures: Presets & Templates
# ============================================================================

@pytest.fixture
def memory_preset_manager() -> PresetManager:
    """Preset manager over an in-memory store."""
    return PresetManager(InMemoryPresetStore())


@pytest.fixture
def preset_file(tmp_path: Path) -> Path:
    """Path for a JSON preset file inside a temp directory."""
    return tmp_path / "presets" / "layout_presets.json"


@pytest.fixture
def file_preset_manager(preset_file: Path) -> PresetManager:
    """Preset manager persisted to a temporary JSON file."""
    return PresetManager(JsonFilePresetStore(preset_file))


@pytest.fixture(autouse=True)
def reset_templates():
    """Drop template registrations made by a test."""
    yield
    TemplateFactory.reset()
