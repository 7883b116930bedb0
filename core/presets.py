"""
Layout Presets

Saved combinations of output format and preview settings. Storage sits behind
the PresetStore interface and is injected into PresetManager, so the
pagination core never touches persistence.
"""

import json
import logging
import threading
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional

from config.constants import PREVIEW_PAGE_COUNT_DEFAULT
from .errors import PresetNotFoundError
from .layout.formats import LayoutFormat

logger = logging.getLogger(__name__)


@dataclass
class LayoutPreset:
    """A saved layout configuration"""
    id: str
    name: str
    format: LayoutFormat = LayoutFormat.ZINE
    full_book_preview: bool = False
    preview_page_count: int = PREVIEW_PAGE_COUNT_DEFAULT

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["format"] = self.format.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LayoutPreset":
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            format=LayoutFormat(data.get("format", LayoutFormat.ZINE.value)),
            full_book_preview=bool(data.get("full_book_preview", False)),
            preview_page_count=int(data.get("preview_page_count", PREVIEW_PAGE_COUNT_DEFAULT)),
        )


class PresetStore(ABC):
    """Abstract preset storage"""

    @abstractmethod
    def load(self) -> List[LayoutPreset]:
        """Load all presets, newest first"""
        pass

    @abstractmethod
    def save(self, presets: List[LayoutPreset]) -> None:
        """Replace the stored presets"""
        pass


class InMemoryPresetStore(PresetStore):
    """Process-local store, used by tests and ephemeral sessions"""

    def __init__(self, presets: Optional[List[LayoutPreset]] = None):
        self._presets = list(presets or [])

    def load(self) -> List[LayoutPreset]:
        return list(self._presets)

    def save(self, presets: List[LayoutPreset]) -> None:
        self._presets = list(presets)


class JsonFilePresetStore(PresetStore):
    """
    Presets persisted as a JSON list in a single file.

    Hydration is best-effort: a missing file is an empty store, and a
    corrupt file is logged and treated as empty.
    """

    def __init__(self, path: str):
        self.path = Path(path)
        self._lock = threading.RLock()

    def load(self) -> List[LayoutPreset]:
        with self._lock:
            if not self.path.exists():
                return []
            try:
                with open(self.path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
            except (OSError, ValueError) as e:
                logger.warning(f"Failed to load layout presets from {self.path}: {e}")
                return []

            if not isinstance(data, list):
                logger.warning(f"Ignoring layout presets file {self.path}: expected a list")
                return []

            presets = []
            for entry in data:
                try:
                    presets.append(LayoutPreset.from_dict(entry))
                except (KeyError, TypeError, ValueError) as e:
                    logger.warning(f"Skipping invalid layout preset {entry!r}: {e}")
            return presets

    def save(self, presets: List[LayoutPreset]) -> None:
        with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump([p.to_dict() for p in presets], f, ensure_ascii=False, indent=2)
            logger.debug(f"Saved {len(presets)} layout presets to {self.path}")


class PresetManager:
    """
    Layout preset operations over an injected store.

    Usage:
        manager = PresetManager(JsonFilePresetStore("data/layout_presets.json"))
        preset = manager.save_current(LayoutFormat.BOOK, True, 16)
        manager.get(preset.id)
    """

    def __init__(self, store: PresetStore):
        self.store = store

    def list(self) -> List[LayoutPreset]:
        return self.store.load()

    def get(self, preset_id: str) -> LayoutPreset:
        """
        Find a preset by id.

        Raises:
            PresetNotFoundError: If no preset has that id
        """
        for preset in self.store.load():
            if preset.id == preset_id:
                return preset
        raise PresetNotFoundError(preset_id)

    def save_current(
        self,
        layout_format: LayoutFormat,
        full_book_preview: bool,
        preview_page_count: int,
        name: Optional[str] = None,
    ) -> LayoutPreset:
        """
        Save the current layout settings as a new preset.

        The preset is named "Layout Preset N" (N = number of saved presets
        + 1) unless a name is given, and is placed first in the list.
        """
        presets = self.store.load()
        preset = LayoutPreset(
            id=str(uuid.uuid4()),
            name=name or f"Layout Preset {len(presets) + 1}",
            format=LayoutFormat(layout_format),
            full_book_preview=full_book_preview,
            preview_page_count=preview_page_count,
        )
        self.store.save([preset] + presets)
        logger.info(f"Saved {preset.name} ({preset.format.value})")
        return preset

    def delete(self, preset_id: str) -> None:
        """
        Remove a preset.

        Raises:
            PresetNotFoundError: If no preset has that id
        """
        presets = self.store.load()
        remaining = [p for p in presets if p.id != preset_id]
        if len(remaining) == len(presets):
            raise PresetNotFoundError(preset_id)
        self.store.save(remaining)
        logger.info(f"Deleted layout preset {preset_id}")
