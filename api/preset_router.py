"""
Layout Preset API Router

Save, list, fetch and delete layout presets.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from config.settings import settings
from core.errors import PresetNotFoundError
from core.presets import JsonFilePresetStore, PresetManager

from .models import PresetCreateRequest, PresetListResponse, PresetModel

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/presets", tags=["Presets"])

_preset_manager: Optional[PresetManager] = None


def get_preset_manager() -> PresetManager:
    """Get or create the preset manager backed by the configured file"""
    global _preset_manager
    if _preset_manager is None:
        _preset_manager = PresetManager(JsonFilePresetStore(settings.preset_file))
    return _preset_manager


@router.get("", response_model=PresetListResponse)
async def list_presets(manager: PresetManager = Depends(get_preset_manager)):
    """List saved presets, newest first"""
    presets = [p.to_dict() for p in manager.list()]
    return {"presets": presets, "total": len(presets)}


@router.post("", response_model=PresetModel, status_code=201)
async def save_preset(
    request: PresetCreateRequest,
    manager: PresetManager = Depends(get_preset_manager),
):
    """Save the current layout settings as a preset"""
    preset = manager.save_current(
        request.layout_format,
        request.full_book_preview,
        request.preview_page_count,
        name=request.name,
    )
    return preset.to_dict()


@router.get("/{preset_id}", response_model=PresetModel)
async def get_preset(preset_id: str, manager: PresetManager = Depends(get_preset_manager)):
    """Get a preset to apply it"""
    try:
        return manager.get(preset_id).to_dict()
    except PresetNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{preset_id}")
async def delete_preset(preset_id: str, manager: PresetManager = Depends(get_preset_manager)):
    """Delete a preset"""
    try:
        manager.delete(preset_id)
    except PresetNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"status": "deleted", "id": preset_id}
