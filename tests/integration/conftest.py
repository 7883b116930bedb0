#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest fixtures for API integration tests.

Provides:
- preset_manager: In-memory preset manager injected into the API
- client: TestClient with rate limiting off
"""

import pytest
from pathlib import Path
import sys

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from fastapi.testclient import TestClient

from api.main import app
from api.preset_router import get_preset_manager
from core.presets import InMemoryPresetStore, PresetManager


@pytest.fixture
def preset_manager():
    """Preset manager that never touches disk."""
    return PresetManager(InMemoryPresetStore())


@pytest.fixture
def client(preset_manager):
    """Test client with presets in memory and no rate limit."""
    app.dependency_overrides[get_preset_manager] = lambda: preset_manager
    app.state.limiter.enabled = False
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    app.state.limiter.enabled = True
