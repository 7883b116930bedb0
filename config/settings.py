#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from pathlib import Path
from typing import List
from pydantic_settings import BaseSettings

from .constants import (
    PAGINATION_SOFT_LIMIT,
    CATALOGUE_SOFT_LIMIT,
    PREFLIGHT_PAGE_TARGET,
    PREFLIGHT_OVERSIZE_FACTOR,
    MAX_IMPORT_SIZE_BYTES,
    PRESET_FILE,
)


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings"""

    # ========== Pagination ==========
    editor_soft_limit: int = PAGINATION_SOFT_LIMIT
    catalogue_soft_limit: int = CATALOGUE_SOFT_LIMIT

    # ========== Preflight ==========
    preflight_page_target: int = PREFLIGHT_PAGE_TARGET
    preflight_oversize_factor: float = PREFLIGHT_OVERSIZE_FACTOR

    # ========== Assets ==========
    max_import_size_bytes: int = MAX_IMPORT_SIZE_BYTES

    # ========== Presets ==========
    preset_file: Path = BASE_DIR / PRESET_FILE

    # ========== API ==========
    rate_limit: str = "120/minute"
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    class Config:
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Allow extra fields from .env that aren't defined in model

    def print_config(self):
        """Print configuration summary"""
        print("\n" + "=" * 70)
        print("DOCKERNEL CONFIGURATION")
        print("=" * 70)
        print(f"Editor soft limit:     {self.editor_soft_limit}")
        print(f"Catalogue soft limit:  {self.catalogue_soft_limit}")
        print(f"Preflight page target: {self.preflight_page_target}")
        print(f"Oversize factor:       {self.preflight_oversize_factor}")
        print(f"Preset file:           {self.preset_file}")
        print(f"Rate limit:            {self.rate_limit}")
        print("=" * 70 + "\n")


# Global settings instance
settings = Settings()
