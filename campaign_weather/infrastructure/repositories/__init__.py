"""Concrete repository implementations."""

from .json_region_config_repository import JsonRegionConfigRepository
from .google_sheets_region_config_repository import GoogleSheetsRegionConfigRepository
from .cached_region_config_repository import CachedRegionConfigRepository

__all__ = [
    "JsonRegionConfigRepository",
    "GoogleSheetsRegionConfigRepository",
    "CachedRegionConfigRepository",
]
