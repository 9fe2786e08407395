"""Repository interfaces."""

from .region_config_repository import RegionConfigRepository
from .notifier import Notifier

__all__ = [
    "RegionConfigRepository",
    "Notifier",
]
