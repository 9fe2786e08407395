"""Caching decorator for region configuration repositories."""

import logging
from typing import List, Optional

from ...domain.entities.region_config import RegionConfig
from ...domain.repositories.region_config_repository import RegionConfigRepository

logger = logging.getLogger(__name__)


class CachedRegionConfigRepository(RegionConfigRepository):
    """Loads regions from another repository once and serves them from memory."""

    def __init__(self, source: RegionConfigRepository):
        """
        Initialize repository.

        Args:
            source: Repository consulted on the first load and after reset()
        """
        self.source = source
        self._regions: Optional[List[RegionConfig]] = None

    @property
    def loaded(self) -> bool:
        return self._regions is not None

    def get_regions(self) -> List[RegionConfig]:
        if self._regions is None:
            self._regions = self.source.get_regions()
            logger.info(f"Configuration loaded: {len(self._regions)} regions")
        else:
            logger.debug("Using cached region configuration")
        return list(self._regions)

    def reset(self) -> None:
        """Drop the cached regions so the next call reloads from the source."""
        self._regions = None
