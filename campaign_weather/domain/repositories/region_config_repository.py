"""Region configuration repository interface."""

from abc import ABC, abstractmethod
from typing import List

from ..entities.region_config import RegionConfig
from ..exceptions import RegionNotFoundError


class RegionConfigRepository(ABC):
    """Abstract repository for region configuration access."""

    @abstractmethod
    def get_regions(self) -> List[RegionConfig]:
        """
        Retrieve every region defined by the configuration source.

        Returns:
            List of RegionConfig entities, in source order

        Raises:
            ConfigurationError: If the source cannot be read or is malformed
        """
        pass

    def get_configured_regions(self) -> List[RegionConfig]:
        """Regions with at least one webhook URL."""
        return [region for region in self.get_regions() if region.has_webhooks]

    def get_region(self, region_id: str) -> RegionConfig:
        """
        Look up a single region.

        Args:
            region_id: Region identifier (its display name for sheet sources)

        Returns:
            The matching RegionConfig

        Raises:
            RegionNotFoundError: If no region has this identifier
        """
        for region in self.get_regions():
            if region.id == region_id:
                return region
        raise RegionNotFoundError(region_id)
