"""Local JSON file region configuration repository."""

import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ...domain.entities.region_config import RegionConfig
from ...domain.exceptions import ConfigurationError
from ...domain.repositories.region_config_repository import RegionConfigRepository
from .region_config_parsing import parse_regions

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class JsonRegionConfigRepository(RegionConfigRepository):
    """Repository reading region configuration from a local JSON file."""

    def __init__(self, candidates: Sequence[Optional[PathLike]]):
        """
        Initialize repository.

        Args:
            candidates: Paths tried in order; the first existing file is used.
                Empty entries are ignored.
        """
        self.candidates = [Path(c) for c in candidates if c]
        if not self.candidates:
            raise ConfigurationError("No region configuration paths given")

    def resolve_path(self) -> Path:
        """First candidate path that exists."""
        for candidate in self.candidates:
            if candidate.is_file():
                return candidate
        tried = ", ".join(str(c) for c in self.candidates)
        raise ConfigurationError(f"Region configuration file not found (tried: {tried})")

    def get_regions(self) -> List[RegionConfig]:
        """Load and normalize regions from the resolved JSON file."""
        path = self.resolve_path()
        logger.info(f"Loading region configuration from {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Could not read {path}: {e}") from e

        regions = parse_regions(data)
        logger.info(f"Loaded {len(regions)} regions from {path.name}")
        return regions

