"""Region configuration entity."""

from dataclasses import dataclass, field
from typing import Mapping, Tuple

from .season import Season
from .seasonal_table import SeasonalTable


@dataclass(frozen=True)
class RegionConfig:
    """A campaign region with its seasonal weather tables."""

    id: str
    name: str
    seasonal_weather: Mapping[Season, SeasonalTable]
    webhook_urls: Tuple[str, ...] = field(default_factory=tuple)

    def table_for(self, season: Season) -> SeasonalTable:
        """Seasonal table for a season, empty if the region omits it."""
        return self.seasonal_weather.get(season, SeasonalTable(conditions=()))

    @property
    def has_webhooks(self) -> bool:
        return len(self.webhook_urls) > 0

    def __str__(self) -> str:
        return self.name
