"""Region forecast entity."""

from dataclasses import dataclass
from typing import Optional, Tuple

from .weather_result import WeatherResult


@dataclass(frozen=True)
class RegionForecast:
    """Results generated for one region, or the error that prevented them."""

    region_name: str
    results: Tuple[WeatherResult, ...] = ()
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None
