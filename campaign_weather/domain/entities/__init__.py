"""Domain entities."""

from .season import Season, SEASON_BY_MONTH
from .seasonal_table import SeasonalTable
from .region_config import RegionConfig
from .weather_result import WeatherResult
from .region_forecast import RegionForecast
from .delivery_result import DeliveryResult, NotificationReport

__all__ = [
    "Season",
    "SEASON_BY_MONTH",
    "SeasonalTable",
    "RegionConfig",
    "WeatherResult",
    "RegionForecast",
    "DeliveryResult",
    "NotificationReport",
]
