"""Use case for deterministic weather generation."""

import logging
import math
from datetime import date, datetime
from typing import Mapping, Optional, Tuple

from ..entities.region_config import RegionConfig
from ..entities.season import Season
from ..entities.seasonal_table import SeasonalTable
from ..entities.weather_result import WeatherResult
from ..exceptions import ConfigurationError
from .time_of_day import is_night_hour, reference_hour, reference_now

logger = logging.getLogger(__name__)

UINT32_MASK = 0xFFFFFFFF
FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193
DATE_KEY_MULTIPLIER = 0x9E3779B1


def region_hash(region_id: str) -> int:
    """32-bit FNV-1a hash of the UTF-8 encoded region identifier."""
    h = FNV_OFFSET_BASIS
    for byte in region_id.encode("utf-8"):
        h ^= byte
        h = (h * FNV_PRIME) & UINT32_MASK
    return h


def date_key(on: date) -> int:
    """Stable integer encoding of a calendar date, e.g. 20250901."""
    return on.year * 10000 + on.month * 100 + on.day


def derive_seed(region_id: str, on: date) -> int:
    """Seed for a (region, date) pair, independent of process and clock."""
    return (region_hash(region_id) + date_key(on) * DATE_KEY_MULTIPLIER) & UINT32_MASK


class SeededRandom:
    """Mulberry32 generator producing floats in [0, 1).

    Integer arithmetic is kept to 32 bits so the sequence is identical on
    every platform and interpreter.
    """

    def __init__(self, seed: int):
        self.state = seed & UINT32_MASK

    def next_uint32(self) -> int:
        self.state = (self.state + 0x6D2B79F5) & UINT32_MASK
        t = self.state
        t = ((t ^ (t >> 15)) * (t | 1)) & UINT32_MASK
        t = (t ^ ((t + (((t ^ (t >> 7)) * (t | 61)) & UINT32_MASK)) & UINT32_MASK)) & UINT32_MASK
        return (t ^ (t >> 14)) & UINT32_MASK

    def random(self) -> float:
        return self.next_uint32() / 4294967296.0


def select_condition_index(seed: int, count: int) -> int:
    """Map a seed uniformly onto an index in [0, count)."""
    if count <= 0:
        raise ValueError("count must be positive")
    value = SeededRandom(seed).random()
    return min(int(math.floor(value * count)), count - 1)


def lookup_impacts(condition: str, table: SeasonalTable) -> Tuple[str, ...]:
    """Mechanical impacts for a condition; empty when none are listed."""
    return table.impacts_for(condition)


def generate_weather(
    on: date,
    region_id: str,
    seasonal_weather: Mapping[Season, SeasonalTable],
    now: Optional[datetime] = None,
) -> WeatherResult:
    """
    Generate the weather for one region on one date.

    Args:
        on: Forecast date; the only input to condition selection besides the region
        region_id: Region identifier mixed into the seed
        seasonal_weather: Tables for each season of the region
        now: Generation time, used only for the day/night flag

    Returns:
        WeatherResult for the date

    Raises:
        ConfigurationError: If the resolved season lists no conditions
    """
    season = Season.for_month(on.month)
    table = seasonal_weather.get(season)
    if table is None or len(table) == 0:
        raise ConfigurationError(
            f"Region '{region_id}' has no weather conditions for {season.value}"
        )

    index = select_condition_index(derive_seed(region_id, on), len(table))
    condition = table.conditions[index]
    if now is None:
        now = reference_now()

    return WeatherResult(
        region_id=region_id,
        date=on,
        season=season,
        condition=condition,
        impacts=lookup_impacts(condition, table),
        is_night=is_night_hour(reference_hour(now)),
    )


class GenerateWeatherUseCase:
    """Use case to generate a region's weather for a date."""

    def execute(
        self, region: RegionConfig, on: date, now: Optional[datetime] = None
    ) -> WeatherResult:
        """
        Execute the use case.

        Args:
            region: Region configuration
            on: Forecast date
            now: Generation time for the day/night flag

        Returns:
            WeatherResult for the region and date
        """
        result = generate_weather(on, region.id, region.seasonal_weather, now=now)
        logger.debug(
            f"Generated weather: region={region.id}, date={on}, "
            f"season={result.season.value}, condition={result.condition}"
        )
        return result
