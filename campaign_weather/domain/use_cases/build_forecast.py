"""Use case for current-day, advance and weekly forecasts."""

import logging
from datetime import date, datetime, timedelta
from typing import Iterator, List, Optional, Union

from ..entities.region_config import RegionConfig
from ..entities.weather_result import WeatherResult
from .generate_weather import GenerateWeatherUseCase
from .time_of_day import reference_now, reference_today

logger = logging.getLogger(__name__)

WEEKLY_WINDOW_DAYS = 7


class ForecastWindow:
    """Lazy sequence of daily results for consecutive dates.

    Nothing is cached: every iteration or index access regenerates the
    result from its own date, so the window can be consumed partially and
    restarted without affecting later entries.
    """

    def __init__(
        self,
        region: RegionConfig,
        start: date,
        days: int,
        generator: GenerateWeatherUseCase,
        now: datetime,
    ):
        if days <= 0:
            raise ValueError("days must be positive")
        self.region = region
        self.start = start
        self.days = days
        self.generator = generator
        self.now = now

    def date_at(self, offset: int) -> date:
        return self.start + timedelta(days=offset)

    def __len__(self) -> int:
        return self.days

    def __getitem__(self, offset: Union[int, slice]) -> Union[WeatherResult, List[WeatherResult]]:
        if isinstance(offset, slice):
            return [self[i] for i in range(*offset.indices(self.days))]
        if offset < 0:
            offset += self.days
        if not 0 <= offset < self.days:
            raise IndexError("forecast window index out of range")
        return self.generator.execute(self.region, self.date_at(offset), now=self.now)

    def __iter__(self) -> Iterator[WeatherResult]:
        for offset in range(self.days):
            yield self.generator.execute(self.region, self.date_at(offset), now=self.now)


class BuildForecastUseCase:
    """Use case to produce forecasts relative to the reference "today"."""

    def __init__(self, generator: Optional[GenerateWeatherUseCase] = None):
        """
        Initialize use case.

        Args:
            generator: Weather generation use case (default: a new instance)
        """
        self.generator = generator or GenerateWeatherUseCase()

    def for_date(
        self, region: RegionConfig, on: date, now: Optional[datetime] = None
    ) -> WeatherResult:
        """Forecast for an explicit date."""
        return self.generator.execute(region, on, now=now or reference_now())

    def current_day(
        self, region: RegionConfig, now: Optional[datetime] = None
    ) -> WeatherResult:
        """Forecast for today in the reference timezone."""
        now = now or reference_now()
        return self.generator.execute(region, reference_today(now), now=now)

    def advance(self, region: RegionConfig, now: Optional[datetime] = None) -> WeatherResult:
        """Forecast for tomorrow; day/night still follows the generation time."""
        now = now or reference_now()
        tomorrow = reference_today(now) + timedelta(days=1)
        return self.generator.execute(region, tomorrow, now=now)

    def weekly(
        self,
        region: RegionConfig,
        now: Optional[datetime] = None,
        days: int = WEEKLY_WINDOW_DAYS,
    ) -> ForecastWindow:
        """Window of `days` results starting today."""
        now = now or reference_now()
        start = reference_today(now)
        logger.debug(f"Building {days}-day window for {region.id} from {start}")
        return ForecastWindow(region, start, days, self.generator, now)
