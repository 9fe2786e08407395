"""Weather result entity."""

from dataclasses import dataclass
from datetime import date
from typing import Tuple

from .season import Season

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


@dataclass(frozen=True)
class WeatherResult:
    """Generated weather for one region on one calendar date."""

    region_id: str
    date: date
    season: Season
    condition: str
    impacts: Tuple[str, ...] = ()
    is_night: bool = False  # generation-time hour, not the forecast date

    @property
    def day_of_week(self) -> str:
        """English weekday name of the forecast date."""
        return WEEKDAY_NAMES[self.date.weekday()]

    @property
    def display_date(self) -> str:
        """Date formatted like 'Monday, September 1, 2025'."""
        return (
            f"{self.day_of_week}, {MONTH_NAMES[self.date.month - 1]} "
            f"{self.date.day}, {self.date.year}"
        )

    def to_dict(self) -> dict:
        return {
            "region_id": self.region_id,
            "date": self.date.isoformat(),
            "day_of_week": self.day_of_week,
            "season": self.season.value,
            "condition": self.condition,
            "impacts": list(self.impacts),
            "is_night": self.is_night,
        }

    def __str__(self) -> str:
        return f"{self.region_id}_{self.date.isoformat()}_{self.condition}"
