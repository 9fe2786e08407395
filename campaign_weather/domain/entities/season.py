"""Season entity."""

from enum import Enum


class Season(str, Enum):
    """Enumeration for the four campaign seasons."""

    SPRING = "spring"
    SUMMER = "summer"
    AUTUMN = "autumn"
    WINTER = "winter"

    @classmethod
    def for_month(cls, month: int) -> "Season":
        """Resolve the season for a month number (1-12)."""
        try:
            return SEASON_BY_MONTH[month]
        except KeyError:
            raise ValueError(f"Month must be between 1 and 12, got {month}") from None

    @classmethod
    def parse(cls, label: str) -> "Season":
        """Parse a season label, accepting 'fall' for autumn."""
        normalized = label.strip().lower()
        if normalized == "fall":
            return cls.AUTUMN
        return cls(normalized)

    @property
    def display_name(self) -> str:
        """Capitalized label for display."""
        return self.value.capitalize()

    def __str__(self) -> str:
        return self.value


# Southern Hemisphere calendar
SEASON_BY_MONTH = {
    12: Season.SUMMER,
    1: Season.SUMMER,
    2: Season.SUMMER,
    3: Season.AUTUMN,
    4: Season.AUTUMN,
    5: Season.AUTUMN,
    6: Season.WINTER,
    7: Season.WINTER,
    8: Season.WINTER,
    9: Season.SPRING,
    10: Season.SPRING,
    11: Season.SPRING,
}
