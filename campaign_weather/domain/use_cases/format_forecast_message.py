"""Use case for rendering forecasts as Discord messages."""

import logging
from typing import List, Sequence, Tuple

from ..entities.region_config import RegionConfig
from ..entities.region_forecast import RegionForecast
from ..entities.weather_result import WeatherResult

logger = logging.getLogger(__name__)

DISCORD_MESSAGE_LIMIT = 2000
DIVIDER = "─────────────────────────────"
REGION_ERROR_LINE = "❌ *Error generating forecast for this region*"

ADVANCE_HEADER = "📅 **Tomorrow's Weather Forecast - All Regions**"
ADVANCE_FOOTER = "*Advance weather forecast for tomorrow - all campaign regions*"
WEEKLY_HEADER = "📅 **Weekly Weather Forecast - All Regions**"
WEEKLY_FOOTER = "*Consolidated weather forecast for all campaign regions*"

# First matching keyword group wins, so harsher weather is listed first.
EMOJI_KEYWORDS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("thunder", "lightning", "storm"), "⛈️"),
    (("blizzard", "snow", "sleet", "hail"), "🌨️"),
    (("rain", "shower", "drizzle", "downpour"), "🌧️"),
    (("fog", "mist", "haze", "hazy"), "🌫️"),
    (("wind", "breeze", "gale", "gust"), "💨"),
    (("overcast", "cloud", "grey", "gray"), "☁️"),
    (("frost", "freez", "frozen", "bitter", "cold", "ice", "icy"), "❄️"),
    (("hot", "heat", "scorch", "swelter", "humid"), "🔥"),
)
CLEAR_DAY_EMOJI = "☀️"
CLEAR_NIGHT_EMOJI = "🌙"


def weather_emoji(condition: str, is_night: bool = False) -> str:
    """Pick a display emoji for a condition label."""
    label = condition.lower()
    for keywords, emoji in EMOJI_KEYWORDS:
        if any(keyword in label for keyword in keywords):
            return emoji
    return CLEAR_NIGHT_EMOJI if is_night else CLEAR_DAY_EMOJI


def split_message(content: str, limit: int = DISCORD_MESSAGE_LIMIT) -> List[str]:
    """
    Split text into chunks no longer than `limit`.

    Chunks break at line boundaries; a single line longer than the limit is
    cut into limit-sized pieces.

    Args:
        content: Message text
        limit: Maximum characters per chunk

    Returns:
        List of non-empty chunks (one chunk when the text already fits)
    """
    if limit <= 0:
        raise ValueError("limit must be positive")
    if len(content) <= limit:
        return [content]

    chunks: List[str] = []
    current = ""
    for line in content.split("\n"):
        pieces = [line[i : i + limit] for i in range(0, len(line), limit)] or [""]
        for piece in pieces:
            candidate = f"{current}\n{piece}" if current else piece
            if len(candidate) <= limit:
                current = candidate
                continue
            if current.strip():
                chunks.append(current)
            current = piece
    if current.strip():
        chunks.append(current)
    return chunks


def _weather_lines(result: WeatherResult, bold: bool = True) -> List[str]:
    emoji = weather_emoji(result.condition, result.is_night)
    label = "**Weather:**" if bold else "Weather:"
    lines = [f"{emoji} {label} {result.condition}"]
    lines.extend(f"⚠️ {impact}" for impact in result.impacts)
    return lines


class FormatForecastMessageUseCase:
    """Use case to build daily, advance and weekly message text."""

    def daily_update(self, region: RegionConfig, result: WeatherResult) -> str:
        """Per-region message for the current day."""
        lines = [
            f"📅 **Weather Update - {region.name}**",
            f"**Date:** {result.display_date}",
            f"**Season:** {result.season.display_name}",
        ]
        lines.extend(_weather_lines(result))
        return "\n".join(lines) + "\n"

    def advance_digest(self, forecasts: Sequence[RegionForecast]) -> str:
        """One message covering tomorrow for every region."""
        parts = [f"{ADVANCE_HEADER}\n\n"]
        for forecast in forecasts:
            if forecast.failed or not forecast.results:
                parts.append(self._error_block(forecast.region_name))
                continue
            result = forecast.results[0]
            lines = [
                f"🌍 **{forecast.region_name}**",
                f"**Date:** {result.display_date}",
                f"**Season:** {result.season.display_name}",
            ]
            lines.extend(_weather_lines(result))
            parts.append("\n".join(lines) + f"\n\n{DIVIDER}\n\n")
        parts.append(ADVANCE_FOOTER)
        return "".join(parts)

    def weekly_digest(self, forecasts: Sequence[RegionForecast]) -> str:
        """One message covering seven days for every region."""
        parts = [f"{WEEKLY_HEADER}\n\n"]
        for forecast in forecasts:
            if forecast.failed or not forecast.results:
                parts.append(self._error_block(forecast.region_name))
                continue
            parts.append(f"🌍 **{forecast.region_name}**\n\n")
            for index, result in enumerate(forecast.results):
                day_label = "Today" if index == 0 else result.day_of_week
                lines = [
                    f"**{day_label} - {result.date.isoformat()}**",
                    f"Season: {result.season.display_name}",
                ]
                lines.extend(_weather_lines(result, bold=False))
                parts.append("\n".join(lines) + "\n\n")
            parts.append(f"{DIVIDER}\n\n")
        parts.append(WEEKLY_FOOTER)
        content = "".join(parts)
        logger.debug(f"Weekly digest is {len(content)} characters")
        return content

    @staticmethod
    def _error_block(region_name: str) -> str:
        return f"🌍 **{region_name}**\n{REGION_ERROR_LINE}\n\n{DIVIDER}\n\n"
