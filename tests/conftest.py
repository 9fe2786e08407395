"""Shared fixtures."""

import pytest

from campaign_weather.domain.entities.region_config import RegionConfig
from campaign_weather.domain.entities.season import Season
from campaign_weather.domain.entities.seasonal_table import SeasonalTable


@pytest.fixture
def northern_eparchia():
    """Region with the full four-season table used across tests."""
    tables = {
        Season.SPRING: SeasonalTable.build(
            [
                "Mild spring day",
                "Spring showers",
                "Warming breezes",
                "Gentle rains",
                "Overcast and cool",
            ],
            {"Spring showers": ["Light rain: -1 to ranged attacks beyond 30ft"]},
        ),
        Season.SUMMER: SeasonalTable.build(
            [
                "Hot and sunny",
                "Warm summer day",
                "Thunderstorms",
                "Humid and hazy",
                "Clear skies",
            ],
            {"Thunderstorms": ["Heavy rain and lightning: disadvantage on Perception checks"]},
        ),
        Season.AUTUMN: SeasonalTable.build(
            [
                "Crisp autumn day",
                "Fall rains",
                "Overcast skies",
                "Chilly winds",
                "Foggy morning",
            ],
            {"Foggy morning": ["Heavy obscurement beyond 60ft until midday"]},
        ),
        Season.WINTER: SeasonalTable.build(
            ["Cold and clear", "Light snow", "Heavy snowfall", "Freezing rain", "Bitter cold"],
            {
                "Heavy snowfall": ["Difficult terrain outdoors, -2 to Perception"],
                "Freezing rain": ["Slippery surfaces: DEX save or fall prone when moving fast"],
            },
        ),
    }
    return RegionConfig(
        id="Northern Eparchia",
        name="Northern Eparchia",
        seasonal_weather=tables,
        webhook_urls=("https://discord.com/api/webhooks/EXAMPLE_1/test",),
    )


@pytest.fixture
def southern_highlands():
    """Region with three conditions per season and an empty autumn."""
    tables = {
        Season.SPRING: SeasonalTable.build(["Highland spring", "Mountain mist", "Cool mornings"]),
        Season.SUMMER: SeasonalTable.build(
            ["Alpine summer", "Clear mountain air", "Afternoon storms"]
        ),
        Season.AUTUMN: SeasonalTable(conditions=()),
        Season.WINTER: SeasonalTable.build(
            ["Deep snow", "Mountain blizzard", "Frozen peaks"],
            {"Mountain blizzard": ["Blinded beyond 15ft, difficult terrain, extreme cold"]},
        ),
    }
    return RegionConfig(
        id="Southern Highlands",
        name="Southern Highlands",
        seasonal_weather=tables,
        webhook_urls=("https://discord.com/api/webhooks/EXAMPLE_2/test",),
    )
