"""Use cases - core business operations."""

from .generate_weather import GenerateWeatherUseCase, generate_weather
from .build_forecast import BuildForecastUseCase, ForecastWindow
from .format_forecast_message import FormatForecastMessageUseCase, split_message, weather_emoji

__all__ = [
    "GenerateWeatherUseCase",
    "generate_weather",
    "BuildForecastUseCase",
    "ForecastWindow",
    "FormatForecastMessageUseCase",
    "split_message",
    "weather_emoji",
]
