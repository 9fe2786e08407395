"""Application services."""

from .weather_notifier_service import WeatherNotifierService

__all__ = ["WeatherNotifierService"]
