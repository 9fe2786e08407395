"""Construction of repositories and services from settings."""

import logging
from typing import Optional

from config.settings import (
    ADVANCE_WEBHOOK_URLS,
    CONFIG_SOURCE,
    DELIVERY_SETTINGS,
    GOOGLE_SERVICE_ACCOUNT_KEY,
    GOOGLE_SHEET_LINK,
    REGIONS_CONFIG_PATH,
    REGIONS_FILE_CANDIDATES,
    SHEET_SETTINGS,
    WEEKLY_FORECAST_WEBHOOK_URL,
)

from ..application.services.weather_notifier_service import WeatherNotifierService
from ..domain.exceptions import ConfigurationError
from ..domain.repositories.notifier import Notifier
from ..infrastructure.notifiers.console_notifier import ConsoleNotifier
from ..infrastructure.notifiers.discord_webhook_notifier import DiscordWebhookNotifier
from ..infrastructure.repositories.cached_region_config_repository import (
    CachedRegionConfigRepository,
)
from ..infrastructure.repositories.google_sheets_region_config_repository import (
    GoogleSheetsRegionConfigRepository,
)
from ..infrastructure.repositories.json_region_config_repository import (
    JsonRegionConfigRepository,
)

logger = logging.getLogger(__name__)

DRY_RUN_WEBHOOK_URL = "dry-run://webhook"


def build_region_repository(
    source: Optional[str] = None, config_path: Optional[str] = None
) -> CachedRegionConfigRepository:
    """Cached region repository for the requested source ("json" or "sheets")."""
    source = (source or CONFIG_SOURCE).lower()
    if source == "sheets":
        inner = GoogleSheetsRegionConfigRepository(
            GOOGLE_SHEET_LINK,
            GOOGLE_SERVICE_ACCOUNT_KEY,
            commander_range=SHEET_SETTINGS["commander_range"],
            weather_range=SHEET_SETTINGS["weather_range"],
            scopes=SHEET_SETTINGS["scopes"],
        )
    elif source == "json":
        inner = JsonRegionConfigRepository(
            [config_path, REGIONS_CONFIG_PATH, *REGIONS_FILE_CANDIDATES]
        )
    else:
        raise ConfigurationError(f"Unknown configuration source: {source}")

    logger.info(f"Using {source} region configuration")
    return CachedRegionConfigRepository(inner)


def build_notifier(dry_run: bool = False) -> Notifier:
    if dry_run:
        return ConsoleNotifier()
    return DiscordWebhookNotifier(
        timeout=DELIVERY_SETTINGS["request_timeout"],
        max_retries=DELIVERY_SETTINGS["max_retries"],
        retry_sleep_sec=DELIVERY_SETTINGS["retry_sleep_sec"],
    )


def build_notifier_service(
    source: Optional[str] = None,
    config_path: Optional[str] = None,
    dry_run: bool = False,
) -> WeatherNotifierService:
    """Notifier service wired from settings; dry runs print instead of posting."""
    advance_urls = ADVANCE_WEBHOOK_URLS
    weekly_url = WEEKLY_FORECAST_WEBHOOK_URL
    if dry_run:
        advance_urls = advance_urls or [DRY_RUN_WEBHOOK_URL]
        weekly_url = weekly_url or DRY_RUN_WEBHOOK_URL

    return WeatherNotifierService(
        region_repo=build_region_repository(source, config_path),
        notifier=build_notifier(dry_run),
        advance_webhook_urls=advance_urls,
        weekly_webhook_url=weekly_url,
        message_limit=DELIVERY_SETTINGS["message_limit"],
    )
