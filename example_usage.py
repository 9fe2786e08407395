"""Example usage of the campaign weather system."""

import logging
from datetime import date

from campaign_weather.application.services.weather_notifier_service import WeatherNotifierService
from campaign_weather.domain.use_cases.build_forecast import BuildForecastUseCase
from campaign_weather.infrastructure.notifiers.console_notifier import ConsoleNotifier
from campaign_weather.infrastructure.repositories.json_region_config_repository import (
    JsonRegionConfigRepository,
)
from config.settings import BASE_DIR

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

EXAMPLE_REGIONS = BASE_DIR / "data" / "regions.example.json"


def main():
    """Example usage."""
    region_repo = JsonRegionConfigRepository([EXAMPLE_REGIONS])

    # Example 1: Look up a single date
    print("=" * 60)
    print("Example 1: Weather for one region and date")
    print("=" * 60)
    region = region_repo.get_region("Northern Eparchia")
    result = BuildForecastUseCase().for_date(region, date(2025, 9, 1))
    print(f"  Region:    {region.name}")
    print(f"  Date:      {result.display_date}")
    print(f"  Season:    {result.season.display_name}")
    print(f"  Condition: {result.condition}")
    for impact in result.impacts:
        print(f"  Impact:    {impact}")

    # Example 2: Dry-run every job
    print("\n" + "=" * 60)
    print("Example 2: Daily, advance and weekly jobs (dry run)")
    print("=" * 60)
    service = WeatherNotifierService(
        region_repo=region_repo,
        notifier=ConsoleNotifier(),
        advance_webhook_urls=["https://discord.com/api/webhooks/EXAMPLE_ADVANCE/test"],
        weekly_webhook_url="https://discord.com/api/webhooks/EXAMPLE_WEEKLY/test",
    )
    for report in (
        service.send_daily_updates(),
        service.send_advance_forecasts(),
        service.send_weekly_forecast(),
    ):
        logger.info(str(report))


if __name__ == "__main__":
    main()
