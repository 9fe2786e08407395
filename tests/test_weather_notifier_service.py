"""Tests for WeatherNotifierService."""

import pytest
from datetime import datetime, timezone
from campaign_weather.application.services.weather_notifier_service import WeatherNotifierService
from campaign_weather.domain.entities.delivery_result import DeliveryResult
from campaign_weather.domain.entities.region_config import RegionConfig
from campaign_weather.domain.repositories.notifier import Notifier
from campaign_weather.domain.repositories.region_config_repository import RegionConfigRepository
from campaign_weather.domain.use_cases.format_forecast_message import (
    ADVANCE_FOOTER,
    REGION_ERROR_LINE,
    WEEKLY_FOOTER,
)
from campaign_weather.infrastructure.notifiers.console_notifier import ConsoleNotifier

SPRING_NOON = datetime(2025, 9, 1, 12, 0, tzinfo=timezone.utc)
AUTUMN_NOON = datetime(2025, 4, 10, 12, 0, tzinfo=timezone.utc)
ADVANCE_URLS = ["https://hook/advance-1", "https://hook/advance-2"]
WEEKLY_URL = "https://hook/weekly"


class InMemoryRegionRepository(RegionConfigRepository):
    def __init__(self, regions):
        self.regions = list(regions)

    def get_regions(self):
        return list(self.regions)


class FailingNotifier(Notifier):
    def send(self, webhook_url, content, webhook_index=1):
        return DeliveryResult(webhook_index, webhook_url, success=False, status=500, error="down")


@pytest.fixture
def regions(northern_eparchia, southern_highlands):
    return InMemoryRegionRepository([northern_eparchia, southern_highlands])


def _service(repo, notifier=None, **kwargs):
    kwargs.setdefault("advance_webhook_urls", ADVANCE_URLS)
    kwargs.setdefault("weekly_webhook_url", WEEKLY_URL)
    return WeatherNotifierService(repo, notifier or ConsoleNotifier(echo=False), **kwargs)


def test_daily_updates_go_to_each_region(regions):
    notifier = ConsoleNotifier(echo=False)
    report = _service(regions, notifier).send_daily_updates(now=SPRING_NOON)

    assert report.all_delivered
    assert report.region_errors == {}
    assert [url for url, _ in notifier.sent] == [
        "https://discord.com/api/webhooks/EXAMPLE_1/test",
        "https://discord.com/api/webhooks/EXAMPLE_2/test",
    ]
    assert "Spring showers" in notifier.sent[0][1]
    assert "Mountain mist" in notifier.sent[1][1]


def test_daily_updates_isolate_failing_region(regions):
    """A region with an empty season is reported; the other is still sent."""
    notifier = ConsoleNotifier(echo=False)
    report = _service(regions, notifier).send_daily_updates(now=AUTUMN_NOON)

    assert list(report.region_errors) == ["Southern Highlands"]
    assert "autumn" in report.region_errors["Southern Highlands"]
    assert len(notifier.sent) == 1
    assert "Northern Eparchia" in notifier.sent[0][1]


def test_advance_forecast_covers_all_regions(regions):
    notifier = ConsoleNotifier(echo=False)
    report = _service(regions, notifier).send_advance_forecasts(now=AUTUMN_NOON)

    assert list(report.region_errors) == ["Southern Highlands"]
    assert REGION_ERROR_LINE in report.content
    assert "🌍 **Northern Eparchia**" in report.content
    assert report.content.endswith(ADVANCE_FOOTER)

    assert [url for url, _ in notifier.sent] == ADVANCE_URLS
    assert [d.webhook_index for d in report.deliveries] == [1, 2]
    assert all(content == report.content for _, content in notifier.sent)


def test_advance_forecast_skipped_without_webhooks(regions):
    notifier = ConsoleNotifier(echo=False)
    report = _service(regions, notifier, advance_webhook_urls=[]).send_advance_forecasts()

    assert report.skipped
    assert notifier.sent == []
    assert str(report) == "advance: skipped"


def test_weekly_forecast(regions):
    """One consolidated message with seven days per working region."""
    notifier = ConsoleNotifier(echo=False)
    report = _service(regions, notifier).send_weekly_forecast(now=SPRING_NOON)

    assert report.all_delivered
    assert len(notifier.sent) == 1
    url, content = notifier.sent[0]
    assert url == WEEKLY_URL
    assert content == report.content
    assert content.count("**Today - 2025-09-01**") == 2
    assert content.endswith(WEEKLY_FOOTER)


def test_weekly_forecast_is_split_for_long_content(regions):
    notifier = ConsoleNotifier(echo=False)
    service = _service(regions, notifier, message_limit=300)
    report = service.send_weekly_forecast(now=SPRING_NOON)

    assert len(notifier.sent) > 1
    assert all(len(content) <= 300 for _, content in notifier.sent)
    assert all(url == WEEKLY_URL for url, _ in notifier.sent)
    assert "\n".join(content for _, content in notifier.sent).count("Season: Spring") == 14
    assert report.successful == len(notifier.sent)


def test_weekly_forecast_skipped_without_webhook(regions):
    report = _service(regions, weekly_webhook_url="").send_weekly_forecast()
    assert report.skipped


def test_no_configured_regions_skips_jobs(northern_eparchia):
    bare = RegionConfig(
        id=northern_eparchia.id,
        name=northern_eparchia.name,
        seasonal_weather=northern_eparchia.seasonal_weather,
    )
    service = _service(InMemoryRegionRepository([bare]))

    assert service.send_daily_updates(now=SPRING_NOON).skipped
    assert service.send_advance_forecasts(now=SPRING_NOON).skipped
    assert service.send_weekly_forecast(now=SPRING_NOON).skipped


def test_failed_deliveries_are_reported(regions):
    report = _service(regions, FailingNotifier()).send_advance_forecasts(now=SPRING_NOON)

    assert report.failed == 2
    assert not report.all_delivered
    assert "0 successful, 2 failed" in str(report)
