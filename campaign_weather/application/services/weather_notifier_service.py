"""Service orchestrating the scheduled weather notification jobs."""

import logging
from datetime import datetime
from typing import List, Optional, Sequence

from ...domain.entities.delivery_result import NotificationReport
from ...domain.entities.region_config import RegionConfig
from ...domain.entities.region_forecast import RegionForecast
from ...domain.exceptions import ConfigurationError
from ...domain.repositories.notifier import Notifier
from ...domain.repositories.region_config_repository import RegionConfigRepository
from ...domain.use_cases.build_forecast import BuildForecastUseCase
from ...domain.use_cases.format_forecast_message import (
    DISCORD_MESSAGE_LIMIT,
    FormatForecastMessageUseCase,
    split_message,
)
from ...domain.use_cases.time_of_day import reference_now

logger = logging.getLogger(__name__)


class WeatherNotifierService:
    """Runs the daily, advance and weekly jobs across all configured regions.

    A region whose tables are misconfigured is reported and skipped; the
    remaining regions are still generated and delivered.
    """

    def __init__(
        self,
        region_repo: RegionConfigRepository,
        notifier: Notifier,
        advance_webhook_urls: Sequence[str] = (),
        weekly_webhook_url: str = "",
        message_limit: int = DISCORD_MESSAGE_LIMIT,
    ):
        self.region_repo = region_repo
        self.notifier = notifier
        self.advance_webhook_urls = list(advance_webhook_urls)
        self.weekly_webhook_url = weekly_webhook_url
        self.message_limit = message_limit

        self.forecast_uc = BuildForecastUseCase()
        self.format_uc = FormatForecastMessageUseCase()

    def _configured_regions(self, report: NotificationReport) -> List[RegionConfig]:
        regions = self.region_repo.get_configured_regions()
        if not regions:
            logger.warning("No regions configured with webhook URLs")
            report.skipped = True
        return regions

    def _deliver(self, report: NotificationReport, urls: Sequence[str], content: str) -> None:
        chunks = split_message(content, self.message_limit)
        if len(chunks) > 1:
            logger.info(f"Message split into {len(chunks)} parts")
        for index, url in enumerate(urls, start=1):
            for chunk in chunks:
                report.deliveries.append(self.notifier.send(url, chunk, webhook_index=index))

    def _log_summary(self, report: NotificationReport) -> None:
        if report.skipped:
            return
        if report.all_delivered and not report.region_errors:
            logger.info(f"{report.job}: posted successfully to all {report.successful} webhook(s)")
        else:
            logger.warning(str(report))

    def send_daily_updates(self, now: Optional[datetime] = None) -> NotificationReport:
        """Post today's weather to every configured region's own webhooks."""
        now = now or reference_now()
        report = NotificationReport(job="daily")

        for region in self._configured_regions(report):
            try:
                result = self.forecast_uc.current_day(region, now=now)
            except ConfigurationError as e:
                logger.error(f"Failed to generate weather for region {region.id}: {e}")
                report.region_errors[region.id] = str(e)
                continue

            content = self.format_uc.daily_update(region, result)
            logger.info(f"Sending weather update for region: {region.name}")
            self._deliver(report, region.webhook_urls, content)

        self._log_summary(report)
        return report

    def send_advance_forecasts(self, now: Optional[datetime] = None) -> NotificationReport:
        """Post tomorrow's forecast for all regions to every advance webhook."""
        now = now or reference_now()
        report = NotificationReport(job="advance")

        if not self.advance_webhook_urls:
            logger.info("No advance forecast webhook URLs configured - skipping")
            report.skipped = True
            return report

        regions = self._configured_regions(report)
        if not regions:
            return report

        logger.info(
            f"Building advance forecasts for {len(regions)} regions "
            f"to {len(self.advance_webhook_urls)} webhook(s)"
        )
        forecasts = []
        for region in regions:
            try:
                result = self.forecast_uc.advance(region, now=now)
                forecasts.append(RegionForecast(region.name, (result,)))
            except ConfigurationError as e:
                logger.error(f"Failed to generate advance forecast for region {region.id}: {e}")
                report.region_errors[region.id] = str(e)
                forecasts.append(RegionForecast(region.name, error=str(e)))

        report.content = self.format_uc.advance_digest(forecasts)
        self._deliver(report, self.advance_webhook_urls, report.content)
        self._log_summary(report)
        return report

    def send_weekly_forecast(self, now: Optional[datetime] = None) -> NotificationReport:
        """Post the consolidated seven-day forecast to the weekly webhook."""
        now = now or reference_now()
        report = NotificationReport(job="weekly")

        if not self.weekly_webhook_url:
            logger.info("No weekly forecast webhook URL configured - skipping")
            report.skipped = True
            return report

        regions = self._configured_regions(report)
        if not regions:
            return report

        logger.info(f"Building weekly forecast for {len(regions)} regions")
        forecasts = []
        for region in regions:
            try:
                results = tuple(self.forecast_uc.weekly(region, now=now))
                forecasts.append(RegionForecast(region.name, results))
            except ConfigurationError as e:
                logger.error(f"Failed to generate forecast for region {region.id}: {e}")
                report.region_errors[region.id] = str(e)
                forecasts.append(RegionForecast(region.name, error=str(e)))

        report.content = self.format_uc.weekly_digest(forecasts)
        self._deliver(report, [self.weekly_webhook_url], report.content)
        self._log_summary(report)
        return report
