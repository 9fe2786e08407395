"""CLI interface for the campaign weather notification jobs."""

import argparse
import logging
import sys
from datetime import date, timedelta

from ...domain.exceptions import ConfigurationError, RegionNotFoundError
from ...domain.use_cases.build_forecast import BuildForecastUseCase
from ...domain.use_cases.format_forecast_message import weather_emoji
from ..factory import build_notifier_service, build_region_repository

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

JOBS = {
    "daily": "send_daily_updates",
    "advance": "send_advance_forecasts",
    "weekly": "send_weekly_forecast",
}


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--source",
        choices=["json", "sheets"],
        default=None,
        help="Configuration source (default: CONFIG_SOURCE or autodetect)",
    )
    parser.add_argument(
        "--config", type=str, default=None, help="Path to a regions JSON file"
    )


def run_job(args: argparse.Namespace) -> int:
    """Run one notification job; returns the process exit code."""
    service = build_notifier_service(args.source, args.config, dry_run=args.dry_run)
    report = getattr(service, JOBS[args.command])()

    if report.skipped:
        print(f"ℹ️ {report.job} forecast skipped")
        return 0
    if report.all_delivered and not report.region_errors:
        print(f"✅ {report.job} forecast posted successfully to all {report.successful} webhook(s)!")
        return 0

    print(f"⚠️ {report}")
    for region_id, error in report.region_errors.items():
        print(f"  → {region_id}: {error}")
    return 1 if report.failed else 0


def show_region(args: argparse.Namespace) -> int:
    """Print the forecast for one region without sending anything."""
    repo = build_region_repository(args.source, args.config)
    region = repo.get_region(args.region)
    forecast_uc = BuildForecastUseCase()

    start = date.fromisoformat(args.date) if args.date else None
    if start is None:
        results = list(forecast_uc.weekly(region, days=args.days))
    else:
        results = [
            forecast_uc.for_date(region, start + timedelta(days=offset))
            for offset in range(args.days)
        ]

    print("\n" + "=" * 50)
    print(f" {region.name} ")
    print("=" * 50)
    for result in results:
        print(f" {result.display_date} ({result.season.display_name})")
        print(f"   {weather_emoji(result.condition, result.is_night)} {result.condition}")
        for impact in result.impacts:
            print(f"   ⚠️ {impact}")
    print("=" * 50)
    return 0


def main():
    parser = argparse.ArgumentParser(description="Campaign regional weather notifications")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for job, help_text in (
        ("daily", "Post today's weather to each region's webhooks"),
        ("advance", "Post tomorrow's forecast for all regions to the advance webhooks"),
        ("weekly", "Post the consolidated 7-day forecast to the weekly webhook"),
    ):
        job_parser = subparsers.add_parser(job, help=help_text)
        _add_source_arguments(job_parser)
        job_parser.add_argument(
            "--dry-run", action="store_true", help="Print messages instead of posting them"
        )

    show_parser = subparsers.add_parser("show", help="Print a region's forecast")
    show_parser.add_argument("region", type=str, help="e.g. 'Northern Eparchia'")
    show_parser.add_argument("--date", type=str, default=None, help="Start date (YYYY-MM-DD)")
    show_parser.add_argument("--days", type=int, default=7, help="Number of days")
    _add_source_arguments(show_parser)

    args = parser.parse_args()

    try:
        if args.command == "show":
            exit_code = show_region(args)
        else:
            exit_code = run_job(args)
    except RegionNotFoundError as e:
        logger.error(str(e))
        sys.exit(1)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}", exc_info=True)
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Invalid argument: {e}")
        sys.exit(2)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
