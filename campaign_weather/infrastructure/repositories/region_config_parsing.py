"""Normalization of raw region dictionaries into RegionConfig entities."""

import logging
from typing import Any, Dict, List, Mapping, Tuple

from ...domain.entities.region_config import RegionConfig
from ...domain.entities.season import Season
from ...domain.entities.seasonal_table import SeasonalTable
from ...domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def normalize_webhook_urls(raw_region: Mapping[str, Any]) -> Tuple[str, ...]:
    """
    Collect webhook URLs from either the list or the legacy singular field.

    Accepts `webhookUrls` as a list or comma-separated string and
    `webhookUrl` as a single string. Blank and duplicate URLs are dropped,
    order is preserved.
    """
    urls: List[str] = []
    for key in ("webhookUrls", "webhookUrl"):
        value = raw_region.get(key)
        if not value:
            continue
        if isinstance(value, str):
            value = value.split(",")
        for url in value:
            if isinstance(url, str) and url.strip() and url.strip() not in urls:
                urls.append(url.strip())
    return tuple(urls)


def parse_seasonal_weather(
    region_id: str, raw_seasons: Mapping[str, Any]
) -> Dict[Season, SeasonalTable]:
    """Build one SeasonalTable per season from the raw `seasonalWeather` block."""
    if raw_seasons and not isinstance(raw_seasons, Mapping):
        raise ConfigurationError(f"seasonalWeather of region '{region_id}' must be an object")

    tables: Dict[Season, SeasonalTable] = {}
    for label, raw_table in (raw_seasons or {}).items():
        try:
            season = Season.parse(label)
        except ValueError:
            raise ConfigurationError(
                f"Unknown season '{label}' for region '{region_id}'"
            ) from None

        raw_table = raw_table or {}
        if not isinstance(raw_table, Mapping):
            raise ConfigurationError(
                f"Season '{label}' of region '{region_id}' must be an object"
            )
        conditions = raw_table.get("conditions") or []
        if isinstance(conditions, str):
            conditions = conditions.split(",")
        if not isinstance(conditions, (list, tuple)):
            raise ConfigurationError(
                f"Conditions for region '{region_id}' {season.value} must be a list"
            )
        tables[season] = SeasonalTable.build(
            conditions,
            raw_table.get("mechanicalImpacts"),
            context=f"region '{region_id}' {season.value}",
        )

    for season in Season:
        if season not in tables:
            logger.warning(f"Region '{region_id}' has no {season.value} table")
            tables[season] = SeasonalTable(conditions=())
    return tables


def parse_region(region_id: str, raw_region: Mapping[str, Any]) -> RegionConfig:
    """Convert one raw region dictionary into a RegionConfig."""
    if not isinstance(raw_region, Mapping):
        raise ConfigurationError(f"Region '{region_id}' must be an object")

    return RegionConfig(
        id=region_id,
        name=str(raw_region.get("name") or region_id),
        seasonal_weather=parse_seasonal_weather(
            region_id, raw_region.get("seasonalWeather", {})
        ),
        webhook_urls=normalize_webhook_urls(raw_region),
    )


def parse_regions(data: Mapping[str, Any]) -> List[RegionConfig]:
    """
    Parse `{"regions": {...}}` or a bare mapping of region id to region.

    A region that fails validation is logged and left out; the others are
    still returned.
    """
    raw_regions = data.get("regions", data) if isinstance(data, Mapping) else None
    if not isinstance(raw_regions, Mapping):
        raise ConfigurationError("Region configuration must map region ids to regions")
    regions = []
    for region_id, raw in raw_regions.items():
        try:
            regions.append(parse_region(region_id, raw))
        except ConfigurationError as e:
            logger.error(f"Skipping misconfigured region '{region_id}': {e}")
    return regions
