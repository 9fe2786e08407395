"""Google Sheets region configuration repository implementation."""

import json
import logging
import re
from typing import Any, Dict, List, Optional, Sequence, Tuple

import pandas as pd
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from ...domain.entities.region_config import RegionConfig
from ...domain.entities.season import Season
from ...domain.entities.seasonal_table import SeasonalTable
from ...domain.exceptions import ConfigurationError
from ...domain.repositories.region_config_repository import RegionConfigRepository

logger = logging.getLogger(__name__)

SPREADSHEET_ID_PATTERN = re.compile(r"/spreadsheets/d/([a-zA-Z0-9_-]+)")
READONLY_SCOPES = ["https://www.googleapis.com/auth/spreadsheets.readonly"]
COMMANDER_RANGE = "Commander Database!A:Z"
WEATHER_RANGE = "Weather Regions!A:Z"

SEASON_COLUMN_KEYWORDS = {
    Season.SPRING: ("spring",),
    Season.SUMMER: ("summer",),
    Season.AUTUMN: ("autumn", "fall"),
    Season.WINTER: ("winter",),
}

Rows = Sequence[Sequence[Any]]
SeasonalConditions = Dict[str, Dict[Season, List[str]]]


def extract_spreadsheet_id(sheet_link: str) -> str:
    """
    Extract the spreadsheet id from a Google Sheets URL.

    Handles links such as
    https://docs.google.com/spreadsheets/d/SPREADSHEET_ID/edit#gid=0
    """
    match = SPREADSHEET_ID_PATTERN.search(sheet_link or "")
    if not match:
        raise ConfigurationError(f"Invalid Google Sheets URL: {sheet_link}")
    return match.group(1)


def build_sheets_client(service_account_key: str, scopes: Sequence[str] = READONLY_SCOPES):
    """Authenticated Sheets v4 client from a service-account JSON string."""
    if not service_account_key:
        raise ConfigurationError("GOOGLE_SERVICE_ACCOUNT_KEY environment variable not set")

    try:
        info = json.loads(service_account_key)
        credentials = service_account.Credentials.from_service_account_info(
            info, scopes=list(scopes)
        )
    except (json.JSONDecodeError, ValueError) as e:
        raise ConfigurationError(f"Failed to parse GOOGLE_SERVICE_ACCOUNT_KEY: {e}") from e

    return build("sheets", "v4", credentials=credentials, cache_discovery=False)


def _to_frame(rows: Rows) -> pd.DataFrame:
    """Rectangular frame of stripped strings; short rows are padded with ''."""
    frame = pd.DataFrame([list(row) for row in rows])
    if frame.empty:
        return frame
    return frame.fillna("").astype(str).apply(lambda col: col.str.strip())


def _find_column(headers: List[str], *keywords: str) -> Optional[int]:
    for index, header in enumerate(headers):
        if all(keyword in header for keyword in keywords):
            return index
    return None


def _split_conditions(cell: str) -> List[str]:
    conditions = [c.strip() for c in cell.split(",") if c.strip()]
    return list(dict.fromkeys(conditions))


def parse_commander_database(rows: Rows) -> Dict[str, List[str]]:
    """
    Group webhook URLs by weather region.

    Args:
        rows: Raw values of the Commander Database sheet, header row first

    Returns:
        Map of region name to its distinct webhook URLs, in sheet order

    Raises:
        ConfigurationError: If the Webhook URL or Weather Region column is missing
    """
    if not rows or len(rows) < 2:
        logger.warning("Commander Database sheet is empty or has no data rows")
        return {}

    frame = _to_frame(rows)
    headers = [h.lower() for h in frame.iloc[0]]
    webhook_col = _find_column(headers, "webhook", "url")
    region_col = _find_column(headers, "weather", "region")

    if webhook_col is None:
        raise ConfigurationError('Commander Database sheet missing "Webhook URL" column')
    if region_col is None:
        raise ConfigurationError('Commander Database sheet missing "Weather Region" column')

    body = frame.iloc[1:, [region_col, webhook_col]].copy()
    body.columns = ["region", "webhook_url"]
    body = body[(body["region"] != "") & (body["webhook_url"] != "")].drop_duplicates()

    region_webhooks = {
        region: group["webhook_url"].tolist()
        for region, group in body.groupby("region", sort=False)
    }
    logger.info(f"Parsed Commander Database: {len(region_webhooks)} regions found")
    return region_webhooks


def _locate_tables(frame: pd.DataFrame) -> Tuple[int, int]:
    regional_start = -1
    impacts_start = -1

    for index, row in frame.iterrows():
        cells = [c.lower() for c in row]
        first = cells[0] if cells else ""
        filled = sum(1 for c in cells if c)

        if regional_start < 0 and first == "region" and filled >= 5:
            if any("spring" in c for c in cells) and any("summer" in c for c in cells):
                regional_start = index
        if impacts_start < 0 and first == "condition" and len(cells) >= 2:
            if "mechanical" in cells[1] or "impact" in cells[1]:
                impacts_start = index

    if regional_start < 0:
        raise ConfigurationError(
            "Weather Regions sheet missing regional weather table "
            '(looking for "Region | Spring Weather | Summer Weather | ..." header)'
        )
    if impacts_start < 0:
        raise ConfigurationError(
            "Weather Regions sheet missing mechanical impacts table "
            '(looking for "Condition | Mechanical Impact" header)'
        )
    return regional_start, impacts_start


def parse_regional_weather_table(frame: pd.DataFrame, start: int, end: int) -> SeasonalConditions:
    """Conditions per region and season from the table headed at `start`."""
    headers = [h.lower() for h in frame.iloc[start]]
    columns = {}
    for season, keywords in SEASON_COLUMN_KEYWORDS.items():
        index = next(
            (i for i, h in enumerate(headers) if any(k in h for k in keywords)), None
        )
        if index is None:
            raise ConfigurationError(
                "Weather Regions table missing one or more season columns "
                "(Spring, Summer, Autumn/Fall, Winter)"
            )
        columns[season] = index

    seasonal: SeasonalConditions = {}
    for row_index in range(start + 1, min(end, len(frame))):
        row = frame.iloc[row_index]
        region_name = row.iloc[0]
        if not region_name:
            break  # blank row ends the table
        seasonal[region_name] = {
            season: _split_conditions(row.iloc[col]) for season, col in columns.items()
        }

    logger.info(f"Parsed regional weather for {len(seasonal)} regions")
    return seasonal


def parse_mechanical_impacts_table(frame: pd.DataFrame, start: int, end: int) -> Dict[str, str]:
    """Condition to impact text from the table headed at `start`."""
    headers = [h.lower() for h in frame.iloc[start]]
    condition_col = next((i for i, h in enumerate(headers) if h == "condition"), None)
    impact_col = next(
        (i for i, h in enumerate(headers) if "mechanical" in h or "impact" in h), None
    )
    if condition_col is None or impact_col is None:
        raise ConfigurationError(
            "Mechanical impacts table missing Condition or Mechanical Impact column"
        )

    impacts: Dict[str, str] = {}
    for row_index in range(start + 1, min(end, len(frame))):
        row = frame.iloc[row_index]
        condition = row.iloc[condition_col]
        impact = row.iloc[impact_col]
        if condition and impact:
            impacts[condition] = impact

    logger.info(f"Parsed {len(impacts)} mechanical impacts")
    return impacts


def parse_weather_regions(rows: Rows) -> Tuple[SeasonalConditions, Dict[str, str]]:
    """
    Parse the Weather Regions sheet, which holds two tables.

    Returns:
        Tuple of (conditions per region and season, impact per condition)

    Raises:
        ConfigurationError: If either table or a required column is missing
    """
    if not rows or len(rows) < 2:
        raise ConfigurationError("Weather Regions sheet is empty or has no data")

    frame = _to_frame(rows)
    regional_start, impacts_start = _locate_tables(frame)
    regional_end = impacts_start if impacts_start > regional_start else len(frame)
    impacts_end = regional_start if regional_start > impacts_start else len(frame)

    seasonal = parse_regional_weather_table(frame, regional_start, regional_end)
    impacts = parse_mechanical_impacts_table(frame, impacts_start, impacts_end)
    return seasonal, impacts


def _build_tables(
    region_name: str,
    conditions_by_season: Dict[Season, List[str]],
    mechanical_impacts: Dict[str, str],
) -> Dict[Season, SeasonalTable]:
    tables = {}
    for season, conditions in conditions_by_season.items():
        impacts = {
            condition: [mechanical_impacts[condition]]
            for condition in conditions
            if condition in mechanical_impacts
        }
        tables[season] = SeasonalTable.build(
            conditions, impacts, context=f"region '{region_name}' {season.value}"
        )
    return tables


def merge_configuration(
    region_webhooks: Dict[str, List[str]],
    seasonal: SeasonalConditions,
    mechanical_impacts: Dict[str, str],
) -> List[RegionConfig]:
    """
    Combine webhooks, seasonal conditions and impacts into RegionConfig entities.

    Regions need both webhooks and weather data; the others are logged and
    skipped. The region name doubles as its identifier.
    """
    regions = []
    for region_name, webhook_urls in region_webhooks.items():
        if region_name not in seasonal:
            logger.warning(
                f'Region "{region_name}" has webhooks but no weather data '
                f"in Weather Regions sheet - skipping"
            )
            continue

        try:
            tables = _build_tables(region_name, seasonal[region_name], mechanical_impacts)
        except ConfigurationError as e:
            logger.error(f'Skipping misconfigured region "{region_name}": {e}')
            continue

        regions.append(
            RegionConfig(
                id=region_name,
                name=region_name,
                seasonal_weather=tables,
                webhook_urls=tuple(webhook_urls),
            )
        )

    for region_name in seasonal:
        if region_name not in region_webhooks:
            logger.warning(
                f'Region "{region_name}" has weather data but no webhooks '
                f"in Commander Database - skipping"
            )

    logger.info(f"Final configuration: {len(regions)} regions")
    return regions


class GoogleSheetsRegionConfigRepository(RegionConfigRepository):
    """Repository for region configuration kept in a Google Sheet."""

    def __init__(
        self,
        sheet_link: str,
        service_account_key: str = "",
        client: Any = None,
        commander_range: str = COMMANDER_RANGE,
        weather_range: str = WEATHER_RANGE,
        scopes: Sequence[str] = READONLY_SCOPES,
    ):
        """
        Initialize repository.

        Args:
            sheet_link: Full Google Sheets URL
            service_account_key: Service-account credentials as a JSON string
            client: Prebuilt Sheets client; built from the key when omitted
            commander_range: A1 range of the webhook sheet
            weather_range: A1 range of the weather sheet
            scopes: OAuth scopes requested for the service account
        """
        if not sheet_link:
            raise ConfigurationError("GOOGLE_SHEET_LINK environment variable not set")
        self.spreadsheet_id = extract_spreadsheet_id(sheet_link)
        self.service_account_key = service_account_key
        self.commander_range = commander_range
        self.weather_range = weather_range
        self.scopes = list(scopes)
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = build_sheets_client(self.service_account_key, self.scopes)
        return self._client

    def fetch_range(self, cell_range: str) -> List[List[str]]:
        """Raw cell values of one range."""
        try:
            response = (
                self.client.spreadsheets()
                .values()
                .get(spreadsheetId=self.spreadsheet_id, range=cell_range)
                .execute()
            )
        except HttpError as e:
            raise ConfigurationError(
                f'Failed to fetch sheet data for range "{cell_range}": {e}'
            ) from e
        return response.get("values", [])

    def get_regions(self) -> List[RegionConfig]:
        """Fetch both sheets and merge them into region configurations."""
        logger.info("Fetching configuration from Google Sheets...")

        commander_rows = self.fetch_range(self.commander_range)
        weather_rows = self.fetch_range(self.weather_range)

        region_webhooks = parse_commander_database(commander_rows)
        seasonal, mechanical_impacts = parse_weather_regions(weather_rows)
        return merge_configuration(region_webhooks, seasonal, mechanical_impacts)
