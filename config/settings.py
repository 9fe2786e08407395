"""Application settings and configuration."""

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

# Base directory
BASE_DIR = Path(__file__).parent.parent

# Local region configuration, first existing file wins
REGIONS_CONFIG_PATH = os.getenv("REGIONS_CONFIG_PATH", "")
REGIONS_FILE_CANDIDATES = [
    BASE_DIR / "config" / "regions.json",
    BASE_DIR / "data" / "regions.json",
    Path.cwd() / "regions.json",
]

# Google Sheets source
GOOGLE_SHEET_LINK = os.getenv("GOOGLE_SHEET_LINK", "")
GOOGLE_SERVICE_ACCOUNT_KEY = os.getenv("GOOGLE_SERVICE_ACCOUNT_KEY", "")
SHEET_SETTINGS = {
    "scopes": ["https://www.googleapis.com/auth/spreadsheets.readonly"],
    "commander_range": "Commander Database!A:Z",
    "weather_range": "Weather Regions!A:Z",
}

# "sheets" or "json"; defaults to sheets when a sheet link is configured
CONFIG_SOURCE = os.getenv("CONFIG_SOURCE", "sheets" if GOOGLE_SHEET_LINK else "json").lower()

# Webhooks for the consolidated jobs
WEEKLY_FORECAST_WEBHOOK_URL = os.getenv("WEEKLY_FORECAST_WEBHOOK_URL", "").strip()
ADVANCE_WEBHOOK_URLS_RAW = os.getenv("ADVANCE_WEBHOOK_URLS", "")

# Delivery settings
DELIVERY_SETTINGS = {
    "request_timeout": float(os.getenv("REQUEST_TIMEOUT", "10")),
    "max_retries": int(os.getenv("MAX_RETRIES", "3")),
    "retry_sleep_sec": float(os.getenv("RETRY_SLEEP_SEC", "1.0")),
    "message_limit": 2000,
}

# API settings
API_SETTINGS = {
    "title": "Campaign Weather API",
    "description": "Deterministic campaign weather forecasts per region",
    "version": "1.0.0",
}


def parse_url_list(raw: Optional[str]) -> List[str]:
    """Split a comma-separated URL list, dropping blanks."""
    return [url.strip() for url in (raw or "").split(",") if url.strip()]


ADVANCE_WEBHOOK_URLS = parse_url_list(ADVANCE_WEBHOOK_URLS_RAW)
