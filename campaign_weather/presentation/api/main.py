"""FastAPI main application."""

import logging
from datetime import date as date_type
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel, Field

from config.settings import API_SETTINGS

from ...domain.entities.region_config import RegionConfig
from ...domain.entities.weather_result import WeatherResult
from ...domain.exceptions import ConfigurationError, RegionNotFoundError
from ...domain.repositories.region_config_repository import RegionConfigRepository
from ...domain.use_cases.build_forecast import BuildForecastUseCase
from ...domain.use_cases.format_forecast_message import weather_emoji
from ..factory import build_region_repository

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=API_SETTINGS["title"],
    description=API_SETTINGS["description"],
    version=API_SETTINGS["version"],
)

forecast_uc = BuildForecastUseCase()
_region_repo: Optional[RegionConfigRepository] = None


def get_region_repository() -> RegionConfigRepository:
    """Region repository shared across requests, built on first use."""
    global _region_repo
    if _region_repo is None:
        _region_repo = build_region_repository()
    return _region_repo


# Response models
class WeatherResponse(BaseModel):
    """Weather for one region and date."""

    region_id: str
    date: date_type
    day_of_week: str
    season: str
    condition: str
    emoji: str
    impacts: List[str] = Field(default_factory=list)
    is_night: bool


class RegionSummary(BaseModel):
    """Region listing entry."""

    id: str
    name: str
    webhook_count: int


class WeeklyResponse(BaseModel):
    """Seven-day forecast for one region."""

    region_id: str
    name: str
    days: List[WeatherResponse]


def _to_response(result: WeatherResult) -> WeatherResponse:
    return WeatherResponse(
        region_id=result.region_id,
        date=result.date,
        day_of_week=result.day_of_week,
        season=result.season.value,
        condition=result.condition,
        emoji=weather_emoji(result.condition, result.is_night),
        impacts=list(result.impacts),
        is_night=result.is_night,
    )


def _load_region(repo: RegionConfigRepository, region_id: str) -> RegionConfig:
    try:
        return repo.get_region(region_id)
    except RegionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}", exc_info=True)
        raise HTTPException(status_code=422, detail=str(e))


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Campaign Weather API",
        "version": API_SETTINGS["version"],
        "endpoints": {
            "regions": "/regions",
            "forecast": "/regions/{region_id}/forecast",
            "advance": "/regions/{region_id}/advance",
            "weekly": "/regions/{region_id}/weekly",
            "health": "/health",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/regions", response_model=List[RegionSummary])
def list_regions(repo: RegionConfigRepository = Depends(get_region_repository)):
    """All regions in the configuration."""
    try:
        regions = repo.get_regions()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}", exc_info=True)
        raise HTTPException(status_code=422, detail=str(e))
    return [
        RegionSummary(id=r.id, name=r.name, webhook_count=len(r.webhook_urls))
        for r in regions
    ]


@app.get("/regions/{region_id}/forecast", response_model=WeatherResponse)
def forecast(
    region_id: str,
    date: Optional[date_type] = None,
    repo: RegionConfigRepository = Depends(get_region_repository),
):
    """
    Weather for a region on a date.

    Args:
        region_id: Region identifier
        date: Forecast date (defaults to today in the reference timezone)
    """
    region = _load_region(repo, region_id)
    try:
        if date is None:
            result = forecast_uc.current_day(region)
        else:
            result = forecast_uc.for_date(region, date)
    except ConfigurationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _to_response(result)


@app.get("/regions/{region_id}/advance", response_model=WeatherResponse)
def advance(region_id: str, repo: RegionConfigRepository = Depends(get_region_repository)):
    """Tomorrow's weather for a region."""
    region = _load_region(repo, region_id)
    try:
        result = forecast_uc.advance(region)
    except ConfigurationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _to_response(result)


@app.get("/regions/{region_id}/weekly", response_model=WeeklyResponse)
def weekly(region_id: str, repo: RegionConfigRepository = Depends(get_region_repository)):
    """Seven days of weather for a region, starting today."""
    region = _load_region(repo, region_id)
    try:
        days = [_to_response(result) for result in forecast_uc.weekly(region)]
    except ConfigurationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return WeeklyResponse(region_id=region.id, name=region.name, days=days)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
