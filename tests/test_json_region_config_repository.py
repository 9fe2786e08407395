"""Tests for the JSON and cached region configuration repositories."""

import json
import logging
import pytest
from datetime import date, datetime, timezone
from campaign_weather.domain.entities.season import Season
from campaign_weather.domain.exceptions import ConfigurationError, RegionNotFoundError
from campaign_weather.domain.use_cases.generate_weather import GenerateWeatherUseCase
from campaign_weather.infrastructure.repositories import json_region_config_repository
from campaign_weather.infrastructure.repositories.cached_region_config_repository import (
    CachedRegionConfigRepository,
)
from campaign_weather.infrastructure.repositories.json_region_config_repository import (
    JsonRegionConfigRepository,
)
from campaign_weather.infrastructure.repositories.region_config_parsing import (
    normalize_webhook_urls,
)
from config.settings import BASE_DIR, parse_url_list

EXAMPLE_REGIONS = BASE_DIR / "data" / "regions.example.json"


def _write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def _region(conditions=("Clear",), **extra):
    raw = {
        "name": "Test Vale",
        "seasonalWeather": {
            season.value: {"conditions": list(conditions)} for season in Season
        },
    }
    raw.update(extra)
    return raw


def test_loads_example_file():
    """The shipped example file parses into both regions."""
    repo = JsonRegionConfigRepository([EXAMPLE_REGIONS])
    regions = repo.get_regions()

    assert [r.id for r in regions] == ["Northern Eparchia", "Southern Highlands"]
    northern, southern = regions
    assert northern.table_for(Season.WINTER).impacts_for("Freezing rain") == (
        "Slippery surfaces: DEX save or fall prone when moving fast",
    )
    assert southern.webhook_urls == ("https://discord.com/api/webhooks/EXAMPLE_2/test",)


def test_fallback_chain(tmp_path):
    """Missing and empty candidates are skipped in order."""
    second = _write(tmp_path / "second.json", {"regions": {"vale": _region()}})
    third = _write(tmp_path / "third.json", {"regions": {"other": _region()}})

    repo = JsonRegionConfigRepository([None, "", tmp_path / "missing.json", second, third])
    assert repo.resolve_path() == second
    assert [r.id for r in repo.get_regions()] == ["vale"]


def test_missing_file(tmp_path):
    repo = JsonRegionConfigRepository([tmp_path / "nope.json"])
    with pytest.raises(ConfigurationError, match="not found"):
        repo.get_regions()


def test_no_candidates():
    with pytest.raises(ConfigurationError):
        JsonRegionConfigRepository([None, ""])


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{ not json", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="Invalid JSON"):
        JsonRegionConfigRepository([path]).get_regions()


def test_bare_mapping_and_comma_separated_urls(tmp_path):
    """A file without the `regions` wrapper is accepted."""
    raw = _region(webhookUrls="https://a, https://b,,https://a")
    path = _write(tmp_path / "regions.json", {"vale": raw})

    region = JsonRegionConfigRepository([path]).get_region("vale")
    assert region.name == "Test Vale"
    assert region.webhook_urls == ("https://a", "https://b")


def test_normalize_webhook_urls_merges_both_fields():
    raw = {"webhookUrls": ["https://a", " "], "webhookUrl": "https://b"}
    assert normalize_webhook_urls(raw) == ("https://a", "https://b")
    assert normalize_webhook_urls({}) == ()


def test_dangling_impact_skips_only_that_region(tmp_path, caplog):
    """A misconfigured region is logged and left out; the others still load."""
    bad = _region()
    bad["seasonalWeather"]["spring"]["mechanicalImpacts"] = {"Hailstorm": ["Ouch"]}
    data = {"regions": {"Good": _region(), "Bad": bad}}
    path = _write(tmp_path / "regions.json", data)

    with caplog.at_level(logging.ERROR):
        regions = JsonRegionConfigRepository([path]).get_regions()

    assert [r.id for r in regions] == ["Good"]
    assert "Hailstorm" in caplog.text
    assert "'Bad'" in caplog.text


def test_unknown_season_skips_region(tmp_path):
    raw = _region()
    raw["seasonalWeather"]["monsoon"] = {"conditions": ["Wet"]}
    path = _write(tmp_path / "regions.json", {"regions": {"vale": raw, "dry": _region()}})
    assert [r.id for r in JsonRegionConfigRepository([path]).get_regions()] == ["dry"]


@pytest.mark.parametrize(
    "season_block",
    [
        {"conditions": ["A", 7]},
        {"conditions": 7},
        {"conditions": ["A"], "mechanicalImpacts": {"A": [3]}},
        {"conditions": ["A"], "mechanicalImpacts": ["A"]},
        "sunny",
    ],
)
def test_malformed_entries_skip_region(tmp_path, season_block):
    """Wrongly typed entries are configuration errors, never attribute errors."""
    raw = _region()
    raw["seasonalWeather"]["summer"] = season_block
    path = _write(tmp_path / "regions.json", {"regions": {"odd": raw, "fine": _region()}})
    assert [r.id for r in JsonRegionConfigRepository([path]).get_regions()] == ["fine"]


def test_non_utf8_file(tmp_path):
    path = tmp_path / "regions.json"
    path.write_bytes(b"\xff\xfe\x00{")
    with pytest.raises(ConfigurationError, match="Could not read"):
        JsonRegionConfigRepository([path]).get_regions()


def test_unreadable_file(tmp_path, monkeypatch):
    path = _write(tmp_path / "regions.json", {"regions": {}})

    def refuse(*args, **kwargs):
        raise PermissionError("permission denied")

    monkeypatch.setattr(json_region_config_repository, "open", refuse, raising=False)
    with pytest.raises(ConfigurationError, match="permission denied"):
        JsonRegionConfigRepository([path]).get_regions()


def test_missing_season_fails_only_at_generation(tmp_path):
    """A region missing a season loads, but generating in that season fails."""
    raw = _region()
    del raw["seasonalWeather"]["winter"]
    path = _write(tmp_path / "regions.json", {"regions": {"vale": raw}})

    region = JsonRegionConfigRepository([path]).get_region("vale")
    assert len(region.table_for(Season.WINTER)) == 0

    use_case = GenerateWeatherUseCase()
    noon = datetime(2025, 7, 1, 12, 0, tzinfo=timezone.utc)
    assert use_case.execute(region, date(2025, 10, 1), now=noon).condition == "Clear"
    with pytest.raises(ConfigurationError, match="winter"):
        use_case.execute(region, date(2025, 7, 1), now=noon)


def test_configured_regions_and_lookup(tmp_path):
    data = {"regions": {"quiet": _region(), "loud": _region(webhookUrl="https://hook")}}
    repo = JsonRegionConfigRepository([_write(tmp_path / "regions.json", data)])

    assert [r.id for r in repo.get_configured_regions()] == ["loud"]
    with pytest.raises(RegionNotFoundError):
        repo.get_region("Atlantis")


class CountingRepository(JsonRegionConfigRepository):
    """JSON repository that counts how often it is read."""

    def __init__(self, candidates):
        super().__init__(candidates)
        self.loads = 0

    def get_regions(self):
        self.loads += 1
        return super().get_regions()


def test_cached_repository_loads_once(tmp_path):
    """Cached regions are reused until reset."""
    path = _write(tmp_path / "regions.json", {"regions": {"vale": _region()}})
    source = CountingRepository([path])
    cached = CachedRegionConfigRepository(source)

    assert not cached.loaded
    cached.get_regions()
    cached.get_region("vale")
    cached.get_configured_regions()
    assert cached.loaded
    assert source.loads == 1

    _write(path, {"regions": {"vale": _region(), "new": _region()}})
    assert len(cached.get_regions()) == 1
    cached.reset()
    assert len(cached.get_regions()) == 2
    assert source.loads == 2


def test_cached_repository_returns_copies(tmp_path):
    path = _write(tmp_path / "regions.json", {"regions": {"vale": _region()}})
    cached = CachedRegionConfigRepository(JsonRegionConfigRepository([path]))
    cached.get_regions().clear()
    assert len(cached.get_regions()) == 1


def test_parse_url_list():
    assert parse_url_list("https://a, https://b ,,") == ["https://a", "https://b"]
    assert parse_url_list("") == []
    assert parse_url_list(None) == []
