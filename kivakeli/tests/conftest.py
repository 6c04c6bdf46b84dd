"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from kivakeli.config.credentials import API_KEY_ENV
from kivakeli.ingest.geolocation import GeoLocator
from kivakeli.ingest.http_fetcher import HttpFetcher

TEST_WEATHER_URL = "https://test-owm.example.com/data/2.5/weather"
TEST_GEO_URL = "https://test-ipapi.example.com/json/?fields=lat,lon"


@pytest.fixture(autouse=True)
def no_env_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's real key out of the tests."""
    monkeypatch.delenv(API_KEY_ENV, raising=False)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def turku_weather(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "owm_weather_turku.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def turku_location(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "ip_api_turku.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def fetcher() -> HttpFetcher:
    return HttpFetcher(timeout=5.0)


@pytest.fixture
def locator(fetcher: HttpFetcher) -> GeoLocator:
    return GeoLocator(fetcher, url=TEST_GEO_URL)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a config pointing at test endpoints and a temp key file."""
    key_file = tmp_path / "api_key.txt"
    key_file.write_text("KEY123\n")
    data = {
        "service": {
            "weather_url": TEST_WEATHER_URL,
            "geolocation_url": TEST_GEO_URL,
        },
        "key_file": str(key_file),
    }
    path = tmp_path / "kivakeli.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
