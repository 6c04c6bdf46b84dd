"""OpenWeatherMap current-weather query URLs."""

import httpx

from kivakeli.config.schema import OWM_WEATHER_URL
from kivakeli.errors import MalformedUrlError
from kivakeli.models.units import resolve_unit

DEFAULT_LANGUAGE = "fi"


def build_city_url(
    place_name: str,
    api_key: str,
    unit: str | None,
    base_url: str = OWM_WEATHER_URL,
    language: str = DEFAULT_LANGUAGE,
) -> str:
    """URL for weather by place name, e.g. "Turku" or "Turku,fi"."""
    keyword, _ = resolve_unit(unit)
    params = {"q": place_name, "appid": api_key, "units": keyword, "lang": language}
    return _build(base_url, params)


def build_geo_url(
    lat: float,
    lon: float,
    api_key: str,
    unit: str | None,
    base_url: str = OWM_WEATHER_URL,
    language: str = DEFAULT_LANGUAGE,
) -> str:
    """URL for weather at a coordinate pair in decimal degrees."""
    keyword, _ = resolve_unit(unit)
    params = {
        "lat": str(lat),
        "lon": str(lon),
        "appid": api_key,
        "units": keyword,
        "lang": language,
    }
    return _build(base_url, params)


def _build(base_url: str, params: dict[str, str]) -> str:
    # Query values are percent-encoded; dict order keeps the URL stable.
    try:
        url = httpx.URL(base_url, params=params)
    except httpx.InvalidURL as e:
        raise MalformedUrlError(f"{base_url}: {e}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise MalformedUrlError(f"Not an absolute http(s) URL: {base_url}")
    return str(url)
