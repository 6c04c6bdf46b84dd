"""Report assembly: location → URL → fetch → extract."""

import logging

from kivakeli.config.schema import ServiceConfig
from kivakeli.errors import MissingFieldError
from kivakeli.ingest.geolocation import GeoLocator
from kivakeli.ingest.http_fetcher import HttpFetcher
from kivakeli.ingest.json_fields import array_field, field
from kivakeli.ingest.url_builder import build_city_url, build_geo_url
from kivakeli.models.weather import RunOptions, WeatherReport

logger = logging.getLogger(__name__)


def build_report(
    options: RunOptions,
    api_key: str,
    fetcher: HttpFetcher,
    locator: GeoLocator,
    service: ServiceConfig | None = None,
) -> WeatherReport:
    """Fetch current weather for the configured location.

    An explicit place name wins and skips geolocation entirely. Any error
    aborts the whole report.
    """
    service = service or ServiceConfig()

    if options.uses_geolocation:
        coords = locator.resolve()
        url = build_geo_url(
            coords.lat, coords.lon, api_key, options.unit,
            base_url=service.weather_url, language=service.language,
        )
    else:
        url = build_city_url(
            options.location_name, api_key, options.unit,
            base_url=service.weather_url, language=service.language,
        )

    raw = fetcher.fetch(url)
    main = field(raw, "main")
    temperature = field(main, "temp")
    descriptions = array_field(raw, "weather", "description")
    if not descriptions:
        raise MissingFieldError("weather[0].description")

    logger.info(
        "Weather for %s: %s %s, %s",
        options.location_name or "device location",
        temperature, options.unit.label, descriptions[0],
    )
    return WeatherReport(
        location_name=options.location_name,
        temperature=temperature,
        unit=options.unit,
        description=descriptions[0],
        descriptions=tuple(descriptions),
    )
