"""IP-based device geolocation via ip-api.com."""

import logging

from kivakeli.config.schema import IP_API_URL
from kivakeli.errors import MalformedDocumentError
from kivakeli.ingest.http_fetcher import HttpFetcher
from kivakeli.ingest.json_fields import field
from kivakeli.models.weather import Coordinates

logger = logging.getLogger(__name__)


class GeoLocator:
    def __init__(self, fetcher: HttpFetcher, url: str = IP_API_URL):
        self.fetcher = fetcher
        self.url = url

    def resolve(self) -> Coordinates:
        """Look up the caller's coordinates from their public IP.

        Fetch errors propagate as-is. Nothing is cached.
        """
        raw = self.fetcher.fetch(self.url)
        lat_text = field(raw, "lat")
        lon_text = field(raw, "lon")
        try:
            coords = Coordinates(lat=float(lat_text), lon=float(lon_text))
        except ValueError as e:
            raise MalformedDocumentError(
                f"Non-numeric coordinates: lat={lat_text!r}, lon={lon_text!r}"
            ) from e
        logger.debug("Device location resolved to %s, %s", coords.lat, coords.lon)
        return coords
