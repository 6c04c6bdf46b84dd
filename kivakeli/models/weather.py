"""Run options and weather report models."""

from dataclasses import dataclass

from kivakeli.models.units import TemperatureUnit


@dataclass(frozen=True)
class RunOptions:
    location_name: str | None = None  # None means use device geolocation
    unit: TemperatureUnit = TemperatureUnit.KELVIN
    verbose: bool = False

    @property
    def uses_geolocation(self) -> bool:
        return not self.location_name


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lon: float


@dataclass(frozen=True)
class WeatherReport:
    location_name: str | None
    temperature: str  # as sent by the service, e.g. "281.7"
    unit: TemperatureUnit
    description: str
    descriptions: tuple[str, ...] = ()
