"""Temperature units and their OpenWeatherMap keywords."""

from enum import StrEnum


class TemperatureUnit(StrEnum):
    CELSIUS = "C"
    FAHRENHEIT = "F"
    KELVIN = "K"

    @property
    def keyword(self) -> str:
        return _KEYWORDS[self]

    @property
    def label(self) -> str:
        """Unit as printed after a temperature: °C, °F or a bare K."""
        if self is TemperatureUnit.KELVIN:
            return "K"
        return f"°{self.value}"


_KEYWORDS = {
    TemperatureUnit.CELSIUS: "metric",
    TemperatureUnit.FAHRENHEIT: "imperial",
    TemperatureUnit.KELVIN: "standard",
}


def resolve_unit(symbol: str | None) -> tuple[str, TemperatureUnit]:
    """Map a unit symbol to (service keyword, display unit).

    Only the first character counts and case is ignored. Anything that is
    not C or F, including an empty or missing symbol, falls back to Kelvin.
    """
    first = (symbol or "")[:1].upper()
    if first == "C":
        unit = TemperatureUnit.CELSIUS
    elif first == "F":
        unit = TemperatureUnit.FAHRENHEIT
    else:
        unit = TemperatureUnit.KELVIN
    return unit.keyword, unit
