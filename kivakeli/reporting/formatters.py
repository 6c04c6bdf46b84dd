"""Console output for weather reports (Finnish)."""

from kivakeli.models.weather import WeatherReport


def format_header(report: WeatherReport) -> str:
    if report.location_name:
        return f"Sää {report.location_name}"
    return "Sää laitteen sijainnissa"


def format_temperature(report: WeatherReport) -> str:
    return f"Lämpötila: {report.temperature} {report.unit.label}"


def format_report_text(report: WeatherReport) -> str:
    lines = [
        format_header(report),
        "",
        format_temperature(report),
        f"Keli: {report.description}",
    ]
    return "\n".join(lines)
