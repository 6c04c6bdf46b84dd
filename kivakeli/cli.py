"""CLI entry point for the KivaKeli weather reporter."""

import argparse
import logging
import sys

import yaml
from pydantic import ValidationError

from kivakeli.config.credentials import load_or_request_api_key
from kivakeli.config.loader import load_config
from kivakeli.errors import (
    AuthError,
    CredentialError,
    InvalidArgumentError,
    MalformedDocumentError,
    MalformedUrlError,
    NetworkError,
)
from kivakeli.ingest.geolocation import GeoLocator
from kivakeli.ingest.http_fetcher import HttpFetcher
from kivakeli.models.units import resolve_unit
from kivakeli.models.weather import RunOptions
from kivakeli.reporting.formatters import format_report_text
from kivakeli.reporting.weather_report import build_report

DEFAULT_CONFIG = "kivakeli.yaml"

HELP_MESSAGE = (
    "Käyttö: kivakeli [komentorivioptiot...]\n\n"
    "-h\t\ttulostetaan tämä apuviesti\n"
    "-l <sijainti>\taseta sijainti, esimerkiksi kaupungin nimi\n"
    "-u <symboli>\taseta haluttu lämpötilan symboli, esimerkiksi C tai F\n"
    "-c <tiedosto>\tasetustiedosto (oletus: kivakeli.yaml)\n"
    "-v\t\ttulosta vianetsintälokit\n"
)


HELP_FLAGS = ("-h", "--help")
VALUE_FLAGS = ("-l", "--location", "-u", "--unit", "-c", "--config")
SWITCH_FLAGS = ("-v", "--verbose")

# Third-party loggers that write full request URLs, API key included.
NOISY_LOGGERS = ("httpx", "httpcore")


class _ArgumentParser(argparse.ArgumentParser):
    """Raises on usage errors instead of exiting with status 2."""

    def error(self, message):
        raise InvalidArgumentError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="kivakeli", add_help=False, exit_on_error=False)
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument("-l", "--location", dest="location")
    parser.add_argument("-u", "--unit", dest="unit")
    parser.add_argument("-c", "--config", default=DEFAULT_CONFIG)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def help_requested(argv: list[str]) -> bool:
    """True if -h comes before any invalid flag, reading argv in order."""
    expect_value = False
    for token in argv:
        if expect_value:
            expect_value = False
            continue
        if token in HELP_FLAGS:
            return True
        if token in VALUE_FLAGS:
            expect_value = True
            continue
        if token in SWITCH_FLAGS:
            continue
        if token.split("=", 1)[0] in VALUE_FLAGS or token[:2] in VALUE_FLAGS:
            continue  # --location=Turku, -lTurku
        return False
    return False


def parse_options(argv: list[str]) -> tuple[RunOptions, argparse.Namespace]:
    """Turn argv into immutable run options.

    Raises InvalidArgumentError carrying the offending token.
    """
    parser = _build_parser()
    try:
        args, extras = parser.parse_known_args(argv)
    except argparse.ArgumentError as e:
        raise InvalidArgumentError(_offending_flag(e, argv)) from e
    if extras:
        raise InvalidArgumentError(extras[0])

    _, unit = resolve_unit(args.unit)
    options = RunOptions(
        location_name=args.location or None,
        unit=unit,
        verbose=args.verbose,
    )
    return options, args


def _offending_flag(error: argparse.ArgumentError, argv: list[str]) -> str:
    names = (error.argument_name or "").split("/")
    for token in reversed(argv):
        if token in names:
            return token
    return names[0]


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if help_requested(argv):
        print(HELP_MESSAGE, end="")
        return 0

    try:
        options, args = parse_options(argv)
    except InvalidArgumentError as e:
        print(f"Virheellinen argumentti: {e}")
        return 1

    if args.help:  # combined short flags such as -vh
        print(HELP_MESSAGE, end="")
        return 0

    configure_logging(options.verbose)

    try:
        config = load_config(args.config)
    except (
        ValidationError, yaml.YAMLError, UnicodeDecodeError, TypeError, OSError
    ) as e:
        print(f"Virheellinen asetustiedosto: {e}")
        return 1

    fetcher = HttpFetcher(
        user_agent=config.service.user_agent,
        timeout=config.service.timeout_seconds,
    )
    locator = GeoLocator(fetcher, url=config.service.geolocation_url)

    try:
        api_key = load_or_request_api_key(config.key_file)
        report = build_report(options, api_key, fetcher, locator, config.service)
    except AuthError as e:
        print(f"Virhe: {e}")
        print("Syötitkö virheellisen API-avaimen?")
        return 1
    except NetworkError as e:
        print(f"Virhe: {e}")
        print("Syötitkö virheellisen sijainnin?")
        return 1
    except MalformedUrlError as e:
        print(f"Virheellinen URL: {e}")
        return 1
    except MalformedDocumentError as e:
        print(f"Virheellinen dokumentti: {e}")
        return 1
    except CredentialError as e:
        print(f"Virhe: {e}")
        return 1

    print(format_report_text(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
