"""OpenWeatherMap API key storage.

The key lives on the first line of a plain text file. When the file is
missing (or empty) the user is asked for the key once and it is written back
for later runs. ``OPENWEATHERMAP_API_KEY`` in the environment overrides the
file entirely.
"""

import logging
import os
from collections.abc import Callable
from pathlib import Path

from kivakeli.errors import CredentialError

logger = logging.getLogger(__name__)

API_KEY_ENV = "OPENWEATHERMAP_API_KEY"
PROMPT = "Syötä API-avain: "
MISSING_NOTICE = "API-avainta ei löytynyt!"


def read_api_key(path: str | Path) -> str | None:
    """Return the stored key, or None if the file is missing or blank."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            first_line = f.readline().strip()
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        raise CredentialError(f"Cannot read {path}: {e}") from e
    return first_line or None


def write_api_key(path: str | Path, api_key: str) -> None:
    path = Path(path)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(api_key + "\n")
    except OSError as e:
        raise CredentialError(f"Cannot write {path}: {e}") from e
    logger.info("Stored API key in %s", path)


def load_or_request_api_key(
    path: str | Path,
    ask: Callable[[str], str] = input,
    say: Callable[[str], None] = print,
) -> str:
    """Return the API key from env, the key file, or the user.

    A key typed in by the user is persisted to ``path``.
    """
    env_key = os.environ.get(API_KEY_ENV, "").strip()
    if env_key:
        logger.debug("Using API key from %s", API_KEY_ENV)
        return env_key

    stored = read_api_key(path)
    if stored is not None:
        return stored

    say(MISSING_NOTICE)
    try:
        api_key = ask(PROMPT).strip()
    except EOFError as e:
        raise CredentialError("No API key given") from e
    if not api_key:
        raise CredentialError("No API key given")
    write_api_key(path, api_key)
    return api_key
