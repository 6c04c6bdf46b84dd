"""Tests for API key storage."""

from pathlib import Path

import pytest

from kivakeli.config.credentials import (
    API_KEY_ENV,
    MISSING_NOTICE,
    PROMPT,
    load_or_request_api_key,
    read_api_key,
)
from kivakeli.errors import CredentialError


def _no_prompt(prompt: str) -> str:
    raise AssertionError("should not prompt")


class TestReadApiKey:
    def test_first_line_only(self, tmp_path: Path):
        path = tmp_path / "api_key.txt"
        path.write_text("KEY123\nignored\n")
        assert read_api_key(path) == "KEY123"

    def test_missing_file(self, tmp_path: Path):
        assert read_api_key(tmp_path / "api_key.txt") is None

    def test_blank_file(self, tmp_path: Path):
        path = tmp_path / "api_key.txt"
        path.write_text("\n")
        assert read_api_key(path) is None

    def test_directory_is_error(self, tmp_path: Path):
        with pytest.raises(CredentialError):
            read_api_key(tmp_path)

    def test_undecodable_file_is_error(self, tmp_path: Path):
        path = tmp_path / "api_key.txt"
        path.write_bytes(b"KEY\xe4123\n")
        with pytest.raises(CredentialError):
            read_api_key(path)


class TestLoadOrRequestApiKey:
    def test_reads_existing_file(self, tmp_path: Path):
        path = tmp_path / "api_key.txt"
        path.write_text("KEY123\n")
        assert load_or_request_api_key(path, ask=_no_prompt) == "KEY123"

    def test_prompts_and_persists(self, tmp_path: Path):
        path = tmp_path / "api_key.txt"
        prompts: list[str] = []
        said: list[str] = []

        def ask(prompt: str) -> str:
            prompts.append(prompt)
            return "  NEWKEY  "

        assert load_or_request_api_key(path, ask=ask, say=said.append) == "NEWKEY"
        assert prompts == [PROMPT]
        assert said == [MISSING_NOTICE]
        assert path.read_text() == "NEWKEY\n"

        # Second run reads the stored key
        assert load_or_request_api_key(path, ask=_no_prompt) == "NEWKEY"

    def test_empty_answer(self, tmp_path: Path):
        path = tmp_path / "api_key.txt"
        with pytest.raises(CredentialError):
            load_or_request_api_key(path, ask=lambda p: "", say=lambda m: None)
        assert not path.exists()

    def test_eof_on_prompt(self, tmp_path: Path):
        def ask(prompt: str) -> str:
            raise EOFError

        with pytest.raises(CredentialError):
            load_or_request_api_key(
                tmp_path / "api_key.txt", ask=ask, say=lambda m: None
            )

    def test_env_overrides_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(API_KEY_ENV, "ENVKEY")
        path = tmp_path / "api_key.txt"
        assert load_or_request_api_key(path, ask=_no_prompt) == "ENVKEY"
        assert not path.exists()
