"""Tests for centralized configuration."""

import pytest
from pydantic import ValidationError

from territory.config import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("TERRITORY_LOG_LEVEL", "TERRITORY_JSON_INDENT", "TERRITORY_INCLUDE_PINS"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    def test_defaults(self):
        s = Settings(_env_file=None)
        assert s.log_level == "WARNING"
        assert s.json_indent == 2
        assert s.include_pins is True

    def test_all_fields(self, monkeypatch):
        monkeypatch.setenv("TERRITORY_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("TERRITORY_JSON_INDENT", "0")
        monkeypatch.setenv("TERRITORY_INCLUDE_PINS", "false")
        s = Settings(_env_file=None)
        assert s.log_level == "DEBUG"
        assert s.json_indent == 0
        assert s.include_pins is False

    def test_log_level_normalized(self, monkeypatch):
        monkeypatch.setenv("TERRITORY_LOG_LEVEL", "info")
        assert Settings(_env_file=None).log_level == "INFO"

    def test_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("TERRITORY_LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_negative_indent(self, monkeypatch):
        monkeypatch.setenv("TERRITORY_JSON_INDENT", "-1")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_unprefixed_variables_ignored(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert Settings(_env_file=None).log_level == "WARNING"

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env.territory"
        env_file.write_text("TERRITORY_JSON_INDENT=4\n")
        assert Settings(_env_file=env_file).json_indent == 4
