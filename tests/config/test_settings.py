"""Tests for src/config/settings.py — environment-driven settings."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.config.settings import LOG_FORMAT, Settings, configure_logging, get_settings


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.num_players == 5
        assert settings.dice_sides == 6
        assert settings.seed is None
        assert settings.debug is False
        assert settings.log_level == "INFO"

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("KNOCK_OUT_NUM_PLAYERS", "3")
        monkeypatch.setenv("KNOCK_OUT_SEED", "99")
        monkeypatch.setenv("KNOCK_OUT_DEBUG", "true")

        settings = Settings()
        assert settings.num_players == 3
        assert settings.seed == 99
        assert settings.debug is True

    def test_ignores_unprefixed_environment(self, monkeypatch):
        monkeypatch.setenv("NUM_PLAYERS", "9")
        assert Settings().num_players == 5

    @pytest.mark.parametrize("raw, expected", [("debug", "DEBUG"), (" Warning ", "WARNING"), ("ERROR", "ERROR")])
    def test_log_level_normalised(self, monkeypatch, raw, expected):
        monkeypatch.setenv("KNOCK_OUT_LOG_LEVEL", raw)
        assert Settings().log_level == expected

    @pytest.mark.parametrize("raw", ["bogus", "verbose", ""])
    def test_unknown_log_level_rejected(self, monkeypatch, raw):
        monkeypatch.setenv("KNOCK_OUT_LOG_LEVEL", raw)
        with pytest.raises(ValidationError, match="Log level must be one of"):
            Settings()

    @pytest.mark.parametrize("var", ["KNOCK_OUT_NUM_PLAYERS", "KNOCK_OUT_DICE_SIDES"])
    def test_rejects_non_positive(self, monkeypatch, var):
        monkeypatch.setenv(var, "0")
        with pytest.raises(ValidationError):
            Settings()


class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("KNOCK_OUT_NUM_PLAYERS", "2")
        get_settings.cache_clear()
        second = get_settings()
        assert second is not first
        assert second.num_players == 2


class TestConfigureLogging:
    @patch("src.config.settings.logging.basicConfig")
    def test_explicit_level(self, mock_basic):
        configure_logging("debug")
        mock_basic.assert_called_once_with(level="DEBUG", format=LOG_FORMAT, force=True)

    @patch("src.config.settings.logging.basicConfig")
    def test_level_from_settings(self, mock_basic, monkeypatch):
        monkeypatch.setenv("KNOCK_OUT_LOG_LEVEL", "warning")
        configure_logging()
        assert mock_basic.call_args.kwargs["level"] == "WARNING"

    @patch("src.config.settings.logging.basicConfig")
    def test_debug_flag_wins(self, mock_basic, monkeypatch):
        monkeypatch.setenv("KNOCK_OUT_DEBUG", "1")
        monkeypatch.setenv("KNOCK_OUT_LOG_LEVEL", "ERROR")
        configure_logging()
        assert mock_basic.call_args.kwargs["level"] == "DEBUG"
