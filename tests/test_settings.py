"""Tests for config/settings.py."""

import pytest
from pydantic import ValidationError

from config.settings import Settings


def _settings(**kwargs):
    return Settings(_env_file=None, **kwargs)


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        s = _settings()

        assert s.environment == "development"
        assert s.history_enabled is True
        assert s.database_url.startswith("sqlite")
        assert s.history_page_size <= s.history_max_page_size

    def test_log_level_normalised(self):
        assert _settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            _settings(log_level="chatty")

    def test_cors_origin_list(self):
        s = _settings(cors_origins="http://localhost:5173, http://localhost:3000,")

        assert s.cors_origin_list == ["http://localhost:5173", "http://localhost:3000"]

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("HISTORY_ENABLED", "false")
        monkeypatch.setenv("HISTORY_PAGE_SIZE", "5")

        s = _settings()
        assert s.history_enabled is False
        assert s.history_page_size == 5
