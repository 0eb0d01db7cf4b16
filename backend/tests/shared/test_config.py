"""Tests for shared/config.py."""

from unittest.mock import patch
import os

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        settings = Settings(_env_file=None)
        assert settings.app_name == "Jaothui ID-Trace API"
        assert settings.port == 8000
        assert settings.jwt_algorithm == "HS256"
        assert settings.jwt_audience == "authenticated"
        assert settings.session_expires_in == 7 * 24 * 60 * 60
        assert settings.default_farm_name == "ฟาร์มของฉัน"
        assert settings.default_province == "ไม่ระบุ"
        assert settings.default_page_size == 20
        assert settings.max_page_size == 100
        assert settings.farm_context_use_union_query is True

    def test_loads_from_env(self):
        """Settings should load from environment variables."""
        with patch.dict(os.environ, {"JWT_SECRET": "s3cret", "ARGON2_TIME_COST": "4", "DEBUG": "true"}):
            settings = Settings(_env_file=None)
            assert settings.jwt_secret == "s3cret"
            assert settings.argon2_time_cost == 4
            assert settings.debug is True

    def test_union_query_can_be_disabled(self):
        with patch.dict(os.environ, {"FARM_CONTEXT_USE_UNION_QUERY": "false"}):
            assert Settings(_env_file=None).farm_context_use_union_query is False


class TestGetSettings:
    def test_is_cached(self):
        get_settings.cache_clear()
        assert get_settings() is get_settings()
