"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from brawl_engine.config import Settings, get_settings, make_rng
from brawl_engine.models import BattleMode


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop the cached settings around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        for name in ("BRAWL_DEBUG", "BRAWL_RANDOM_SEED", "BRAWL_FRAME_INTERVAL_MS", "BRAWL_EXHIBITION_MODE"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.debug is False
        assert settings.random_seed is None
        assert settings.frame_interval_ms == 16
        assert settings.combat_log_enabled is True
        assert settings.exhibition_mode == BattleMode.TURN_BASED

    def test_environment_overrides(self, monkeypatch):
        """Test that BRAWL_ variables are picked up."""
        monkeypatch.setenv("BRAWL_DEBUG", "true")
        monkeypatch.setenv("BRAWL_RANDOM_SEED", "42")
        monkeypatch.setenv("BRAWL_EXHIBITION_MODE", "fighting")

        settings = get_settings()

        assert settings.debug is True
        assert settings.random_seed == 42
        assert settings.exhibition_mode == BattleMode.FIGHTING

    def test_settings_are_cached(self):
        assert get_settings() is get_settings()

    def test_frame_interval_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("BRAWL_FRAME_INTERVAL_MS", "0")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestMakeRng:
    """Tests for the random source factory."""

    def test_seeded_rng_is_reproducible(self):
        settings = Settings(_env_file=None, random_seed=7)

        first, second = make_rng(settings), make_rng(settings)

        assert [first.random() for _ in range(3)] == [second.random() for _ in range(3)]

    def test_unseeded_rng(self, monkeypatch):
        monkeypatch.delenv("BRAWL_RANDOM_SEED", raising=False)
        settings = Settings(_env_file=None)

        assert make_rng(settings) is not make_rng(settings)
