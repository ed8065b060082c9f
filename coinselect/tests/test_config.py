"""
Tests for coin selection configuration.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from coinselect.config import CoinSelectSettings, SelectionConfig
from coinselect.models import AnonsetColor


class TestSelectionConfig:
    """Tests for SelectionConfig model."""

    def test_default_values(self) -> None:
        config = SelectionConfig()
        assert config.anonymity_target == 2
        assert config.max_coins == 3
        assert config.max_per_color == {}
        assert config.shift_chance_percent == 10
        assert config.green_drop_chance == 0.8
        assert config.legacy_probabilities is False

    def test_caps_from_strings(self) -> None:
        config = SelectionConfig(max_per_color={"red": 1, "green": 0})
        assert config.color_cap(AnonsetColor.RED) == 1
        assert config.color_cap(AnonsetColor.GREEN) == 0
        assert config.color_cap(AnonsetColor.ORANGE) is None

    def test_negative_cap_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SelectionConfig(max_per_color={AnonsetColor.RED: -1})

    def test_unknown_color_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SelectionConfig(max_per_color={"purple": 1})

    def test_anonymity_target_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            SelectionConfig(anonymity_target=0)

    def test_max_coins_zero_allowed(self) -> None:
        assert SelectionConfig(max_coins=0).max_coins == 0

    def test_max_coins_negative_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SelectionConfig(max_coins=-1)

    def test_shift_chance_range(self) -> None:
        with pytest.raises(ValidationError):
            SelectionConfig(shift_chance_percent=101)


class TestCoinSelectSettings:
    """Tests for environment driven settings."""

    def test_defaults(self) -> None:
        settings = CoinSelectSettings()
        assert settings.trials == 100
        assert settings.prefer == "highest"
        assert settings.log_level == "INFO"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COINSELECT_MAX_COINS", "7")
        monkeypatch.setenv("COINSELECT_PREFER", "lowest")
        settings = CoinSelectSettings()
        assert settings.max_coins == 7
        assert settings.prefer == "lowest"
