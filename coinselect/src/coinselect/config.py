"""
Configuration for coin selection runs.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from coinselect.models import AnonsetColor


class SelectionConfig(BaseModel):
    """Parameters of a single selection run."""

    anonymity_target: int = Field(default=2, ge=1, description="Anonymity set counted as private")
    max_coins: int = Field(default=3, ge=0, description="Maximum number of selected coins")
    # Colors without an entry are unlimited
    max_per_color: dict[AnonsetColor, int] = Field(default_factory=dict)

    shift_chance_percent: int = Field(
        default=10, ge=0, le=100, description="Chance to swap each adjacent pair of candidates"
    )
    green_drop_chance: float = Field(
        default=0.8, ge=0.0, le=1.0, description="Chance to drop a GREEN candidate once paid"
    )
    decluster_chance: float = Field(
        default=0.5, ge=0.0, le=1.0, description="Chance to place a same-origin coin anyway"
    )
    # Reproduce the integer-truncated probabilities of the reference selector
    legacy_probabilities: bool = False

    @field_validator("max_per_color")
    @classmethod
    def validate_caps(cls, v: dict[AnonsetColor, int]) -> dict[AnonsetColor, int]:
        for color, cap in v.items():
            if cap < 0:
                raise ValueError(f"Cap for {color.value} coins must be non-negative")
        return v

    def color_cap(self, color: AnonsetColor) -> int | None:
        """Configured cap for a color, None when unlimited."""
        return self.max_per_color.get(color)


class CoinSelectSettings(BaseSettings):
    """Defaults for the command line driver, overridable via COINSELECT_* env vars."""

    model_config = SettingsConfigDict(
        env_prefix="COINSELECT_", env_file=".env", env_file_encoding="utf-8", case_sensitive=False
    )

    anonymity_target: int = 2
    max_coins: int = 3
    trials: int = 100
    shift_chance_percent: int = 10
    prefer: Literal["highest", "lowest"] = "highest"
    legacy_probabilities: bool = False

    log_level: str = "INFO"


def get_settings() -> CoinSelectSettings:
    return CoinSelectSettings()
