"""
Coin selection data models.

Coins and payments are immutable pydantic models; a Solution is the mutable
aggregate filled in by a single selection run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field


class InvalidSelectionInput(ValueError):
    """Raised when the coin or payment set cannot be used for selection."""

    pass


class AnonsetColor(str, Enum):
    """Privacy tier of a coin relative to an anonymity set target."""

    RED = "red"
    ORANGE = "orange"
    GREEN = "green"

    @property
    def rank(self) -> int:
        # Weaker privacy sorts first so it gets spent first
        return _COLOR_RANK[self]


_COLOR_RANK = {AnonsetColor.RED: 0, AnonsetColor.ORANGE: 1, AnonsetColor.GREEN: 2}


class Coin(BaseModel):
    name: str = Field(..., min_length=1)
    value: Decimal = Field(..., gt=0)
    anonymity_set: float = Field(default=0.0, ge=0)
    # Coins created by the same transaction share an origin
    origin_id: str | None = None

    model_config = {"frozen": True}

    def color(self, anonymity_target: int) -> AnonsetColor:
        return coin_color(self, anonymity_target)


class Payment(BaseModel):
    value: Decimal = Field(..., gt=0)

    model_config = {"frozen": True}


def coin_color(coin: Coin, anonymity_target: int) -> AnonsetColor:
    """
    Classify a coin by its anonymity set.

    Args:
        coin: Coin to classify
        anonymity_target: Anonymity set at which a coin counts as private

    Returns:
        RED for coins without any anonymity set, GREEN once the target is
        reached, ORANGE in between
    """
    if coin.anonymity_set <= 0:
        return AnonsetColor.RED
    if coin.anonymity_set >= anonymity_target:
        return AnonsetColor.GREEN
    return AnonsetColor.ORANGE


def format_amount(value: Decimal) -> str:
    """Canonical string form of an amount (no exponent, no trailing zeros)."""
    return format(value.normalize(), "f")


@dataclass(eq=False)
class Solution:
    """Result of one coin selection run"""

    coins: list[Coin] = field(default_factory=list)
    handled_payments: list[Payment] = field(default_factory=list)
    time_elapsed: timedelta = field(default_factory=timedelta)

    @property
    def total_value(self) -> Decimal:
        return sum((coin.value for coin in self.coins), Decimal(0))

    @property
    def total_payment_value(self) -> Decimal:
        return sum((payment.value for payment in self.handled_payments), Decimal(0))

    @property
    def leftover_value(self) -> Decimal:
        return self.total_value - self.total_payment_value

    @property
    def id(self) -> str:
        from coinselect.scoring import solution_id

        return solution_id(self)

    def score(self) -> Decimal:
        from coinselect.scoring import score_solution

        return score_solution(self)

    def count_color(self, color: AnonsetColor, anonymity_target: int) -> int:
        """Number of selected coins of the given color."""
        return sum(1 for coin in self.coins if coin_color(coin, anonymity_target) == color)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Solution):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
