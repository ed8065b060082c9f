"""
Shared helpers for coin selection tests.
"""

from __future__ import annotations

import random
from decimal import Decimal

from coinselect.models import Coin


class FixedRandom(random.Random):
    """Random source whose random() always returns the same value."""

    def __init__(self, value: float, seed: int = 0) -> None:
        super().__init__(seed)
        self.value = value

    def random(self) -> float:
        return self.value


def make_coin(
    name: str, value: int | str, anonymity_set: float = 0, origin: str | None = None
) -> Coin:
    return Coin(name=name, value=Decimal(value), anonymity_set=anonymity_set, origin_id=origin)
