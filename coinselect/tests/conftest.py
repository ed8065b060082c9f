"""
Test configuration for coin selection tests.
"""

from __future__ import annotations

import random
from decimal import Decimal

import pytest
from helpers import make_coin

from coinselect.models import Coin, Payment


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(42)


@pytest.fixture
def scenario_coins() -> list[Coin]:
    """One coin of each color for an anonymity target of 2."""
    return [
        make_coin("A", 10, 0),
        make_coin("B", 5, 1),
        make_coin("C", 15, 2),
    ]


@pytest.fixture
def scenario_payments() -> list[Payment]:
    return [Payment(value=Decimal(5)), Payment(value=Decimal(2))]
