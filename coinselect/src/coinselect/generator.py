"""
Synthetic coins and payments for demonstrations and trials.
"""

from __future__ import annotations

import random
from decimal import Decimal

from loguru import logger

from coinselect.models import Coin, Payment


def generate_coins(
    count: int,
    rng: random.Random,
    max_value: int = 99,
    max_anonymity_set: int = 2,
    origin_count: int = 0,
) -> list[Coin]:
    """
    Generate random coins named "Coin 0", "Coin 1", ...

    Args:
        count: Number of coins
        rng: Random source
        max_value: Largest coin value (values start at 1)
        max_anonymity_set: Largest anonymity set (sets start at 0)
        origin_count: Size of the pool of origin transactions, 0 for no origins

    Returns:
        Generated coins
    """
    logger.info(f"Generating {count} coins")
    coins = []
    for i in range(count):
        origin = f"tx{rng.randrange(origin_count)}" if origin_count > 0 else None
        coins.append(
            Coin(
                name=f"Coin {i}",
                value=Decimal(rng.randint(1, max_value)),
                anonymity_set=rng.randint(0, max_anonymity_set),
                origin_id=origin,
            )
        )
    return coins


def generate_payments(count: int, rng: random.Random, max_value: int = 99) -> list[Payment]:
    """Generate random payments with values between 1 and max_value."""
    logger.info(f"Generating {count} payments")
    return [Payment(value=Decimal(rng.randint(1, max_value))) for _ in range(count)]
