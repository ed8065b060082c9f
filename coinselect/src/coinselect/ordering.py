"""
Candidate ordering for coin selection.

Implements:
- Priority sort (weak privacy first, larger values first within a color)
- Origin de-clustering so coins from the same transaction are not adjacent
- Light shuffle of adjacent candidates
"""

from __future__ import annotations

import random
from typing import TypeVar

from loguru import logger

from coinselect.models import AnonsetColor, Coin, coin_color

T = TypeVar("T")


def priority_sort(coins: list[Coin], anonymity_target: int) -> list[Coin]:
    """
    Sort coins by color (RED, ORANGE, GREEN) and by descending value within a color.

    Args:
        coins: Coins to sort
        anonymity_target: Anonymity set target used to color the coins

    Returns:
        New sorted list
    """
    return sorted(coins, key=lambda c: (coin_color(c, anonymity_target).rank, -c.value))


def decluster_origins(
    coins: list[Coin],
    anonymity_target: int,
    rng: random.Random,
    place_chance: float = 0.5,
    legacy: bool = False,
) -> list[Coin]:
    """
    Reorder coins so that coins sharing an origin tend not to follow each other.

    The front coin of the queue is placed unless it would follow a coin of the
    same origin, in which case it may be pushed back past exactly one coin.
    GREEN coins are never delayed.

    Args:
        coins: Priority sorted coins
        anonymity_target: Anonymity set target used to color the coins
        rng: Random source
        place_chance: Chance to place a same-origin coin anyway
        legacy: Use the 4-in-9 integer draw of the reference selector

    Returns:
        Reordered list
    """
    remaining = list(coins)
    placed: list[Coin] = []

    while remaining:
        current = remaining.pop(0)
        last = placed[-1] if placed else None

        if (
            last is None
            or coin_color(current, anonymity_target) == AnonsetColor.GREEN
            or not remaining
            or (len(remaining) == 1 and remaining[0].origin_id == current.origin_id)
            or last.origin_id != current.origin_id
            or _draw(rng, place_chance, legacy)
        ):
            placed.append(current)
        else:
            remaining.insert(1, current)

    return placed


def _draw(rng: random.Random, chance: float, legacy: bool) -> bool:
    if legacy:
        return rng.randint(1, 9) < 5
    return rng.random() < chance


def slightly_shift_order(
    items: list[T], rng: random.Random, chance_percent: int, legacy: bool = False
) -> list[T]:
    """
    Swap each adjacent pair of items with the given chance.

    In legacy mode the chance is truncated to a whole number (chance_percent // 100),
    so anything under 100 only swaps when the random draw is exactly 0.0.
    """
    working = list(items)
    if legacy:
        threshold = float(chance_percent // 100)
    else:
        threshold = chance_percent / 100

    for i in range(len(working) - 1):
        if legacy:
            swap = rng.random() <= threshold
        else:
            swap = rng.random() < threshold
        if swap:
            working[i], working[i + 1] = working[i + 1], working[i]

    return working


def order_coins(
    coins: list[Coin],
    anonymity_target: int,
    rng: random.Random,
    shift_chance_percent: int = 10,
    place_chance: float = 0.5,
    legacy: bool = False,
) -> list[Coin]:
    """
    Produce the candidate order consumed by the selection loop.

    Args:
        coins: All spendable coins
        anonymity_target: Anonymity set target used to color the coins
        rng: Random source
        shift_chance_percent: Chance to swap adjacent candidates
        place_chance: Chance to place a same-origin coin without delaying it
        legacy: Reproduce the integer-truncated draws of the reference selector

    Returns:
        Ordered candidates, weak privacy and high value first
    """
    ordered = priority_sort(coins, anonymity_target)
    ordered = decluster_origins(ordered, anonymity_target, rng, place_chance, legacy)
    ordered = slightly_shift_order(ordered, rng, shift_chance_percent, legacy)
    logger.debug(f"Ordered {len(ordered)} candidate coins")
    return ordered
