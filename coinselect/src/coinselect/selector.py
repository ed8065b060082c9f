"""
Privacy-aware coin selection.

Greedily consumes an ordered candidate list, spending weak-privacy coins
first and assigning payments at random as soon as the selected value covers
them. Once every payment is handled, the remaining candidates are pruned so
that further coins are only added occasionally.
"""

from __future__ import annotations

import random
import time
from datetime import timedelta

from loguru import logger

from coinselect.config import SelectionConfig
from coinselect.models import (
    AnonsetColor,
    Coin,
    InvalidSelectionInput,
    Payment,
    Solution,
    coin_color,
)
from coinselect.ordering import order_coins


def validate_coins(coins: list[Coin]) -> None:
    """
    Check that coin names are unique.

    Raises:
        InvalidSelectionInput: If two coins share a name
    """
    seen: set[str] = set()
    for coin in coins:
        if coin.name in seen:
            raise InvalidSelectionInput(f"Duplicate coin name: {coin.name}")
        seen.add(coin.name)


def handle_payments(solution: Solution, pending: list[Payment], rng: random.Random) -> int:
    """
    Assign random pending payments that fit the solution's leftover value.

    Handled payments are moved from ``pending`` into the solution.

    Returns:
        Number of payments handled
    """
    handled = 0
    while True:
        leftover = solution.leftover_value
        fitting = [payment for payment in pending if payment.value <= leftover]
        if not fitting:
            return handled
        payment = rng.choice(fitting)
        pending.remove(payment)
        solution.handled_payments.append(payment)
        handled += 1


def should_drop_candidate(
    coin: Coin, solution: Solution, config: SelectionConfig, rng: random.Random
) -> bool:
    """
    Decide whether a remaining candidate stops being considered once all payments are handled.

    RED and ORANGE coins need mixing anyway, so they are kept with a chance equal to
    the used share of the coin budget. GREEN coins are mostly dropped.
    """
    color = coin_color(coin, config.anonymity_target)

    if color == AnonsetColor.GREEN:
        if config.legacy_probabilities:
            return rng.randint(1, 9) < 8
        return rng.random() < config.green_drop_chance

    if config.legacy_probabilities:
        # Integer division: zero until the budget is full
        capacity = ((len(solution.coins) // config.max_coins) * 100) * 100
        return rng.randint(1, 99) > capacity

    used_fraction = len(solution.coins) / config.max_coins
    return rng.random() > used_fraction


def select_coins(
    coins: list[Coin],
    payments: list[Payment],
    config: SelectionConfig,
    rng: random.Random | None = None,
) -> Solution:
    """
    Select coins for a set of payments.

    Args:
        coins: Spendable coins (names must be unique)
        payments: Payments to handle
        config: Selection parameters
        rng: Random source; a fresh unseeded generator when None

    Returns:
        Solution holding the selected coins and the payments they cover.
        Payments that could not be covered are simply not in handled_payments.

    Raises:
        InvalidSelectionInput: If coin names are not unique
    """
    validate_coins(coins)
    if rng is None:
        rng = random.Random()

    start = time.perf_counter()

    remaining_coins = order_coins(
        coins,
        config.anonymity_target,
        rng,
        shift_chance_percent=config.shift_chance_percent,
        place_chance=config.decluster_chance,
        legacy=config.legacy_probabilities,
    )
    remaining_payments = list(payments)
    solution = Solution()

    while remaining_coins:
        if len(solution.coins) >= config.max_coins:
            break

        coin = remaining_coins.pop(0)
        color = coin_color(coin, config.anonymity_target)

        cap = config.color_cap(color)
        if cap is not None and solution.count_color(color, config.anonymity_target) >= cap:
            # Rejected coins are not requeued
            logger.debug(f"Skipping {coin.name}: {color.value} cap of {cap} reached")
            continue

        solution.coins.append(coin)
        handled = handle_payments(solution, remaining_payments, rng)
        if handled:
            logger.debug(
                f"Added {coin.name} ({coin.value}), handled {handled} payment(s), "
                f"leftover {solution.leftover_value}"
            )

        if not remaining_payments:
            before = len(remaining_coins)
            remaining_coins = [
                c for c in remaining_coins if not should_drop_candidate(c, solution, config, rng)
            ]
            if before != len(remaining_coins):
                logger.debug(f"Pruned {before - len(remaining_coins)} candidate coin(s)")

    solution.time_elapsed = timedelta(seconds=time.perf_counter() - start)

    if remaining_payments:
        logger.debug(
            f"{len(remaining_payments)} of {len(payments)} payment(s) left unhandled "
            f"with {len(solution.coins)} coin(s)"
        )

    return solution
