"""
Scoring and identity of coin selection solutions.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum

from coinselect.models import Coin, Payment, Solution, format_amount

ID_SEPARATOR = "-"


class ScorePreference(str, Enum):
    """Which end of the score range counts as best."""

    HIGHEST = "highest"
    LOWEST = "lowest"


def coin_privacy_cost(coin: Coin) -> Decimal:
    """Value weighted by anonymity set; coins without one cost their full value."""
    if coin.anonymity_set <= 0:
        return coin.value
    return coin.value / Decimal(str(coin.anonymity_set))


def average_coin_cost(coins: list[Coin]) -> Decimal:
    total = sum((coin_privacy_cost(coin) for coin in coins), Decimal(0))
    return total / (len(coins) or 1)


def payment_score(payments: list[Payment]) -> Decimal:
    return Decimal(len(payments))


def score_solution(solution: Solution) -> Decimal:
    """
    Score a solution.

    The score is the average privacy cost of the selected coins plus the
    number of handled payments.
    """
    return average_coin_cost(solution.coins) + payment_score(solution.handled_payments)


def solution_id(solution: Solution) -> str:
    """
    Canonical identity of a solution.

    Sorted coin names followed by the handled payment values in ascending
    order, so the key does not depend on selection order.
    """
    names = sorted(coin.name for coin in solution.coins)
    payments = sorted(solution.handled_payments, key=lambda p: p.value)
    values = [format_amount(p.value) for p in payments]
    return ID_SEPARATOR.join(names + values)


def dedupe_solutions(solutions: list[Solution]) -> list[Solution]:
    """Keep the first solution for each identity, preserving order."""
    seen: set[str] = set()
    unique = []
    for solution in solutions:
        key = solution_id(solution)
        if key in seen:
            continue
        seen.add(key)
        unique.append(solution)
    return unique


def best_solutions(
    solutions: list[Solution], prefer: ScorePreference = ScorePreference.HIGHEST
) -> list[Solution]:
    """
    Return every solution sharing the best score.

    Args:
        solutions: Candidate solutions
        prefer: Whether the highest or the lowest score wins

    Returns:
        Solutions with the best score, in input order (empty if no solutions)
    """
    if not solutions:
        return []

    scores = [score_solution(s) for s in solutions]
    best = max(scores) if prefer == ScorePreference.HIGHEST else min(scores)
    return [s for s, score in zip(solutions, scores, strict=True) if score == best]
