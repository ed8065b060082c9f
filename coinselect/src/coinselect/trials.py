"""
Repeated selection trials.

Runs the selector many times with independent random sources derived from a
master seed, then deduplicates the solutions and ranks them by score.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from loguru import logger

from coinselect.config import SelectionConfig
from coinselect.models import Coin, Payment, Solution
from coinselect.scoring import ScorePreference, best_solutions, dedupe_solutions
from coinselect.selector import select_coins


@dataclass
class TrialReport:
    """Outcome of a batch of selection trials"""

    solutions: list[Solution] = field(default_factory=list)
    unique: list[Solution] = field(default_factory=list)
    best: list[Solution] = field(default_factory=list)

    @property
    def trial_count(self) -> int:
        return len(self.solutions)


def trial_rngs(trials: int, seed: int | None = None) -> list[random.Random]:
    """One isolated random source per trial, reproducible from ``seed``."""
    master = random.Random(seed)
    return [random.Random(master.getrandbits(64)) for _ in range(trials)]


def run_trials(
    coins: list[Coin],
    payments: list[Payment],
    config: SelectionConfig,
    trials: int = 100,
    seed: int | None = None,
    prefer: ScorePreference = ScorePreference.HIGHEST,
) -> TrialReport:
    """
    Run the selector ``trials`` times and collect the results.

    Args:
        coins: Spendable coins
        payments: Payments to handle
        config: Selection parameters
        trials: Number of runs
        seed: Master seed; the same seed reproduces every trial
        prefer: Score direction used to pick the best solutions

    Returns:
        TrialReport with all, unique and best solutions
    """
    report = TrialReport()

    for i, rng in enumerate(trial_rngs(trials, seed)):
        solution = select_coins(coins, payments, config, rng)
        logger.debug(f"Trial #{i}: {solution.id} score {solution.score()}")
        report.solutions.append(solution)

    report.unique = dedupe_solutions(report.solutions)
    logger.info(
        f"Removed duplicate solutions, {len(report.unique)} of {len(report.solutions)} remain"
    )

    report.best = best_solutions(report.unique, prefer)
    if report.best:
        partial = sum(1 for s in report.best if len(s.handled_payments) < len(payments))
        if partial:
            logger.warning(f"{partial} best solution(s) leave payments unhandled")

    return report
