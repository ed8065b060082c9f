"""
coinselect - Privacy-aware coin selection

Selects coins for a set of payments, spending weak-privacy coins first.
"""

__version__ = "0.1.0"

from coinselect.config import CoinSelectSettings, SelectionConfig
from coinselect.models import (
    AnonsetColor,
    Coin,
    InvalidSelectionInput,
    Payment,
    Solution,
    coin_color,
)
from coinselect.ordering import order_coins
from coinselect.scoring import (
    ScorePreference,
    best_solutions,
    dedupe_solutions,
    score_solution,
    solution_id,
)
from coinselect.selector import select_coins
from coinselect.trials import TrialReport, run_trials

__all__ = [
    "AnonsetColor",
    "Coin",
    "CoinSelectSettings",
    "InvalidSelectionInput",
    "Payment",
    "ScorePreference",
    "SelectionConfig",
    "Solution",
    "TrialReport",
    "best_solutions",
    "coin_color",
    "dedupe_solutions",
    "order_coins",
    "run_trials",
    "score_solution",
    "select_coins",
    "solution_id",
]
