"""
Tests for coin selection data models.
"""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

import pytest
from pydantic import ValidationError

from coinselect.models import AnonsetColor, Coin, Payment, Solution, coin_color, format_amount
from helpers import make_coin


class TestCoin:
    """Tests for Coin model."""

    def test_create(self) -> None:
        coin = Coin(name="c1", value=Decimal("1.5"), anonymity_set=3, origin_id="tx1")
        assert coin.value == Decimal("1.5")
        assert coin.anonymity_set == 3.0
        assert coin.origin_id == "tx1"

    def test_origin_defaults_to_none(self) -> None:
        coin = Coin(name="c1", value=Decimal(1))
        assert coin.origin_id is None
        assert coin.anonymity_set == 0.0

    def test_value_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Coin(name="c1", value=Decimal(-1))
        with pytest.raises(ValidationError):
            Coin(name="c1", value=Decimal(0))

    def test_anonymity_set_must_be_non_negative(self) -> None:
        with pytest.raises(ValidationError):
            Coin(name="c1", value=Decimal(1), anonymity_set=-1)

    def test_name_required(self) -> None:
        with pytest.raises(ValidationError):
            Coin(name="", value=Decimal(1))

    def test_immutable(self) -> None:
        coin = Coin(name="c1", value=Decimal(1))
        with pytest.raises(ValidationError):
            coin.value = Decimal(2)


class TestPayment:
    """Tests for Payment model."""

    def test_value_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Payment(value=Decimal(-5))

    def test_equal_values_compare_equal(self) -> None:
        assert Payment(value=Decimal(5)) == Payment(value=Decimal(5))


class TestCoinColor:
    """Tests for coin classification."""

    @pytest.mark.parametrize(
        ("anonymity_set", "expected"),
        [
            (0, AnonsetColor.RED),
            (0.5, AnonsetColor.ORANGE),
            (1, AnonsetColor.ORANGE),
            (2, AnonsetColor.GREEN),
            (50, AnonsetColor.GREEN),
        ],
    )
    def test_colors(self, anonymity_set: float, expected: AnonsetColor) -> None:
        coin = make_coin("c", 1, anonymity_set)
        assert coin_color(coin, 2) == expected
        assert coin.color(2) == expected

    def test_rank_order(self) -> None:
        assert AnonsetColor.RED.rank < AnonsetColor.ORANGE.rank < AnonsetColor.GREEN.rank


class TestFormatAmount:
    """Tests for canonical amount formatting."""

    def test_integral(self) -> None:
        assert format_amount(Decimal(5)) == "5"
        assert format_amount(Decimal("5.00")) == "5"
        assert format_amount(Decimal(50)) == "50"

    def test_fractional(self) -> None:
        assert format_amount(Decimal("2.50")) == "2.5"


class TestSolution:
    """Tests for Solution derived values."""

    def test_empty(self) -> None:
        solution = Solution()
        assert solution.total_value == 0
        assert solution.total_payment_value == 0
        assert solution.leftover_value == 0
        assert solution.time_elapsed == timedelta()
        assert solution.id == ""

    def test_totals(self) -> None:
        solution = Solution(
            coins=[make_coin("A", 10), make_coin("B", 5, 1)],
            handled_payments=[Payment(value=Decimal(7))],
        )
        assert solution.total_value == Decimal(15)
        assert solution.total_payment_value == Decimal(7)
        assert solution.leftover_value == Decimal(8)

    def test_count_color(self) -> None:
        solution = Solution(coins=[make_coin("A", 10), make_coin("B", 5, 1), make_coin("C", 1)])
        assert solution.count_color(AnonsetColor.RED, 2) == 2
        assert solution.count_color(AnonsetColor.ORANGE, 2) == 1
        assert solution.count_color(AnonsetColor.GREEN, 2) == 0
