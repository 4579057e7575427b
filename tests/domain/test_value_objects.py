"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from bakery.domain.exceptions import ValidationError
from bakery.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("150.00"))
        assert m.amount == Decimal("150.00")
        assert m.currency == "PHP"

    def test_of_factory_from_string(self):
        m = Money.of("80.50")
        assert m.amount == Decimal("80.50")

    def test_of_factory_from_int(self):
        m = Money.of(10)
        assert m.amount == Decimal("10")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("twelve")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(1.5)

    def test_addition(self):
        result = Money.of("300.00") + Money.of("80.00")
        assert result == Money.of("380.00")

    def test_multiplication_by_int(self):
        result = Money.of("150.00") * 2
        assert result == Money.of("300.00")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("150.00") * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "PHP") + Money(Decimal("5"), "USD")

    def test_str_formatting(self):
        assert str(Money.of("150")) == "₱150.00"
        assert str(Money.of("9.5")) == "₱9.50"

    def test_zero(self):
        assert Money.zero() == Money.of("0.00")

    def test_of_rounds_to_centavo(self):
        assert Money.of("12.345").amount == Decimal("12.35")
        assert Money.of(" 80 ").amount == Decimal("80.00")

    def test_of_rejects_non_finite(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("NaN")

    def test_total(self):
        assert Money.total([Money.of("300"), Money.of("80")]) == Money.of("380.00")
        assert Money.total([]) == Money.zero()


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        q = Quantity(5)
        assert q.value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)

    def test_str(self):
        assert str(Quantity(7)) == "7"
