"""Tests for unit conversion helpers."""

from decimal import Decimal

import pytest

from lottery_injector.exceptions import ValidationError
from lottery_injector.utils import (
    double_gas_price,
    format_gwei,
    from_base_units,
    to_base_units,
    utc_timestamp,
)

GWEI = 10**9


class TestBaseUnitConversion:
    """Test decimal amount to wei conversion."""

    def test_whole_amount(self):
        result = to_base_units("2")
        assert result == 2 * 10**18
        assert str(result) == "2000000000000000000"

    def test_fractional_amount(self):
        assert to_base_units("1.5") == 1_500_000_000_000_000_000

    def test_smallest_unit_is_exact(self):
        assert to_base_units("0.000000000000000001") == 1

    def test_decimal_and_int_inputs(self):
        assert to_base_units(Decimal("0.25")) == 250_000_000_000_000_000
        assert to_base_units(3) == 3 * 10**18

    def test_zero(self):
        assert to_base_units("0") == 0

    def test_negative_raises_error(self):
        with pytest.raises(ValidationError):
            to_base_units("-1")

    def test_garbage_raises_error(self):
        with pytest.raises(ValidationError) as excinfo:
            to_base_units("one")
        assert excinfo.value.field == "amount"

    def test_float_rejected(self):
        with pytest.raises(ValidationError):
            to_base_units(1.5)  # type: ignore[arg-type]

    def test_round_trip_back_to_ether(self):
        assert from_base_units(to_base_units("1.5")) == Decimal("1.5")


class TestGasPrice:
    """Test gas price adjustment and formatting."""

    def test_double_gas_price(self):
        assert double_gas_price(5 * GWEI) == 10 * GWEI

    @pytest.mark.parametrize("quote", [0, 1, 3_000_000_001, 2**200])
    def test_double_is_exact(self, quote):
        assert double_gas_price(quote) == quote * 2

    def test_negative_raises_error(self):
        with pytest.raises(ValidationError):
            double_gas_price(-1)

    def test_format_gwei_whole(self):
        assert format_gwei(10 * GWEI) == "10"

    def test_format_gwei_fraction(self):
        assert format_gwei(5_500_000_000) == "5.5"

    def test_format_gwei_zero(self):
        assert format_gwei(0) == "0"


def test_utc_timestamp_is_iso_zulu():
    stamp = utc_timestamp()
    assert stamp.endswith("Z")
    assert "T" in stamp


def test_sub_wei_precision_rejected():
    with pytest.raises(ValidationError):
        to_base_units("0.0000000000000000001")
