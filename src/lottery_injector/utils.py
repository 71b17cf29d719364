"""Unit conversion helpers for the lottery fund injector."""

from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation

from web3 import Web3

from .constants import ETHER_UNIT, GAS_PRICE_MULTIPLIER, GWEI_UNIT
from .exceptions import ValidationError


def to_base_units(amount: str | Decimal | int, unit: str = ETHER_UNIT) -> int:
    """Convert a human-readable decimal amount into integer base units.

    Floats are rejected; pass a string or ``Decimal`` so exact inputs stay exact.
    """
    if isinstance(amount, float):
        raise ValidationError(
            "Amount must be a decimal string, not a float", field="amount", value=amount
        )

    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount).strip())
    except InvalidOperation:
        raise ValidationError("Amount is not a valid decimal number", field="amount", value=amount)

    if not value.is_finite():
        raise ValidationError("Amount must be finite", field="amount", value=amount)
    if value < 0:
        raise ValidationError("Amount cannot be negative", field="amount", value=amount)

    try:
        base_units = int(Web3.to_wei(value, unit))
    except ValueError as exc:
        raise ValidationError(str(exc), field="amount", value=amount) from exc

    if from_base_units(base_units, unit) != value:
        raise ValidationError(
            f"Amount has more precision than {unit} allows", field="amount", value=amount
        )

    return base_units


def from_base_units(value: int, unit: str = ETHER_UNIT) -> Decimal:
    """Convert integer base units back to a Decimal in ``unit``."""
    return Decimal(Web3.from_wei(value, unit))


def double_gas_price(gas_price: int) -> int:
    """Apply the fixed gas price multiplier to a provider quote (in wei)."""
    if gas_price < 0:
        raise ValidationError("Gas price cannot be negative", field="gas_price", value=gas_price)
    return int(gas_price) * GAS_PRICE_MULTIPLIER


def format_gwei(value: int) -> str:
    """Render a wei amount in gwei without trailing zeros, e.g. ``10`` or ``5.5``."""
    return format(from_base_units(value, GWEI_UNIT).normalize(), "f")


def utc_timestamp() -> str:
    """Current time as an ISO-8601 UTC string with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
