"""
Amount helpers.

Money is accepted as numbers and stored as canonical text so repeated
read/write cycles never accumulate binary floating point drift:

    format_amount(18.0)        -> "18"
    format_amount("10.50")     -> "10.5"
    sales_total(100, 50, 25)   -> "175"
"""

from decimal import Decimal, InvalidOperation


def to_decimal(value) -> Decimal:
    """Convert an int, float, Decimal or numeric string to Decimal."""
    if isinstance(value, bool):
        raise TypeError("Amount cannot be a boolean")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Invalid amount: {value!r}")
    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    return amount


def format_amount(value) -> str:
    """Canonical text form: plain notation, no trailing zeros."""
    amount = to_decimal(value)
    if amount == 0:
        return "0"
    return format(amount.normalize(), "f")


def sum_amounts(values) -> str:
    """Exact decimal sum of amounts, as canonical text."""
    return format_amount(sum((to_decimal(v) for v in values), Decimal("0")))


def sales_total(cash, card, upi) -> str:
    """Derived daily sales total."""
    return sum_amounts((cash, card, upi))
