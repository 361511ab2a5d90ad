"""Formatting helpers shared by the data sources."""

from decimal import Decimal


def format_currency(amount: int | Decimal) -> str:
    """
    Format an amount stored in cents as a US dollar string.

    Args:
        amount: Amount in minor units (cents). Database sums arrive as
            Decimal and are accepted as-is.

    Returns:
        Formatted string like '$1,234.56' (or '-$1,234.56').
    """
    value = Decimal(amount) / 100
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"
