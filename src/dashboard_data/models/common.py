"""
Aggregate models for the dashboard overview page.

Revenue rows come precomputed from the ``revenue`` table; CardData combines
three independent aggregate queries into the summary cards.
"""

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Revenue:
    """Revenue for one month, in whole dollars as stored."""

    month: str
    revenue: int


@dataclass(slots=True, frozen=True)
class CardData:
    """
    Scalar aggregates shown on the overview cards.

    Attributes:
        number_of_customers: Count of rows in ``customers``.
        number_of_invoices: Count of rows in ``invoices``.
        total_paid_invoices: Formatted sum of paid invoice amounts.
        total_pending_invoices: Formatted sum of pending invoice amounts.
    """

    number_of_customers: int
    number_of_invoices: int
    total_paid_invoices: str
    total_pending_invoices: str
