"""
Invoice views read from the ``invoices`` table.

Amounts are stored as integer cents. LatestInvoice carries the amount already
formatted for display, InvoiceTableRow keeps the stored cents, and
InvoiceForm converts to dollars for the edit form.
"""

import datetime
from dataclasses import dataclass
from typing import Literal

InvoiceStatus = Literal["pending", "paid"]


@dataclass(slots=True, frozen=True)
class LatestInvoice:
    """One of the most recent invoices, joined with its customer."""

    id: str
    name: str
    image_url: str
    email: str
    amount: str


@dataclass(slots=True, frozen=True)
class InvoiceTableRow:
    """A row of the searchable, paginated invoice table."""

    id: str
    name: str
    email: str
    image_url: str
    date: datetime.date
    amount: int
    status: InvoiceStatus


@dataclass(slots=True, frozen=True)
class InvoiceForm:
    """Editable invoice fields with the amount in dollars."""

    id: str
    customer_id: str
    amount: float
    status: InvoiceStatus
