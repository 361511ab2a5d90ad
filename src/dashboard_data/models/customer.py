"""Customer views read from the ``customers`` table."""

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class CustomerField:
    """Customer option for select inputs."""

    id: str
    name: str


@dataclass(slots=True, frozen=True)
class CustomerTableRow:
    """
    A customer with aggregated invoice totals.

    Customers without invoices are included with zero totals.

    Attributes:
        total_invoices: Number of invoices issued to the customer.
        total_pending: Formatted sum of pending invoice amounts.
        total_paid: Formatted sum of paid invoice amounts.
    """

    id: str
    name: str
    email: str
    image_url: str
    total_invoices: int
    total_pending: str
    total_paid: str
