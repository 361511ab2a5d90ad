"""
Read operations consumed by the dashboard pages.

Each function delegates to a DataSource: the one passed in, or the
process-wide source from get_data_source(). Tests and hosts that manage
their own connection pass a source explicitly.

Live failures raise DataAccessError with an operation-specific message.
"""

from typing import Sequence

from dashboard_data.models.common import CardData, Revenue
from dashboard_data.models.customer import CustomerField, CustomerTableRow
from dashboard_data.models.invoice import InvoiceForm, InvoiceTableRow, LatestInvoice
from dashboard_data.services import DataSource, get_data_source


def _resolve(source: DataSource | None) -> DataSource:
    return source if source is not None else get_data_source()


def fetch_revenue(source: DataSource | None = None) -> Sequence[Revenue]:
    return _resolve(source).fetch_revenue()


def fetch_latest_invoices(source: DataSource | None = None) -> Sequence[LatestInvoice]:
    return _resolve(source).fetch_latest_invoices()


def fetch_card_data(source: DataSource | None = None) -> CardData:
    return _resolve(source).fetch_card_data()


def fetch_filtered_invoices(
    query: str, current_page: int, source: DataSource | None = None
) -> Sequence[InvoiceTableRow]:
    """Return one page (1-indexed) of invoices matching the search query."""
    return _resolve(source).fetch_filtered_invoices(query, current_page)


def fetch_invoices_pages(query: str, source: DataSource | None = None) -> int:
    """Return the number of invoice pages matching the search query."""
    return _resolve(source).fetch_invoices_pages(query)


def fetch_invoice_by_id(id: str, source: DataSource | None = None) -> InvoiceForm | None:
    """Return the invoice for the edit form, or None when it does not exist."""
    return _resolve(source).fetch_invoice_by_id(id)


def fetch_customers(source: DataSource | None = None) -> Sequence[CustomerField]:
    return _resolve(source).fetch_customers()


def fetch_filtered_customers(
    query: str, source: DataSource | None = None
) -> Sequence[CustomerTableRow]:
    """Return customers matching the search query with their invoice totals."""
    return _resolve(source).fetch_filtered_customers(query)
