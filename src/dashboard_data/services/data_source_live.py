"""
PostgreSQL-backed implementation of DataSource.

This module provides the production data source that:
- Runs parameterised SQL through a pooled ConnectionProvider
- Formats currency amounts once, when rows are mapped into models
- Runs the three overview card aggregates concurrently
- Logs database failures and raises an operation-specific DataAccessError

User-supplied values are always bound as parameters (psycopg2 ``%(name)s``
placeholders); search text is wrapped in ``%...%`` before binding and
matched with ILIKE.
"""

import math
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from typing import Any, Mapping, Sequence

from dashboard_data.lib import logs
from dashboard_data.lib.clients import ConnectionProvider
from dashboard_data.models.common import CardData, Revenue
from dashboard_data.models.customer import CustomerField, CustomerTableRow
from dashboard_data.models.invoice import InvoiceForm, InvoiceTableRow, LatestInvoice
from dashboard_data.services.data_source import (
    ITEMS_PER_PAGE,
    DataAccessError,
    DataSource,
)
from dashboard_data.utils import format_currency

LOG = logs.logger(__file__)

REVENUE_SQL = "SELECT * FROM revenue"

LATEST_INVOICES_SQL = """
    SELECT invoices.amount, customers.name, customers.image_url, customers.email, invoices.id
    FROM invoices
    JOIN customers ON invoices.customer_id = customers.id
    ORDER BY invoices.date DESC
    LIMIT 5
"""

INVOICE_COUNT_SQL = "SELECT COUNT(*) AS count FROM invoices"

CUSTOMER_COUNT_SQL = "SELECT COUNT(*) AS count FROM customers"

INVOICE_STATUS_SQL = """
    SELECT
      SUM(CASE WHEN status = 'paid' THEN amount ELSE 0 END) AS paid,
      SUM(CASE WHEN status = 'pending' THEN amount ELSE 0 END) AS pending
    FROM invoices
"""

# Shared by the invoice table and its page count
_INVOICE_SEARCH = """
    FROM invoices
    JOIN customers ON invoices.customer_id = customers.id
    WHERE
      customers.name ILIKE %(pattern)s OR
      customers.email ILIKE %(pattern)s OR
      invoices.amount::text ILIKE %(pattern)s OR
      invoices.date::text ILIKE %(pattern)s OR
      invoices.status ILIKE %(pattern)s
"""

FILTERED_INVOICES_SQL = f"""
    SELECT
      invoices.id,
      invoices.amount,
      invoices.date,
      invoices.status,
      customers.name,
      customers.email,
      customers.image_url
    {_INVOICE_SEARCH}
    ORDER BY invoices.date DESC
    LIMIT %(limit)s OFFSET %(offset)s
"""

INVOICES_COUNT_SQL = f"SELECT COUNT(*) AS count {_INVOICE_SEARCH}"

INVOICE_BY_ID_SQL = """
    SELECT
      invoices.id,
      invoices.customer_id,
      invoices.amount,
      invoices.status
    FROM invoices
    WHERE invoices.id = %(id)s
"""

CUSTOMERS_SQL = """
    SELECT
      id,
      name
    FROM customers
    ORDER BY name ASC
"""

FILTERED_CUSTOMERS_SQL = """
    SELECT
      customers.id,
      customers.name,
      customers.email,
      customers.image_url,
      COUNT(invoices.id) AS total_invoices,
      SUM(CASE WHEN invoices.status = 'pending' THEN invoices.amount ELSE 0 END) AS total_pending,
      SUM(CASE WHEN invoices.status = 'paid' THEN invoices.amount ELSE 0 END) AS total_paid
    FROM customers
    LEFT JOIN invoices ON customers.id = invoices.customer_id
    WHERE
      customers.name ILIKE %(pattern)s OR
      customers.email ILIKE %(pattern)s
    GROUP BY customers.id, customers.name, customers.email, customers.image_url
    ORDER BY customers.name ASC
"""


def _search_pattern(query: str) -> str:
    return f"%{query}%"


def _count(rows: Sequence[Mapping[str, Any]]) -> int:
    """Return the ``count`` column of a single-row aggregate, zero if NULL."""
    return int(rows[0].get("count") or 0) if rows else 0


def _parse_latest_invoice(row: Mapping[str, Any]) -> LatestInvoice:
    return LatestInvoice(
        id=str(row["id"]),
        name=row["name"],
        image_url=row["image_url"],
        email=row["email"],
        amount=format_currency(row["amount"]),
    )


def _parse_invoice_row(row: Mapping[str, Any]) -> InvoiceTableRow:
    return InvoiceTableRow(
        id=str(row["id"]),
        name=row["name"],
        email=row["email"],
        image_url=row["image_url"],
        date=row["date"],
        amount=row["amount"],
        status=row["status"],
    )


def _parse_invoice_form(row: Mapping[str, Any]) -> InvoiceForm:
    # Stored in cents, edited in dollars
    return InvoiceForm(
        id=str(row["id"]),
        customer_id=str(row["customer_id"]),
        amount=row["amount"] / 100,
        status=row["status"],
    )


def _parse_customer_row(row: Mapping[str, Any]) -> CustomerTableRow:
    return CustomerTableRow(
        id=str(row["id"]),
        name=row["name"],
        email=row["email"],
        image_url=row["image_url"],
        total_invoices=int(row.get("total_invoices") or 0),
        total_pending=format_currency(row.get("total_pending") or 0),
        total_paid=format_currency(row.get("total_paid") or 0),
    )


@contextmanager
def _database_errors(operation: str, message: str) -> Iterator[None]:
    """Log any failure in the block and raise DataAccessError in its place."""
    try:
        yield
    except Exception:
        LOG.error("Database error - operation:%s", operation, exc_info=True)
        raise DataAccessError(operation, message) from None


class LiveDataSource(DataSource):
    """
    Production data source reading from PostgreSQL.

    A single failed statement aborts the whole operation; there are no
    retries and no fixture substitution on failure.

    Attributes:
        connection: Provider of pooled database connections.
    """

    def __init__(self, connection: ConnectionProvider) -> None:
        self.connection = connection

    @property
    def live(self) -> bool:
        """Return True; this source reads from the database."""
        return True

    def fetch_revenue(self) -> Sequence[Revenue]:
        with _database_errors("fetch_revenue", "Failed to fetch revenue data."):
            rows = self.connection.query(REVENUE_SQL)
            return [Revenue(month=row["month"], revenue=row["revenue"]) for row in rows]

    def fetch_latest_invoices(self) -> Sequence[LatestInvoice]:
        with _database_errors(
            "fetch_latest_invoices", "Failed to fetch the latest invoices."
        ):
            rows = self.connection.query(LATEST_INVOICES_SQL)
            return [_parse_latest_invoice(row) for row in rows]

    def fetch_card_data(self) -> CardData:
        """
        Run the three overview aggregates concurrently and combine them.

        The statements are independent reads; the result is assembled only
        after all three have completed, and any failure aborts the call.
        """
        with _database_errors("fetch_card_data", "Failed to fetch card data."):
            with ThreadPoolExecutor(
                max_workers=3, thread_name_prefix="card-data"
            ) as executor:
                invoice_count = executor.submit(self.connection.query, INVOICE_COUNT_SQL)
                customer_count = executor.submit(
                    self.connection.query, CUSTOMER_COUNT_SQL
                )
                invoice_status = executor.submit(
                    self.connection.query, INVOICE_STATUS_SQL
                )
                results = (
                    invoice_count.result(),
                    customer_count.result(),
                    invoice_status.result(),
                )

            invoice_rows, customer_rows, status_rows = results
            totals = status_rows[0] if status_rows else {}
            return CardData(
                number_of_customers=_count(customer_rows),
                number_of_invoices=_count(invoice_rows),
                total_paid_invoices=format_currency(totals.get("paid") or 0),
                total_pending_invoices=format_currency(totals.get("pending") or 0),
            )

    def fetch_filtered_invoices(
        self, query: str, current_page: int
    ) -> Sequence[InvoiceTableRow]:
        offset = (current_page - 1) * ITEMS_PER_PAGE
        with _database_errors("fetch_filtered_invoices", "Failed to fetch invoices."):
            rows = self.connection.query(
                FILTERED_INVOICES_SQL,
                {
                    "pattern": _search_pattern(query),
                    "limit": ITEMS_PER_PAGE,
                    "offset": offset,
                },
            )
            return [_parse_invoice_row(row) for row in rows]

    def fetch_invoices_pages(self, query: str) -> int:
        with _database_errors(
            "fetch_invoices_pages", "Failed to fetch total number of invoices."
        ):
            rows = self.connection.query(
                INVOICES_COUNT_SQL, {"pattern": _search_pattern(query)}
            )
            return math.ceil(_count(rows) / ITEMS_PER_PAGE)

    def fetch_invoice_by_id(self, id: str) -> InvoiceForm | None:
        with _database_errors("fetch_invoice_by_id", "Failed to fetch invoice."):
            rows = self.connection.query(INVOICE_BY_ID_SQL, {"id": id})
            invoices = [_parse_invoice_form(row) for row in rows]
            return invoices[0] if invoices else None

    def fetch_customers(self) -> Sequence[CustomerField]:
        with _database_errors("fetch_customers", "Failed to fetch all customers."):
            rows = self.connection.query(CUSTOMERS_SQL)
            return [CustomerField(id=str(row["id"]), name=row["name"]) for row in rows]

    def fetch_filtered_customers(self, query: str) -> Sequence[CustomerTableRow]:
        with _database_errors(
            "fetch_filtered_customers", "Failed to fetch customer table."
        ):
            rows = self.connection.query(
                FILTERED_CUSTOMERS_SQL, {"pattern": _search_pattern(query)}
            )
            return [_parse_customer_row(row) for row in rows]
