"""
Abstract base class defining the dashboard data access contract.

All data sources extend DataSource and implement the eight read
operations used by the dashboard pages. Every call re-reads its data;
nothing is cached between calls.

Implementations:
- FixtureDataSource: Static fixtures for builds and offline development
- LiveDataSource: Parameterised SQL against PostgreSQL
"""

from abc import ABC, abstractmethod
from typing import Sequence

from dashboard_data.models.common import CardData, Revenue
from dashboard_data.models.customer import CustomerField, CustomerTableRow
from dashboard_data.models.invoice import InvoiceForm, InvoiceTableRow, LatestInvoice

# Rows per page of the invoice table
ITEMS_PER_PAGE = 6


class DataAccessError(RuntimeError):
    """
    Raised when a read operation fails against the database.

    The message names the failed operation only; the underlying database
    error is logged and not exposed to the caller.

    Attributes:
        operation: Name of the data source method that failed.
    """

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(message)
        self.operation = operation


class DataSource(ABC):
    """Abstract base class for dashboard data access."""

    @abstractmethod
    def fetch_revenue(self) -> Sequence[Revenue]:
        """Return every row of the monthly revenue table, as stored."""

    @abstractmethod
    def fetch_latest_invoices(self) -> Sequence[LatestInvoice]:
        """Return the five most recent invoices with formatted amounts."""

    @abstractmethod
    def fetch_card_data(self) -> CardData:
        """Return customer and invoice counts with paid/pending totals."""

    @abstractmethod
    def fetch_filtered_invoices(
        self, query: str, current_page: int
    ) -> Sequence[InvoiceTableRow]:
        """
        Return one page of invoices matching the search query.

        Args:
            query: Case-insensitive text matched against customer name,
                email, amount, date and status. Empty matches everything.
            current_page: Page number (1-indexed), ITEMS_PER_PAGE rows each.
        """

    @abstractmethod
    def fetch_invoices_pages(self, query: str) -> int:
        """Return the number of invoice pages matching the search query."""

    @abstractmethod
    def fetch_invoice_by_id(self, id: str) -> InvoiceForm | None:
        """Return the invoice with the given id, or None when absent."""

    @abstractmethod
    def fetch_customers(self) -> Sequence[CustomerField]:
        """Return id and name of every customer, ordered by name."""

    @abstractmethod
    def fetch_filtered_customers(self, query: str) -> Sequence[CustomerTableRow]:
        """
        Return customers matching the query with their invoice totals.

        Args:
            query: Case-insensitive text matched against name or email.
        """

    @property
    def live(self) -> bool:
        """
        Check if this source reads from the database.

        Returns:
            True for database-backed sources. Default implementation
            returns False.
        """
        return False
