"""
Fixture implementation of DataSource using static in-memory data.

This source is selected when no database connection is available:
- Production builds that prerender pages without database access
- Local development without POSTGRES_URL

Every operation returns its fixture exactly, whatever the arguments.
Serving fixtures is expected behaviour, so it is logged at INFO level.
"""

from typing import Sequence

from dashboard_data.data import demo_customers, demo_invoices, demo_revenue
from dashboard_data.lib import logs
from dashboard_data.models.common import CardData, Revenue
from dashboard_data.models.customer import CustomerField, CustomerTableRow
from dashboard_data.models.invoice import InvoiceForm, InvoiceTableRow, LatestInvoice
from dashboard_data.services.data_source import DataSource

LOG = logs.logger(__file__)


class FixtureDataSource(DataSource):
    """In-memory data source backed by the demo fixtures."""

    def fetch_revenue(self) -> Sequence[Revenue]:
        LOG.info("fetch_revenue - serving fixture data")
        return list(demo_revenue.DEMO_REVENUE)

    def fetch_latest_invoices(self) -> Sequence[LatestInvoice]:
        LOG.info("fetch_latest_invoices - serving fixture data")
        return list(demo_invoices.DEMO_LATEST_INVOICES)

    def fetch_card_data(self) -> CardData:
        LOG.info("fetch_card_data - serving fixture data")
        return demo_invoices.DEMO_CARD_DATA

    def fetch_filtered_invoices(
        self, query: str, current_page: int
    ) -> Sequence[InvoiceTableRow]:
        LOG.info(
            "fetch_filtered_invoices - serving fixture data query:%s page:%s",
            query,
            current_page,
        )
        return list(demo_invoices.DEMO_FILTERED_INVOICES)

    def fetch_invoices_pages(self, query: str) -> int:
        return demo_invoices.DEMO_INVOICE_PAGES

    def fetch_invoice_by_id(self, id: str) -> InvoiceForm | None:
        LOG.info("fetch_invoice_by_id - serving fixture data id:%s", id)
        return demo_invoices.DEMO_INVOICE

    def fetch_customers(self) -> Sequence[CustomerField]:
        LOG.info("fetch_customers - serving fixture data")
        return list(demo_customers.DEMO_CUSTOMERS)

    def fetch_filtered_customers(self, query: str) -> Sequence[CustomerTableRow]:
        LOG.info("fetch_filtered_customers - serving fixture data query:%s", query)
        return list(demo_customers.DEMO_FILTERED_CUSTOMERS)
