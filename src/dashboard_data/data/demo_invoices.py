"""
Invoice fixtures.

Amounts follow the same conventions as the live queries: latest invoices and
card totals are pre-formatted, table rows keep cents, and the edit form holds
dollars.
"""

from datetime import date

from dashboard_data.models.common import CardData
from dashboard_data.models.invoice import InvoiceForm, InvoiceTableRow, LatestInvoice

DEMO_LATEST_INVOICES: list[LatestInvoice] = [
    LatestInvoice(
        id="1",
        name="Sample Customer",
        email="user@example.com",
        image_url="/customers/customer-1.png",
        amount="$250.00",
    ),
    LatestInvoice(
        id="2",
        name="Sample Customer 2",
        email="user2@example.com",
        image_url="/customers/customer-2.png",
        amount="$150.00",
    ),
    LatestInvoice(
        id="3",
        name="Sample Customer 3",
        email="user3@example.com",
        image_url="/customers/customer-3.png",
        amount="$350.00",
    ),
    LatestInvoice(
        id="4",
        name="Sample Customer 4",
        email="user4@example.com",
        image_url="/customers/customer-4.png",
        amount="$450.00",
    ),
    LatestInvoice(
        id="5",
        name="Sample Customer 5",
        email="user5@example.com",
        image_url="/customers/customer-5.png",
        amount="$550.00",
    ),
]

DEMO_CARD_DATA = CardData(
    number_of_customers=10,
    number_of_invoices=25,
    total_paid_invoices="$12,000.00",
    total_pending_invoices="$5,000.00",
)

DEMO_FILTERED_INVOICES: list[InvoiceTableRow] = [
    InvoiceTableRow(
        id="1",
        name="Sample Customer",
        email="user@example.com",
        image_url="/customers/customer-1.png",
        date=date(2023, 12, 1),
        amount=15000,
        status="pending",
    ),
    InvoiceTableRow(
        id="2",
        name="Sample Customer 2",
        email="user2@example.com",
        image_url="/customers/customer-2.png",
        date=date(2023, 11, 15),
        amount=20000,
        status="paid",
    ),
]

# The fixture table fits on a single page
DEMO_INVOICE_PAGES = 1

DEMO_INVOICE = InvoiceForm(id="1", customer_id="1", amount=150.0, status="pending")
