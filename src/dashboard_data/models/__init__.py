"""
Dataclasses returned by the dashboard data layer.

This package provides:
- Revenue and summary card models
- Invoice views (latest invoices, invoice table rows, edit form)
- Customer views (select options, customer table rows)

All models are frozen dataclasses; fixtures can be shared safely between calls.
"""

from dashboard_data.models.common import CardData, Revenue
from dashboard_data.models.customer import CustomerField, CustomerTableRow
from dashboard_data.models.invoice import (
    InvoiceForm,
    InvoiceStatus,
    InvoiceTableRow,
    LatestInvoice,
)

__all__ = [
    "CardData",
    "CustomerField",
    "CustomerTableRow",
    "InvoiceForm",
    "InvoiceStatus",
    "InvoiceTableRow",
    "LatestInvoice",
    "Revenue",
]
