"""Customer fixtures."""

from dashboard_data.models.customer import CustomerField, CustomerTableRow

DEMO_CUSTOMERS: list[CustomerField] = [
    CustomerField(id="1", name="Sample Customer"),
    CustomerField(id="2", name="Sample Customer 2"),
]

DEMO_FILTERED_CUSTOMERS: list[CustomerTableRow] = [
    CustomerTableRow(
        id="1",
        name="Sample Customer",
        email="user@example.com",
        image_url="/customers/customer-1.png",
        total_invoices=5,
        total_pending="$2,000.00",
        total_paid="$5,000.00",
    ),
    CustomerTableRow(
        id="2",
        name="Sample Customer 2",
        email="user2@example.com",
        image_url="/customers/customer-2.png",
        total_invoices=3,
        total_pending="$1,000.00",
        total_paid="$4,000.00",
    ),
]
