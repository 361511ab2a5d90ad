"""
Static fixtures for the dashboard data layer.

This package contains the datasets served by FixtureDataSource when no
database connection is available (production builds, local development
without POSTGRES_URL).

Modules:
- demo_revenue: Twelve months of revenue
- demo_invoices: Invoice views and the overview card totals
- demo_customers: Customer options and the customer table
"""
