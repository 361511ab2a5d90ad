"""
Dashboard Data: the data-access layer behind the invoicing dashboard.

This package fetches revenue, invoice and customer records from PostgreSQL,
formats them for display, and serves static fixtures when no database is
reachable (for example while a production build is being prerendered).

Subpackages:
- lib: Logging and PostgreSQL connection helpers
- models: Dataclasses returned to the dashboard
- services: Data sources (fixture and live implementations) and the factory
- data: Static fixtures served by the fixture data source

Main entry points:
- queries: The fetch_* functions consumed by the dashboard pages
- services.get_data_source(): The process-wide data source
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
