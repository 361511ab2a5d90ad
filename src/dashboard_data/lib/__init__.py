"""
Local library modules shared by the data sources.

Modules:
    logs: Logging utilities
    clients: PostgreSQL connection provisioning
"""

from dashboard_data.lib import clients, logs

__all__ = ["clients", "logs"]
