"""
Data source factory for the dashboard data layer.

This module provides the get_data_source() factory function that returns
the appropriate DataSource implementation based on configuration.

Available Implementations:
- fixture: Static fixtures (no database required)
- live: PostgreSQL-backed source (requires POSTGRES_URL)

Without an explicit kind (argument or DASHBOARD_DATA_SOURCE), the live
source is used whenever a connection can be provisioned and the fixture
source otherwise. The source is cached at the module level, so the same
instance and connection pool are reused across all requests.
"""

from functools import cache
from typing import Callable, Dict

from dashboard_data.config import Settings, get_settings
from dashboard_data.lib import clients, logs
from dashboard_data.services.data_source import (
    ITEMS_PER_PAGE,
    DataAccessError,
    DataSource,
)
from dashboard_data.services.data_source_fixture import FixtureDataSource
from dashboard_data.services.data_source_live import LiveDataSource

LOG = logs.logger(__file__)

__all__ = [
    "ITEMS_PER_PAGE",
    "DataAccessError",
    "DataSource",
    "FixtureDataSource",
    "LiveDataSource",
    "build_data_source",
    "get_data_source",
]


def _live(settings: Settings) -> DataSource:
    connection = clients.get_connection(settings)
    if connection is clients.UNAVAILABLE:
        raise ValueError("Live data source requires POSTGRES_URL outside the build phase")
    return LiveDataSource(connection)


_SOURCE_REGISTRY: Dict[str, Callable[[Settings], DataSource]] = {
    "fixture": lambda settings: FixtureDataSource(),
    "live": _live,
}


def build_data_source(settings: Settings, kind: str | None = None) -> DataSource:
    """
    Construct a data source for the given settings.

    Args:
        settings: Environment settings.
        kind: Registry key to force, or None to use settings.data_source
            and then connection availability.

    Raises:
        ValueError: If the kind is unknown, or ``live`` is forced without
            an available connection.
    """
    resolved_kind = (kind or settings.data_source or "").lower()
    if not resolved_kind and settings.database_available:
        resolved_kind = "live"
    elif not resolved_kind:
        LOG.info("build_data_source - database unavailable, using fixture data")
        resolved_kind = "fixture"
    LOG.info("build_data_source - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _SOURCE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown data source kind: {resolved_kind}"
        raise ValueError(msg) from exc
    source = factory(settings)
    LOG.info("build_data_source - %s live:%s", type(source).__name__, source.live)
    return source


@cache
def get_data_source(kind: str | None = None) -> DataSource:
    """Return the process-wide data source, built once from the environment."""
    return build_data_source(get_settings(), kind)
