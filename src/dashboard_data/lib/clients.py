"""
PostgreSQL connection provisioning for the live data source.

get_connection() decides once, from Settings, whether a database handle can
be built. It returns either a ConnectionProvider wrapping a thread-safe
connection pool or the UNAVAILABLE sentinel; it never raises.

The pool opens connections on demand, so a bad URL or an unreachable host
surfaces on the first query instead of at startup. Returned connections are
kept for reuse, up to the pool size.
"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from threading import BoundedSemaphore
from typing import Any

from psycopg2.extras import RealDictCursor
from psycopg2.pool import ThreadedConnectionPool

from dashboard_data.config import Settings
from dashboard_data.lib import logs

LOG = logs.logger(__file__)

# Upper bound of physical connections shared by all concurrent calls
_MAX_CONNECTIONS = 10


class _Unavailable:
    """Marker returned when no database handle can be provided."""

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNAVAILABLE"


UNAVAILABLE = _Unavailable()


class LazyConnectionPool(ThreadedConnectionPool):
    """
    ThreadedConnectionPool that connects on first use and keeps what it opens.

    psycopg2 pre-opens ``minconn`` connections and closes any returned
    connection beyond ``minconn``. This pool starts empty and raises
    ``minconn`` to ``maxconn`` afterwards, so every returned connection stays
    idle in the pool (rolled back if a transaction is open).
    """

    def __init__(self, maxconn: int, *args: Any, **kwargs: Any) -> None:
        super().__init__(0, maxconn, *args, **kwargs)
        self.minconn = maxconn


class ConnectionProvider:
    """
    Thread-safe access to pooled PostgreSQL connections.

    Every statement borrows a connection, runs with bound parameters on a
    RealDictCursor and hands the connection back. The pool rolls back the
    read transaction on return, so each call sees the latest committed data.
    When every connection is in use, callers wait for one to be returned
    instead of failing.

    Attributes:
        pool: Underlying psycopg2 connection pool.
    """

    def __init__(self, pool: ThreadedConnectionPool) -> None:
        self.pool = pool
        self._slots = BoundedSemaphore(pool.maxconn)

    @contextmanager
    def connection(self) -> Iterator[Any]:
        """Borrow a pooled connection for the duration of the block."""
        with self._slots:
            conn = self.pool.getconn()
            try:
                yield conn
            finally:
                self.pool.putconn(conn)

    def query(
        self, sql: str, params: Mapping[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        """
        Execute one statement and return its rows as dictionaries.

        Args:
            sql: Statement using psycopg2 ``%(name)s`` placeholders.
            params: Values bound to the placeholders.

        Returns:
            List of column-name keyed rows.
        """
        with self.connection() as conn:
            with conn.cursor(cursor_factory=RealDictCursor) as cur:
                cur.execute(sql, params or {})
                return [dict(row) for row in cur.fetchall()]

    def close(self) -> None:
        """Close every pooled connection."""
        self.pool.closeall()


def get_connection(settings: Settings) -> ConnectionProvider | _Unavailable:
    """
    Return a connection provider, or UNAVAILABLE when none can be built.

    A handle is unavailable while a production build is running or when
    no connection string is configured.

    Args:
        settings: Environment settings read at process start.
    """
    if settings.is_build_phase:
        LOG.info("get_connection - production build phase, database unavailable")
        return UNAVAILABLE
    if not settings.postgres_url:
        LOG.info("get_connection - POSTGRES_URL not set, database unavailable")
        return UNAVAILABLE

    pool = LazyConnectionPool(
        _MAX_CONNECTIONS,
        dsn=settings.postgres_url,
        sslmode="require",
    )
    return ConnectionProvider(pool)
