"""Shared pytest fixtures: isolated environment and a fake database connection."""

from threading import Lock
from typing import Any, Callable, Mapping

import pytest

import dashboard_data.config as config
from dashboard_data.services import get_data_source

_ENV_VARS = ("POSTGRES_URL", "VERCEL_ENV", "NEXT_PHASE", "DASHBOARD_DATA_SOURCE")


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch):
    """Clear data layer variables, skip .env loading and reset the cached source."""

    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "load_dotenv", lambda **kwargs: False)
    get_data_source.cache_clear()
    yield
    get_data_source.cache_clear()


class FakeConnection:
    """
    Stand-in for ConnectionProvider that answers statements from a table.

    ``answers`` maps a SQL statement to rows, to an exception to raise, or to
    a callable receiving the bound parameters. Every call is recorded.
    """

    def __init__(self, answers: Mapping[str, Any]) -> None:
        self.answers = dict(answers)
        self.calls: list[tuple[str, dict]] = []
        self._lock = Lock()

    def query(self, sql: str, params: Mapping[str, Any] | None = None) -> list[dict]:
        params = dict(params or {})
        with self._lock:
            self.calls.append((sql, params))
        answer = self.answers[sql]
        if isinstance(answer, Exception):
            raise answer
        if callable(answer):
            return answer(params)
        return answer


@pytest.fixture
def fake_connection() -> Callable[[Mapping[str, Any]], FakeConnection]:
    """Build a FakeConnection from a statement-to-answer mapping."""

    return FakeConnection
