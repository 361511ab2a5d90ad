"""Data source selection from settings and the environment."""

import pytest

from dashboard_data.config import Settings
from dashboard_data.lib import clients
from dashboard_data.services import (
    FixtureDataSource,
    LiveDataSource,
    build_data_source,
    get_data_source,
)


class RecordingPool:
    def __init__(self, maxconn, *args, **kwargs):
        self.maxconn = maxconn
        self.kwargs = kwargs


@pytest.fixture(autouse=True)
def no_real_pool(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(clients, "LazyConnectionPool", RecordingPool)


def _settings(**overrides) -> Settings:
    values = {"postgres_url": "postgres://db", "vercel_env": None, "next_phase": None}
    values.update(overrides)
    return Settings(**values)


def test_live_when_database_configured(caplog):
    caplog.set_level("INFO")

    source = build_data_source(_settings())

    assert isinstance(source, LiveDataSource)
    assert source.connection.pool.kwargs["sslmode"] == "require"
    assert "LiveDataSource live:True" in caplog.text


def test_fixture_without_connection_string(caplog):
    caplog.set_level("INFO")

    source = build_data_source(_settings(postgres_url=None))

    assert isinstance(source, FixtureDataSource)
    assert "database unavailable" in caplog.text
    assert "FixtureDataSource live:False" in caplog.text


def test_fixture_during_production_build():
    settings = _settings(vercel_env="production", next_phase="phase-production-build")

    assert isinstance(build_data_source(settings), FixtureDataSource)


def test_explicit_kind_overrides_availability():
    assert isinstance(build_data_source(_settings(), "fixture"), FixtureDataSource)
    assert isinstance(build_data_source(_settings(data_source="fixture")), FixtureDataSource)


def test_unknown_kind_is_rejected():
    with pytest.raises(ValueError, match="Unknown data source kind: mongo"):
        build_data_source(_settings(), "mongo")


def test_forced_live_without_database_is_rejected():
    with pytest.raises(ValueError, match="POSTGRES_URL"):
        build_data_source(_settings(postgres_url=None), "live")


def test_get_data_source_is_built_once(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("POSTGRES_URL", "postgres://db")

    first = get_data_source()
    monkeypatch.delenv("POSTGRES_URL")

    assert get_data_source() is first
    assert isinstance(first, LiveDataSource)


def test_get_data_source_reads_build_markers(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("POSTGRES_URL", "postgres://db")
    monkeypatch.setenv("VERCEL_ENV", "production")
    monkeypatch.setenv("NEXT_PHASE", "phase-production-build")

    assert isinstance(get_data_source(), FixtureDataSource)
