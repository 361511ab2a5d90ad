"""Settings are read from the environment once, blank values treated as unset."""

import pytest

from dashboard_data.config import Settings, get_settings


def test_get_settings_reads_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("POSTGRES_URL", " postgres://user:pw@db.example.com/app ")
    monkeypatch.setenv("VERCEL_ENV", "preview")
    monkeypatch.setenv("DASHBOARD_DATA_SOURCE", "Fixture")

    settings = get_settings()

    assert settings.postgres_url == "postgres://user:pw@db.example.com/app"
    assert settings.vercel_env == "preview"
    assert settings.next_phase is None
    assert settings.data_source == "fixture"


def test_blank_values_are_unset(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("POSTGRES_URL", "   ")

    settings = get_settings()

    assert settings.postgres_url is None
    assert not settings.database_available


@pytest.mark.parametrize(
    ("vercel_env", "next_phase", "expected"),
    [
        ("production", "phase-production-build", True),
        ("production", None, False),
        (None, "phase-production-build", False),
        ("preview", "phase-production-build", False),
    ],
)
def test_build_phase_requires_both_markers(vercel_env, next_phase, expected):
    settings = Settings(
        postgres_url="postgres://db", vercel_env=vercel_env, next_phase=next_phase
    )

    assert settings.is_build_phase is expected
    assert settings.database_available is not expected
