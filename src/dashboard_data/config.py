"""
Environment configuration for the dashboard data layer.

This is the only module that reads the connection and build-stage
variables. A ``.env`` file is loaded when present (local development);
hosted deployments inject the same names directly.

Environment variables:
    POSTGRES_URL: Connection string for the dashboard database.
    VERCEL_ENV: Deployment stage reported by the host.
    NEXT_PHASE: Build phase reported by the frontend build.
    DASHBOARD_DATA_SOURCE: Optional override, ``live`` or ``fixture``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

PRODUCTION_STAGE = "production"
PRODUCTION_BUILD_PHASE = "phase-production-build"


@dataclass(frozen=True)
class Settings:
    postgres_url: str | None
    vercel_env: str | None
    next_phase: str | None

    # Explicit data source kind; None lets the factory decide
    data_source: str | None = None

    @property
    def is_build_phase(self) -> bool:
        """Return True while a production build is prerendering pages."""
        return (
            self.vercel_env == PRODUCTION_STAGE
            and self.next_phase == PRODUCTION_BUILD_PHASE
        )

    @property
    def database_available(self) -> bool:
        """Return True when a live connection may be attempted."""
        return bool(self.postgres_url) and not self.is_build_phase


def _getenv(name: str, default: str | None = None) -> str | None:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def get_settings() -> Settings:
    """Read the data layer settings from the process environment."""
    load_dotenv(override=False)

    data_source = _getenv("DASHBOARD_DATA_SOURCE")
    return Settings(
        postgres_url=_getenv("POSTGRES_URL"),
        vercel_env=_getenv("VERCEL_ENV"),
        next_phase=_getenv("NEXT_PHASE"),
        data_source=data_source.lower() if data_source else None,
    )
