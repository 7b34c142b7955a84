"""Application settings read from the environment.

Infrastructure (databases, event store) is configured in ``domain.toml``;
this module only holds the knobs the storefront itself needs.
"""

import os
from dataclasses import dataclass
from datetime import timedelta
from functools import lru_cache

_TRUTHY = {"1", "true", "yes", "on"}


def _flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    """Storefront runtime settings."""

    jwt_secret: str
    jwt_refresh_secret: str
    access_token_ttl: timedelta
    refresh_token_ttl: timedelta
    verification_artifacts_enabled: bool
    verification_fail_open: bool


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings. Call ``get_settings.cache_clear()`` to re-read."""
    return Settings(
        jwt_secret=os.getenv("JWT_SECRET", "dev-access-secret-change-me-before-deploying"),
        jwt_refresh_secret=os.getenv("JWT_REFRESH_SECRET", "dev-refresh-secret-change-me-before-deploying"),
        access_token_ttl=timedelta(minutes=int(os.getenv("ACCESS_TOKEN_TTL_MINUTES", "15"))),
        refresh_token_ttl=timedelta(days=int(os.getenv("REFRESH_TOKEN_TTL_DAYS", "7"))),
        verification_artifacts_enabled=_flag("ORDER_VERIFICATION_ARTIFACTS"),
        verification_fail_open=_flag("ORDER_VERIFICATION_FAIL_OPEN"),
    )
