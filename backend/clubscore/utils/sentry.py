import logging
import os
from dataclasses import dataclass
from typing import Optional

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration

logger = logging.getLogger(__name__)


def _env_sample_rate(name: str, default: float = 0.0) -> float:
    """Read a Sentry sample rate; anything outside [0, 1] keeps ``default``."""
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default

    try:
        rate = float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not a number); using %.2f", name, raw, default)
        return default

    if not 0.0 <= rate <= 1.0:
        logger.warning("Ignoring %s=%r (outside 0..1); using %.2f", name, raw, default)
        return default
    return rate


@dataclass(frozen=True)
class SentrySettings:
    dsn: Optional[str] = None
    environment: Optional[str] = None
    traces_sample_rate: float = 0.0
    profiles_sample_rate: float = 0.0

    @property
    def enabled(self) -> bool:
        return bool(self.dsn)

    @classmethod
    def from_env(cls) -> "SentrySettings":
        return cls(
            dsn=(os.getenv("SENTRY_DSN") or "").strip() or None,
            environment=(os.getenv("SENTRY_ENVIRONMENT") or "").strip() or None,
            traces_sample_rate=_env_sample_rate("SENTRY_TRACES_SAMPLE_RATE"),
            profiles_sample_rate=_env_sample_rate("SENTRY_PROFILES_SAMPLE_RATE"),
        )


def sentry_enabled() -> bool:
    return bool((os.getenv("SENTRY_DSN") or "").strip())


def init_sentry(settings: Optional[SentrySettings] = None) -> bool:
    """Start error reporting for the scoring API.

    Settings default to the ``SENTRY_*`` environment variables. Returns
    whether the SDK was initialised.
    """
    settings = settings or SentrySettings.from_env()
    if not settings.enabled:
        logger.info("Error reporting disabled: SENTRY_DSN is not set")
        return False

    sentry_sdk.init(
        dsn=settings.dsn,
        integrations=[FastApiIntegration()],
        environment=settings.environment,
        traces_sample_rate=settings.traces_sample_rate,
        profiles_sample_rate=settings.profiles_sample_rate,
    )
    logger.info(
        "Error reporting enabled (environment=%s, traces=%.2f)",
        settings.environment or "default",
        settings.traces_sample_rate,
    )
    return True
