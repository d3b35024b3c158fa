import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Avoid startup validation errors when importing the app
os.environ.setdefault("ALLOWED_ORIGINS", "http://testserver")
os.environ.setdefault("ALLOW_CREDENTIALS", "false")
os.environ.setdefault("DISABLE_RATE_LIMITS", "true")
os.environ.pop("SENTRY_DSN", None)


@pytest.fixture(autouse=True)
def rate_limits_disabled(monkeypatch):
    """Keep the per-client limits out of the way unless a test opts in."""
    monkeypatch.setenv("DISABLE_RATE_LIMITS", "true")
    yield
