import logging

import pytest

from clubscore import config
from clubscore.utils import sentry


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, "/api"),
        ("", "/api"),
        ("api", "/api"),
        ("/api/", "/api"),
        (" /club/v1/ ", "/club/v1"),
        ("/", "/"),
    ],
)
def test_canon_prefix(raw, expected):
    assert config._canon_prefix(raw) == expected


def test_parse_positive_int(monkeypatch):
    monkeypatch.setenv("MAX_SETS_PER_MATCH", "5")
    assert config._parse_positive_int("MAX_SETS_PER_MATCH", 3) == 5

    monkeypatch.delenv("MAX_SETS_PER_MATCH", raising=False)
    assert config._parse_positive_int("MAX_SETS_PER_MATCH", 3) == 3


@pytest.mark.parametrize("raw", ["three", "0", "-2"])
def test_parse_positive_int_falls_back(monkeypatch, caplog, raw):
    monkeypatch.setenv("MAX_GAMES_PER_SET", raw)
    with caplog.at_level(logging.WARNING):
        assert config._parse_positive_int("MAX_GAMES_PER_SET", 99) == 99
    assert "MAX_GAMES_PER_SET" in caplog.text


def test_default_limits():
    assert config.MAX_SETS_PER_MATCH == 3
    assert config.MAX_GAMES_PER_SET == 99


@pytest.mark.parametrize(
    "raw, expected",
    [(None, 0.0), ("", 0.0), ("0.25", 0.25), ("1", 1.0), ("lots", 0.0), ("-1", 0.0), ("1.5", 0.0)],
    ids=["unset", "blank", "fraction", "one", "not-a-number", "negative", "above-one"],
)
def test_env_sample_rate(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("SENTRY_TRACES_SAMPLE_RATE", raising=False)
    else:
        monkeypatch.setenv("SENTRY_TRACES_SAMPLE_RATE", raw)
    assert sentry._env_sample_rate("SENTRY_TRACES_SAMPLE_RATE") == expected


def test_env_sample_rate_warns_on_bad_value(monkeypatch, caplog):
    monkeypatch.setenv("SENTRY_PROFILES_SAMPLE_RATE", "2")
    with caplog.at_level(logging.WARNING):
        assert sentry._env_sample_rate("SENTRY_PROFILES_SAMPLE_RATE", 0.1) == 0.1
    assert "outside 0..1" in caplog.text


def test_sentry_settings_from_env(monkeypatch):
    monkeypatch.setenv("SENTRY_DSN", " https://public@sentry.example/1 ")
    monkeypatch.setenv("SENTRY_ENVIRONMENT", " staging ")
    monkeypatch.setenv("SENTRY_TRACES_SAMPLE_RATE", "0.5")
    monkeypatch.delenv("SENTRY_PROFILES_SAMPLE_RATE", raising=False)

    settings = sentry.SentrySettings.from_env()

    assert settings == sentry.SentrySettings(
        dsn="https://public@sentry.example/1",
        environment="staging",
        traces_sample_rate=0.5,
        profiles_sample_rate=0.0,
    )
    assert settings.enabled
    assert sentry.sentry_enabled()


def test_init_sentry_skipped_without_dsn(monkeypatch):
    calls = []
    monkeypatch.setenv("SENTRY_DSN", "   ")
    monkeypatch.setattr(sentry.sentry_sdk, "init", lambda **kwargs: calls.append(kwargs))
    assert sentry.init_sentry() is False
    assert sentry.sentry_enabled() is False
    assert calls == []


def test_init_sentry_with_explicit_settings(monkeypatch):
    calls = []
    monkeypatch.delenv("SENTRY_DSN", raising=False)
    monkeypatch.setattr(sentry.sentry_sdk, "init", lambda **kwargs: calls.append(kwargs))

    settings = sentry.SentrySettings(
        dsn="https://public@sentry.example/1", traces_sample_rate=0.2
    )
    assert sentry.init_sentry(settings) is True
    assert len(calls) == 1
    assert calls[0]["dsn"] == "https://public@sentry.example/1"
    assert calls[0]["environment"] is None
    assert calls[0]["traces_sample_rate"] == 0.2
    assert calls[0]["profiles_sample_rate"] == 0.0
