"""Tests for configuration helpers."""

import pytest

from flavorhub.config import Settings, parse_storage_backend


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, "memory"),
        ("", "memory"),
        ("memory", "memory"),
        (" Supabase ", "supabase"),
    ],
)
def test_parse_storage_backend(raw: str | None, expected: str) -> None:
    assert parse_storage_backend(raw) == expected


def test_parse_storage_backend_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown storage backend"):
        parse_storage_backend("mysql")


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STORAGE_BACKEND", "supabase")
    monkeypatch.setenv("DAILY_PICK_TIMEZONE", "Europe/Rome")
    monkeypatch.setenv("SEED_SAMPLE_RECIPES", "true")

    settings = Settings(_env_file=None)

    assert settings.storage_backend == "supabase"
    assert settings.daily_pick_timezone == "Europe/Rome"
    assert settings.seed_sample_recipes is True
