"""Tests for Settings validation."""

import pytest
from pydantic import ValidationError

from comingsoon.core.config import Settings
from comingsoon.domain.value_objects import CivilTimestamp


def test_defaults_load() -> None:
    settings = Settings(_env_file=None, launch_target="2026-12-01T10:00:00")
    assert settings.launch_target_timestamp == CivilTimestamp(2026, 12, 1, 10)
    assert settings.countdown_interval_seconds == 1.0
    assert settings.guard_reentrant_submit is True
    assert settings.strict_form_validity is False


def test_social_links_are_split() -> None:
    settings = Settings(_env_file=None, social_links=" https://a.example , ,https://b.example")
    assert settings.social_link_list == ["https://a.example", "https://b.example"]


@pytest.mark.parametrize(
    "overrides",
    [
        {"launch_target": "soon"},
        {"launch_target": "2026-02-30T00:00:00"},
        {"launch_target": "2026-12-01T10:00:00Z"},
        {"countdown_interval_seconds": 0},
        {"link_opener": "carrier-pigeon"},
        {"telemetry_exporter": "jaeger"},
        {"telemetry_exporter": "otlp", "telemetry_otlp_endpoint": None},
    ],
)
def test_invalid_values_fail_at_load(overrides: dict) -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **overrides)


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LAUNCH_TARGET", "2030-01-02T03:04:05")
    monkeypatch.setenv("STRICT_FORM_VALIDITY", "true")
    settings = Settings(_env_file=None)
    assert settings.launch_target_timestamp == CivilTimestamp(2030, 1, 2, 3, 4, 5)
    assert settings.strict_form_validity is True
