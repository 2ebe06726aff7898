"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. The launch target and collaborator choices are
validated at load time.
"""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from comingsoon.domain.value_objects import CivilTimestamp

_LINK_OPENERS = ("browser", "log")
_TELEMETRY_EXPORTERS = ("console", "otlp", "none")


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Every field has a default; validate_collaborators rejects unknown
    link opener and exporter names, and launch_target must parse as a
    naive civil timestamp (YYYY-MM-DDTHH:MM:SS).
    """

    # App
    app_name: str = "IAIAIN"
    app_version: str = "1.0.0"
    debug: bool = False

    # Countdown: naive wall-clock reading, compared against the host's local clock.
    launch_target: str = "2026-12-01T10:00:00"
    countdown_interval_seconds: float = 1.0

    # Early access form
    # Mock submission endpoint latency (seconds); 0 resolves on the next loop turn.
    submission_latency_seconds: float = 0.0
    # Reject Submit while a previous submission is still pending.
    guard_reentrant_submit: bool = True
    # Also require institution/role errors to be clear and the full name to pass NameValidator.
    strict_form_validity: bool = False

    # Links: "browser" opens the host's default browser, "log" only records (headless).
    link_opener: str = "log"
    social_links: str = (
        "https://facebook.com,https://twitter.com,https://linkedin.com,https://instagram.com"
    )

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Request / middleware
    request_timeout_seconds: int = 30
    request_id_header: str = "X-Request-ID"
    submit_rate_limit: str = "10/minute"

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("launch_target")
    @classmethod
    def validate_launch_target(cls, value: str) -> str:
        """Reject launch targets that are not a valid civil timestamp."""
        CivilTimestamp.parse(value)
        return value

    @field_validator("countdown_interval_seconds")
    @classmethod
    def validate_interval(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("countdown_interval_seconds must be positive")
        return value

    @model_validator(mode="after")
    def validate_collaborators(self) -> "Settings":
        """Validate collaborator and exporter selections."""
        if self.link_opener not in _LINK_OPENERS:
            raise ValueError(
                f"link_opener must be one of {_LINK_OPENERS}, got: {self.link_opener!r}"
            )
        if self.telemetry_exporter not in _TELEMETRY_EXPORTERS:
            raise ValueError(
                f"telemetry_exporter must be one of {_TELEMETRY_EXPORTERS}, "
                f"got: {self.telemetry_exporter!r}"
            )
        if self.telemetry_exporter == "otlp" and not self.telemetry_otlp_endpoint:
            raise ValueError(
                "TELEMETRY_OTLP_ENDPOINT is required when telemetry_exporter is 'otlp'."
            )
        return self

    @property
    def launch_target_timestamp(self) -> CivilTimestamp:
        """Launch target as a CivilTimestamp."""
        return CivilTimestamp.parse(self.launch_target)

    @property
    def social_link_list(self) -> list[str]:
        """Comma-separated social_links as a list (blank entries dropped)."""
        return [link.strip() for link in self.social_links.split(",") if link.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
