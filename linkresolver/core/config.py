"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Cross-field rules (route templates, sample rate) are
validated at load time.
"""

from functools import lru_cache

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from linkresolver.core.constants import DEFAULT_ROUTE_TEMPLATES


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Every setting has a default; an empty DATABASE_URL leaves the SQL
    stores unconfigured (the API then reports SQL_NOT_CONFIGURED).
    """

    # App
    app_name: str = "linkresolver"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database (entity, localization and URL-record stores)
    database_url: str = ""
    database_echo: bool = False
    db_pool_size: int | None = None
    db_command_timeout: int | None = None

    # Redis Cache
    redis_enabled: bool = False
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None

    # Resolver cache
    link_cache_ttl: int = Field(default=3600, ge=1)
    link_cache_max_entries: int = Field(default=10_000, ge=1)

    # Resolution
    default_language_id: int = Field(default=1, ge=1)
    language_header_name: str = "X-Language-ID"
    # Log and return an empty result when a store raises (never cached).
    swallow_collaborator_errors: bool = True

    # Routing / media
    app_base_path: str = "/"
    route_templates: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_ROUTE_TEMPLATES)
    )
    media_base_url: str = "/media"
    media_fallback_url: str = ""

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

    @model_validator(mode="after")
    def validate_routes_and_telemetry(self) -> "Settings":
        """Validate route templates and telemetry sampling.

        - Every route template must contain the {se_name} placeholder.
        - telemetry_sample_rate must be within 0.0-1.0.
        """
        for route_name, template in self.route_templates.items():
            if "{se_name}" not in template:
                raise ValueError(
                    f"Route template for {route_name!r} must contain '{{se_name}}', "
                    f"got: {template!r}"
                )
        if not 0.0 <= self.telemetry_sample_rate <= 1.0:
            raise ValueError(
                f"telemetry_sample_rate must be between 0.0 and 1.0, got: {self.telemetry_sample_rate}"
            )
        return self


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
