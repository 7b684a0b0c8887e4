"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - Secret values are only ever reduced to presence booleans outside this module

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Every secret optional: the API serves stubbed data and must boot without them
    - Empty strings count as absent, matching how the platform injects unset vars
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

# Env var names whose presence (never value) the health check reports
OPTIONAL_SECRETS: tuple[str, ...] = (
    "OPENSTATES_API_KEY", "LEGISCAN_API_KEY", "DATABASE_URL",
)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    node_env: str | None = None

    # External data sources (not wired up; presence is reported only)
    openstates_api_key: str | None = None
    legiscan_api_key: str | None = None
    database_url: str | None = None

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configuration_presence(settings: Settings) -> dict[str, bool]:
    """Map each optional secret's env var name to whether it is set."""
    return {
        "OPENSTATES_API_KEY": bool(settings.openstates_api_key),
        "LEGISCAN_API_KEY": bool(settings.legiscan_api_key),
        "DATABASE_URL": bool(settings.database_url),
    }


def missing_optional_settings(settings: Settings) -> list[str]:
    """Env var names of optional secrets that are not set, in declaration order."""
    presence = configuration_presence(settings)
    return [name for name in OPTIONAL_SECRETS if not presence[name]]
