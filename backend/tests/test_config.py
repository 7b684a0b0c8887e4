"""Settings — environment loading and presence-only reporting."""

from app.config import (
    OPTIONAL_SECRETS, Settings, configuration_presence, get_settings,
    missing_optional_settings,
)


def test_defaults_without_environment():
    settings = Settings(_env_file=None)
    assert settings.node_env is None
    assert settings.log_level == "INFO"
    assert settings.log_format == "json"
    assert settings.cors_origins == ["*"]


def test_reads_secrets_from_environment(set_env):
    set_env(OPENSTATES_API_KEY="abc", NODE_ENV="production")
    settings = get_settings()
    assert settings.openstates_api_key == "abc"
    assert settings.node_env == "production"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_presence_is_boolean_only():
    settings = Settings(
        _env_file=None, openstates_api_key="secret", database_url="",
    )
    assert configuration_presence(settings) == {
        "OPENSTATES_API_KEY": True,
        "LEGISCAN_API_KEY": False,
        "DATABASE_URL": False,
    }


def test_missing_optional_settings_in_declaration_order():
    settings = Settings(_env_file=None, legiscan_api_key="k")
    assert missing_optional_settings(settings) == ["OPENSTATES_API_KEY", "DATABASE_URL"]


def test_nothing_missing_when_all_set():
    settings = Settings(
        _env_file=None,
        openstates_api_key="a", legiscan_api_key="b", database_url="c",
    )
    assert missing_optional_settings(settings) == []
    assert set(configuration_presence(settings)) == set(OPTIONAL_SECRETS)
