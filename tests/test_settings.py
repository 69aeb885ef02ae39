import dotenv
import pytest
from pydantic import ValidationError

from shiritori.settings import REQUIRED_VARIABLES, MissingEnvironmentVariable, get_settings


@pytest.fixture
def env(monkeypatch):
    # keep a developer's local .env out of these tests
    monkeypatch.setattr("shiritori.settings.load_dotenv", lambda *args, **kwargs: False)

    values = {
        "API_DEPLOYMENT_ENVIRONMENT": "development",
        "API_REDIS_URL": "redis://localhost:6379/0",
        "API_REDIS_USERNAME": "default",
        "API_REDIS_PASSWORD": "secret",
    }
    for k, v in values.items():
        monkeypatch.setenv(k, v)
    for k in ["LOG_LEVEL", "HOST", "PORT", "APP_NAME"]:
        monkeypatch.delenv(k, raising=False)
    return monkeypatch


def test_get_settings_reads_environment(env):
    settings = get_settings()
    assert settings.API_DEPLOYMENT_ENVIRONMENT == "development"
    assert settings.API_REDIS_URL == "redis://localhost:6379/0"
    assert settings.API_REDIS_USERNAME == "default"
    assert settings.API_REDIS_PASSWORD == "secret"
    assert settings.LOG_LEVEL == "INFO"
    assert settings.is_production is False


def test_server_defaults_and_overrides(env):
    settings = get_settings()
    assert settings.HOST == "0.0.0.0"
    assert settings.PORT == 8000

    env.setenv("HOST", "127.0.0.1")
    env.setenv("PORT", "9001")
    settings = get_settings()
    assert settings.HOST == "127.0.0.1"
    assert settings.PORT == 9001


def test_production_flag(env):
    env.setenv("API_DEPLOYMENT_ENVIRONMENT", "production")
    assert get_settings().is_production is True


@pytest.mark.parametrize("variable", REQUIRED_VARIABLES)
def test_missing_variable_fails(env, variable):
    env.delenv(variable)
    with pytest.raises(MissingEnvironmentVariable) as exc:
        get_settings()
    assert str(exc.value) == f"missing environment variable: {variable}"


def test_empty_variable_counts_as_missing(env):
    env.setenv("API_REDIS_PASSWORD", "")
    with pytest.raises(MissingEnvironmentVariable):
        get_settings()


def test_unknown_deployment_environment_rejected(env):
    env.setenv("API_DEPLOYMENT_ENVIRONMENT", "staging")
    with pytest.raises(ValidationError):
        get_settings()


def test_dotenv_file_fills_missing_variable(env, tmp_path):
    env.setattr("shiritori.settings.load_dotenv", dotenv.load_dotenv)
    # setenv first so teardown removes whatever the .env load writes
    env.setenv("API_REDIS_URL", "unset")
    env.delenv("API_REDIS_URL")

    dotenv_file = tmp_path / ".env"
    dotenv_file.write_text("API_REDIS_URL=redis://from-dotenv:6379/0\nAPI_REDIS_USERNAME=ignored\n")

    settings = get_settings(dotenv_path=str(dotenv_file))
    assert settings.API_REDIS_URL == "redis://from-dotenv:6379/0"
    # variables already in the environment win
    assert settings.API_REDIS_USERNAME == "default"


def test_dotenv_file_cannot_mask_unset_variable(env, tmp_path):
    env.setattr("shiritori.settings.load_dotenv", dotenv.load_dotenv)
    env.delenv("API_REDIS_URL")

    empty = tmp_path / ".env"
    empty.write_text("")

    with pytest.raises(MissingEnvironmentVariable):
        get_settings(dotenv_path=str(empty))
