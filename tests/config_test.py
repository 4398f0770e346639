import pytest

from postboard.config import Settings, load_settings
from postboard.errors import ConfigError

ENV_KEYS = (
    "DATABASE_URL",
    "HOST",
    "PORT",
    "DB_POOL_MIN_SIZE",
    "DB_POOL_MAX_SIZE",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    # keep any .env in the checkout out of the way
    monkeypatch.chdir(tmp_path)
    return monkeypatch


class TestSettingsFromEnv:
    def test_database_url_is_required(self, clean_env):
        with pytest.raises(ConfigError, match="DATABASE_URL must be set"):
            load_settings()

    def test_empty_database_url_is_rejected(self, clean_env):
        clean_env.setenv("DATABASE_URL", "")

        with pytest.raises(ConfigError, match="DATABASE_URL must be set"):
            load_settings()

    def test_defaults(self, clean_env):
        clean_env.setenv("DATABASE_URL", "postgresql://u:p@db/posts")

        settings = load_settings()

        assert settings.database_url == "postgresql://u:p@db/posts"
        assert settings.host == "0.0.0.0"
        assert settings.port == 5000
        assert settings.pool_min_size == 1
        assert settings.pool_max_size == 10
        assert settings.log_level == "INFO"

    def test_overrides(self, clean_env):
        clean_env.setenv("DATABASE_URL", "postgresql://db/posts")
        clean_env.setenv("HOST", "127.0.0.1")
        clean_env.setenv("PORT", "8080")
        clean_env.setenv("DB_POOL_MIN_SIZE", "2")
        clean_env.setenv("DB_POOL_MAX_SIZE", "20")
        clean_env.setenv("LOG_LEVEL", "debug")

        settings = load_settings()

        assert settings.host == "127.0.0.1"
        assert settings.port == 8080
        assert settings.pool_min_size == 2
        assert settings.pool_max_size == 20
        assert settings.log_level == "DEBUG"

    def test_bad_integer(self, clean_env):
        clean_env.setenv("DATABASE_URL", "postgresql://db/posts")
        clean_env.setenv("PORT", "http")

        with pytest.raises(ConfigError, match="Invalid configuration: PORT"):
            load_settings()

    def test_pool_bounds_are_validated(self, clean_env):
        clean_env.setenv("DATABASE_URL", "postgresql://db/posts")
        clean_env.setenv("DB_POOL_MAX_SIZE", "0")

        with pytest.raises(ConfigError, match="DB_POOL_MAX_SIZE"):
            load_settings()

    def test_reads_dotenv_file(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text(
            "DATABASE_URL=postgresql://dotenv/posts\nPORT=5050\n"
        )

        settings = load_settings()

        assert settings.database_url == "postgresql://dotenv/posts"
        assert settings.port == 5050

    def test_environment_wins_over_dotenv(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text("DATABASE_URL=postgresql://dotenv/posts\n")
        clean_env.setenv("DATABASE_URL", "postgresql://env/posts")

        assert load_settings().database_url == "postgresql://env/posts"

    def test_keyword_arguments_use_field_names(self, clean_env):
        settings = Settings(database_url="postgresql://db/posts", pool_max_size=3)

        assert settings.pool_max_size == 3
