# ==============================================
# Tests for configuration loading
# ==============================================

import dataclasses

import pytest

from menu_audit.config import AuditConfig, MongoConfig, load_config
from menu_audit.storage import ConfigError


ENV_VARS = ("MONGODB_URI", "DB_NAME", "MENU_COLLECTION", "SAMPLE_LIMIT")


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Clear audit variables and point load_config at an empty .env."""
    for name in ENV_VARS:
        # setenv first so teardown also removes values exported by load_dotenv
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    env_file = tmp_path / ".env"
    env_file.write_text("")
    return env_file


class TestLoadConfig:

    def test_defaults(self, clean_env):
        config = load_config(clean_env)

        assert config.mongo.uri is None
        assert config.mongo.database == "maraksh"
        assert config.collection == "menuitems"
        assert config.sample_limit == 5

    def test_environment_values(self, clean_env, monkeypatch):
        monkeypatch.setenv("MONGODB_URI", "mongodb://db:27017")
        monkeypatch.setenv("DB_NAME", "staging")

        config = load_config(clean_env)

        assert config.mongo.uri == "mongodb://db:27017"
        assert config.mongo.database == "staging"

    def test_empty_db_name_uses_default(self, clean_env, monkeypatch):
        monkeypatch.setenv("DB_NAME", "")

        assert load_config(clean_env).mongo.database == "maraksh"

    def test_reads_dotenv_file(self, clean_env):
        clean_env.write_text("MONGODB_URI=mongodb://from-file:27017\nDB_NAME=fromfile\n")

        config = load_config(clean_env)

        assert config.mongo.uri == "mongodb://from-file:27017"
        assert config.mongo.database == "fromfile"

    def test_finds_dotenv_in_working_directory(self, clean_env, monkeypatch):
        clean_env.write_text("MONGODB_URI=mongodb://from-cwd:27017\n")
        monkeypatch.chdir(clean_env.parent)

        config = load_config()

        assert config.mongo.uri == "mongodb://from-cwd:27017"

    @pytest.mark.parametrize("raw", ["five", "-1"])
    def test_invalid_sample_limit(self, clean_env, monkeypatch, raw):
        monkeypatch.setenv("SAMPLE_LIMIT", raw)

        with pytest.raises(ConfigError):
            load_config(clean_env)

    def test_fresh_object_each_call(self, clean_env):
        assert load_config(clean_env) is not load_config(clean_env)


class TestMongoConfig:

    def test_require_uri_missing(self):
        with pytest.raises(ConfigError, match="MONGODB_URI"):
            MongoConfig().require_uri()

    def test_require_uri_present(self):
        assert MongoConfig(uri="mongodb://x").require_uri() == "mongodb://x"

    def test_config_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            AuditConfig().collection = "other"
