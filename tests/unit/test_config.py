import logging
import os
from pathlib import Path

import yaml

from gmailrest.sdk import config
from gmailrest.sdk.config import ApiConfig, DEFAULT_BASE_URL


def test_base_url_initializes_missing_settings():
    """
    Verify that an ApiConfig without settings is initialized with the default URL.
    """
    api_config = ApiConfig()

    assert api_config.base_url == DEFAULT_BASE_URL
    assert api_config.settings == {"url": DEFAULT_BASE_URL}


def test_base_url_repairs_settings_without_url():
    """
    Verify that settings lacking a usable url get the default injected, keeping other keys.
    """
    api_config = ApiConfig({"timeout": 5, "url": ""})

    assert api_config.base_url == DEFAULT_BASE_URL
    assert api_config.settings == {"timeout": 5, "url": DEFAULT_BASE_URL}


def test_base_url_uses_configured_url():
    api_config = ApiConfig({"url": "http://localhost:8080/gmail/v1/"})

    assert api_config.base_url == "http://localhost:8080/gmail/v1/"


def test_base_url_initializes_only_once(caplog):
    """
    Verify that resolution is idempotent: the first lookup initializes, later ones reuse.
    """
    api_config = ApiConfig()

    with caplog.at_level(logging.DEBUG, logger="gmailrest.sdk.config"):
        urls = [api_config.base_url for _ in range(3)]

    assert urls == [DEFAULT_BASE_URL] * 3
    assert len([r for r in caplog.records if "initializing" in r.getMessage()]) == 1


def test_load_config_missing_file_returns_defaults(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("GMAILREST_CONFIG_FILE", str(tmp_path / "config.yaml"))

    assert config.load_config() == {"api": {}, "auth": {"token_file": None}}


def test_load_config_invalid_yaml_returns_defaults(tmp_path: Path, monkeypatch):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("api: [unclosed\n")
    monkeypatch.setenv("GMAILREST_CONFIG_FILE", str(config_path))

    assert config.load_config() == {"api": {}, "auth": {"token_file": None}}


def test_get_config_value_dotted_key(tmp_path: Path, monkeypatch):
    config_path = tmp_path / "config.yaml"
    with open(config_path, "w") as f:
        yaml.dump({"auth": {"token_file": "~/token.json"}}, f)
    monkeypatch.setenv("GMAILREST_CONFIG_FILE", str(config_path))

    assert config.get_config_value("auth.token_file") == "~/token.json"
    assert config.get_config_value("auth.missing", "fallback") == "fallback"


def test_load_api_config_reads_file_and_adds_trailing_slash(tmp_path: Path, monkeypatch):
    config_path = tmp_path / "config.yaml"
    with open(config_path, "w") as f:
        yaml.dump({"api": {"url": "http://localhost:9000/gmail/v1"}}, f)
    monkeypatch.setenv("GMAILREST_CONFIG_FILE", str(config_path))
    monkeypatch.delenv("GMAILREST_API_URL", raising=False)

    api_config = config.load_api_config()

    assert api_config.base_url == "http://localhost:9000/gmail/v1/"


def test_load_api_config_env_overrides_file(tmp_path: Path, monkeypatch):
    config_path = tmp_path / "config.yaml"
    with open(config_path, "w") as f:
        yaml.dump({"api": {"url": "http://from-file/"}}, f)
    monkeypatch.setenv("GMAILREST_CONFIG_FILE", str(config_path))
    monkeypatch.setenv("GMAILREST_API_URL", "http://from-env/")

    assert config.load_api_config().base_url == "http://from-env/"


def test_load_api_config_from_env_file(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("GMAILREST_CONFIG_FILE", str(tmp_path / "missing.yaml"))
    monkeypatch.delenv("GMAILREST_API_URL", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("GMAILREST_API_URL=http://dotenv-host/gmail/v1\n")

    try:
        api_config = config.load_api_config(str(env_file))
        assert api_config.base_url == "http://dotenv-host/gmail/v1/"
    finally:
        os.environ.pop("GMAILREST_API_URL", None)


def test_load_api_config_without_url_falls_back_to_default(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("GMAILREST_CONFIG_FILE", str(tmp_path / "missing.yaml"))
    monkeypatch.delenv("GMAILREST_API_URL", raising=False)

    assert config.load_api_config().base_url == DEFAULT_BASE_URL


def test_base_url_replaces_non_dict_settings():
    """
    Verify that settings which are not a mapping are initialized rather than crashing.
    """
    api_config = ApiConfig("http://x/")

    assert api_config.base_url == DEFAULT_BASE_URL
    assert api_config.settings == {"url": DEFAULT_BASE_URL}


def test_config_dir_env_locates_file(tmp_path: Path, monkeypatch):
    monkeypatch.delenv("GMAILREST_CONFIG_FILE", raising=False)
    monkeypatch.setenv("GMAILREST_CONFIG_DIR", str(tmp_path))
    with open(tmp_path / "config.yaml", "w") as f:
        yaml.dump({"api": {"url": "http://from-dir/"}, "extra": {"nested": {"a": 1}}}, f)

    assert config.get_config_file_path() == tmp_path / "config.yaml"
    assert config.load_config() == {
        "api": {"url": "http://from-dir/"},
        "auth": {"token_file": None},
        "extra": {"nested": {"a": 1}},
    }
    assert config.get_config_value("extra.nested.a") == 1
    assert config.get_config_value("api.url.deeper", "none") == "none"
