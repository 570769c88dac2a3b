"""Configuration management for gmailrest.

Holds the API base URL settings and loads optional YAML configuration
from ~/.config/gmailrest/.
"""

import os
import yaml
import logging
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.googleapis.com/gmail/v1/"


class ApiConfig:
    """
    API settings handed to the base request helper.

    `settings` is a dict that may carry a `url` entry. The base URL is
    resolved lazily: missing or non-dict settings are initialized, and settings without
    a usable `url` are repaired with DEFAULT_BASE_URL. Either happens at
    most once per instance; later lookups reuse the stored value.
    """

    def __init__(self, settings: Optional[dict] = None):
        self.settings = settings

    @property
    def base_url(self) -> str:
        for _ in range(2):
            if not isinstance(self.settings, dict):
                logger.debug(f"No API settings, initializing with {DEFAULT_BASE_URL}")
                self.settings = {"url": DEFAULT_BASE_URL}
                continue
            url = self.settings.get("url")
            if isinstance(url, str) and url:
                return url
            logger.debug(f"API settings have no usable url, injecting {DEFAULT_BASE_URL}")
            self.settings = dict(self.settings, url=DEFAULT_BASE_URL)
        return self.settings["url"]

    def __repr__(self):
        return f"ApiConfig(settings={self.settings!r})"


def get_config_file_path() -> Path:
    """
    Locate config.yaml.

    GMAILREST_CONFIG_FILE names the file directly; otherwise it lives in
    GMAILREST_CONFIG_DIR, defaulting to ~/.config/gmailrest.
    """
    explicit = os.getenv("GMAILREST_CONFIG_FILE")
    if explicit:
        return Path(explicit)
    config_dir = os.getenv("GMAILREST_CONFIG_DIR") or Path.home() / ".config" / "gmailrest"
    return Path(config_dir) / "config.yaml"


DEFAULT_CONFIG = {
    "api": {},
    "auth": {
        "token_file": None
    }
}


def _default_config() -> dict:
    return {k: dict(v) for k, v in DEFAULT_CONFIG.items()}


def load_config() -> dict:
    """Read config.yaml layered over DEFAULT_CONFIG; defaults alone when missing or unreadable."""
    config_file = get_config_file_path()
    if not config_file.exists():
        logger.debug(f"Config file not found at {config_file}, using default config.")
        return _default_config()

    try:
        with open(config_file, 'r') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(f"Error loading config file {config_file}: {e}")
        return _default_config()

    if not isinstance(config, dict):
        return _default_config()
    return _merged(_default_config(), config)


def get_config_value(key: str, default: Any = None) -> Any:
    """
    Look up a setting such as "auth.token_file".

    Returns `default` when any segment is missing or the value is null.
    """
    section = load_config()
    *parents, leaf = key.split('.')
    for name in parents:
        section = section.get(name) if isinstance(section, dict) else None
    value = section.get(leaf) if isinstance(section, dict) else None
    return default if value is None else value


def load_api_config(env_file: Optional[str] = None) -> ApiConfig:
    """
    Build an ApiConfig from the config file and environment.

    Args:
        env_file: Optional .env file to load into the environment first

    Returns:
        ApiConfig whose settings come from the `api` section of the config
        file, with GMAILREST_API_URL taking precedence over it.
    """
    if env_file:
        load_dotenv(env_file)
        logger.debug(f"Loaded environment from {env_file}")

    api_section = get_config_value("api", {})
    settings = dict(api_section) if isinstance(api_section, dict) else {}
    env_url = os.getenv("GMAILREST_API_URL")
    if env_url:
        settings["url"] = env_url

    url = settings.get("url")
    if isinstance(url, str) and url and not url.endswith("/"):
        settings["url"] = url + "/"

    return ApiConfig(settings)


def _merged(defaults: dict, overrides: dict) -> dict:
    """Nested dicts are combined key by key; any other override value wins."""
    result = dict(defaults)
    for key, value in overrides.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            value = _merged(current, value)
        result[key] = value
    return result
