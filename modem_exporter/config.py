"""Configuration with optional config.json + env var overrides."""

import json
import logging
import os

log = logging.getLogger("modem_exporter.config")

DEFAULTS = {
    "modem_url": "http://192.168.8.1",
    "listen_host": "0.0.0.0",
    "web_port": 9091,
    "request_timeout": 10,
    "log_level": "INFO",
}

ENV_MAP = {
    "modem_url": "MODEM_URL",
    "listen_host": "LISTEN_HOST",
    "web_port": "WEB_PORT",
    "request_timeout": "REQUEST_TIMEOUT",
    "log_level": "LOG_LEVEL",
}

INT_KEYS = {"web_port", "request_timeout"}


class ConfigManager:
    """Loads config from config.json, env vars override file values."""

    def __init__(self, data_dir="/data"):
        self.data_dir = data_dir
        self.config_path = os.path.join(data_dir, "config.json")
        self._file_config = {}
        self._load()

    def _load(self):
        """Load config.json if it exists."""
        if os.path.exists(self.config_path):
            try:
                with open(self.config_path, "r") as f:
                    self._file_config = json.load(f)
                log.info("Loaded config from %s", self.config_path)
            except (OSError, ValueError) as e:
                log.warning("Failed to load config.json: %s", e)
                self._file_config = {}
        else:
            log.info("No config.json found, using defaults/env")

    def get(self, key, default=None):
        """Get config value: env var > config.json > default."""
        env_name = ENV_MAP.get(key)
        if env_name:
            env_val = os.environ.get(env_name)
            if env_val is not None and env_val != "":
                if key in INT_KEYS:
                    return int(env_val)
                return env_val

        if key in self._file_config:
            val = self._file_config[key]
            if key in INT_KEYS and not isinstance(val, int):
                return int(val)
            return val

        if default is not None:
            return default
        return DEFAULTS.get(key)

    def get_modem_url(self):
        """Modem base URL without trailing slash."""
        return self.get("modem_url").rstrip("/")

    def get_all(self):
        """Return all config values as dict."""
        result = {}
        for key in DEFAULTS:
            result[key] = self.get(key)
        result["modem_url"] = self.get_modem_url()
        result["data_dir"] = self.data_dir
        return result
