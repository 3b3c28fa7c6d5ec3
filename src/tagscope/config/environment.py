"""
Environment Configuration Management Module

tagscope reads one thing from its configuration: the log level used by
`tagscope.config.logging_config`. Values are resolved from, in order of
precedence:

- The settings file (settings.yaml)
- Environment variables, including those loaded from .env files
- Default values
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from tagscope.config.settings import get_value, load_settings

DEFAULT_ENV: Dict[str, Any] = {
    "LOG_LEVEL": None,
    "DEBUG": None,
}

_FALSY = ("0", "false", "no", "off", "")


def load_dotenv_files(project_root: Optional[Path] = None):
    """Load environment variables from .env files based on current environment."""
    from dotenv import load_dotenv

    if project_root is None:
        project_root = Path.cwd()

    env_name = os.environ.get("ENV", "development")

    # Later files override earlier ones only for keys not already in os.environ
    env_files = [
        project_root / ".env",
        project_root / f".env.{env_name}",
        project_root / f".env.{env_name}.local",
    ]

    for env_file in env_files:
        if env_file.exists():
            load_dotenv(env_file, override=False)


class Environment(object):
    """
    Class-level accessor for configuration values.

    Settings are loaded lazily on first access and cached on the class.
    Call `reset` to force a reload, e.g. after changing the settings file.
    """

    settings: Optional[Dict[str, Any]] = None

    @classmethod
    def load_settings(cls):
        load_dotenv_files()
        cls.settings = load_settings()

    @classmethod
    def get_settings(cls):
        if cls.settings is None:
            cls.load_settings()
        assert cls.settings is not None
        return cls.settings

    @classmethod
    def reset(cls):
        cls.settings = None

    @classmethod
    def get(cls, key: str, default: Any = None):
        return get_value(key, cls.get_settings(), DEFAULT_ENV, default)

    @classmethod
    def is_debug(cls):
        debug = cls.get("DEBUG")
        return debug is not None and str(debug).lower() not in _FALSY

    @classmethod
    def get_log_level(cls):
        """Return desired log level string.

        Priority:
        1) Explicit LOG_LEVEL from settings/env via get()
        2) If DEBUG is truthy, return "DEBUG"
        3) TAGSCOPE_LOG_LEVEL env (default "INFO")
        """
        level = cls.get("LOG_LEVEL")
        if level:
            return str(level).upper()
        if cls.is_debug():
            return "DEBUG"
        return os.getenv("TAGSCOPE_LOG_LEVEL", "INFO").upper()
