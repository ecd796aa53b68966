"""Django-like settings system for savebuilder.

Usage:
    # In your project's savebuilder_settings.py
    from savebuilder.conf import global_settings

    # Override defaults
    DEFAULT_COMPRESSION_LEVEL = "fastest"
    JSON_INDENT = 2

    # In your code
    from savebuilder.conf import settings

    print(settings.JSON_INDENT)  # 2
"""

import importlib
import os
from typing import Any

from savebuilder.conf import global_settings

SETTINGS_MODULE_ENV = "SAVEBUILDER_SETTINGS_MODULE"
DEFAULT_SETTINGS_MODULE = "savebuilder_settings"


class LazySettings:
    """Lazy settings proxy that loads user settings on first access.

    This defers loading until the first attribute access. Settings are loaded from:
    1. global_settings (library defaults)
    2. User's settings module (overrides)

    The settings module location is determined by:
    - SAVEBUILDER_SETTINGS_MODULE environment variable, or
    - Convention: "savebuilder_settings" module on the import path
    """

    def __init__(self) -> None:
        """Initialize the lazy settings proxy."""
        self._wrapped: Settings | None = None

    def _setup(self) -> None:
        """Load settings from global_settings and user's settings module."""
        settings_module = os.environ.get(SETTINGS_MODULE_ENV, DEFAULT_SETTINGS_MODULE)

        self._wrapped = Settings()

        try:
            mod = importlib.import_module(settings_module)
        except ImportError:
            # No user settings module found, use defaults only
            return
        for setting in dir(mod):
            if setting.isupper():
                setattr(self._wrapped, setting, getattr(mod, setting))

    def __getattr__(self, name: str) -> Any:  # noqa: ANN401
        """Get a setting value, loading settings if not yet loaded."""
        if self._wrapped is None:
            self._setup()
        if self._wrapped is None:
            msg = "Settings could not be loaded"
            raise RuntimeError(msg)
        return getattr(self._wrapped, name)

    def __setattr__(self, name: str, value: Any) -> None:  # noqa: ANN401
        """Set a setting value."""
        if name == "_wrapped":
            self.__dict__["_wrapped"] = value
        else:
            if self._wrapped is None:
                self._setup()
            if self._wrapped is None:
                msg = "Settings could not be loaded"
                raise RuntimeError(msg)
            setattr(self._wrapped, name, value)

    def configure(self, **options: Any) -> None:  # noqa: ANN401
        """Manually configure settings (useful for testing).

        Example:
            settings.configure(
                JSON_INDENT=2,
                HTTP_TIMEOUT=5.0,
            )
        """
        if self._wrapped is None:
            self._wrapped = Settings()
        for name, value in options.items():
            setattr(self._wrapped, name, value)


class Settings:
    """Container for all settings with attribute access."""

    def __init__(self) -> None:
        """Initialize settings with defaults from global_settings."""
        for setting in dir(global_settings):
            if setting.isupper():
                value = getattr(global_settings, setting)
                # Mutable defaults are copied per instance
                if isinstance(value, dict):
                    value = dict(value)
                setattr(self, setting, value)


# Global singleton instance
settings = LazySettings()

__all__ = ["LazySettings", "Settings", "global_settings", "settings"]
