"""Application settings with environment overrides."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from chesslite.ui.styles.theme import THEME_NAMES

_LOGGER = logging.getLogger(__name__)

_ENV_PREFIX = "CHESSLITE_"
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    show_destinations: bool = True

    # Diagnostics
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppSettings:
        """Defaults overridden by ``CHESSLITE_*`` environment variables.

        Unusable values are logged and ignored.
        """
        env = os.environ if environ is None else environ
        settings = cls()

        theme = env.get(f"{_ENV_PREFIX}THEME")
        if theme is not None:
            if theme in THEME_NAMES:
                settings.board_theme = theme
            else:
                _LOGGER.warning("Ignoring unknown board theme %r", theme)

        show = env.get(f"{_ENV_PREFIX}SHOW_DESTINATIONS")
        if show is not None:
            flag = show.strip().lower()
            if flag in _TRUE_VALUES:
                settings.show_destinations = True
            elif flag in _FALSE_VALUES:
                settings.show_destinations = False
            else:
                _LOGGER.warning("Ignoring invalid SHOW_DESTINATIONS value %r", show)

        level = env.get(f"{_ENV_PREFIX}LOG_LEVEL")
        if level is not None:
            if level.upper() in _LOG_LEVELS:
                settings.log_level = level.upper()
            else:
                _LOGGER.warning("Ignoring unknown log level %r", level)

        return settings
