# lce/services/config/ini_config_service.py
from __future__ import annotations

import configparser
import logging
from pathlib import Path

from platformdirs import user_config_dir

from lce.domain.interfaces import IConfigService

logger = logging.getLogger(__name__)

APP_DIR = "LightweightCodeEditor"
CONFIG_FILE = "config.ini"


def candidate_paths(explicit_path: Path | None = None, project_root: Path | None = None) -> list[Path]:
    r"""
    Where config.ini may live, in priority order:
      1. Explicit path provided by the caller
      2. User config dir (~/.config/LightweightCodeEditor/config.ini, %APPDATA%\LightweightCodeEditor\config.ini, ...)
      3. Project default at <repo>/config/config.ini
    """
    paths: list[Path] = []
    if explicit_path:
        paths.append(explicit_path)
    paths.append(Path(user_config_dir(APP_DIR)) / CONFIG_FILE)
    if project_root:
        paths.append(project_root / "config" / CONFIG_FILE)
    return paths


class IniConfigService(IConfigService):
    """Read-only INI settings; the first readable candidate wins, a broken file is skipped."""

    def __init__(self, explicit_path: Path | None = None, project_root: Path | None = None) -> None:
        self._parser = configparser.ConfigParser()
        self._loaded_from: Path | None = None

        for path in candidate_paths(explicit_path, project_root):
            if path.is_file() and self._load(path):
                break

    def _load(self, path: Path) -> bool:
        parser = configparser.ConfigParser()
        try:
            with path.open("r", encoding="utf-8") as fh:
                parser.read_file(fh)
        except (OSError, UnicodeDecodeError, configparser.Error) as e:
            logger.warning("Skipping unreadable config %s: %s", path, e)
            return False
        self._parser = parser
        self._loaded_from = path
        logger.debug("Config loaded from %s", path)
        return True

    # ----- IConfigService -----

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self._parser.get(section, key, fallback=default)

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        try:
            return self._parser.getint(section, key, fallback=default)
        except ValueError:
            logger.warning("[%s] %s is not an integer, using %r", section, key, default)
            return default

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        """Accepts configparser's spellings: 1/yes/true/on and 0/no/false/off."""
        try:
            return self._parser.getboolean(section, key, fallback=default)
        except ValueError:
            logger.warning("[%s] %s is not a boolean, using %r", section, key, default)
            return default

    @property
    def loaded_from(self) -> Path | None:
        return self._loaded_from
