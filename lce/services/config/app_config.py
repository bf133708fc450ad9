from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from lce.domain.interfaces import IAppConfig
from lce.domain.models import Capabilities
from lce.services.config.ini_config_service import IniConfigService

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _project_root() -> Path:
    # lce/services/config/app_config.py -> parents[3] = repository root
    return Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """Typed editor settings on top of IniConfigService; every value has a default."""

    ini: IniConfigService

    def log_level(self) -> int:
        name = (self.ini.get("app", "log_level", "WARNING") or "WARNING").strip().upper()
        if name not in _LOG_LEVELS:
            name = "WARNING"
        return logging.getLevelName(name)

    def dark_mode(self) -> bool:
        return bool(self.ini.get_bool("editor", "dark_mode", False))

    def tab_width(self) -> int:
        n = self.ini.get_int("editor", "tab_width", 4) or 4
        return n if n > 0 else 4

    def font_point_size(self) -> int:
        n = self.ini.get_int("editor", "font_point_size", 12) or 12
        return n if n > 0 else 12

    def notify_on_cancel(self) -> bool:
        return bool(self.ini.get_bool("dialogs", "notify_on_cancel", False))

    def capabilities(self) -> Capabilities:
        can_open = bool(self.ini.get_bool("features", "open", True))
        can_resave = can_open and bool(self.ini.get_bool("features", "resave", True))
        return Capabilities(can_open=can_open, can_save=True, can_resave=can_resave)

    @property
    def loaded_from(self) -> Path | None:
        return self.ini.loaded_from


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    ini = IniConfigService(explicit_path=explicit_ini, project_root=project_root or _project_root())
    return AppConfig(ini=ini)
