"""Поиск системных директорий данных и настроек пользователя."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional, Protocol, runtime_checkable

from platformdirs import PlatformDirs

from nsynk_cfg.utils.paths import CONFIG_DIR_ENV, DATA_DIR_ENV

LOGGER = logging.getLogger(__name__)


@runtime_checkable
class DirectoryResolver(Protocol):
    """Источник базовых директорий; None означает, что система их не знает."""

    def data_dir(self) -> Optional[Path]:
        ...

    def config_dir(self) -> Optional[Path]:
        ...


def _usable(raw: str) -> Optional[Path]:
    # expanduser без HOME оставляет "~" в пути
    if not raw:
        return None
    path = Path(raw)
    if not path.is_absolute():
        return None
    return path


class PlatformDirectoryResolver:
    """Берёт директории через platformdirs (XDG, ~/Library, %APPDATA%)."""

    def __init__(self, dirs: Optional[PlatformDirs] = None) -> None:
        # без appname platformdirs отдаёт базовые директории
        self._dirs = dirs or PlatformDirs()

    def data_dir(self) -> Optional[Path]:
        return _usable(self._dirs.user_data_dir)

    def config_dir(self) -> Optional[Path]:
        return _usable(self._dirs.user_config_dir)


class StaticDirectoryResolver:
    """Возвращает заранее заданные пути."""

    def __init__(self, data_dir: Optional[Path], config_dir: Optional[Path]) -> None:
        self._data_dir = Path(data_dir) if data_dir is not None else None
        self._config_dir = Path(config_dir) if config_dir is not None else None

    def data_dir(self) -> Optional[Path]:
        return self._data_dir

    def config_dir(self) -> Optional[Path]:
        return self._config_dir


class EnvironmentDirectoryResolver:
    """Учитывает NSYNK_DATA_DIR / NSYNK_CONFIG_DIR, иначе спрашивает fallback."""

    def __init__(
        self,
        fallback: Optional[DirectoryResolver] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._fallback = fallback or PlatformDirectoryResolver()
        self._environ = os.environ if environ is None else environ

    def data_dir(self) -> Optional[Path]:
        return self._from_env(DATA_DIR_ENV) or self._fallback.data_dir()

    def config_dir(self) -> Optional[Path]:
        return self._from_env(CONFIG_DIR_ENV) or self._fallback.config_dir()

    def _from_env(self, name: str) -> Optional[Path]:
        value = self._environ.get(name, "").strip()
        if not value:
            return None
        try:
            expanded = Path(value).expanduser()
        except RuntimeError:
            LOGGER.warning("%s=%s: home directory is unknown, ignoring", name, value)
            return None
        path = _usable(str(expanded))
        if path is None:
            LOGGER.warning("%s=%s is not an absolute path, ignoring", name, value)
        return path


def default_resolver() -> DirectoryResolver:
    """Резолвер по умолчанию: переменные окружения поверх platformdirs."""

    return EnvironmentDirectoryResolver()
