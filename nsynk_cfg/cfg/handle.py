"""Дескриптор путей nsynk и создание рабочей структуры на диске."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from nsynk_cfg.cfg.exceptions import CfgIOError, CfgPathError
from nsynk_cfg.cfg.resolver import DirectoryResolver, default_resolver
from nsynk_cfg.utils.paths import APP_NAME, CONFIG_FILE_NAME, DB_FILE_NAME

LOGGER = logging.getLogger(__name__)


def _to_text(base: Optional[Path], kind: str) -> str:
    if base is None:
        raise CfgPathError(kind, "directory is not available on this host")
    text = str(base / APP_NAME)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise CfgPathError(kind, "path is not valid UTF-8") from exc
    return text


@dataclass(frozen=True)
class Cfg:
    """Разрешённые директории данных и настроек приложения.

    Экземпляр неизменяем и не хранит признак того, вызывался ли initialize().
    """

    data_path: str
    config_path: str

    @classmethod
    def resolve(cls, resolver: Optional[DirectoryResolver] = None) -> "Cfg":
        """Находит системные директории и добавляет к ним подкаталог nsynk.

        Ничего не пишет на диск. Поднимает CfgPathError, если директория
        недоступна или путь нельзя представить в UTF-8.
        """

        source = resolver or default_resolver()
        data_path = _to_text(source.data_dir(), "data")
        config_path = _to_text(source.config_dir(), "config")
        return cls(data_path=data_path, config_path=config_path)

    @property
    def data_dir(self) -> Path:
        return Path(self.data_path)

    @property
    def config_dir(self) -> Path:
        return Path(self.config_path)

    @property
    def db_file(self) -> Path:
        return self.data_dir / DB_FILE_NAME

    @property
    def config_file(self) -> Path:
        return self.config_dir / CONFIG_FILE_NAME

    def initialize(self) -> None:
        """Создаёт директории и пустые nsynk.db / config.yml, если их нет.

        Повторный вызов ничего не меняет. Первая ошибка прерывает работу
        без отката уже созданного.
        """

        create_dirs([self.data_dir, self.config_dir])
        create_files(self.data_dir, self.config_dir)

    def is_initialized(self) -> bool:
        """Проверяет, что обе директории и оба файла уже на месте."""

        return (
            self.data_dir.is_dir()
            and self.config_dir.is_dir()
            and self.db_file.is_file()
            and self.config_file.is_file()
        )


def create_dirs(paths: Iterable[Path]) -> None:
    """Создаёт каждую отсутствующую директорию, без родительских."""

    for path in paths:
        if path.exists():
            continue
        try:
            path.mkdir()
        except OSError as exc:
            raise CfgIOError(path, exc) from exc
        LOGGER.debug("Created directory %s", path)


def create_files(data_dir: Path, config_dir: Path) -> None:
    """Создаёт пустые файлы базы и конфигурации, существующие не трогает."""

    for path in (data_dir / DB_FILE_NAME, config_dir / CONFIG_FILE_NAME):
        if path.exists():
            continue
        try:
            path.touch(exist_ok=False)
        except OSError as exc:
            raise CfgIOError(path, exc) from exc
        LOGGER.debug("Created file %s", path)
