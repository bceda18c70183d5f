"""Вспомогательные функции настройки логирования."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, List, Optional, cast

LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def resolve_log_level(level_name: str) -> int:
    """Преобразует строковый уровень логирования в числовой."""

    level = getattr(logging, level_name.strip().upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name}")
    return cast(int, level)


def configure_logging(
    *,
    level_name: str = "INFO",
    log_file: Optional[Path] = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> None:
    """Настраивает вывод в консоль и, если задан файл, ротацию логов."""

    formatter = logging.Formatter(LOG_FORMAT)
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    handlers: List[logging.Handler] = [stream_handler]

    if log_file is not None:
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=resolve_log_level(level_name),
        handlers=handlers,
        force=True,
    )
