"""Пользовательские исключения подсистемы путей nsynk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

LOGGER = logging.getLogger(__name__)


class CfgError(Exception):
    """Базовое исключение для любых ошибок путей с поддержкой контекста."""

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        """Сохраняет сообщение и контекст, оставляя запись уровня DEBUG."""

        self.message = message
        self.context = context or {}
        super().__init__(message)
        LOGGER.debug("%s | context=%s", message, self.context)


class CfgPathError(CfgError):
    """Система не смогла выдать стандартную директорию или путь не в UTF-8."""

    def __init__(self, kind: str, reason: Optional[str] = None) -> None:
        self.kind = kind
        self.reason = reason
        super().__init__(
            f"Could not find `{kind}` folder",
            context={"kind": kind, "reason": reason},
        )


class CfgParseError(CfgError):
    """Зарезервировано для ошибок разбора пути."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(
            f"Could not parse path to `{kind}` folder",
            context={"kind": kind},
        )


class CfgIOError(CfgError):
    """Оборачивает OSError, возникший при создании директории или файла."""

    def __init__(self, path: Path, error: OSError) -> None:
        self.path = path
        self.error = error
        reason = error.strerror or str(error)
        super().__init__(
            f"I/O error with '{path}': {reason}",
            context={"path": str(path), "errno": error.errno, "reason": reason},
        )
