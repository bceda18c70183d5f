"""Централизованное описание имён директорий и файлов приложения."""

from __future__ import annotations

from typing import Final

# APP_NAME — подкаталог, добавляемый к системным директориям данных и настроек
APP_NAME: Final[str] = "nsynk"
DB_FILE_NAME: Final[str] = "nsynk.db"
CONFIG_FILE_NAME: Final[str] = "config.yml"

DATA_DIR_ENV: Final[str] = "NSYNK_DATA_DIR"
CONFIG_DIR_ENV: Final[str] = "NSYNK_CONFIG_DIR"
LOG_LEVEL_ENV: Final[str] = "NSYNK_LOG_LEVEL"
LOG_FILE_ENV: Final[str] = "NSYNK_LOG_FILE"
