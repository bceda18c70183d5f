"""Точка входа: подготавливает директории nsynk."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from nsynk_cfg import __version__
from nsynk_cfg.cfg.exceptions import CfgError
from nsynk_cfg.cfg.handle import Cfg
from nsynk_cfg.cfg.resolver import DirectoryResolver
from nsynk_cfg.utils.logger import configure_logging
from nsynk_cfg.utils.paths import LOG_FILE_ENV, LOG_LEVEL_ENV

LOGGER = logging.getLogger(__name__)


def setup_logging_from_env() -> None:
    """Настраивает логирование по NSYNK_LOG_LEVEL и NSYNK_LOG_FILE."""

    level_name = os.environ.get(LOG_LEVEL_ENV, "INFO")
    raw_log_file = os.environ.get(LOG_FILE_ENV, "").strip()
    log_file = Path(raw_log_file).expanduser() if raw_log_file else None
    try:
        configure_logging(level_name=level_name, log_file=log_file)
    except (ValueError, OSError) as exc:
        configure_logging()
        LOGGER.warning("Logging setup failed (%s), falling back to console at INFO", exc)


def bootstrap(resolver: Optional[DirectoryResolver] = None) -> Cfg:
    """Разрешает пути и создаёт рабочую структуру."""

    cfg = Cfg.resolve(resolver)
    LOGGER.info("Data directory: %s", cfg.data_path)
    LOGGER.info("Config directory: %s", cfg.config_path)
    cfg.initialize()
    return cfg


def main() -> int:
    """Основная точка входа: 0 при успехе, 1 при ошибке инициализации."""

    setup_logging_from_env()
    LOGGER.info("Инициализация nsynk-cfg версии %s", __version__)
    try:
        bootstrap()
    except CfgError as exc:
        LOGGER.error("%s | context=%s", exc.message, exc.context)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
