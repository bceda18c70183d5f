"""nsynk-cfg: подготовка рабочих директорий приложения nsynk."""

from __future__ import annotations

__version__ = "0.1.0"
