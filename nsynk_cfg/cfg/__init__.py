"""Подсистема путей и первичной инициализации nsynk."""

from __future__ import annotations

from nsynk_cfg.cfg.exceptions import CfgError, CfgIOError, CfgParseError, CfgPathError
from nsynk_cfg.cfg.handle import Cfg
from nsynk_cfg.cfg.resolver import (
    DirectoryResolver,
    EnvironmentDirectoryResolver,
    PlatformDirectoryResolver,
    StaticDirectoryResolver,
    default_resolver,
)

__all__ = [
    "Cfg",
    "CfgError",
    "CfgIOError",
    "CfgParseError",
    "CfgPathError",
    "DirectoryResolver",
    "EnvironmentDirectoryResolver",
    "PlatformDirectoryResolver",
    "StaticDirectoryResolver",
    "default_resolver",
]
