"""Тесты исключений подсистемы путей."""

from __future__ import annotations

import errno
import logging
from pathlib import Path

import pytest

from nsynk_cfg.cfg.exceptions import CfgError, CfgIOError, CfgParseError, CfgPathError


class TestCfgPathError:
    """Проверяет сообщения об отсутствующих директориях."""

    def test_message_and_kind(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level("DEBUG", logger="nsynk_cfg.cfg.exceptions")
        error = CfgPathError("data")
        assert str(error) == "Could not find `data` folder"
        assert error.kind == "data"
        assert "`data`" in caplog.text

    def test_is_cfg_error(self) -> None:
        assert isinstance(CfgPathError("config"), CfgError)


class TestCfgParseError:
    def test_message(self) -> None:
        error = CfgParseError("config")
        assert str(error) == "Could not parse path to `config` folder"
        assert error.context == {"kind": "config"}


class TestCfgIOError:
    """Проверяет обёртку над OSError."""

    def test_wraps_os_error(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level("DEBUG", logger="nsynk_cfg.cfg.exceptions")
        target = tmp_path / "nsynk"
        original = PermissionError(errno.EACCES, "Permission denied")
        error = CfgIOError(target, original)
        assert error.path == target
        assert error.error is original
        assert str(target) in str(error)
        assert "Permission denied" in caplog.text
        assert error.context["errno"] == errno.EACCES


def test_creation_does_not_emit_error_records(caplog: pytest.LogCaptureFixture) -> None:
    """Пойманное вызывающим кодом исключение не оставляет записей уровня ERROR."""

    caplog.set_level("DEBUG")
    CfgPathError("config")
    assert not [record for record in caplog.records if record.levelno >= logging.ERROR]
    assert "`config`" in caplog.text
