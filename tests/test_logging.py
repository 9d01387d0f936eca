"""Logging setup tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from cjkmotion.utils import logging as logging_utils


def test_setup_logging_creates_rotating_file(tmp_path: Path) -> None:
    log_dir = tmp_path / "logs"

    log_path = logging_utils.setup_logging(
        level=logging.INFO,
        log_dir=log_dir,
        console=False,
        force=True,
    )

    logger = logging_utils.get_logger("cjkmotion.tests")
    logger.info("Logging smoke test")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert log_path == log_dir / "cjkmotion.log"
    assert logging_utils.get_log_path() == log_path
    assert "Logging smoke test" in log_path.read_text(encoding="utf-8")
    assert logging.getLogger("jieba").level == logging.WARNING


def test_log_dir_environment_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CJKMOTION_LOG_DIR", str(tmp_path / "env-logs"))

    log_path = logging_utils.setup_logging(console=False, force=True)

    assert log_path.parent == tmp_path / "env-logs"
    assert log_path.exists()
