from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List

import pytest

from logging_helper import get_logger


@pytest.fixture(autouse=True)
def _reset_log_level():
    logger = get_logger()
    level = logger.level
    yield
    logger.setLevel(level)


@pytest.fixture
def sorter_caplog(caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch) -> pytest.LogCaptureFixture:
    # The sorter logger does not propagate; let caplog's root handler see it
    monkeypatch.setattr(get_logger(), "propagate", True)
    caplog.set_level(logging.DEBUG, logger=get_logger().name)
    return caplog


@pytest.fixture
def write_pieces(tmp_path: Path) -> Callable[..., Path]:
    def _write(lines: List[str], name: str = "source.txt", trailing_newline: bool = True) -> Path:
        path = tmp_path / name
        text = "\n".join(lines)
        if trailing_newline:
            text += "\n"
        path.write_text(text, encoding="utf-8")
        return path
    return _write
