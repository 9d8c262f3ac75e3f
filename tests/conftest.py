"""Shared fixtures: fixed clock, captured terminal and isolated settings."""

import io
import logging
import os
import re
from collections.abc import Iterator
from pathlib import Path
from typing import Callable

import pytest

from cla.config.settings import ClaSettings, reset_settings
from cla.display.terminal import Terminal
from cla.utils.clock import FixedClock

ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Function removing ANSI control sequences from rendered output."""
    return lambda text: ANSI_PATTERN.sub("", text)


@pytest.fixture
def output() -> io.StringIO:
    """Buffer receiving rendered terminal output."""
    return io.StringIO()


@pytest.fixture
def terminal(output: io.StringIO) -> Terminal:
    """Terminal writing into the output buffer."""
    return Terminal(output)


@pytest.fixture
def december_clock() -> FixedClock:
    """Clock frozen on 15 December 2024."""
    return FixedClock(2024, 12, 15)


@pytest.fixture
def settings(tmp_path: Path) -> ClaSettings:
    """Settings isolated from the user's config directory."""
    return ClaSettings(config_dir=tmp_path / "config", cache_dir=tmp_path / "cache")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Reset global settings, CLA_ variables and the cla logger around each test."""
    for key in list(os.environ):
        if key.upper().startswith("CLA_"):
            monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()

    cla_logger = logging.getLogger("cla")
    for handler in list(cla_logger.handlers):
        cla_logger.removeHandler(handler)
        handler.close()
    cla_logger.propagate = True
    cla_logger.setLevel(logging.NOTSET)
