"""
Pytest configuration for the record semantics demo.

Provides fixtures for:
- Isolating settings from the developer's environment and `.env`
- A fresh demonstration record
- A rich console that captures output as plain text
"""

from __future__ import annotations

import io
from typing import Generator, Tuple

import pytest
from rich.console import Console

from recorddemo.config import get_settings
from recorddemo.domain.models import Record
from recorddemo.orchestrator import new_record

SETTINGS_ENV_VARS = ("APP_ENV", "LOG_LEVEL", "LOG_JSON", "COPY_MODE", "SHOW_EXPECTATIONS")


@pytest.fixture(autouse=True)
def isolated_settings(
    monkeypatch: pytest.MonkeyPatch, tmp_path
) -> Generator[None, None, None]:
    """
    Clear settings env vars and the settings cache around every test.

    Runs from an empty temp directory so a local `.env` is never picked up.
    """
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def record() -> Record:
    """The `{id: 1, name: 'Alice'}` record the demonstration starts from."""
    return new_record()


@pytest.fixture
def captured_console() -> Tuple[Console, io.StringIO]:
    """
    Console writing uncoloured text into a buffer wide enough to avoid wrapping.
    """
    buffer = io.StringIO()
    console = Console(file=buffer, no_color=True, width=200, color_system=None)
    return console, buffer
