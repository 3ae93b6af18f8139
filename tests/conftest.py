"""Shared pytest fixtures and configuration for the dateconv test suite.

Guidelines
----------
* Tests must not read the developer's real ``~/.dateconv``.
* Tests must not depend on the host timezone; CLI tests pin the local
  zone to UTC through :func:`utc_local`.
* No network access in any test.
"""

from __future__ import annotations

from datetime import timezone
from pathlib import Path

import pytest

from dateconv.infra.offset_config import CONFIG_ENV_VAR
from dateconv.infra.timezones import SystemZoneResolver


@pytest.fixture(autouse=True)
def isolated_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point ``HOME`` at an empty temp dir and clear the config env var."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    return home


@pytest.fixture
def utc_local(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make the process local zone UTC for the duration of a test."""
    monkeypatch.setattr(SystemZoneResolver, "local", lambda self: timezone.utc)
