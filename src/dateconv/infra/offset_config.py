"""Infrastructure: the optional timezone offset-table file.

The file is a flat JSON object mapping abbreviations to UTC offsets in
seconds::

    {"PST": -28800, "IST": 19800}

Loading is best-effort.  A missing, unreadable or malformed file means
"no table" and is never reported as an error; :func:`probe_offset_table`
exposes the reason for ``--verbose`` output.

Rules
-----
* No ``print()`` — callers handle user-facing output.
* :class:`ConfigLoadError` never leaves this module.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from dateconv.core.models import OffsetTable
from dateconv.exceptions import ConfigLoadError

CONFIG_ENV_VAR: str = "DATECONV_CONF"
"""Environment variable naming the config file when ``--conf`` is unset."""

DEFAULT_CONFIG_NAME: str = ".dateconv"
"""File name looked up in the user's home directory."""


# ---------------------------------------------------------------------------
# Probe result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class OffsetTableStatus:
    """Outcome of an attempt to load the offset table.

    Attributes
    ----------
    path : Path | None
        The file that was tried, or ``None`` when no path could be
        determined.
    table : OffsetTable | None
        The loaded table, or ``None`` on any failure.
    reason : str
        Human-readable status (e.g. ``"loaded 2 abbreviations"``).
    """

    path: Path | None
    table: OffsetTable | None
    reason: str


# ---------------------------------------------------------------------------
# Path resolution
# ---------------------------------------------------------------------------

def default_config_path() -> Path | None:
    """Return ``~/.dateconv``, or ``None`` if there is no home directory."""
    try:
        return Path.home() / DEFAULT_CONFIG_NAME
    except (RuntimeError, KeyError):
        return None


def resolve_config_path(explicit: str | None = None) -> Path | None:
    """Pick the config file: *explicit*, then the env var, then the default."""
    for candidate in (explicit, os.environ.get(CONFIG_ENV_VAR)):
        if candidate:
            try:
                return Path(candidate).expanduser()
            except RuntimeError:
                return Path(candidate)
    return default_config_path()


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------

def _validate(data: object) -> dict[str, int]:
    if not isinstance(data, dict):
        raise ConfigLoadError("Config must be a JSON object.")
    table: dict[str, int] = {}
    for key, value in data.items():
        # bool is an int subclass; true/false are not offsets.
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigLoadError(
                f"Offset for {key!r} must be an integer number of seconds.",
            )
        table[key] = value
    return table


def read_offset_table(path: Path) -> dict[str, int]:
    """Read and validate the table at *path*.

    Raises
    ------
    ConfigLoadError
        If the file cannot be read, is not JSON, or has the wrong shape.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigLoadError(f"Cannot read {path}: {exc}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigLoadError(f"Invalid JSON in {path}: {exc}") from exc

    return _validate(data)


def probe_offset_table(explicit: str | None = None) -> OffsetTableStatus:
    """Resolve the config path and try to load it, never raising."""
    path = resolve_config_path(explicit)
    if path is None:
        return OffsetTableStatus(
            path=None,
            table=None,
            reason="no home directory to look in",
        )

    try:
        table = read_offset_table(path)
    except ConfigLoadError as exc:
        return OffsetTableStatus(path=path, table=None, reason=str(exc))

    return OffsetTableStatus(
        path=path,
        table=table,
        reason=f"loaded {len(table)} abbreviation(s)",
    )
