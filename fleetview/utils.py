"""FleetView utility functions."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .constants import DEFAULT_TZ, TZ_ENV_VAR
from .exceptions import UserError

logger = logging.getLogger("fleetview")


def ensure_parent_dir(p: Path) -> None:
    """Create parent directory of path if it doesn't exist."""
    p.parent.mkdir(parents=True, exist_ok=True)


def resolve_timezone(name: str | None = None) -> ZoneInfo:
    """Return the export time zone.

    Uses ``name`` when given, then the FLEETVIEW_TZ environment variable,
    then UTC.
    """
    zone = name or os.environ.get(TZ_ENV_VAR) or DEFAULT_TZ
    try:
        return ZoneInfo(zone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise UserError(f"Unknown time zone: {zone}") from e


def read_json_records(path: Path) -> list[Any]:
    """Read a JSON array or a JSONL file into a list of records.

    JSONL lines that fail to parse are skipped.
    """
    if not (path.exists() and path.is_file()):
        raise UserError(f"File not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise UserError(f"Cannot read {path}: {e}") from e

    stripped = text.lstrip()
    if stripped.startswith("["):
        try:
            data = json.loads(stripped)
        except json.JSONDecodeError as e:
            raise UserError(f"Invalid JSON in {path}: {e}") from e
        return list(data)

    records: list[Any] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        try:
            records.append(json.loads(line))
        except json.JSONDecodeError:
            logger.debug("Skipping unparseable line %d in %s", lineno, path)
            continue
    return records


def read_json_document(path: Path) -> Any:
    """Read a single JSON document from path."""
    if not (path.exists() and path.is_file()):
        raise UserError(f"File not found: {path}")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise UserError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise UserError(f"Invalid JSON in {path}: {e}") from e
