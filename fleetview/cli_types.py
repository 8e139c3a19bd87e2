"""Type definitions for CLI command arguments."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class HostsArgs:
    """Arguments for hosts command."""

    hosts_file: str
    search: str
    sort: list[str]
    view: str
    json: bool
    seed: int | None
    max_width: int = 0


@dataclass
class ExportCsvArgs:
    """Arguments for export-csv command."""

    result_file: str
    output: str | None
    tz: str | None
    quote: bool
