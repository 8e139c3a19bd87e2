"""FleetView command implementations."""

from __future__ import annotations

from .export_csv import cmd_export_csv
from .hosts import cmd_hosts

__all__ = [
    "cmd_export_csv",
    "cmd_hosts",
]
