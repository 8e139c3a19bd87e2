"""
FleetView - table, network and map views of a monitored host fleet.

Design goals:
- Pure, synchronous derivation of every view from (hosts, view state).
- All three views always agree on which hosts are shown and in what order.
- Map coordinates stay put while filtering; they change only with the fleet.
"""

from __future__ import annotations

from .cli import main
from .csv_export import CsvExport, results_to_csv
from .exceptions import FleetViewError, MalformedResultError, UserError
from .view import HostsViewModel, filter_and_sort

__all__ = [
    "CsvExport",
    "FleetViewError",
    "HostsViewModel",
    "MalformedResultError",
    "UserError",
    "filter_and_sort",
    "main",
    "results_to_csv",
]
