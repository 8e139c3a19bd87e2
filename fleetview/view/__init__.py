"""FleetView hosts view model.

This package derives the table, network and map views of a host fleet:

- types.py: Host records, view state and projection types
- data.py: Filtering and sorting (pure functions, easily testable)
- geo.py: Synthetic map coordinates
- projection.py: Graph building and marker selection
- model.py: HostsViewModel, which owns view state and the marker cache
- formatting.py: Text rendering for the command line
"""

from __future__ import annotations

from .data import filter_and_sort, filter_hosts, host_matches, sort_hosts
from .geo import random_geo
from .model import HostsViewModel
from .projection import build_graph, build_marker_cache, live_color, project, select_markers
from .types import (
    HOST_COLUMNS,
    ActiveView,
    GeoPoint,
    Graph,
    GraphEdge,
    GraphNode,
    Host,
    Marker,
    Projection,
    SortDirection,
    SortKey,
    ViewState,
)

__all__ = [
    "HOST_COLUMNS",
    "ActiveView",
    "GeoPoint",
    "Graph",
    "GraphEdge",
    "GraphNode",
    "Host",
    "HostsViewModel",
    "Marker",
    "Projection",
    "SortDirection",
    "SortKey",
    "ViewState",
    "build_graph",
    "build_marker_cache",
    "filter_and_sort",
    "filter_hosts",
    "host_matches",
    "live_color",
    "project",
    "random_geo",
    "select_markers",
    "sort_hosts",
]
