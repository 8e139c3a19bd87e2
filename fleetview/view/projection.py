"""Graph and map projections derived from the filtered host list."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from ..constants import (
    HOST_DOWN_COLOR,
    HOST_UP_COLOR,
    MAP_CENTER_LAT,
    MAP_CENTER_LNG,
    MAP_RADIUS_LIMIT_M,
    ROOT_NODE_COLOR,
    ROOT_NODE_ID,
    ROOT_NODE_LABEL,
)
from .geo import random_geo
from .types import Graph, GraphEdge, GraphNode, Host, Marker, Projection

logger = logging.getLogger(__name__)


def live_color(host: Host) -> str:
    """Return the node color for a host's liveness."""
    return HOST_UP_COLOR if host.is_up else HOST_DOWN_COLOR


def build_graph(filtered_hosts: Sequence[Host]) -> Graph:
    """Build the star graph for the visible hosts.

    Node ids follow the 1-based position of each host in filtered_hosts, so
    the layout is deterministic for a given input order.
    """
    nodes = [GraphNode(ROOT_NODE_ID, ROOT_NODE_LABEL, ROOT_NODE_COLOR)]
    edges = []
    for i, host in enumerate(filtered_hosts, start=1):
        nodes.append(GraphNode(i, host.name, live_color(host)))
        edges.append(GraphEdge(ROOT_NODE_ID, i))
    return Graph(nodes=tuple(nodes), edges=tuple(edges))


def build_marker_cache(
    hosts: Sequence[Host],
    *,
    center: tuple[float, float] = (MAP_CENTER_LAT, MAP_CENTER_LNG),
    radius_m: float = MAP_RADIUS_LIMIT_M,
    rng: random.Random | None = None,
) -> tuple[Marker, ...]:
    """Generate one marker per host of the full collection.

    Marker ids are 0-based positions in hosts. A fresh tuple is returned on
    every call; callers replace their cache with it wholesale.
    """
    markers = []
    for j, host in enumerate(hosts):
        point = random_geo(center, radius_m, rng=rng)
        markers.append(Marker(j, host.name, point.latitude, point.longitude))
    logger.debug("Generated %d markers", len(markers))
    return tuple(markers)


def select_markers(
    filtered_hosts: Sequence[Host],
    marker_cache: Sequence[Marker],
) -> tuple[Marker, ...]:
    """Pick the cached marker for each visible host, in filtered order.

    Titles are compared case-insensitively and the first match wins. Hosts
    with no cached marker are left off the map; this is not an error.
    """
    selected = []
    for host in filtered_hosts:
        wanted = host.name.lower()
        for marker in marker_cache:
            if marker.title.lower() == wanted:
                selected.append(marker)
                break
        else:
            logger.debug("No cached marker for host %s", host.name)
    return tuple(selected)


def project(
    filtered_hosts: Sequence[Host],
    full_hosts: Sequence[Host],
    marker_cache: Sequence[Marker],
) -> Projection:
    """Derive the graph and map projections for the visible hosts.

    full_hosts is only consulted for diagnostics; markers always come from
    marker_cache, which the caller regenerates when the collection changes.
    """
    if len(marker_cache) != len(full_hosts):
        logger.debug(
            "Marker cache has %d entries for %d hosts", len(marker_cache), len(full_hosts)
        )
    return Projection(
        graph=build_graph(filtered_hosts),
        markers=select_markers(filtered_hosts, marker_cache),
    )
