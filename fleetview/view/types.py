"""Shared types for the hosts view model."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..exceptions import UserError


def _number(record: Mapping[str, Any], key: str) -> float | None:
    """Return record[key] if it is a number or missing; raise ValueError otherwise."""
    value = record.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key} must be a number, got {value!r}")
    return value


@dataclass(frozen=True)
class Host:
    """A monitored machine and its reported metrics.

    Attributes:
        name: Hostname, unique within a collection
        cpu: CPU usage, None if not reported
        load: System load, None if not reported
        apps: Applications reporting from the host
        tags: Tag values keyed by tag name
        delta_uptime: Uptime delta reported by the Linux agent
        win_delta_uptime: Uptime delta reported by the Windows agent
    """

    name: str
    cpu: float | None = None
    load: float | None = None
    apps: tuple[str, ...] = ()
    tags: Mapping[str, str] | None = None
    delta_uptime: float | None = None
    win_delta_uptime: float | None = None

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> Host:
        """Build a Host from a raw record using the dashboard's wire keys."""
        name = record.get("name")
        if not isinstance(name, str) or not name:
            raise ValueError("host record has no name")
        apps = record.get("apps") or []
        if not isinstance(apps, list) or not all(isinstance(a, str) for a in apps):
            raise ValueError("apps must be a list of strings")
        tags = record.get("tags")
        if tags is not None and not isinstance(tags, dict):
            raise ValueError("tags must be an object")
        return cls(
            name=name,
            cpu=_number(record, "cpu"),
            load=_number(record, "load"),
            apps=tuple(apps),
            tags={str(k): str(v) for k, v in tags.items()} if tags else None,
            delta_uptime=_number(record, "deltaUptime"),
            win_delta_uptime=_number(record, "winDeltaUptime"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "cpu": self.cpu,
            "load": self.load,
            "apps": list(self.apps),
            "tags": dict(self.tags) if self.tags else None,
            "deltaUptime": self.delta_uptime,
            "winDeltaUptime": self.win_delta_uptime,
        }

    @property
    def is_up(self) -> bool:
        """True if either uptime delta is positive."""
        return max(self.delta_uptime or 0, self.win_delta_uptime or 0) > 0


class SortKey(str, Enum):
    """Sortable host fields, valued by their wire names."""

    NAME = "name"
    STATUS = "deltaUptime"
    CPU = "cpu"
    LOAD = "load"

    @classmethod
    def parse(cls, text: str) -> SortKey:
        for key in cls:
            if text in (key.value, key.name.lower()):
                return key
        choices = ", ".join(k.value for k in cls)
        raise UserError(f"Unknown sort key '{text}' (choose from: {choices})")

    @property
    def accessor(self) -> Callable[[Host], Any]:
        return SORT_ACCESSORS[self]


SORT_ACCESSORS: dict[SortKey, Callable[[Host], Any]] = {
    SortKey.NAME: lambda h: h.name,
    SortKey.STATUS: lambda h: h.delta_uptime,
    SortKey.CPU: lambda h: h.cpu,
    SortKey.LOAD: lambda h: h.load,
}


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> SortDirection:
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class ActiveView(str, Enum):
    TABLE = "table"
    GRAPH = "graph"
    MAP = "map"


@dataclass
class ViewState:
    """Mutable filter/sort/view selection, independent of host data."""

    search_term: str = ""
    sort_key: SortKey | None = None
    sort_direction: SortDirection | None = None
    active_view: ActiveView = ActiveView.TABLE


@dataclass(frozen=True)
class Column:
    """A table column and the sort key its header toggles (None if unsortable)."""

    label: str
    sort_key: SortKey | None


HOST_COLUMNS: tuple[Column, ...] = (
    Column("Host", SortKey.NAME),
    Column("Status", SortKey.STATUS),
    Column("CPU", SortKey.CPU),
    Column("Load", SortKey.LOAD),
    Column("Apps", None),
)


@dataclass(frozen=True)
class GraphNode:
    id: int
    label: str
    color: str


@dataclass(frozen=True)
class GraphEdge:
    from_id: int
    to_id: int


@dataclass(frozen=True)
class Graph:
    """Star topology: the root node plus one node and one edge per visible host."""

    nodes: tuple[GraphNode, ...] = ()
    edges: tuple[GraphEdge, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [{"id": n.id, "label": n.label, "color": n.color} for n in self.nodes],
            "edges": [{"from": e.from_id, "to": e.to_id} for e in self.edges],
        }


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float
    longitude2: float


@dataclass(frozen=True)
class Marker:
    id: int
    title: str
    latitude: float
    longitude: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }


@dataclass(frozen=True)
class Projection:
    graph: Graph
    markers: tuple[Marker, ...] = field(default_factory=tuple)
