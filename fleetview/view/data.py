"""Filtering and sorting of host collections (pure functions, easily testable)."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from .types import Host, SortDirection, SortKey


def host_matches(host: Host, search_term: str) -> bool:
    """Return True if the term appears in the host's name, apps or tag values.

    Matching is a case-insensitive substring test. An empty term matches.
    """
    filter_text = search_term.lower()
    if filter_text in host.name.lower():
        return True
    if filter_text in ", ".join(host.apps).lower():
        return True
    if host.tags:
        return any(filter_text in value.lower() for value in host.tags.values())
    return False


def filter_hosts(hosts: Iterable[Host], search_term: str) -> list[Host]:
    """Return hosts matching search_term, preserving input order."""
    return [h for h in hosts if host_matches(h, search_term)]


def get_host_sort_key(host: Host, *, sort_key: SortKey) -> tuple[Any, ...]:
    """Generate sort key tuple for a host.

    Hosts missing the field sort after every host that has it.
    """
    value = sort_key.accessor(host)
    if value is None:
        return (1,)
    return (0, value)


def sort_hosts(
    hosts: Sequence[Host],
    sort_key: SortKey | None,
    sort_direction: SortDirection | None,
) -> list[Host]:
    """Sort hosts by sort_key.

    Descending order is the stable ascending order reversed as a whole, so
    hosts with equal keys come out in reverse of their input order.
    """
    if sort_key is None or sort_direction is None:
        return list(hosts)
    ordered = sorted(hosts, key=lambda h: get_host_sort_key(h, sort_key=sort_key))
    if sort_direction is SortDirection.DESC:
        ordered.reverse()
    return ordered


def filter_and_sort(
    hosts: Iterable[Host],
    search_term: str = "",
    sort_key: SortKey | None = None,
    sort_direction: SortDirection | None = None,
) -> list[Host]:
    """Reduce hosts to the ordered subset shown in every view."""
    return sort_hosts(filter_hosts(hosts, search_term), sort_key, sort_direction)
