"""View model holding the hosts view state and its derived projections."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import replace

from ..constants import SORTABLE_HEADER_CLASS, SORTING_ASC_CLASS, SORTING_DESC_CLASS
from .data import filter_and_sort
from .projection import build_marker_cache, project
from .types import (
    ActiveView,
    Graph,
    Host,
    Marker,
    SortDirection,
    SortKey,
    ViewState,
)

logger = logging.getLogger(__name__)


class HostsViewModel:
    """Keeps the table rows, network graph and map markers in agreement.

    Every update operation recomputes all three projections, so switching the
    active view never needs a recomputation. The marker cache belongs to the
    view model: it is regenerated only when a different host collection is
    supplied and is replaced as a whole tuple.
    """

    def __init__(
        self,
        hosts: Sequence[Host] = (),
        *,
        view_state: ViewState | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._rng = rng
        self._state = replace(view_state) if view_state else ViewState()
        self._hosts: Sequence[Host] = hosts
        self._marker_cache: tuple[Marker, ...] = build_marker_cache(hosts, rng=rng)
        self._rows: tuple[Host, ...] = ()
        self._graph = Graph()
        self._markers: tuple[Marker, ...] = ()
        self._recompute()

    @property
    def view_state(self) -> ViewState:
        return replace(self._state)

    @property
    def hosts(self) -> Sequence[Host]:
        return self._hosts

    @property
    def rows(self) -> tuple[Host, ...]:
        return self._rows

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def markers(self) -> tuple[Marker, ...]:
        return self._markers

    @property
    def marker_cache(self) -> tuple[Marker, ...]:
        return self._marker_cache

    @property
    def host_count(self) -> int:
        return len(self._rows)

    def set_hosts(self, hosts: Sequence[Host]) -> None:
        """Replace the host collection.

        Passing the same collection object again keeps the existing markers.
        """
        if hosts is not self._hosts:
            self._marker_cache = build_marker_cache(hosts, rng=self._rng)
            logger.debug("Host collection replaced (%d hosts)", len(hosts))
        self._hosts = hosts
        self._recompute()

    def set_search_term(self, term: str) -> None:
        self._state.search_term = term
        self._recompute()

    def toggle_sort(self, key: SortKey) -> None:
        """Flip direction if key is already active, otherwise sort ascending by key."""
        if self._state.sort_key is key:
            current = self._state.sort_direction or SortDirection.DESC
            self._state.sort_direction = current.flipped()
        else:
            self._state.sort_key = key
            self._state.sort_direction = SortDirection.ASC
        self._recompute()

    def set_active_view(self, view: ActiveView) -> None:
        self._state.active_view = ActiveView(view)

    def sortable_class(self, key: SortKey) -> str:
        """Return the header class list for a sortable column."""
        if self._state.sort_key is key:
            if self._state.sort_direction is SortDirection.ASC:
                return f"{SORTABLE_HEADER_CLASS} {SORTING_ASC_CLASS}"
            return f"{SORTABLE_HEADER_CLASS} {SORTING_DESC_CLASS}"
        return SORTABLE_HEADER_CLASS

    def title(self, *, loading: bool = False, error: str = "") -> str:
        """Return the panel title for the current row count."""
        if loading:
            return "Loading Hosts..."
        if error:
            return "There was a problem loading hosts"
        if self.host_count == 1:
            return f"{self.host_count} Host"
        return f"{self.host_count} Hosts"

    def visible_view(self, *, error: str = "") -> ActiveView | None:
        """Return the view to render, or None for the empty state."""
        if self.host_count > 0 and not error:
            return self._state.active_view
        return None

    def _recompute(self) -> None:
        rows = filter_and_sort(
            self._hosts,
            self._state.search_term,
            self._state.sort_key,
            self._state.sort_direction,
        )
        projection = project(rows, self._hosts, self._marker_cache)
        self._rows = tuple(rows)
        self._graph = projection.graph
        self._markers = projection.markers
