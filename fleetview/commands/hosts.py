"""Hosts command: print the table, network or map view of a host file."""

from __future__ import annotations

import json
import logging
import random
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ..constants import EMPTY_STATE_TEXT
from ..exceptions import UserError
from ..utils import read_json_records
from ..view import ActiveView, Host, HostsViewModel, SortKey
from ..view.formatting import render_graph_lines, render_marker_lines, render_table_lines

if TYPE_CHECKING:
    from ..cli_types import HostsArgs

logger = logging.getLogger("fleetview")


def load_hosts(path: Path) -> list[Host]:
    """Load host records from a JSON array or JSONL file.

    Records without a name are skipped with a warning.
    """
    hosts: list[Host] = []
    for index, record in enumerate(read_json_records(path)):
        if not isinstance(record, dict):
            logger.warning("Skipping record %d in %s: not an object", index, path)
            continue
        try:
            hosts.append(Host.from_dict(record))
        except ValueError as e:
            logger.warning("Skipping record %d in %s: %s", index, path, e)
    logger.debug("Loaded %d hosts from %s", len(hosts), path)
    return hosts


def build_payload(model: HostsViewModel) -> dict[str, Any]:
    """Return the active view as a JSON-serializable dict."""
    state = model.view_state
    payload: dict[str, Any] = {
        "title": model.title(),
        "view": state.active_view.value,
        "search": state.search_term,
        "sort_key": state.sort_key.value if state.sort_key else None,
        "sort_direction": state.sort_direction.value if state.sort_direction else None,
    }
    if state.active_view is ActiveView.GRAPH:
        payload["graph"] = model.graph.to_dict()
    elif state.active_view is ActiveView.MAP:
        payload["markers"] = [m.to_dict() for m in model.markers]
    else:
        payload["rows"] = [h.to_dict() for h in model.rows]
    return payload


def render_lines(model: HostsViewModel, *, max_width: int = 0) -> list[str]:
    """Return the title line followed by the active view as text."""
    lines = [model.title()]
    view = model.visible_view()
    if view is None:
        lines.append(EMPTY_STATE_TEXT)
    elif view is ActiveView.GRAPH:
        lines.extend(render_graph_lines(model.graph))
    elif view is ActiveView.MAP:
        lines.extend(render_marker_lines(model.markers))
    else:
        header, rows = render_table_lines(model.rows, max_width=max_width)
        lines.append(header)
        lines.extend(rows)
    return lines


def cmd_hosts(args: HostsArgs) -> None:
    """Print the selected view of the hosts in args.hosts_file."""
    sort_keys = [SortKey.parse(key) for key in args.sort]
    try:
        view = ActiveView(args.view)
    except ValueError as e:
        raise UserError(f"Unknown view: {args.view}") from e

    hosts = load_hosts(Path(args.hosts_file))
    rng = random.Random(args.seed) if args.seed is not None else None
    model = HostsViewModel(hosts, rng=rng)
    model.set_active_view(view)
    for key in sort_keys:
        model.toggle_sort(key)
    if args.search:
        model.set_search_term(args.search)

    if args.json:
        print(json.dumps(build_payload(model), indent=2))
        return
    for line in render_lines(model, max_width=args.max_width):
        print(line)
