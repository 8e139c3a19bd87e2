"""Text rendering of host rows and projections for the command line."""

from __future__ import annotations

from collections.abc import Sequence

from .types import HOST_COLUMNS, Graph, Host, Marker


def clip_cell(value: str, width: int) -> str:
    """Clip and pad a cell to width using ASCII ellipsis."""
    if width <= 0:
        return ""
    if len(value) <= width:
        return value.ljust(width)
    if width <= 3:
        return value[:width]
    return f"{value[: width - 3]}..."


def format_number(value: float | None) -> str:
    if value is None:
        return "-"
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value)


def build_row_values(host: Host) -> dict[str, str]:
    """Build string values for a table row, keyed by column label."""
    return {
        "Host": host.name,
        "Status": "up" if host.is_up else "down",
        "CPU": format_number(host.cpu),
        "Load": format_number(host.load),
        "Apps": ", ".join(host.apps) or "-",
    }


def compute_widths(
    rows: Sequence[dict[str, str]],
    *,
    max_width: int = 0,
) -> dict[str, int]:
    """Compute column widths from labels and values.

    With max_width > 0 each column is capped at max_width characters.
    """
    widths = {col.label: len(col.label) for col in HOST_COLUMNS}
    for values in rows:
        for label in widths:
            widths[label] = max(widths[label], len(values[label]))
    if max_width > 0:
        widths = {label: min(w, max_width) for label, w in widths.items()}
    return widths


def render_table_lines(
    hosts: Sequence[Host],
    *,
    col_sep: str = "  ",
    max_width: int = 0,
) -> tuple[str, list[str]]:
    """Render the header and one line per host."""
    rows = [build_row_values(h) for h in hosts]
    widths = compute_widths(rows, max_width=max_width)
    labels = [col.label for col in HOST_COLUMNS]
    header = col_sep.join(clip_cell(label.upper(), widths[label]) for label in labels).rstrip()
    lines = [
        col_sep.join(clip_cell(values[label], widths[label]) for label in labels).rstrip()
        for values in rows
    ]
    return header, lines


def render_graph_lines(graph: Graph) -> list[str]:
    """Render nodes, then edges, one per line."""
    lines = [f"node {n.id}: {n.label} ({n.color})" for n in graph.nodes]
    lines.extend(f"edge {e.from_id} -> {e.to_id}" for e in graph.edges)
    return lines


def render_marker_lines(markers: Sequence[Marker]) -> list[str]:
    return [f"{m.id}: {m.title} @ {m.latitude:.5f}, {m.longitude:.5f}" for m in markers]
