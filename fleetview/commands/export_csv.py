"""Export-csv command: write a query result file as CSV."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ..csv_export import csv_filename, results_to_csv
from ..utils import ensure_parent_dir, read_json_document, resolve_timezone

if TYPE_CHECKING:
    from ..cli_types import ExportCsvArgs

logger = logging.getLogger("fleetview")


def cmd_export_csv(args: ExportCsvArgs) -> None:
    """Serialize the first series of a query result file to CSV."""
    tz = resolve_timezone(args.tz)
    document = read_json_document(Path(args.result_file))
    # Accept either the bare results list or a response wrapping it.
    results = document.get("results") if isinstance(document, dict) else document
    export = results_to_csv(results, tz=tz, quote=args.quote)

    if args.output == "-":
        print(export.csv_string)
        return

    out_path = Path(args.output) if args.output else Path(csv_filename(export.name))
    ensure_parent_dir(out_path)
    out_path.write_text(export.csv_string + "\n", encoding="utf-8")
    logger.debug("Wrote %s", out_path)
    print(f"Wrote {out_path}")
