"""FleetView CLI using Click."""

from __future__ import annotations

import logging
import sys
from importlib.metadata import version

import click

from .cli_types import ExportCsvArgs, HostsArgs
from .commands import cmd_export_csv, cmd_hosts
from .constants import TZ_ENV_VAR
from .exceptions import FleetViewError, UserError
from .view import ActiveView, SortKey

# Module logger
logger = logging.getLogger("fleetview")

SORT_CHOICES = [key.value for key in SortKey] + ["status"]


def setup_logging(debug: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if debug else logging.WARNING
    logger.setLevel(level)
    if any(
        isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
        for h in logger.handlers
    ):
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=version("fleetview"), prog_name="fleetview")
@click.option(
    "--debug",
    "-d",
    is_flag=True,
    help="Enable debug logging to stderr.",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool):
    """FleetView: table, network and map views of a host fleet."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    setup_logging(debug=debug)


@cli.command("hosts")
@click.argument("hosts_file", type=click.Path())
@click.option(
    "--search",
    default="",
    help="Only show hosts whose name, apps or tag values contain this text.",
)
@click.option(
    "--sort",
    multiple=True,
    type=click.Choice(SORT_CHOICES, case_sensitive=False),
    help="Sort by column; repeat the same column to flip direction (repeatable).",
)
@click.option(
    "--view",
    type=click.Choice([v.value for v in ActiveView], case_sensitive=False),
    default=ActiveView.TABLE.value,
    show_default=True,
    help="Which view to print.",
)
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Emit machine-readable JSON to stdout.",
)
@click.option(
    "--seed",
    type=int,
    help="Seed for map coordinates (for reproducible output).",
)
@click.option(
    "--max-width",
    type=int,
    default=0,
    show_default=True,
    help="Clip table columns to this many characters (0 = no limit).",
)
def hosts(
    hosts_file: str,
    search: str,
    sort: tuple[str, ...],
    view: str,
    json_output: bool,
    seed: int | None,
    max_width: int,
):
    """Show hosts from a JSON or JSONL file as a table, network graph or map markers."""
    args = HostsArgs(
        hosts_file=hosts_file,
        search=search,
        sort=list(sort),
        view=view.lower(),
        json=json_output,
        seed=seed,
        max_width=max_width,
    )
    cmd_hosts(args)


@cli.command("export-csv")
@click.argument("result_file", type=click.Path())
@click.option(
    "--output",
    "-o",
    help="Output path, or '-' for stdout (default: <series name>.csv).",
)
@click.option(
    "--tz",
    help=f"Time zone for the date column (default: ${TZ_ENV_VAR} or UTC).",
)
@click.option(
    "--quote",
    is_flag=True,
    help="Quote values containing commas, quotes or newlines.",
)
def export_csv(result_file: str, output: str | None, tz: str | None, quote: bool):
    """Export the first series of a query result file as CSV."""
    args = ExportCsvArgs(
        result_file=result_file,
        output=output,
        tz=tz,
        quote=quote,
    )
    cmd_export_csv(args)


def main():
    """Main entry point for the CLI."""
    try:
        cli()
    except UserError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(e.rc)
    except FleetViewError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(2)
    except KeyboardInterrupt:
        click.echo("ERROR: Interrupted", err=True)
        sys.exit(130)
