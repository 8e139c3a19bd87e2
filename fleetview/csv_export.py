"""Export of time-series query results as CSV text."""

from __future__ import annotations

import csv
import datetime as dt
import io
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .constants import CSV_DATE_HEADER, CSV_DEFAULT_NAME
from .exceptions import MalformedResultError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CsvExport:
    name: str | None
    csv_string: str


def parse_timestamp(value: Any, *, tz: dt.tzinfo) -> dt.datetime:
    """Convert an epoch-milliseconds number, ISO 8601 string or datetime.

    Naive values are taken to be in tz. Raises ValueError if unparseable.
    """
    if isinstance(value, dt.datetime):
        parsed = value
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        return dt.datetime.fromtimestamp(value / 1000, tz=tz)
    elif isinstance(value, str):
        parsed = dt.datetime.fromisoformat(value.strip())
    else:
        raise ValueError(f"unsupported timestamp: {value!r}")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz)
    return parsed.astimezone(tz)


def format_date(value: Any, *, tz: dt.tzinfo = dt.UTC) -> str:
    """Format a timestamp as M/D/YYYY h:mm:ss A (spreadsheet friendly)."""
    when = parse_timestamp(value, tz=tz)
    hour = when.hour % 12 or 12
    meridiem = "AM" if when.hour < 12 else "PM"
    return (
        f"{when.month}/{when.day}/{when.year:04d} "
        f"{hour}:{when.minute:02d}:{when.second:02d} {meridiem}"
    )


def _first_series(results: Any) -> dict[str, Any]:
    try:
        series = results[0]["series"][0]
    except (IndexError, KeyError, TypeError) as e:
        raise MalformedResultError("Query result has no series") from e
    if not isinstance(series, dict):
        raise MalformedResultError("Query result series is not an object")
    return series


def _cell(value: Any) -> str:
    """Render a value the way the dashboard joins it: true/false, 5 rather than 5.0."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def results_to_csv(
    results: Sequence[dict[str, Any]],
    *,
    tz: dt.tzinfo = dt.UTC,
    quote: bool = False,
) -> CsvExport:
    """Serialize the first series of the first result to CSV.

    The timestamp column is renamed to "date" and formatted with format_date.
    By default values are joined with commas as-is; quote=True applies
    RFC 4180 quoting to values containing delimiters or quotes.

    Raises:
        MalformedResultError: series, columns or values are missing, or a
            timestamp cannot be parsed
    """
    series = _first_series(results)
    name = series.get("name")
    columns = series.get("columns")
    values = series.get("values")
    if not columns:
        raise MalformedResultError(f"Series {name!r} has no columns")
    if values is None:
        raise MalformedResultError(f"Series {name!r} has no values")

    header = [CSV_DATE_HEADER, *(_cell(c) for c in columns[1:])]
    rows = [header]
    for index, row in enumerate(values):
        if not row:
            raise MalformedResultError(f"Row {index} of series {name!r} is empty")
        timestamp, *measurements = row
        try:
            date = format_date(timestamp, tz=tz)
        except (ValueError, OverflowError, OSError) as e:
            raise MalformedResultError(
                f"Row {index} of series {name!r} has invalid timestamp {timestamp!r}"
            ) from e
        rows.append([date, *(_cell(m) for m in measurements)])

    if quote:
        buf = io.StringIO()
        writer = csv.writer(buf, lineterminator="\n")
        writer.writerows(rows)
        csv_string = buf.getvalue().removesuffix("\n")
    else:
        csv_string = "\n".join(",".join(row) for row in rows)

    logger.debug("Serialized %d rows for series %r", len(values), name)
    return CsvExport(name=name, csv_string=csv_string)


def csv_filename(name: str | None) -> str:
    """Return a download filename for an exported series."""
    stem = (name or CSV_DEFAULT_NAME).strip().replace("/", "_") or CSV_DEFAULT_NAME
    return f"{stem}.csv"
