"""CSV adapter: header row plus data rows to a list of objects."""

import csv
import io
import logging
import re

from ..value import Value

log = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_FLOAT = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)


def infer_scalar(cell: str) -> Value:
    """Type a CSV cell: booleans, integers and decimal floats, else text."""
    if cell == "true":
        return True
    if cell == "false":
        return False
    if _INTEGER.fullmatch(cell):
        return int(cell)
    if _FLOAT.fullmatch(cell):
        return float(cell)
    return cell


def csv_to_records(text: str, delimiter: str = ",") -> list[dict[str, Value]]:
    """Convert CSV text to a list of row objects keyed by the header.

    Args:
        text: CSV document; the first non-blank row is the header
        delimiter: Field delimiter (default: ",")

    Returns:
        One dict per data row. Blank lines are ignored and rows whose
        field count differs from the header are skipped.

    Raises:
        ValueError: If the text cannot be parsed or has no header row

    Example:
        >>> csv_to_records("name,age\\nAlice,30\\n")
        [{'name': 'Alice', 'age': 30}]
    """
    reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter)
    try:
        rows = [row for row in reader if row]
    except csv.Error as e:
        raise ValueError(f"CSV parsing error: {e}") from e

    if not rows:
        raise ValueError("CSV input has no header row")

    header, *body = rows
    records = []
    for lineno, row in enumerate(body, start=2):
        if len(row) != len(header):
            log.debug(
                "Skipping CSV row %d: %d fields, header has %d",
                lineno,
                len(row),
                len(header),
            )
            continue
        records.append({name: infer_scalar(cell) for name, cell in zip(header, row)})
    return records


__all__ = ["csv_to_records", "infer_scalar"]
