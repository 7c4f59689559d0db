"""CSV writer for lists of row objects."""

import csv
import io
from typing import List

from ..models import SerializationError
from ..value import Value, to_compact_json


def _cell(value: Value) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return to_compact_json(value)


def write_csv(value: Value, delimiter: str = ",") -> str:
    """Render a list of objects as CSV text.

    Args:
        value: List of dicts (one per row)
        delimiter: Field delimiter (default: ",")

    Raises:
        SerializationError: If value is not a list of objects

    Notes:
        - Columns are the sorted union of all row keys
        - Missing keys render as empty cells
        - Non-string cells are written as compact JSON
        - Rows end with "\\n"; an empty list renders as ""
    """
    if not isinstance(value, list):
        raise SerializationError("CSV requires an array of objects")
    if not all(isinstance(row, dict) for row in value):
        raise SerializationError("CSV requires every row to be an object")
    if not value:
        return ""

    columns: List[str] = sorted({key for row in value for key in row})

    output = io.StringIO()
    writer = csv.writer(output, delimiter=delimiter, lineterminator="\n")
    writer.writerow(columns)
    try:
        for row in value:
            writer.writerow([_cell(row.get(column)) for column in columns])
    except RecursionError as e:
        raise SerializationError("Cell value is nested too deeply for CSV") from e
    return output.getvalue()


__all__ = ["write_csv"]
