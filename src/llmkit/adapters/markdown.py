"""Markdown table adapter: pipe tables to a list of string-valued objects."""

import logging

from .lines import split_lines

log = logging.getLogger(__name__)


def _cells(line: str) -> list[str]:
    return [cell.strip() for cell in line.split("|") if cell.strip()]


def markdown_table_to_records(text: str) -> list[dict[str, str]]:
    """Extract the first pipe table from Markdown text.

    The header is the first line containing ``|`` that is followed by a line
    containing ``-`` (the separator). Data rows follow the separator until
    the first line without ``|``. Rows with a different number of non-empty
    cells than the header are skipped. Cell values stay strings.

    Raises:
        ValueError: If no table header is found or no row is accepted
    """
    lines = split_lines(text)

    start = next(
        (
            i
            for i in range(len(lines) - 1)
            if "|" in lines[i] and "-" in lines[i + 1]
        ),
        None,
    )
    if start is None:
        raise ValueError("No Markdown table header found")

    headers = _cells(lines[start])
    if not headers:
        raise ValueError("Markdown table header has no cells")

    rows = []
    for line in lines[start + 2:]:
        if "|" not in line:
            break
        cells = _cells(line)
        if len(cells) != len(headers):
            log.debug("Skipping table row with %d cells: %r", len(cells), line)
            continue
        rows.append(dict(zip(headers, cells)))

    if not rows:
        raise ValueError("Markdown table has no data rows")
    return rows


__all__ = ["markdown_table_to_records"]
