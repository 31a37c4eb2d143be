"""ASCII table formatter for displaying result sets."""

from __future__ import annotations

from tinysql.model.codec import decode
from tinysql.model.table import ResultSet, Table
from tinysql.model.types import Cell, Column


def format_cell(cell: Cell, column: Column) -> str:
    """Format a single cell, decoded by its column's type."""
    return str(decode(cell, column.type))


def format_result(result: ResultSet) -> str:
    """Format a result set as an ASCII table."""
    if not result.columns:
        return "(no columns)"

    headers = [c.name for c in result.columns]
    rows = []
    for row in result.rows:
        rows.append([format_cell(cell, col) for cell, col in zip(row, result.columns)])

    return _build_table(headers, rows)


def format_row_count(result: ResultSet) -> str:
    """Format the row count footer, e.g. "(2 rows)"."""
    n = len(result)
    return f"({n} row{'' if n == 1 else 's'})"


def format_schema(table: Table) -> str:
    """Format a table's schema inline, e.g. "users (id int, name text)"."""
    cols = ", ".join(f"{c.name} {c.type.value}" for c in table.columns)
    return f"{table.name} ({cols})"


def _build_table(headers: list[str], rows: list[list[str]]) -> str:
    """Build an ASCII table from headers and rows."""
    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    sep = "+-" + "-+-".join("-" * w for w in widths) + "-+"
    header = "| " + " | ".join(h.ljust(w) for h, w in zip(headers, widths)) + " |"

    lines = [sep, header, sep]
    for row in rows:
        line = "| " + " | ".join(cell.ljust(w) for cell, w in zip(row, widths)) + " |"
        lines.append(line)
    lines.append(sep)

    return "\n".join(lines)
