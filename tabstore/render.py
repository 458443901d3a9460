from __future__ import annotations

from typing import List, Sequence

from .rules import COLUMN_WIDTH

TABLE_TITLE = "--- Loaded Data Table ---"


def format_cells(cells: Sequence[str], width: int = COLUMN_WIDTH) -> str:
    # ljust pads short cells and leaves wider ones intact
    return "".join(cell.ljust(width) for cell in cells)


def format_table(
    header: Sequence[str],
    rows: Sequence[Sequence[str]],
    width: int = COLUMN_WIDTH,
) -> str:
    """
    Fixed-width rendering: title, header, dash rule sized to the header, rows.

    The returned text starts and ends with a blank line.
    """
    lines: List[str] = ["", TABLE_TITLE, format_cells(header, width), "-" * (len(header) * width)]
    lines.extend(format_cells(row, width) for row in rows)
    lines.append("")
    return "\n".join(lines) + "\n"
