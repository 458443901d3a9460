"""
Revenue aggregate over a loaded table.

Cell conversion is fallible rather than raising: each parser returns a
``(value, error)`` pair and exactly one side is ``None``. The row loop turns
errors into warnings and skips the row.
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple

from .errors import CellParseError, SchemaMismatch
from .models import CellIssue, RevenueResult
from .rules import PRICE_COLUMN, UNITS_COLUMN

# ASCII numerals only: float()/int() alone would take "1_000" and non-ASCII digits
_PRICE_RE = re.compile(
    r"\s*[+-]?(?:(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)\s*",
    re.ASCII | re.IGNORECASE,
)
_UNITS_RE = re.compile(r"\s*[+-]?\d+\s*", re.ASCII)


def parse_price(cell: str, column: str = PRICE_COLUMN) -> Tuple[Optional[float], Optional[CellParseError]]:
    if not _PRICE_RE.fullmatch(cell):
        return None, CellParseError(column, cell, f"not a number: {cell!r}")
    return float(cell), None


def parse_units(cell: str, column: str = UNITS_COLUMN) -> Tuple[Optional[int], Optional[CellParseError]]:
    if not _UNITS_RE.fullmatch(cell):
        return None, CellParseError(column, cell, f"not an integer: {cell!r}")
    return int(cell), None


def column_index(header: Sequence[str], name: str) -> Optional[int]:
    """First exact match of ``name`` in ``header``, or None."""
    for i, col in enumerate(header):
        if col == name:
            return i
    return None


def _cell(row: Sequence[str], idx: int, column: str) -> Tuple[Optional[str], Optional[CellParseError]]:
    if idx >= len(row):
        return None, CellParseError(
            column, None, f"row has {len(row)} cells, no value at index {idx}"
        )
    return row[idx], None


def compute_revenue(
    header: Sequence[str],
    rows: Sequence[Sequence[str]],
    price_column: str = PRICE_COLUMN,
    units_column: str = UNITS_COLUMN,
) -> RevenueResult:
    """
    Sum price * units over every row whose two cells parse.

    Raises SchemaMismatch when either column is missing from the header.
    Unparseable or short rows are skipped and reported in ``warnings``.
    """
    price_idx = column_index(header, price_column)
    units_idx = column_index(header, units_column)

    missing: List[str] = []
    if price_idx is None:
        missing.append(price_column)
    if units_idx is None:
        missing.append(units_column)
    if missing:
        raise SchemaMismatch(missing)

    result = RevenueResult()
    total = 0.0

    for n, row in enumerate(rows, start=1):
        price_cell, err = _cell(row, price_idx, price_column)
        price = None
        if err is None:
            price, err = parse_price(price_cell, price_column)

        units = None
        if err is None:
            units_cell, err = _cell(row, units_idx, units_column)
            if err is None:
                units, err = parse_units(units_cell, units_column)

        if err is not None:
            result.rows_skipped += 1
            result.warnings.append(CellIssue(
                row=n,
                column=err.column,
                issue=err.reason,
                value=err.value,
            ))
            continue

        total += price * units
        result.rows_used += 1

    result.total = total
    return result
