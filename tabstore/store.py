"""
Header-indexed row storage for comma-delimited tables.

A store is either empty or loaded. Each successful load replaces the header
and every row; a failed load leaves the store exactly as it was.
"""

from __future__ import annotations

import os
import sys
from typing import List, Optional, TextIO

from .console import SUCCESS, get_logger
from .errors import SchemaMismatch, SourceUnavailable
from .models import RevenueResult
from .render import format_table
from .revenue import compute_revenue
from .rules import COLUMN_WIDTH, CURRENCY_SYMBOL, DELIMITER
from .source import decode_source, read_source, split_lines

log = get_logger("store")


def parse_line(line: str) -> List[str]:
    """
    Split one line on every delimiter.

    Not quote-aware and no trimming: ``"a,b,,d"`` gives four cells, ``""``
    gives none.
    """
    if not line:
        return []
    return line.split(DELIMITER)


class TabularStore:
    def __init__(self, column_width: int = COLUMN_WIDTH, currency_symbol: str = CURRENCY_SYMBOL):
        self.column_width = column_width
        self.currency_symbol = currency_symbol
        self._header: List[str] = []
        self._rows: List[List[str]] = []
        self.last_revenue: Optional[RevenueResult] = None

    @property
    def header(self) -> List[str]:
        return list(self._header)

    @property
    def rows(self) -> List[List[str]]:
        return [list(row) for row in self._rows]

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def is_loaded(self) -> bool:
        return bool(self._header or self._rows)

    def load(self, path: str | os.PathLike) -> bool:
        """Load a table file. Returns False if it cannot be read."""
        name = os.fspath(path)
        try:
            raw = read_source(path)
        except SourceUnavailable as e:
            log.error("%s", e)
            return False
        return self.load_bytes(raw, name)

    def load_bytes(self, raw: bytes, source_name: str = "<memory>") -> bool:
        text, report = decode_source(raw)
        log.debug(
            "Decoded %s as %s (detected=%s, fallback=%s, newlines_changed=%s)",
            source_name, report["decode_used"], report["detected"], report["decode_fallback"],
            report["newlines_changed"],
        )

        header: List[str] = []
        rows: List[List[str]] = []
        seen_header = False

        for line in split_lines(text):
            if not line:
                continue
            fields = parse_line(line)
            if not seen_header:
                header = fields
                seen_header = True
            else:
                rows.append(fields)

        self._header = header
        self._rows = rows
        log.log(SUCCESS, "Loaded %d data rows from %s.", len(rows), source_name)
        return True

    def render_table(self, stream: Optional[TextIO] = None) -> None:
        if not self._rows:
            log.info("No data loaded.")
            return
        out = stream if stream is not None else sys.stdout
        out.write(format_table(self._header, self._rows, self.column_width))

    def calculate_total_revenue(self, stream: Optional[TextIO] = None) -> Optional[RevenueResult]:
        """
        Compute and print the total estimated revenue.

        Returns the result, or None when there is no data or the header lacks
        a required column. Skipped rows are reported as warnings.
        """
        if not self._rows:
            log.info("Cannot calculate revenue: no data loaded.")
            return None

        try:
            result = compute_revenue(self._header, self._rows)
        except SchemaMismatch as e:
            log.error("%s.", e)
            return None

        for w in result.warnings:
            log.warning("Skipping row %d due to parsing error: %s", w.row, w.issue)

        out = stream if stream is not None else sys.stdout
        out.write("--- Analysis Result ---\n")
        out.write(f"Total Estimated Revenue: {self.currency_symbol}{result.total:.2f}\n\n")

        self.last_revenue = result
        return result
