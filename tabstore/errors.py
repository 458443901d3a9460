from __future__ import annotations

from typing import List


class TabularError(Exception):
    pass


class SourceUnavailable(TabularError):
    """The source could not be opened or read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to open file: {path} ({reason})")
        self.path = path
        self.reason = reason


class SchemaMismatch(TabularError):
    """A column required by the aggregate is absent from the header."""

    def __init__(self, missing: List[str]):
        names = ", ".join(f"'{m}'" for m in missing)
        super().__init__(f"Could not find {names} column(s) for analysis")
        self.missing = missing


class CellParseError(TabularError):
    def __init__(self, column: str, value: str | None, reason: str):
        super().__init__(f"column '{column}': {reason}")
        self.column = column
        self.value = value
        self.reason = reason
