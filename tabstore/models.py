from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field


class CellIssue(BaseModel):
    row: int
    column: Optional[str] = None
    issue: str
    value: Optional[str] = None
    action: str = "skipped_row"


class RevenueResult(BaseModel):
    total: float = 0.0
    rows_used: int = 0
    rows_skipped: int = 0
    warnings: List[CellIssue] = Field(default_factory=list)


class SchemaIssue(BaseModel):
    issue: str = "schema_mismatch"
    missing: List[str] = Field(default_factory=list)


class TableResponse(BaseModel):
    source: str
    header: List[str] = Field(default_factory=list)
    rows: List[List[str]] = Field(default_factory=list)
    row_count: int = 0
    revenue: Optional[RevenueResult] = None
    errors: List[SchemaIssue] = Field(default_factory=list)


class HealthResponse(BaseModel):
    ok: bool = True
