"""Pydantic request/response models."""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

_CAMEL = ConfigDict(populate_by_name=True)


# --- Request ---


class IssueIn(BaseModel):
    """One issue from the validation engine."""

    model_config = _CAMEL

    code: Optional[str] = Field(default=None, description="Issue code, e.g. shopify/blank_price")
    message: str = Field(default="", description="Human-readable issue message")
    severity: Literal["error", "warning", "info"] = Field(..., description="error, warning, or info")
    row_index: Optional[int] = Field(default=-1, alias="rowIndex", description="0-based row index, -1 for file-level")
    column: str = Field(default="", description="Column the issue refers to")
    suggestion: Optional[str] = None


class IssuesRequest(BaseModel):
    """Request body for readiness, score and report endpoints."""

    model_config = _CAMEL

    issues: List[IssueIn] = Field(default_factory=list)
    format_id: Optional[str] = Field(default=None, alias="formatId")
    file_name: Optional[str] = Field(default=None, alias="fileName")


class FixesRequest(BaseModel):
    """Request body for fix grouping and the fix log."""

    model_config = _CAMEL

    fixes: List[Optional[str]] = Field(default_factory=list, description="Applied fix messages, in order; null entries are allowed")
    file_name: Optional[str] = Field(default=None, alias="fileName")
    format_id: Optional[str] = Field(default=None, alias="formatId")


# --- Responses ---


class BlockingGroupOut(BaseModel):
    model_config = _CAMEL

    code: str
    title: str
    count: int
    first_row_index: int = Field(..., alias="firstRowIndex")
    auto_fixable_count: int = Field(..., alias="autoFixableCount")


class ReadinessResponse(BaseModel):
    """Response for POST /readiness."""

    model_config = _CAMEL

    blocking_errors: int = Field(..., alias="blockingErrors")
    auto_fixable_blocking_errors: int = Field(..., alias="autoFixableBlockingErrors")
    blocking_groups: List[BlockingGroupOut] = Field(default_factory=list, alias="blockingGroups")


class FixGroupOut(BaseModel):
    type: str
    count: int
    sample: str


class FixGroupsResponse(BaseModel):
    """Response for POST /fixes/groups."""

    total: int
    groups: List[FixGroupOut] = Field(default_factory=list)


class ScoreNoteOut(BaseModel):
    key: str
    label: str
    score: int
    note: str


class ScoreResponse(BaseModel):
    """Response for POST /score."""

    model_config = _CAMEL

    score: int
    categories: Dict[str, int]
    errors: int
    warnings: int
    infos: int
    blocking_errors: int = Field(..., alias="blockingErrors")
    ready: bool
    label: str
    notes: List[ScoreNoteOut] = Field(default_factory=list)


class FormatsResponse(BaseModel):
    formats: List[str] = Field(default_factory=list)
