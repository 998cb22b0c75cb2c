"""
Pydantic schemas for issues.
"""
from datetime import datetime
from typing import Dict, List, Literal, Optional

from pydantic import Field, field_validator

from .base import CamelModel, reject_null

IssueSeverity = Literal["low", "medium", "high", "critical"]
IssueStatus = Literal["open", "in_progress", "resolved"]


class IssueBase(CamelModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    image_url: Optional[str] = None
    severity: IssueSeverity = "medium"


class IssueCreate(IssueBase):
    """Body for POST /api/issues."""
    profile_id: int


class IssueCreateForProfile(IssueBase):
    pass


class IssueUpdate(CamelModel):
    """
    Partial update. Setting status keeps isResolved and resolvedAt in step;
    setting isResolved alone moves the status to resolved or back to open.
    """
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    image_url: Optional[str] = None
    severity: Optional[IssueSeverity] = None
    status: Optional[IssueStatus] = None
    is_resolved: Optional[bool] = None

    @field_validator("title", "severity", "status", "is_resolved", mode="before")
    def not_null(cls, v, info):
        return reject_null(v, info.field_name)


class IssueRead(IssueBase):
    id: int
    profile_id: int
    status: IssueStatus = "open"
    is_resolved: bool = False
    created_at: datetime
    resolved_at: Optional[datetime] = None


class AnalysisSection(CamelModel):
    title: Optional[str] = Field(None, description="Heading text, null for the introduction")
    content: str


class IssueAnalysisResponse(CamelModel):
    issue: IssueRead
    analysis: str
    sections: List[AnalysisSection]


class IssueSummaryResponse(CamelModel):
    total: int
    by_status: Dict[str, int]
    by_severity: Dict[str, int]
    newest_issues: List[IssueRead]
    oldest_issues: List[IssueRead]
    most_critical_issues: List[IssueRead]
