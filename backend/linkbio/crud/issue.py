"""
CRUD operations for issues, including the resolve/reopen lifecycle.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.models.issue import Issue
from ..schemas.issue import IssueBase, IssueUpdate

logger = logging.getLogger(__name__)

ISSUE_STATUSES = ["open", "in_progress", "resolved"]
ISSUE_SEVERITIES = ["low", "medium", "high", "critical"]
SEVERITY_WEIGHT = {"critical": 4, "high": 3, "medium": 2, "low": 1}
SUMMARY_LIMIT = 3


async def get_issues(db: AsyncSession, profile_id: int, status: Optional[str] = None) -> List[Issue]:
    """
    Get the issues of a profile, newest first.
    """
    stmt = select(Issue).where(Issue.profile_id == profile_id)
    if status is not None:
        stmt = stmt.where(Issue.status == status)
    result = await db.execute(stmt.order_by(Issue.created_at.desc(), Issue.id.desc()))
    return list(result.scalars().all())


async def get_issue(db: AsyncSession, issue_id: int) -> Optional[Issue]:
    result = await db.execute(select(Issue).where(Issue.id == issue_id))
    return result.scalar_one_or_none()


async def create_issue(db: AsyncSession, profile_id: int, obj_in: IssueBase) -> Issue:
    db_issue = Issue(profile_id=profile_id, status="open", is_resolved=False, **obj_in.model_dump(exclude={"profile_id"}))
    db.add(db_issue)
    await db.flush()
    await db.refresh(db_issue)
    logger.info(f"[ISSUES] Created issue {db_issue.id} for profile {profile_id}")
    return db_issue


def _mark_resolved(issue: Issue) -> None:
    # Resolving twice keeps the first resolution time
    if issue.status == "resolved" and issue.resolved_at is not None:
        issue.is_resolved = True
        return
    issue.status = "resolved"
    issue.is_resolved = True
    issue.resolved_at = datetime.now(timezone.utc)


def _mark_unresolved(issue: Issue, status: str = "open") -> None:
    issue.status = status
    issue.is_resolved = False
    issue.resolved_at = None


async def update_issue(db: AsyncSession, db_obj: Issue, obj_in: IssueUpdate) -> Issue:
    """
    Apply a partial update.

    status wins over isResolved when both are given; either one keeps
    status, isResolved and resolvedAt consistent.
    """
    update_data = obj_in.model_dump(exclude_unset=True)
    status = update_data.pop("status", None)
    is_resolved = update_data.pop("is_resolved", None)

    for field, value in update_data.items():
        setattr(db_obj, field, value)

    if status == "resolved":
        _mark_resolved(db_obj)
    elif status is not None:
        _mark_unresolved(db_obj, status)
    elif is_resolved is True:
        _mark_resolved(db_obj)
    elif is_resolved is False and db_obj.is_resolved:
        _mark_unresolved(db_obj)

    await db.flush()
    await db.refresh(db_obj)
    return db_obj


async def resolve_issue(db: AsyncSession, db_obj: Issue) -> Issue:
    """
    Move an issue to resolved. Idempotent for already resolved issues.
    """
    _mark_resolved(db_obj)
    await db.flush()
    await db.refresh(db_obj)
    return db_obj


async def reopen_issue(db: AsyncSession, db_obj: Issue) -> Issue:
    _mark_unresolved(db_obj)
    await db.flush()
    await db.refresh(db_obj)
    return db_obj


async def delete_issue(db: AsyncSession, db_obj: Issue) -> None:
    await db.delete(db_obj)
    await db.flush()


def _created_key(issue: Issue) -> float:
    return issue.created_at.timestamp() if issue.created_at else 0.0


def summarize_issues(issues: List[Issue]) -> Dict[str, Any]:
    """
    Build the issue dashboard summary.

    Totals are computed over all issues; the newest, oldest and most critical
    lists only consider unresolved issues and hold at most three entries each.
    """
    unresolved = [issue for issue in issues if issue.status != "resolved"]
    return {
        "total": len(issues),
        "by_status": {status: sum(1 for i in issues if i.status == status) for status in ISSUE_STATUSES},
        "by_severity": {severity: sum(1 for i in issues if i.severity == severity) for severity in ISSUE_SEVERITIES},
        "newest_issues": sorted(unresolved, key=_created_key, reverse=True)[:SUMMARY_LIMIT],
        "oldest_issues": sorted(unresolved, key=_created_key)[:SUMMARY_LIMIT],
        "most_critical_issues": sorted(
            unresolved,
            key=lambda issue: SEVERITY_WEIGHT.get(issue.severity, 0),
            reverse=True,
        )[:SUMMARY_LIMIT],
    }
