"""
API endpoints for the issue tracker. All routes are owner-only.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth.dependencies import get_current_user_id, get_owned_profile
from ..crud import issue as issue_crud
from ..db.models.issue import Issue
from ..db.session import get_db
from ..schemas.issue import IssueCreate, IssueCreateForProfile, IssueRead, IssueStatus, IssueUpdate

logger = logging.getLogger(__name__)

router = APIRouter(tags=["issues"])


async def get_owned_issue(db: AsyncSession, issue_id: int, user_id: int) -> Issue:
    """
    Raises:
        HTTPException 404: If the issue does not exist
        HTTPException 403: If its profile belongs to someone else
    """
    issue = await issue_crud.get_issue(db, issue_id)
    if not issue:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Issue not found")
    await get_owned_profile(db, issue.profile_id, user_id)
    return issue


@router.get("/api/profile/{profile_id}/issues", response_model=List[IssueRead])
async def list_issues(
    profile_id: int,
    issue_status: Optional[IssueStatus] = Query(None, alias="status"),
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    await get_owned_profile(db, profile_id, user_id)
    return await issue_crud.get_issues(db, profile_id, issue_status)


@router.post(
    "/api/profile/{profile_id}/issues",
    response_model=IssueRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_issue_for_profile(
    profile_id: int,
    payload: IssueCreateForProfile,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    await get_owned_profile(db, profile_id, user_id)
    return await issue_crud.create_issue(db, profile_id, payload)


@router.post("/api/issues", response_model=IssueRead, status_code=status.HTTP_201_CREATED)
async def create_issue(
    payload: IssueCreate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    await get_owned_profile(db, payload.profile_id, user_id)
    return await issue_crud.create_issue(db, payload.profile_id, payload)


@router.get("/api/issues/{issue_id}", response_model=IssueRead)
async def get_issue(
    issue_id: int,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    return await get_owned_issue(db, issue_id, user_id)


@router.patch("/api/issues/{issue_id}", response_model=IssueRead)
async def update_issue(
    issue_id: int,
    payload: IssueUpdate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    issue = await get_owned_issue(db, issue_id, user_id)
    return await issue_crud.update_issue(db, issue, payload)


@router.post("/api/issues/{issue_id}/resolve", response_model=IssueRead)
async def resolve_issue(
    issue_id: int,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    """
    Mark an issue resolved. Resolving a resolved issue changes nothing.
    """
    issue = await get_owned_issue(db, issue_id, user_id)
    resolved = await issue_crud.resolve_issue(db, issue)
    logger.info(f"[ISSUES] Issue {issue_id} resolved")
    return resolved


@router.post("/api/issues/{issue_id}/reopen", response_model=IssueRead)
async def reopen_issue(
    issue_id: int,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    issue = await get_owned_issue(db, issue_id, user_id)
    reopened = await issue_crud.reopen_issue(db, issue)
    logger.info(f"[ISSUES] Issue {issue_id} reopened")
    return reopened


@router.delete("/api/issues/{issue_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_issue(
    issue_id: int,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db)
):
    issue = await get_owned_issue(db, issue_id, user_id)
    await issue_crud.delete_issue(db, issue)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
