"""
API endpoints for AI-assisted issue analysis.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..ai.analysis import analyze_issue, split_analysis_sections
from ..ai.perplexity import PerplexityClient
from ..auth.dependencies import get_current_user_id
from ..crud import issue as issue_crud
from ..crud import profile as profile_crud
from ..db.session import get_db
from ..schemas.issue import IssueAnalysisResponse, IssueSummaryResponse
from .issues import get_owned_issue

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/ai/issues",
    tags=["ai"],
)


def get_perplexity_client() -> PerplexityClient:
    return PerplexityClient()


@router.get("/summary", response_model=IssueSummaryResponse)
async def get_issue_summary(user_id: int = Depends(get_current_user_id), db: AsyncSession = Depends(get_db)):
    """
    Issue counts of the caller's profile plus the newest, oldest and most
    critical unresolved issues.
    """
    profile = await profile_crud.get_profile_by_user_id(db, user_id)
    if not profile:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")

    issues = await issue_crud.get_issues(db, profile.id)
    return issue_crud.summarize_issues(issues)


@router.get("/{issue_id}/analyze", response_model=IssueAnalysisResponse)
async def analyze(
    issue_id: int,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
    client: PerplexityClient = Depends(get_perplexity_client)
):
    issue = await get_owned_issue(db, issue_id, user_id)

    logger.info(f"[AI] Analyzing issue {issue_id}")
    analysis = await analyze_issue(issue.title, issue.description, issue.severity, client=client)
    return {
        "issue": issue,
        "analysis": analysis,
        "sections": split_analysis_sections(analysis),
    }
