"""
API endpoints for GitHub contribution data.
"""
import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException, status

from ..github.sources import (
    ContributionSource,
    GitHubAPIError,
    GitHubUserClient,
    get_contribution_source,
    get_user_client,
)
from ..github.stats import calculate_stats, group_into_weeks
from ..schemas.github import ContributionsResponse, GithubStatsResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["github"])


@router.get("/github-contributions/{username}", response_model=ContributionsResponse)
async def get_github_contributions(
    username: str,
    source: ContributionSource = Depends(get_contribution_source)
):
    """
    Contribution days in document order. An empty list means either no data
    or a failed fetch.
    """
    return {"contributions": await source.fetch(username)}


@router.get("/github-stats/{username}", response_model=GithubStatsResponse)
async def get_github_stats(
    username: str,
    source: ContributionSource = Depends(get_contribution_source),
    user_client: GitHubUserClient = Depends(get_user_client)
):
    try:
        github_user = await user_client.get_user(username)
    except GitHubAPIError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except httpx.HTTPError as e:
        logger.error(f"[GITHUB] User lookup failed for {username}: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Failed to fetch GitHub statistics")

    contributions = await source.fetch(username)
    return {
        "profile": github_user,
        "stats": calculate_stats(contributions),
        "weeks": group_into_weeks(contributions),
        "contributions": contributions,
    }
