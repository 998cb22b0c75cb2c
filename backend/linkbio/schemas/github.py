"""
Schemas for GitHub contribution data.
"""
from typing import List, Optional

from pydantic import BaseModel

from .base import CamelModel


class ContributionRead(CamelModel):
    date: str
    count: int
    level: int


class ContributionsResponse(CamelModel):
    contributions: List[ContributionRead]


class BestDay(CamelModel):
    date: str
    count: int


class ContributionStatsRead(CamelModel):
    total_contributions: int
    current_streak: int
    longest_streak: int
    best_day: Optional[BestDay] = None


class GithubUserProfile(BaseModel):
    """Subset of the api.github.com user object, keys as GitHub sends them."""
    login: str
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    html_url: Optional[str] = None
    bio: Optional[str] = None
    public_repos: int = 0
    followers: int = 0
    following: int = 0
    created_at: Optional[str] = None

    class Config:
        extra = "ignore"


class GithubStatsResponse(CamelModel):
    profile: GithubUserProfile
    stats: ContributionStatsRead
    weeks: List[List[ContributionRead]]
    contributions: List[ContributionRead]
