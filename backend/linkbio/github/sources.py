"""
Where contribution data comes from.

Callers depend on ContributionSource only, so the HTML scraper can be
replaced by the GraphQL API (or a stub in tests) without touching them.
"""
import logging
from typing import Any, Dict, List, Optional

import httpx

from ..core.config import settings
from .parsers import Contribution, parse_contributions

logger = logging.getLogger(__name__)

GITHUB_WEB_URL = "https://github.com"
GITHUB_API_URL = "https://api.github.com"

GRAPHQL_LEVELS = {
    "NONE": 0,
    "FIRST_QUARTILE": 1,
    "SECOND_QUARTILE": 2,
    "THIRD_QUARTILE": 3,
    "FOURTH_QUARTILE": 4,
}

CONTRIBUTIONS_QUERY = """
query($login: String!) {
  user(login: $login) {
    contributionsCollection {
      contributionCalendar {
        weeks {
          contributionDays {
            date
            contributionCount
            contributionLevel
          }
        }
      }
    }
  }
}
"""


class GitHubAPIError(Exception):
    """Raised when api.github.com answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class GitHubClientBase:
    """
    Shared HTTP setup for GitHub calls.

    A transport can be injected to stub the network in tests.
    """

    TIMEOUT = settings.GITHUB_TIMEOUT_SECONDS
    USER_AGENT = "linkbio-server"

    def __init__(self, timeout: Optional[float] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.timeout = timeout if timeout is not None else self.TIMEOUT
        self.transport = transport

    def _client(self, headers: Optional[Dict[str, str]] = None) -> httpx.AsyncClient:
        base_headers = {"User-Agent": self.USER_AGENT}
        base_headers.update(headers or {})
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport, headers=base_headers)


class ContributionSource(GitHubClientBase):
    """
    Interface for contribution providers.

    fetch() never raises: failures are logged and reported as an empty list.
    """

    async def fetch(self, username: str) -> List[Contribution]:
        raise NotImplementedError


class ScrapedContributionSource(ContributionSource):
    """Reads the public contribution calendar page."""

    async def fetch(self, username: str) -> List[Contribution]:
        url = f"{GITHUB_WEB_URL}/users/{username}/contributions"
        try:
            async with self._client() as client:
                response = await client.get(url)
            if response.status_code != 200:
                logger.warning(f"[GITHUB] Calendar request for {username} returned {response.status_code}")
                return []
            contributions = parse_contributions(response.text)
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"[GITHUB] Failed to fetch contributions for {username}: {e}")
            return []

        logger.info(f"[GITHUB] Parsed {len(contributions)} contribution days for {username}")
        return contributions


class GraphQLContributionSource(ContributionSource):
    """Uses the official GraphQL API; requires a personal access token."""

    def __init__(self, token: str, **kwargs: Any):
        super().__init__(**kwargs)
        self.token = token

    async def fetch(self, username: str) -> List[Contribution]:
        headers = {"Authorization": f"Bearer {self.token}"}
        body = {"query": CONTRIBUTIONS_QUERY, "variables": {"login": username}}
        try:
            async with self._client(headers) as client:
                response = await client.post(f"{GITHUB_API_URL}/graphql", json=body)
            if response.status_code != 200:
                logger.warning(f"[GITHUB] GraphQL request for {username} returned {response.status_code}")
                return []
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"[GITHUB] GraphQL request failed for {username}: {e}")
            return []

        if data.get("errors") or not (data.get("data") or {}).get("user"):
            logger.warning(f"[GITHUB] GraphQL returned no calendar for {username}: {data.get('errors')}")
            return []

        try:
            calendar = data["data"]["user"]["contributionsCollection"]["contributionCalendar"]
            return [
                Contribution(
                    date=day["date"],
                    count=day["contributionCount"],
                    level=GRAPHQL_LEVELS.get(day.get("contributionLevel"), 0),
                )
                for week in calendar["weeks"]
                for day in week["contributionDays"]
            ]
        except (KeyError, TypeError) as e:
            logger.error(f"[GITHUB] Unexpected GraphQL payload for {username}: {e}")
            return []


class GitHubUserClient(GitHubClientBase):
    """Looks up public user profiles on api.github.com."""

    def __init__(self, token: Optional[str] = None, **kwargs: Any):
        super().__init__(**kwargs)
        self.token = token

    async def get_user(self, username: str) -> Dict[str, Any]:
        """
        Raises:
            GitHubAPIError: with the upstream status for non-2xx answers
            httpx.HTTPError: on network failures
        """
        headers = {"Accept": "application/vnd.github+json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        async with self._client(headers) as client:
            response = await client.get(f"{GITHUB_API_URL}/users/{username}")
        if response.is_error:
            logger.warning(f"[GITHUB] User lookup for {username} returned {response.status_code}")
            raise GitHubAPIError(response.status_code, f"GitHub API error: {response.reason_phrase}")
        return response.json()


def get_contribution_source() -> ContributionSource:
    """
    GraphQL when GITHUB_TOKEN is configured, the page scraper otherwise.
    """
    if settings.GITHUB_TOKEN:
        return GraphQLContributionSource(settings.GITHUB_TOKEN)
    return ScrapedContributionSource()


def get_user_client() -> GitHubUserClient:
    return GitHubUserClient(settings.GITHUB_TOKEN)
