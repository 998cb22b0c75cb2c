"""
Tests for contribution parsing, statistics and the GitHub endpoints.
"""
from datetime import date, timedelta

import httpx
import pytest

from linkbio.github.parsers import Contribution, parse_contributions
from linkbio.github.sources import (
    GitHubUserClient,
    GraphQLContributionSource,
    ScrapedContributionSource,
    get_contribution_source,
    get_user_client,
)
from linkbio.github.stats import calculate_stats, group_into_weeks

from main import app

SVG_MARKUP = """
<svg>
  <g>
    <rect class="ContributionCalendar-day" data-date="2024-01-02" data-count="3" data-level="2"></rect>
    <rect class="ContributionCalendar-day" data-date="2024-01-01" data-count="0" data-level="0"></rect>
    <rect class="ContributionCalendar-day level-4" data-date="2024-01-03" data-count="12"></rect>
    <rect width="10" height="10"></rect>
  </g>
</svg>
"""

TABLE_MARKUP = """
<table>
  <tr>
    <td tabindex="0" data-ix="0" data-date="2024-03-01" id="contribution-day-component-5-0" data-level="1" class="ContributionCalendar-day"></td>
    <td tabindex="0" data-ix="0" data-date="2024-03-02" id="contribution-day-component-6-0" data-level="0" class="ContributionCalendar-day"></td>
  </tr>
</table>
<tool-tip for="contribution-day-component-5-0" popover="manual">1,204 contributions on March 1st.</tool-tip>
<tool-tip for="contribution-day-component-6-0" popover="manual">No contributions on March 2nd.</tool-tip>
"""


def days(start, counts):
    first = date.fromisoformat(start)
    return [
        Contribution((first + timedelta(days=offset)).isoformat(), count, min(count, 4))
        for offset, count in enumerate(counts)
    ]


def test_parse_svg_keeps_document_order():
    contributions = parse_contributions(SVG_MARKUP)

    assert contributions == [
        Contribution("2024-01-02", 3, 2),
        Contribution("2024-01-01", 0, 0),
        Contribution("2024-01-03", 12, 4),
    ]


def test_parse_table_layout_reads_tooltips():
    contributions = parse_contributions(TABLE_MARKUP)

    assert contributions == [
        Contribution("2024-03-01", 1204, 1),
        Contribution("2024-03-02", 0, 0),
    ]


def test_parse_unrecognised_markup():
    assert parse_contributions("<html><body>Not found</body></html>") == []


def test_parse_rejects_non_numeric_count():
    with pytest.raises(ValueError):
        parse_contributions('<rect data-date="2024-01-01" data-count="many" data-level="1"></rect>')


def test_weeks_start_on_sunday():
    # 2024-01-06 is a Saturday
    weeks = group_into_weeks(days("2024-01-06", [1] * 9))

    assert [len(week) for week in weeks] == [1, 7, 1]
    assert weeks[1][0].date == "2024-01-07"


def test_weeks_sort_input_first():
    contributions = list(reversed(days("2024-01-07", [1, 2, 3])))
    weeks = group_into_weeks(contributions)

    assert [c.date for c in weeks[0]] == ["2024-01-07", "2024-01-08", "2024-01-09"]


def test_stats_streaks_and_best_day():
    contributions = days("2024-01-01", [1, 2, 0, 5, 5, 1, 0, 3, 4])

    stats = calculate_stats(contributions)

    assert stats.total_contributions == 21
    assert stats.current_streak == 2
    assert stats.longest_streak == 3
    assert stats.best_day.date == "2024-01-04"
    assert stats.best_day.count == 5


def test_stats_current_streak_broken_by_inactive_last_day():
    stats = calculate_stats(days("2024-01-01", [1, 1, 0]))
    assert stats.current_streak == 0
    assert stats.longest_streak == 2


def test_stats_without_activity():
    stats = calculate_stats(days("2024-01-01", [0, 0, 0]))

    assert stats.total_contributions == 0
    assert stats.best_day is None
    assert calculate_stats([]).longest_streak == 0


def test_longest_streak_ignores_days_outside_window():
    contributions = days("2023-01-01", [1] * 10) + days("2024-06-01", [1, 1, 0])

    stats = calculate_stats(contributions)

    assert stats.longest_streak == 2


async def test_scraper_fetches_calendar_page():
    requested = []

    def handler(request):
        requested.append(str(request.url))
        return httpx.Response(200, text=SVG_MARKUP)

    source = ScrapedContributionSource(transport=httpx.MockTransport(handler))
    contributions = await source.fetch("octocat")

    assert requested == ["https://github.com/users/octocat/contributions"]
    assert len(contributions) == 3


async def test_scraper_returns_empty_list_on_failure():
    source = ScrapedContributionSource(transport=httpx.MockTransport(lambda request: httpx.Response(404)))
    assert await source.fetch("ghost") == []

    def broken(request):
        raise httpx.ConnectError("offline")

    source = ScrapedContributionSource(transport=httpx.MockTransport(broken))
    assert await source.fetch("octocat") == []


async def test_graphql_source_maps_levels():
    payload = {
        "data": {
            "user": {
                "contributionsCollection": {
                    "contributionCalendar": {
                        "weeks": [
                            {"contributionDays": [
                                {"date": "2024-01-07", "contributionCount": 0, "contributionLevel": "NONE"},
                                {"date": "2024-01-08", "contributionCount": 9, "contributionLevel": "FOURTH_QUARTILE"},
                            ]},
                        ]
                    }
                }
            }
        }
    }

    def handler(request):
        assert request.headers["Authorization"] == "Bearer gh-token"
        return httpx.Response(200, json=payload)

    source = GraphQLContributionSource("gh-token", transport=httpx.MockTransport(handler))

    assert await source.fetch("octocat") == [
        Contribution("2024-01-07", 0, 0),
        Contribution("2024-01-08", 9, 4),
    ]


async def test_graphql_source_unknown_user():
    source = GraphQLContributionSource(
        "gh-token",
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"data": {"user": None}})),
    )
    assert await source.fetch("ghost") == []


class StubSource:
    def __init__(self, contributions):
        self.contributions = contributions

    async def fetch(self, username):
        return self.contributions


async def test_contributions_endpoint(client):
    app.dependency_overrides[get_contribution_source] = lambda: StubSource(days("2024-01-01", [2, 0]))

    response = await client.get("/api/github-contributions/octocat")

    assert response.status_code == 200
    assert response.json() == {
        "contributions": [
            {"date": "2024-01-01", "count": 2, "level": 2},
            {"date": "2024-01-02", "count": 0, "level": 0},
        ]
    }


async def test_stats_endpoint(client):
    user = {"login": "octocat", "name": "The Octocat", "public_repos": 8, "followers": 10, "following": 0, "site_admin": False}
    app.dependency_overrides[get_contribution_source] = lambda: StubSource(days("2024-01-06", [1, 2, 3]))
    app.dependency_overrides[get_user_client] = lambda: GitHubUserClient(
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json=user))
    )

    response = await client.get("/api/github-stats/octocat")

    assert response.status_code == 200
    data = response.json()
    assert data["profile"]["login"] == "octocat"
    assert data["profile"]["public_repos"] == 8
    assert data["stats"] == {
        "totalContributions": 6,
        "currentStreak": 3,
        "longestStreak": 3,
        "bestDay": {"date": "2024-01-08", "count": 3},
    }
    assert [len(week) for week in data["weeks"]] == [1, 2]


async def test_stats_endpoint_passes_upstream_status(client):
    app.dependency_overrides[get_contribution_source] = lambda: StubSource([])
    app.dependency_overrides[get_user_client] = lambda: GitHubUserClient(
        transport=httpx.MockTransport(lambda request: httpx.Response(404, json={"message": "Not Found"}))
    )

    response = await client.get("/api/github-stats/ghost")

    assert response.status_code == 404
