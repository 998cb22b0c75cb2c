"""
Contribution calendar statistics.
"""
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, List, Optional

from .parsers import Contribution

LONGEST_STREAK_LOOKBACK_DAYS = 365


@dataclass
class BestDay:
    date: str
    count: int


@dataclass
class ContributionStats:
    total_contributions: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    best_day: Optional[BestDay] = None


def _day(contribution: Contribution) -> date:
    return date.fromisoformat(contribution.date)


def sort_by_date(contributions: Iterable[Contribution]) -> List[Contribution]:
    return sorted(contributions, key=lambda c: c.date)


def group_into_weeks(contributions: Iterable[Contribution]) -> List[List[Contribution]]:
    """
    Sort days by date and split them into calendar weeks starting on Sunday.

    The first and last weeks may be partial.
    """
    weeks: List[List[Contribution]] = []
    current: List[Contribution] = []
    for contribution in sort_by_date(contributions):
        # date.weekday(): Monday is 0, Sunday is 6
        if current and _day(contribution).weekday() == 6:
            weeks.append(current)
            current = []
        current.append(contribution)
    if current:
        weeks.append(current)
    return weeks


def _current_streak(days: List[Contribution]) -> int:
    streak = 0
    previous = None
    for contribution in reversed(days):
        if contribution.count <= 0:
            break
        if previous is not None and (previous - _day(contribution)).days != 1:
            break
        streak += 1
        previous = _day(contribution)
    return streak


def _longest_streak(days: List[Contribution], lookback_days: int) -> int:
    window_start = _day(days[-1]) - timedelta(days=lookback_days)
    longest = streak = 0
    previous = None
    for contribution in days:
        current_day = _day(contribution)
        if current_day <= window_start:
            continue
        if contribution.count > 0 and previous is not None and (current_day - previous).days == 1 and streak:
            streak += 1
        elif contribution.count > 0:
            streak = 1
        else:
            streak = 0
        longest = max(longest, streak)
        previous = current_day
    return longest


def calculate_stats(
    contributions: Iterable[Contribution],
    lookback_days: int = LONGEST_STREAK_LOOKBACK_DAYS
) -> ContributionStats:
    """
    Compute totals and streaks.

    - current streak: consecutive active days counted backwards from the most
      recent day; zero if that day has no contributions
    - longest streak: longest run of consecutive active days within the last
      ``lookback_days`` days
    - best day: the day with the highest count, the earliest one on ties
    """
    days = sort_by_date(contributions)
    if not days:
        return ContributionStats()

    best = None
    for contribution in days:
        if best is None or contribution.count > best.count:
            best = contribution

    return ContributionStats(
        total_contributions=sum(c.count for c in days),
        current_streak=_current_streak(days),
        longest_streak=_longest_streak(days, lookback_days),
        best_day=BestDay(best.date, best.count) if best.count > 0 else None,
    )
