"""
GitHub integration: contribution calendar sources, parsing and statistics.
"""
from .parsers import Contribution, parse_contributions
from .sources import ContributionSource, GitHubAPIError, get_contribution_source
from .stats import calculate_stats, group_into_weeks
