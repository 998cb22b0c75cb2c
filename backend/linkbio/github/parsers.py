"""
Parsing of the GitHub contribution calendar markup.

GitHub serves the calendar as an HTML fragment whose exact structure is not
versioned, so several layouts are recognised:

1. ``<rect data-date=".." data-count=".." data-level="..">`` (classic SVG)
2. ``<rect data-date=".." data-count=".." class="ContributionCalendar-day ... level-N">``
3. ``<td data-date=".." data-level=".." id="..">`` table cells whose counts
   live in ``<tool-tip for="..">`` elements (current layout)
"""
import logging
import re
from dataclasses import dataclass
from typing import Dict, List

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Contribution:
    """One day of the contribution calendar."""
    date: str  # YYYY-MM-DD
    count: int
    level: int  # 0-4


RECT_TAG_RE = re.compile(r"<rect\b[^>]*>", re.IGNORECASE)
TD_TAG_RE = re.compile(r"<td\b[^>]*\bdata-date=\"[^\"]+\"[^>]*>", re.IGNORECASE)
ATTR_RE = re.compile(r"([\w:-]+)=\"([^\"]*)\"")
CLASS_LEVEL_RE = re.compile(r"\blevel-([0-4])\b")
TOOLTIP_RE = re.compile(r"<tool-tip\b[^>]*\bfor=\"([^\"]+)\"[^>]*>(.*?)</tool-tip>", re.IGNORECASE | re.DOTALL)
TOOLTIP_COUNT_RE = re.compile(r"^\s*([\d,]+)\s+contributions?", re.IGNORECASE)
TOTAL_RE = re.compile(r"<h2[^>]*>\s*([\d,]+)\s+contributions?\s+in the last year", re.IGNORECASE)


def _attributes(tag: str) -> Dict[str, str]:
    return {name.lower(): value for name, value in ATTR_RE.findall(tag)}


def _level_from_class(class_name: str) -> int:
    match = CLASS_LEVEL_RE.search(class_name)
    return int(match.group(1)) if match else 0


def _parse_rects(markup: str) -> List[Contribution]:
    contributions = []
    for tag in RECT_TAG_RE.findall(markup):
        attrs = _attributes(tag)
        if "data-date" not in attrs or "data-count" not in attrs:
            continue
        if "data-level" in attrs:
            level = int(attrs["data-level"])
        elif "ContributionCalendar-day" in attrs.get("class", ""):
            level = _level_from_class(attrs["class"])
        else:
            continue
        contributions.append(Contribution(attrs["data-date"], int(attrs["data-count"]), level))
    return contributions


def _parse_table_cells(markup: str) -> List[Contribution]:
    counts = {}
    for cell_id, text in TOOLTIP_RE.findall(markup):
        match = TOOLTIP_COUNT_RE.match(text)
        counts[cell_id] = int(match.group(1).replace(",", "")) if match else 0

    contributions = []
    for tag in TD_TAG_RE.findall(markup):
        attrs = _attributes(tag)
        if "data-count" in attrs:
            count = int(attrs["data-count"])
        else:
            count = counts.get(attrs.get("id", ""), 0)
        level = int(attrs["data-level"]) if "data-level" in attrs else _level_from_class(attrs.get("class", ""))
        contributions.append(Contribution(attrs["data-date"], count, level))
    return contributions


def parse_contributions(markup: str) -> List[Contribution]:
    """
    Extract contribution days from calendar markup.

    Days are returned in document order; callers sort by date when they need
    to. Unrecognised markup yields an empty list.

    Raises:
        ValueError: if a recognised cell carries a non-numeric count or level
    """
    contributions = _parse_rects(markup)
    if not contributions:
        contributions = _parse_table_cells(markup)

    if not contributions:
        total = TOTAL_RE.search(markup)
        logger.info(
            f"[GITHUB] No contribution cells found in markup "
            f"(page reports {total.group(1) if total else 'no'} contributions)"
        )
    return contributions
