"""
Profile page sections: identifiers, visibility flags and ordering rules.
"""
from typing import Iterable, List, Optional

DEFAULT_SECTION_ORDER = [
    "image",
    "contact",
    "social",
    "knowledge",
    "featured",
    "technologies",
    "github",
    "tryhackme",
]

# Header sections; drag and drop never moves them
FIXED_SECTIONS = ["image", "contact"]

# Section id -> Profile attribute holding its visibility flag
SECTION_VISIBILITY_FIELDS = {
    "image": "show_image",
    "contact": "show_contact",
    "social": "show_social",
    "knowledge": "show_knowledge",
    "featured": "show_featured",
    "technologies": "show_technologies",
    "github": "show_github_stats",
    "tryhackme": "show_try_hack_me",
}


def resolve_section_order(section_order: Optional[Iterable[str]]) -> List[str]:
    """
    Order used to render a profile page.

    Unknown and repeated ids are dropped, known ids missing from the stored
    order are appended in default order. An empty or missing order falls back
    to DEFAULT_SECTION_ORDER.
    """
    resolved: List[str] = []
    for section in section_order or []:
        if section in SECTION_VISIBILITY_FIELDS and section not in resolved:
            resolved.append(section)
    for section in DEFAULT_SECTION_ORDER:
        if section not in resolved:
            resolved.append(section)
    return resolved


def visible_sections(profile) -> List[str]:
    """
    Sections of a profile that should be rendered, in render order.
    """
    return [
        section
        for section in resolve_section_order(profile.section_order)
        if getattr(profile, SECTION_VISIBILITY_FIELDS[section]) is not False
    ]


def normalize_section_order(section_order: List[str]) -> List[str]:
    """
    Validate a section order submitted from the admin panel.

    Raises:
        ValueError: if the order contains an unknown section id
    """
    unknown = [section for section in section_order if section not in SECTION_VISIBILITY_FIELDS]
    if unknown:
        raise ValueError(f"Unknown section id(s): {', '.join(unknown)}")

    movable = [section for section in resolve_section_order(section_order) if section not in FIXED_SECTIONS]
    return FIXED_SECTIONS + movable
