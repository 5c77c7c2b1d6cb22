# visitreport/services/reports/domain.py
from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Tuple


class Category(str, Enum):
    """Closed set of note classification tags."""

    ACADEMICS = "academics"
    CAMPUS = "campus"
    FACILITIES = "facilities"
    LOCATION = "location"
    HOUSING = "housing"
    FINANCIAL = "financial"
    SOCIAL = "social"
    GENERAL = "general"

    @classmethod
    def parse(cls, tag: Optional[str]) -> Optional["Category"]:
        if not tag:
            return None
        try:
            return cls(tag.strip().lower())
        except ValueError:
            return None

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @property
    def takeaway(self) -> str:
        return _CATEGORY_TAKEAWAYS[self]


DEFAULT_CATEGORY = Category.GENERAL

_CATEGORY_LABELS: Dict[Category, str] = {
    Category.ACADEMICS: "Academic Programs & Quality",
    Category.CAMPUS: "Campus Life & Culture",
    Category.FACILITIES: "Facilities & Resources",
    Category.LOCATION: "Location & Surroundings",
    Category.HOUSING: "Housing & Accommodation",
    Category.FINANCIAL: "Financial Aid & Costs",
    Category.SOCIAL: "Social Environment",
    Category.GENERAL: "General Observations",
}

_CATEGORY_TAKEAWAYS: Dict[Category, str] = {
    Category.ACADEMICS: "Academic programs and educational opportunities were evaluated",
    Category.CAMPUS: "Campus culture and student life were observed",
    Category.FACILITIES: "Campus facilities and resources were examined",
    Category.LOCATION: "Location and surrounding area were assessed",
    Category.HOUSING: "Housing options and living arrangements were reviewed",
    Category.FINANCIAL: "Financial considerations and aid opportunities were discussed",
    Category.SOCIAL: "Social environment and community aspects were evaluated",
    Category.GENERAL: "General impressions of the visit were recorded",
}


def category_label(tag: str) -> str:
    """Human label for ``tag``; unmapped tags are shown as-is."""
    cat = Category.parse(tag)
    if cat is None:
        return tag
    return cat.label


def category_takeaway(tag: str) -> str:
    cat = Category.parse(tag)
    if cat is None:
        return f"Observations about {tag} were recorded"
    return cat.takeaway


def category_choices() -> List[Tuple[str, str]]:
    """Ordered ``(tag, label)`` pairs for note editors."""
    return [(c.value, c.label) for c in Category]
