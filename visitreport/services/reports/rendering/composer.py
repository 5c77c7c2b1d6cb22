"""
Pure report composer.

Turns a visit, its notes and its photos into report text written in the
line-oriented markup understood by ``renderer.render_markup``. No I/O.

Every logical unit (heading, paragraph, bullet) is emitted on exactly one
line; the renderer has no multi-line constructs.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Dict, List, Optional, Sequence

from ..domain import category_label, category_takeaway
from ..models import NoteRecord, PhotoRecord, VisitRecord
from .options import ComposeConfig

LOGGER = logging.getLogger(__name__)

RULE = "---"


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def _single_line(text: str) -> str:
    """Collapse embedded line breaks so ``text`` renders as one element."""
    parts = [p.strip() for p in text.splitlines()]
    return " ".join(p for p in parts if p)


def format_long_date(value: date) -> str:
    """``March 14, 2025`` style date."""
    return f"{value:%B} {value.day}, {value.year}"


def group_notes_by_category(
    notes: Sequence[NoteRecord],
) -> Dict[str, List[NoteRecord]]:
    """Group ``notes`` by category tag in a single pass.

    Categories appear in first-seen order; notes keep their input order
    within a category. Relies on dict insertion order.
    """
    groups: Dict[str, List[NoteRecord]] = {}
    for note in notes:
        groups.setdefault(note.category, []).append(note)
    return groups


def _header(visit: VisitRecord, config: ComposeConfig) -> List[str]:
    name = _single_line(visit.college_name)
    sections = [
        f"# {config.title_prefix}: {name}",
        f"**Visit Date:** {format_long_date(visit.visit_date)}",
    ]
    location = _single_line(visit.location or "")
    if location:
        sections.append(f"**Location:** {location}")
    sections.append(RULE)
    return sections


def _executive_summary(
    visit: VisitRecord,
    notes: Sequence[NoteRecord],
    photos: Sequence[PhotoRecord],
    groups: Dict[str, List[NoteRecord]],
) -> List[str]:
    name = _single_line(visit.college_name)
    n_cat = len(groups)
    categories = "1 category" if n_cat == 1 else f"{n_cat} different categories"
    # note counts always read "N detailed note(s)"
    return [
        "## Executive Summary",
        (
            f"This report documents my visit to {name}. "
            f"During this visit, I took {_plural(len(photos), 'photo', 'photos')} "
            f"and recorded {_plural(len(notes), 'detailed note', 'detailed notes')} "
            f"across {categories}."
        ),
    ]


def _observations(groups: Dict[str, List[NoteRecord]]) -> List[str]:
    if not groups:
        return []
    sections = ["## Detailed Observations"]
    for tag, cat_notes in groups.items():
        sections.append(f"### {category_label(tag)}")
        for note in cat_notes:
            sections.append(_single_line(note.content))
    return sections


def _visual_documentation(photos: Sequence[PhotoRecord]) -> List[str]:
    if not photos:
        return []
    captions = [_single_line(p.caption) for p in photos if p.caption.strip()]
    count = _plural(len(photos), "photo", "photos")
    if captions:
        summary = (
            f"I captured {count} during my visit, documenting various aspects "
            "of the campus including:"
        )
        return [
            "## Visual Documentation",
            summary,
            "\n".join(f"- {c}" for c in captions),
        ]
    return ["## Visual Documentation", f"I captured {count} during my visit."]


def _key_takeaways(
    groups: Dict[str, List[NoteRecord]], config: ComposeConfig
) -> List[str]:
    if not groups:
        return ["## Key Takeaways", config.no_notes_fallback]
    bullets = "\n".join(f"- {category_takeaway(tag)}" for tag in groups)
    return ["## Key Takeaways", config.takeaways_intro, bullets]


def _next_steps(config: ComposeConfig) -> List[str]:
    return ["## Next Steps", "\n".join(f"- {s}" for s in config.next_steps)]


def compose_report(
    visit: VisitRecord,
    notes: Sequence[NoteRecord],
    photos: Sequence[PhotoRecord],
    *,
    config: Optional[ComposeConfig] = None,
    generated_at: Optional[datetime] = None,
) -> str:
    """Compose the report text for ``visit``.

    ``notes`` and ``photos`` are used in the order given (callers pass them
    newest first). ``generated_at`` defaults to the current local time.
    """
    config = config or ComposeConfig()
    stamp = generated_at or datetime.now()
    groups = group_notes_by_category(notes)

    sections: List[str] = []
    sections += _header(visit, config)
    sections += _executive_summary(visit, notes, photos, groups)
    sections += _observations(groups)
    sections += _visual_documentation(photos)
    sections += _key_takeaways(groups, config)
    sections += _next_steps(config)
    sections += [RULE, f"*Report generated on {format_long_date(stamp)}*"]

    LOGGER.debug(
        "Composed report: visit=%s notes=%d photos=%d categories=%d",
        visit.id,
        len(notes),
        len(photos),
        len(groups),
    )
    return "\n\n".join(sections) + "\n"


class ReportComposer:
    """Class-based interface for report composition."""

    def __init__(self, config: Optional[ComposeConfig] = None):
        self.config = config or ComposeConfig()

    def compose(
        self,
        visit: VisitRecord,
        notes: Sequence[NoteRecord],
        photos: Sequence[PhotoRecord],
        *,
        generated_at: Optional[datetime] = None,
    ) -> str:
        """Compose the report text; never raises for well-formed records."""
        return compose_report(
            visit, notes, photos, config=self.config, generated_at=generated_at
        )
