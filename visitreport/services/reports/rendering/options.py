"""
Compose/export configuration for visit reports.

Centralizes behavior flags so callers can tune defaults without touching
core logic. All fields have defaults matching the stock report layout.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

DEFAULT_NEXT_STEPS: Tuple[str, ...] = (
    "Review this report alongside other college visit reports",
    "Compare academic programs, campus culture, and overall fit",
    "Consider revisiting if needed for deeper exploration",
    "Discuss findings with family, counselors, and mentors",
    "Make informed decisions about college applications",
)


@dataclass(frozen=True)
class ComposeConfig:
    # Title line reads "<title_prefix>: <college name>"
    title_prefix: str = "College Visit Report"

    # Fixed, visit-independent checklist under "Next Steps"
    next_steps: Tuple[str, ...] = DEFAULT_NEXT_STEPS

    # Key Takeaways body when no notes were recorded
    no_notes_fallback: str = (
        "While I didn't record specific notes during this visit, the experience "
        "and photos provide valuable documentation for future reference."
    )
    takeaways_intro: str = (
        "Based on my observations and notes, here are the main points to consider:"
    )


@dataclass(frozen=True)
class ExportConfig:
    # Logging/debug
    debug: bool = False

    # Suffix appended to the visit's subject in exported file names
    filename_suffix: str = "_Visit_Report"

    # Appended to the base page stylesheet of HTML exports
    extra_css: str = ""
