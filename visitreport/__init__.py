"""Record college visits and synthesize notes and photos into visit reports."""

from visitreport.services.reports import (
    InMemoryVisitStore,
    MarkupRenderer,
    ReportComposer,
    ReportsService,
)

__version__ = "0.1.0"

__all__ = [
    "ReportsService",
    "ReportComposer",
    "MarkupRenderer",
    "InMemoryVisitStore",
]
