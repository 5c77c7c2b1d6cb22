"""Public API for the Reports service."""

from .domain import Category, category_choices, category_label
from .memory_store import InMemoryVisitStore
from .models import NoteRecord, PhotoRecord, ReportRecord, VisitRecord
from .rendering.composer import ReportComposer, compose_report
from .rendering.renderer import MarkupRenderer, render_markup
from .service import ReportNotFound, ReportsError, ReportsService, VisitNotFound
from .store_iface import RecordNotFound, RecordStoreError, VisitRecordStore

__all__ = [
    "ReportsService",
    "ReportComposer",
    "MarkupRenderer",
    "compose_report",
    "render_markup",
    "Category",
    "category_choices",
    "category_label",
    "VisitRecord",
    "NoteRecord",
    "PhotoRecord",
    "ReportRecord",
    "VisitRecordStore",
    "InMemoryVisitStore",
    "ReportsError",
    "VisitNotFound",
    "ReportNotFound",
    "RecordStoreError",
    "RecordNotFound",
]
