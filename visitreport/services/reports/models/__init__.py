"""Public exports for the reports data models."""

from __future__ import annotations

from .records import (
    NoteRecord,
    PhotoRecord,
    ReportRecord,
    StoreSnapshot,
    VisitBundle,
    VisitRecord,
    VisitStatus,
)

__all__ = [
    "VisitRecord",
    "NoteRecord",
    "PhotoRecord",
    "ReportRecord",
    "StoreSnapshot",
    "VisitBundle",
    "VisitStatus",
]
