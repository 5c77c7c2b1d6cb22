"""
Record store interface for the reports service.

Defines the minimal seam (`VisitRecordStore`) the service requires to:
  - fetch a visit by identifier,
  - fetch a visit's notes and photos, newest first,
  - persist a generated report and list a visit's reports, newest first.

Richer stores (see ``memory_store.InMemoryVisitStore``) also expose the
create/update/delete operations used by note editing and the CLI.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from .models import NoteRecord, PhotoRecord, ReportRecord, VisitRecord


class RecordStoreError(Exception):
    """Base record store error."""


class RecordNotFound(RecordStoreError):
    pass


class VisitRecordStore(Protocol):
    """Minimal record store required by the reports service."""

    def get_visit(self, visit_id: str) -> Optional[VisitRecord]: ...

    def list_notes(self, visit_id: str) -> List[NoteRecord]: ...

    def list_photos(self, visit_id: str) -> List[PhotoRecord]: ...

    def insert_report(self, visit_id: str, content: str) -> ReportRecord: ...

    def list_reports(self, visit_id: str) -> List[ReportRecord]: ...
