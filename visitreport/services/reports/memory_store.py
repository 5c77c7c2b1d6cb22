"""
In-memory VisitRecordStore implementation.

Holds visits, notes, photos and reports in insertion-ordered dicts keyed by
record id and answers the typed CRUD operations used by the reports service,
note editing and the CLI. Can be persisted to / loaded from a JSON file.

Listing methods return children newest first (ties: most recently inserted
first), matching what a hosted record store query ordered by
``created_at desc`` returns.
"""

from __future__ import annotations

import logging
import os
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Callable, Dict, List, Optional, TypeVar, Union

from .domain import DEFAULT_CATEGORY, Category
from .models import (
    NoteRecord,
    PhotoRecord,
    ReportRecord,
    StoreSnapshot,
    VisitRecord,
    VisitStatus,
)
from .models._base import utcnow
from .store_iface import RecordNotFound, RecordStoreError, VisitRecordStore

LOGGER = logging.getLogger(__name__)

_R = TypeVar("_R", NoteRecord, PhotoRecord, ReportRecord)


def _new_id() -> str:
    return str(uuid.uuid4())


def _newest_first(records: List[_R]) -> List[_R]:
    # sort is stable, so reversing first puts later inserts ahead on ties
    return sorted(reversed(records), key=lambda r: r.created_at, reverse=True)


@dataclass
class InMemoryVisitStore(VisitRecordStore):
    _visits: Dict[str, VisitRecord] = field(default_factory=dict)
    _notes: Dict[str, NoteRecord] = field(default_factory=dict)
    _photos: Dict[str, PhotoRecord] = field(default_factory=dict)
    _reports: Dict[str, ReportRecord] = field(default_factory=dict)
    _clock: Callable[[], datetime] = utcnow

    # ------------------------------- Visits ---------------------------------

    def create_visit(
        self,
        user_id: str,
        college_name: str,
        visit_date: date,
        *,
        location: str = "",
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
    ) -> VisitRecord:
        now = self._clock()
        visit = VisitRecord(
            id=_new_id(),
            user_id=user_id,
            college_name=college_name,
            visit_date=visit_date,
            location=location,
            latitude=latitude,
            longitude=longitude,
            status="draft",
            created_at=now,
            updated_at=now,
        )
        self._visits[visit.id] = visit
        LOGGER.debug("Created visit %s (%s)", visit.id, college_name)
        return visit

    def get_visit(self, visit_id: str) -> Optional[VisitRecord]:
        return self._visits.get(visit_id)

    def list_visits(self, user_id: Optional[str] = None) -> List[VisitRecord]:
        """Visits owned by ``user_id`` (all when None), latest visit date first."""
        visits = [
            v for v in self._visits.values() if user_id is None or v.user_id == user_id
        ]
        return sorted(visits, key=lambda v: (v.visit_date, v.created_at), reverse=True)

    def update_visit(
        self,
        visit_id: str,
        *,
        college_name: Optional[str] = None,
        visit_date: Optional[date] = None,
        location: Optional[str] = None,
        status: Optional[VisitStatus] = None,
    ) -> VisitRecord:
        visit = self._require(self._visits, visit_id, "visit")
        changes: Dict[str, object] = {"updated_at": self._clock()}
        if college_name is not None:
            changes["college_name"] = college_name
        if visit_date is not None:
            changes["visit_date"] = visit_date
        if location is not None:
            changes["location"] = location
        if status is not None:
            if status not in ("draft", "completed"):
                raise RecordStoreError(f"Invalid visit status: {status}")
            changes["status"] = status
        updated = visit.model_copy(update=changes)
        self._visits[visit_id] = updated
        return updated

    def delete_visit(self, visit_id: str) -> None:
        """Delete a visit and, in cascade, its notes, photos and reports."""
        self._require(self._visits, visit_id, "visit")
        del self._visits[visit_id]
        for table in (self._notes, self._photos, self._reports):
            for rid in [r.id for r in table.values() if r.visit_id == visit_id]:
                del table[rid]
        LOGGER.debug("Deleted visit %s", visit_id)

    # -------------------------------- Notes ---------------------------------

    def add_note(
        self,
        visit_id: str,
        content: str,
        category: Union[Category, str] = DEFAULT_CATEGORY,
    ) -> NoteRecord:
        self._require(self._visits, visit_id, "visit")
        now = self._clock()
        note = NoteRecord(
            id=_new_id(),
            visit_id=visit_id,
            category=category,
            content=content,
            created_at=now,
            updated_at=now,
        )
        self._notes[note.id] = note
        return note

    def update_note(
        self,
        note_id: str,
        *,
        content: Optional[str] = None,
        category: Union[Category, str, None] = None,
    ) -> NoteRecord:
        """Edit a note in place; identity and ``created_at`` are preserved."""
        note = self._require(self._notes, note_id, "note")
        data = note.model_dump()
        if content is not None:
            data["content"] = content
        if category is not None:
            data["category"] = category
        data["updated_at"] = self._clock()
        # re-validate so the category normalization applies
        updated = NoteRecord.model_validate(data)
        self._notes[note_id] = updated
        return updated

    def delete_note(self, note_id: str) -> None:
        self._require(self._notes, note_id, "note")
        del self._notes[note_id]

    def get_note(self, note_id: str) -> Optional[NoteRecord]:
        return self._notes.get(note_id)

    def list_notes(self, visit_id: str) -> List[NoteRecord]:
        return _newest_first([n for n in self._notes.values() if n.visit_id == visit_id])

    # ------------------------------- Photos ---------------------------------

    def add_photo(self, visit_id: str, photo_url: str, caption: str = "") -> PhotoRecord:
        self._require(self._visits, visit_id, "visit")
        photo = PhotoRecord(
            id=_new_id(),
            visit_id=visit_id,
            photo_url=photo_url,
            caption=caption,
            created_at=self._clock(),
        )
        self._photos[photo.id] = photo
        return photo

    def delete_photo(self, photo_id: str) -> None:
        self._require(self._photos, photo_id, "photo")
        del self._photos[photo_id]

    def list_photos(self, visit_id: str) -> List[PhotoRecord]:
        return _newest_first(
            [p for p in self._photos.values() if p.visit_id == visit_id]
        )

    # ------------------------------- Reports --------------------------------

    def insert_report(self, visit_id: str, content: str) -> ReportRecord:
        self._require(self._visits, visit_id, "visit")
        report = ReportRecord(
            id=_new_id(),
            visit_id=visit_id,
            report_content=content,
            created_at=self._clock(),
        )
        self._reports[report.id] = report
        return report

    def list_reports(self, visit_id: str) -> List[ReportRecord]:
        return _newest_first(
            [r for r in self._reports.values() if r.visit_id == visit_id]
        )

    def delete_report(self, report_id: str) -> None:
        self._require(self._reports, report_id, "report")
        del self._reports[report_id]

    # ----------------------------- Persistence ------------------------------

    def snapshot(self) -> StoreSnapshot:
        return StoreSnapshot(
            visits=list(self._visits.values()),
            notes=list(self._notes.values()),
            photos=list(self._photos.values()),
            reports=list(self._reports.values()),
        )

    def save(self, path: str) -> None:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.snapshot().model_dump_json(indent=2))
        LOGGER.debug("Saved store to %s", path)

    @classmethod
    def from_snapshot(cls, snap: StoreSnapshot) -> "InMemoryVisitStore":
        return cls(
            _visits={v.id: v for v in snap.visits},
            _notes={n.id: n for n in snap.notes},
            _photos={p.id: p for p in snap.photos},
            _reports={r.id: r for r in snap.reports},
        )

    @classmethod
    def load(cls, path: str) -> "InMemoryVisitStore":
        """Load a store saved with ``save``; a missing file yields an empty store."""
        if not os.path.exists(path):
            LOGGER.debug("Store file %s does not exist, starting empty", path)
            return cls()
        with open(path, "r", encoding="utf-8") as f:
            snap = StoreSnapshot.model_validate_json(f.read())
        return cls.from_snapshot(snap)

    # ------------------------------- Helpers --------------------------------

    @staticmethod
    def _require(table: Dict, record_id: str, kind: str):
        rec = table.get(record_id)
        if rec is None:
            raise RecordNotFound(f"{kind.capitalize()} not found: {record_id}")
        return rec
