"""
Pydantic models for record store rows.

Models for these entities:
    - Visits (one documented campus visit)
    - Notes (categorized observations attached to a visit)
    - Photos (image URL plus optional caption)
    - Reports (immutable generated report text)
"""

from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import ConfigDict, Field, field_validator

from ..domain import DEFAULT_CATEGORY, Category, category_label
from ._base import VisitModel, parse_timestamp

VisitStatus = Literal["draft", "completed"]

# Example constants (anonymized)
EXAMPLE_VISIT_ID = "5f1c2a9e-0000-4000-8000-000000000001"
EXAMPLE_USER_ID = "local"
EXAMPLE_COLLEGE = "Example State University"


# ─── Visits ─────────────────────────────────────────────────────────────────
class VisitRecord(VisitModel):
    """A single documented visit."""

    id: str
    """Identifier of the visit."""

    user_id: str
    """Opaque handle of the owning user."""

    college_name: str
    """Display name of the visited institution; the report's subject."""

    visit_date: date
    """Calendar date of the visit."""

    location: str = ""
    """Free-text location; empty when unknown."""

    latitude: Optional[float] = None
    longitude: Optional[float] = None

    status: VisitStatus = "draft"
    """Lifecycle status, either "draft" or "completed"."""

    created_at: datetime
    updated_at: datetime

    @field_validator("location", mode="before")
    @classmethod
    def _none_location(cls, v):
        return "" if v is None else v

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def _parse_timestamps(cls, v):
        return parse_timestamp(v)

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    model_config = VisitModel.model_config | ConfigDict(
        json_schema_extra={
            "example": {
                "id": EXAMPLE_VISIT_ID,
                "user_id": EXAMPLE_USER_ID,
                "college_name": EXAMPLE_COLLEGE,
                "visit_date": "2025-03-14",
                "location": "Springfield, IL",
                "latitude": 39.7817,
                "longitude": -89.6501,
                "status": "draft",
                "created_at": "2025-03-14T15:02:11Z",
                "updated_at": "2025-03-14T15:02:11Z",
            }
        }
    )


# ─── Notes ──────────────────────────────────────────────────────────────────
class NoteRecord(VisitModel):
    """A categorized free-text observation."""

    id: str
    visit_id: str

    category: str = DEFAULT_CATEGORY.value
    """Category tag; unknown tags are kept verbatim."""

    content: str

    created_at: datetime
    updated_at: datetime

    @field_validator("category", mode="before")
    @classmethod
    def _normalize_category(cls, v):
        if isinstance(v, Category):
            return v.value
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_CATEGORY.value
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def _parse_timestamps(cls, v):
        return parse_timestamp(v)

    @property
    def category_label(self) -> str:
        return category_label(self.category)


# ─── Photos ─────────────────────────────────────────────────────────────────
class PhotoRecord(VisitModel):
    """An uploaded image reference."""

    id: str
    visit_id: str
    photo_url: str
    caption: str = ""
    created_at: datetime

    @field_validator("caption", mode="before")
    @classmethod
    def _none_caption(cls, v):
        return "" if v is None else v

    @field_validator("created_at", mode="before")
    @classmethod
    def _parse_created_at(cls, v):
        return parse_timestamp(v)

    @property
    def has_caption(self) -> bool:
        return bool(self.caption.strip())


# ─── Reports ────────────────────────────────────────────────────────────────
class ReportRecord(VisitModel):
    """Immutable snapshot of a generated report."""

    id: str
    visit_id: str
    report_content: str
    created_at: datetime

    @field_validator("created_at", mode="before")
    @classmethod
    def _parse_created_at(cls, v):
        return parse_timestamp(v)


# ─── Persistence ────────────────────────────────────────────────────────────
class StoreSnapshot(VisitModel):
    """Serialized content of a record store."""

    visits: List[VisitRecord] = Field(default_factory=list)
    notes: List[NoteRecord] = Field(default_factory=list)
    photos: List[PhotoRecord] = Field(default_factory=list)
    reports: List[ReportRecord] = Field(default_factory=list)


class VisitBundle(VisitModel):
    """A visit with its notes and photos, as accepted by offline composition."""

    visit: VisitRecord
    notes: List[NoteRecord] = Field(default_factory=list)
    photos: List[PhotoRecord] = Field(default_factory=list)
