"""
High-level Reports service.

Public API:
  - ReportsService.generate(visit_id) -> ReportRecord
  - ReportsService.latest(visit_id) -> Optional[ReportRecord]
  - ReportsService.history(visit_id) -> List[ReportRecord]
  - ReportsService.render(report) -> List[Block]
  - ReportsService.render_html(report, full_page=False) -> str
  - ReportsService.export(visit_id, output_dir, fmt="md") -> str
  - ReportsService.store -> VisitRecordStore (escape hatch)

Composition and rendering are pure; every I/O step goes through the record
store passed in by the caller.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from .models import ReportRecord, VisitRecord
from .rendering.blocks import Block
from .rendering.composer import ReportComposer
from .rendering.exporter import write_report_html, write_report_markdown
from .rendering.options import ComposeConfig, ExportConfig
from .rendering.renderer import MarkupRenderer
from .store_iface import VisitRecordStore

LOGGER = logging.getLogger(__name__)


# ----------------------------- Service Errors --------------------------------


class ReportsError(Exception):
    """Base Reports service error."""


class VisitNotFound(ReportsError):
    pass


class ReportNotFound(ReportsError):
    pass


# ----------------------------- ReportsService --------------------------------


class ReportsService:
    """
    Generates, renders and exports visit reports on top of a record store.
    """

    _FORMATS = ("md", "html")

    def __init__(
        self,
        store: VisitRecordStore,
        *,
        compose_config: Optional[ComposeConfig] = None,
        export_config: Optional[ExportConfig] = None,
    ):
        self._store = store
        self._composer = ReportComposer(compose_config)
        self._export_config = export_config or ExportConfig()
        self._renderer = MarkupRenderer(self._export_config)

    # -------------------------- Public API methods ---------------------------

    def generate(
        self, visit_id: str, *, generated_at: Optional[datetime] = None
    ) -> ReportRecord:
        """
        Compose a report from the visit's current notes and photos and persist
        it as a new report. Earlier reports are left untouched.
        """
        visit = self._visit(visit_id)
        notes = self._store.list_notes(visit_id)
        photos = self._store.list_photos(visit_id)
        LOGGER.debug(
            "Generating report: visit=%s notes=%d photos=%d",
            visit_id,
            len(notes),
            len(photos),
        )
        content = self._composer.compose(
            visit, notes, photos, generated_at=generated_at
        )
        report = self._store.insert_report(visit_id, content)
        LOGGER.info("Generated report %s for visit %s", report.id, visit_id)
        return report

    def latest(self, visit_id: str) -> Optional[ReportRecord]:
        """Most recent report of the visit, or None when none was generated."""
        self._visit(visit_id)
        reports = self._store.list_reports(visit_id)
        return reports[0] if reports else None

    def history(self, visit_id: str) -> List[ReportRecord]:
        self._visit(visit_id)
        return self._store.list_reports(visit_id)

    def render(self, report: ReportRecord) -> List[Block]:
        return self._renderer.render(report.report_content)

    def render_html(self, report: ReportRecord, *, full_page: bool = False) -> str:
        if not full_page:
            return self._renderer.render_html(report.report_content)
        visit = self._visit(report.visit_id)
        return self._renderer.render_page(visit.college_name, report.report_content)

    def export(self, visit_id: str, output_dir: str, *, fmt: str = "md") -> str:
        """Write the latest report of the visit to ``output_dir``; return the path."""
        if fmt not in self._FORMATS:
            raise ReportsError(
                f"Unsupported export format: {fmt} (expected one of {', '.join(self._FORMATS)})"
            )
        visit = self._visit(visit_id)
        report = self.latest(visit_id)
        if report is None:
            LOGGER.warning("No report to export for visit %s", visit_id)
            raise ReportNotFound(f"No report generated for visit: {visit_id}")
        if fmt == "html":
            return write_report_html(report, visit, output_dir, self._export_config)
        return write_report_markdown(report, visit, output_dir, self._export_config)

    @property
    def store(self) -> VisitRecordStore:
        """Direct access to the underlying record store."""
        return self._store

    # ------------------------------- Helpers --------------------------------

    def _visit(self, visit_id: str) -> VisitRecord:
        visit = self._store.get_visit(visit_id)
        if visit is None:
            LOGGER.warning("Visit not found: %s", visit_id)
            raise VisitNotFound(f"Visit not found: {visit_id}")
        return visit
