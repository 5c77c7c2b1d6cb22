"""
Exporter helpers for visit reports → Markdown/HTML files.

Thin, testable wrappers around the renderer and file I/O. The Markdown
export writes the stored report text verbatim; the HTML export renders it
first.
"""

from __future__ import annotations

import logging
import os
import re
from typing import Optional

from rich.console import Console
from rich.table import Table

from ..models import ReportRecord, VisitRecord
from .options import ExportConfig
from .renderer import MarkupRenderer, render_markup

console = Console()

LOGGER = logging.getLogger(__name__)

_WS_RUN = re.compile(r"\s+")
_PATH_SEPS = re.compile(r"[\\/]")


def report_filename(
    college_name: str, ext: str = "md", config: Optional[ExportConfig] = None
) -> str:
    """``Example State University`` → ``Example_State_University_Visit_Report.md``."""
    conf = config or ExportConfig()
    stem = _WS_RUN.sub("_", college_name)
    stem = _PATH_SEPS.sub("-", stem)
    return f"{stem}{conf.filename_suffix}.{ext}"


def _debug_dump(text: str) -> None:
    table = Table("#", "Element")
    for idx, block in enumerate(render_markup(text)):
        table.add_row(str(idx), repr(block))
    console.rule("rendered blocks")
    console.print(table)


def write_report_markdown(
    report: ReportRecord,
    visit: VisitRecord,
    output_dir: str,
    config: Optional[ExportConfig] = None,
) -> str:
    """Write the raw report text to ``output_dir`` and return the path."""
    conf = config or ExportConfig()
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, report_filename(visit.college_name, "md", conf))
    if conf.debug:
        _debug_dump(report.report_content)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(report.report_content)
    LOGGER.info("Exported report %s to %s", report.id, path)
    return path


def write_report_html(
    report: ReportRecord,
    visit: VisitRecord,
    output_dir: str,
    config: Optional[ExportConfig] = None,
) -> str:
    """Render the report to a full HTML page in ``output_dir`` and return the path."""
    conf = config or ExportConfig()
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, report_filename(visit.college_name, "html", conf))
    if conf.debug:
        _debug_dump(report.report_content)
    page = MarkupRenderer(conf).render_page(visit.college_name, report.report_content)
    with open(path, "w", encoding="utf-8") as f:
        f.write(page)
    LOGGER.info("Exported report %s to %s", report.id, path)
    return path
