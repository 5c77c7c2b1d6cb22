"""Rendering support for visit reports, transport-agnostic.

Contains:
- composer: pure report composer (visit, notes, photos → report markup)
- renderer: pure line-oriented markup interpreter (report markup → blocks)
- exporter: Markdown/HTML file export of stored reports
"""
