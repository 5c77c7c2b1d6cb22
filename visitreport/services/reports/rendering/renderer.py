"""
Pure renderer for visit report markup.

Interprets report text one line at a time and maps every line to exactly one
block element. No I/O and no cross-line state: a line's element depends only
on that line, so wrapped headings or multi-line lists are not representable.

Classification walks ``LINE_RULES`` top to bottom; the first matching rule
builds the element. The last rule matches everything.

Text is split on ``\\n`` and each line loses one trailing ``\\r`` before it is
classified, so CRLF text renders like LF text: ``"---\\r"`` is a ``Rule``,
not a ``PlainParagraph`` holding the carriage return.
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from tinyhtml import h

from .blocks import (
    Block,
    BoldParagraph,
    Heading1,
    Heading2,
    Heading3,
    LineBreak,
    ListItem,
    MixedParagraph,
    PlainParagraph,
    Rule,
    TextRun,
)
from .options import ExportConfig

LOGGER = logging.getLogger(__name__)

BOLD = "**"
RULE_TOKEN = "---"


def _split_bold(line: str) -> Tuple[TextRun, ...]:
    # Even fields are plain, odd fields bold. An odd number of delimiters
    # leaves the trailing field bold (unbalanced, not an error).
    return tuple(
        TextRun(part, bold=bool(i % 2)) for i, part in enumerate(line.split(BOLD))
    )


def _is_bold_line(line: str) -> bool:
    # Opening and closing delimiters must not overlap ("**" or "***").
    return len(line) >= 2 * len(BOLD) and line.startswith(BOLD) and line.endswith(BOLD)


@dataclass(frozen=True)
class LineRule:
    name: str
    matches: Callable[[str], bool]
    build: Callable[[str], Block]


LINE_RULES: Tuple[LineRule, ...] = (
    LineRule("heading1", lambda s: s.startswith("# "), lambda s: Heading1(s[2:])),
    LineRule("heading2", lambda s: s.startswith("## "), lambda s: Heading2(s[3:])),
    LineRule("heading3", lambda s: s.startswith("### "), lambda s: Heading3(s[4:])),
    LineRule(
        "bold_paragraph",
        _is_bold_line,
        lambda s: BoldParagraph(s[len(BOLD) : -len(BOLD)]),
    ),
    LineRule(
        "mixed_paragraph",
        lambda s: BOLD in s,
        lambda s: MixedParagraph(_split_bold(s)),
    ),
    LineRule("list_item", lambda s: s.startswith("- "), lambda s: ListItem(s[2:])),
    LineRule("rule", lambda s: s == RULE_TOKEN, lambda s: Rule()),
    LineRule("line_break", lambda s: s.strip() == "", lambda s: LineBreak()),
    LineRule("plain_paragraph", lambda s: True, lambda s: PlainParagraph(s)),
)


def split_lines(text: str) -> List[str]:
    """Split report text into lines; a trailing ``\\r`` per line is dropped."""
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def match_rule(line: str) -> LineRule:
    for rule in LINE_RULES:
        if rule.matches(line):
            return rule
    # Unreachable: the catch-all rule matches every line.
    return LINE_RULES[-1]


def classify_line(line: str) -> Block:
    return match_rule(line).build(line)


def render_markup(text: str) -> List[Block]:
    """Render report text to a list of blocks, one per line."""
    blocks = [classify_line(line) for line in split_lines(text)]
    LOGGER.debug("Rendered %d blocks", len(blocks))
    return blocks


# ----------------------------- HTML presentation -----------------------------


def _block_to_html(block: Block) -> str:
    if isinstance(block, Heading1):
        return h("h1")(block.text).render()
    if isinstance(block, Heading2):
        return h("h2")(block.text).render()
    if isinstance(block, Heading3):
        return h("h3")(block.text).render()
    if isinstance(block, BoldParagraph):
        return h("p", **{"class": "bold"})(h("strong")(block.text)).render()
    if isinstance(block, MixedParagraph):
        runs = [h("strong")(r.text) if r.bold else h("span")(r.text) for r in block.runs]
        return h("p")(*runs).render()
    if isinstance(block, ListItem):
        return h("li")(block.text).render()
    if isinstance(block, Rule):
        return h("hr")().render()
    if isinstance(block, LineBreak):
        return h("br")().render()
    return h("p")(block.text).render()


def render_blocks_html(blocks: List[Block]) -> str:
    """Render blocks to an HTML fragment. All text is escaped."""
    return "".join(_block_to_html(b) for b in blocks)


def render_report_page(title: str, html_fragment: str, extra_css: str = "") -> str:
    return (
        '<!doctype html><meta charset="utf-8">'
        '<meta name="color-scheme" content="light dark">'
        f"<title>{html.escape(title)}</title>"
        "<style>"
        "body{font-family:-apple-system,BlinkMacSystemFont,Segoe UI,Roboto,Helvetica,Arial,sans-serif;line-height:1.5;background:#fff;color:#374151;max-width:48rem;margin:2rem auto;padding:0 1rem}"
        "h1{font-size:1.875rem;color:#111827}"
        "h2{font-size:1.5rem;color:#111827;margin-top:2rem}"
        "h3{font-size:1.25rem;color:#1f2937;margin-top:1.5rem}"
        "p.bold{font-weight:600;color:#111827}"
        "li{margin-left:1.5rem}"
        "hr{border:0;border-top:1px solid #d1d5db;margin:1.5rem 0}"
        "@media (prefers-color-scheme: dark){"
        "body{background:#111;color:#ddd}"
        "h1,h2,h3,p.bold{color:#f3f4f6}"
        "hr{border-top-color:#444}"
        "}"
        f'{extra_css}</style><div class="report-content">{html_fragment}</div>'
    )


class MarkupRenderer:
    """Class-based interface for report rendering."""

    def __init__(self, config: Optional[ExportConfig] = None):
        self.config = config or ExportConfig()

    def render(self, text: str) -> List[Block]:
        """Render report text to block elements."""
        return render_markup(text)

    def render_html(self, text: str) -> str:
        """Render report text to an HTML fragment string."""
        return render_blocks_html(render_markup(text))

    def render_page(self, title: str, text: str) -> str:
        """Render report text to a full HTML page with CSS."""
        return render_report_page(
            title, self.render_html(text), extra_css=self.config.extra_css
        )
