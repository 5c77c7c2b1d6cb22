# visitreport/services/reports/rendering/blocks.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class TextRun:
    text: str
    bold: bool = False


@dataclass(frozen=True)
class Heading1:
    text: str


@dataclass(frozen=True)
class Heading2:
    text: str


@dataclass(frozen=True)
class Heading3:
    text: str


@dataclass(frozen=True)
class BoldParagraph:
    text: str


@dataclass(frozen=True)
class MixedParagraph:
    runs: Tuple[TextRun, ...]

    @property
    def text(self) -> str:
        return "".join(r.text for r in self.runs)


@dataclass(frozen=True)
class ListItem:
    text: str


@dataclass(frozen=True)
class Rule:
    pass


@dataclass(frozen=True)
class LineBreak:
    pass


@dataclass(frozen=True)
class PlainParagraph:
    text: str


Block = Union[
    Heading1,
    Heading2,
    Heading3,
    BoldParagraph,
    MixedParagraph,
    ListItem,
    Rule,
    LineBreak,
    PlainParagraph,
]
