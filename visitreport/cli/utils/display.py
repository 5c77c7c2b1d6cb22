"""Terminal presentation of rendered report blocks."""

from typing import List

from rich.console import Console
from rich.rule import Rule as RichRule
from rich.text import Text

from visitreport.services.reports.rendering.blocks import (
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
)


def block_to_text(block: Block) -> Text:
    """Rich text for a single block; rules are handled by ``print_blocks``."""
    if isinstance(block, Heading1):
        return Text(block.text, style="bold underline")
    if isinstance(block, Heading2):
        return Text(block.text, style="bold cyan")
    if isinstance(block, Heading3):
        return Text(block.text, style="bold")
    if isinstance(block, BoldParagraph):
        return Text(block.text, style="bold")
    if isinstance(block, MixedParagraph):
        return Text.assemble(
            *[(r.text, "bold") if r.bold else r.text for r in block.runs]
        )
    if isinstance(block, ListItem):
        return Text(f"  • {block.text}")
    if isinstance(block, LineBreak):
        return Text("")
    if isinstance(block, PlainParagraph):
        return Text(block.text)
    return Text("")


def print_blocks(console: Console, blocks: List[Block]) -> None:
    for block in blocks:
        if isinstance(block, Rule):
            console.print(RichRule(style="dim"))
        else:
            console.print(block_to_text(block))
