"""
Debug helpers for mapping report lines to the rule that classified them.

These utilities are intended for troubleshooting rendering issues with
stored reports. They do not perform any I/O and can be safely used in tests.
"""

from __future__ import annotations

from typing import Dict, List

from .renderer import match_rule, split_lines


def map_lines(text: str) -> List[Dict[str, object]]:
    """Return one dict per line of ``text``.

    Each dict contains:
      - index: zero-based line number
      - rule: name of the matching rule
      - text: the raw line
      - element: the block element built for the line
    """
    out: List[Dict[str, object]] = []
    for idx, line in enumerate(split_lines(text)):
        rule = match_rule(line)
        out.append(
            {"index": idx, "rule": rule.name, "text": line, "element": rule.build(line)}
        )
    return out


def rule_counts(text: str) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for row in map_lines(text):
        name = str(row["rule"])
        counts[name] = counts.get(name, 0) + 1
    return counts
