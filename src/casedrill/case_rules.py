"""
Case Rules: Identifier naming-convention transforms.

Converts a phrase such as "create read" into one of the supported
identifier styles:
- camel case        -> createRead
- snake case        -> create_read
- pascal case       -> CreateRead
- kebab case        -> create-read
- upper snake case  -> CREATE_READ
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

# Word boundaries: separators, or a lower/digit -> upper transition.
_SEPARATORS = re.compile(r"[\s_\-]+")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


class CaseRule(str, Enum):
    """Supported identifier naming conventions."""

    CAMEL = "camel"
    SNAKE = "snake"
    PASCAL = "pascal"
    KEBAB = "kebab"
    UPPER_SNAKE = "upper_snake"


@dataclass(frozen=True)
class CaseStyle:
    """A display label paired with its case rule."""

    label: str
    rule: CaseRule


STYLES: tuple[CaseStyle, ...] = (
    CaseStyle("camel case", CaseRule.CAMEL),
    CaseStyle("snake case", CaseRule.SNAKE),
    CaseStyle("pascal case", CaseRule.PASCAL),
    CaseStyle("kebab case", CaseRule.KEBAB),
    CaseStyle("upper snake case", CaseRule.UPPER_SNAKE),
)


def split_words(phrase: str) -> list[str]:
    """Split a phrase into lowercase words.

    Examples:
        >>> split_words("create read")
        ['create', 'read']
        >>> split_words("userName")
        ['user', 'name']
    """
    words: list[str] = []
    for chunk in _SEPARATORS.split(phrase):
        if chunk:
            words.extend(part.lower() for part in _CAMEL_BOUNDARY.split(chunk) if part)
    return words


def to_case(phrase: str, rule: CaseRule) -> str:
    """
    Convert a phrase to the given naming convention.

    Args:
        phrase: Space-separated words (e.g. "user email address")
        rule: Target naming convention

    Returns:
        The identifier in the target style
    """
    words = split_words(phrase)
    if not words:
        return ""

    if rule is CaseRule.CAMEL:
        return words[0] + "".join(w.capitalize() for w in words[1:])
    if rule is CaseRule.PASCAL:
        return "".join(w.capitalize() for w in words)
    if rule is CaseRule.SNAKE:
        return "_".join(words)
    if rule is CaseRule.KEBAB:
        return "-".join(words)
    if rule is CaseRule.UPPER_SNAKE:
        return "_".join(w.upper() for w in words)

    raise ValueError(f"Unknown case rule: {rule!r}")
