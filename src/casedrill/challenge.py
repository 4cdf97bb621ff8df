"""
Challenge Generator: One round of naming-convention practice.

A challenge pairs a random phrase from the word bank with a random
case style. The expected answer is computed once, when the challenge
is built, and never recomputed.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from loguru import logger

from .case_rules import STYLES, CaseStyle, to_case
from .words import WORDS

MIN_WORDS = 2
MAX_WORDS = 4


# =============================================================================
# Challenge
# =============================================================================


@dataclass(frozen=True)
class Challenge:
    """A phrase, the style to convert it to, and the precomputed answer."""

    words: tuple[str, ...]
    style: CaseStyle
    expected_answer: str = field(init=False)

    def __post_init__(self) -> None:
        if not MIN_WORDS <= len(self.words) <= MAX_WORDS:
            raise ValueError(
                f"challenge needs {MIN_WORDS}-{MAX_WORDS} words, got {len(self.words)}"
            )
        object.__setattr__(self, "expected_answer", to_case(self.source_phrase, self.style.rule))

    @property
    def source_phrase(self) -> str:
        return " ".join(self.words)

    @property
    def style_label(self) -> str:
        return self.style.label

    def is_correct(self, typed: str) -> bool:
        """Exact, case-sensitive match after trimming surrounding whitespace."""
        return typed.strip() == self.expected_answer


# =============================================================================
# Generator
# =============================================================================


class ChallengeGenerator:
    """
    Deals fresh challenges.

    The random source is injected so tests and seeded runs get a
    deterministic stream.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        words: Sequence[str] = WORDS,
        styles: Sequence[CaseStyle] = STYLES,
    ):
        if not words:
            raise ValueError("word bank is empty")
        if not styles:
            raise ValueError("style list is empty")
        self._rng = rng or random.Random()
        self._words = tuple(words)
        self._styles = tuple(styles)

    def next_challenge(self) -> Challenge:
        count = self._rng.randint(MIN_WORDS, MAX_WORDS)
        words = tuple(self._rng.choice(self._words) for _ in range(count))
        style = self._rng.choice(self._styles)

        challenge = Challenge(words=words, style=style)
        logger.debug(f"Dealt challenge: {challenge.source_phrase!r} -> {style.label}")
        return challenge
