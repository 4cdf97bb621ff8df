"""
Session: State machine for a practice run.

Phases:
- ENTERING_NAME  -> type a name, Enter to confirm
- SELECTING_MODE -> 1 = Normal (with hint), 2 = Hard (a miss resets score)
- PRACTICING     -> type the converted identifier, Enter to check

While PRACTICING, the session may be waiting on an acknowledgment
(answer feedback or the score-reset notice). Every key event goes through
Session.handle(), which returns an Update telling the caller how much of
the screen to redraw.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from loguru import logger

from .challenge import Challenge, ChallengeGenerator
from .keys import KeyCode, KeyEvent

# =============================================================================
# State Types
# =============================================================================


class Phase(str, Enum):
    ENTERING_NAME = "entering_name"
    SELECTING_MODE = "selecting_mode"
    PRACTICING = "practicing"


class Difficulty(str, Enum):
    UNSELECTED = "unselected"
    NORMAL = "normal"
    HARD = "hard"


class Update(Enum):
    """What the event loop must do after an event."""

    IGNORED = "ignored"  # nothing changed
    LINE = "line"  # only the input line changed
    FULL = "full"  # redraw the whole screen
    QUIT = "quit"


class Verdict(str, Enum):
    CORRECT = "correct"
    WRONG = "wrong"  # normal mode miss, score kept
    LOSE = "lose"  # hard mode miss, score reset


class AckKind(str, Enum):
    FEEDBACK = "feedback"
    SCORE_RESET = "score_reset"


@dataclass(frozen=True)
class Acknowledgment:
    """A screen that blocks play until the user dismisses it."""

    kind: AckKind
    score: int
    verdict: Verdict | None = None
    style_label: str = ""
    expected: str = ""
    typed: str = ""

    def dismissed_by(self, event: KeyEvent) -> bool:
        if self.kind is AckKind.FEEDBACK:
            return event.code is KeyCode.ENTER
        return True


MODE_KEYS = {"1": Difficulty.NORMAL, "2": Difficulty.HARD}


# =============================================================================
# Session
# =============================================================================


class Session:
    """
    All mutable game state for one run of the program.

    The object lives for the whole run; restart() resets it in place.
    """

    def __init__(self, generator: ChallengeGenerator | None = None):
        self._generator = generator or ChallengeGenerator()
        self.player_name = ""
        self.difficulty = Difficulty.UNSELECTED
        self.score = 0
        self.phase = Phase.ENTERING_NAME
        self.challenge: Challenge | None = None
        self.answer = ""
        self.acknowledgment: Acknowledgment | None = None

    @property
    def awaiting_acknowledgment(self) -> bool:
        return self.acknowledgment is not None

    # -------------------------------------------------------------------------
    # Event dispatch
    # -------------------------------------------------------------------------

    def handle(self, event: KeyEvent) -> Update:
        """Apply one key event and report how the screen must change."""
        if not event.is_press:
            return Update.IGNORED

        if self.acknowledgment is not None:
            if not self.acknowledgment.dismissed_by(event):
                return Update.IGNORED
            self.dismiss()
            return Update.FULL

        if event.ctrl:
            return self._handle_shortcut(event)

        if event.code is KeyCode.ESCAPE:
            return Update.QUIT

        if self.phase is Phase.ENTERING_NAME:
            return self._handle_name_key(event)
        if self.phase is Phase.SELECTING_MODE:
            return self._handle_mode_key(event)
        return self._handle_answer_key(event)

    def _handle_shortcut(self, event: KeyEvent) -> Update:
        if event.char == "q":
            return Update.QUIT
        if event.char == "r" and self.phase is Phase.PRACTICING:
            self.reset_score()
            return Update.FULL
        if event.char == "s" and self.phase is not Phase.ENTERING_NAME:
            self.restart()
            return Update.FULL
        return Update.IGNORED

    def _handle_name_key(self, event: KeyEvent) -> Update:
        if event.code is KeyCode.CHAR:
            self.player_name += event.char
            return Update.LINE
        if event.code is KeyCode.BACKSPACE:
            self.player_name = self.player_name[:-1]
            return Update.LINE
        if event.code is KeyCode.ENTER:
            return Update.FULL if self.confirm_name() else Update.IGNORED
        return Update.IGNORED

    def _handle_mode_key(self, event: KeyEvent) -> Update:
        if event.code is KeyCode.CHAR and event.char in MODE_KEYS:
            self.select_mode(MODE_KEYS[event.char])
            return Update.FULL
        return Update.IGNORED

    def _handle_answer_key(self, event: KeyEvent) -> Update:
        if event.code is KeyCode.CHAR:
            self.answer += event.char
            return Update.LINE
        if event.code is KeyCode.BACKSPACE:
            self.answer = self.answer[:-1]
            return Update.LINE
        if event.code is KeyCode.ENTER:
            self.submit_answer()
            return Update.FULL
        return Update.IGNORED

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def confirm_name(self) -> bool:
        """Leave name entry. Any non-empty name counts, even all spaces."""
        if self.phase is not Phase.ENTERING_NAME or self.player_name == "":
            return False
        self.phase = Phase.SELECTING_MODE
        logger.info(f"Player name confirmed: {self.player_name!r}")
        return True

    def select_mode(self, difficulty: Difficulty) -> None:
        if self.phase is not Phase.SELECTING_MODE:
            raise ValueError(f"cannot select a mode while {self.phase.value}")
        if difficulty is Difficulty.UNSELECTED:
            raise ValueError("difficulty must be NORMAL or HARD")
        self.difficulty = difficulty
        self.phase = Phase.PRACTICING
        logger.info(f"Mode selected: {difficulty.value}")
        self._deal()

    def submit_answer(self) -> Verdict:
        """Judge the typed answer, update the score, and show feedback."""
        if self.phase is not Phase.PRACTICING or self.challenge is None:
            raise ValueError("no challenge to answer")

        if self.challenge.is_correct(self.answer):
            self.score += 1
            verdict = Verdict.CORRECT
        elif self.difficulty is Difficulty.HARD:
            self.score = 0
            verdict = Verdict.LOSE
        else:
            verdict = Verdict.WRONG

        logger.debug(
            f"Answer {self.answer!r} vs {self.challenge.expected_answer!r}: "
            f"{verdict.value} (score {self.score})"
        )
        self.acknowledgment = Acknowledgment(
            kind=AckKind.FEEDBACK,
            score=self.score,
            verdict=verdict,
            style_label=self.challenge.style_label,
            expected=self.challenge.expected_answer,
            typed=self.answer,
        )
        return verdict

    def dismiss(self) -> None:
        """Close the acknowledgment screen; after feedback, deal the next round."""
        ack = self.acknowledgment
        self.acknowledgment = None
        if ack is not None and ack.kind is AckKind.FEEDBACK:
            self._deal()

    def reset_score(self) -> None:
        """Zero the score and start over with a fresh challenge."""
        if self.phase is not Phase.PRACTICING:
            raise ValueError("score can only be reset while practicing")
        self.score = 0
        self._deal()
        self.acknowledgment = Acknowledgment(kind=AckKind.SCORE_RESET, score=0)
        logger.info("Score reset")

    def restart(self) -> None:
        """Return every field to its construction-time value."""
        self.player_name = ""
        self.difficulty = Difficulty.UNSELECTED
        self.score = 0
        self.phase = Phase.ENTERING_NAME
        self.challenge = None
        self.answer = ""
        self.acknowledgment = None
        logger.info("Session restarted")

    def _deal(self) -> None:
        self.challenge = self._generator.next_challenge()
        self.answer = ""
