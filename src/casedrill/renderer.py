"""
Renderer: Session state to screen text.

Two kinds of frame:
- Full frame: the complete screen for the current phase, drawn after a
  clear + home.
- Line frame: just the input line (name or answer), redrawn in place at a
  fixed row so typing never flashes the whole screen.

Rendering never mutates the session; the same state always produces the
same frame.
"""

from __future__ import annotations

from dataclasses import dataclass

from .session import AckKind, Acknowledgment, Difficulty, Phase, Session, Verdict

NEWLINE = "\r\n"
MARGIN = "  "
RULE = "━" * 40

NAME_INPUT_ROW = 4
ANSWER_ROW_HARD = 10
ANSWER_ROW_NORMAL = ANSWER_ROW_HARD + 2  # hint line + blank

BANNERS = {
    Verdict.CORRECT: "✓ CORRECT!",
    Verdict.LOSE: "✗ YOU LOSE!",
    Verdict.WRONG: "✗ Wrong",
}

LEGENDS = {
    Phase.ENTERING_NAME: "Ctrl+Q - Quit",
    Phase.SELECTING_MODE: "Ctrl+S - Restart | Ctrl+Q - Quit",
    Phase.PRACTICING: "Ctrl+R - Reset Score | Ctrl+S - Restart | Ctrl+Q - Quit",
}


@dataclass(frozen=True)
class Frame:
    """Text to put on screen; `row` only matters for line frames."""

    full: bool
    text: str
    row: int = 0


# =============================================================================
# Public API
# =============================================================================


def input_row(phase: Phase, difficulty: Difficulty) -> int | None:
    """Screen row of the editable input line, or None if the phase has none."""
    if phase is Phase.ENTERING_NAME:
        return NAME_INPUT_ROW
    if phase is Phase.PRACTICING:
        return ANSWER_ROW_NORMAL if difficulty is Difficulty.NORMAL else ANSWER_ROW_HARD
    return None


def render_full(session: Session) -> Frame:
    if session.acknowledgment is not None:
        lines = _acknowledgment_lines(session.acknowledgment)
    elif session.phase is Phase.ENTERING_NAME:
        lines = _name_lines(session)
    elif session.phase is Phase.SELECTING_MODE:
        lines = _mode_lines(session)
    else:
        lines = _practice_lines(session)
    return Frame(full=True, text=NEWLINE.join(lines))


def render_line(session: Session) -> Frame:
    """Redraw only the input line; falls back to a full frame when there is none."""
    row = None if session.awaiting_acknowledgment else input_row(session.phase, session.difficulty)
    if row is None:
        return render_full(session)
    return Frame(full=False, text=_input_line(session), row=row)


# =============================================================================
# Screens
# =============================================================================


def _input_line(session: Session) -> str:
    if session.phase is Phase.ENTERING_NAME:
        return f"{MARGIN}> {session.player_name}"
    return f"{MARGIN}Answer: {session.answer}"


def _name_lines(session: Session) -> list[str]:
    return [
        "",
        f"{MARGIN}Typing Practice",
        "",
        f"{MARGIN}What is your name?",
        _input_line(session),
        "",
        f"{MARGIN}{LEGENDS[Phase.ENTERING_NAME]}",
    ]


def _mode_lines(session: Session) -> list[str]:
    return [
        "",
        f"{MARGIN}Hello, {session.player_name}!",
        "",
        f"{MARGIN}Select difficulty:",
        "",
        f"{MARGIN}1. Normal (with hint)",
        f"{MARGIN}2. Hard (no hint - lose resets score!)",
        "",
        f"{MARGIN}Press 1 or 2 to select",
        "",
        f"{MARGIN}{LEGENDS[Phase.SELECTING_MODE]}",
    ]


def _practice_lines(session: Session) -> list[str]:
    challenge = session.challenge
    if challenge is None:
        raise ValueError("practice screen needs a challenge")

    lines = [
        "",
        "",
        f"{MARGIN}{RULE}",
        "",
        f"{MARGIN}Words:  {challenge.source_phrase}",
        "",
        f"{MARGIN}Task:   Convert to {challenge.style_label}",
        "",
        f"{MARGIN}{RULE}",
        "",
    ]
    if session.difficulty is Difficulty.NORMAL:
        lines += [f"{MARGIN}Hint:   {challenge.expected_answer}", ""]
    lines += [
        _input_line(session),
        "",
        f"{MARGIN}Score: {session.score}",
        "",
        f"{MARGIN}{LEGENDS[Phase.PRACTICING]}",
        "",
    ]
    return lines


def _acknowledgment_lines(ack: Acknowledgment) -> list[str]:
    if ack.kind is AckKind.SCORE_RESET:
        return [
            "",
            "",
            f"{MARGIN}Score reset to 0!",
            "",
            f"{MARGIN}Press any key to continue...",
        ]

    if ack.verdict is None:
        raise ValueError("feedback screen needs a verdict")
    score_line = "Score reset to 0" if ack.verdict is Verdict.LOSE else f"Score: {ack.score}"
    return [
        "",
        "",
        f"{MARGIN}{RULE}",
        "",
        f"{MARGIN}{BANNERS[ack.verdict]}",
        "",
        f"{MARGIN}{RULE}",
        "",
        f"{MARGIN}Style:      {ack.style_label}",
        f"{MARGIN}Answer:     {ack.expected}",
        f"{MARGIN}You typed:  {ack.typed}",
        "",
        f"{MARGIN}{score_line}",
        "",
        f"{MARGIN}Press Enter to continue...",
    ]
