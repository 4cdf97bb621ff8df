"""
casedrill: Terminal drills for identifier naming conventions.

Components:
- ChallengeGenerator: random phrase + case style + expected answer
- Session: name entry -> mode selection -> practice state machine
- render_full / render_line: session state to screen frames
- TerminalScreen: blessed-backed display and keyboard
- run: the game loop
"""

from .app import run
from .case_rules import STYLES, CaseRule, CaseStyle, to_case
from .challenge import Challenge, ChallengeGenerator
from .keys import KeyCode, KeyEvent
from .renderer import Frame, input_row, render_full, render_line
from .session import Difficulty, Phase, Session, Update, Verdict
from .terminal import TerminalError, TerminalScreen

__version__ = "0.1.0"

__all__ = [
    # Challenges
    "CaseRule",
    "CaseStyle",
    "STYLES",
    "to_case",
    "Challenge",
    "ChallengeGenerator",
    # State machine
    "Session",
    "Phase",
    "Difficulty",
    "Update",
    "Verdict",
    "KeyCode",
    "KeyEvent",
    # Rendering
    "Frame",
    "input_row",
    "render_full",
    "render_line",
    # Terminal
    "TerminalScreen",
    "TerminalError",
    "run",
]
