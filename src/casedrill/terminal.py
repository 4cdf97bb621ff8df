"""
Terminal Screen: blessed-backed display and keyboard.

open() takes exclusive hold of the terminal (alternate screen, raw input,
hidden cursor) and always gives it back on exit, including when an
exception escapes the game loop.
"""

from __future__ import annotations

import sys
import termios
from collections.abc import Iterator
from contextlib import ExitStack, contextmanager

from blessed import Terminal
from loguru import logger

from .keys import KeyEvent, decode_keystroke
from .renderer import Frame


class TerminalError(Exception):
    """Raised when the terminal cannot be set up, read, written, or restored."""


# Failures from the tty layer: termios.error is not an OSError subclass
TERMINAL_ERRORS = (OSError, termios.error)


class TerminalScreen:
    """Draws frames and reads key events on a real terminal."""

    def __init__(self, term: Terminal | None = None):
        self.term = term or Terminal()

    @property
    def is_interactive(self) -> bool:
        """Both keyboard and display must be a TTY for raw-mode play."""
        stdin = sys.__stdin__
        return self.term.is_a_tty and stdin is not None and stdin.isatty()

    @contextmanager
    def open(self) -> Iterator[TerminalScreen]:
        """Hold the terminal for the body; errors from the body pass through unchanged."""
        stack = ExitStack()
        try:
            stack.enter_context(self.term.fullscreen())
            stack.enter_context(self.term.raw())
            stack.enter_context(self.term.hidden_cursor())
        except TERMINAL_ERRORS as exc:
            self._restore(stack)
            raise TerminalError(f"Could not prepare terminal: {exc}") from exc
        except BaseException:
            self._restore(stack)
            raise

        logger.debug(f"Terminal opened ({self.term.width}x{self.term.height})")
        try:
            yield self
        finally:
            self._restore(stack)
            logger.debug("Terminal restored")

    def _restore(self, stack: ExitStack) -> None:
        try:
            stack.close()
        except TERMINAL_ERRORS as exc:
            raise TerminalError(f"Could not restore terminal: {exc}") from exc

    def draw(self, frame: Frame) -> None:
        t = self.term
        if frame.full:
            out = t.home + t.clear + frame.text
        else:
            out = t.move_yx(frame.row, 0) + t.clear_eol + frame.text
        try:
            t.stream.write(out)
            t.stream.flush()
        except TERMINAL_ERRORS as exc:
            raise TerminalError(f"Could not write to terminal: {exc}") from exc

    def read_key(self) -> KeyEvent | None:
        """Block until a key arrives; None if it decodes to nothing."""
        try:
            keystroke = self.term.inkey()
        except TERMINAL_ERRORS as exc:
            raise TerminalError(f"Could not read from terminal: {exc}") from exc
        return decode_keystroke(keystroke)
