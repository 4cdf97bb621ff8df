"""
Game loop: render, wait for a key, update the session, repeat.
"""

from __future__ import annotations

from typing import Protocol

from loguru import logger

from .keys import KeyEvent
from .renderer import Frame, render_full, render_line
from .session import Session, Update


class Screen(Protocol):
    """Anything that can show a frame and produce key events."""

    def draw(self, frame: Frame) -> None:
        ...

    def read_key(self) -> KeyEvent | None:
        ...


def run(session: Session, screen: Screen) -> None:
    """Drive the session until a quit key is pressed."""
    update = Update.FULL
    while True:
        if update is Update.FULL:
            screen.draw(render_full(session))
        elif update is Update.LINE:
            screen.draw(render_line(session))

        event = screen.read_key()
        if event is None:
            update = Update.IGNORED
            continue

        update = session.handle(event)
        if update is Update.QUIT:
            logger.info(f"Quit with score {session.score}")
            return
