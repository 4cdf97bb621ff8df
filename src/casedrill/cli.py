"""
casedrill: Command-line entry point.

Launches the full-screen naming-convention drill:
- casedrill          - Start practicing
- casedrill --help   - Show help

Environment:
- CASEDRILL_LOG_FILE   - write logs to this file
- CASEDRILL_LOG_LEVEL  - DEBUG / INFO / WARNING / ERROR
- CASEDRILL_SEED       - reproducible challenge stream
"""
from __future__ import annotations

import random

import typer
from loguru import logger
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .app import run
from .challenge import ChallengeGenerator
from .config import Settings, get_settings
from .session import Difficulty, Session
from .terminal import TerminalError, TerminalScreen

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="casedrill",
    help="Typing practice for camelCase, snake_case and friends.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def configure_logging(settings: Settings) -> None:
    """Route logs to a file; the terminal itself belongs to the game."""
    logger.remove()
    if settings.log_file:
        logger.add(
            settings.log_file,
            level=settings.log_level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
        )


# =============================================================================
# Display Helpers
# =============================================================================


def _display_summary(session: Session) -> None:
    """Show a short recap once the terminal is back to normal."""
    if not session.player_name:
        return

    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Field", style="dim")
    table.add_column("Value", style="bold")
    table.add_row("Player", session.player_name)
    if session.difficulty is not Difficulty.UNSELECTED:
        table.add_row("Mode", session.difficulty.value.capitalize())
    table.add_row("Final score", str(session.score))

    console.print(
        Panel(table, title="[bold cyan]Typing Practice[/bold cyan]", border_style="cyan")
    )


# =============================================================================
# Commands
# =============================================================================


@app.command()
def play() -> None:
    """Practice identifier naming conventions in a full-screen terminal UI."""
    settings = get_settings()
    configure_logging(settings)

    screen = TerminalScreen()
    if not screen.is_interactive:
        err_console.print("[red]casedrill needs an interactive terminal (TTY).[/red]")
        raise typer.Exit(code=1)

    session = Session(ChallengeGenerator(random.Random(settings.seed)))
    logger.info(f"Starting session (seed={settings.seed})")

    try:
        with screen.open():
            run(session, screen)
    except KeyboardInterrupt:
        logger.info("Interrupted")
    except TerminalError as exc:
        logger.exception("Terminal failure")
        err_console.print(f"[bold red]Terminal error:[/bold red] {exc}")
        raise typer.Exit(code=1)

    _display_summary(session)


# =============================================================================
# Entry Point
# =============================================================================


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
