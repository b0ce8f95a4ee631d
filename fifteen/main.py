"""Fifteen — sliding 15-puzzle.

Usage::

    fifteen                      # Rich terminal
    fifteen -f pygame -x 3       # Pygame window, 3× tile scale
    fifteen -f pyqt --seed 42    # PyQt window, reproducible scrambles
"""

from __future__ import annotations

import importlib
import logging
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

from fifteen.frontend.display import FPS


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pygame = "pygame"
    pyqt = "pyqt"


_RUNNERS = {
    Frontend.rich: "fifteen.frontend.cli.rich.app",
    Frontend.pygame: "fifteen.frontend.gui.pygame.app",
    Frontend.pyqt: "fifteen.frontend.gui.pyqt.app",
}

_GUI = {Frontend.pygame, Frontend.pyqt}


class LogLevel(StrEnum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"


# -- helpers ------------------------------------------------------------------


def _log_level(frontend: Frontend, level: LogLevel, log_file: Optional[Path]) -> int:
    """Numeric level; the rich screen shares stderr, so it only shows warnings."""
    value = getattr(logging, level.upper())
    if frontend is Frontend.rich and log_file is None:
        return max(value, logging.WARNING)
    return value


def _configure_logging(level: int, log_file: Optional[Path]) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        filename=str(log_file) if log_file else None,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Frontend to launch.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        min=0,
        help="Fixed shuffle seed (default: counted from the title screen).",
    ),
    fps: int = typer.Option(
        FPS, "--fps",
        min=1, max=240,
        help="Frames per second.",
    ),
    scale: int = typer.Option(
        4, "-x", "--scale",
        min=1, max=8,
        help="Tile scale for GUI frontends.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        help="Logging verbosity.",
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file",
        help="Write logs to a file instead of stderr.",
    ),
) -> None:
    """Slide the tiles back into order."""
    _configure_logging(_log_level(frontend, log_level, log_file), log_file)

    mod = importlib.import_module(_RUNNERS[frontend])
    if frontend in _GUI:
        mod.run(seed=seed, fps=fps, scale=scale)
    else:
        mod.run(seed=seed, fps=fps)


if __name__ == "__main__":
    app()
