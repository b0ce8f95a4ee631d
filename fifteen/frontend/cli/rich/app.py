"""Rich terminal frontend: the tile map drawn with colours and box glyphs.

Each display tile becomes two terminal columns; palette bands become
foreground/background styles. The screen is refreshed only on frames
where the display reported changes.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console, Group
from rich.live import Live
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from fifteen.backend.engine.gamesession import SessionController
from fifteen.frontend.cli.input_handler import TerminalInput
from fifteen.frontend.display import FPS, IntervalClock, TileDisplay
from fifteen.frontend.palette import RGB, colours

console = Console()


def _hex(rgb: RGB) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


# -- tile map rendering -------------------------------------------------------


def _render_screen(display: TileDisplay) -> Panel:
    """Return a Rich Panel holding the whole tile map."""
    lines: list[Text] = []
    for y in range(display.height):
        line = Text()
        for x in range(display.width):
            tile, band = display.tile_at(x, y)
            art, fill, ink = colours(tile, band)
            line.append(art.cells, style=Style(color=_hex(ink), bgcolor=_hex(fill)))
        lines.append(line)

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  cursor   ", style="dim")
    controls.append("Space", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("X", style="bold cyan")
    controls.append("  slide   ", style="dim")
    controls.append("Enter", style="bold cyan")
    controls.append("  start   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    body = Group(*lines) if display.lit else Text("")
    return Panel(
        Group(Align.center(body), Text(""), Align.center(controls)),
        title="[bold]F I F T E E N[/bold]",
        border_style="bright_blue",
        padding=(1, 2),
    )


class _LiveScreen:
    """Frame clock that presents the display before sleeping."""

    def __init__(self, display: TileDisplay, live: Live, fps: int) -> None:
        self._display = display
        self._live = live
        self._clock = IntervalClock(fps)

    def wait(self) -> None:
        if self._display.take_dirty():
            self._live.update(_render_screen(self._display), refresh=True)
        self._clock.wait()


# -- public entry point -------------------------------------------------------


def run(seed: int | None = None, fps: int = FPS) -> None:
    """Launch the Rich terminal frontend."""
    display = TileDisplay()
    controller = SessionController(display, seed=seed)
    inputs = TerminalInput()

    console.clear()
    with inputs, Live(
        _render_screen(display),
        console=console,
        auto_refresh=False,
        screen=True,
    ) as live:
        controller.run(inputs, _LiveScreen(display, live, fps))

    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
