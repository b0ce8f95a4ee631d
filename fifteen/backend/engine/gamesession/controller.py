"""Frame-driven session controller: input debounce, moves, win and restart."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Iterator

from fifteen.backend.drivers import (
    ACTIONS,
    DIRECTIONS,
    Button,
    Display,
    FrameClock,
    InputSource,
)
from fifteen.backend.engine.gamegenerator import GameGenerator
from fifteen.backend.engine.gameplay import MoveEngine
from fifteen.backend.engine.gamerender import RenderMapper
from fifteen.backend.engine.gamestate import GameState
from fifteen.backend.models.board import EMPTY, Board

log = logging.getLogger(__name__)

INPUT_DELAY = 6
SEED_MASK = 0xFFFF


class Phase(enum.Enum):
    TITLE = "title"
    PLAYING = "playing"
    WON = "won"
    FLASHING = "flashing"


class SessionController:
    """Owns one session at a time and advances it one tick per frame.

    ``TITLE`` counts ticks for the shuffle seed until start is pressed.
    ``PLAYING`` turns held buttons into cursor moves and slide attempts,
    gated by a cooldown. ``WON`` waits for start, ``FLASHING`` plays the
    win flash, after which a fresh session begins. A start press is only
    acted on once the button is released again.
    """

    def __init__(
        self,
        display: Display,
        *,
        seed: int | None = None,
        input_delay: int = INPUT_DELAY,
    ) -> None:
        self.display = display
        self.fixed_seed = seed
        self.input_delay = input_delay

        self.phase = Phase.TITLE
        self.seed_counter = 0
        self.sessions = 0

        self.state: GameState | None = None
        self.engine: MoveEngine | None = None
        self.mapper = RenderMapper(display, Board.solved())

        self._after_release: Callable[[], None] | None = None
        self._flash: Iterator[int] | None = None
        self._hold = 0

    # -- lifecycle ------------------------------------------------------------

    def start(self) -> None:
        """Show the title screen."""
        self.display.power_off()
        self.mapper.draw_title()
        self.display.show()
        self.display.power_on()
        self.phase = Phase.TITLE

    def new_session(self) -> None:
        """Reinitialise board, counters and screen for a fresh game."""
        if self.fixed_seed is not None:
            seed = self.fixed_seed + self.sessions
        else:
            seed = self.seed_counter

        self.display.power_off()

        board = GameGenerator.generate(seed)
        self.state = GameState(board)
        self.engine = MoveEngine(self.state)
        self.mapper = RenderMapper(self.display, board)

        self.mapper.clear()
        self.mapper.draw_border()
        self.mapper.draw_board()
        self.mapper.draw_hud(self.state.moves)
        cursor = self.state.cursor
        self.mapper.draw_cursor(cursor.row, cursor.col, True)

        self.display.power_on()

        self.sessions += 1
        self.phase = Phase.PLAYING
        log.info("session %d started (seed %d)", self.sessions, seed)

    def run(self, inputs: InputSource, clock: FrameClock) -> None:
        """Poll *inputs* once per frame until the source closes."""
        self.start()
        while not inputs.closed:
            clock.wait()
            self.tick(inputs.poll())

    # -- per-frame ------------------------------------------------------------

    def tick(self, buttons: Button) -> None:
        if self._after_release is not None:
            self._idle()
            if Button.START not in buttons:
                then, self._after_release = self._after_release, None
                then()
            return

        if self.phase is Phase.TITLE:
            self._idle()
            if Button.START in buttons:
                self._after_release = self.new_session
        elif self.phase is Phase.PLAYING:
            self._tick_playing(buttons)
        elif self.phase is Phase.WON:
            self._idle()
            if Button.START in buttons:
                self._after_release = self._begin_flash
        elif self.phase is Phase.FLASHING:
            self._tick_flash()

    def _idle(self) -> None:
        self.seed_counter = (self.seed_counter + 1) & SEED_MASK

    def _tick_playing(self, buttons: Button) -> None:
        state = self.state
        if state.cooling_down():
            return

        if buttons & DIRECTIONS:
            cursor = state.cursor
            self.mapper.draw_cursor(cursor.row, cursor.col, False)
            cursor.step(buttons)
            self.mapper.draw_cursor(cursor.row, cursor.col, True)
            state.cooldown = self.input_delay

        if buttons & ACTIONS:
            self._attempt_move()
            state.cooldown = self.input_delay

    def _attempt_move(self) -> None:
        state = self.state
        row, col = state.cursor.pos
        if state.board.get_tile(row, col) == EMPTY:
            return

        move = self.engine.try_move(row, col)
        if move is None:
            return

        for r, c in move.dirty:
            self.mapper.draw_cell(r, c)
        self.mapper.draw_hud(state.moves)
        self.mapper.draw_cursor(row, col, True)

        if state.is_solved:
            state.mark_won()
            self.phase = Phase.WON
            log.info("session %d solved in %d moves", self.sessions, state.moves)

    def _begin_flash(self) -> None:
        self.phase = Phase.FLASHING
        self._flash = self.mapper.win_flash()
        self._hold = next(self._flash)

    def _tick_flash(self) -> None:
        self._hold -= 1
        if self._hold > 0:
            return
        self._hold = next(self._flash, 0)
        if self._hold == 0:
            self._flash = None
            self.new_session()
