"""Session controller: title, debounce, moves, win and restart."""

from __future__ import annotations

import pytest

from fifteen.backend.drivers import Button
from fifteen.backend.engine.gamegenerator import GameGenerator
from fifteen.backend.engine.gamerender import tileset as ts
from fifteen.backend.engine.gamerender.mapper import FLASH_BEAT_FRAMES, FLASH_BEATS
from fifteen.backend.engine.gamesession import INPUT_DELAY, Phase, SessionController
from fifteen.backend.models.board import Board

# Tile 15 sits right of the empty cell: sliding it from (3, 3) wins.
ONE_AWAY = list(range(1, 15)) + [0, 15]


@pytest.fixture
def controller(display) -> SessionController:
    ctl = SessionController(display)
    ctl.start()
    return ctl


@pytest.fixture
def one_away(monkeypatch) -> None:
    monkeypatch.setattr(
        GameGenerator, "generate", staticmethod(lambda seed, steps=200: Board.from_flat(ONE_AWAY))
    )


# -- helpers ------------------------------------------------------------------


def begin(ctl: SessionController) -> None:
    ctl.tick(Button.START)
    ctl.tick(Button.NONE)
    assert ctl.phase is Phase.PLAYING


def press(ctl: SessionController, buttons: Button) -> None:
    """One accepted press followed by enough idle ticks to clear the cooldown."""
    ctl.tick(buttons)
    for _ in range(INPUT_DELAY):
        ctl.tick(Button.NONE)


def move_cursor_to_bottom_right(ctl: SessionController) -> None:
    for _ in range(3):
        press(ctl, Button.DOWN | Button.RIGHT)
    assert ctl.state.cursor.pos == (3, 3)


# -- title / session start ------------------------------------------------------


def test_title_counts_ticks_until_start(controller: SessionController) -> None:
    for _ in range(30):
        controller.tick(Button.NONE)
    assert controller.phase is Phase.TITLE
    assert controller.seed_counter == 30


def test_start_waits_for_release(controller: SessionController) -> None:
    controller.tick(Button.START)
    controller.tick(Button.START)
    assert controller.phase is Phase.TITLE

    controller.tick(Button.NONE)
    assert controller.phase is Phase.PLAYING


def test_session_seeded_from_title_ticks(controller: SessionController) -> None:
    for _ in range(17):
        controller.tick(Button.NONE)
    begin(controller)

    assert controller.state.board == GameGenerator.generate(controller.seed_counter)


def test_fixed_seed(display) -> None:
    ctl = SessionController(display, seed=5)
    ctl.start()
    begin(ctl)
    assert ctl.state.board == GameGenerator.generate(5)


def test_new_session_draws_fresh_screen(controller: SessionController, display) -> None:
    display.reset()
    begin(controller)

    state = controller.state
    assert state.moves == 0
    assert state.cursor.pos == (0, 0)
    assert not state.won
    assert state.board.is_permutation()
    assert display.toggles == ["off", "on"]
    assert display.content[2][3] == ts.T_BORDER_TL
    assert display.attributes[3][4] == ts.BAND_WIN  # cursor corner
    assert display.content[ts.HUD_Y][7] == ts.T_DIGIT_ZERO


# -- cursor and cooldown --------------------------------------------------------


def test_held_direction_is_debounced(controller: SessionController) -> None:
    begin(controller)

    controller.tick(Button.RIGHT)
    assert controller.state.cursor.pos == (0, 1)

    for _ in range(INPUT_DELAY):
        controller.tick(Button.RIGHT)
    assert controller.state.cursor.pos == (0, 1)

    controller.tick(Button.RIGHT)
    assert controller.state.cursor.pos == (0, 2)


def test_cursor_move_only_patches_attributes(controller: SessionController, display) -> None:
    begin(controller)
    display.reset()

    controller.tick(Button.DOWN)

    assert all(layer == "attribute" for layer, *_ in display.writes)
    assert len(display.writes) == 8


def test_cursor_clamped_at_edge_still_costs_cooldown(controller: SessionController) -> None:
    begin(controller)
    controller.tick(Button.UP)
    assert controller.state.cursor.pos == (0, 0)
    assert controller.state.cooldown == INPUT_DELAY


def test_failed_move_resets_cooldown(controller: SessionController, one_away) -> None:
    begin(controller)
    controller.tick(Button.PRIMARY)  # (0, 0) is far from the empty cell

    assert controller.state.moves == 0
    assert controller.state.cooldown == INPUT_DELAY


# -- moves and win --------------------------------------------------------------


@pytest.mark.parametrize("action", [Button.PRIMARY, Button.ALTERNATE])
def test_action_slides_selected_tile(
    controller: SessionController, display, one_away, action: Button
) -> None:
    begin(controller)
    for _ in range(3):
        press(controller, Button.DOWN)
    assert controller.state.cursor.pos == (3, 0)

    display.reset()
    press(controller, action)  # tile 13 is two cells from the empty cell
    assert controller.state.moves == 0
    assert display.writes == []

    press(controller, Button.RIGHT)
    press(controller, action)  # tile 14 slides right
    assert controller.state.moves == 1
    assert controller.state.board.empty_pos == (3, 1)

    press(controller, action)  # selected cell is now empty
    assert controller.state.moves == 1

    press(controller, Button.RIGHT)
    press(controller, action)  # and back again
    assert controller.state.moves == 2
    assert controller.state.board.empty_pos == (3, 2)
    assert controller.phase is Phase.PLAYING


def test_both_actions_in_one_tick_make_one_attempt(
    controller: SessionController, one_away
) -> None:
    begin(controller)
    move_cursor_to_bottom_right(controller)

    calls = []
    engine = controller.engine
    original = engine.try_move
    engine.try_move = lambda r, c: calls.append((r, c)) or original(r, c)

    controller.tick(Button.PRIMARY | Button.ALTERNATE)

    assert calls == [(3, 3)]
    assert controller.state.moves == 1


def test_winning_move_redraws_two_cells_and_hud(
    controller: SessionController, display, one_away
) -> None:
    begin(controller)
    move_cursor_to_bottom_right(controller)
    display.reset()

    controller.tick(Button.PRIMARY)

    assert controller.state.moves == 1
    assert controller.state.board.is_solved()
    assert controller.state.won
    assert controller.phase is Phase.WON

    cells = {
        (x + dx, y + dy)
        for x, y in (ts.cell_origin(3, 2), ts.cell_origin(3, 3))
        for dx in range(3)
        for dy in range(3)
    }
    content = {(x, y) for layer, x, y, _ in display.writes if layer == "content"}
    assert content - cells == {(x, ts.HUD_Y) for x in (5, 6, 7)}
    assert display.toggles == []


def test_no_moves_once_won(controller: SessionController, one_away) -> None:
    begin(controller)
    move_cursor_to_bottom_right(controller)
    controller.tick(Button.PRIMARY)
    assert controller.phase is Phase.WON

    calls = []
    engine = controller.engine
    original = engine.try_move
    engine.try_move = lambda r, c: calls.append((r, c)) or original(r, c)

    for _ in range(3 * INPUT_DELAY):
        controller.tick(Button.PRIMARY | Button.LEFT)

    assert calls == []
    assert controller.state.moves == 1
    assert controller.state.cursor.pos == (3, 3)


def test_restart_flashes_then_starts_new_session(
    controller: SessionController, display, one_away
) -> None:
    begin(controller)
    move_cursor_to_bottom_right(controller)
    controller.tick(Button.PRIMARY)
    first_state = controller.state

    seed_before = controller.seed_counter
    for _ in range(10):
        controller.tick(Button.NONE)
    assert controller.phase is Phase.WON
    assert controller.seed_counter == seed_before + 10

    controller.tick(Button.START)
    controller.tick(Button.NONE)
    assert controller.phase is Phase.FLASHING
    assert display.attributes[4][5] == ts.BAND_WIN

    for _ in range(FLASH_BEATS * FLASH_BEAT_FRAMES - 1):
        controller.tick(Button.NONE)
    assert controller.phase is Phase.FLASHING

    controller.tick(Button.NONE)
    assert controller.phase is Phase.PLAYING
    assert controller.sessions == 2
    assert controller.state is not first_state
    assert controller.state.moves == 0
    assert controller.state.cursor.pos == (0, 0)


# -- run loop -------------------------------------------------------------------


class _ScriptedInput:
    def __init__(self, frames: list[Button]) -> None:
        self._frames = list(frames)

    @property
    def closed(self) -> bool:
        return not self._frames

    def poll(self) -> Button:
        return self._frames.pop(0)


class _CountingClock:
    def __init__(self) -> None:
        self.waits = 0

    def wait(self) -> None:
        self.waits += 1


def test_run_polls_once_per_frame(display) -> None:
    ctl = SessionController(display, seed=3)
    inputs = _ScriptedInput([Button.NONE] * 5 + [Button.START, Button.NONE, Button.RIGHT])
    clock = _CountingClock()

    ctl.run(inputs, clock)

    assert clock.waits == 8
    assert ctl.phase is Phase.PLAYING
    assert ctl.state.cursor.pos == (0, 1)
