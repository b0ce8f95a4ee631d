"""Shuffle generator and solvability."""

from __future__ import annotations

import logging
import random

import pytest

from fifteen.backend.engine.gamegenerator import SHUFFLE_STEPS, GameGenerator
from fifteen.backend.engine.gamesolver import Solver
from fifteen.backend.models.board import Board, Direction

SEEDS = [0, 1, 2, 7, 42, 1234, 0xFFFF]


class _CheckedBoard(Board):
    """Board that verifies the permutation invariant after every swap."""

    def swap(self, empty_pos, other_pos) -> None:
        super().swap(empty_pos, other_pos)
        assert self.is_permutation()


class _ScriptedRandom:
    """Stands in for ``random.Random`` with a fixed list of 2-bit draws."""

    def __init__(self, draws: list[int]) -> None:
        self._draws = list(draws)
        self.calls = 0

    def getrandbits(self, k: int) -> int:
        assert k == 2
        self.calls += 1
        return self._draws.pop(0) if self._draws else 0


@pytest.mark.parametrize("seed", SEEDS)
def test_every_step_keeps_a_permutation(seed: int) -> None:
    board = _CheckedBoard.solved()
    GameGenerator.scramble(board, random.Random(seed))
    assert board.is_permutation()


@pytest.mark.parametrize("seed", SEEDS)
def test_accepted_moves_never_reverse(seed: int) -> None:
    accepted = GameGenerator.scramble(Board.solved(), random.Random(seed))

    assert accepted
    for prev, cur in zip(accepted, accepted[1:]):
        assert cur is not prev.opposite


@pytest.mark.parametrize("seed", SEEDS)
def test_scramble_is_undone_by_legal_slides(seed: int) -> None:
    board = Board.solved()
    accepted = GameGenerator.scramble(board, random.Random(seed))
    assert Solver.is_solvable(board)

    for direction in reversed(accepted):
        board.swap(board.empty_pos, board.neighbor(direction.opposite))
    assert board.is_solved()


def test_draws_exactly_the_configured_number_of_times() -> None:
    rng = _ScriptedRandom([])
    GameGenerator.scramble(Board.solved(), rng)
    assert rng.calls == SHUFFLE_STEPS == 200


def test_reversal_check_uses_last_accepted_direction() -> None:
    # up (accepted), down (reverses up), right (off the grid, not accepted),
    # down (still reverses up), left (accepted)
    rng = _ScriptedRandom([0, 1, 3, 1, 2])
    board = Board.solved()

    accepted = GameGenerator.scramble(board, rng, steps=5)

    assert accepted == [Direction.UP, Direction.LEFT]
    assert board.empty_pos == (2, 2)
    assert board.tiles[3][3] == 12
    assert board.tiles[2][3] == 11


def test_rejected_draws_are_not_redrawn() -> None:
    rng = _ScriptedRandom([1, 3, 1, 3])
    board = Board.solved()

    assert GameGenerator.scramble(board, rng, steps=4) == []
    assert board.is_solved()
    assert rng.calls == 4


def test_generate_is_deterministic_per_seed() -> None:
    assert GameGenerator.generate(99) == GameGenerator.generate(99)


def test_different_seeds_give_different_boards() -> None:
    boards = {tuple(GameGenerator.generate(seed).flat()) for seed in range(10)}
    assert len(boards) > 1


def test_solvability_parity() -> None:
    assert Solver.is_solvable(Board.solved())

    flat = list(range(1, 16)) + [0]
    flat[13], flat[14] = flat[14], flat[13]
    assert not Solver.is_solvable(Board.from_flat(flat))

    # Empty moved up one row: still the solved permutation class.
    board = Board.solved()
    board.swap((3, 3), (2, 3))
    assert Solver.is_solvable(board)


def test_generate_skips_solvability_check_without_debug_logging(monkeypatch, caplog) -> None:
    def fail(board):
        raise AssertionError("solvability computed with debug logging off")

    monkeypatch.setattr(Solver, "is_solvable", staticmethod(fail))
    caplog.set_level(logging.INFO, logger="fifteen.backend.engine.gamegenerator")

    assert GameGenerator.generate(3).is_permutation()


def test_generate_logs_solvability_at_debug(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="fifteen.backend.engine.gamegenerator")

    GameGenerator.generate(3)

    assert "scrambled with seed 3" in caplog.text
    assert "solvable=True" in caplog.text
