"""Generates solvable 15-puzzle boards."""

from __future__ import annotations

import logging
import random

from fifteen.backend.engine.gamesolver import Solver
from fifteen.backend.models.board import Board, Direction

log = logging.getLogger(__name__)

SHUFFLE_STEPS = 200

# Index is the 2-bit draw; opposite directions differ only in the low bit.
_DRAWS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


class GameGenerator:
    """Creates solvable puzzles by walking the empty cell from the solved state."""

    @staticmethod
    def solved() -> Board:
        """Return the goal-state board (all tiles in order, empty bottom-right)."""
        return Board.solved()

    @staticmethod
    def scramble(
        board: Board, rng: random.Random, steps: int = SHUFFLE_STEPS
    ) -> list[Direction]:
        """Scramble *board* in-place with *steps* random draws.

        A draw that would undo the last accepted move, or walk the empty cell
        off the grid, is skipped without a redraw. Returns the accepted
        directions in order.
        """
        last: Direction | None = None
        accepted: list[Direction] = []

        for _ in range(steps):
            direction = _DRAWS[rng.getrandbits(2)]
            if last is not None and direction is last.opposite:
                continue
            target = board.neighbor(direction)
            if target is None:
                continue
            board.swap(board.empty_pos, target)
            last = direction
            accepted.append(direction)

        return accepted

    @staticmethod
    def generate(seed: int, steps: int = SHUFFLE_STEPS) -> Board:
        """Return a scrambled *solvable* board for *seed*."""
        board = GameGenerator.solved()
        accepted = GameGenerator.scramble(board, random.Random(seed), steps)
        if log.isEnabledFor(logging.DEBUG):
            log.debug(
                "scrambled with seed %d: %d/%d draws accepted, solvable=%s",
                seed,
                len(accepted),
                steps,
                Solver.is_solvable(board),
            )
        return board
