from fifteen.backend.models.board import Board, Cell, Direction
from fifteen.backend.models.cursor import Cursor

__all__ = ["Board", "Cell", "Cursor", "Direction"]
