from fifteen.backend.engine.gameplay.game import Move, MoveEngine

__all__ = ["Move", "MoveEngine"]
