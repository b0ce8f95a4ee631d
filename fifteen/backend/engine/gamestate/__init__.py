from fifteen.backend.engine.gamestate.state import GameState

__all__ = ["GameState"]
