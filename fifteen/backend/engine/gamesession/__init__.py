from fifteen.backend.engine.gamesession.controller import (
    INPUT_DELAY,
    Phase,
    SessionController,
)

__all__ = ["INPUT_DELAY", "Phase", "SessionController"]
