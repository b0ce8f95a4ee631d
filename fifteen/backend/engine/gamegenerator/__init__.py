from fifteen.backend.engine.gamegenerator.generator import SHUFFLE_STEPS, GameGenerator

__all__ = ["GameGenerator", "SHUFFLE_STEPS"]
