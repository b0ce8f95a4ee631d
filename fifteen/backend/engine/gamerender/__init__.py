from fifteen.backend.engine.gamerender.mapper import RenderMapper

__all__ = ["RenderMapper"]
