"""A small modular 2D engine with renderers loaded by name and an OpenGL quad renderer."""

__version__ = "0.1.0"
__all__ = ["renderer", "engine", "scene", "gl_renderer", "app"]