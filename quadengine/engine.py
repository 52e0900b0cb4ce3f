"""Renderer registry and the engine that loads a renderer by name."""

from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple

from quadengine import gl_renderer
from quadengine.renderer import Renderer

RendererFactory = Callable[[], Renderer]

_registry: Dict[str, RendererFactory] = {}


class RendererLoadError(Exception):
    """Raised when a renderer cannot be found or created."""


def register_renderer(name: str, factory: RendererFactory) -> None:
    """Make a renderer factory available under ``name``."""
    if not callable(factory):
        raise TypeError(f"renderer factory for {name!r} is not callable")
    _registry[name] = factory


def available_renderers() -> Tuple[str, ...]:
    """Return the names of all registered renderers, sorted."""
    return tuple(sorted(_registry))


class Engine:
    """Holds the renderer currently in use."""

    def __init__(self) -> None:
        self.renderer: Optional[Renderer] = None

    def load_renderer(self, name: str) -> Renderer:
        """Create the renderer registered as ``name`` and make it current."""
        try:
            factory = _registry[name]
        except KeyError:
            raise RendererLoadError(f"no renderer registered as {name!r}") from None
        try:
            created = factory()
        except Exception as exc:
            raise RendererLoadError(f"renderer {name!r} failed to create: {exc}") from exc
        if created is None:
            raise RendererLoadError(f"renderer {name!r} produced no renderer")
        self.renderer = created
        return created

    def unload_renderer(self) -> None:
        """Drop the current renderer."""
        self.renderer = None


register_renderer("OGL4REN", gl_renderer.create_renderer)