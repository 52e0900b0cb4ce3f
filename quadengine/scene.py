"""The demo scene: a white quad on a dark blue background."""

from __future__ import annotations

from quadengine.renderer import Renderer


class DemoScene:
    """A static scene drawn every frame."""

    def update(self, delta_time: float) -> None:
        """Advance the scene by ``delta_time`` seconds; the demo is static."""

    def render(self, renderer: Renderer) -> None:
        """Draw the scene with ``renderer``."""
        renderer.set_clear_color(0.1, 0.1, 0.15, 1.0)
        renderer.draw_quad(-0.5, -0.5, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0)