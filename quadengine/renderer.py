"""The interface every renderer backend implements."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Renderer(ABC):
    """A backend that opens a surface and draws coloured quads and sprites."""

    @abstractmethod
    def init(self, width: int, height: int) -> bool:
        """Open a drawing surface of the given size; return True on success."""

    @abstractmethod
    def shutdown(self) -> None:
        """Release the surface and every resource held by the renderer."""

    @abstractmethod
    def begin_frame(self) -> None:
        """Start a frame by clearing the surface."""

    @abstractmethod
    def end_frame(self) -> None:
        """Finish a frame and present it."""

    @abstractmethod
    def set_clear_color(self, r: float, g: float, b: float, a: float) -> None:
        """Set the colour used when a frame is cleared."""

    @abstractmethod
    def draw_quad(
        self,
        x: float,
        y: float,
        w: float,
        h: float,
        r: float = 1.0,
        g: float = 1.0,
        b: float = 1.0,
        a: float = 1.0,
    ) -> None:
        """Draw a solid quad with its lower-left corner at (x, y)."""

    @abstractmethod
    def draw_sprite(self, x: float, y: float, w: float, h: float) -> None:
        """Draw a sprite quad with its lower-left corner at (x, y)."""