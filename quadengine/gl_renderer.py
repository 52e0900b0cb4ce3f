"""An OpenGL 3.3 core renderer built on a pyglet window."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from quadengine.renderer import Renderer

_QUAD = (
    0.0, 0.0,
    1.0, 0.0,
    1.0, 1.0,
    0.0, 1.0,
)


def load_file(path: Union[str, Path]) -> str:
    """Return the text of ``path``, or an empty string if it cannot be read."""
    try:
        return Path(path).read_text()
    except OSError:
        return ""


def _format_version(version: Any) -> str:
    if isinstance(version, tuple) and len(version) >= 2:
        return f"{version[0]}.{version[1]}"
    return str(version)


class OpenGLRenderer(Renderer):
    """Draws unit quads scaled and placed by the ``uPos`` and ``uSize`` uniforms."""

    def __init__(self, shader_dir: Union[str, Path] = "shaders") -> None:
        self.shader_dir = Path(shader_dir)
        self.window: Optional[Any] = None
        self._program: Optional[Any] = None
        self._quad: Optional[Any] = None

    def _require_ready(self) -> None:
        if self.window is None or self._program is None:
            raise RuntimeError("renderer is not initialised")

    def init(self, width: int, height: int) -> bool:
        import pyglet
        from pyglet import gl
        from pyglet.graphics.shader import Shader, ShaderProgram

        config = gl.Config(
            major_version=3,
            minor_version=3,
            forward_compatible=True,
            double_buffer=True,
        )
        self.window = pyglet.window.Window(width, height, caption="OGL4REN", config=config)
        self.window.switch_to()
        print(f"GL {_format_version(gl.gl_info.get_version())}")

        vertex = Shader(load_file(self.shader_dir / "sprite.vert"), "vertex")
        fragment = Shader(load_file(self.shader_dir / "sprite.frag"), "fragment")
        self._program = ShaderProgram(vertex, fragment)
        vertex.delete()
        fragment.delete()

        attributes = self._program.attributes
        position = next(
            (name for name, info in attributes.items() if info.get("location") == 0),
            next(iter(attributes)),
        )
        self._quad = self._program.vertex_list(
            4, gl.GL_TRIANGLE_FAN, **{position: ("f", _QUAD)}
        )
        return True

    def shutdown(self) -> None:
        if self._quad is not None:
            self._quad.delete()
            self._quad = None
        if self._program is not None:
            self._program.delete()
            self._program = None
        if self.window is not None:
            self.window.close()
            self.window = None

    def begin_frame(self) -> None:
        self._require_ready()
        from pyglet import gl

        gl.glClear(gl.GL_COLOR_BUFFER_BIT)

    def end_frame(self) -> None:
        self._require_ready()
        self.window.flip()

    def set_clear_color(self, r: float, g: float, b: float, a: float) -> None:
        self._require_ready()
        from pyglet import gl

        gl.glClearColor(r, g, b, a)

    def _set_uniform(self, name: str, value: tuple) -> None:
        if name in self._program.uniforms:
            self._program[name] = value

    def _draw_unit_quad(self) -> None:
        from pyglet import gl

        self._quad.draw(gl.GL_TRIANGLE_FAN)

    def draw_sprite(self, x: float, y: float, w: float, h: float) -> None:
        self._require_ready()
        self._program.use()
        self._set_uniform("uPos", (x, y))
        self._set_uniform("uSize", (w, h))
        self._draw_unit_quad()

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
        self._require_ready()
        self._program.use()
        self._set_uniform("uPos", (x, y))
        self._set_uniform("uSize", (w, h))
        self._set_uniform("uColor", (r, g, b, a))
        self._draw_unit_quad()


def create_renderer() -> OpenGLRenderer:
    """Create an uninitialised OpenGL renderer."""
    return OpenGLRenderer()