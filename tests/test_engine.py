import pytest

from quadengine.engine import (
    Engine,
    RendererLoadError,
    available_renderers,
    register_renderer,
)
from quadengine.gl_renderer import OpenGLRenderer
from quadengine.renderer import Renderer


class _Null(Renderer):
    def init(self, width, height):
        return True

    def shutdown(self):
        pass

    def begin_frame(self):
        pass

    def end_frame(self):
        pass

    def set_clear_color(self, r, g, b, a):
        pass

    def draw_quad(self, x, y, w, h, r=1.0, g=1.0, b=1.0, a=1.0):
        pass

    def draw_sprite(self, x, y, w, h):
        pass


def test_load_registered_renderer():
    register_renderer("engine-null", _Null)
    engine = Engine()
    loaded = engine.load_renderer("engine-null")
    assert isinstance(loaded, _Null)
    assert engine.renderer is loaded


def test_builtin_renderer_is_registered():
    assert "OGL4REN" in available_renderers()
    engine = Engine()
    loaded = engine.load_renderer("OGL4REN")
    assert isinstance(loaded, OpenGLRenderer)


def test_available_renderers_sorted_and_includes_new():
    register_renderer("engine-zz", _Null)
    register_renderer("engine-aa", _Null)
    names = available_renderers()
    assert list(names) == sorted(names)
    assert {"engine-zz", "engine-aa"} <= set(names)


def test_unknown_renderer_raises():
    engine = Engine()
    with pytest.raises(RendererLoadError):
        engine.load_renderer("engine-does-not-exist")
    assert engine.renderer is None


def test_failing_factory_raises_with_cause():
    def broken():
        raise ValueError("boom")

    register_renderer("engine-broken", broken)
    engine = Engine()
    with pytest.raises(RendererLoadError) as info:
        engine.load_renderer("engine-broken")
    assert isinstance(info.value.__cause__, ValueError)


def test_factory_returning_none_raises():
    register_renderer("engine-none", lambda: None)
    with pytest.raises(RendererLoadError):
        Engine().load_renderer("engine-none")


def test_failed_load_keeps_previous_renderer():
    register_renderer("engine-keep", _Null)
    engine = Engine()
    first = engine.load_renderer("engine-keep")
    with pytest.raises(RendererLoadError):
        engine.load_renderer("engine-missing")
    assert engine.renderer is first


def test_register_non_callable_raises():
    with pytest.raises(TypeError):
        register_renderer("engine-bad", 42)
    assert "engine-bad" not in available_renderers()


def test_unload_clears_renderer():
    register_renderer("engine-unload", _Null)
    engine = Engine()
    engine.load_renderer("engine-unload")
    engine.unload_renderer()
    assert engine.renderer is None