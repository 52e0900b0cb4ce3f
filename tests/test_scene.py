from quadengine.renderer import Renderer
from quadengine.scene import DemoScene


class _Recorder(Renderer):
    def __init__(self):
        self.calls = []

    def init(self, width, height):
        return True

    def shutdown(self):
        pass

    def begin_frame(self):
        pass

    def end_frame(self):
        pass

    def set_clear_color(self, r, g, b, a):
        self.calls.append(("clear", r, g, b, a))

    def draw_quad(self, x, y, w, h, r=1.0, g=1.0, b=1.0, a=1.0):
        self.calls.append(("quad", x, y, w, h, r, g, b, a))

    def draw_sprite(self, x, y, w, h):
        self.calls.append(("sprite", x, y, w, h))


def test_render_sets_background_then_draws_white_quad():
    backend = _Recorder()
    DemoScene().render(backend)
    assert backend.calls == [
        ("clear", 0.1, 0.1, 0.15, 1.0),
        ("quad", -0.5, -0.5, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0),
    ]


def test_render_is_the_same_every_frame():
    backend = _Recorder()
    scene = DemoScene()
    scene.render(backend)
    scene.update(0.016)
    scene.render(backend)
    assert backend.calls[:2] == backend.calls[2:]


def test_update_draws_nothing():
    backend = _Recorder()
    scene = DemoScene()
    result = scene.update(1.0)
    assert result is None
    assert backend.calls == []
    scene.render(backend)
    assert backend.calls == [
        ("clear", 0.1, 0.1, 0.15, 1.0),
        ("quad", -0.5, -0.5, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0),
    ]