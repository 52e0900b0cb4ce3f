"""Command that loads a renderer and runs the demo scene until quit."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from quadengine.engine import Engine, RendererLoadError
from quadengine.renderer import Renderer
from quadengine.scene import DemoScene

DEFAULT_RENDERER = "OGL4REN"
WIDTH = 800
HEIGHT = 600


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Draw the demo scene.")
    parser.add_argument("--renderer", default=DEFAULT_RENDERER, help="renderer to load")
    parser.add_argument(
        "--frames",
        type=int,
        default=None,
        help="stop after this many frames (default: run until the window closes)",
    )
    return parser.parse_args(argv)


def _quit_requested(renderer: Renderer) -> bool:
    window = getattr(renderer, "window", None)
    if window is None:
        return False
    window.dispatch_events()
    return bool(getattr(window, "has_exit", False))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demo; return the process exit status."""
    args = _parse_args(argv)
    engine = Engine()
    try:
        renderer = engine.load_renderer(args.renderer)
    except RendererLoadError as exc:
        print(f"Could not load the renderer: {exc}")
        return 1

    if not renderer.init(WIDTH, HEIGHT):
        print("Failed to initialise the renderer")
        return 1

    scene = DemoScene()
    frames = 0
    while args.frames is None or frames < args.frames:
        if _quit_requested(renderer):
            break
        renderer.begin_frame()
        scene.render(renderer)
        renderer.end_frame()
        frames += 1

    renderer.shutdown()
    engine.unload_renderer()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())