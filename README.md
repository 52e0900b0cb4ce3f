# quadengine

A small, modular 2D engine. The engine knows only the abstract `Renderer`
interface; concrete renderers are registered under a name and created on
demand. An OpenGL 3.3 renderer built on a pyglet window is included. It
draws coloured quads and sprites with a simple shader program.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the demo

```
quadengine
```

The same command can be run as `python -m quadengine.app`. It loads the
renderer registered as `OGL4REN`, opens an 800×600 window titled `OGL4REN`
and draws the demo scene every frame: a white quad centred on a dark blue
background. It stops when the window is closed. pyglet closes the window when
Escape is pressed.

Options:

- `--renderer NAME`: load the renderer registered under `NAME` instead of
  `OGL4REN`.
- `--frames N`: stop after `N` frames instead of running until the window
  closes.

The command returns exit status 1 and prints a message in two cases: the
renderer cannot be loaded, or its `init` reports failure.

### Shaders

The OpenGL renderer reads `sprite.vert` and `sprite.frag` from a `shaders`
directory, relative to the working directory. You can give another
directory with `OpenGLRenderer(shader_dir=...)`. Run the demo from a
directory that contains these files. The shader program is expected to have
these inputs:

- the vertex shader takes the unit quad `(0,0) (1,0) (1,1) (0,1)` in its
  attribute at location 0, and the uniforms `vec2 uPos` and `vec2 uSize`;
- the fragment shader takes the uniform `vec4 uColor`.

A uniform that the linked program does not have is skipped.

## Using the engine

```python
from quadengine.engine import Engine, register_renderer, available_renderers
from quadengine.gl_renderer import create_renderer
from quadengine.scene import DemoScene

register_renderer("opengl", create_renderer)
print(available_renderers())        # ('OGL4REN', 'opengl')

engine = Engine()
renderer = engine.load_renderer("opengl")   # raises RendererLoadError if unknown
renderer.init(800, 600)

scene = DemoScene()
renderer.begin_frame()
scene.render(renderer)
renderer.end_frame()

renderer.shutdown()
engine.unload_renderer()
```

- `register_renderer(name, factory)` stores a zero-argument factory under a
  name. It raises `TypeError` if the factory is not callable.
- `available_renderers()` returns the registered names, sorted.
- `Engine.load_renderer(name)` calls the factory and sets the result as
  `engine.renderer`. It raises `RendererLoadError` in three cases: the name
  is unknown, the factory raises, or the factory returns `None`.
- `Engine.unload_renderer()` clears `engine.renderer`.

On the OpenGL renderer, the drawing methods raise `RuntimeError` if they are
called before `init` or after `shutdown`.

## Writing a renderer

Subclass `quadengine.renderer.Renderer` and implement `init`, `shutdown`,
`begin_frame`, `end_frame`, `set_clear_color`, `draw_quad` and
`draw_sprite`. Coordinates are in normalised device space. A quad at
`(-0.5, -0.5)` with size `1.0 × 1.0` is centred on the screen. To make a
renderer loadable by name, register the class, or any zero-argument factory,
with `register_renderer`.

## What it does not do

- The package does not ship the `sprite.vert` and `sprite.frag` shaders.
  You must supply them.
- `draw_sprite` only places and sizes the quad. There is no texture or image
  loading.
- `DemoScene.update` does nothing. The demo scene is static.
- Renderers are found only in the in-process registry. Nothing is loaded from
  shared libraries or plug-in files.
- Input handling goes no further than quitting when the window closes.