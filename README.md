# simple2d

A small 2D drawing and game framework in the spirit of Processing, built on
pygame. You write an `update` function that draws one frame and register a
few input callbacks. The framework then runs the window, the clock and the
event loop.

## Installation

```
pip install simple2d
```

To run the test suite:

```
pip install "simple2d[test]"
pytest
```

## Coordinates and colours

The origin is the bottom-left corner of the window, and y grows upwards.
Colours are given as floats from 0 to 1. Values outside that range are
clamped.

## Modules

### `simple2d.shapes`

- `Vec2(x, y)` supports `+`, `-`, multiplication by a number, `distance`
  and `distance_sq`.
- `Rect` stores its four edges, `left`, `top`, `right` and `bottom`, exactly
  as given.
  - It can be built with `Rect.from_ltrb`, `Rect.from_lbrt`,
    `Rect.from_xywh` or `Rect.from_lbwh`. `from_lbwh` takes the bottom edge
    as `y`, so `height` (`bottom - top`) comes out negative.
  - It has `intersects`, which takes another `Rect` or a `Circle`.
  - It moves in place with `shift`, `shift_right`, `shift_up`, `move_to`,
    `move_to_x` and `move_to_y`.
  - Each of those has a copying form: `shifted`, `shifted_right`,
    `shifted_up`, `moved_to`, `moved_to_x` and `moved_to_y`.
  - `shift`, `shifted`, `move_to` and `moved_to` accept either two numbers
    or one `Vec2`.
  - `center`, `top_left`, `top_right`, `bottom_left`, `bottom_right`,
    `width` and `height` are properties.
- `Circle(x, y, radius)` offers `intersects` (with a `Circle` or a `Rect`),
  the `center` property and `move_center(vec)`.
- `Line(start, end)` joins two `Vec2` points.

### `simple2d.input`

- `Key` is an `IntEnum` of keyboard keys.
- `Mouse` is an `IntEnum` of mouse buttons `MB1` to `MB8`. `LEFT`, `RIGHT`,
  `MIDDLE` and `LAST` are aliases.
- `Mod` is an `IntFlag` of modifier bits.
- `KeyMods(mods)` exposes the properties `shift`, `control`, `alt`,
  `super`, `caps_lock` and `num_lock`.

### `simple2d.rng`

These functions draw from one shared generator:

- `random_unit()` returns a float in [0, 1).
- `random_between(low, high)` returns a float in [low, high).
- `random_below(high)` returns a float in [0, high).
- `random_int_between(low, high)` returns an int with both ends included.
- `random_int_below(high)` returns an int from 0 to `high`, both included.
- `seed(value)` makes the draws repeatable.

An empty range (`high < low`) raises `ValueError`.

### `simple2d.image`

`decode_image(png_bytes)` and `load_image(path)` return an `Image`. An
`Image` holds `width`, `height` and RGBA8 `data`, with the first row at the
top. It also offers:

- `pixel(x, y)`, which returns an `(r, g, b, a)` tuple.
- `to_surface()`, which returns a cached pygame surface.

Data that is not PNG, or a file that cannot be read, raises `ImageError`.

### `simple2d.draw`

`Canvas(surface)` draws onto a pygame surface.

- Colour and style: `color(r, g, b, a=1)`, `line_width(w)` and
  `background(r, g, b)`.
- Shapes:
  - `rect` takes a `Rect`, a `Vec2` with a width and height, or
    `x, y, w, h` with `y` as the bottom edge.
  - `circle` takes a `Circle`, a `Vec2` with a radius, or `x, y, radius`,
    plus an optional `iters`.
  - `line` takes a `Line`, two `Vec2` points, or four coordinates.
- Images: `image(img, x, y, w=-1, h=-1)` draws `img` with its bottom-left
  corner at `(x, y)`. A size of -1 means the image's own size.
- The matrix stack:
  - `push_matrix`, `pop_matrix` and `reset_matrix`.
  - `translate`, `rotate` (degrees, in the drawing plane), `rotate_x`,
    `rotate_y`, `rotate_z` and `scale`.
  - `pop_matrix` on an empty stack raises `IndexError`.
- `resize(surface)` switches the canvas to a new surface.

Two helpers go with the canvas:

- `Matrix` is a 4x4 transform. It has `identity`, `translation`,
  `rotation`, `scaling` and `apply(x, y)`, and composes with `a @ b`.
- `circle_points(x, y, radius, iters=32)` and `rect_triangles(rect)` return
  the points used to fill those shapes.

### `simple2d.app`

`App(width, height, title, init, update)` opens a resizable window and
calls `init(callbacks)` once. After that it calls `update(app)` about 60
times a second.

- `Callbacks` holds these handlers, and each one does nothing until it is
  replaced:
  - `key_pressed`, `key_held` and `key_released`.
  - `mouse_pressed` and `mouse_released`.
  - `mouse_moved`.
- `key_held` fires on key repeat.
- During `update` the app exposes `canvas`, `width`, `height`,
  `start_time`, `current_time`, `delta_time`, `mouse_x` and `mouse_y`.
  Mouse y is measured from the bottom of the window.
- `is_pressed(key)`, `quit()` and `run()` are available. `run()` returns an
  exit status.
- `handle_event(event)` and `tick(now)` drive one event or one frame by
  hand.
- `key_from_pygame` and `mods_from_pygame` translate pygame codes.

### A short example

```python
from simple2d.app import App
from simple2d.shapes import Circle

ball = Circle(320, 240, 15)

def update(app):
    app.canvas.background(0, 0, 0)
    app.canvas.color(1, 1, 1)
    app.canvas.circle(ball)

App(title="Ball", update=update).run()
```

## Example programs

The package installs four commands:

```
simple2d-pong
simple2d-constellations
simple2d-template
simple2d-image [PATH]
```

- **simple2d-pong** is pong against a computer paddle.
  - W or Up moves the paddle up, and S or Down moves it down.
  - R restarts and Escape quits.
  - The game logic is the `Pong` class in `simple2d.examples.pong`.
- **simple2d-constellations** lets you drag with the left mouse button to
  place a spinning star.
  - Stars closer than 200 pixels are joined by lines.
  - Space clears the stars, R picks a random colour and Escape quits.
- **simple2d-template** is an empty window to start from.
  - It prints `Mouse button N pressed` for each click.
  - It quits on Escape.
- **simple2d-image** shows the PNG at `PATH` hopping up and down.
  - `PATH` defaults to `../assets/colon3.png`, which does not come with the
    package.
  - It exits with status 1 if the image cannot be loaded.
  - It quits on Escape.

## Limitations

Drawing is done in software with pygame's 2D routines, not with a GPU
pipeline.

- Shapes are filled polygons and lines.
- Rotations about the x and y axes affect only how points project onto the
  drawing plane.
- Images are drawn scaled and flipped, but they are not rotated.