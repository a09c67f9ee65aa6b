"""Place spinning stars with the mouse; nearby stars are joined by lines."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass, field

from simple2d.app import App, Callbacks
from simple2d.draw import Canvas
from simple2d.input import Key, KeyMods, Mouse
from simple2d.rng import random_unit
from simple2d.shapes import Circle

STAR_RADIUS = 10
LINK_DISTANCE = 200


@dataclass
class Star(Circle):
    """A star: a circle that remembers when it was created."""

    time_created: float = 0.0

    def draw_star(self, canvas: Canvas, current_time: float) -> None:
        """Draw the star, spun according to its age."""
        canvas.push_matrix()
        canvas.translate(self.center)
        spin = math.fmod(self.time_created, 2) - 1
        canvas.rotate((current_time - self.time_created) * 180 * spin)
        canvas.circle(0.3, 0, self.radius)
        canvas.pop_matrix()

    def draw_lines(self, canvas: Canvas, stars, color) -> None:
        """Join this star to every other star closer than the link distance."""
        r, g, b = color
        for other in stars:
            if other is self:
                continue
            strength = LINK_DISTANCE - self.center.distance(other.center)
            if strength < 0:
                continue
            canvas.line_width(strength / 40)
            canvas.color(r, g, b, strength / LINK_DISTANCE)
            canvas.line(self.center, other.center)


@dataclass
class Constellations:
    """The placed stars, the star being dragged, and the star colour."""

    stars: list[Star] = field(default_factory=list)
    current: Star | None = None
    color: tuple[float, float, float] = (1.0, 1.0, 1.0)

    def press(self, x: float, y: float, now: float) -> None:
        """Start dragging a new star at ``(x, y)``."""
        self.current = Star(x, y, STAR_RADIUS, now)

    def move(self, x: float, y: float) -> None:
        """Move the star being dragged, if any."""
        if self.current is not None:
            self.current.x = x
            self.current.y = y

    def release(self) -> None:
        """Drop the star being dragged into the sky."""
        if self.current is not None:
            self.stars.append(self.current)
            self.current = None

    def clear(self) -> None:
        """Remove every placed star."""
        self.stars.clear()

    def recolor(self) -> None:
        """Pick a random colour whose brightest component is full."""
        r, g, b = random_unit(), random_unit(), random_unit()
        brightest = max(r, g, b)
        self.color = (r / brightest, g / brightest, b / brightest)

    def _all(self):
        yield from self.stars
        if self.current is not None:
            yield self.current

    def draw(self, canvas: Canvas, current_time: float) -> None:
        """Draw the links first, then the stars on top."""
        width, height = canvas.surface.get_size()
        canvas.background(0, 0, 0)
        canvas.color(0, 0, 0, 1)
        canvas.rect(0, 0, width, height)

        for star in self._all():
            star.draw_lines(canvas, self.stars, self.color)

        canvas.color(*self.color, 1)
        for star in self._all():
            star.draw_star(canvas, current_time)


def main(argv=None) -> int:
    """Drag with the left button to place stars; Space clears, R recolours."""
    argparse.ArgumentParser(prog="constellations", description="Draw constellations.").parse_args(argv)
    sky = Constellations()
    app = App(width=640, height=480, title="Constellations")

    def init(on: Callbacks) -> None:
        def key_pressed(key: Key, mods: KeyMods) -> None:
            if key == Key.ESCAPE:
                app.quit()
            if key == Key.SPACE:
                sky.clear()
            if key == Key.R:
                sky.recolor()

        def mouse_pressed(button: Mouse, mods: KeyMods) -> None:
            if button == Mouse.MB1:
                sky.press(app.mouse_x, app.mouse_y, app.current_time)

        def mouse_released(button: Mouse, mods: KeyMods) -> None:
            if button == Mouse.MB1:
                sky.release()

        on.key_pressed = key_pressed
        on.mouse_pressed = mouse_pressed
        on.mouse_moved = sky.move
        on.mouse_released = mouse_released

    def update(current: App) -> None:
        sky.draw(current.canvas, current.current_time)

    app.init = init
    app.update = update
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())