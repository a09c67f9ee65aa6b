"""Immediate-mode drawing onto a surface with a y-up coordinate system."""

from __future__ import annotations

import math
from dataclasses import dataclass

import pygame

from simple2d.image import Image
from simple2d.shapes import Circle, Line, Rect, Vec2


@dataclass(frozen=True)
class Matrix:
    """A 4x4 transformation matrix stored row by row."""

    rows: tuple[tuple[float, ...], ...]

    @classmethod
    def identity(cls) -> Matrix:
        return cls(tuple(tuple(1.0 if i == j else 0.0 for j in range(4)) for i in range(4)))

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        columns = list(zip(*other.rows))
        return Matrix(
            tuple(
                tuple(sum(a * b for a, b in zip(row, col)) for col in columns)
                for row in self.rows
            )
        )

    @classmethod
    def translation(cls, x, y, z=0.0) -> Matrix:
        return cls(
            (
                (1.0, 0.0, 0.0, x),
                (0.0, 1.0, 0.0, y),
                (0.0, 0.0, 1.0, z),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def rotation(cls, angle, x, y, z) -> Matrix:
        """Rotation by ``angle`` degrees about the axis ``(x, y, z)``."""
        norm = math.sqrt(x * x + y * y + z * z)
        if norm == 0:
            raise ValueError("rotation axis must not be zero")
        x, y, z = x / norm, y / norm, z / norm
        rad = math.radians(angle)
        c, s = math.cos(rad), math.sin(rad)
        t = 1 - c
        return cls(
            (
                (x * x * t + c, x * y * t - z * s, x * z * t + y * s, 0.0),
                (y * x * t + z * s, y * y * t + c, y * z * t - x * s, 0.0),
                (x * z * t - y * s, y * z * t + x * s, z * z * t + c, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def scaling(cls, x, y, z=1.0) -> Matrix:
        return cls(
            (
                (x, 0.0, 0.0, 0.0),
                (0.0, y, 0.0, 0.0),
                (0.0, 0.0, z, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    def apply(self, x, y) -> tuple[float, float]:
        """Transform the point ``(x, y, 0)`` and return its x and y."""
        (a, b, _, d), (e, f, _, h) = self.rows[0], self.rows[1]
        return a * x + b * y + d, e * x + f * y + h


def circle_points(x, y, radius, iters=32) -> list[tuple[float, float]]:
    """The ``iters + 1`` points around a circle, closing where it started."""
    if iters <= 0:
        raise ValueError("iters must be positive")
    step = 2 * math.pi / iters
    return [
        (x + radius * math.cos(i * step), y + radius * math.sin(i * step))
        for i in range(iters + 1)
    ]


def rect_triangles(rect: Rect) -> list[tuple[float, float]]:
    """The six corners of the two triangles that cover ``rect``."""
    return [
        (rect.left, rect.top),
        (rect.left, rect.bottom),
        (rect.right, rect.bottom),
        (rect.right, rect.bottom),
        (rect.right, rect.top),
        (rect.left, rect.top),
    ]


def _channel(value: float) -> int:
    return round(max(0.0, min(1.0, value)) * 255)


class Canvas:
    """Draws onto a surface; the origin is the bottom-left corner."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.current_color = (255, 255, 255, 255)
        self.current_line_width = 1.0
        self.matrix = Matrix.identity()
        self._stack: list[Matrix] = []

    def color(self, r, g, b, a=1.0) -> None:
        """Set the drawing colour; components run from 0 to 1."""
        self.current_color = (_channel(r), _channel(g), _channel(b), _channel(a))

    def line_width(self, width) -> None:
        self.current_line_width = width

    def _to_screen(self, x, y) -> tuple[float, float]:
        sx, sy = self.matrix.apply(x, y)
        return sx, self.surface.get_height() - sy

    def _target(self) -> pygame.Surface:
        if self.current_color[3] == 255:
            return self.surface
        return pygame.Surface(self.surface.get_size(), pygame.SRCALPHA)

    def _finish(self, target: pygame.Surface) -> None:
        if target is not self.surface:
            self.surface.blit(target, (0, 0))

    def _fill(self, polygons) -> None:
        target = self._target()
        for polygon in polygons:
            pygame.draw.polygon(
                target, self.current_color, [self._to_screen(x, y) for x, y in polygon]
            )
        self._finish(target)

    def rect(self, x, y=None, w=None, h=None) -> None:
        """Draw a filled rect from a Rect, a Vec2 with size, or x, y, w, h."""
        if isinstance(x, Rect):
            rect = x
        elif isinstance(x, Vec2):
            rect = Rect.from_lbwh(x.x, x.y, y, w)
        else:
            rect = Rect.from_lbwh(x, y, w, h)
        corners = rect_triangles(rect)
        self._fill([corners[:3], corners[3:]])

    def circle(self, x, y=None, radius=None, iters=32) -> None:
        """Draw a filled circle from a Circle, a Vec2 and radius, or x, y, radius."""
        if isinstance(x, Circle):
            if y is not None:
                iters = y
            x, y, radius = x.x, x.y, x.radius
        elif isinstance(x, Vec2):
            if radius is not None:
                iters = radius
            x, y, radius = x.x, x.y, y
        self._fill([circle_points(x, y, radius, iters)])

    def line(self, x1, y1=None, x2=None, y2=None) -> None:
        """Draw a line from a Line, two Vec2 points, or four coordinates."""
        if isinstance(x1, Line):
            start, end = x1.start, x1.end
            x1, y1, x2, y2 = start.x, start.y, end.x, end.y
        elif isinstance(x1, Vec2):
            start, end = x1, y1
            x1, y1, x2, y2 = start.x, start.y, end.x, end.y
        target = self._target()
        pygame.draw.line(
            target,
            self.current_color,
            self._to_screen(x1, y1),
            self._to_screen(x2, y2),
            max(1, round(self.current_line_width)),
        )
        self._finish(target)

    def background(self, r, g, b) -> None:
        self.surface.fill((_channel(r), _channel(g), _channel(b), 255))

    def push_matrix(self) -> None:
        self._stack.append(self.matrix)

    def pop_matrix(self) -> None:
        if not self._stack:
            raise IndexError("matrix stack is empty")
        self.matrix = self._stack.pop()

    def reset_matrix(self) -> None:
        self.matrix = Matrix.identity()
        self._stack.clear()

    def translate(self, x, y=None) -> None:
        if isinstance(x, Vec2):
            x, y = x.x, x.y
        self.matrix = self.matrix @ Matrix.translation(x, y, 0.0)

    def rotate_x(self, angle) -> None:
        self.matrix = self.matrix @ Matrix.rotation(angle, 1, 0, 0)

    def rotate_y(self, angle) -> None:
        self.matrix = self.matrix @ Matrix.rotation(angle, 0, 1, 0)

    def rotate_z(self, angle) -> None:
        self.matrix = self.matrix @ Matrix.rotation(angle, 0, 0, 1)

    def rotate(self, angle) -> None:
        """Rotate in the drawing plane by ``angle`` degrees."""
        self.rotate_z(angle)

    def scale(self, x, y=None, z=1.0) -> None:
        """Scale by ``x``, ``y``, ``z``; a single factor scales uniformly."""
        if y is None:
            y = z = x
        self.matrix = self.matrix @ Matrix.scaling(x, y, z)

    def image(self, image: Image, x, y, w=-1, h=-1) -> None:
        """Draw ``image`` with its bottom-left corner at ``(x, y)``."""
        if w == -1:
            w = image.width
        if h == -1:
            h = image.height
        x1, y1 = self._to_screen(x, y + h)
        x2, y2 = self._to_screen(x + w, y)
        width, height = round(abs(x2 - x1)), round(abs(y2 - y1))
        if width == 0 or height == 0:
            return
        picture = pygame.transform.scale(image.to_surface(), (width, height))
        if x2 < x1 or y2 < y1:
            picture = pygame.transform.flip(picture, x2 < x1, y2 < y1)
        self.surface.blit(picture, (round(min(x1, x2)), round(min(y1, y2))))

    def resize(self, surface: pygame.Surface) -> None:
        """Draw onto ``surface`` from now on."""
        self.surface = surface