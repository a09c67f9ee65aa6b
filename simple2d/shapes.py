"""Plain geometric value types: vectors, rectangles, circles and lines.

Coordinates follow the drawing convention of the package: ``x`` grows to the
right and ``y`` grows upwards.  ``Rect`` keeps its four edges exactly as they
were given, so ``height`` is ``bottom - top`` and may be negative for rects
built bottom-up with :meth:`Rect.from_lbwh`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real


@dataclass
class Vec2:
    """A two-dimensional vector or point."""

    x: float = 0
    y: float = 0

    def distance_sq(self, other: Vec2) -> float:
        """Squared distance to ``other``."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance(self, other: Vec2) -> float:
        """Euclidean distance to ``other``."""
        return math.sqrt(self.distance_sq(other))

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)


def _split(x, y):
    """Accept either a ``Vec2`` or a pair of coordinates."""
    if isinstance(x, Vec2):
        if y is not None:
            raise TypeError("pass either a Vec2 or two coordinates, not both")
        return x.x, x.y
    if y is None:
        raise TypeError("missing y coordinate")
    return x, y


@dataclass
class Rect:
    """An axis-aligned rectangle stored as its four edges."""

    left: float = 0
    top: float = 0
    right: float = 0
    bottom: float = 0

    @classmethod
    def from_ltrb(cls, left, top, right, bottom) -> Rect:
        """Build a rect from left, top, right and bottom edges."""
        return cls(left, top, right, bottom)

    @classmethod
    def from_lbrt(cls, left, bottom, right, top) -> Rect:
        """Build a rect from left, bottom, right and top edges."""
        return cls(left, top, right, bottom)

    @classmethod
    def from_xywh(cls, x, y, w, h) -> Rect:
        """Build a rect from its left ``x``, top ``y``, width and height."""
        return cls(x, y, x + w, y + h)

    @classmethod
    def from_lbwh(cls, x, y, w, h) -> Rect:
        """Build a rect from its left ``x``, bottom ``y``, width and height."""
        return cls(x, y + h, x + w, y)

    def intersects(self, other: Rect | Circle) -> bool:
        """Whether this rect overlaps another rect or a circle."""
        if isinstance(other, Circle):
            dx = other.x - max(self.left, min(other.x, self.right))
            dy = other.y - max(self.top, min(other.y, self.bottom))
            return dx * dx + dy * dy <= other.radius * other.radius
        if isinstance(other, Rect):
            return (
                self.left < other.right
                and self.right > other.left
                and self.top < other.bottom
                and self.bottom > other.top
            )
        raise TypeError(f"cannot test intersection with {type(other).__name__}")

    def shift(self, x, y=None) -> None:
        """Move the rect by ``x`` to the right and ``y`` up."""
        x, y = _split(x, y)
        self.left += x
        self.right += x
        self.top += y
        self.bottom += y

    def shifted(self, x, y=None) -> Rect:
        """A copy of this rect moved as :meth:`shift` would move it."""
        x, y = _split(x, y)
        return Rect(self.left + x, self.top + y, self.right + x, self.bottom + y)

    def shift_right(self, x) -> None:
        """Move the rect horizontally by ``x``."""
        self.left += x
        self.right += x

    def shifted_right(self, x) -> Rect:
        """A copy of this rect moved horizontally by ``x``."""
        return Rect(self.left + x, self.top, self.right + x, self.bottom)

    def shift_up(self, y) -> None:
        """Move the rect vertically by ``y``."""
        self.top += y
        self.bottom += y

    def shifted_up(self, y) -> Rect:
        """A copy of this rect moved vertically by ``y``."""
        return Rect(self.left, self.top + y, self.right, self.bottom + y)

    def move_to(self, left, top=None) -> None:
        """Put the top-left corner at the given point, keeping the size."""
        left, top = _split(left, top)
        width, height = self.width, self.height
        self.right = left + width
        self.bottom = top + height
        self.left = left
        self.top = top

    def moved_to(self, left, top=None) -> Rect:
        """A copy of this rect with its top-left corner at the given point."""
        left, top = _split(left, top)
        return Rect(left, top, left + self.width, top + self.height)

    def move_to_x(self, x) -> None:
        """Put the left edge at ``x``, keeping the width."""
        self.right = x + self.width
        self.left = x

    def moved_to_x(self, x) -> Rect:
        """A rect built bottom-up from ``x``, this rect's top and its size."""
        return Rect.from_lbwh(x, self.top, self.width, self.height)

    def move_to_y(self, y) -> None:
        """Put the top edge at ``y``, keeping the height."""
        self.bottom = y + self.height
        self.top = y

    def moved_to_y(self, y) -> Rect:
        """A rect built bottom-up from this rect's left, ``y`` and its size."""
        return Rect.from_lbwh(self.left, y, self.width, self.height)

    @property
    def center(self) -> Vec2:
        return Vec2((self.left + self.right) / 2, (self.top + self.bottom) / 2)

    @property
    def top_left(self) -> Vec2:
        return Vec2(self.left, self.top)

    @property
    def top_right(self) -> Vec2:
        return Vec2(self.right, self.top)

    @property
    def bottom_left(self) -> Vec2:
        return Vec2(self.left, self.bottom)

    @property
    def bottom_right(self) -> Vec2:
        return Vec2(self.right, self.bottom)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top


@dataclass
class Circle:
    """A circle given by its centre and radius."""

    x: float = 0
    y: float = 0
    radius: float = 0

    def intersects(self, other: Circle | Rect) -> bool:
        """Whether this circle overlaps another circle or a rect."""
        if isinstance(other, Circle):
            dx = self.x - other.x
            dy = self.y - other.y
            radius_sum = self.radius + other.radius
            return dx * dx + dy * dy <= radius_sum * radius_sum
        if isinstance(other, Rect):
            return other.intersects(self)
        raise TypeError(f"cannot test intersection with {type(other).__name__}")

    @property
    def center(self) -> Vec2:
        return Vec2(self.x, self.y)

    def move_center(self, center: Vec2) -> None:
        """Place the centre of the circle at ``center``."""
        self.x = center.x
        self.y = center.y


@dataclass
class Line:
    """A line segment between two points."""

    start: Vec2 = field(default_factory=Vec2)
    end: Vec2 = field(default_factory=Vec2)