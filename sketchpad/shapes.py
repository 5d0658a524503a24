"""Drawable shapes: points, scribbles, rectangles, circles, triangles, polygons."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, Sequence

from .color import Color

MIN_EXTENT = 0.05


class Painter:
    """Collects drawing primitives, in order, for a backend to render.

    Each entry of ``operations`` is either
    ``("polygon", vertices, color)`` or ``("point", (x, y), size, color)``.
    """

    def __init__(self) -> None:
        self.operations: list[tuple] = []

    def fill_polygon(self, vertices: Sequence[tuple[float, float]], color: Color) -> None:
        """Record a filled polygon with the given vertices."""
        self.operations.append(("polygon", tuple(vertices), color))

    def plot_point(self, x: float, y: float, size: int, color: Color) -> None:
        """Record a square dot of ``size`` pixels centred at (x, y)."""
        self.operations.append(("point", (x, y), size, color))


class Shape(ABC):
    """Interface shared by everything that can be drawn on the canvas."""

    is_scribble: ClassVar[bool] = False

    @abstractmethod
    def draw(self, painter: Painter) -> None:
        """Emit this shape's primitives to ``painter``."""

    @abstractmethod
    def contains(self, mx: float, my: float) -> bool:
        """Return whether (mx, my) hits this shape."""

    @abstractmethod
    def move_by(self, dx: float, dy: float) -> None:
        """Translate the shape."""

    @abstractmethod
    def resize(self, factor: float) -> None:
        """Scale the shape by ``factor``."""

    @abstractmethod
    def set_color(self, color: Color) -> None:
        """Change the shape's colour."""


@dataclass
class _Placed(Shape):
    x: float = 0.0
    y: float = 0.0
    color: Color = field(default_factory=Color)


@dataclass
class Point(_Placed):
    """A single dot of a freehand stroke."""

    size: int = 7

    def draw(self, painter: Painter) -> None:
        painter.plot_point(self.x, self.y, self.size, self.color)

    def contains(self, mx: float, my: float) -> bool:
        half = self.size // 2
        dx, dy = mx - self.x, my - self.y
        return dx * dx + dy * dy <= half * half

    def move_by(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    def resize(self, factor: float) -> None:
        if factor > 1:
            self.size += 1
        elif factor < 1:
            self.size -= 1
        self.size = max(self.size, 1)

    def set_color(self, color: Color) -> None:
        self.color = color


@dataclass
class Scribble(Shape):
    """A freehand stroke made of points."""

    points: list[Point] = field(default_factory=list)

    is_scribble: ClassVar[bool] = True

    def add_point(self, x: float, y: float, color: Color, size: int) -> None:
        self.points.append(Point(x, y, color, size))

    def draw(self, painter: Painter) -> None:
        for point in self.points:
            point.draw(painter)

    def contains(self, mx: float, my: float) -> bool:
        return any(point.contains(mx, my) for point in self.points)

    def move_by(self, dx: float, dy: float) -> None:
        for point in self.points:
            point.move_by(dx, dy)

    def resize(self, factor: float) -> None:
        for point in self.points:
            point.resize(factor)

    def set_color(self, color: Color) -> None:
        for point in self.points:
            point.set_color(color)


@dataclass
class Rectangle(_Placed):
    """An axis-aligned rectangle centred on (x, y)."""

    width: float = 0.2
    height: float = 0.2

    def draw(self, painter: Painter) -> None:
        hw, hh = self.width / 2, self.height / 2
        painter.fill_polygon(
            [
                (self.x - hw, self.y + hh),
                (self.x + hw, self.y + hh),
                (self.x + hw, self.y - hh),
                (self.x - hw, self.y - hh),
            ],
            self.color,
        )

    def contains(self, mx: float, my: float) -> bool:
        hw, hh = self.width / 2, self.height / 2
        return self.x - hw <= mx <= self.x + hw and self.y - hh <= my <= self.y + hh

    def move_by(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    def resize(self, factor: float) -> None:
        self.width = max(self.width * factor, MIN_EXTENT)
        self.height = max(self.height * factor, MIN_EXTENT)

    def set_color(self, color: Color) -> None:
        self.color = color


@dataclass
class Circle(_Placed):
    """A filled circle centred on (x, y), drawn as a 60-gon."""

    radius: float = 0.1

    SEGMENTS: ClassVar[int] = 60

    def draw(self, painter: Painter) -> None:
        step = 2 * math.pi / self.SEGMENTS
        painter.fill_polygon(
            [
                (self.x + self.radius * math.cos(i * step), self.y + self.radius * math.sin(i * step))
                for i in range(self.SEGMENTS)
            ],
            self.color,
        )

    def contains(self, mx: float, my: float) -> bool:
        dx, dy = mx - self.x, my - self.y
        return dx * dx + dy * dy <= self.radius * self.radius

    def move_by(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    def resize(self, factor: float) -> None:
        self.radius = max(self.radius * factor, MIN_EXTENT)

    def set_color(self, color: Color) -> None:
        self.color = color


@dataclass
class Triangle(_Placed):
    """An isosceles triangle centred on (x, y), apex up."""

    base: float = 0.2
    height: float = 0.2

    def draw(self, painter: Painter) -> None:
        hb, hh = self.base / 2, self.height / 2
        painter.fill_polygon(
            [
                (self.x - hb, self.y - hh),
                (self.x, self.y + hh),
                (self.x + hb, self.y - hh),
            ],
            self.color,
        )

    def contains(self, mx: float, my: float) -> bool:
        hb, hh = self.base / 2, self.height / 2
        return self.x - hb <= mx <= self.x + hb and self.y - hh <= my <= self.y + hh

    def move_by(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    def resize(self, factor: float) -> None:
        self.base = max(self.base * factor, MIN_EXTENT)
        self.height = max(self.height * factor, MIN_EXTENT)

    def set_color(self, color: Color) -> None:
        self.color = color


@dataclass
class Polygon(_Placed):
    """A regular polygon centred on (x, y); five-sided by default."""

    sides: int = 5
    length: float = 0.1

    def draw(self, painter: Painter) -> None:
        step = 2 * math.pi / self.sides
        painter.fill_polygon(
            [
                (self.x + self.length * math.cos(i * step), self.y + self.length * math.sin(i * step))
                for i in range(self.sides)
            ],
            self.color,
        )

    def contains(self, mx: float, my: float) -> bool:
        dx, dy = mx - self.x, my - self.y
        return -self.length <= dx <= self.length and -self.length <= dy <= self.length

    def move_by(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    def resize(self, factor: float) -> None:
        self.length = max(self.length * factor, MIN_EXTENT)

    def set_color(self, color: Color) -> None:
        self.color = color