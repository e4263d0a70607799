"""Plane geometry used by the layout editor: points, rectangles and line segments."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Point:
    """A point (or offset) in canvas coordinates, y growing downwards."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def manhattan_length(self) -> float:
        """Sum of the absolute coordinates."""
        return abs(self.x) + abs(self.y)


@dataclass(frozen=True)
class Line:
    """A line segment between two points."""

    p1: Point
    p2: Point

    def length(self) -> float:
        return math.hypot(self.p2.x - self.p1.x, self.p2.y - self.p1.y)

    def intersects(self, other: Line) -> bool:
        """True when both segments cross within their own bounds."""
        ax = self.p2.x - self.p1.x
        ay = self.p2.y - self.p1.y
        bx = other.p1.x - other.p2.x
        by = other.p1.y - other.p2.y
        denominator = ay * bx - ax * by
        if denominator == 0 or not math.isfinite(denominator):
            return False
        cx = self.p1.x - other.p1.x
        cy = self.p1.y - other.p1.y
        na = (by * cx - bx * cy) / denominator
        if not 0 <= na <= 1:
            return False
        nb = (ax * cy - ay * cx) / denominator
        return 0 <= nb <= 1


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_corners(cls, a: Point, b: Point) -> Rect:
        """The normalized rectangle spanned by two opposite corners."""
        left, right = sorted((a.x, b.x))
        top, bottom = sorted((a.y, b.y))
        return cls(left, top, right - left, bottom - top)

    @property
    def left(self) -> float:
        return min(self.x, self.x + self.width)

    @property
    def right(self) -> float:
        return max(self.x, self.x + self.width)

    @property
    def top(self) -> float:
        return min(self.y, self.y + self.height)

    @property
    def bottom(self) -> float:
        return max(self.y, self.y + self.height)

    @property
    def top_left(self) -> Point:
        return Point(self.left, self.top)

    @property
    def top_right(self) -> Point:
        return Point(self.right, self.top)

    @property
    def bottom_left(self) -> Point:
        return Point(self.left, self.bottom)

    @property
    def bottom_right(self) -> Point:
        return Point(self.right, self.bottom)

    @property
    def center(self) -> Point:
        return Point((self.left + self.right) / 2, (self.top + self.bottom) / 2)

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def contains(self, point: Point) -> bool:
        """True when the point lies inside or on the border of a non-empty rectangle."""
        if self.is_empty:
            return False
        return self.left <= point.x <= self.right and self.top <= point.y <= self.bottom

    def intersects(self, other: Rect) -> bool:
        """True when both rectangles overlap in an area; touching edges do not count."""
        if self.is_empty or other.is_empty:
            return False
        if self.left >= other.right or other.left >= self.right:
            return False
        return not (self.top >= other.bottom or other.top >= self.bottom)

    def edges(self) -> Tuple[Line, Line, Line, Line]:
        """Top, right, bottom and left edges, going round clockwise."""
        return (
            Line(self.top_left, self.top_right),
            Line(self.top_right, self.bottom_right),
            Line(self.bottom_right, self.bottom_left),
            Line(self.bottom_left, self.top_left),
        )


def point_to_line_distance(point: Point, line: Line) -> float:
    """Distance from a point to the infinite line through a segment."""
    x1, y1, x2, y2 = line.p1.x, line.p1.y, line.p2.x, line.p2.y
    numerator = abs((y2 - y1) * point.x - (x2 - x1) * point.y + x2 * y1 - y2 * x1)
    denominator = math.hypot(y2 - y1, x2 - x1)
    if denominator == 0:
        return Line(line.p1, point).length()
    return numerator / denominator


_EXACT_TURNS = {0.0: (0.0, 1.0), 90.0: (1.0, 0.0), 180.0: (0.0, -1.0), 270.0: (-1.0, 0.0)}


def _sin_cos(angle: float) -> Tuple[float, float]:
    exact = _EXACT_TURNS.get(angle % 360)
    if exact is not None:
        return exact
    radians = math.radians(angle)
    return math.sin(radians), math.cos(radians)


def rotated_bounds(rect: Rect, center: Point, angle: float) -> Rect:
    """Bounding box of a rectangle turned clockwise by angle degrees about center."""
    sin, cos = _sin_cos(angle)
    corners = (rect.top_left, rect.top_right, rect.bottom_right, rect.bottom_left)
    turned = [
        Point(
            center.x + cos * (p.x - center.x) - sin * (p.y - center.y),
            center.y + sin * (p.x - center.x) + cos * (p.y - center.y),
        )
        for p in corners
    ]
    xs = [p.x for p in turned]
    ys = [p.y for p in turned]
    return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))