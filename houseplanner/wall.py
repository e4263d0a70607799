"""Walls: straight segments drawn on the floor plan."""

from __future__ import annotations

from dataclasses import dataclass, field

from .geometry import Line, Point, Rect

_STRAIGHT_THRESHOLD = 5


@dataclass
class Wall:
    """A wall running from start to end."""

    start: Point = field(default_factory=Point)
    end: Point = field(default_factory=Point)

    def line(self) -> Line:
        return Line(self.start, self.end)

    def is_horizontal(self) -> bool:
        """True when the ends differ in height by less than the threshold."""
        return abs(self.start.y - self.end.y) < _STRAIGHT_THRESHOLD

    def is_vertical(self) -> bool:
        """True when the ends differ sideways by less than the threshold."""
        return abs(self.start.x - self.end.x) < _STRAIGHT_THRESHOLD

    def _crosses_border(self, rect: Rect) -> bool:
        line = self.line()
        return any(line.intersects(edge) for edge in rect.edges())

    def _inside(self, rect: Rect) -> bool:
        return rect.contains(self.start) and rect.contains(self.end)

    def intersects(self, rect: Rect) -> bool:
        """True when the wall crosses the rectangle's border or lies wholly inside it."""
        return self._crosses_border(rect) or self._inside(rect)

    def is_in_rect(self, rect: Rect) -> bool:
        """True when the wall lies inside the rectangle or reaches into it."""
        return self._inside(rect) or self._crosses_border(rect)