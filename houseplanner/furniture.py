"""Furniture pieces placed on the floor plan."""

from __future__ import annotations

import copy
import uuid
from enum import Enum
from typing import Iterable, Optional, Tuple

from .geometry import Point, Rect, rotated_bounds
from .wall import Wall


class FurnitureType(Enum):
    """Kinds of furniture; the values are those stored in project files."""

    SOFA = 0
    CHAIR = 1
    TABLE = 2

    @property
    def label(self) -> str:
        return self.name.title()


_COLORS = {
    FurnitureType.SOFA: (150, 150, 220),
    FurnitureType.CHAIR: (200, 150, 150),
    FurnitureType.TABLE: (150, 200, 150),
}
_DEFAULT_COLOR = (200, 200, 200)


def _normalize_angle(angle: float) -> float:
    angle = angle % 360
    return 0.0 if angle >= 360 else angle


class Furniture:
    """A rectangular piece of furniture centred on its position."""

    def __init__(
        self,
        position: Optional[Point] = None,
        width: float = 0.0,
        height: float = 0.0,
        kind: FurnitureType = FurnitureType.CHAIR,
    ) -> None:
        self.position = position if position is not None else Point()
        self.width = width
        self.height = height
        self.kind = kind
        self.id = uuid.uuid4()
        self.selected = False
        self._rotation = 0.0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(position={self.position!r}, "
            f"rotation={self._rotation!r}, selected={self.selected!r})"
        )

    @property
    def rotation(self) -> float:
        """Rotation in degrees, kept within [0, 360)."""
        return self._rotation

    @rotation.setter
    def rotation(self, angle: float) -> None:
        self._rotation = _normalize_angle(angle)

    @property
    def type_name(self) -> str:
        return self.kind.label

    @property
    def color(self) -> Tuple[int, int, int]:
        """Fill colour for this kind of furniture as an RGB triple."""
        return _COLORS.get(self.kind, _DEFAULT_COLOR)

    def bounding_rect(self) -> Rect:
        """The unrotated footprint, centred on the position."""
        return Rect(
            self.position.x - self.width / 2,
            self.position.y - self.height / 2,
            self.width,
            self.height,
        )

    def rotated_bounding_rect(self) -> Rect:
        """Axis-aligned box around the footprint after rotation."""
        if self._rotation == 0:
            return self.bounding_rect()
        return rotated_bounds(self.bounding_rect(), self.position, self._rotation)

    def collides_with(self, other: Furniture) -> bool:
        """True when another piece's footprint overlaps this one."""
        if other is self:
            return False
        return self.rotated_bounding_rect().intersects(other.rotated_bounding_rect())

    def collides_with_walls(self, walls: Iterable[Wall]) -> bool:
        rect = self.rotated_bounding_rect()
        return any(wall.intersects(rect) for wall in walls)

    def collides_with_any(self, furniture: Iterable[Furniture], walls: Iterable[Wall]) -> bool:
        """True when this piece hits any wall or any other piece."""
        if self.collides_with_walls(walls):
            return True
        return any(self.collides_with(item) for item in furniture)

    def clone(self) -> Furniture:
        """A copy with the same placement and selection but a fresh id."""
        twin = copy.copy(self)
        twin.id = uuid.uuid4()
        return twin


class Sofa(Furniture):
    def __init__(self, position: Optional[Point] = None) -> None:
        super().__init__(position, 60.0, 20.0, FurnitureType.SOFA)


class Chair(Furniture):
    def __init__(self, position: Optional[Point] = None) -> None:
        super().__init__(position, 30.0, 30.0, FurnitureType.CHAIR)


class Table(Furniture):
    def __init__(self, position: Optional[Point] = None) -> None:
        super().__init__(position, 30.0, 30.0, FurnitureType.TABLE)


_FACTORIES = {
    FurnitureType.SOFA: Sofa,
    FurnitureType.CHAIR: Chair,
    FurnitureType.TABLE: Table,
}


def create_furniture(kind, position: Point) -> Furniture:
    """Build a new piece of the given kind at a position.

    Raises ValueError for an unknown kind.
    """
    return _FACTORIES[FurnitureType(kind)](position)