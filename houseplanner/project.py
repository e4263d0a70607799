"""A floor-plan project: house size, walls and furniture, saved in a binary file."""

from __future__ import annotations

import struct
from enum import Enum
from pathlib import Path
from typing import List, NamedTuple, Union

from .furniture import Furniture, FurnitureType, create_furniture
from .geometry import Point
from .wall import Wall

_MAGIC = "HouseLayoutDesigner"
_VERSION = 1
_NULL_STRING = 0xFFFFFFFF


class ProjectFileError(Exception):
    """A project file could not be read or written."""


class HouseSize(Enum):
    """Canvas presets; the values are those stored in project files."""

    SMALL = 0
    MEDIUM = 1
    LARGE = 2


class CanvasSize(NamedTuple):
    width: int
    height: int


_SIZES = {
    HouseSize.SMALL: CanvasSize(300, 300),
    HouseSize.MEDIUM: CanvasSize(600, 600),
    HouseSize.LARGE: CanvasSize(800, 600),
}


def size_for(size: HouseSize) -> CanvasSize:
    """Canvas size for a preset; anything unknown gets the medium size."""
    return _SIZES.get(size, _SIZES[HouseSize.MEDIUM])


class _Writer:
    """Big-endian binary stream writer."""

    def __init__(self) -> None:
        self._parts: List[bytes] = []

    def int32(self, value: int) -> None:
        self._parts.append(struct.pack(">i", value))

    def double(self, value: float) -> None:
        self._parts.append(struct.pack(">d", value))

    def boolean(self, value: bool) -> None:
        self._parts.append(struct.pack(">?", value))

    def string(self, text: str) -> None:
        data = text.encode("utf-16-be")
        self._parts.append(struct.pack(">I", len(data)) + data)

    def point(self, point: Point) -> None:
        self.int32(int(round(point.x)))
        self.int32(int(round(point.y)))

    def pointf(self, point: Point) -> None:
        self.double(point.x)
        self.double(point.y)

    def getvalue(self) -> bytes:
        return b"".join(self._parts)


class _Reader:
    """Big-endian binary stream reader that raises on truncated data."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._offset = 0

    def _take(self, count: int) -> bytes:
        end = self._offset + count
        if end > len(self._data):
            raise ProjectFileError("unexpected end of project file")
        chunk = self._data[self._offset:end]
        self._offset = end
        return chunk

    def _unpack(self, fmt: str):
        return struct.unpack(fmt, self._take(struct.calcsize(fmt)))[0]

    def int32(self) -> int:
        return self._unpack(">i")

    def double(self) -> float:
        return self._unpack(">d")

    def boolean(self) -> bool:
        return self._unpack(">?")

    def string(self) -> str:
        length = self._unpack(">I")
        if length == _NULL_STRING:
            return ""
        if length % 2:
            raise ProjectFileError("malformed string in project file")
        return self._take(length).decode("utf-16-be")

    def point(self) -> Point:
        return Point(self.int32(), self.int32())

    def pointf(self) -> Point:
        return Point(self.double(), self.double())


class Project:
    """The walls and furniture of one house layout."""

    def __init__(self) -> None:
        self.house_size = HouseSize.MEDIUM
        self.walls: List[Wall] = []
        self.furniture: List[Furniture] = []

    def save(self, filename: Union[str, Path]) -> None:
        """Write the project to a file; raises ProjectFileError on failure."""
        out = _Writer()
        out.string(_MAGIC)
        out.int32(_VERSION)
        out.int32(self.house_size.value)

        out.int32(len(self.walls))
        for wall in self.walls:
            out.point(wall.start)
            out.point(wall.end)

        out.int32(len(self.furniture))
        for piece in self.furniture:
            out.int32(piece.kind.value)
            out.pointf(piece.position)
            out.double(piece.rotation)
            out.boolean(piece.selected)

        try:
            Path(filename).write_bytes(out.getvalue())
        except OSError as exc:
            raise ProjectFileError(f"cannot write {filename}") from exc

    def load(self, filename: Union[str, Path]) -> None:
        """Replace the project with one read from a file.

        Raises ProjectFileError when the file cannot be read or is not a
        version 1 layout; the project is left empty once reading has begun.
        """
        try:
            data = Path(filename).read_bytes()
        except OSError as exc:
            raise ProjectFileError(f"cannot read {filename}") from exc

        self.clear()
        reader = _Reader(data)

        if reader.string() != _MAGIC:
            raise ProjectFileError("not a house layout file")
        version = reader.int32()
        if version != _VERSION:
            raise ProjectFileError(f"unsupported project version {version}")

        raw_size = reader.int32()
        try:
            self.house_size = HouseSize(raw_size)
        except ValueError:
            self.house_size = HouseSize.MEDIUM

        for _ in range(reader.int32()):
            start = reader.point()
            end = reader.point()
            self.walls.append(Wall(start, end))

        for _ in range(reader.int32()):
            kind = reader.int32()
            position = reader.pointf()
            rotation = reader.double()
            selected = reader.boolean()
            try:
                piece = create_furniture(FurnitureType(kind), position)
            except ValueError:
                continue
            piece.rotation = rotation
            piece.selected = selected
            self.furniture.append(piece)

    def new_project(self, size: HouseSize) -> None:
        """Start over with an empty layout of the given size."""
        self.clear()
        self.house_size = size

    def canvas_size(self) -> CanvasSize:
        return size_for(self.house_size)

    def clear_furniture(self) -> None:
        self.furniture.clear()

    def clear_walls(self) -> None:
        self.walls.clear()

    def clear(self) -> None:
        self.clear_furniture()
        self.clear_walls()