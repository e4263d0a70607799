"""Undoable edits to the furniture and wall lists of a project."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import List, Sequence
from uuid import UUID

from .furniture import Furniture
from .geometry import Point
from .wall import Wall


def _index_of(items: Sequence[object], target: object) -> int:
    """Position of target in items by identity, or -1."""
    return next((i for i, item in enumerate(items) if item is target), -1)


class Command(ABC):
    """An edit that can be applied, reverted and applied again."""

    @abstractmethod
    def execute(self) -> None:
        """Apply the edit."""

    @abstractmethod
    def undo(self) -> None:
        """Revert the edit."""

    def redo(self) -> None:
        """Apply the edit again after it was undone."""
        self.execute()


class AddFurnitureCommand(Command):
    """Append a piece of furniture to the list."""

    def __init__(self, furniture_list: List[Furniture], furniture: Furniture) -> None:
        self._furniture_list = furniture_list
        self._furniture = furniture

    def execute(self) -> None:
        self._furniture_list.append(self._furniture)

    def undo(self) -> None:
        index = _index_of(self._furniture_list, self._furniture)
        if index != -1:
            del self._furniture_list[index]


class DeleteFurnitureCommand(Command):
    """Remove the selected pieces, keeping copies to restore them."""

    def __init__(self, furniture_list: List[Furniture], selected: Sequence[Furniture]) -> None:
        self._furniture_list = furniture_list
        self._deleted: List[Furniture] = []
        self._indices: List[int] = []
        for piece in selected:
            index = _index_of(furniture_list, piece)
            if index != -1:
                self._indices.append(index)
                self._deleted.append(piece.clone())

    def execute(self) -> None:
        # Highest index first so earlier removals do not shift later ones.
        self._indices.sort(reverse=True)
        for index in self._indices:
            if 0 <= index < len(self._furniture_list):
                del self._furniture_list[index]

    def undo(self) -> None:
        for piece, index in zip(self._deleted, reversed(self._indices)):
            if index <= len(self._furniture_list):
                self._furniture_list.insert(index, piece.clone())


class MoveFurnitureCommand(Command):
    """Move pieces, found by id, between two sets of positions."""

    def __init__(
        self,
        furniture_list: List[Furniture],
        furniture_ids: Sequence[UUID],
        old_positions: Sequence[Point],
        new_positions: Sequence[Point],
    ) -> None:
        self._furniture_list = furniture_list
        self._ids = list(furniture_ids)
        self._old_positions = list(old_positions)
        self._new_positions = list(new_positions)

    def _place(self, positions: Sequence[Point]) -> None:
        for furniture_id, position in zip(self._ids, positions):
            piece = next((p for p in self._furniture_list if p.id == furniture_id), None)
            if piece is not None:
                piece.position = position

    def execute(self) -> None:
        self._place(self._new_positions)

    def undo(self) -> None:
        self._place(self._old_positions)


class RotateFurnitureCommand(Command):
    """Turn one piece from an old rotation to a new one."""

    def __init__(self, furniture: Furniture, old_rotation: float, new_rotation: float) -> None:
        self._furniture = furniture
        self._old_rotation = old_rotation
        self._new_rotation = new_rotation

    def execute(self) -> None:
        self._furniture.rotation = self._new_rotation

    def undo(self) -> None:
        self._furniture.rotation = self._old_rotation


class AddWallCommand(Command):
    """Append a wall; undoing drops the last wall."""

    def __init__(self, wall_list: List[Wall], wall: Wall) -> None:
        self._wall_list = wall_list
        self._wall = copy.copy(wall)

    def execute(self) -> None:
        self._wall_list.append(copy.copy(self._wall))

    def undo(self) -> None:
        if self._wall_list:
            self._wall_list.pop()


class DeleteWallCommand(Command):
    """Remove the wall at an index."""

    def __init__(self, wall_list: List[Wall], wall_index: int) -> None:
        self._wall_list = wall_list
        self._wall_index = wall_index
        self._deleted_wall = Wall()
        if 0 <= wall_index < len(wall_list):
            self._deleted_wall = copy.copy(wall_list[wall_index])

    def _index_valid(self) -> bool:
        return 0 <= self._wall_index < len(self._wall_list)

    def execute(self) -> None:
        if self._index_valid():
            del self._wall_list[self._wall_index]

    def undo(self) -> None:
        if self._index_valid():
            self._wall_list.insert(self._wall_index, copy.copy(self._deleted_wall))


class DeleteSelectionCommand(Command):
    """Remove selected furniture and walls together."""

    def __init__(
        self,
        furniture_list: List[Furniture],
        selected_furniture: Sequence[Furniture],
        wall_list: List[Wall],
        selected_wall_indices: Sequence[int],
    ) -> None:
        self._furniture_list = furniture_list
        self._wall_list = wall_list
        self._deleted_items: List[Furniture] = []
        self._item_indices: List[int] = []
        for piece in selected_furniture:
            index = _index_of(furniture_list, piece)
            if index != -1:
                self._item_indices.append(index)
                self._deleted_items.append(piece.clone())

        self._wall_indices = list(selected_wall_indices)
        self._deleted_walls = [
            copy.copy(wall_list[index])
            for index in self._wall_indices
            if 0 <= index < len(wall_list)
        ]

    def execute(self) -> None:
        self._item_indices.sort(reverse=True)
        for index in self._item_indices:
            if 0 <= index < len(self._furniture_list):
                del self._furniture_list[index]

        self._wall_indices.sort(reverse=True)
        for index in self._wall_indices:
            if 0 <= index < len(self._wall_list):
                del self._wall_list[index]

    def undo(self) -> None:
        for piece, index in reversed(list(zip(self._deleted_items, self._item_indices))):
            self._furniture_list.insert(index, piece.clone())

        for wall, index in reversed(list(zip(self._deleted_walls, self._wall_indices))):
            self._wall_list.insert(index, copy.copy(wall))