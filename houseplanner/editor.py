"""Interactive editing of a floor plan: tools, selection, clipboard and history."""

from __future__ import annotations

import enum
from pathlib import Path
from typing import Callable, List, Optional, Tuple, Union

from .command import (
    AddFurnitureCommand,
    AddWallCommand,
    DeleteFurnitureCommand,
    DeleteSelectionCommand,
    DeleteWallCommand,
    MoveFurnitureCommand,
    RotateFurnitureCommand,
)
from .commandmanager import CommandManager
from .furniture import Furniture, FurnitureType, create_furniture
from .geometry import Line, Point, Rect, point_to_line_distance
from .project import CanvasSize, HouseSize, Project
from .wall import Wall

_WALL_HIT_DISTANCE = 5
_MIN_WALL_LENGTH = 10
_MIN_SELECTION_SIZE = 5
_PASTE_OFFSET = 20
_ROTATION_STEP = 45


class ToolMode(enum.Enum):
    """What a left click on the canvas does."""

    SELECT = enum.auto()
    DRAW_WALL = enum.auto()
    ADD_SOFA = enum.auto()
    ADD_CHAIR = enum.auto()
    ADD_TABLE = enum.auto()
    ROTATE = enum.auto()


class Modifier(enum.Flag):
    """Keyboard modifiers held during an input event."""

    NONE = 0
    SHIFT = enum.auto()
    CONTROL = enum.auto()


class Key(enum.Enum):
    """Keys the design area responds to."""

    DELETE = enum.auto()
    A = enum.auto()
    C = enum.auto()
    X = enum.auto()
    V = enum.auto()
    Z = enum.auto()
    R = enum.auto()
    ESCAPE = enum.auto()


_TOOL_FURNITURE = {
    ToolMode.ADD_SOFA: FurnitureType.SOFA,
    ToolMode.ADD_CHAIR: FurnitureType.CHAIR,
    ToolMode.ADD_TABLE: FurnitureType.TABLE,
}


def _snap(start: Point, end: Point) -> Point:
    """Force a segment to be horizontal or vertical, whichever is closer."""
    diff = end - start
    if abs(diff.x) > abs(diff.y):
        return Point(end.x, start.y)
    return Point(start.x, end.y)


def _to_int_rect(rect: Rect) -> Rect:
    return Rect(round(rect.x), round(rect.y), round(rect.width), round(rect.height))


class DesignArea:
    """The editing surface: turns mouse and key input into undoable edits.

    Callables in ``modified_listeners`` are called whenever an edit marks
    the project as modified.
    """

    def __init__(self) -> None:
        self.project = Project()
        self.command_manager = CommandManager()
        self.modified_listeners: List[Callable[[], None]] = []

        self._tool_mode = ToolMode.SELECT
        self._selected_furniture: List[Furniture] = []
        self._selected_wall_indices: List[int] = []
        self._clipboard: List[Furniture] = []

        self._drawing_wall = False
        self._wall_start = Point()
        self._wall_end = Point()

        self._moving_furniture = False
        self._initial_positions: List[Point] = []
        self._last_mouse_pos = Point()

        self._selecting = False
        self._selection_start = Point()
        self._selection_rect: Optional[Rect] = None

        self.new_project(HouseSize.MEDIUM)

    # ----- state -------------------------------------------------------

    @property
    def tool_mode(self) -> ToolMode:
        return self._tool_mode

    @tool_mode.setter
    def tool_mode(self, mode: ToolMode) -> None:
        if self._tool_mode == mode:
            return
        self._tool_mode = mode
        if mode is ToolMode.DRAW_WALL:
            self.clear_selection()

    @property
    def canvas_size(self) -> CanvasSize:
        return self.project.canvas_size()

    @property
    def width(self) -> int:
        return self.canvas_size.width

    @property
    def height(self) -> int:
        return self.canvas_size.height

    @property
    def selected_furniture(self) -> Tuple[Furniture, ...]:
        return tuple(self._selected_furniture)

    @property
    def selected_wall_indices(self) -> Tuple[int, ...]:
        return tuple(self._selected_wall_indices)

    @property
    def selected_wall_count(self) -> int:
        return len(self._selected_wall_indices)

    @property
    def wall_preview(self) -> Optional[Line]:
        """The wall being drawn, if any."""
        if not self._drawing_wall:
            return None
        return Line(self._wall_start, self._wall_end)

    @property
    def selection_rect(self) -> Optional[Rect]:
        """The rubber-band rectangle while dragging a selection."""
        return self._selection_rect if self._selecting else None

    def can_undo(self) -> bool:
        return self.command_manager.can_undo()

    def can_redo(self) -> bool:
        return self.command_manager.can_redo()

    def _emit_modified(self) -> None:
        for listener in list(self.modified_listeners):
            listener()

    def _select(self, piece: Furniture) -> None:
        piece.selected = True
        self._selected_furniture.append(piece)

    def _deselect_all_furniture(self) -> None:
        for piece in self.project.furniture:
            piece.selected = False

    # ----- selection and editing ---------------------------------------

    def delete_selection(self) -> None:
        """Delete every selected piece and wall in one undoable step."""
        if not self._selected_furniture and not self._selected_wall_indices:
            return
        self.command_manager.execute(
            DeleteSelectionCommand(
                self.project.furniture,
                self._selected_furniture,
                self.project.walls,
                self._selected_wall_indices,
            )
        )
        self._selected_furniture.clear()
        self._selected_wall_indices.clear()
        self._emit_modified()

    def clear_wall_selection(self) -> None:
        self._selected_wall_indices.clear()

    def delete_selected_wall(self) -> None:
        """Delete the selected walls, one undoable step per wall."""
        if not self._selected_wall_indices:
            return
        self._selected_wall_indices.sort(reverse=True)
        for index in self._selected_wall_indices:
            if 0 <= index < len(self.project.walls):
                self.command_manager.execute(DeleteWallCommand(self.project.walls, index))
        self.clear_wall_selection()
        self._emit_modified()

    def has_selected_wall(self) -> bool:
        return bool(self._selected_wall_indices)

    def clear_selection(self) -> None:
        for piece in self._selected_furniture:
            piece.selected = False
        self._selected_furniture.clear()
        self.clear_wall_selection()

    def select_all(self) -> None:
        self.clear_selection()
        for piece in self.project.furniture:
            self._select(piece)
        self._selected_wall_indices.extend(range(len(self.project.walls)))

    def delete_furniture(self) -> None:
        """Delete the selected furniture only."""
        if not self._selected_furniture:
            return
        self.command_manager.execute(
            DeleteFurnitureCommand(self.project.furniture, self._selected_furniture)
        )
        self._selected_furniture.clear()

    def has_selected_furniture(self) -> bool:
        return bool(self._selected_furniture)

    def copy_selected_furniture(self) -> None:
        self._clipboard = [piece.clone() for piece in self._selected_furniture]

    def cut_selected_furniture(self) -> None:
        if not self._selected_furniture:
            return
        self.copy_selected_furniture()
        self.delete_furniture()

    def paste_furniture(self) -> None:
        """Add copies of the clipboard, shifted a little, and select them."""
        if not self._clipboard:
            return
        self.clear_selection()
        offset = Point(_PASTE_OFFSET, _PASTE_OFFSET)
        for piece in self._clipboard:
            new_piece = piece.clone()
            new_piece.position = new_piece.position + offset
            new_piece.selected = True
            self.ensure_inside_canvas(new_piece)
            self.command_manager.execute(AddFurnitureCommand(self.project.furniture, new_piece))
            self._selected_furniture.append(new_piece)

    def rotate_furniture(self, angle: float) -> None:
        """Turn the single selected piece, unless that makes it collide."""
        if len(self._selected_furniture) != 1:
            return
        piece = self._selected_furniture[0]
        old_rotation = piece.rotation
        new_rotation = old_rotation + angle
        piece.rotation = new_rotation
        if self.check_collision(piece):
            piece.rotation = old_rotation
            return
        self.command_manager.execute(RotateFurnitureCommand(piece, old_rotation, new_rotation))

    # ----- project and history -----------------------------------------

    def new_project(self, size: HouseSize) -> None:
        self.project.new_project(size)
        self.command_manager.clear()
        self.clear_selection()

    def save_project(self, filename: Union[str, Path]) -> None:
        """Save the project; raises ProjectFileError on failure."""
        self.project.save(filename)

    def load_project(self, filename: Union[str, Path]) -> None:
        """Load a project; raises ProjectFileError and keeps the history on failure."""
        self.project.load(filename)
        self.command_manager.clear()
        self.clear_selection()
        self._deselect_all_furniture()

    def undo(self) -> None:
        self.command_manager.undo()
        self.clear_selection()
        self._deselect_all_furniture()

    def redo(self) -> None:
        self.command_manager.redo()
        self.clear_selection()
        self._deselect_all_furniture()

    # ----- input -------------------------------------------------------

    def mouse_press(self, position: Point, modifiers: Modifier = Modifier.NONE) -> None:
        """Handle a left-button press at a canvas position."""
        mode = self._tool_mode
        if mode is ToolMode.SELECT:
            self._press_select(position, modifiers)
        elif mode is ToolMode.DRAW_WALL:
            self._drawing_wall = True
            self._wall_start = position
            self._wall_end = position
        elif mode in _TOOL_FURNITURE:
            piece = create_furniture(_TOOL_FURNITURE[mode], position)
            if not self.check_collision(piece):
                self.command_manager.execute(AddFurnitureCommand(self.project.furniture, piece))
                self._emit_modified()
        elif mode is ToolMode.ROTATE:
            if not self._selected_furniture:
                piece = self.furniture_at(position)
                if piece is not None:
                    self.clear_selection()
                    self._select(piece)
            elif len(self._selected_furniture) == 1:
                self.rotate_furniture(_ROTATION_STEP)

    def _press_select(self, position: Point, modifiers: Modifier) -> None:
        control = Modifier.CONTROL in modifiers
        piece = self.furniture_at(position)
        if piece is not None:
            self._moving_furniture = True
            self._last_mouse_pos = position
            if not control and not piece.selected:
                self.clear_selection()
            if not piece.selected:
                self._select(piece)
            self._initial_positions = [p.position for p in self._selected_furniture]
            return

        wall_index = self.wall_at(position)
        if wall_index is not None:
            if control:
                if wall_index in self._selected_wall_indices:
                    self._selected_wall_indices.remove(wall_index)
                else:
                    self._selected_wall_indices.append(wall_index)
            else:
                self.clear_selection()
                self._selected_wall_indices = [wall_index]
            return

        self._selecting = True
        self._selection_start = position
        self._selection_rect = Rect(position.x, position.y, 0, 0)
        if not control:
            self.clear_selection()

    def mouse_move(self, position: Point, modifiers: Modifier = Modifier.NONE) -> None:
        """Handle pointer motion while a button may be held."""
        if self._drawing_wall:
            self._wall_end = position
            if Modifier.SHIFT in modifiers:
                self._wall_end = _snap(self._wall_start, self._wall_end)
        elif self._moving_furniture:
            delta = position - self._last_mouse_pos
            self._last_mouse_pos = position
            for piece in self._selected_furniture:
                piece.position = piece.position + delta
                self.ensure_inside_canvas(piece)
        elif self._selecting:
            self._selection_rect = Rect.from_corners(self._selection_start, position)

    def mouse_release(self, position: Point, modifiers: Modifier = Modifier.NONE) -> None:
        """Handle a left-button release, finishing any drag in progress."""
        if self._drawing_wall:
            self._finish_wall(modifiers)
        elif self._moving_furniture:
            self._finish_move()
        elif self._selecting:
            self._finish_rubber_band()

    def _finish_wall(self, modifiers: Modifier) -> None:
        self._drawing_wall = False
        if (self._wall_start - self._wall_end).manhattan_length() <= _MIN_WALL_LENGTH:
            return
        if Modifier.SHIFT in modifiers:
            self._wall_end = _snap(self._wall_start, self._wall_end)
        wall = Wall(self._wall_start, self._wall_end)
        self.command_manager.execute(AddWallCommand(self.project.walls, wall))
        self._emit_modified()

    def _finish_move(self) -> None:
        self._moving_furniture = False
        pieces = self._selected_furniture
        current = [p.position for p in pieces]
        ids = [p.id for p in pieces]
        changed = any(old != new for old, new in zip(self._initial_positions, current))
        if changed:
            if any(self.check_collision(p) for p in pieces):
                for piece, old in zip(pieces, self._initial_positions):
                    piece.position = old
            else:
                self.command_manager.execute(
                    MoveFurnitureCommand(
                        self.project.furniture, ids, self._initial_positions, current
                    )
                )
                self._emit_modified()
        self._initial_positions = []

    def _finish_rubber_band(self) -> None:
        self._selecting = False
        rect = self._selection_rect
        self._selection_rect = None
        if rect is None:
            return
        # The band spans its corner pixels inclusively.
        pixel_rect = Rect(rect.x, rect.y, rect.width + 1, rect.height + 1)
        if pixel_rect.width <= _MIN_SELECTION_SIZE or pixel_rect.height <= _MIN_SELECTION_SIZE:
            return
        for piece in self.furniture_in_rect(pixel_rect):
            if not piece.selected:
                self._select(piece)
        for index, wall in enumerate(self.project.walls):
            if wall.is_in_rect(rect) and index not in self._selected_wall_indices:
                self._selected_wall_indices.append(index)

    def key_press(self, key: Key, modifiers: Modifier = Modifier.NONE) -> None:
        """Handle a key press with the given modifiers held."""
        control = Modifier.CONTROL in modifiers
        shift = Modifier.SHIFT in modifiers
        if key is Key.DELETE:
            self.delete_selection()
        elif key is Key.A and control:
            self.select_all()
        elif key is Key.C and control:
            self.copy_selected_furniture()
        elif key is Key.X and control:
            self.cut_selected_furniture()
        elif key is Key.V and control:
            self.paste_furniture()
        elif key is Key.Z and control:
            if shift:
                self.redo()
            else:
                self.undo()
        elif key is Key.R and len(self._selected_furniture) == 1:
            self.rotate_furniture(-_ROTATION_STEP if shift else _ROTATION_STEP)
        elif key is Key.ESCAPE:
            self.clear_selection()

    # ----- hit testing -------------------------------------------------

    def furniture_at(self, position: Point) -> Optional[Furniture]:
        """The topmost piece whose footprint holds the position."""
        for piece in reversed(self.project.furniture):
            if piece.rotated_bounding_rect().contains(position):
                return piece
        return None

    def wall_at(self, position: Point) -> Optional[int]:
        """Index of the first wall whose line passes close to the position."""
        for index, wall in enumerate(self.project.walls):
            if point_to_line_distance(position, wall.line()) <= _WALL_HIT_DISTANCE:
                return index
        return None

    def furniture_in_rect(self, rect: Rect) -> List[Furniture]:
        return [
            piece
            for piece in self.project.furniture
            if rect.intersects(_to_int_rect(piece.rotated_bounding_rect()))
        ]

    def check_collision(self, furniture: Furniture) -> bool:
        """True when the piece hits a wall or another piece of the project."""
        if furniture.collides_with_walls(self.project.walls):
            return True
        return any(
            item is not furniture and furniture.collides_with(item)
            for item in self.project.furniture
        )

    def ensure_inside_canvas(self, furniture: Furniture) -> None:
        """Shift the piece so its footprint lies within the canvas."""
        width, height = self.width, self.height
        rect = furniture.rotated_bounding_rect()
        x, y = furniture.position.x, furniture.position.y
        if rect.left < 0:
            x -= rect.left
        if rect.right > width:
            x -= rect.right - width
        if rect.top < 0:
            y -= rect.top
        if rect.bottom > height:
            y -= rect.bottom - height
        furniture.position = Point(x, y)