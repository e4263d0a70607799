# houseplanner

The editing model of a house floor plan. You draw walls and place furniture
(sofas, chairs and tables) on a fixed-size canvas. You can then move, rotate,
copy, paste and delete what you placed. Every edit can be undone and redone. A
plan can be saved to a binary project file and loaded back.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## What it does not do

The package has no window, no rendering and no command-line program. It does
not draw walls or furniture. It does not read input devices. A front end passes
it pointer positions, keys and modifiers, and reads the resulting state back:
`project.walls`, `project.furniture`, the selection, `wall_preview`,
`selection_rect`, and each piece's `color`.

## Modules

- `houseplanner.geometry` holds the frozen dataclasses `Point`, `Line` and
  `Rect`. `Point` supports `+`, `-` and `manhattan_length()`. `Line` has
  `length()` and `intersects()`, which is a bounded segment crossing. `Rect`
  has `from_corners()`, `contains()`, `intersects()` and `edges()`; touching
  edges do not count as an intersection. The module also provides
  `point_to_line_distance()` and `rotated_bounds()`.
- `houseplanner.wall` holds `Wall(start, end)`. It has `line()`,
  `is_horizontal()` and `is_vertical()`, which allow a slope of under 5 units.
  It also has `intersects(rect)` and `is_in_rect(rect)`.
- `houseplanner.furniture` holds the `FurnitureType` enum (`SOFA`, `CHAIR`,
  `TABLE`) and `Furniture`. Each piece is centred on `position` and has a
  `rotation` in degrees, which is normalised to [0, 360). A piece also has
  `selected`, a UUID `id`, `bounding_rect()` and `rotated_bounding_rect()`,
  plus the collision checks `collides_with()`, `collides_with_walls()` and
  `collides_with_any()`. `clone()` returns a copy with a fresh id. The module
  defines the kinds `Sofa` (60 × 20), `Chair` (30 × 30) and `Table` (30 × 30),
  and `create_furniture(kind, position)`, which raises `ValueError` for an
  unknown kind.
- `houseplanner.command` holds the undoable edits: `AddFurnitureCommand`,
  `DeleteFurnitureCommand`, `MoveFurnitureCommand`, `RotateFurnitureCommand`,
  `AddWallCommand`, `DeleteWallCommand` and `DeleteSelectionCommand`. All of
  them are subclasses of `Command`, which has `execute()`, `undo()` and
  `redo()`.
- `houseplanner.commandmanager` holds `CommandManager`, which keeps the undo
  and redo stacks. Its methods are `execute()`, `undo()`, `redo()`,
  `can_undo()`, `can_redo()` and `clear()`. Executing a new command discards
  the redo stack. It calls the callables in `state_listeners` whenever the
  undo/redo state changes, and those in `executed_listeners` after each new
  command.
- `houseplanner.project` holds `Project`, with `house_size`, `walls` and
  `furniture`. Its methods are `save()`, `load()`, `new_project()`,
  `canvas_size()`, `clear()`, `clear_walls()` and `clear_furniture()`. The
  module also provides `HouseSize`, `size_for()` and `ProjectFileError`.
- `houseplanner.editor` holds `DesignArea`, the editing surface, together with
  `ToolMode`, `Modifier` and `Key`.

## House sizes

| `HouseSize` | canvas    |
|-------------|-----------|
| `SMALL`     | 300 × 300 |
| `MEDIUM`    | 600 × 600 |
| `LARGE`     | 800 × 600 |

A new `DesignArea` starts with a medium project.

## Editing with `DesignArea`

Set `tool_mode` to choose what a press does.

- `SELECT`: pressing on a piece selects it and starts dragging it. Pressing on
  a wall within 5 units selects that wall. Pressing on empty space starts a
  rubber band. Hold `Modifier.CONTROL` to add to the selection. A move is
  undone automatically if it ends in a collision.
- `DRAW_WALL`: press, move and release to draw a wall. A wall is added only
  when its length, measured as a Manhattan distance, is greater than 10.
  Holding `Modifier.SHIFT` snaps the wall to horizontal or vertical.
- `ADD_SOFA`, `ADD_CHAIR`, `ADD_TABLE`: place a piece at the press position,
  unless it would collide with a wall or with another piece.
- `ROTATE`: the first press selects a piece. Later presses turn it by 45°.

`key_press(key, modifiers)` handles these keys:

- `DELETE` deletes the selection.
- `A`, `C`, `X` and `V` with `CONTROL` select all, copy, cut and paste.
  Pasted pieces are offset by 20 and are kept inside the canvas.
- `Z` with `CONTROL` undoes. Add `SHIFT` to redo.
- `R` rotates the single selected piece by 45°, or by −45° with `SHIFT`. A
  rotation that would cause a collision is refused.
- `ESCAPE` clears the selection.

The same actions are also available as methods:

- `delete_selection()`, `delete_furniture()` and `delete_selected_wall()`
- `select_all()` and `clear_selection()`
- `copy_selected_furniture()`, `cut_selected_furniture()` and
  `paste_furniture()`
- `rotate_furniture(angle)`
- `undo()` and `redo()`
- `new_project(size)`, `save_project()` and `load_project()`

The hit tests `furniture_at()`, `wall_at()`, `furniture_in_rect()` and
`check_collision()` are public. So is `ensure_inside_canvas()`. `DesignArea`
calls the callables in `modified_listeners` whenever an edit modifies the
project.

## Example

```python
from houseplanner.editor import DesignArea, ToolMode, Key, Modifier
from houseplanner.geometry import Point
from houseplanner.project import HouseSize

area = DesignArea()
area.new_project(HouseSize.SMALL)

# Draw a horizontal wall.
area.tool_mode = ToolMode.DRAW_WALL
area.mouse_press(Point(20, 20), Modifier.NONE)
area.mouse_move(Point(200, 24), Modifier.SHIFT)
area.mouse_release(Point(200, 24), Modifier.SHIFT)

# Place a chair.
area.tool_mode = ToolMode.ADD_CHAIR
area.mouse_press(Point(100, 150), Modifier.NONE)

# Undo the chair, then redo it.
area.key_press(Key.Z, Modifier.CONTROL)
area.key_press(Key.Z, Modifier.CONTROL | Modifier.SHIFT)

area.save_project("plan.bruh")
```

## Project files

A project file is big-endian. It contains, in this order:

1. The header string `HouseLayoutDesigner`, stored as a 32-bit byte length
   followed by UTF-16 text.
2. The version, which is 1.
3. The house size.
4. The walls, with each end point stored as two 32-bit integers.
5. The furniture. For each piece, the file stores its kind, its position as
   two doubles, its rotation as a double, and its selected flag.

`save()` and `load()` raise `ProjectFileError` in these cases:

- the file cannot be written or read;
- the header or the version is wrong;
- the data is truncated.

When loading, an unknown house size falls back to medium. Pieces of an unknown
kind are skipped.