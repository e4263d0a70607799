from houseplanner.command import AddWallCommand, Command
from houseplanner.commandmanager import CommandManager
from houseplanner.geometry import Point
from houseplanner.wall import Wall


class _Recording(Command):
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def execute(self):
        self.log.append(("execute", self.name))

    def undo(self):
        self.log.append(("undo", self.name))

    def redo(self):
        self.log.append(("redo", self.name))


def _counter(manager):
    counts = {"state": 0, "executed": 0}
    manager.state_listeners.append(lambda: counts.__setitem__("state", counts["state"] + 1))
    manager.executed_listeners.append(
        lambda: counts.__setitem__("executed", counts["executed"] + 1)
    )
    return counts


def test_fresh_manager_has_no_history():
    manager = CommandManager()
    assert manager.can_undo() is False
    assert manager.can_redo() is False


def test_execute_runs_and_records():
    log = []
    manager = CommandManager()
    manager.execute(_Recording("a", log))
    assert log == [("execute", "a")]
    assert manager.can_undo() is True
    assert manager.can_redo() is False


def test_undo_then_redo():
    log = []
    manager = CommandManager()
    manager.execute(_Recording("a", log))
    manager.undo()
    assert manager.can_undo() is False
    assert manager.can_redo() is True
    manager.redo()
    assert log == [("execute", "a"), ("undo", "a"), ("redo", "a")]
    assert manager.can_undo() is True
    assert manager.can_redo() is False


def test_undo_is_last_in_first_out():
    log = []
    manager = CommandManager()
    manager.execute(_Recording("a", log))
    manager.execute(_Recording("b", log))
    manager.undo()
    manager.undo()
    assert log[2:] == [("undo", "b"), ("undo", "a")]


def test_execute_discards_redo_history():
    log = []
    manager = CommandManager()
    manager.execute(_Recording("a", log))
    manager.undo()
    manager.execute(_Recording("b", log))
    assert manager.can_redo() is False
    manager.redo()
    assert log[-1] == ("execute", "b")


def test_undo_and_redo_on_empty_do_nothing():
    manager = CommandManager()
    counts = _counter(manager)
    manager.undo()
    manager.redo()
    assert counts == {"state": 0, "executed": 0}


def test_listeners_fire_on_execute_and_undo():
    log = []
    manager = CommandManager()
    counts = _counter(manager)
    manager.execute(_Recording("a", log))
    assert counts == {"state": 1, "executed": 1}
    manager.undo()
    assert counts == {"state": 2, "executed": 1}
    manager.redo()
    assert counts == {"state": 3, "executed": 1}


def test_clear_drops_history_and_notifies():
    log = []
    manager = CommandManager()
    manager.execute(_Recording("a", log))
    manager.execute(_Recording("b", log))
    manager.undo()
    counts = _counter(manager)
    manager.clear()
    assert manager.can_undo() is False
    assert manager.can_redo() is False
    assert counts["state"] == 1


def test_real_command_through_manager():
    walls = []
    wall = Wall(Point(0, 0), Point(50, 0))
    manager = CommandManager()
    manager.execute(AddWallCommand(walls, wall))
    assert walls == [wall]
    manager.undo()
    assert walls == []
    manager.redo()
    assert walls == [wall]