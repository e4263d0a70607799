"""Undo and redo history of executed commands."""

from __future__ import annotations

from typing import Callable, List

from .command import Command

Listener = Callable[[], None]


class CommandManager:
    """Runs commands and keeps undo and redo stacks.

    Callables in ``state_listeners`` are called whenever the undo/redo
    state changes; those in ``executed_listeners`` after each new command.
    """

    def __init__(self) -> None:
        self._undo_stack: List[Command] = []
        self._redo_stack: List[Command] = []
        self.state_listeners: List[Listener] = []
        self.executed_listeners: List[Listener] = []

    def _notify(self, listeners: List[Listener]) -> None:
        for listener in list(listeners):
            listener()

    def execute(self, command: Command) -> None:
        """Run a command, record it, and forget anything that could be redone."""
        command.execute()
        self._undo_stack.append(command)
        self._redo_stack.clear()
        self._notify(self.state_listeners)
        self._notify(self.executed_listeners)

    def undo(self) -> None:
        """Revert the latest command; does nothing when there is none."""
        if not self._undo_stack:
            return
        command = self._undo_stack.pop()
        command.undo()
        self._redo_stack.append(command)
        self._notify(self.state_listeners)

    def redo(self) -> None:
        """Reapply the latest undone command; does nothing when there is none."""
        if not self._redo_stack:
            return
        command = self._redo_stack.pop()
        command.redo()
        self._undo_stack.append(command)
        self._notify(self.state_listeners)

    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    def clear(self) -> None:
        """Drop the whole history."""
        self._undo_stack.clear()
        self._redo_stack.clear()
        self._notify(self.state_listeners)