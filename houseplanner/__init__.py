"""Floor-plan editing: geometry, walls, furniture, undoable commands, project files and the design area."""

__version__ = "0.1.0"
__all__ = ["__version__"]