"""
Controllers for the TPS tester.

This package contains Qt-free controller classes: the undoable commands,
the history that applies and reverses them, and the session controller
that notifies views through an observer pattern.
"""

from .commands import AddCommand, AndMaskCommand, Command, MaskCommand, OrMaskCommand
from .number_controller import NumberController
from .undo_manager import HistoryState, UndoManager

__all__ = [
    "Command",
    "MaskCommand",
    "AddCommand",
    "AndMaskCommand",
    "OrMaskCommand",
    "HistoryState",
    "UndoManager",
    "NumberController",
]
