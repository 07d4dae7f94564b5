"""
NumberController - Orchestrates transactions on a NumberModel.

This module contains no Qt dependencies. It owns the model and its undo
history, and notifies views of changes through an observer pattern.
"""

import logging
from typing import Any, Callable, Optional

from controllers.commands import AddCommand, AndMaskCommand, Command, OrMaskCommand
from controllers.undo_manager import UndoManager
from models.number import NumberModel

logger = logging.getLogger(__name__)


class NumberController:
    """
    Controller for transactions on a single number.

    Every mutation goes through the UndoManager so it can be undone. Views
    register callbacks to stay in sync.

    Observer events:
        command_applied (Command) - A new command was added and applied
        command_undone (Command) - A command was reversed
        command_redone (Command) - A command was re-applied
        history_cleared (None) - The history was emptied, value kept
        value_reset (int) - History emptied and value reset
    """

    def __init__(self, model: Optional[NumberModel] = None, undo_manager: Optional[UndoManager] = None):
        self.model = model if model is not None else NumberModel()
        self.undo_manager = undo_manager if undo_manager is not None else UndoManager()
        self._observers: list[Callable[[str, Any], None]] = []

    def add_observer(self, callback: Callable[[str, Any], None]) -> None:
        """Register a callback for model change events."""
        if callback not in self._observers:
            self._observers.append(callback)

    def remove_observer(self, callback: Callable[[str, Any], None]) -> None:
        """Unregister a previously registered callback."""
        if callback in self._observers:
            self._observers.remove(callback)

    def _notify(self, event: str, data: Any) -> None:
        """Notify all observers of a model change."""
        for observer in self._observers:
            try:
                observer(event, data)
            except (TypeError, AttributeError, RuntimeError) as e:
                logger.error("Error notifying observer: %s", e)

    @property
    def value(self) -> int:
        return self.model.get()

    # --- Transactions ---

    def execute(self, command: Command) -> Command:
        """Add a command to the history and apply it."""
        self.undo_manager.add_and_apply(command)
        self._notify("command_applied", command)
        return command

    def add(self, delta: int) -> Command:
        return self.execute(AddCommand(self.model, delta))

    def and_mask(self, mask: int) -> Command:
        return self.execute(AndMaskCommand(self.model, mask))

    def or_mask(self, mask: int) -> Command:
        return self.execute(OrMaskCommand(self.model, mask))

    def undo(self) -> bool:
        """Undo the most recent command. Returns False if there was none."""
        command = self.undo_manager.peek_undo()
        if not self.undo_manager.undo_current():
            return False
        self._notify("command_undone", command)
        return True

    def redo(self) -> bool:
        """Redo the next undone command. Returns False if there was none."""
        command = self.undo_manager.peek_redo()
        if not self.undo_manager.apply_current():
            return False
        self._notify("command_redone", command)
        return True

    def clear_history(self) -> None:
        """Drop every transaction without touching the value."""
        self.undo_manager.clear()
        self._notify("history_cleared", None)

    def reset(self) -> None:
        """Drop every transaction and set the value back to zero."""
        self.undo_manager.clear()
        self.model.set(0)
        self._notify("value_reset", 0)

    # --- Queries ---

    def can_undo(self) -> bool:
        return self.undo_manager.can_undo()

    def can_redo(self) -> bool:
        return self.undo_manager.can_redo()

    def get_undo_description(self) -> Optional[str]:
        return self.undo_manager.get_undo_description()

    def get_redo_description(self) -> Optional[str]:
        return self.undo_manager.get_redo_description()

    def summary(self) -> str:
        """History dump followed by the current value."""
        return self.undo_manager.summary() + f"--Value: {self.value}\n"

    def snapshot(self) -> dict:
        """Return the current value and history counters as a plain dict."""
        manager = self.undo_manager
        data = self.model.to_dict()
        data.update(
            {
                "size": manager.get_size(),
                "cursor": manager.get_cursor(),
                "undo_count": manager.get_undo_count(),
                "redo_count": manager.get_redo_count(),
                "applied": [command.describe() for command in manager.get_applied()],
                "redoable": [command.describe() for command in manager.get_redoable()],
            }
        )
        return data
