"""
UndoManager - Manages the transaction history and its undo/redo cursor.

Commands are kept in a single list in the order they were applied. A cursor
marks the most recently applied command; everything after it is the redo
tail. Adding a command while a redo tail exists discards that tail.
"""

import logging
from enum import Enum
from typing import Optional

from controllers.commands import Command

logger = logging.getLogger(__name__)


class HistoryState(Enum):
    """What the manager is doing at the moment."""

    IDLE = "idle"
    APPLYING = "applying"
    REVERSING = "reversing"


class UndoManager:
    """
    Manages command execution with undo/redo support.

    The cursor is the index of the most recently applied command (-1 when
    nothing is applied). Commands at ``[0, cursor]`` are applied; commands
    after the cursor can be redone until a new command is added.

    ``state`` is APPLYING only while a command's apply runs and REVERSING
    only while its reverse runs. Commands and observers can read it to tell
    a redo or undo pass from a fresh action. It is a marker, not a lock.
    """

    def __init__(self, max_depth: Optional[int] = None):
        """
        Initialize the undo manager.

        Args:
            max_depth: Maximum number of commands to keep in history, or None
                for no limit. The oldest commands are dropped first.
        """
        if max_depth is not None and max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")
        self.max_depth = max_depth
        self._commands: list[Command] = []
        self._cursor = -1
        self._state = HistoryState.IDLE

    # --- State flags ---

    @property
    def state(self) -> HistoryState:
        return self._state

    def is_performing_do(self) -> bool:
        """Return whether a command is being applied right now."""
        return self._state is HistoryState.APPLYING

    def is_performing_undo(self) -> bool:
        """Return whether a command is being reversed right now."""
        return self._state is HistoryState.REVERSING

    # --- Mutations ---

    def add_and_apply(self, command: Command) -> None:
        """
        Append a command to the history and apply it.

        Any redo tail is discarded first. If the command fails to apply it is
        removed again, the discarded tail is put back and the exception
        propagates.

        Args:
            command: The command to add and apply
        """
        tail = self._commands[self._cursor + 1 :]
        del self._commands[self._cursor + 1 :]

        self._commands.append(command)
        try:
            self.apply_current()
        except Exception:
            self._commands[self._cursor + 1 :] = tail
            raise

        if tail:
            logger.debug("Discarded %d redoable command(s)", len(tail))
        self._enforce_max_depth()
        logger.debug("Added %s (size=%d)", command.describe(), len(self._commands))

    def apply_current(self) -> bool:
        """
        Apply the command just after the cursor (redo).

        Returns:
            True if a command was applied, False if there was nothing to redo
        """
        if not self.can_redo():
            return False

        command = self._commands[self._cursor + 1]
        self._state = HistoryState.APPLYING
        try:
            command.apply()
        finally:
            self._state = HistoryState.IDLE
        self._cursor += 1

        logger.debug("Applied %s (cursor=%d)", command.describe(), self._cursor)
        return True

    def undo_current(self) -> bool:
        """
        Reverse the command at the cursor.

        Returns:
            True if a command was reversed, False if there was nothing to undo
        """
        if not self.can_undo():
            return False

        command = self._commands[self._cursor]
        self._state = HistoryState.REVERSING
        try:
            command.reverse()
        finally:
            self._state = HistoryState.IDLE
        self._cursor -= 1

        logger.debug("Reversed %s (cursor=%d)", command.describe(), self._cursor)
        return True

    def clear(self) -> None:
        """
        Forget every command and reset the cursor.

        The target values are left as they are; nothing is reversed.
        """
        self._commands.clear()
        self._cursor = -1
        logger.debug("History cleared")

    def _enforce_max_depth(self) -> None:
        if self.max_depth is None:
            return
        overflow = len(self._commands) - self.max_depth
        if overflow > 0:
            del self._commands[:overflow]
            self._cursor -= overflow

    # --- Queries ---

    def get_size(self) -> int:
        """Return the number of stored commands, done and undone."""
        return len(self._commands)

    def get_cursor(self) -> int:
        """Return the index of the most recently applied command, or -1."""
        return self._cursor

    def get_undo_count(self) -> int:
        """Return the number of commands that can be undone."""
        return self._cursor + 1

    def get_redo_count(self) -> int:
        """Return the number of commands that can be redone."""
        return len(self._commands) - self._cursor - 1

    def can_undo(self) -> bool:
        """Return whether there are commands to undo."""
        return self._cursor >= 0

    def can_redo(self) -> bool:
        """Return whether there are commands to redo."""
        return self._cursor < len(self._commands) - 1

    def peek_undo(self) -> Optional[Command]:
        """Return the command undo would reverse, or None."""
        if self.can_undo():
            return self._commands[self._cursor]
        return None

    def peek_redo(self) -> Optional[Command]:
        """Return the command redo would apply, or None."""
        if self.can_redo():
            return self._commands[self._cursor + 1]
        return None

    def get_undo_description(self) -> Optional[str]:
        """
        Get description of the command that would be undone.

        Returns:
            Description string or None if there is nothing to undo
        """
        command = self.peek_undo()
        return command.describe() if command is not None else None

    def get_redo_description(self) -> Optional[str]:
        """
        Get description of the command that would be redone.

        Returns:
            Description string or None if there is nothing to redo
        """
        command = self.peek_redo()
        return command.describe() if command is not None else None

    def get_applied(self) -> list[Command]:
        """Return the applied commands, oldest first."""
        return self._commands[: self._cursor + 1]

    def get_redoable(self) -> list[Command]:
        """Return the redo tail, next to be redone first."""
        return self._commands[self._cursor + 1 :]

    def summary(self) -> str:
        """Return a textual dump of the history and its applied commands."""
        lines = [
            f"--Number of Transactions: {len(self._commands)}",
            f"--Current Index on Stack: {self._cursor}",
            "--Current Transaction Stack:",
        ]
        lines.extend(f"----{command.describe()}" for command in self.get_applied())
        return "\n".join(lines) + "\n"
