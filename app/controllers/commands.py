"""
Command Pattern Implementation for Undo/Redo.

Each command binds to a NumberModel and stores the minimal state needed to
apply and reverse one operation. Commands are executed through the
UndoManager so the history cursor stays consistent.
"""

from abc import ABC, abstractmethod
from typing import Optional

from models.number import MaskOp, NumberModel


class Command(ABC):
    """Base class for undoable commands."""

    def __init__(self, number: NumberModel):
        self._number = number

    @property
    def number(self) -> NumberModel:
        """The value holder this command targets."""
        return self._number

    @abstractmethod
    def apply(self) -> None:
        """Perform the operation on the bound number."""
        pass

    @abstractmethod
    def reverse(self) -> None:
        """Restore the value the number had before apply."""
        pass

    def describe(self) -> str:
        """Return a human-readable description of this command."""
        return self.__class__.__name__

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.describe()!r}>"


class AddCommand(Command):
    """Command to add a delta to the number."""

    def __init__(self, number: NumberModel, delta: int):
        super().__init__(number)
        self._delta = delta

    @property
    def delta(self) -> int:
        return self._delta

    def apply(self) -> None:
        self._number.set(self._number.get() + self._delta)

    def reverse(self) -> None:
        self._number.set(self._number.get() - self._delta)

    def describe(self) -> str:
        return f"Add {self._delta}"


class MaskCommand(Command):
    """
    Base for bitwise mask commands.

    Masking discards bits, so reverse restores a snapshot of the value taken
    before apply instead of inverting the mask. When no snapshot is given the
    number is read at construction time.

    Precondition for an explicit ``snapshot``: it must equal the number's
    value at the moment the command is first applied. A wrong snapshot is
    not detected and makes reverse restore the wrong value.
    """

    op: MaskOp
    label: str

    def __init__(self, number: NumberModel, mask: int, snapshot: Optional[int] = None):
        super().__init__(number)
        self._mask = mask
        self._snapshot = number.get() if snapshot is None else snapshot

    @property
    def mask(self) -> int:
        return self._mask

    @property
    def snapshot(self) -> int:
        """Value the number is restored to on reverse."""
        return self._snapshot

    def apply(self) -> None:
        self._number.apply_mask(self._mask, self.op)

    def reverse(self) -> None:
        self._number.set(self._snapshot)

    def describe(self) -> str:
        return f"{self.label} {self._mask}"


class AndMaskCommand(MaskCommand):
    """Command to AND the number with a mask."""

    op = MaskOp.AND
    label = "And Mask"


class OrMaskCommand(MaskCommand):
    """Command to OR the number with a mask."""

    op = MaskOp.OR
    label = "Or Mask"
