"""
NumberModel - Pure Python data model for the value under transaction control.

This module contains no Qt dependencies. The model wraps a single mutable
integer that commands mutate forward and backward.
"""

import operator
from dataclasses import dataclass
from enum import Enum


class MaskOp(Enum):
    """Bitwise mask operations supported by NumberModel.apply_mask."""

    AND = ("&", operator.and_)
    OR = ("|", operator.or_)

    def __init__(self, symbol, func):
        self.symbol = symbol
        self._func = func

    def combine(self, value: int, mask: int) -> int:
        """Return ``value <op> mask``."""
        return self._func(value, mask)


@dataclass
class NumberModel:
    """
    Integer wrapper manipulated by transactions.

    Callers should route changes through commands so they can be undone;
    ``set`` exists for commands restoring a snapshot and for session resets.
    """

    value: int = 0

    def get(self) -> int:
        return self.value

    def set(self, value: int) -> None:
        self.value = value

    def apply_mask(self, mask: int, op: MaskOp) -> None:
        """
        Replace the value with ``value <op> mask``.

        Masking is lossy, so the result cannot be inverted from the mask
        alone. Reversal relies on a snapshot held by the owning command.
        """
        self.value = op.combine(self.value, mask)

    def to_dict(self) -> dict:
        return {"value": self.value}
