"""
Pure Python data models for the TPS tester.

This package contains Qt-free data classes for the values that
transactions manipulate.
"""

from .number import MaskOp, NumberModel

__all__ = [
    "MaskOp",
    "NumberModel",
]
