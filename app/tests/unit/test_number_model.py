"""Tests for the NumberModel value holder."""

import pytest
from models.number import MaskOp, NumberModel


class TestNumberModel:
    def test_defaults_to_zero(self):
        assert NumberModel().get() == 0

    def test_set_overwrites(self):
        number = NumberModel(3)
        number.set(-8)
        assert number.get() == -8
        assert number.value == -8

    @pytest.mark.parametrize(
        "start, mask, op, expected",
        [
            (12, 4, MaskOp.AND, 4),
            (12, 3, MaskOp.AND, 0),
            (12, 3, MaskOp.OR, 15),
            (0, 0b1010, MaskOp.OR, 10),
        ],
    )
    def test_apply_mask(self, start, mask, op, expected):
        number = NumberModel(start)
        number.apply_mask(mask, op)
        assert number.get() == expected

    def test_and_mask_is_lossy(self):
        """Two different values can mask to the same result."""
        a, b = NumberModel(12), NumberModel(5)
        a.apply_mask(4, MaskOp.AND)
        b.apply_mask(4, MaskOp.AND)
        assert a.get() == b.get() == 4

    def test_to_dict(self):
        assert NumberModel(7).to_dict() == {"value": 7}


class TestMaskOp:
    def test_symbols(self):
        assert MaskOp.AND.symbol == "&"
        assert MaskOp.OR.symbol == "|"

    def test_combine(self):
        assert MaskOp.AND.combine(6, 3) == 2
        assert MaskOp.OR.combine(6, 3) == 7
