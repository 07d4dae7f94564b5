"""Tests for the transaction commands."""

import pytest
from controllers.commands import AddCommand, AndMaskCommand, Command, MaskCommand, OrMaskCommand
from models.number import MaskOp, NumberModel


class TestCommandBase:
    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            Command(NumberModel())

    def test_str_uses_description(self):
        cmd = AddCommand(NumberModel(), 3)
        assert str(cmd) == "Add 3"
        assert "Add 3" in repr(cmd)


class TestAddCommand:
    def test_apply_and_reverse(self):
        number = NumberModel(1)
        cmd = AddCommand(number, 5)

        cmd.apply()
        assert number.get() == 6

        cmd.reverse()
        assert number.get() == 1

    def test_negative_delta(self):
        number = NumberModel()
        cmd = AddCommand(number, -4)
        cmd.apply()
        assert number.get() == -4

    def test_reverse_is_relative(self):
        """Reverse subtracts the delta from whatever the value is now."""
        number = NumberModel()
        cmd = AddCommand(number, 5)
        cmd.apply()
        number.set(100)
        cmd.reverse()
        assert number.get() == 95

    def test_description_and_parameters(self):
        number = NumberModel()
        cmd = AddCommand(number, 12)
        assert cmd.describe() == "Add 12"
        assert cmd.delta == 12
        assert cmd.number is number

    def test_parameters_are_read_only(self):
        cmd = AddCommand(NumberModel(), 1)
        with pytest.raises(AttributeError):
            cmd.delta = 2


class TestAndMaskCommand:
    def test_snapshot_captured_at_construction(self):
        number = NumberModel(12)
        cmd = AndMaskCommand(number, 4)
        assert cmd.snapshot == 12

    def test_apply_and_reverse_restore_snapshot(self):
        number = NumberModel(12)
        cmd = AndMaskCommand(number, 4)

        cmd.apply()
        assert number.get() == 4

        cmd.reverse()
        assert number.get() == 12

    def test_explicit_snapshot(self):
        number = NumberModel(12)
        cmd = AndMaskCommand(number, 4, snapshot=12)
        cmd.apply()
        cmd.reverse()
        assert number.get() == 12

    def test_wrong_snapshot_is_not_detected(self):
        """A wrong explicit snapshot silently restores the wrong value."""
        number = NumberModel(12)
        cmd = AndMaskCommand(number, 4, snapshot=99)
        cmd.apply()
        cmd.reverse()
        assert number.get() == 99

    def test_reapply_after_reverse(self):
        number = NumberModel(12)
        cmd = AndMaskCommand(number, 4)
        cmd.apply()
        cmd.reverse()
        cmd.apply()
        assert number.get() == 4

    def test_description(self):
        cmd = AndMaskCommand(NumberModel(), 4)
        assert cmd.describe() == "And Mask 4"
        assert cmd.mask == 4
        assert cmd.op is MaskOp.AND


class TestOrMaskCommand:
    def test_apply_and_reverse(self):
        number = NumberModel(12)
        cmd = OrMaskCommand(number, 3)

        cmd.apply()
        assert number.get() == 15

        cmd.reverse()
        assert number.get() == 12

    def test_description(self):
        cmd = OrMaskCommand(NumberModel(), 3)
        assert cmd.describe() == "Or Mask 3"
        assert cmd.op is MaskOp.OR

    def test_is_mask_command(self):
        assert isinstance(OrMaskCommand(NumberModel(), 1), MaskCommand)
