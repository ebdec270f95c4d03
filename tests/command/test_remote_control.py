"""Tests for the command-driven remote control."""

import pytest

from lld_app.command.devices import Fan, Light
from lld_app.command.remote_control import FanCommand, LightCommand, RemoteController
from lld_app.errors import CommandNotAssignedError, InvalidAmountError, InvalidRequestError


@pytest.fixture
def light():
    return Light()


@pytest.fixture
def fan():
    return Fan()


@pytest.fixture
def remote(light, fan):
    controller = RemoteController(num_buttons=4)
    controller.set_command(0, LightCommand(light))
    controller.set_command(1, FanCommand(fan))
    return controller


class TestButtonToggle:
    """First press executes, second press undoes."""

    def test_toggle_light(self, remote, light):
        assert remote.press_button(0) == "Living Room light is ON"
        assert light.is_on is True
        assert remote.is_pressed(0) is True

        assert remote.press_button(0) == "Living Room light is OFF"
        assert light.is_on is False
        assert remote.is_pressed(0) is False

    def test_buttons_are_independent(self, remote, light, fan):
        remote.press_button(0)
        remote.press_button(1)
        assert light.is_on and fan.is_on

        remote.press_button(1)
        assert light.is_on is True
        assert fan.is_on is False

    def test_rebinding_resets_toggle(self, remote):
        remote.press_button(0)
        remote.set_command(0, FanCommand(Fan("Kitchen")))
        assert remote.press_button(0) == "Kitchen fan is ON"


class TestUndo:
    """undo_last reverts the most recent action."""

    def test_undo_execute(self, remote, fan):
        remote.press_button(1)
        assert remote.undo_last() == "Bedroom fan is OFF"
        assert fan.is_on is False
        assert remote.is_pressed(1) is False

    def test_undo_undo(self, remote, light):
        remote.press_button(0)
        remote.press_button(0)
        assert remote.undo_last() == "Living Room light is ON"
        assert light.is_on is True
        assert remote.is_pressed(0) is True

    def test_undo_walks_history_backwards(self, remote, light, fan):
        remote.press_button(0)
        remote.press_button(1)

        remote.undo_last()
        assert fan.is_on is False
        assert light.is_on is True

        remote.undo_last()
        assert light.is_on is False

    def test_undo_after_rebinding_reverts_original_command(self, remote, light):
        kitchen_fan = Fan("Kitchen")
        remote.press_button(0)
        remote.set_command(0, FanCommand(kitchen_fan))

        assert remote.undo_last() == "Living Room light is OFF"
        assert light.is_on is False
        assert kitchen_fan.is_on is False
        assert remote.is_pressed(0) is False
        assert remote.press_button(0) == "Kitchen fan is ON"

    def test_nothing_to_undo(self, remote):
        with pytest.raises(InvalidRequestError, match="Nothing to undo"):
            remote.undo_last()


class TestInvalidButtons:
    """Bad slots and empty buttons are rejected."""

    def test_unassigned_button(self, remote):
        with pytest.raises(CommandNotAssignedError) as exc_info:
            remote.press_button(2)
        assert exc_info.value.slot == 2

    @pytest.mark.parametrize("slot", [-1, 4, 10])
    def test_out_of_range(self, remote, slot):
        with pytest.raises(InvalidAmountError):
            remote.press_button(slot)

    def test_set_command_out_of_range(self, remote, light):
        with pytest.raises(InvalidAmountError):
            remote.set_command(7, LightCommand(light))

    def test_needs_buttons(self):
        with pytest.raises(InvalidAmountError):
            RemoteController(num_buttons=0)
