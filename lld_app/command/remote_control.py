"""
Remote control driven by command objects.

Every button holds a command. Pressing a button toggles it: the first press
executes the command and the next press undoes it. The controller also keeps
a history so the most recent action can be reverted regardless of button.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..errors import CommandNotAssignedError, InvalidAmountError, InvalidRequestError
from ..logging.config import get_lesson_logger, log_command_event
from .devices import Fan, Light

logger = get_lesson_logger(__name__, lesson="command")

EXECUTE = "execute"
UNDO = "undo"


class Command(ABC):
    @abstractmethod
    def execute(self) -> str:
        pass

    @abstractmethod
    def undo(self) -> str:
        pass


class LightCommand(Command):
    def __init__(self, light: Light) -> None:
        self.light = light

    def execute(self) -> str:
        return self.light.on()

    def undo(self) -> str:
        return self.light.off()


class FanCommand(Command):
    def __init__(self, fan: Fan) -> None:
        self.fan = fan

    def execute(self) -> str:
        return self.fan.on()

    def undo(self) -> str:
        return self.fan.off()


class RemoteController:
    """Fixed number of buttons, each bound to at most one command."""

    def __init__(self, num_buttons: int = 4) -> None:
        if num_buttons <= 0:
            raise InvalidAmountError("Remote needs at least one button", amount=num_buttons)
        self.num_buttons = num_buttons
        self._buttons: list[Optional[Command]] = [None] * num_buttons
        self._pressed: list[bool] = [False] * num_buttons
        self._history: list[tuple[int, Command, str]] = []

    def _check_slot(self, slot: int) -> None:
        if not 0 <= slot < self.num_buttons:
            raise InvalidAmountError(
                f"Button {slot} does not exist",
                amount=slot,
                context={"num_buttons": self.num_buttons}
            )

    def set_command(self, slot: int, command: Command) -> None:
        self._check_slot(slot)
        self._buttons[slot] = command
        self._pressed[slot] = False

    def is_pressed(self, slot: int) -> bool:
        self._check_slot(slot)
        return self._pressed[slot]

    def press_button(self, slot: int) -> str:
        self._check_slot(slot)
        command = self._buttons[slot]
        if command is None:
            raise CommandNotAssignedError(f"No command assigned at button {slot}", slot=slot)

        if self._pressed[slot]:
            action = UNDO
            result = command.undo()
        else:
            action = EXECUTE
            result = command.execute()

        self._pressed[slot] = not self._pressed[slot]
        self._history.append((slot, command, action))
        log_command_event(logger, slot, type(command).__name__, action)
        return result

    def undo_last(self) -> str:
        """Revert the most recent button action."""
        if not self._history:
            raise InvalidRequestError("Nothing to undo")

        slot, command, action = self._history.pop()
        result = command.undo() if action == EXECUTE else command.execute()

        # The slot may have been rebound since; its toggle belongs to the new command
        if self._buttons[slot] is command:
            self._pressed[slot] = action != EXECUTE

        log_command_event(logger, slot, type(command).__name__, f"revert_{action}")
        return result
