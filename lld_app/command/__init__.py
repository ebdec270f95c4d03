"""Command lesson: a remote control with toggling buttons and undo."""

from .devices import Fan, Light
from .remote_control import Command, FanCommand, LightCommand, RemoteController

__all__ = [
    "Light",
    "Fan",
    "Command",
    "LightCommand",
    "FanCommand",
    "RemoteController",
]
