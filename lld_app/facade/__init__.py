"""Facade lesson: one call to boot a multi-part computer."""

from .computer import ComputerFacade

__all__ = ["ComputerFacade"]
