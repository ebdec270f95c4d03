"""Decorator lesson: stacking power-ups on a game character."""

from .character import (
    Character,
    CharacterDecorator,
    GunPowerUp,
    HeightUp,
    Mario,
    StarPowerUp,
    strip_power_ups,
)

__all__ = [
    "Character",
    "Mario",
    "CharacterDecorator",
    "HeightUp",
    "GunPowerUp",
    "StarPowerUp",
    "strip_power_ups",
]
