"""
Power-ups as decorators.

A decorator wraps a character, exposes the same interface and adds one
ability on top of whatever the wrapped character already has. Decorators
stack in any order.
"""

from abc import ABC, abstractmethod


class Character(ABC):
    """Anything that can report its abilities."""

    @abstractmethod
    def get_abilities(self) -> str:
        pass


class Mario(Character):
    def get_abilities(self) -> str:
        return "Mario"


class CharacterDecorator(Character):
    """Base for power-ups; holds the character being wrapped."""

    def __init__(self, character: Character) -> None:
        self.character = character

    def unwrap(self) -> Character:
        return self.character

    def get_abilities(self) -> str:
        return self.character.get_abilities()


class HeightUp(CharacterDecorator):
    def get_abilities(self) -> str:
        return f"{self.character.get_abilities()} with HeightUp"


class GunPowerUp(CharacterDecorator):
    def get_abilities(self) -> str:
        return f"{self.character.get_abilities()} with Gun"


class StarPowerUp(CharacterDecorator):
    def get_abilities(self) -> str:
        return f"{self.character.get_abilities()} with Star Power (Limited Time)"


def strip_power_ups(character: Character) -> Character:
    """Peel every decorator off and return the base character."""
    while isinstance(character, CharacterDecorator):
        character = character.unwrap()
    return character
