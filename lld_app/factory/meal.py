"""Abstract factory: a whole meal from one restaurant family."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..config.defaults import MenuParams
from ..errors import UnknownVariantError
from .burger import Burger, KingBurgerFactory, MenuItem, SinghBurgerFactory

GARLIC_BREAD_KINDS = ("basic", "cheese")


class GarlicBread(MenuItem):
    """Marker base for garlic breads."""


class BasicGarlicBread(GarlicBread):
    menu_key = "basic_garlic_bread"
    display_name = "Basic Garlic Bread"

    def prepare(self) -> str:
        return "Preparing Basic Garlic Bread with butter and garlic!"


class CheeseGarlicBread(GarlicBread):
    menu_key = "cheese_garlic_bread"
    display_name = "Cheese Garlic Bread"

    def prepare(self) -> str:
        return "Preparing Cheese Garlic Bread with extra cheese and butter!"


class BasicWheatGarlicBread(GarlicBread):
    menu_key = "basic_wheat_garlic_bread"
    display_name = "Basic Wheat Garlic Bread"

    def prepare(self) -> str:
        return "Preparing Basic Wheat Garlic Bread with butter and garlic!"


class CheeseWheatGarlicBread(GarlicBread):
    menu_key = "cheese_wheat_garlic_bread"
    display_name = "Cheese Wheat Garlic Bread"

    def prepare(self) -> str:
        return "Preparing Cheese Wheat Garlic Bread with extra cheese and butter!"


@dataclass
class Meal:
    """A burger and a garlic bread from the same family."""
    burger: Burger
    garlic_bread: GarlicBread

    @property
    def price(self) -> float:
        return self.burger.price + self.garlic_bread.price

    def prepare(self) -> list[str]:
        return [self.burger.prepare(), self.garlic_bread.prepare()]


class MealFactory(ABC):
    """Creates every product of one restaurant family."""

    def __init__(self, menu: Optional[MenuParams] = None) -> None:
        self.menu = menu or MenuParams()

    @abstractmethod
    def create_burger(self, kind: str) -> Burger:
        pass

    @abstractmethod
    def create_garlic_bread(self, kind: str) -> GarlicBread:
        pass

    def create_meal(self, burger_kind: str, bread_kind: str) -> Meal:
        return Meal(
            burger=self.create_burger(burger_kind),
            garlic_bread=self.create_garlic_bread(bread_kind),
        )

    def _unknown_bread(self, kind: str) -> UnknownVariantError:
        return UnknownVariantError(
            f"Unknown garlic bread type: {kind}",
            kind="garlic_bread",
            requested=kind,
            available=list(GARLIC_BREAD_KINDS),
            context={"factory": type(self).__name__}
        )


class SinghMealFactory(MealFactory):
    def create_burger(self, kind: str) -> Burger:
        return SinghBurgerFactory(self.menu).create_burger(kind)

    def create_garlic_bread(self, kind: str) -> GarlicBread:
        kind = kind.lower()
        if kind == "basic":
            return BasicGarlicBread(self.menu)
        if kind == "cheese":
            return CheeseGarlicBread(self.menu)
        raise self._unknown_bread(kind)


class KingMealFactory(MealFactory):
    def create_burger(self, kind: str) -> Burger:
        return KingBurgerFactory(self.menu).create_burger(kind)

    def create_garlic_bread(self, kind: str) -> GarlicBread:
        kind = kind.lower()
        if kind == "basic":
            return BasicWheatGarlicBread(self.menu)
        if kind == "cheese":
            return CheeseWheatGarlicBread(self.menu)
        raise self._unknown_bread(kind)
