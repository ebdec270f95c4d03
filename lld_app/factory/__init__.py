"""Factory lessons: simple factory, factory method and abstract factory."""

from .burger import (
    BasicBurger,
    BasicWheatBurger,
    Burger,
    BurgerFactory,
    BurgerFactoryMethod,
    KingBurgerFactory,
    PremiumBurger,
    PremiumWheatBurger,
    SinghBurgerFactory,
    StandardBurger,
    StandardWheatBurger,
)
from .meal import GarlicBread, KingMealFactory, Meal, MealFactory, SinghMealFactory

__all__ = [
    "Burger",
    "BasicBurger",
    "StandardBurger",
    "PremiumBurger",
    "BasicWheatBurger",
    "StandardWheatBurger",
    "PremiumWheatBurger",
    "BurgerFactory",
    "BurgerFactoryMethod",
    "SinghBurgerFactory",
    "KingBurgerFactory",
    "GarlicBread",
    "Meal",
    "MealFactory",
    "SinghMealFactory",
    "KingMealFactory",
]
