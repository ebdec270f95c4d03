"""
Burger factories.

Three variations on the same menu: a simple factory that picks a class by
name, and a factory method where each restaurant chain subclasses the
factory to decide which family of burgers it produces.
"""

from abc import ABC, abstractmethod
from typing import Optional

import structlog

from ..config.defaults import MenuParams
from ..errors import UnknownVariantError

logger = structlog.get_logger(__name__)

BURGER_KINDS = ("basic", "standard", "premium")


class MenuItem(ABC):
    """Anything the kitchen can hand over the counter."""

    menu_key: str = ""
    display_name: str = ""

    def __init__(self, menu: Optional[MenuParams] = None) -> None:
        menu = menu or MenuParams()
        self.price = menu.prices.get(self.menu_key, 0.0)
        self.currency = menu.currency

    @property
    def name(self) -> str:
        return self.display_name

    @abstractmethod
    def prepare(self) -> str:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(price={self.price})"


class Burger(MenuItem):
    """Marker base for burgers."""


class BasicBurger(Burger):
    menu_key = "basic_burger"
    display_name = "Basic Burger"

    def prepare(self) -> str:
        return "Preparing Basic Burger with bun, patty, and ketchup!"


class StandardBurger(Burger):
    menu_key = "standard_burger"
    display_name = "Standard Burger"

    def prepare(self) -> str:
        return "Preparing Standard Burger with bun, patty, cheese, and lettuce!"


class PremiumBurger(Burger):
    menu_key = "premium_burger"
    display_name = "Premium Burger"

    def prepare(self) -> str:
        return "Preparing Premium Burger with gourmet bun, premium patty, cheese, lettuce, and secret sauce!"


class BasicWheatBurger(Burger):
    menu_key = "basic_wheat_burger"
    display_name = "Basic Wheat Burger"

    def prepare(self) -> str:
        return "Preparing Basic Wheat Burger with bun, patty, and ketchup!"


class StandardWheatBurger(Burger):
    menu_key = "standard_wheat_burger"
    display_name = "Standard Wheat Burger"

    def prepare(self) -> str:
        return "Preparing Standard Wheat Burger with bun, patty, cheese, and lettuce!"


class PremiumWheatBurger(Burger):
    menu_key = "premium_wheat_burger"
    display_name = "Premium Wheat Burger"

    def prepare(self) -> str:
        return "Preparing Premium Wheat Burger with gourmet bun, premium patty, cheese, lettuce, and secret sauce!"


def _unknown_burger(kind: str, factory: str) -> UnknownVariantError:
    return UnknownVariantError(
        f"Unknown burger type: {kind}",
        kind="burger",
        requested=kind,
        available=list(BURGER_KINDS),
        context={"factory": factory}
    )


class BurgerFactory:
    """Simple factory: one place that maps a burger name to its class."""

    _registry: dict[str, type[Burger]] = {
        "basic": BasicBurger,
        "standard": StandardBurger,
        "premium": PremiumBurger,
    }

    def __init__(self, menu: Optional[MenuParams] = None) -> None:
        self.menu = menu or MenuParams()

    def create_burger(self, kind: str) -> Burger:
        burger_cls = self._registry.get(kind.lower())
        if burger_cls is None:
            raise _unknown_burger(kind, type(self).__name__)

        logger.debug("Burger created", factory=type(self).__name__, kind=kind)
        return burger_cls(self.menu)


class BurgerFactoryMethod(ABC):
    """Factory method: subclasses decide which burger family to build."""

    def __init__(self, menu: Optional[MenuParams] = None) -> None:
        self.menu = menu or MenuParams()

    @abstractmethod
    def create_burger(self, kind: str) -> Burger:
        pass

    def order_burger(self, kind: str) -> tuple[Burger, str]:
        """Create a burger and return it with its preparation line."""
        burger = self.create_burger(kind)
        return burger, burger.prepare()


class SinghBurgerFactory(BurgerFactoryMethod):
    """Singh's serves regular buns."""

    def create_burger(self, kind: str) -> Burger:
        kind = kind.lower()
        if kind == "basic":
            return BasicBurger(self.menu)
        if kind == "standard":
            return StandardBurger(self.menu)
        if kind == "premium":
            return PremiumBurger(self.menu)
        raise _unknown_burger(kind, type(self).__name__)


class KingBurgerFactory(BurgerFactoryMethod):
    """King's serves wheat buns."""

    def create_burger(self, kind: str) -> Burger:
        kind = kind.lower()
        if kind == "basic":
            return BasicWheatBurger(self.menu)
        if kind == "standard":
            return StandardWheatBurger(self.menu)
        if kind == "premium":
            return PremiumWheatBurger(self.menu)
        raise _unknown_burger(kind, type(self).__name__)
