"""Tests for the simple factory and factory method."""

import pytest

from lld_app.config.defaults import MenuParams
from lld_app.errors import UnknownVariantError
from lld_app.factory.burger import (
    BasicBurger,
    BasicWheatBurger,
    BurgerFactory,
    KingBurgerFactory,
    PremiumBurger,
    PremiumWheatBurger,
    SinghBurgerFactory,
    StandardBurger,
    StandardWheatBurger,
)


class TestSimpleFactory:
    """Test BurgerFactory."""

    @pytest.mark.parametrize("kind,expected", [
        ("basic", BasicBurger),
        ("standard", StandardBurger),
        ("premium", PremiumBurger),
        ("PREMIUM", PremiumBurger),
    ])
    def test_creates_requested_burger(self, kind, expected, menu_params):
        burger = BurgerFactory(menu_params).create_burger(kind)
        assert isinstance(burger, expected)

    def test_price_comes_from_menu(self):
        menu = MenuParams(prices={"standard_burger": 99.0})
        burger = BurgerFactory(menu).create_burger("standard")
        assert burger.price == 99.0
        assert burger.currency == "INR"

    def test_prepare(self, menu_params):
        burger = BurgerFactory(menu_params).create_burger("basic")
        assert burger.prepare() == "Preparing Basic Burger with bun, patty, and ketchup!"
        assert burger.name == "Basic Burger"

    def test_unknown_kind(self, menu_params):
        with pytest.raises(UnknownVariantError) as exc_info:
            BurgerFactory(menu_params).create_burger("vegan")
        assert exc_info.value.requested == "vegan"
        assert exc_info.value.available == ["basic", "standard", "premium"]


class TestFactoryMethod:
    """Each restaurant factory produces its own family."""

    @pytest.mark.parametrize("kind,expected", [
        ("basic", BasicBurger),
        ("standard", StandardBurger),
        ("premium", PremiumBurger),
    ])
    def test_singh_factory(self, kind, expected):
        assert isinstance(SinghBurgerFactory().create_burger(kind), expected)

    @pytest.mark.parametrize("kind,expected", [
        ("basic", BasicWheatBurger),
        ("standard", StandardWheatBurger),
        ("premium", PremiumWheatBurger),
    ])
    def test_king_factory(self, kind, expected):
        assert isinstance(KingBurgerFactory().create_burger(kind), expected)

    def test_order_burger_returns_preparation(self, menu_params):
        burger, line = KingBurgerFactory(menu_params).order_burger("basic")
        assert isinstance(burger, BasicWheatBurger)
        assert line == "Preparing Basic Wheat Burger with bun, patty, and ketchup!"
        assert burger.price == menu_params.prices["basic_wheat_burger"]

    def test_unknown_kind(self):
        with pytest.raises(UnknownVariantError) as exc_info:
            SinghBurgerFactory().create_burger("double")
        assert exc_info.value.context == {"factory": "SinghBurgerFactory"}
