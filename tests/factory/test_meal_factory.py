"""Tests for the abstract meal factory."""

import pytest

from lld_app.errors import UnknownVariantError
from lld_app.factory.burger import PremiumBurger, StandardWheatBurger
from lld_app.factory.meal import (
    BasicWheatGarlicBread,
    CheeseGarlicBread,
    CheeseWheatGarlicBread,
    KingMealFactory,
    SinghMealFactory,
)


class TestMealFactories:
    """A meal factory never mixes families."""

    def test_singh_meal(self, menu_params):
        meal = SinghMealFactory(menu_params).create_meal("premium", "cheese")

        assert isinstance(meal.burger, PremiumBurger)
        assert isinstance(meal.garlic_bread, CheeseGarlicBread)
        assert meal.price == 200.0 + 110.0

    def test_king_meal(self, menu_params):
        meal = KingMealFactory(menu_params).create_meal("standard", "basic")

        assert isinstance(meal.burger, StandardWheatBurger)
        assert isinstance(meal.garlic_bread, BasicWheatGarlicBread)
        assert meal.prepare() == [
            "Preparing Standard Wheat Burger with bun, patty, cheese, and lettuce!",
            "Preparing Basic Wheat Garlic Bread with butter and garlic!",
        ]

    def test_king_cheese_bread(self):
        bread = KingMealFactory().create_garlic_bread("CHEESE")
        assert isinstance(bread, CheeseWheatGarlicBread)

    def test_unknown_bread(self):
        with pytest.raises(UnknownVariantError) as exc_info:
            SinghMealFactory().create_garlic_bread("stuffed")
        assert exc_info.value.kind == "garlic_bread"
        assert exc_info.value.context == {"factory": "SinghMealFactory"}
