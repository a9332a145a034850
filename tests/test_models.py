import dataclasses
from decimal import Decimal

import pytest

from pizzeria.errors import OrderClosedError, ValidationError
from pizzeria.models import Crust, Ingredient, Order, Pizza, PizzaSize, Recipe


class TestCatalogItem:
    def test_create_coerces_price(self):
        cheese = Ingredient("  Cheese ", "2.5")
        assert cheese.name == "Cheese"
        assert cheese.price == Decimal("2.5")

    @pytest.mark.parametrize("name,price", [("", "1"), ("   ", "1"), ("Cheese", "-0.01"), ("Cheese", "abc")])
    def test_create_rejects_invalid_input(self, name, price):
        with pytest.raises(ValidationError):
            Ingredient(name, price)

    def test_negative_price_update_is_ignored(self):
        cheese = Ingredient("Cheese", "2.5")
        cheese.set_price(-1)
        assert cheese.price == Decimal("2.5")

    @pytest.mark.parametrize("value", [float("nan"), "abc", None, "-3"])
    def test_unusable_price_update_is_ignored(self, value):
        cheese = Ingredient("Cheese", "2.5")
        cheese.set_price(value)
        assert cheese.price == Decimal("2.5")

    def test_price_update(self):
        cheese = Ingredient("Cheese", "2.5")
        cheese.set_price("3.75")
        assert cheese.price == Decimal("3.75")
        cheese.set_price(0)
        assert cheese.price == Decimal("0")

    def test_blank_rename_is_ignored(self):
        crust = Crust("Thin", "1")
        crust.rename("  ")
        assert crust.name == "Thin"
        crust.rename("Extra Thin")
        assert crust.name == "Extra Thin"

    def test_ids_are_unique(self):
        ids = {Ingredient("Cheese", "1").id for _ in range(50)}
        assert len(ids) == 50

    def test_crust_classic_flag_defaults_off(self):
        assert Crust("Thin", "1").is_classic is False
        assert Crust("Classic", "1", True).is_classic is True


class TestRecipe:
    def test_is_immutable(self):
        recipe = Recipe("Margherita", "7")
        with pytest.raises(dataclasses.FrozenInstanceError):
            recipe.base_price = Decimal("1")

    def test_rejects_negative_base_price(self):
        with pytest.raises(ValidationError):
            Recipe("Margherita", "-7")

    def test_snapshot_copies_values(self):
        recipe = Recipe("Margherita", "7")
        snap = recipe.snapshot()
        assert (snap.recipe_id, snap.name, snap.base_price) == (recipe.id, "Margherita", Decimal("7"))


class TestPizza:
    def test_custom_pizza_requires_an_ingredient(self):
        with pytest.raises(ValidationError):
            Pizza.custom([], PizzaSize.SMALL, Crust("Thin", "1"))

    def test_ingredients_label(self):
        pizza = Pizza.custom([Ingredient("Cheese", "1"), Ingredient("Ham", "2")], PizzaSize.SMALL, Crust("Thin", "1"))
        assert pizza.name == "Custom Pizza"
        assert pizza.is_custom
        assert pizza.ingredients_label() == "Cheese, Ham"

    def test_recipe_pizza_has_no_ingredients_label(self):
        pizza = Pizza.from_recipe(Recipe("Margherita", "7"), PizzaSize.SMALL, Crust("Thin", "1"))
        assert pizza.name == "Margherita"
        assert not pizza.is_custom
        assert pizza.ingredients_label() is None

    def test_price_follows_catalog_price_edits(self):
        cheese = Ingredient("Cheese", "2")
        crust = Crust("Thin", "1")
        pizza = Pizza.custom([cheese], PizzaSize.MEDIUM, crust)
        assert pizza.price == Decimal("3.4")

        cheese.set_price("3")
        crust.set_price("2")
        assert pizza.price == Decimal("5.6")

    def test_price_ignores_later_recipe_changes(self):
        recipe = Recipe("Margherita", "7")
        pizza = Pizza.from_recipe(recipe, PizzaSize.SMALL, Crust("Thin", "1"))
        object.__setattr__(recipe, "base_price", Decimal("100"))
        assert pizza.price == Decimal("8")


class TestOrder:
    def _pizza(self, base: str) -> Pizza:
        return Pizza.from_recipe(Recipe("R", base), PizzaSize.SMALL, Crust("Free", "0"))

    def test_price_is_sum_of_items(self):
        order = Order("Anna")
        assert order.price == Decimal("0")
        order.add_item(self._pizza("12.7"))
        order.add_item(self._pizza("9.0"))
        assert order.price == Decimal("21.7")

    def test_completed_order_rejects_items(self):
        order = Order("Anna")
        order.complete()
        assert order.is_completed
        with pytest.raises(OrderClosedError):
            order.add_item(self._pizza("1"))
        assert order.items == []

    def test_name_and_timestamp(self):
        order = Order("Anna")
        assert order.name == f"Order #{order.id[:4]}"
        assert order.created_at.tzinfo is not None

    def test_blank_customer_is_rejected(self):
        with pytest.raises(ValidationError):
            Order("  ")
