from decimal import Decimal

import pytest

from pizzeria.errors import PreconditionError
from pizzeria.models import Crust, Ingredient, Order, Pizza, PizzaSize, Recipe
from pizzeria.store import CatalogStore


def _completed_order(customer: str, *bases: str) -> Order:
    order = Order(customer)
    for base in bases:
        order.add_item(Pizza.from_recipe(Recipe("R", base), PizzaSize.SMALL, Crust("Free", "0")))
    order.complete()
    return order


class TestClassicCrust:
    def test_new_classic_clears_previous_flags(self):
        store = CatalogStore()
        first = Crust("Classic", "10", is_classic=True)
        second = Crust("New Classic", "11", is_classic=True)
        store.add_crust(first)
        store.add_crust(Crust("Thin", "9"))
        store.add_crust(second)

        assert first.is_classic is False
        assert store.classic_crust() is second
        assert [c.is_classic for c in store.crusts].count(True) == 1

    def test_crust_above_ceiling_is_rejected(self):
        store = CatalogStore()
        store.add_crust(Crust("Classic", "10.0", is_classic=True))

        result = store.add_crust(Crust("Gold", "13.0"))

        assert not result.ok
        assert "ceiling" in result.message
        assert result.item is None
        assert len(store.crusts) == 1

    def test_crust_within_ceiling_is_accepted(self):
        store = CatalogStore()
        store.add_crust(Crust("Classic", "10.0", is_classic=True))

        assert store.add_crust(Crust("Thick", "11.5")).ok
        assert store.add_crust(Crust("Exactly", "12.0")).ok
        assert len(store.crusts) == 3

    def test_no_ceiling_without_classic(self):
        store = CatalogStore()
        assert store.price_ceiling() is None
        assert store.add_crust(Crust("Gold", "100")).ok

    def test_ceiling_is_not_applied_retroactively(self):
        store = CatalogStore()
        store.add_crust(Crust("Gold", "100"))
        store.add_crust(Crust("Classic", "10", is_classic=True))

        assert [c.name for c in store.crusts] == ["Gold", "Classic"]
        assert store.price_ceiling() == Decimal("12")


class TestRemoval:
    @pytest.mark.parametrize("position", [2, 5, -1])
    def test_out_of_range_is_a_silent_noop(self, position):
        store = CatalogStore()
        store.add_ingredient(Ingredient("Cheese", "1"))
        store.add_ingredient(Ingredient("Ham", "2"))

        result = store.remove_ingredient_at(position)

        assert not result.ok
        assert result.message == ""
        assert [i.name for i in store.ingredients] == ["Cheese", "Ham"]

    def test_silent_noop_applies_to_every_registry(self):
        store = CatalogStore()
        for remove in (store.remove_crust_at, store.remove_recipe_at, store.remove_order_at):
            assert not remove(0).ok

    def test_remove_returns_the_entry(self):
        store = CatalogStore()
        store.add_recipe(Recipe("Margherita", "7"))
        store.add_recipe(Recipe("Pepperoni", "8"))

        result = store.remove_recipe_at(0)

        assert result.ok
        assert result.item.name == "Margherita"
        assert [r.name for r in store.recipes] == ["Pepperoni"]

    def test_removed_catalog_entries_do_not_change_existing_pizzas(self):
        store = CatalogStore()
        store.add_crust(Crust("Classic", "1.5", is_classic=True))
        store.add_ingredient(Ingredient("Cheese", "2"))
        pizza = Pizza.custom(store.ingredients, PizzaSize.LARGE, store.crusts[0])
        before = pizza.price

        store.remove_ingredient_at(0)
        store.remove_crust_at(0)

        assert pizza.price == before == Decimal("4.3")
        assert pizza.ingredients_label() == "Cheese"


class TestOrders:
    def test_incomplete_order_is_rejected(self):
        store = CatalogStore()
        result = store.add_order(Order("Anna"))
        assert not result.ok
        assert store.orders == ()

    def test_orders_by_price_descending(self):
        store = CatalogStore()
        cheap = _completed_order("Bob", "5")
        big = _completed_order("Anna", "12.7", "9.0")
        mid = _completed_order("Carl", "10")
        for order in (cheap, big, mid):
            store.add_order(order)

        assert big.price == Decimal("21.7")
        assert store.orders_by_price() == [big, mid, cheap]
        assert store.orders == (cheap, big, mid)

    def test_find_orders_is_case_insensitive_substring(self):
        store = CatalogStore()
        for name in ("Anna Smith", "Joanna", "Bob"):
            store.add_order(_completed_order(name, "1"))

        assert [o.customer_name for o in store.find_orders("ANN")] == ["Anna Smith", "Joanna"]
        assert store.find_orders("zoe") == []

    def test_start_order_requires_a_crust(self):
        store = CatalogStore()
        with pytest.raises(PreconditionError):
            store.start_order("Anna")
        store.add_crust(Crust("Thin", "1"))
        assert store.start_order("Anna").customer_name == "Anna"

    def test_position_of_order(self):
        store = CatalogStore()
        first, second = _completed_order("A", "1"), _completed_order("B", "2")
        store.add_order(first)
        store.add_order(second)
        assert store.position_of_order(second) == 1
        assert store.position_of_order(_completed_order("C", "1")) is None


def test_registries_are_read_only_views():
    store = CatalogStore()
    store.add_ingredient(Ingredient("Cheese", "1"))
    view = store.ingredients
    assert isinstance(view, tuple)
    store.add_ingredient(Ingredient("Ham", "1"))
    assert len(view) == 1
    assert len(store.ingredients) == 2
