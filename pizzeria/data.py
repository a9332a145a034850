"""Editable demo catalog used by `pizzeria --demo`."""

from __future__ import annotations

from pizzeria.models import Crust, Ingredient, Recipe
from pizzeria.store import CatalogStore

DEMO_INGREDIENTS: list[tuple[str, str]] = [
    ("Mozzarella", "2.50"),
    ("Tomato Sauce", "1.00"),
    ("Pepperoni", "3.00"),
    ("Mushrooms", "1.50"),
    ("Onion", "0.80"),
    ("Basil", "0.50"),
]

# (name, price, is_classic); the classic crust goes first so the others are checked against it.
DEMO_CRUSTS: list[tuple[str, str, bool]] = [
    ("Classic", "1.50", True),
    ("Thin", "1.50", False),
    ("Cheese Stuffed", "1.80", False),
]

DEMO_RECIPES: list[tuple[str, str]] = [
    ("Margherita", "7.00"),
    ("Pepperoni", "8.50"),
    ("Four Cheese", "9.00"),
]


def seed_demo_catalog(store: CatalogStore) -> list[str]:
    """Fill a store with the demo catalog and return any rejection messages."""
    rejected: list[str] = []
    for name, price in DEMO_INGREDIENTS:
        store.add_ingredient(Ingredient(name, price))
    for name, price, is_classic in DEMO_CRUSTS:
        result = store.add_crust(Crust(name, price, is_classic=is_classic))
        if not result.ok:
            rejected.append(result.message)
    for name, price in DEMO_RECIPES:
        store.add_recipe(Recipe(name, price))
    return rejected
