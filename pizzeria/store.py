"""In-memory catalog and order registries."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Generic, TypeVar

from pizzeria.config import CLASSIC_PRICE_CEILING_RATIO
from pizzeria.errors import PreconditionError
from pizzeria.models import Crust, Ingredient, Order, Recipe

T = TypeVar("T")


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    """Outcome of a store mutation; an empty message means there is nothing to report."""

    ok: bool
    message: str = ""
    item: T | None = None


class CatalogStore:
    """
    Registries for ingredients, crusts, recipes and completed orders.

    Positions are 0-based and follow insertion order. Removal at a position
    that does not exist is a no-op that reports nothing.
    """

    def __init__(self) -> None:
        self._ingredients: list[Ingredient] = []
        self._crusts: list[Crust] = []
        self._recipes: list[Recipe] = []
        self._orders: list[Order] = []

    @property
    def ingredients(self) -> tuple[Ingredient, ...]:
        return tuple(self._ingredients)

    @property
    def crusts(self) -> tuple[Crust, ...]:
        return tuple(self._crusts)

    @property
    def recipes(self) -> tuple[Recipe, ...]:
        return tuple(self._recipes)

    @property
    def orders(self) -> tuple[Order, ...]:
        return tuple(self._orders)

    def add_ingredient(self, ingredient: Ingredient) -> StoreResult[Ingredient]:
        self._ingredients.append(ingredient)
        return StoreResult(ok=True, message=f"Ingredient {ingredient.name} saved", item=ingredient)

    def add_recipe(self, recipe: Recipe) -> StoreResult[Recipe]:
        self._recipes.append(recipe)
        return StoreResult(ok=True, message=f"Recipe {recipe.name} saved", item=recipe)

    def add_crust(self, crust: Crust) -> StoreResult[Crust]:
        """Append a crust after applying the classic-flag and price-ceiling rules."""
        if crust.is_classic:
            for existing in self._crusts:
                existing.is_classic = False
            self._crusts.append(crust)
            return StoreResult(ok=True, message=f"Classic crust {crust.name} saved", item=crust)

        ceiling = self.price_ceiling()
        if ceiling is not None and crust.price > ceiling:
            return StoreResult(
                ok=False,
                message=f"Crust {crust.name} ({crust.price:.2f}) exceeds the classic crust ceiling of {ceiling:.2f}",
            )
        self._crusts.append(crust)
        return StoreResult(ok=True, message=f"Crust {crust.name} saved", item=crust)

    def add_order(self, order: Order) -> StoreResult[Order]:
        if not order.is_completed:
            return StoreResult(ok=False, message=f"{order.name} is not completed yet")
        self._orders.append(order)
        return StoreResult(ok=True, message=f"{order.name} for {order.customer_name} placed", item=order)

    def remove_ingredient_at(self, position: int) -> StoreResult[Ingredient]:
        return _remove_at(self._ingredients, position)

    def remove_crust_at(self, position: int) -> StoreResult[Crust]:
        return _remove_at(self._crusts, position)

    def remove_recipe_at(self, position: int) -> StoreResult[Recipe]:
        return _remove_at(self._recipes, position)

    def remove_order_at(self, position: int) -> StoreResult[Order]:
        return _remove_at(self._orders, position)

    def classic_crust(self) -> Crust | None:
        for crust in self._crusts:
            if crust.is_classic:
                return crust
        return None

    def price_ceiling(self) -> Decimal | None:
        """Highest price a non-classic crust may have, or None without a classic crust."""
        classic = self.classic_crust()
        if classic is None:
            return None
        return classic.price * CLASSIC_PRICE_CEILING_RATIO

    def start_order(self, customer_name: str) -> Order:
        if not self._crusts:
            raise PreconditionError("Create at least one crust before taking an order")
        return Order(customer_name)

    def orders_by_price(self) -> list[Order]:
        """All orders, most expensive first."""
        return sorted(self._orders, key=lambda order: order.price, reverse=True)

    def find_orders(self, query: str) -> list[Order]:
        """Orders whose customer name contains query, case-insensitively."""
        q = query.lower()
        return [order for order in self._orders if q in order.customer_name.lower()]

    def position_of_order(self, order: Order) -> int | None:
        for idx, existing in enumerate(self._orders):
            if existing is order:
                return idx
        return None


def _remove_at(items: list[T], position: int) -> StoreResult[T]:
    if not (0 <= position < len(items)):
        return StoreResult(ok=False)
    removed = items.pop(position)
    name = getattr(removed, "name", "Entry")
    return StoreResult(ok=True, message=f"{name} removed", item=removed)
