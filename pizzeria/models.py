"""Domain models for the pizzeria constructor."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Iterable
from uuid import uuid4

from pizzeria import config
from pizzeria.errors import OrderClosedError, ValidationError
from pizzeria.pricing import ZERO, as_money, ingredient_pizza_price, non_negative_money, recipe_pizza_price


def new_id() -> str:
    return uuid4().hex


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _required_name(name: str, label: str = "Name") -> str:
    normalized = (name or "").strip()
    if not normalized:
        raise ValidationError(f"{label} must not be empty")
    return normalized


class PizzaSize(str, Enum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"

    @property
    def short(self) -> str:
        return self.value[0]


@dataclass(eq=False)
class CatalogItem:
    """A named, priced building block of the catalog."""

    name: str
    unit_price: Decimal
    id: str = field(default_factory=new_id, kw_only=True)

    def __post_init__(self) -> None:
        self.name = _required_name(self.name)
        self.unit_price = non_negative_money(self.unit_price)

    @property
    def price(self) -> Decimal:
        return self.unit_price

    def set_price(self, value: Decimal | int | float | str) -> None:
        """Update the price; negative or non-numeric values are ignored."""
        try:
            amount = as_money(value)
        except ValidationError:
            return
        if amount < 0:
            return
        self.unit_price = amount

    def rename(self, name: str) -> None:
        """Update the name; blank names are ignored."""
        normalized = (name or "").strip()
        if normalized:
            self.name = normalized


@dataclass(eq=False)
class Ingredient(CatalogItem):
    """A topping priced per pizza."""


@dataclass(eq=False)
class Crust(CatalogItem):
    """A crust / dough type; at most one crust in a store is the classic one."""

    is_classic: bool = False


@dataclass(frozen=True)
class RecipeSnapshot:
    """By-value copy of a recipe taken when a pizza is built from it."""

    recipe_id: str
    name: str
    base_price: Decimal


@dataclass(frozen=True)
class Recipe:
    """A named template with a base price."""

    name: str
    base_price: Decimal
    id: str = field(default_factory=new_id, kw_only=True)

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", _required_name(self.name))
        object.__setattr__(self, "base_price", non_negative_money(self.base_price, "Base price"))

    def snapshot(self) -> RecipeSnapshot:
        return RecipeSnapshot(recipe_id=self.id, name=self.name, base_price=self.base_price)


@dataclass(frozen=True)
class IngredientSelection:
    """Ordered ingredient references of a custom pizza; repeats are allowed."""

    ingredients: tuple[Ingredient, ...]

    def names(self) -> list[str]:
        return [ingredient.name for ingredient in self.ingredients]


PricingSource = RecipeSnapshot | IngredientSelection


@dataclass(eq=False)
class Pizza:
    """
    A composite item: a crust plus either a recipe snapshot or an ingredient list.

    The crust and ingredients are shared references, so price edits on them show
    up here while removing them from a store does not affect this pizza.
    """

    name: str
    crust: Crust
    source: PricingSource
    size: PizzaSize | None = PizzaSize.SMALL
    scale_crust: bool | None = None
    id: str = field(default_factory=new_id, kw_only=True)

    @classmethod
    def from_recipe(
        cls,
        recipe: Recipe,
        size: PizzaSize | None,
        crust: Crust,
        scale_crust: bool | None = None,
    ) -> Pizza:
        if recipe is None or crust is None:
            raise ValidationError("A recipe pizza needs a recipe and a crust")
        return cls(
            name=recipe.name,
            crust=crust,
            source=recipe.snapshot(),
            size=size,
            scale_crust=scale_crust,
        )

    @classmethod
    def custom(
        cls,
        ingredients: Iterable[Ingredient],
        size: PizzaSize | None,
        crust: Crust,
        scale_crust: bool | None = None,
    ) -> Pizza:
        selected = tuple(ingredients)
        if not selected:
            raise ValidationError("A custom pizza needs at least one ingredient")
        if crust is None:
            raise ValidationError("A custom pizza needs a crust")
        return cls(
            name=config.CUSTOM_PIZZA_NAME,
            crust=crust,
            source=IngredientSelection(selected),
            size=size,
            scale_crust=scale_crust,
        )

    @property
    def is_custom(self) -> bool:
        return isinstance(self.source, IngredientSelection)

    @property
    def scales_crust(self) -> bool:
        """Per-pizza setting, falling back to config.SCALE_CRUST_BY_SIZE when unset."""
        if self.scale_crust is None:
            return config.SCALE_CRUST_BY_SIZE
        return self.scale_crust

    @property
    def price(self) -> Decimal:
        if isinstance(self.source, RecipeSnapshot):
            return recipe_pizza_price(self.source.base_price, self.size, self.crust.price, self.scales_crust)
        return ingredient_pizza_price(
            (ingredient.price for ingredient in self.source.ingredients),
            self.size,
            self.crust.price,
            self.scales_crust,
        )

    def ingredients_label(self) -> str | None:
        """Comma-joined ingredient names for custom pizzas, None for recipe pizzas."""
        if not isinstance(self.source, IngredientSelection):
            return None
        return ", ".join(self.source.names())


@dataclass(eq=False)
class Order:
    """Pizzas ordered by one customer; the total is always derived."""

    customer_name: str
    items: list[Pizza] = field(default_factory=list)
    is_completed: bool = False
    created_at: datetime = field(default_factory=_utc_now)
    id: str = field(default_factory=new_id, kw_only=True)

    def __post_init__(self) -> None:
        self.customer_name = _required_name(self.customer_name, "Customer name")

    @property
    def name(self) -> str:
        return f"Order #{self.id[:4]}"

    @property
    def price(self) -> Decimal:
        return sum((item.price for item in self.items), ZERO)

    def add_item(self, item: Pizza) -> None:
        if self.is_completed:
            raise OrderClosedError(f"{self.name} is already completed")
        self.items.append(item)

    def complete(self) -> None:
        self.is_completed = True
