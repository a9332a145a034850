"""Step-by-step composition of one customer order."""

from __future__ import annotations

from enum import Enum

from pizzeria.errors import PizzeriaError, PreconditionError
from pizzeria.models import Crust, Ingredient, Order, Pizza, PizzaSize
from pizzeria.parsing import parse_name, parse_position, parse_size
from pizzeria.rendering import format_catalog_line, format_money
from pizzeria.store import CatalogStore


class OrderStep(str, Enum):
    CUSTOMER = "customer"
    KIND = "kind"
    SIZE = "size"
    CRUST = "crust"
    RECIPE = "recipe"
    INGREDIENTS = "ingredients"
    DONE = "done"


class PizzaKind(str, Enum):
    RECIPE = "recipe"
    CUSTOM = "custom"


_PROMPTS: dict[OrderStep, str] = {
    OrderStep.CUSTOMER: "Customer name",
    OrderStep.KIND: "1 menu pizza, 2 custom pizza, 0 finish",
    OrderStep.SIZE: "Size: 1 Small, 2 Medium, 3 Large",
    OrderStep.CRUST: "Crust number",
    OrderStep.RECIPE: "Pizza number",
    OrderStep.INGREDIENTS: "Ingredient number (0 to stop)",
    OrderStep.DONE: "",
}


class OrderBuilder:
    """
    Drive order composition one typed answer at a time.

    The builder reads the catalog but never writes to the store; the finished
    order is available as `order` once `step` is DONE.
    """

    def __init__(self, store: CatalogStore) -> None:
        if not store.crusts:
            raise PreconditionError("Create at least one crust before taking an order")
        self.store = store
        self.step = OrderStep.CUSTOMER
        self.order: Order | None = None
        self.message = ""
        self._kind: PizzaKind | None = None
        self._size: PizzaSize = PizzaSize.SMALL
        self._crust: Crust | None = None
        self._ingredients: list[Ingredient] = []

    @property
    def done(self) -> bool:
        return self.step is OrderStep.DONE

    @property
    def prompt(self) -> str:
        return _PROMPTS[self.step]

    def options(self) -> list[str]:
        """Lines describing the choices available at the current step."""
        if self.step is OrderStep.CRUST:
            return [
                f"{idx + 1}. {crust.name} (+{format_money(crust.price)})"
                for idx, crust in enumerate(self.store.crusts)
            ]
        if self.step is OrderStep.RECIPE:
            return [format_catalog_line(idx, r.name, r.base_price) for idx, r in enumerate(self.store.recipes)]
        if self.step is OrderStep.INGREDIENTS:
            return [format_catalog_line(idx, i.name, i.price) for idx, i in enumerate(self.store.ingredients)]
        return []

    def selected_ingredients(self) -> list[Ingredient]:
        return list(self._ingredients)

    def submit(self, text: str) -> None:
        """Feed one answer; failures are reported through `message`."""
        if self.done:
            return
        handler = {
            OrderStep.CUSTOMER: self._on_customer,
            OrderStep.KIND: self._on_kind,
            OrderStep.SIZE: self._on_size,
            OrderStep.CRUST: self._on_crust,
            OrderStep.RECIPE: self._on_recipe,
            OrderStep.INGREDIENTS: self._on_ingredient,
        }[self.step]
        try:
            handler(text)
        except PizzeriaError as exc:
            self.message = exc.message
            if self.step in {OrderStep.CRUST, OrderStep.RECIPE}:
                self._reset_pizza()

    def _on_customer(self, text: str) -> None:
        self.order = self.store.start_order(parse_name(text, "Customer name"))
        self.message = f"{self.order.name} for {self.order.customer_name}"
        self.step = OrderStep.KIND

    def _on_kind(self, text: str) -> None:
        choice = text.strip()
        if choice == "0":
            self.order.complete()
            self.message = f"{self.order.name} completed: {format_money(self.order.price)}"
            self.step = OrderStep.DONE
            return
        if choice == "1":
            if not self.store.recipes:
                raise PreconditionError("The menu is empty, add a recipe first")
            self._kind = PizzaKind.RECIPE
        elif choice == "2":
            if not self.store.ingredients:
                raise PreconditionError("There are no ingredients yet")
            self._kind = PizzaKind.CUSTOM
        else:
            self.message = f"Unknown choice {choice!r}"
            return
        self.message = ""
        self.step = OrderStep.SIZE

    def _on_size(self, text: str) -> None:
        self._size = parse_size(text)
        self.message = f"Size {self._size.value}"
        self.step = OrderStep.CRUST

    def _on_crust(self, text: str) -> None:
        crusts = self.store.crusts
        self._crust = crusts[parse_position(text, len(crusts), "Crust")]
        self.message = f"Crust {self._crust.name}"
        if self._kind is PizzaKind.RECIPE:
            self.step = OrderStep.RECIPE
        else:
            self._ingredients = []
            self.step = OrderStep.INGREDIENTS

    def _on_recipe(self, text: str) -> None:
        recipes = self.store.recipes
        recipe = recipes[parse_position(text, len(recipes), "Pizza")]
        self._add_pizza(Pizza.from_recipe(recipe, self._size, self._crust))

    def _on_ingredient(self, text: str) -> None:
        if text.strip() == "0":
            if not self._ingredients:
                self.message = "No ingredients picked, pizza discarded"
                self._reset_pizza()
                return
            self._add_pizza(Pizza.custom(self._ingredients, self._size, self._crust))
            return
        ingredients = self.store.ingredients
        ingredient = ingredients[parse_position(text, len(ingredients), "Ingredient")]
        self._ingredients.append(ingredient)
        self.message = f"+ {ingredient.name}"

    def _add_pizza(self, pizza: Pizza) -> None:
        self.order.add_item(pizza)
        self.message = f"{pizza.name} added: {format_money(pizza.price)}"
        self._reset_pizza()

    def _reset_pizza(self) -> None:
        self._kind = None
        self._size = PizzaSize.SMALL
        self._crust = None
        self._ingredients = []
        self.step = OrderStep.KIND
