"""Money coercion and the pizza price derivations."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Iterable

from pizzeria.config import DEFAULT_SIZE_MULTIPLIER, SIZE_MULTIPLIERS
from pizzeria.errors import ValidationError

if TYPE_CHECKING:
    from pizzeria.models import PizzaSize

ZERO = Decimal("0")


def as_money(value: Decimal | int | float | str) -> Decimal:
    """Coerce a numeric value to a finite Decimal amount."""
    if isinstance(value, bool):
        raise ValidationError(f"Not a price: {value!r}")
    if isinstance(value, Decimal):
        amount = value
    else:
        # floats go through str() so 1.4 stays 1.4 rather than its binary expansion
        raw = str(value).strip() if isinstance(value, (float, str)) else value
        try:
            amount = Decimal(raw)
        except (InvalidOperation, TypeError, ValueError):
            raise ValidationError(f"Not a price: {value!r}") from None
    if not amount.is_finite():
        raise ValidationError(f"Not a price: {value!r}")
    return amount


def non_negative_money(value: Decimal | int | float | str, label: str = "Price") -> Decimal:
    amount = as_money(value)
    if amount < 0:
        raise ValidationError(f"{label} must not be negative")
    return amount


def size_multiplier(size: PizzaSize | None) -> Decimal:
    """Return the price multiplier for a size; missing or unknown sizes count as Small."""
    if size is None:
        return DEFAULT_SIZE_MULTIPLIER
    return SIZE_MULTIPLIERS.get(getattr(size, "value", size), DEFAULT_SIZE_MULTIPLIER)


def scaled_price(base: Decimal, size: PizzaSize | None, crust_price: Decimal, scale_crust: bool = False) -> Decimal:
    multiplier = size_multiplier(size)
    if scale_crust:
        return (base + crust_price) * multiplier
    return base * multiplier + crust_price


def recipe_pizza_price(
    base_price: Decimal, size: PizzaSize | None, crust_price: Decimal, scale_crust: bool = False
) -> Decimal:
    """base_price * multiplier(size) + crust_price"""
    return scaled_price(base_price, size, crust_price, scale_crust)


def ingredient_pizza_price(
    ingredient_prices: Iterable[Decimal], size: PizzaSize | None, crust_price: Decimal, scale_crust: bool = False
) -> Decimal:
    """sum(ingredient_prices) * multiplier(size) + crust_price"""
    return scaled_price(sum(ingredient_prices, ZERO), size, crust_price, scale_crust)
