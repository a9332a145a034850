"""Lenient parsing of answers typed into prompts."""

from __future__ import annotations

from decimal import Decimal

from pizzeria.errors import SelectionError, ValidationError
from pizzeria.models import PizzaSize
from pizzeria.pricing import non_negative_money

_SIZE_ALIASES: dict[str, PizzaSize] = {
    "1": PizzaSize.SMALL,
    "s": PizzaSize.SMALL,
    "small": PizzaSize.SMALL,
    "2": PizzaSize.MEDIUM,
    "m": PizzaSize.MEDIUM,
    "medium": PizzaSize.MEDIUM,
    "3": PizzaSize.LARGE,
    "l": PizzaSize.LARGE,
    "large": PizzaSize.LARGE,
}

_YES = {"y", "yes", "1", "true", "д", "да"}


def parse_name(text: str, label: str = "Name") -> str:
    normalized = (text or "").strip()
    if not normalized:
        raise ValidationError(f"{label} must not be empty")
    return normalized


def parse_price(text: str, label: str = "Price") -> Decimal:
    """Parse a non-negative amount; a comma is accepted as decimal separator."""
    raw = (text or "").strip().replace(",", ".")
    if not raw:
        raise ValidationError(f"{label} must not be empty")
    return non_negative_money(raw, label)


def parse_position(text: str, count: int, label: str = "Entry") -> int:
    """Turn a 1-based position typed by the user into a 0-based index."""
    raw = (text or "").strip()
    try:
        number = int(raw)
    except ValueError:
        raise ValidationError(f"{label} number must be a whole number, got {raw!r}") from None
    if not (1 <= number <= count):
        raise SelectionError(f"{label} #{number} does not exist")
    return number - 1


def parse_size(text: str) -> PizzaSize:
    """Resolve a size answer; anything unrecognised means Small."""
    return _SIZE_ALIASES.get((text or "").strip().lower(), PizzaSize.SMALL)


def parse_yes_no(text: str) -> bool:
    return (text or "").strip().lower() in _YES
