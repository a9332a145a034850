"""Rendering helpers for listing lines, badges and order summaries."""

from __future__ import annotations

import os
from decimal import ROUND_HALF_UP, Decimal

from rich.text import Text

from pizzeria.config import CURRENCY_SUFFIX, CURRENCY_SUFFIX_ENV
from pizzeria.models import Crust, Order, Pizza, PizzaSize


def currency_suffix() -> str:
    return os.environ.get(CURRENCY_SUFFIX_ENV, CURRENCY_SUFFIX)


_CENT = Decimal("0.01")


def format_money(amount: Decimal) -> str:
    """Two decimals, halves rounded up, followed by the currency suffix."""
    return f"{Decimal(amount).quantize(_CENT, rounding=ROUND_HALF_UP)}{currency_suffix()}"


def format_catalog_line(position: int, name: str, price: Decimal) -> str:
    """Render one listing row; position is 0-based and shown 1-based."""
    return f"{position + 1}. {name} - {format_money(price)}"


def badge_style(tag: str) -> str:
    """Return a consistent badge style for size and crust tags."""
    if tag == "L":
        return "bold #ffffff on #b23a48"
    if tag == "M":
        return "bold #ffffff on #2f6db5"
    if tag == "C":
        return "bold #1f1400 on #e0b13c"
    return "bold #0b1f0f on #5fbf72"


def format_size_badge(size: PizzaSize | None) -> Text:
    text = Text()
    if size is None:
        return text
    text.append(size.short, style=badge_style(size.short))
    return text


def format_crust_label(crust: Crust) -> Text:
    """Render a crust name with a badge when it is the classic crust."""
    text = Text()
    if crust.is_classic:
        text.append("C", style=badge_style("C"))
        text.append(" ")
    text.append(crust.name)
    return text


def describe_pizza(pizza: Pizza) -> str:
    desc = pizza.name
    ingredients = pizza.ingredients_label()
    if ingredients is not None:
        desc += f" (Ingredients: {ingredients})"
    tags = [pizza.crust.name] if pizza.size is None else [pizza.size.value, pizza.crust.name]
    return f"{desc} [{', '.join(tags)}] = {format_money(pizza.price)}"


def format_order_header(order: Order) -> str:
    return f"[ID:{order.id[:4]}] {order.customer_name} - Total: {format_money(order.price)}"


def format_order_date(order: Order) -> str:
    return f"Date: {order.created_at.astimezone().strftime('%Y-%m-%d %H:%M')}"


def format_order_details(order: Order) -> Text:
    """Render an order header, its date and one line per pizza."""
    text = Text()
    text.append(format_order_header(order), style="bold")
    text.append("\n")
    text.append(format_order_date(order), style="dim")
    for pizza in order.items:
        text.append("\n  - ")
        text.append_text(format_size_badge(pizza.size))
        if pizza.size is not None:
            text.append(" ")
        text.append(describe_pizza(pizza))
    return text
