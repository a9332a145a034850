"""Main Textual app class."""

from __future__ import annotations

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Header, Static

from pizzeria.debug_log import log_debug
from pizzeria.errors import PizzeriaError
from pizzeria.form_modal import FormModal
from pizzeria.models import Crust, Ingredient, Order, Pizza, PizzaSize, Recipe
from pizzeria.order_modal import OrderModal
from pizzeria.ordering import OrderBuilder
from pizzeria.parsing import parse_name, parse_price, parse_yes_no
from pizzeria.pricing import ZERO
from pizzeria.rendering import (
    format_catalog_line,
    format_crust_label,
    format_money,
    format_order_details,
    format_order_header,
)
from pizzeria.store import CatalogStore, StoreResult

SECTIONS: dict[str, str] = {
    "1": "ingredients",
    "2": "crusts",
    "3": "recipes",
    "4": "orders",
}

SECTION_TITLES: dict[str, str] = {
    "ingredients": "Ingredients",
    "crusts": "Crusts",
    "recipes": "Menu (Recipes)",
    "orders": "Orders",
}


class PizzeriaApp(App):
    """A Textual app for managing a pizza catalog and composing customer orders."""

    TITLE = "Pizzeria"
    SUB_TITLE = "Catalog / Orders"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #catalog-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #detail-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #status-bar {
        border: heavy $secondary;
        padding: 0 1;
        margin-bottom: 1;
        height: 4;
    }

    #details {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #catalog-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    section = reactive("ingredients")
    input_state = reactive("normal")
    search_query = reactive("")

    BINDINGS = [
        ("up", "move_selection(-1)", "Previous"),
        ("down", "move_selection(1)", "Next"),
        ("enter", "finish_search", "Apply search"),
        ("backspace", "backspace_query", "Delete query char"),
        ("ctrl+c", "cancel_search", "Clear search"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, store: CatalogStore | None = None) -> None:
        super().__init__()
        self.store = store if store is not None else CatalogStore()
        self.selected_index: dict[str, int | None] = {name: None for name in SECTION_TITLES}
        self.system_status = ""
        log_debug("app_init")

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="catalog-pane"):
                yield Static(SECTION_TITLES[self.section], id="section-title", classes="pane-title")
                yield Static("(nothing yet)", id="catalog-list")
            with Vertical(id="detail-pane"):
                yield Static(id="status-bar")
                yield Static(id="details")

    def on_mount(self) -> None:
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        if isinstance(self.screen, ModalScreen):
            return

        log_debug(f"on_key key={event.key!r} char={event.character!r} state={self.input_state!r}")

        if not event.is_printable or not event.character or len(event.character) != 1:
            return

        if self.input_state == "active":
            self.search_query += event.character
            self.selected_index["orders"] = None
            self._refresh_all()
            event.stop()
            return

        key = event.character.lower()
        handlers = {
            "j": lambda: self.action_move_selection(1),
            "k": lambda: self.action_move_selection(-1),
            "a": self._open_add_form,
            "e": self._open_edit_form,
            "d": self._delete_selected,
            "o": self._open_order_modal,
            "s": self._start_search,
        }
        if key in SECTIONS:
            self.section = SECTIONS[key]
            self.system_status = ""
            self._refresh_all()
            event.stop()
            return
        handler = handlers.get(key)
        if handler is None:
            return
        handler()
        event.stop()

    def action_move_selection(self, delta: int) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        entries = self._entries()
        if not entries:
            return

        current = self.selected_index[self.section]
        if current is None:
            current = 0 if delta > 0 else len(entries) - 1
        else:
            current = (current + delta) % len(entries)
        self.selected_index[self.section] = current
        self._refresh_all()

    def action_finish_search(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if self.input_state != "active":
            return
        self.input_state = "normal"
        self.system_status = f"Showing orders matching {self.search_query!r}" if self.search_query else ""
        self._refresh_all()

    def action_backspace_query(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if self.input_state != "active" or not self.search_query:
            return
        self.search_query = self.search_query[:-1]
        self.selected_index["orders"] = None
        self._refresh_all()

    def action_cancel_search(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if self.input_state == "normal" and not self.search_query:
            return
        self.input_state = "normal"
        self.search_query = ""
        self.selected_index["orders"] = None
        self.system_status = ""
        self._refresh_all()

    def _start_search(self) -> None:
        self.section = "orders"
        self.input_state = "active"
        self.search_query = ""
        self.selected_index["orders"] = None
        self._refresh_all()

    def _entries(self) -> list[object]:
        if self.section == "ingredients":
            return list(self.store.ingredients)
        if self.section == "crusts":
            return list(self.store.crusts)
        if self.section == "recipes":
            return list(self.store.recipes)
        if self.search_query:
            return self.store.find_orders(self.search_query)
        return self.store.orders_by_price()

    def _selected_entry(self) -> object | None:
        idx = self.selected_index[self.section]
        entries = self._entries()
        if idx is None or not (0 <= idx < len(entries)):
            return None
        return entries[idx]

    def _report(self, message: str) -> None:
        self.system_status = message
        log_debug(f"status section={self.section!r} message={message!r}")
        self._refresh_all()

    def _report_result(self, result: StoreResult) -> None:
        if result.ok and result.item is not None:
            log_debug(f"store_{self.section}_ok id={getattr(result.item, 'id', '?')}")
        self._report(result.message)

    def _open_add_form(self) -> None:
        if self.section == "orders":
            self._open_order_modal()
            return
        if self.section == "crusts":
            form = FormModal("Add crust", ["Name", "Price", "Classic? (y/n)"])
        elif self.section == "recipes":
            form = FormModal("Add recipe", ["Pizza name", "Base price"])
        else:
            form = FormModal("Add ingredient", ["Name", "Price"])
        self.push_screen(form, self._on_add_form)

    def _on_add_form(self, values: list[str] | None) -> None:
        if values is None:
            return
        try:
            name = parse_name(values[0])
            price = parse_price(values[1])
            if self.section == "crusts":
                result = self.store.add_crust(Crust(name, price, is_classic=parse_yes_no(values[2])))
            elif self.section == "recipes":
                result = self.store.add_recipe(Recipe(name, price))
            else:
                result = self.store.add_ingredient(Ingredient(name, price))
        except PizzeriaError as exc:
            self._report(exc.message)
            return
        if result.ok:
            self.selected_index[self.section] = len(self._entries()) - 1
        self._report_result(result)

    def _open_edit_form(self) -> None:
        entry = self._selected_entry()
        if not isinstance(entry, (Ingredient, Crust)):
            self._report("Select an ingredient or crust to edit")
            return
        form = FormModal(f"Edit {entry.name}", ["Name", "Price"], initial=[entry.name, f"{entry.price}"])
        self.push_screen(form, lambda values: self._on_edit_form(entry, values))

    def _on_edit_form(self, entry: Ingredient | Crust, values: list[str] | None) -> None:
        if values is None:
            return
        try:
            price = parse_price(values[1])
        except PizzeriaError as exc:
            self._report(exc.message)
            return
        entry.rename(values[0])
        entry.set_price(price)
        log_debug(f"catalog_item_updated id={entry.id} price={entry.price}")
        self._report(f"{entry.name} updated: {format_money(entry.price)}")

    def _delete_selected(self) -> None:
        idx = self.selected_index[self.section]
        if idx is None:
            self._report("Nothing selected")
            return

        if self.section == "ingredients":
            result = self.store.remove_ingredient_at(idx)
        elif self.section == "crusts":
            result = self.store.remove_crust_at(idx)
        elif self.section == "recipes":
            result = self.store.remove_recipe_at(idx)
        else:
            entry = self._selected_entry()
            position = self.store.position_of_order(entry) if isinstance(entry, Order) else None
            result = self.store.remove_order_at(-1 if position is None else position)

        if result.ok:
            remaining = len(self._entries())
            self.selected_index[self.section] = None if remaining == 0 else min(idx, remaining - 1)
        self._report_result(result)

    def _open_order_modal(self) -> None:
        try:
            builder = OrderBuilder(self.store)
        except PizzeriaError as exc:
            self._report(exc.message)
            return
        self.push_screen(OrderModal(builder), self._on_order_finished)

    def _on_order_finished(self, order: Order | None) -> None:
        if order is None:
            self._report("Order abandoned")
            return
        result = self.store.add_order(order)
        if result.ok:
            self.section = "orders"
            self.search_query = ""
            self.selected_index["orders"] = next(
                (idx for idx, entry in enumerate(self._entries()) if entry is order), None
            )
        self._report_result(result)

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        if selected is None:
            start = 0
        else:
            half = rows // 2
            start = selected - half
            start = max(0, start)
            start = min(start, total - rows)

        return (start, start + rows)

    def _refresh_all(self) -> None:
        try:
            title = self.query_one("#section-title", Static)
        except NoMatches:
            return
        title.update(SECTION_TITLES[self.section])
        self._refresh_list()
        self._refresh_status()
        self._refresh_details()

    def _entry_label(self, idx: int, entry: object) -> Text:
        text = Text()
        if isinstance(entry, Crust):
            text.append(f"{idx + 1}. ")
            text.append_text(format_crust_label(entry))
            text.append(f" - {format_money(entry.price)}")
        elif isinstance(entry, Recipe):
            text.append(f"{idx + 1}. {entry.name} (base: {format_money(entry.base_price)})")
        elif isinstance(entry, Order):
            text.append(f"{idx + 1}. {format_order_header(entry)}")
        else:
            text.append(format_catalog_line(idx, entry.name, entry.price))
        return text

    def _refresh_list(self) -> None:
        list_widget = self.query_one("#catalog-list", Static)
        entries = self._entries()
        if not entries:
            self.selected_index[self.section] = None
            list_widget.update("(nothing yet)")
            return

        selected = self.selected_index[self.section]
        if selected is not None and selected >= len(entries):
            selected = self.selected_index[self.section] = len(entries) - 1

        visible_rows = self._visible_rows(list_widget)
        start, end = self._window_bounds(len(entries), visible_rows, selected)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            lines.append("➤ " if idx == selected else "  ")
            lines.append_text(self._entry_label(idx, entries[idx]))

        if end < len(entries):
            lines.append("\n⋮", style="dim")

        list_widget.update(lines)

    def _refresh_status(self) -> None:
        bar = self.query_one("#status-bar", Static)
        if self.input_state == "active":
            text = Text()
            text.append("S", style="bold #ffffff on #2f6db5")
            text.append(f": {self.search_query}|")
            bar.update(text)
            return
        status = self.system_status or "Ready"
        bar.update(f"1-4 section, A add, E edit, D delete, O order, S search.\n{status}")

    def _refresh_details(self) -> None:
        details = self.query_one("#details", Static)
        entry = self._selected_entry()
        if entry is None:
            details.update(self._section_summary())
            return
        if isinstance(entry, Order):
            details.update(format_order_details(entry))
        elif isinstance(entry, Recipe):
            details.update(self._recipe_details(entry))
        elif isinstance(entry, Crust):
            text = Text()
            text.append_text(format_crust_label(entry))
            text.append(f"\nPrice: {format_money(entry.price)}")
            if not entry.is_classic:
                ceiling = self.store.price_ceiling()
                if ceiling is not None:
                    text.append(f"\nCeiling: {format_money(ceiling)}", style="dim")
            details.update(text)
        else:
            details.update(f"{entry.name}\nPrice: {format_money(entry.price)}")

    def _recipe_details(self, recipe: Recipe) -> Text:
        text = Text()
        text.append(recipe.name, style="bold")
        text.append(f"\nBase: {format_money(recipe.base_price)}")
        crust = self.store.classic_crust()
        if crust is None:
            return text
        text.append(f"\nWith {crust.name} crust:", style="dim")
        for size in PizzaSize:
            price = Pizza.from_recipe(recipe, size, crust).price
            text.append(f"\n  {size.value}: {format_money(price)}")
        return text

    def _section_summary(self) -> str:
        if self.section == "crusts":
            classic = self.store.classic_crust()
            if classic is None:
                return "No classic crust set"
            return f"Classic crust: {classic.name}\nOther crusts may cost up to {format_money(self.store.price_ceiling())}"
        if self.section == "orders":
            total = sum((order.price for order in self.store.orders), ZERO)
            return f"{len(self.store.orders)} order(s), {format_money(total)} in total"
        return f"{len(self._entries())} entr{'y' if len(self._entries()) == 1 else 'ies'}"
