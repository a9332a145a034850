"""Order composition modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from pizzeria.models import Order
from pizzeria.ordering import OrderBuilder, OrderStep
from pizzeria.rendering import describe_pizza, format_money


class OrderModal(ModalScreen[Order | None]):
    """Centered modal walking through one order; dismisses with the completed order."""

    CSS = """
    OrderModal {
        align: center middle;
        background: $background 60%;
    }

    #order-dialog {
        width: 72;
        height: auto;
        border: round $primary;
        background: $panel;
        padding: 1 2;
    }

    #order-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #order-body {
        color: white;
        margin-bottom: 1;
    }

    #order-input {
        border: heavy $secondary;
        padding: 0 1;
        color: white;
        margin-bottom: 1;
    }

    #order-message {
        color: #ffd27f;
        margin-bottom: 1;
    }

    #order-help {
        color: #dddddd;
    }
    """

    def __init__(self, builder: OrderBuilder) -> None:
        super().__init__()
        self.builder = builder
        self.value = ""

    def compose(self) -> ComposeResult:
        with Container(id="order-dialog"):
            yield Static("New Order", id="order-title")
            yield Static(id="order-body")
            yield Static(id="order-input")
            yield Static(id="order-message")
            yield Static("Enter confirm. Backspace delete. Esc/Ctrl+C abandon order.", id="order-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        event.stop()
        if event.key in {"escape", "ctrl+c"}:
            self.dismiss(None)
            return

        if event.key == "enter":
            answer = self.value
            self.value = ""
            self.builder.submit(answer)
            if self.builder.done:
                self.dismiss(self.builder.order)
                return
            self._refresh_content()
            return

        if event.key == "backspace":
            if self.value:
                self.value = self.value[:-1]
                self._refresh_content()
            return

        if event.is_printable and event.character:
            self.value += event.character
            self._refresh_content()

    def _refresh_content(self) -> None:
        body = self.query_one("#order-body", Static)
        input_widget = self.query_one("#order-input", Static)
        message_widget = self.query_one("#order-message", Static)

        content = Text(style="white")
        order = self.builder.order
        if order is not None:
            content.append(f"{order.name}: {order.customer_name} | Total: {format_money(order.price)}", style="bold")
            for pizza in order.items:
                content.append(f"\n  - {describe_pizza(pizza)}")
            content.append("\n\n")

        if self.builder.step is OrderStep.INGREDIENTS:
            picked = ", ".join(i.name for i in self.builder.selected_ingredients()) or "(none)"
            content.append(f"Picked: {picked}\n")

        for line in self.builder.options():
            content.append(f"{line}\n")
        content.append(self.builder.prompt, style="bold")

        body.update(content)
        input_widget.update(f"{self.value}|")
        message_widget.update(self.builder.message)
