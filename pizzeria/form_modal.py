"""Text form modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static


class FormModal(ModalScreen[list[str] | None]):
    """Collect one typed answer per field; dismisses with the raw answers or None."""

    CSS = """
    FormModal {
        align: center middle;
        background: $background 60%;
    }

    #form-dialog {
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #form-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #form-fields {
        color: white;
        margin-bottom: 1;
    }

    #form-help {
        color: #dddddd;
    }
    """

    def __init__(self, title: str, fields: list[str], initial: list[str] | None = None) -> None:
        super().__init__()
        self.title_text = title
        self.fields = fields
        self.values = list(initial or [])
        self.values.extend("" for _ in range(len(fields) - len(self.values)))
        self.field_index = 0

    def compose(self) -> ComposeResult:
        with Container(id="form-dialog"):
            yield Static(self.title_text, id="form-title")
            yield Static(id="form-fields")
            yield Static("Enter next/confirm. Backspace delete. Esc/Ctrl+C cancel.", id="form-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        event.stop()
        if event.key in {"escape", "ctrl+c"}:
            self.dismiss(None)
            return

        if event.key == "enter":
            if self.field_index < len(self.fields) - 1:
                self.field_index += 1
                self._refresh_content()
                return
            self.dismiss(list(self.values))
            return

        if event.key == "backspace":
            current = self.values[self.field_index]
            if current:
                self.values[self.field_index] = current[:-1]
                self._refresh_content()
            return

        if event.is_printable and event.character:
            self.values[self.field_index] += event.character
            self._refresh_content()

    def _refresh_content(self) -> None:
        fields_widget = self.query_one("#form-fields", Static)
        content = Text(style="white")
        for idx, label in enumerate(self.fields):
            if idx > 0:
                content.append("\n")
            if idx == self.field_index:
                content.append(f"➤ {label}: {self.values[idx]}|", style="bold white")
            else:
                content.append(f"  {label}: {self.values[idx]}")
        fields_widget.update(content)
