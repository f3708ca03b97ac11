from typing import TypeVar

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Static

ModalResult = TypeVar("ModalResult")


class AnimatedModal(ModalScreen[ModalResult]):
    """A modal base with fade-in, background dimming and Escape-to-close."""

    DEFAULT_CSS = """
    AnimatedModal {
        align: center middle;
        background: $background 60%;
    }

    AnimatedModal > .modal-container {
        background: $panel;
        border: round $accent;
        width: 60;
        height: auto;
        max-height: 80%;
        padding: 1 2;
    }

    AnimatedModal .modal-title {
        text-style: bold;
        padding-bottom: 1;
    }

    AnimatedModal .modal-actions {
        height: auto;
        align-horizontal: right;
        padding-top: 1;
    }
    """

    BINDINGS = [Binding("escape", "close", "Close", show=False)]

    TITLE_TEXT = ""

    def compose(self) -> ComposeResult:
        with Vertical(classes="modal-container"):
            yield Static(self.TITLE_TEXT, classes="modal-title")
            yield from self.compose_body()

    def compose_body(self) -> ComposeResult:
        yield from ()

    def on_mount(self) -> None:
        container = self.query_one(".modal-container")
        container.styles.opacity = 0.0
        container.styles.animate("opacity", value=1.0, duration=0.15)

    def action_close(self) -> None:
        """Press Escape to close without a result."""
        self.dismiss(None)
