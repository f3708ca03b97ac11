from pathlib import Path

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Input

from .animated_modal import AnimatedModal


class ImagePrompt(AnimatedModal[Path | None]):
    """Asks for the path of an image to attach."""

    TITLE_TEXT = "🖼 Attach image"

    def compose_body(self) -> ComposeResult:
        yield Input(placeholder="Path to a PNG, JPEG, GIF or WEBP file", id="image-path")
        with Horizontal(classes="modal-actions"):
            yield Button("Attach", id="attach-btn", variant="primary")
            yield Button("Cancel", id="cancel-btn")

    def on_mount(self) -> None:
        self.query_one("#image-path", Input).focus()

    @on(Input.Submitted, "#image-path")
    @on(Button.Pressed, "#attach-btn")
    def _submit_path(self) -> None:
        raw = self.query_one("#image-path", Input).value.strip()
        self.dismiss(Path(raw).expanduser() if raw else None)

    @on(Button.Pressed, "#cancel-btn")
    def _cancel(self) -> None:
        self.dismiss(None)
