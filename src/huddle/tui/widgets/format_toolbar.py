from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Button

FORMAT_BUTTONS = (
    ("bold", "B", "Bold"),
    ("italic", "I", "Italic"),
    ("strike", "S", "Strikethrough"),
    ("code", "<>", "Code"),
    ("bullet", "•", "Bulleted list"),
    ("ordered", "1.", "Numbered list"),
    ("blockquote", "❝", "Quote"),
)


class FormatToolbar(Horizontal):
    """Row of formatting buttons shown above the editor's action row."""

    class FormatRequested(Message):
        """Emitted when a formatting button is pressed."""

        def __init__(self, fmt: str):
            super().__init__()
            self.fmt = fmt

    def compose(self):
        for fmt, label, tooltip in FORMAT_BUTTONS:
            button = Button(label, id=f"format-{fmt}", classes="format-button")
            button.tooltip = tooltip
            yield button

    def on_button_pressed(self, event: Button.Pressed):
        event.stop()
        fmt = (event.button.id or "").removeprefix("format-")
        self.post_message(self.FormatRequested(fmt))
