from textual import events
from textual.message import Message
from textual.widgets import TextArea


class MessageTextArea(TextArea):
    """Text area that asks to submit on Enter and inserts newlines on Shift+Enter."""

    NEWLINE_KEYS = ("shift+enter", "alt+enter")

    class SubmitRequested(Message):
        """Posted when Enter is pressed."""

        def __init__(self, text_area: "MessageTextArea") -> None:
            super().__init__()
            self.text_area = text_area

        @property
        def control(self) -> "MessageTextArea":
            return self.text_area

    def __init__(self, text: str = "", *, theme: str = "css", placeholder: str = "", id: str | None = None):
        super().__init__(
            text,
            theme=theme,
            soft_wrap=True,
            tab_behavior="focus",
            show_line_numbers=False,
            placeholder=placeholder,
            id=id,
        )

    def _on_key(self, event: events.Key) -> None:
        if self.read_only:
            return

        if event.key == "enter":
            event.prevent_default()
            event.stop()
            self.post_message(self.SubmitRequested(self))
        elif event.key in self.NEWLINE_KEYS:
            event.prevent_default()
            event.stop()
            self.insert("\n")
