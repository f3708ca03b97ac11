from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Button, Static


def channel_button_id(channel: str) -> str:
    return f"channel-{channel}"


class Sidebar(Vertical):
    """Workspace name and channel navigation."""

    class ChannelSelected(Message):
        def __init__(self, channel: str) -> None:
            self.channel = channel
            super().__init__()

    DEFAULT_CSS = """
    Sidebar {
        width: 24;
        background: $boost;
        border-right: solid $accent;
    }

    Sidebar Button {
        width: 100%;
        border: none;
        height: 1;
        content-align: left middle;
    }

    Sidebar Button.-active {
        background: $accent;
        text-style: bold;
    }
    """

    def __init__(self, workspace: str, channels: list[str], active: str, id: str = "sidebar"):
        super().__init__(id=id)
        self.workspace = workspace
        self.channels = list(channels)
        self.active = active

    def compose(self):
        yield Static(f"💬 {self.workspace}", classes="sidebar-title")
        for channel in self.channels:
            button = Button(f"# {channel}", id=channel_button_id(channel))
            button.set_class(channel == self.active, "-active")
            yield button

    def set_active(self, channel: str) -> None:
        self.active = channel
        for button in self.query(Button):
            button.set_class(button.id == channel_button_id(channel), "-active")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        channel = (event.button.id or "").removeprefix("channel-")
        if channel in self.channels:
            self.post_message(self.ChannelSelected(channel))
