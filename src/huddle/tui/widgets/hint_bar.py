from textual.widgets import Static

HINTS = "[b]Enter[/b] Send · [b]Shift+Enter[/b] New line · [b]E[/b] Edit message · [b]Esc[/b] Cancel edit · [b]Ctrl+Q[/b] Quit"


class HintBar(Static):
    """Displays keyboard shortcuts."""

    def __init__(self):
        super().__init__(HINTS, id="hint-bar")
