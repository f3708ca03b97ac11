from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Static

from ..core.message_store import MessageStore
from ..utils.config_manager import get_config_manager
from ..utils.logging import get_logger
from .layout.message_list import MessageItem, MessageList
from .layout.sidebar import Sidebar
from .widgets.composer import MessageComposer
from .widgets.hint_bar import HintBar

logger = get_logger(__name__)


class HuddleApp(App):
    CSS_PATH = "styles.tcss"
    TITLE = "Huddle"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        store: Optional[MessageStore] = None,
        channel: Optional[str] = None,
        display_name: Optional[str] = None,
    ):
        super().__init__()
        self.config = get_config_manager().config
        workspace = self.config.workspace

        self.store = store if store is not None else MessageStore()
        self.channel = channel or workspace.default_channel
        self.display_name = display_name or workspace.display_name

        self.sidebar = Sidebar(workspace.name, workspace.channels, self.channel)
        self.message_list = MessageList(self.store, self.channel, self.display_name)
        self.composer = MessageComposer(self.store, self.channel, self.display_name, id="composer")

    def compose(self) -> ComposeResult:
        yield Horizontal(
            self.sidebar,
            Vertical(
                Static(self._header_text(), id="channel-header"),
                self.message_list,
                self.composer,
                id="channel-pane",
            ),
        )
        if self.config.ui.show_hint_bar:
            yield HintBar()

    def _header_text(self) -> str:
        return f"[b]# {self.channel}[/b]"

    # --- Event Handlers ---
    def on_mount(self) -> None:
        theme = self.config.ui.theme
        if theme in self.available_themes:
            self.theme = theme
        else:
            logger.warning(f"Unknown theme '{theme}', keeping {self.theme}")

        self.call_after_refresh(self._focus_composer)

    def _focus_composer(self) -> None:
        handle = self.composer.inner_ref.current
        if handle is not None:
            handle.focus()

    async def on_sidebar_channel_selected(self, event: Sidebar.ChannelSelected) -> None:
        await self.switch_channel(event.channel)

    async def switch_channel(self, channel: str) -> None:
        if channel == self.channel:
            return

        self.channel = channel
        self.sidebar.set_active(channel)
        self.query_one("#channel-header", Static).update(self._header_text())
        self.composer.set_channel(channel)
        await self.message_list.load_channel(channel)
        logger.info(f"Switched to #{channel}")

    async def on_message_composer_posted(self, event: MessageComposer.Posted) -> None:
        await self.message_list.add_message(event.message)

    def on_message_item_edited(self, event: MessageItem.Edited) -> None:
        self.notify("Message updated", timeout=2)


if __name__ == "__main__":
    HuddleApp().run()
