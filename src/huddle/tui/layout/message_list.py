from typing import Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical, VerticalScroll
from textual.message import Message
from textual.widgets import Static

from ...core.attachments import format_size
from ...core.composer_logic import edit_chat_message
from ...core.message_store import MessageStore
from ...core.models import ChatMessage, EditorValue, EditorVariant
from ...utils.errors import InvalidDocumentError
from ...utils.logging import get_logger
from ..render import delta_to_text
from ..widgets.editor import Editor

logger = get_logger(__name__)


def message_header(message: ChatMessage) -> Text:
    header = Text.assemble(
        (message.author, "bold"),
        "  ",
        (message.created_at.strftime("%H:%M"), "dim"),
    )
    if message.edited:
        header.append("  (edited)", style="dim italic")
    return header


def message_body(message: ChatMessage) -> Text:
    try:
        return delta_to_text(message.document)
    except InvalidDocumentError:
        logger.warning(f"Message {message.id} has an unreadable body")
        return Text("[unreadable message]", style="dim italic")


class MessageItem(Vertical, can_focus=True):
    """A single message, editable in place by its author."""

    DEFAULT_CSS = """
    MessageItem {
        height: auto;
        padding: 0 1;
        margin-bottom: 1;
    }

    MessageItem:focus {
        background: $boost;
    }

    MessageItem .message-image {
        color: $text-muted;
    }
    """

    BINDINGS = [Binding("e", "edit", "Edit message")]

    class Edited(Message):
        """Emitted after an in-place edit has been saved."""

        def __init__(self, message: ChatMessage):
            super().__init__()
            self.message = message

    def __init__(self, store: MessageStore, message: ChatMessage, current_user: str):
        super().__init__(classes="message-item")
        self.store = store
        self.message = message
        self.current_user = current_user
        self.editor: Optional[Editor] = None

    def compose(self) -> ComposeResult:
        yield Static(message_header(self.message), classes="message-header")
        yield Static(message_body(self.message), classes="message-body")
        image = Static(classes="message-image")
        image.display = False
        yield image

    def on_mount(self) -> None:
        self.refresh_message()

    def refresh_message(self) -> None:
        self.query_one(".message-header", Static).update(message_header(self.message))
        self.query_one(".message-body", Static).update(message_body(self.message))

        image = self.query_one(".message-image", Static)
        if self.message.image is None:
            image.display = False
        else:
            image.update(f"🖼 {self.message.image.name} ({format_size(self.message.image.size)})")
            image.display = True

    @property
    def is_own(self) -> bool:
        return self.message.author == self.current_user

    async def action_edit(self) -> None:
        if self.editor is not None:
            return
        if not self.is_own:
            self.notify("You can only edit your own messages", severity="warning")
            return

        self.editor = Editor(
            self._save,
            on_cancel=self.close_editor,
            default_value=self.message.body,
            variant=EditorVariant.UPDATE,
            classes="edit-editor",
        )
        self.query_one(".message-body").display = False
        await self.mount(self.editor)
        self.call_after_refresh(self._focus_editor)

    def _focus_editor(self) -> None:
        if self.editor is not None:
            self.editor.handle.focus()

    def _save(self, value: EditorValue) -> None:
        self.message = edit_chat_message(self.store, self.message.id, value)
        self.close_editor()
        self.refresh_message()
        self.post_message(self.Edited(self.message))

    def close_editor(self) -> None:
        if self.editor is None:
            return
        self.editor.remove()
        self.editor = None
        self.query_one(".message-body").display = True
        self.focus()


class MessageList(VerticalScroll):
    """Messages of the current channel, oldest first."""

    def __init__(self, store: MessageStore, channel: str, current_user: str, id: Optional[str] = "message-list"):
        super().__init__(id=id)
        self.store = store
        self.channel = channel
        self.current_user = current_user

    async def on_mount(self) -> None:
        await self.load_channel(self.channel)

    async def load_channel(self, channel: str) -> None:
        """Replace the list with the messages of another channel."""
        self.channel = channel
        await self.remove_children()

        messages = self.store.messages(channel)
        if not messages:
            await self.mount(Static(f"No messages in #{channel} yet", classes="empty-channel"))
            return

        await self.mount_all(
            MessageItem(self.store, message, self.current_user) for message in messages
        )
        self.scroll_end(animate=False)

    async def add_message(self, message: ChatMessage) -> None:
        if message.channel != self.channel:
            return

        await self.query(".empty-channel").remove()
        await self.mount(MessageItem(self.store, message, self.current_user))
        self.scroll_end(animate=False)
