from typing import Optional

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message

from ...core.composer_logic import post_chat_message
from ...core.message_store import MessageStore
from ...core.models import ChatMessage, EditorValue, EditorVariant
from ...utils.logging import get_logger
from .editor import Editor
from .handle import EditorHandle, Ref

logger = get_logger(__name__)


def channel_placeholder(channel: str) -> str:
    return f"Message #{channel}"


class MessageComposer(Vertical):
    """Bottom-of-channel composer that posts new messages."""

    DEFAULT_CSS = """
    MessageComposer {
        height: auto;
        padding: 0 1;
    }
    """

    class Posted(Message):
        """Emitted after a message has been stored."""

        def __init__(self, message: ChatMessage):
            super().__init__()
            self.message = message

    def __init__(self, store: MessageStore, channel: str, author: str, id: Optional[str] = None):
        super().__init__(id=id)
        self.store = store
        self.channel = channel
        self.author = author
        self.inner_ref: Ref[Optional[EditorHandle]] = Ref(None)
        self.editor = Editor(
            self._post,
            placeholder=channel_placeholder(channel),
            inner_ref=self.inner_ref,
            variant=EditorVariant.CREATE,
            id="composer-editor",
        )

    def compose(self) -> ComposeResult:
        yield self.editor

    def _post(self, value: EditorValue) -> None:
        message = post_chat_message(self.store, self.channel, self.author, value)

        handle = self.inner_ref.current
        if handle is not None:
            handle.clear()
            handle.focus()
        self.post_message(self.Posted(message))

    def set_channel(self, channel: str) -> None:
        """Point the composer at another channel."""
        self.channel = channel
        self.editor.update_props(placeholder=channel_placeholder(channel))
        logger.debug(f"Composer switched to #{channel}")
