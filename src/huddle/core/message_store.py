"""In-memory, per-channel message store"""

import uuid
from collections import OrderedDict
from dataclasses import replace
from datetime import datetime
from typing import Optional

from ..utils.errors import MessageNotFoundError
from ..utils.logging import get_logger
from .models import ChatMessage, ImageAttachment

logger = get_logger(__name__)


class MessageStore:
    """Keeps channel messages in posting order."""

    def __init__(self):
        self._messages: "OrderedDict[str, ChatMessage]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._messages)

    def add(
        self,
        channel: str,
        author: str,
        body: str,
        image: Optional[ImageAttachment] = None,
    ) -> ChatMessage:
        message = ChatMessage(
            id=uuid.uuid4().hex,
            channel=channel,
            author=author,
            body=body,
            image=image,
        )
        self._messages[message.id] = message
        logger.debug(f"Stored message {message.id} in #{channel}")
        return message

    def get(self, message_id: str) -> ChatMessage:
        try:
            return self._messages[message_id]
        except KeyError:
            raise MessageNotFoundError(
                f"No message with id {message_id}", details={"message_id": message_id}
            ) from None

    def update(
        self,
        message_id: str,
        body: str,
        image: Optional[ImageAttachment] = None,
    ) -> ChatMessage:
        current = self.get(message_id)
        updated = replace(
            current,
            body=body,
            image=image if image is not None else current.image,
            updated_at=datetime.now(),
        )
        self._messages[message_id] = updated
        logger.debug(f"Updated message {message_id}")
        return updated

    def messages(self, channel: str) -> list[ChatMessage]:
        return [m for m in self._messages.values() if m.channel == channel]

    def channels(self) -> list[str]:
        return list(dict.fromkeys(m.channel for m in self._messages.values()))
