"""Message composer logic - turns editor values into stored messages"""

from ..utils.errors import EmptyMessageError
from ..utils.logging import get_logger, log_call, log_event
from .message_store import MessageStore
from .models import ChatMessage, EditorValue
from .validation import SubmissionValidator

logger = get_logger(__name__)


def _ensure_valid(value: EditorValue) -> None:
    valid, error = SubmissionValidator.validate(value)
    if not valid:
        raise EmptyMessageError(error)


@log_call
def post_chat_message(
    store: MessageStore, channel: str, author: str, value: EditorValue
) -> ChatMessage:
    """Validate and store a new channel message."""
    _ensure_valid(value)
    message = store.add(channel, author, value.body, value.image)
    log_event(
        "message_posted",
        f"Message posted to #{channel}",
        message_id=message.id,
        body_length=len(value.body),
        has_image=value.image is not None,
    )
    return message


@log_call
def edit_chat_message(
    store: MessageStore, message_id: str, value: EditorValue
) -> ChatMessage:
    """Validate and apply an edit to an existing message."""
    _ensure_valid(value)
    message = store.update(message_id, value.body, value.image)
    log_event("message_edited", "Message edited", message_id=message_id)
    return message
