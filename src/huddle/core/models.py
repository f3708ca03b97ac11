"""Chat and editor domain models"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional

from .document import Delta


class EditorVariant(str, Enum):
    """Which action buttons an editor shows."""

    CREATE = "create"
    UPDATE = "update"


@dataclass(frozen=True)
class ImageAttachment:
    """A local image file attached to a message."""

    path: Path
    name: str
    mime_type: str
    size: int


@dataclass(frozen=True)
class EditorValue:
    """Payload handed to an editor's submit callback."""

    body: str
    image: Optional[ImageAttachment] = None

    @property
    def document(self) -> Delta:
        return Delta.from_json(self.body)


@dataclass
class ChatMessage:
    """A message posted to a channel."""

    id: str
    channel: str
    author: str
    body: str
    image: Optional[ImageAttachment] = None
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: Optional[datetime] = None

    @property
    def edited(self) -> bool:
        return self.updated_at is not None

    @property
    def document(self) -> Delta:
        return Delta.from_json(self.body)
