"""Latest-value cells and the externally observable editor handle."""

from typing import TYPE_CHECKING, Generic, Optional, TypeVar

from ...core.document import Delta, RichDocument
from ...core.markup import delta_to_markup, markup_to_delta
from ...utils.logging import get_logger

if TYPE_CHECKING:
    from .editor import Editor
    from .message_text_area import MessageTextArea

logger = get_logger(__name__)

T = TypeVar("T")


class Ref(Generic[T]):
    """A mutable cell whose ``current`` value can be swapped at any time."""

    __slots__ = ("current",)

    def __init__(self, current: T) -> None:
        self.current = current

    def __repr__(self) -> str:
        return f"Ref({self.current!r})"


class EditorHandle:
    """Imperative access to a mounted editor's text widget.

    The editor owns the widget; the handle only reads and issues commands.
    Once the editor unmounts the handle is detached: commands return False,
    reads return None or an empty string.
    """

    def __init__(self, editor: "Editor") -> None:
        self._editor = editor
        self._text_area: Optional["MessageTextArea"] = None

    @property
    def attached(self) -> bool:
        return self._text_area is not None

    def bind(self, text_area: "MessageTextArea") -> None:
        self._text_area = text_area

    def unbind(self) -> None:
        self._text_area = None

    def _ignored(self, operation: str) -> None:
        logger.debug(f"Ignored {operation}() on a detached editor handle")

    def get_contents(self) -> Optional[Delta]:
        if self._text_area is None:
            self._ignored("get_contents")
            return None
        return markup_to_delta(self._text_area.text)

    def get_text(self) -> str:
        if self._text_area is None:
            self._ignored("get_text")
            return ""
        return self._text_area.text

    def set_contents(self, value: RichDocument) -> bool:
        if self._text_area is None:
            self._ignored("set_contents")
            return False
        self._text_area.load_text(delta_to_markup(Delta.from_value(value)))
        return True

    def clear(self) -> bool:
        """Empty the text and drop any attached image."""
        if self._text_area is None:
            self._ignored("clear")
            return False
        self._text_area.clear()
        self._editor.clear_image()
        return True

    def focus(self) -> bool:
        if self._text_area is None:
            self._ignored("focus")
            return False
        self._text_area.focus()
        return True

    def insert_text(self, text: str) -> bool:
        if self._text_area is None:
            self._ignored("insert_text")
            return False
        self._text_area.insert(text)
        return True
