"""Rich text message editor.

``Editor`` hosts a ``MessageTextArea`` and wraps it with a formatting
toolbar, an emoji picker, image attachment and the send/save/cancel actions.

The text widget is created once, when the editor mounts. Everything a parent
may change afterwards (callbacks, placeholder, default value, disabled) is
kept in ``Ref`` cells that ``update_props`` swaps in place, so handlers always
act on the newest values without the widget being rebuilt. A new placeholder
is also shown on the mounted widget; ``default_value`` only seeds the widget
when it is created. Errors never leave the component: they are logged and
passed to ``on_error``.
"""

from pathlib import Path
from typing import Any, Callable, Optional

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.css.query import NoMatches
from textual.widget import Widget
from textual.widgets import Button, Static

from ...core.attachments import format_size, load_image_attachment
from ...core.document import Delta, RichDocument
from ...core.markup import INLINE_MARKERS, delta_to_markup, toggle_inline_format, toggle_line_format
from ...core.models import EditorValue, EditorVariant, ImageAttachment
from ...core.validation import SubmissionValidator
from ...utils.config_manager import get_config_manager
from ...utils.errors import (
    EditorError,
    EditorInitError,
    EmptyMessageError,
    HuddleError,
    InvalidDocumentError,
    error_context,
    format_error_message,
)
from ...utils.logging import get_logger
from .format_toolbar import FormatToolbar
from .handle import EditorHandle, Ref
from .message_text_area import MessageTextArea
from .modals.emoji_picker import EmojiPicker
from .modals.image_prompt import ImagePrompt

logger = get_logger(__name__)

SubmitCallback = Callable[[EditorValue], Any]
CancelCallback = Callable[[], Any]
ErrorCallback = Callable[[HuddleError], Any]

WIDGET_THEME = "css"
HINT_TEXT = "[b]Shift + Return[/b] to add a new line"

_UNSET: Any = object()


class Editor(Widget):
    """Message editor with send (create) or save/cancel (update) actions."""

    DEFAULT_CSS = """
    Editor {
        height: auto;
    }

    Editor > #editor-frame {
        height: auto;
        border: round $panel-lighten-2;
        background: $surface;
    }

    Editor > #editor-frame:focus-within {
        border: round $accent;
    }

    Editor #editor-host {
        height: auto;
    }

    Editor MessageTextArea {
        height: 5;
        border: none;
        padding: 0 1;
    }

    Editor #format-toolbar, Editor #editor-actions, Editor #attachment-chip {
        height: auto;
        padding: 0 1;
    }

    Editor Button {
        min-width: 4;
        width: auto;
        height: 1;
        border: none;
        margin-right: 1;
    }

    Editor #attachment-label {
        width: auto;
        margin-right: 1;
    }

    Editor .spacer {
        width: 1fr;
    }

    Editor .editor-hint {
        text-style: dim;
        text-align: right;
        padding: 0 1;
    }
    """

    BINDINGS = [Binding("escape", "cancel", "Cancel edit", show=False)]

    def __init__(
        self,
        on_submit: SubmitCallback,
        *,
        on_cancel: Optional[CancelCallback] = None,
        on_error: Optional[ErrorCallback] = None,
        placeholder: Optional[str] = None,
        default_value: RichDocument = None,
        disabled: bool = False,
        inner_ref: Optional[Ref[Optional[EditorHandle]]] = None,
        variant: EditorVariant | str = EditorVariant.CREATE,
        name: Optional[str] = None,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ):
        super().__init__(name=name, id=id, classes=classes, disabled=disabled)
        settings = get_config_manager().config.editor

        self.variant = EditorVariant(variant)
        self.inner_ref = inner_ref
        self.handle = EditorHandle(self)
        self.text_area: Optional[MessageTextArea] = None
        self.image: Optional[ImageAttachment] = None

        self._submit_ref: Ref[SubmitCallback] = Ref(on_submit)
        self._cancel_ref: Ref[Optional[CancelCallback]] = Ref(on_cancel)
        self._error_ref: Ref[Optional[ErrorCallback]] = Ref(on_error)
        self._placeholder_ref = Ref(placeholder if placeholder is not None else settings.placeholder)
        self._default_value_ref: Ref[RichDocument] = Ref(default_value)
        self._disabled_ref = Ref(disabled)

        self._show_toolbar = settings.show_toolbar
        self._max_image_bytes = settings.max_image_bytes
        self._image_types = tuple(settings.image_types)

    ## Layout

    @staticmethod
    def _icon_button(label: str, button_id: str, tooltip: str, variant: str = "default") -> Button:
        button = Button(label, id=button_id, variant=variant)
        button.tooltip = tooltip
        return button

    def compose(self) -> ComposeResult:
        with Vertical(id="editor-frame"):
            yield Container(id="editor-host")

            toolbar = FormatToolbar(id="format-toolbar")
            toolbar.display = self._show_toolbar
            yield toolbar

            chip = Horizontal(
                Static(id="attachment-label"),
                self._icon_button("✕", "remove-image-button", "Remove image"),
                id="attachment-chip",
            )
            chip.display = False
            yield chip

            with Horizontal(id="editor-actions"):
                yield self._icon_button(
                    "Aa",
                    "toggle-toolbar-button",
                    "Hide formatting" if self._show_toolbar else "Show formatting",
                )
                yield self._icon_button("☺", "emoji-button", "Emoji")
                if self.variant is EditorVariant.CREATE:
                    yield self._icon_button("🖼", "image-button", "Image")
                yield Static(classes="spacer")
                if self.variant is EditorVariant.UPDATE:
                    yield Button("Cancel", id="cancel-button")
                    yield Button("Save", id="save-button", variant="success")
                else:
                    yield self._icon_button("➤", "send-button", "Send", variant="success")

        yield Static(HINT_TEXT, classes="editor-hint")

    ## Widget lifecycle

    async def on_mount(self) -> None:
        await self._create_widget()

    def on_unmount(self) -> None:
        self._release_widget()

    async def _create_widget(self) -> None:
        """Mount the text widget into the host container, seeded from the latest cells."""

        if self.text_area is not None:
            return

        try:
            host = self.query_one("#editor-host", Container)
        except NoMatches:
            self._report(EditorInitError("Editor host container is missing"))
            return

        try:
            seed = delta_to_markup(Delta.from_value(self._default_value_ref.current))
        except InvalidDocumentError as e:
            self._report(e)
            seed = ""

        text_area = MessageTextArea(
            seed,
            theme=WIDGET_THEME,
            placeholder=self._placeholder_ref.current,
            id="editor-input",
        )
        await host.mount(text_area)

        self.text_area = text_area
        self.handle.bind(text_area)
        if self.inner_ref is not None:
            self.inner_ref.current = self.handle

        logger.debug(f"Editor widget created ({self.variant.value})")

    def _release_widget(self) -> None:
        self.handle.unbind()
        if self.inner_ref is not None and self.inner_ref.current is self.handle:
            self.inner_ref.current = None
        self.text_area = None
        logger.debug("Editor widget released")

    ## Latest-value cells

    def update_props(
        self,
        *,
        on_submit: Any = _UNSET,
        on_cancel: Any = _UNSET,
        on_error: Any = _UNSET,
        placeholder: Any = _UNSET,
        default_value: Any = _UNSET,
        disabled: Any = _UNSET,
    ) -> None:
        """Swap in new caller values without recreating the text widget."""

        if on_submit is not _UNSET:
            self._submit_ref.current = on_submit
        if on_cancel is not _UNSET:
            self._cancel_ref.current = on_cancel
        if on_error is not _UNSET:
            self._error_ref.current = on_error
        if placeholder is not _UNSET:
            self._placeholder_ref.current = placeholder
            if self.text_area is not None:
                self.text_area.placeholder = placeholder
        if default_value is not _UNSET:
            self._default_value_ref.current = default_value
        if disabled is not _UNSET:
            self._disabled_ref.current = bool(disabled)
            self.disabled = bool(disabled)

    ## Actions

    def action_toggle_toolbar(self) -> None:
        if self._disabled_ref.current:
            return
        toolbar = self.query_one(FormatToolbar)
        toolbar.display = not toolbar.display
        self.query_one("#toggle-toolbar-button", Button).tooltip = (
            "Hide formatting" if toolbar.display else "Show formatting"
        )

    def action_open_emoji(self) -> None:
        if self._disabled_ref.current:
            return
        self.app.push_screen(EmojiPicker(), callback=self._insert_emoji)

    def _insert_emoji(self, char: Optional[str]) -> None:
        if char and self.handle.insert_text(char):
            self.handle.focus()

    def action_attach_image(self) -> None:
        if self._disabled_ref.current or self.variant is not EditorVariant.CREATE:
            return
        self.app.push_screen(ImagePrompt(), callback=self._on_image_chosen)

    def _on_image_chosen(self, path: Optional[Path]) -> None:
        if path is not None:
            self.attach_image(path)

    def action_cancel(self) -> None:
        if self._disabled_ref.current or self.variant is not EditorVariant.UPDATE:
            return
        self._invoke(self._cancel_ref.current, context="Editor cancel")

    def action_save(self) -> None:
        if self.variant is EditorVariant.UPDATE:
            self._submit()

    def action_send(self) -> None:
        if self.variant is EditorVariant.CREATE:
            self._submit()

    ## Attachments

    def attach_image(self, path: str | Path) -> bool:
        """Attach a local image; failures are reported, not raised."""

        try:
            attachment = load_image_attachment(path, self._max_image_bytes, self._image_types)
        except HuddleError as e:
            self._report(e)
            return False

        self.image = attachment
        self._refresh_attachment_chip()
        return True

    def clear_image(self) -> None:
        self.image = None
        self._refresh_attachment_chip()

    def _refresh_attachment_chip(self) -> None:
        chip = self.query_one("#attachment-chip")
        if self.image is None:
            chip.display = False
            return
        self.query_one("#attachment-label", Static).update(
            f"🖼 {self.image.name} ({format_size(self.image.size)})"
        )
        chip.display = True

    ## Formatting

    def apply_format(self, fmt: str) -> bool:
        """Apply an inline format to the selection or a line format to the selected lines."""

        if self._disabled_ref.current or self.text_area is None:
            return False

        text_area = self.text_area
        start, end = sorted((text_area.selection.start, text_area.selection.end))

        if fmt in INLINE_MARKERS:
            selected = text_area.selected_text
            if selected:
                text_area.replace(toggle_inline_format(selected, fmt), start, end)
            else:
                marker = INLINE_MARKERS[fmt]
                text_area.insert(marker * 2)
                text_area.move_cursor_relative(columns=-len(marker))
        else:
            for row in range(start[0], end[0] + 1):
                line = text_area.document.get_line(row)
                text_area.replace(toggle_line_format(line, fmt), (row, 0), (row, len(line)))

        text_area.focus()
        return True

    ## Submission

    def _submit(self) -> None:
        if self._disabled_ref.current:
            return

        document = self.handle.get_contents()
        if document is None:
            return

        value = EditorValue(body=document.to_json(), image=self.image)
        valid, error = SubmissionValidator.validate(value)
        if not valid:
            self._report(EmptyMessageError(error))
            return

        logger.debug(f"Submitting editor value ({len(value.body)} chars, image={value.image is not None})")
        self._invoke(self._submit_ref.current, value, context="Editor submit")

    def _invoke(self, callback: Optional[Callable[..., Any]], *args: Any, context: str) -> bool:
        if callback is None:
            return False

        with error_context(context, reraise=False) as ctx:
            callback(*args)

        error = ctx.exception
        if error is None:
            return True

        self._report(error if isinstance(error, HuddleError) else EditorError(f"{context} failed: {error}"))
        return False

    def _report(self, error: HuddleError) -> None:
        """Hand an error to the latest on_error, or show it when nobody listens."""

        logger.warning(f"{type(error).__name__}: {error.message}")

        on_error = self._error_ref.current
        if on_error is not None:
            with error_context("Editor error callback", reraise=False):
                on_error(error)
            return

        if self.is_mounted:
            self.notify(format_error_message(error), severity="error")

    ## Event handlers

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()

        match event.button.id:
            case "toggle-toolbar-button":
                self.action_toggle_toolbar()
            case "emoji-button":
                self.action_open_emoji()
            case "image-button":
                self.action_attach_image()
            case "remove-image-button":
                self.clear_image()
            case "cancel-button":
                self.action_cancel()
            case "save-button":
                self.action_save()
            case "send-button":
                self.action_send()

    @on(FormatToolbar.FormatRequested)
    def _on_format_requested(self, event: FormatToolbar.FormatRequested) -> None:
        event.stop()
        self.apply_format(event.fmt)

    @on(MessageTextArea.SubmitRequested)
    def _on_submit_requested(self, event: MessageTextArea.SubmitRequested) -> None:
        event.stop()
        self._submit()
