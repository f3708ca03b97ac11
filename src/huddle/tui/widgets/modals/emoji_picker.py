from textual import on
from textual.app import ComposeResult
from textual.widgets import Input, OptionList
from textual.widgets.option_list import Option

from ....core.emoji import lookup_emoji, search_emoji
from .animated_modal import AnimatedModal


class EmojiPicker(AnimatedModal[str | None]):
    """Searchable emoji list; dismisses with the chosen character."""

    DEFAULT_CSS = """
    EmojiPicker OptionList {
        height: 12;
    }
    """

    TITLE_TEXT = "😀 Emoji"

    def compose_body(self) -> ComposeResult:
        yield Input(placeholder="Search emoji (Enter picks the first match)", id="emoji-search")
        yield OptionList(*self._options(""), id="emoji-options")

    @staticmethod
    def _options(query: str) -> list[Option]:
        return [Option(f"{emoji.char}  :{emoji.shortcode}:", id=emoji.shortcode) for emoji in search_emoji(query)]

    def on_mount(self) -> None:
        self.query_one("#emoji-search", Input).focus()

    @on(Input.Changed, "#emoji-search")
    def _filter(self, event: Input.Changed) -> None:
        options = self.query_one("#emoji-options", OptionList)
        options.clear_options()
        options.add_options(self._options(event.value))

    @on(Input.Submitted, "#emoji-search")
    def _pick_first(self, event: Input.Submitted) -> None:
        matches = search_emoji(event.value, limit=1)
        self.dismiss(matches[0].char if matches else None)

    @on(OptionList.OptionSelected, "#emoji-options")
    def _pick(self, event: OptionList.OptionSelected) -> None:
        emoji = lookup_emoji(event.option.id or "")
        self.dismiss(emoji.char if emoji else None)
