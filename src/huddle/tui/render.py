"""Render rich text documents for display in the message list."""

from rich.style import Style
from rich.text import Text

from ..core.document import Delta

_INLINE_STYLES = {
    "bold": Style(bold=True),
    "italic": Style(italic=True),
    "strike": Style(strike=True),
    "code": Style(color="bright_magenta", bgcolor="grey15"),
}


def _style_for(attributes: dict | None) -> Style:
    attributes = attributes or {}
    style = Style()
    for fmt, fmt_style in _INLINE_STYLES.items():
        if attributes.get(fmt):
            style += fmt_style
    link = attributes.get("link")
    if link:
        style += Style(color="bright_blue", underline=True, link=link)
    return style


def _prefix_for(attributes: dict | None, ordinal: int) -> tuple[str, str]:
    attributes = attributes or {}
    if attributes.get("list") == "bullet":
        return "• ", ""
    if attributes.get("list") == "ordered":
        return f"{ordinal}. ", ""
    if attributes.get("blockquote"):
        return "▎ ", "dim"
    return "", ""


def delta_to_text(delta: Delta) -> Text:
    """Convert a document into styled text, one output line per document line."""

    lines: list[Text] = []
    current = Text()
    ordinal = 0

    for op in delta:
        if not op.is_text:
            kind = next(iter(op.insert))
            current.append(f"[{kind}]", style="dim italic")
            continue

        parts = op.insert.split("\n")
        for position, part in enumerate(parts):
            if part:
                current.append(part, style=_style_for(op.attributes))
            if position == len(parts) - 1:
                break

            attributes = op.attributes or {}
            ordinal = ordinal + 1 if attributes.get("list") == "ordered" else 0
            prefix, prefix_style = _prefix_for(attributes, ordinal)
            line = Text(prefix, style=prefix_style) if prefix else Text()
            line.append_text(current)
            if attributes.get("blockquote"):
                line.stylize("italic")
            lines.append(line)
            current = Text()

    if current.plain:
        lines.append(current)

    return Text("\n").join(lines)
