"""Conversion between editable markup text and rich text documents.

The editor's text area holds plain text using Slack style markup::

    *bold*  _italic_  ~strike~  `code`  <https://example.com|label>
    - bullet item
    1. ordered item
    > quote

``markup_to_delta`` parses it into a ``Delta``; ``delta_to_markup`` renders
a ``Delta`` back so it can seed the text area.
"""

import re
from typing import Optional

from ..utils.logging import get_logger
from .document import Delta

logger = get_logger(__name__)

INLINE_MARKERS = {"bold": "*", "italic": "_", "strike": "~", "code": "`"}
_MARKER_FORMATS = {marker: fmt for fmt, marker in INLINE_MARKERS.items() if fmt != "code"}

LINE_FORMATS = ("bullet", "ordered", "blockquote")

_LINK_RE = re.compile(r"<(?P<url>(?:https?://|mailto:)[^|>\s]+)(?:\|(?P<label>[^>\n]+))?>")
_BULLET_RE = re.compile(r"^(?:-|•) ")
_ORDERED_RE = re.compile(r"^\d+\. ")
_QUOTE_RE = re.compile(r"^> ")


## Parsing


def _can_open(text: str, index: int) -> bool:
    if index + 1 >= len(text) or text[index + 1].isspace():
        return False
    return index == 0 or not text[index - 1].isalnum()


def _find_close(text: str, index: int, marker: str) -> int:
    for end in range(index + 2, len(text)):
        if text[end] != marker:
            continue
        if text[end - 1].isspace():
            continue
        if end + 1 < len(text) and text[end + 1].isalnum():
            continue
        return end
    return -1


def _parse_inline(text: str, attributes: dict, delta: Delta) -> None:
    buffer: list[str] = []

    def flush():
        if buffer:
            delta.insert("".join(buffer), attributes)
            buffer.clear()

    index = 0
    while index < len(text):
        char = text[index]

        if char == "`":
            end = text.find("`", index + 1)
            if end > index + 1:
                flush()
                delta.insert(text[index + 1:end], {**attributes, "code": True})
                index = end + 1
                continue

        elif char in _MARKER_FORMATS and _can_open(text, index):
            end = _find_close(text, index, char)
            if end != -1:
                flush()
                _parse_inline(
                    text[index + 1:end],
                    {**attributes, _MARKER_FORMATS[char]: True},
                    delta,
                )
                index = end + 1
                continue

        elif char == "<":
            match = _LINK_RE.match(text, index)
            if match:
                flush()
                url = match.group("url")
                _parse_inline(match.group("label") or url, {**attributes, "link": url}, delta)
                index = match.end()
                continue

        buffer.append(char)
        index += 1

    flush()


def _split_line_format(line: str) -> tuple[str, Optional[dict]]:
    match = _BULLET_RE.match(line)
    if match:
        return line[match.end():], {"list": "bullet"}

    match = _ORDERED_RE.match(line)
    if match:
        return line[match.end():], {"list": "ordered"}

    match = _QUOTE_RE.match(line)
    if match:
        return line[match.end():], {"blockquote": True}

    return line, None


def markup_to_delta(text: str) -> Delta:
    """Parse editor markup into a document."""

    delta = Delta()

    # A trailing newline in the text area is an empty last line, not a terminator
    for line in text.split("\n"):
        content, line_attributes = _split_line_format(line)
        _parse_inline(content, {}, delta)
        delta.insert("\n", line_attributes)

    return delta


## Rendering


def _wrap(text: str, marker: str, closing: Optional[str] = None) -> str:
    """Wrap text in markers, keeping surrounding whitespace outside them."""

    core = text.strip()
    if not core:
        return text

    lead = text[: len(text) - len(text.lstrip())]
    trail = text[len(text.rstrip()):]
    return f"{lead}{marker}{core}{closing if closing is not None else marker}{trail}"


def _render_segment(text: str, attributes: Optional[dict]) -> str:
    attributes = attributes or {}

    if attributes.get("code"):
        rendered = _wrap(text, "`")
    else:
        rendered = text
        for fmt in ("strike", "italic", "bold"):
            if attributes.get(fmt):
                rendered = _wrap(rendered, INLINE_MARKERS[fmt])

    link = attributes.get("link")
    if link:
        label = rendered.strip()
        rendered = f"<{link}>" if label == link else _wrap(rendered, f"<{link}|", ">")

    return rendered


def _line_attributes(attributes: Optional[dict]) -> dict:
    return {k: v for k, v in (attributes or {}).items() if k in ("list", "blockquote")}


def _line_prefix(attributes: Optional[dict], ordinal: int) -> str:
    attributes = attributes or {}
    if attributes.get("list") == "bullet":
        return "- "
    if attributes.get("list") == "ordered":
        return f"{ordinal}. "
    if attributes.get("blockquote"):
        return "> "
    return ""


def delta_to_markup(delta: Delta) -> str:
    """Render a document as editor markup."""

    lines: list[str] = []
    segments: list[str] = []
    ordinal = 0

    for op in delta:
        if not op.is_text:
            logger.debug(f"Skipping embed '{next(iter(op.insert))}' when rendering markup")
            continue

        parts = op.insert.split("\n")
        for position, part in enumerate(parts):
            if part:
                segments.append(_render_segment(part, op.attributes))
            if position == len(parts) - 1:
                break

            # Newline reached; line formats ride on the newline insert
            line_attributes = _line_attributes(op.attributes)
            is_ordered = (line_attributes or {}).get("list") == "ordered"
            ordinal = ordinal + 1 if is_ordered else 0
            lines.append(_line_prefix(line_attributes, ordinal) + "".join(segments))
            segments = []

    if segments:
        lines.append("".join(segments))

    return "\n".join(lines)


## Editing helpers


def toggle_inline_format(fragment: str, fmt: str) -> str:
    """Wrap or unwrap each line of a selected fragment in the format's markers."""

    if fmt not in INLINE_MARKERS:
        raise ValueError(f"Unknown inline format: {fmt}")

    marker = INLINE_MARKERS[fmt]
    lines = fragment.split("\n")
    wrapped = all(
        len(line) > 2 * len(marker) and line.startswith(marker) and line.endswith(marker)
        for line in lines
        if line.strip()
    )

    toggled = []
    for line in lines:
        if not line.strip():
            toggled.append(line)
        elif wrapped:
            toggled.append(line[len(marker):-len(marker)])
        else:
            toggled.append(_wrap(line, marker))

    return "\n".join(toggled)


def toggle_line_format(line: str, fmt: str) -> str:
    """Add or remove a line format prefix, replacing any other line format."""

    if fmt not in LINE_FORMATS:
        raise ValueError(f"Unknown line format: {fmt}")

    content, current = _split_line_format(line)
    current_fmt = None
    if current:
        current_fmt = current.get("list") or "blockquote"

    if current_fmt == fmt:
        return content

    prefix = {"bullet": "- ", "ordered": "1. ", "blockquote": "> "}[fmt]
    return prefix + content
