"""Emoji catalog used by the editor's emoji picker"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Emoji:
    shortcode: str
    char: str
    keywords: tuple[str, ...] = ()


EMOJI: tuple[Emoji, ...] = (
    Emoji("grinning", "😀", ("happy", "smile")),
    Emoji("joy", "😂", ("laugh", "tears", "lol")),
    Emoji("smile", "😄", ("happy", "joy")),
    Emoji("wink", "😉", ("flirt",)),
    Emoji("blush", "😊", ("proud", "shy")),
    Emoji("heart_eyes", "😍", ("love", "crush")),
    Emoji("thinking_face", "🤔", ("hmm", "consider")),
    Emoji("neutral_face", "😐", ("meh",)),
    Emoji("sweat_smile", "😅", ("relief", "nervous")),
    Emoji("cry", "😢", ("sad", "tear")),
    Emoji("sob", "😭", ("sad", "cry")),
    Emoji("rage", "😡", ("angry", "mad")),
    Emoji("scream", "😱", ("shock", "horror")),
    Emoji("sunglasses", "😎", ("cool",)),
    Emoji("upside_down_face", "🙃", ("silly", "sarcasm")),
    Emoji("eyes", "👀", ("look", "watching")),
    Emoji("wave", "👋", ("hello", "bye")),
    Emoji("thumbsup", "👍", ("+1", "yes", "approve")),
    Emoji("thumbsdown", "👎", ("-1", "no")),
    Emoji("clap", "👏", ("applause", "bravo")),
    Emoji("raised_hands", "🙌", ("hooray", "celebrate")),
    Emoji("pray", "🙏", ("please", "thanks")),
    Emoji("muscle", "💪", ("strong", "flex")),
    Emoji("ok_hand", "👌", ("perfect", "okay")),
    Emoji("point_up", "☝️", ("this",)),
    Emoji("heart", "❤️", ("love",)),
    Emoji("broken_heart", "💔", ("sad",)),
    Emoji("fire", "🔥", ("hot", "lit")),
    Emoji("sparkles", "✨", ("shiny", "new")),
    Emoji("star", "⭐", ("favourite",)),
    Emoji("tada", "🎉", ("party", "celebrate", "congrats")),
    Emoji("rocket", "🚀", ("launch", "ship")),
    Emoji("100", "💯", ("perfect", "score")),
    Emoji("white_check_mark", "✅", ("done", "yes")),
    Emoji("x", "❌", ("no", "wrong")),
    Emoji("warning", "⚠️", ("caution",)),
    Emoji("bulb", "💡", ("idea",)),
    Emoji("memo", "📝", ("note", "write")),
    Emoji("calendar", "📅", ("date", "schedule")),
    Emoji("coffee", "☕", ("drink", "break")),
    Emoji("pizza", "🍕", ("food", "lunch")),
    Emoji("beers", "🍻", ("cheers", "drinks")),
    Emoji("bug", "🐛", ("defect", "issue")),
    Emoji("wrench", "🔧", ("fix", "tool")),
    Emoji("lock", "🔒", ("secure", "private")),
    Emoji("zap", "⚡", ("fast", "power")),
    Emoji("hourglass", "⌛", ("wait", "time")),
    Emoji("speech_balloon", "💬", ("chat", "comment")),
    Emoji("question", "❓", ("help",)),
)

_BY_SHORTCODE = {emoji.shortcode: emoji for emoji in EMOJI}


def lookup_emoji(shortcode: str) -> Optional[Emoji]:
    """Find an emoji by shortcode, with or without surrounding colons"""
    return _BY_SHORTCODE.get(shortcode.strip().strip(":").lower())


def search_emoji(query: str, limit: int = 24) -> list[Emoji]:
    """Shortcode prefix matches first, then substring and keyword matches"""
    query = query.strip().strip(":").lower()
    if not query:
        return list(EMOJI[:limit])

    prefix = [e for e in EMOJI if e.shortcode.startswith(query)]
    rest = [
        e
        for e in EMOJI
        if e not in prefix
        and (query in e.shortcode or any(query in keyword for keyword in e.keywords))
    ]
    return (prefix + rest)[:limit]
