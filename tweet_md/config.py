"""Configuration and data models for tweet to Markdown rendering."""

from dataclasses import dataclass
from typing import TypedDict


class UserMentionEntity(TypedDict, total=False):
    """`entities.user_mentions[]` item of a v1.1 tweet object."""

    indices: list[int]
    screen_name: str
    name: str


class HashtagEntity(TypedDict, total=False):
    """`entities.hashtags[]` and `entities.symbols[]` item."""

    indices: list[int]
    text: str


class UrlEntity(TypedDict, total=False):
    """`entities.urls[]` and `entities.media[]` item.

    Media entities carry no `expanded_url` title in the rendered output.
    """

    indices: list[int]
    url: str
    display_url: str
    expanded_url: str


class Entities(TypedDict, total=False):
    user_mentions: list[UserMentionEntity]
    hashtags: list[HashtagEntity]
    symbols: list[HashtagEntity]
    urls: list[UrlEntity]
    media: list[UrlEntity]


class User(TypedDict, total=False):
    screen_name: str
    name: str


class Tweet(TypedDict, total=False):
    """Tweet object as decoded from the Twitter API JSON.

    Every key is optional: the renderer treats a missing key as empty.
    Offsets in `indices` count UTF-16 code units of the selected text.
    """

    id_str: str
    text: str
    full_text: str
    entities: Entities
    extended_tweet: 'Tweet'
    quoted_status: 'Tweet'
    user: User


# Pictographic blocks kept out of the substitution pass
# @see https://en.wikipedia.org/wiki/Emoji
EMOJI_RANGES: tuple[tuple[int, int], ...] = (
    (0x1F300, 0x1F3FF),  # Miscellaneous Symbols and Pictographs
    (0x1F400, 0x1F64F),  # ...continued, and Emoticons
    (0x1F680, 0x1F6FF),  # Transport and Map Symbols
    (0x2600, 0x26FF),  # Miscellaneous Symbols
    (0x2700, 0x27BF),  # Dingbats
)


@dataclass(frozen=True)
class RenderConfig:
    """Configuration for tweet rendering.

    Immutable, so a single instance is safe to share between calls.

    Attributes:
        base_url: Site root used for profile and search links
        cashtag_source: `src` query value attached to cashtag searches
        emoji_placeholder: Single character standing in for a hidden emoji
        emoji_ranges: Inclusive code point ranges treated as emoji
        quote_prefix: Prefix added to every line of a quoted tweet
    """

    base_url: str = 'https://twitter.com'
    cashtag_source: str = 'ctag'

    # U+0091 (PRIVATE USE ONE), never expected in tweet text
    emoji_placeholder: str = '\x91'
    emoji_ranges: tuple[tuple[int, int], ...] = EMOJI_RANGES

    quote_prefix: str = '> '


# Default configuration instance
DEFAULT_CONFIG = RenderConfig()
