"""Emoji guard for the substitution pass.

Pictographic glyphs are swapped for a one-unit placeholder before the entity
offsets are applied, and put back into every slice of text that reaches the
output. The offsets are therefore measured against text where each of these
glyphs occupies a single UTF-16 unit, whatever its encoded width.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
import re

from tweet_md.config import DEFAULT_CONFIG, RenderConfig


@lru_cache(maxsize=8)
def _emoji_pattern(ranges: tuple[tuple[int, int], ...]) -> re.Pattern[str]:
    """Compile a character class matching any code point in `ranges`."""
    char_class = ''.join(f'{re.escape(chr(low))}-{re.escape(chr(high))}' for low, high in ranges)
    return re.compile(f'[{char_class}]')


@dataclass(frozen=True)
class HiddenText:
    """Text with emoji replaced by placeholders.

    Attributes:
        text: Text where each emoji occupies a single placeholder character
        emoji: `(index, glyph)` pairs in left-to-right order
    """

    text: str
    emoji: tuple[tuple[int, str], ...] = field(default_factory=tuple)

    def reveal(self, start: int = 0, end: int | None = None) -> str:
        """Slice `text[start:end]` with the hidden glyphs put back.

        Glyphs go back by their recorded index, so a placeholder character
        already present in the original text stays where it was.
        """
        if end is None:
            end = len(self.text)
        chars = list(self.text[start:end])
        for index, glyph in self.emoji:
            if start <= index < end:
                chars[index - start] = glyph
        return ''.join(chars)


def hide_emoji(text: str, config: RenderConfig = DEFAULT_CONFIG) -> HiddenText:
    """Replace every emoji in `text` with the configured placeholder.

    Args:
        text: Original text
        config: Rendering configuration (placeholder and emoji ranges)

    Returns:
        HiddenText with the guarded text and the removed glyphs
    """
    pattern = _emoji_pattern(config.emoji_ranges)
    emoji = tuple((match.start(), match.group()) for match in pattern.finditer(text))
    if not emoji:
        return HiddenText(text)

    return HiddenText(pattern.sub(config.emoji_placeholder, text), emoji)
