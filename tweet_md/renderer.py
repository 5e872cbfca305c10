"""Tweet to Markdown rendering.

Entities are replaced from the end of the text towards its start: every
replacement consumes the trailing slice of the text that is still left, so
the offsets of the entities not yet processed stay valid.
"""

from __future__ import annotations

from collections.abc import Iterator
import logging
from typing import NamedTuple

from tweet_md.config import DEFAULT_CONFIG, Entities, RenderConfig, Tweet
from tweet_md.emoji import hide_emoji
from tweet_md.entities import render_entity
from tweet_md.escaping import escape_markdown, escape_markdown_part
from tweet_md.utils import utf16_boundaries, utf16_to_index

LOGGER = logging.getLogger(__name__)


class Replacement(NamedTuple):
    """Rendered entity and the `[start, end)` positions it replaces."""

    fragment: str
    start: int
    end: int


def _select_source(tweet: Tweet) -> tuple[str, Entities]:
    """Pick the text and the entities to render.

    Extended tweets keep their untruncated text and entities apart from the
    top-level ones.
    """
    source = tweet.get('extended_tweet') or tweet
    text = source.get('full_text') or source.get('text') or ''
    return text, source.get('entities') or {}


def _iter_replacements(
    entities: Entities,
    text: str,
    config: RenderConfig,
) -> Iterator[Replacement]:
    """Render entities and convert their UTF-16 `indices` to positions in `text`."""
    boundaries = utf16_boundaries(text)
    for kind, items in entities.items():
        for entity in items or ():
            fragment = render_entity(kind, entity, config)
            # do not add anything unknown
            if fragment is None:
                continue
            indices = entity.get('indices')
            if not indices:
                LOGGER.debug('%s entity without indices, skipping', kind)
                continue
            yield Replacement(
                fragment,
                utf16_to_index(boundaries, indices[0]),
                utf16_to_index(boundaries, indices[1]),
            )


def render_quote(quoted: Tweet, config: RenderConfig = DEFAULT_CONFIG) -> str:
    """Render a quoted tweet as a blockquote starting on a new line."""
    lines = render(quoted, config).split('\n')
    return '\n' + '\n'.join(f'{config.quote_prefix}{line}' for line in lines)


def render(tweet: Tweet | None = None, config: RenderConfig = DEFAULT_CONFIG) -> str:
    """Render a tweet as Markdown.

    Mentions, hashtags, cashtags, URLs and media become links, the text
    between them is escaped, and a quoted tweet is appended as a blockquote.

    Args:
        tweet: Tweet object as decoded from the API JSON (missing keys are empty)
        config: Rendering configuration (uses default if omitted)

    Returns:
        Markdown string

    Example:
        >>> render({
        ...     'text': 'Hello #world',
        ...     'entities': {'hashtags': [{'text': 'world', 'indices': [6, 12]}]},
        ... })
        'Hello [#world](https://twitter.com/search?q=%23world)'
    """
    tweet = tweet or {}
    text, entities = _select_source(tweet)
    quoted = tweet.get('quoted_status')

    hidden = hide_emoji(text, config)

    replacements = sorted(
        _iter_replacements(entities, hidden.text, config),
        key=lambda item: item.start,
        reverse=True,
    )

    if not replacements:
        output = escape_markdown(hidden.reveal())
        if quoted:
            output += render_quote(quoted, config)
        return output

    parts: list[str] = []
    last_pos = len(hidden.text)
    for item in replacements:
        part = item.fragment
        if item.end < last_pos:
            part += escape_markdown_part(hidden.reveal(item.end, last_pos))
        parts.append(part)
        last_pos = item.start

    if last_pos > 0:
        parts.append(escape_markdown(hidden.reveal(0, last_pos)))

    if quoted:
        # Remove the link to the quote, the rightmost entity, together with
        # the text after it. Assumes the quote URL always comes last.
        LOGGER.debug('Replacing trailing entity with quoted tweet')
        parts[0] = render_quote(quoted, config)

    return ''.join(reversed(parts))
