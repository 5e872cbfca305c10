"""Markdown link fragments for tweet entities."""

from __future__ import annotations

from collections.abc import Callable, Mapping
import logging
from typing import Any

from tweet_md.config import (
    DEFAULT_CONFIG,
    HashtagEntity,
    RenderConfig,
    UrlEntity,
    UserMentionEntity,
)
from tweet_md.escaping import escape_markdown_part
from tweet_md.links import profile_url, search_url

LOGGER = logging.getLogger(__name__)

# Each formatter takes the entity shape of its kind
EntityFormatter = Callable[[Any, RenderConfig], str]


def _field(data: Mapping[str, object], key: str) -> str:
    value = data.get(key)
    return '' if value is None else str(value)


def render_mention(data: UserMentionEntity, config: RenderConfig) -> str:
    screen_name = _field(data, 'screen_name')
    url = profile_url(screen_name, config)
    return f'[@{escape_markdown_part(screen_name)}]({url} "{_field(data, "name")}")'


def render_media(data: UrlEntity, config: RenderConfig) -> str:
    return f'[{escape_markdown_part(_field(data, "display_url"))}]({_field(data, "url")})'


def render_hashtag(data: HashtagEntity, config: RenderConfig) -> str:
    text = _field(data, 'text')
    return f'[#{escape_markdown_part(text)}]({search_url(text, config=config)})'


def render_cashtag(data: HashtagEntity, config: RenderConfig) -> str:
    text = _field(data, 'text')
    url = search_url(text, config.cashtag_source, config)
    return f'[${escape_markdown_part(text)}]({url})'


def render_url(data: UrlEntity, config: RenderConfig) -> str:
    label = escape_markdown_part(_field(data, 'display_url'))
    return f'[{label}]({_field(data, "url")} "{_field(data, "expanded_url")}")'


# Keys of the tweet `entities` object
ENTITY_FORMATTERS: Mapping[str, EntityFormatter] = {
    'user_mentions': render_mention,
    'media': render_media,
    'hashtags': render_hashtag,
    'symbols': render_cashtag,
    'urls': render_url,
}


def render_entity(
    kind: str,
    data: Mapping[str, Any],
    config: RenderConfig = DEFAULT_CONFIG,
) -> str | None:
    """Render a single entity as a Markdown link.

    Only the label and title sub-fields are escaped, never the whole link.

    Args:
        kind: Entity kind, a key of the tweet `entities` object
        data: Entity object
        config: Rendering configuration

    Returns:
        Markdown fragment, or None for kinds without a formatter
    """
    formatter = ENTITY_FORMATTERS.get(kind)
    if formatter is None:
        LOGGER.debug('No formatter for entity kind %r, skipping', kind)
        return None
    return formatter(data, config)
