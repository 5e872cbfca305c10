"""Tweet to Markdown renderer.

This module converts tweet objects, as returned by the Twitter API, into
Markdown: entities become links, free text is escaped and quoted tweets are
rendered as blockquotes.

Example:
    >>> from tweet_md import render
    >>> render({'text': 'Hello #world', 'entities': {'hashtags': [
    ...     {'text': 'world', 'indices': [6, 12]}]}})
    'Hello [#world](https://twitter.com/search?q=%23world)'
"""

from tweet_md.config import DEFAULT_CONFIG, RenderConfig, Tweet
from tweet_md.renderer import render

__version__ = '0.1.0'

__all__ = [
    'render',
    'RenderConfig',
    'DEFAULT_CONFIG',
    'Tweet',
]
