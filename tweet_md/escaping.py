"""Markdown escaping for plain tweet text."""

import re

# Markdown control characters: # * ( ) [ ] _ ` \
_CONTROL_CHARS = re.compile(r'([#*()\[\]_`\\])')

# Ordered: control characters first, so the backslashes added are not doubled
_REPLACEMENTS: tuple[tuple[re.Pattern[str], str], ...] = (
    (_CONTROL_CHARS, r'\\\1'),
    (re.compile('<'), '&lt;'),
    (re.compile('>'), '&gt;'),
    # Markdown hard line break
    (re.compile('\n'), '  \n'),
)

# Digits and a period at the fragment start read as an ordered list marker
_LIST_MARKER = re.compile(r'^(\d+)\.')


def escape_markdown_part(text: str) -> str:
    """Escape a text fragment sitting next to rendered entities.

    Examples:
        >>> escape_markdown_part('snake_case <tag>')
        'snake\\\\_case &lt;tag&gt;'
    """
    for pattern, replacement in _REPLACEMENTS:
        text = pattern.sub(replacement, text)
    return text


def escape_markdown(text: str) -> str:
    """Escape the fragment that opens the rendered output.

    Same as `escape_markdown_part`, and additionally escapes the period of a
    leading `1.` so the line does not turn into an ordered list.

    Examples:
        >>> escape_markdown('3. Item')
        '3\\\\. Item'
    """
    return _LIST_MARKER.sub(r'\1\\.', escape_markdown_part(text), count=1)
