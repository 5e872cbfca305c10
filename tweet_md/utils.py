"""UTF-16 offset helpers.

Entity `indices` count UTF-16 code units, while Python strings index code
points: every character outside the Basic Multilingual Plane is one `str`
position but two UTF-16 units.
"""

from bisect import bisect_left


def utf16_len(text: str) -> int:
    """Calculate length in UTF-16 code units.

    Examples:
        >>> utf16_len('Hello')
        5
        >>> utf16_len('🤔')
        2
    """
    return len(text.encode('utf-16-le')) // 2


def utf16_boundaries(text: str) -> list[int]:
    """UTF-16 offset of every character boundary of `text`.

    Item `i` is the offset where character `i` starts; the last item is the
    UTF-16 length of the whole text.
    """
    boundaries = [0]
    for char in text:
        boundaries.append(boundaries[-1] + (2 if ord(char) > 0xFFFF else 1))
    return boundaries


def utf16_to_index(boundaries: list[int], offset: int) -> int:
    """Convert an UTF-16 offset to a `str` position.

    An offset pointing inside a surrogate pair moves to the end of that
    character; offsets past the text end clamp to its length.

    Args:
        boundaries: Result of `utf16_boundaries` for the indexed text
        offset: Offset in UTF-16 code units

    Returns:
        Position in the `str`
    """
    return min(bisect_left(boundaries, offset), len(boundaries) - 1)
