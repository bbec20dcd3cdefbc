"""Backslash escaping of Markdown-significant punctuation."""

from __future__ import annotations

from typing import Final

#: Every ASCII punctuation character; each one is escapable in CommonMark.
MARKDOWN_PUNCTUATION: Final[frozenset[str]] = frozenset("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~")


def escape(text: str) -> str:
    r"""Prefix every Markdown punctuation character with a backslash.

    The input is scanned code point by code point, so multi-byte characters
    pass through untouched. Characters outside :data:`MARKDOWN_PUNCTUATION`
    are emitted unchanged.

    Args:
        text: Raw text to escape.

    Returns:
        The escaped text. Its length grows by exactly the number of
        punctuation characters found in ``text``.

    Example:
        >>> escape("1. *not* a list")
        '1\\. \\*not\\* a list'
        >>> escape("größe_x")
        'größe\\_x'
        >>> escape("")
        ''
    """
    return "".join(f"\\{char}" if char in MARKDOWN_PUNCTUATION else char for char in text)


__all__ = [
    "MARKDOWN_PUNCTUATION",
    "escape",
]
