"""Inline fragment builders: emphasis, inline code, and links.

Emphasis markers are ignored by Markdown renderers when they touch
whitespace, so :func:`wrap_around` places them inside any leading and
trailing run of spaces and newlines.
"""

from __future__ import annotations

from typing import Final

BOLD_MARKER: Final[str] = "**"
ITALIC_MARKER: Final[str] = "*"
STRIKETHROUGH_MARKER: Final[str] = "~~"
CODE_MARKER: Final[str] = "`"

# Only space and newline delimit the wrapped core; tabs belong to it.
_BOUNDARY_CHARS: Final[frozenset[str]] = frozenset(" \n")


def wrap_around(marker: str, content: str) -> str:
    r"""Enclose the non-whitespace core of ``content`` in ``marker``.

    The leading and trailing runs of spaces and newlines are copied verbatim
    outside the markers. Content made only of such characters (including the
    empty string) is returned unchanged, without any marker.

    Args:
        marker: Delimiter placed on both sides of the core, e.g. ``**``.
        content: Text to wrap.

    Returns:
        The wrapped text.

    Example:
        >>> wrap_around("**", "  hi  ")
        '  **hi**  '
        >>> wrap_around("*", "\n")
        '\n'
        >>> wrap_around("`", "x")
        '`x`'
    """
    start = 0
    length = len(content)
    while start < length and content[start] in _BOUNDARY_CHARS:
        start += 1

    end = length - 1
    while end >= start and content[end] in _BOUNDARY_CHARS:
        end -= 1

    if start > end:
        return content

    return f"{content[:start]}{marker}{content[start : end + 1]}{marker}{content[end + 1 :]}"


def bold(*fragments: str) -> str:
    """Return the concatenated fragments in strong emphasis.

    Example:
        >>> bold("  hi  ")
        '  **hi**  '
        >>> bold(bold("x"))
        '****x****'
    """
    return wrap_around(BOLD_MARKER, "".join(fragments))


def italic(*fragments: str) -> str:
    """Return the concatenated fragments in emphasis."""
    return wrap_around(ITALIC_MARKER, "".join(fragments))


def strikethrough(*fragments: str) -> str:
    """Return the concatenated fragments struck through (GFM ``~~``)."""
    return wrap_around(STRIKETHROUGH_MARKER, "".join(fragments))


def code(text: str) -> str:
    """Return ``text`` as an inline code span.

    Example:
        >>> code("x")
        '`x`'
    """
    return wrap_around(CODE_MARKER, text)


def link(target: str, text: str) -> str:
    """Return an inline link; neither argument is escaped.

    Example:
        >>> link("http://a", "b")
        '[b](http://a)'
    """
    return f"[{text}]({target})"


__all__ = [
    "BOLD_MARKER",
    "CODE_MARKER",
    "ITALIC_MARKER",
    "STRIKETHROUGH_MARKER",
    "bold",
    "code",
    "italic",
    "link",
    "strikethrough",
    "wrap_around",
]
