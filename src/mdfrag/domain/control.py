"""Composition helpers for assembling documents from fragments."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

T = TypeVar("T")


def doc(*fragments: str) -> str:
    """Join fragments into a document, without a separator.

    Example:
        >>> doc("# T\\n", "body")
        '# T\\nbody'
    """
    return "".join(fragments)


def if_(condition: bool, *fragments: str) -> str:
    """Return the joined fragments when ``condition`` holds, else ``""``.

    Example:
        >>> if_(True, "x", "y")
        'xy'
        >>> if_(False, "x")
        ''
    """
    return "".join(fragments) if condition else ""


def if_else(condition: bool, a: str, b: str) -> str:
    """Return ``a`` when ``condition`` holds, otherwise ``b``."""
    return a if condition else b


def for_(items: Iterable[T], fn: Callable[[T], str]) -> str:
    """Map ``fn`` over ``items`` and join the results in order.

    Args:
        items: Elements to render; consumed once.
        fn: Renders one element into a fragment. It may call any other builder.

    Returns:
        The concatenated fragments.

    Example:
        >>> for_([1, 2, 3], lambda n: f"{n};")
        '1;2;3;'
    """
    return "".join(fn(item) for item in items)


__all__ = [
    "doc",
    "for_",
    "if_",
    "if_else",
]
