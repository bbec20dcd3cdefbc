"""Block-level fragment builders: headings, quotes, lists, tasks, code blocks.

Every builder returns a new string and never touches its arguments. Builders
that accept ``*fragments`` concatenate them without a separator, in argument
order.
"""

from __future__ import annotations

from typing import Final

#: Horizontal rule surrounded by blank lines.
HR: Final[str] = "\n\n---\n\n"

#: Single line break.
L: Final[str] = "\n"


def _heading(level: int, fragments: tuple[str, ...]) -> str:
    return f"{'#' * level} {''.join(fragments)}\n"


def h1(*fragments: str) -> str:
    """Return a level 1 heading line.

    Example:
        >>> h1("Title")
        '# Title\\n'
    """
    return _heading(1, fragments)


def h2(*fragments: str) -> str:
    """Return a level 2 heading line."""
    return _heading(2, fragments)


def h3(*fragments: str) -> str:
    """Return a level 3 heading line.

    Example:
        >>> h3()
        '### \\n'
    """
    return _heading(3, fragments)


def h4(*fragments: str) -> str:
    """Return a level 4 heading line."""
    return _heading(4, fragments)


def h5(*fragments: str) -> str:
    """Return a level 5 heading line."""
    return _heading(5, fragments)


def h6(*fragments: str) -> str:
    """Return a level 6 heading line."""
    return _heading(6, fragments)


def quote(*fragments: str) -> str:
    """Return a single blockquote line.

    Example:
        >>> quote("to be", " or not")
        '> to be or not\\n'
    """
    return f"> {''.join(fragments)}\n"


def ul(*items: str) -> str:
    """Return an unordered list, one ``- `` item per argument.

    Items are separated by a newline; the last item has none, so callers
    decide how the list is terminated.

    Example:
        >>> ul("a", "b")
        '- a\\n- b'
        >>> ul()
        ''
    """
    return "\n".join(f"- {item}" for item in items)


def ol(*items: str) -> str:
    """Return an ordered list numbered from 1.

    Example:
        >>> ol("a", "b")
        '1. a\\n2. b'
    """
    return "\n".join(f"{index}. {item}" for index, item in enumerate(items, start=1))


def task(done: bool, *fragments: str) -> str:
    """Return a task-list item, checked when ``done`` is true.

    Example:
        >>> task(True, "done")
        '- [x] done\\n'
        >>> task(False, "todo")
        '- [ ] todo\\n'
    """
    mark = "x" if done else " "
    return f"- [{mark}] {''.join(fragments)}\n"


def img(target: str, alt_text: str) -> str:
    """Return an image reference on its own line.

    Example:
        >>> img("logo.png", "Logo")
        '![Logo](logo.png)\\n'
    """
    return f"![{alt_text}]({target})\n"


def code_block(language: str, text: str) -> str:
    """Return a fenced code block tagged with ``language``.

    ``text`` is embedded verbatim; fences inside it are not escaped.

    Example:
        >>> code_block("go", "fmt.Println()")
        '\\n```go\\nfmt.Println()\\n```\\n'
    """
    return f"\n```{language}\n{text}\n```\n"


__all__ = [
    "HR",
    "L",
    "code_block",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "img",
    "ol",
    "quote",
    "task",
    "ul",
]
