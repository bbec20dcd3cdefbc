"""Document-level behaviours composed from the fragment builders.

These functions stay pure: they take plain values and return strings, so the
CLI adapters can print them and tests can compare them directly.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Final

from .blocks import HR, L, code_block, h1, h2, h3, h4, h5, h6, img, ol, quote, task, ul
from .control import doc, for_, if_, if_else
from .enums import FragmentKind
from .escaping import escape
from .inline import bold, code, italic, link, strikethrough

DEMO_TITLE: Final[str] = "mdfrag demo"

#: Sample snippet embedded in the demo document's code block.
DEMO_SNIPPET: Final[str] = 'print(bold("  hi  "))'

_DEMO_TASKS: Final[tuple[tuple[str, bool], ...]] = (
    ("escape punctuation", True),
    ("wrap emphasis inside whitespace", True),
    ("parse Markdown", False),
)

_VARIADIC_BUILDERS: Final[dict[FragmentKind, Callable[..., str]]] = {
    FragmentKind.H1: h1,
    FragmentKind.H2: h2,
    FragmentKind.H3: h3,
    FragmentKind.H4: h4,
    FragmentKind.H5: h5,
    FragmentKind.H6: h6,
    FragmentKind.QUOTE: quote,
    FragmentKind.UL: ul,
    FragmentKind.OL: ol,
    FragmentKind.BOLD: bold,
    FragmentKind.ITALIC: italic,
    FragmentKind.STRIKETHROUGH: strikethrough,
}


def render_fragment(kind: FragmentKind, texts: Sequence[str], *, escape_input: bool = False) -> str:
    r"""Apply the builder named by ``kind`` to ``texts``.

    Variadic builders receive every text as a separate fragment. ``code``
    takes a single argument, so the texts are joined first. Task items are
    rendered checked for :attr:`FragmentKind.TASK_DONE`.

    Args:
        kind: Builder to apply.
        texts: Raw text arguments in order.
        escape_input: Escape every text with :func:`escape` before formatting.

    Returns:
        The formatted fragment.

    Example:
        >>> render_fragment(FragmentKind.OL, ["a", "b"])
        '1. a\n2. b'
        >>> render_fragment(FragmentKind.BOLD, ["a.b"], escape_input=True)
        '**a\\.b**'
        >>> render_fragment(FragmentKind.TASK_DONE, ["ship"])
        '- [x] ship\n'
    """
    parts = [escape(text) for text in texts] if escape_input else list(texts)
    if kind is FragmentKind.CODE:
        return code("".join(parts))
    if kind in (FragmentKind.TASK, FragmentKind.TASK_DONE):
        return task(kind is FragmentKind.TASK_DONE, *parts)
    return _VARIADIC_BUILDERS[kind](*parts)


def build_demo_document(
    *,
    title: str = DEMO_TITLE,
    code_language: str = "python",
    show_roadmap: bool = True,
) -> str:
    """Compose a sample document that exercises every builder.

    Args:
        title: Text of the level 1 heading; escaped before use.
        code_language: Fence language of the embedded snippet.
        show_roadmap: Include the task list section.

    Returns:
        The complete Markdown document.

    Example:
        >>> build_demo_document(title="Hi").splitlines()[0]
        '# Hi'
    """
    headings = (h2, h3, h4, h5, h6)
    return doc(
        h1(escape(title)),
        quote("Fragments are plain strings; ", italic("compose"), " them by concatenation."),
        HR,
        h2("Inline"),
        ul(
            bold("  bold keeps its spaces  "),
            italic("italic"),
            strikethrough("struck"),
            code("code()"),
            link("https://commonmark.org", "CommonMark"),
        ),
        L,
        h2("Ordered"),
        ol(*(f"step {index}" for index in range(1, 4))),
        L,
        h2("Heading levels"),
        for_(enumerate(headings, start=2), lambda pair: pair[1](f"level {pair[0]}")),
        if_(
            show_roadmap,
            h2("Roadmap"),
            for_(_DEMO_TASKS, lambda item: task(item[1], item[0])),
        ),
        h2("Example"),
        code_block(code_language, DEMO_SNIPPET),
        img("logo.png", if_else(bool(title), escape(title), "logo")),
    )


__all__ = [
    "DEMO_SNIPPET",
    "DEMO_TITLE",
    "build_demo_document",
    "render_fragment",
]
