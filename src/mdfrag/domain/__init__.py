"""Domain layer - pure fragment builders with no I/O or framework dependencies.

Contents:
    * :mod:`.escaping` - Backslash escaping of Markdown punctuation
    * :mod:`.blocks` - Headings, quotes, lists, tasks, images, code blocks
    * :mod:`.inline` - Boundary-aware emphasis, inline code, links
    * :mod:`.control` - Document assembly helpers (doc, if_, if_else, for_)
    * :mod:`.behaviors` - Named-fragment dispatch and the demo document
    * :mod:`.enums` - Domain enumerations (OutputFormat, FragmentKind)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import DEMO_SNIPPET, DEMO_TITLE, build_demo_document, render_fragment
from .blocks import HR, L, code_block, h1, h2, h3, h4, h5, h6, img, ol, quote, task, ul
from .control import doc, for_, if_, if_else
from .enums import FragmentKind, OutputFormat
from .errors import ConfigurationError
from .escaping import MARKDOWN_PUNCTUATION, escape
from .inline import (
    BOLD_MARKER,
    CODE_MARKER,
    ITALIC_MARKER,
    STRIKETHROUGH_MARKER,
    bold,
    code,
    italic,
    link,
    strikethrough,
    wrap_around,
)

__all__ = [
    # Escaping
    "MARKDOWN_PUNCTUATION",
    "escape",
    # Blocks
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
    # Inline
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
    # Control
    "doc",
    "for_",
    "if_",
    "if_else",
    # Behaviors
    "DEMO_SNIPPET",
    "DEMO_TITLE",
    "build_demo_document",
    "render_fragment",
    # Enums
    "FragmentKind",
    "OutputFormat",
    # Errors
    "ConfigurationError",
]
