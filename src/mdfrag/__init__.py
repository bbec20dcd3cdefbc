"""Public package surface exposing the Markdown fragment builders.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: escaping, block/inline builders, composition helpers
- Composition exports: Wired adapter services (configuration)
- Metadata: Package information

Example:
    >>> from mdfrag import bold, doc, h1, ul
    >>> doc(h1("Notes"), ul(bold("a"), "b"))
    '# Notes\\n- **a**\\n- b'
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.blocks import HR, L, code_block, h1, h2, h3, h4, h5, h6, img, ol, quote, task, ul
from .domain.control import doc, for_, if_, if_else
from .domain.escaping import MARKDOWN_PUNCTUATION, escape
from .domain.inline import bold, code, italic, link, strikethrough, wrap_around

__all__ = [
    "HR",
    "L",
    "MARKDOWN_PUNCTUATION",
    "bold",
    "code",
    "code_block",
    "doc",
    "escape",
    "for_",
    "get_config",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "if_",
    "if_else",
    "img",
    "italic",
    "link",
    "ol",
    "print_info",
    "quote",
    "strikethrough",
    "task",
    "ul",
    "wrap_around",
]
