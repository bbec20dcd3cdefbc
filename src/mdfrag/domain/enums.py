"""Type-safe domain enums for output formats and fragment kinds."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class FragmentKind(str, Enum):
    """Builders reachable by name from the ``format`` command.

    ``TASK`` and ``TASK_DONE`` select the unchecked and checked variants of
    the task-list item.

    Example:
        >>> FragmentKind("task-done") is FragmentKind.TASK_DONE
        True
        >>> FragmentKind.BOLD == "bold"
        True
    """

    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    H5 = "h5"
    H6 = "h6"
    QUOTE = "quote"
    UL = "ul"
    OL = "ol"
    BOLD = "bold"
    ITALIC = "italic"
    STRIKETHROUGH = "strikethrough"
    CODE = "code"
    TASK = "task"
    TASK_DONE = "task-done"


__all__ = [
    "FragmentKind",
    "OutputFormat",
]
