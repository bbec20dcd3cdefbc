"""Domain enum tests: member values, string equality, and exhaustive member counts."""

from __future__ import annotations

import pytest

from mdfrag.domain.enums import FragmentKind, OutputFormat

# ======================== OutputFormat ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "expected_value"),
    [
        (OutputFormat.HUMAN, "human"),
        (OutputFormat.JSON, "json"),
    ],
)
def test_output_format_member_values(member: OutputFormat, expected_value: str) -> None:
    """Each OutputFormat member must have the expected string value."""
    assert member.value == expected_value


@pytest.mark.os_agnostic
def test_output_format_string_equality() -> None:
    """OutputFormat members must compare equal to their plain string equivalents."""
    assert OutputFormat.HUMAN == "human"
    assert OutputFormat.JSON == "json"


@pytest.mark.os_agnostic
def test_output_format_member_count() -> None:
    """OutputFormat must have exactly 2 members."""
    assert len(OutputFormat) == 2


# ======================== FragmentKind ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "expected_value"),
    [
        (FragmentKind.H1, "h1"),
        (FragmentKind.H6, "h6"),
        (FragmentKind.QUOTE, "quote"),
        (FragmentKind.UL, "ul"),
        (FragmentKind.OL, "ol"),
        (FragmentKind.BOLD, "bold"),
        (FragmentKind.ITALIC, "italic"),
        (FragmentKind.STRIKETHROUGH, "strikethrough"),
        (FragmentKind.CODE, "code"),
        (FragmentKind.TASK, "task"),
        (FragmentKind.TASK_DONE, "task-done"),
    ],
)
def test_fragment_kind_member_values(member: FragmentKind, expected_value: str) -> None:
    """Each FragmentKind member must have the expected string value."""
    assert member.value == expected_value


@pytest.mark.os_agnostic
def test_fragment_kind_lookup_by_value() -> None:
    """CLI choices resolve back to members through the value constructor."""
    assert FragmentKind("task-done") is FragmentKind.TASK_DONE


@pytest.mark.os_agnostic
def test_fragment_kind_member_count() -> None:
    """FragmentKind must have exactly 15 members."""
    assert len(FragmentKind) == 15
