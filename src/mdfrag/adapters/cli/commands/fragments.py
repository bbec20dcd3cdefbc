"""Fragment commands: escape text, apply one builder, print the demo document.

Contents:
    * :func:`cli_escape` - Escape Markdown punctuation in text or stdin.
    * :func:`cli_format` - Apply a builder chosen by name.
    * :func:`cli_demo` - Print a sample document using every builder.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from mdfrag.adapters.render.config import RenderConfig
from mdfrag.domain.behaviors import build_demo_document, render_fragment
from mdfrag.domain.enums import FragmentKind
from mdfrag.domain.errors import ConfigurationError
from mdfrag.domain.escaping import escape

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _echo_fragment(fragment: str) -> None:
    """Print ``fragment`` verbatim, adding a newline only when it lacks one."""
    click.echo(fragment, nl=not fragment.endswith("\n"))


def _load_render_config(cli_ctx: CLIContext) -> RenderConfig:
    """Return the ``[mdfrag]`` settings, exiting with CONFIG_ERROR when invalid."""
    try:
        return cli_ctx.render_config()
    except ConfigurationError as exc:
        logger.error("Invalid render configuration", extra={"error": str(exc)})
        click.echo(f"\nError: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


@click.command("escape", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("text", nargs=-1)
def cli_escape(text: tuple[str, ...]) -> None:
    r"""Backslash-escape Markdown punctuation.

    Arguments are joined with single spaces. Without arguments the text is
    read from standard input.

    Example:
        >>> from click.testing import CliRunner
        >>> CliRunner().invoke(cli_escape, ["1.", "item"]).output  # doctest: +SKIP
        '1\\. item\n'
    """
    source = " ".join(text) if text else click.get_text_stream("stdin").read()
    with lib_log_rich.runtime.bind(job_id="cli-escape", extra={"command": "escape"}):
        logger.debug("Escaping text", extra={"chars": len(source)})
        _echo_fragment(escape(source))


@click.command("format", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("kind", type=click.Choice([k.value for k in FragmentKind], case_sensitive=False))
@click.argument("text", nargs=-1)
@click.option(
    "--escape/--no-escape",
    "escape_input",
    default=None,
    help="Escape Markdown punctuation in TEXT first (default: mdfrag.escape_input)",
)
@click.pass_context
def cli_format(ctx: click.Context, kind: str, text: tuple[str, ...], escape_input: bool | None) -> None:
    r"""Apply the builder KIND to TEXT and print the fragment.

    Each TEXT argument is passed as a separate fragment, so ``ul`` and ``ol``
    produce one item per argument.

    \b
    Examples:
        mdfrag format h2 Usage
        mdfrag format ul alpha beta gamma
        mdfrag format bold "  spaced  "
        mdfrag format task-done "write tests"
    """
    cli_ctx = get_cli_context(ctx)
    settings = _load_render_config(cli_ctx)
    fragment_kind = FragmentKind(kind.lower())
    should_escape = settings.escape_input if escape_input is None else escape_input

    extra = {"command": "format", "kind": fragment_kind.value}
    with lib_log_rich.runtime.bind(job_id="cli-format", extra=extra):
        logger.info("Formatting fragment", extra={"kind": fragment_kind.value, "escaped": should_escape})
        _echo_fragment(render_fragment(fragment_kind, text, escape_input=should_escape))


@click.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--title", type=str, default=None, help="Document title (default: mdfrag.demo_title)")
@click.option("--language", type=str, default=None, help="Code block language (default: mdfrag.code_language)")
@click.pass_context
def cli_demo(ctx: click.Context, title: str | None, language: str | None) -> None:
    """Print a sample Markdown document built from every fragment builder."""
    cli_ctx = get_cli_context(ctx)
    settings = _load_render_config(cli_ctx)

    with lib_log_rich.runtime.bind(job_id="cli-demo", extra={"command": "demo"}):
        logger.info("Rendering demo document", extra={"profile": cli_ctx.profile})
        document = build_demo_document(
            title=settings.demo_title if title is None else title,
            code_language=settings.code_language if language is None else language,
            show_roadmap=settings.show_roadmap,
        )
        _echo_fragment(document)


__all__ = [
    "cli_demo",
    "cli_escape",
    "cli_format",
]
