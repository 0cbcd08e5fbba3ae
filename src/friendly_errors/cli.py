"""friendly-errors command line interface."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from friendly_errors import __version__
from friendly_errors.config import ColorMode, discover_config
from friendly_errors.diagnostic import ErrorKind, FriendlyError
from friendly_errors.errors import DiagnosticBuildError
from friendly_errors.layout import HighlightKind
from friendly_errors.resolver import resolve_line_start_index
from friendly_errors.snippet import CodeSnippet

_SEVERITIES = {
    "error": ErrorKind.ERROR,
    "warning": ErrorKind.WARNING,
    "improvement": ErrorKind.IMPROVEMENT,
    "code-style": ErrorKind.CODE_STYLE,
}


def _read_source(file: str) -> str:
    try:
        return Path(file).read_text()
    except (OSError, UnicodeDecodeError) as e:
        click.echo(f"error: cannot read {file}: {e}", err=True)
        raise SystemExit(1)


@click.group()
@click.version_option(__version__, prog_name="friendly-errors")
@click.option("-v", "--verbose", is_flag=True, help="Log resolution details to stderr.")
def main(verbose: bool) -> None:
    """Render compiler-style diagnostics for a region of a source file."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--line-start", type=int, default=None, help="First line of the region (1-based).")
@click.option("--line-end", type=int, default=None, help="Last line of the region (1-based).")
@click.option("--index-start", type=int, default=None, help="Start character offset.")
@click.option("--index-end", type=int, default=None, help="End character offset (exclusive).")
@click.option(
    "--kind",
    type=click.Choice([k.value for k in HighlightKind]),
    default=HighlightKind.ERROR.value,
    help="Underline style of the highlighted region.",
)
@click.option(
    "--severity",
    type=click.Choice(list(_SEVERITIES)),
    default="error",
    help="Severity shown in the header.",
)
@click.option("--caption", default=None, help="Caption shown next to the region.")
@click.option("--title", default=None, help="Header title.")
@click.option("--code", "error_code", default=None, help="Error code, e.g. E0001.")
@click.option("--summary", default=None)
@click.option("--description", default=None)
@click.option("--doc-url", default=None, help="Link printed at the end of the message.")
@click.option(
    "--color",
    type=click.Choice([m.value for m in ColorMode]),
    default=None,
    help="Override the color mode from friendly.toml.",
)
def render(
    file: str,
    line_start: int | None,
    line_end: int | None,
    index_start: int | None,
    index_end: int | None,
    kind: str,
    severity: str,
    caption: str | None,
    title: str | None,
    error_code: str | None,
    summary: str | None,
    description: str | None,
    doc_url: str | None,
    color: str | None,
) -> None:
    """Print a diagnostic pointing at a region of FILE."""
    try:
        config = discover_config()
    except (ValueError, OSError) as e:
        click.echo(f"error: {e}", err=True)
        raise SystemExit(1)

    mode = ColorMode(color) if color else config.render.color
    use_color = mode.enabled(click.get_text_stream("stdout").isatty())

    snippet = CodeSnippet(_read_source(file), file_path=file, kind=HighlightKind(kind))
    if line_start is not None:
        snippet = snippet.with_line_start(line_start)
    if line_end is not None:
        snippet = snippet.with_line_end(line_end)
    if index_start is not None:
        snippet = snippet.with_index_start(index_start)
    if index_end is not None:
        snippet = snippet.with_index_end(index_end)
    if caption is not None:
        snippet = snippet.with_caption(caption)

    diagnostic = FriendlyError(
        kind=_SEVERITIES[severity],
        title=title,
        error_code=error_code,
        summary=summary,
        description=description,
        doc_url=doc_url,
    ).with_code_snippet(snippet)

    try:
        output = diagnostic.build(color=use_color, header_width=config.render.header_width)
    except DiagnosticBuildError as e:
        click.echo(f"error: {e}", err=True)
        raise SystemExit(1)
    click.echo(output, color=use_color)


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.argument("line", type=int)
def locate(file: str, line: int) -> None:
    """Print the character offset at which LINE of FILE starts."""
    offset = resolve_line_start_index(_read_source(file), line)
    if not offset.is_valid():
        click.echo(f"error: line {line} is out of range", err=True)
        raise SystemExit(1)
    click.echo(offset.offset_or(0))
