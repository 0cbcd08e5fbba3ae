"""Assembly of a full diagnostic: header, prose sections, snippets, docs link."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum

from friendly_errors.errors import DiagnosticBuildError, SnippetError
from friendly_errors.snippet import CodeSnippet
from friendly_errors.styles import BOLD_CYAN, BOLD_RED, BOLD_YELLOW, paint

logger = logging.getLogger(__name__)

HEADER_WIDTH = 80


class ErrorKind(Enum):
    ERROR = "Error"
    WARNING = "Warning"
    IMPROVEMENT = "Improvement"
    CODE_STYLE = "Code style"


_COLORS = {
    ErrorKind.ERROR: BOLD_RED,
    ErrorKind.WARNING: BOLD_YELLOW,
    ErrorKind.IMPROVEMENT: BOLD_CYAN,
    ErrorKind.CODE_STYLE: BOLD_CYAN,
}


def render_header(
    kind: ErrorKind,
    error_code: str | None = None,
    title: str | None = None,
    *,
    width: int = HEADER_WIDTH,
    color: bool = False,
) -> str:
    """``--- Label(code): title ---...`` filled with dashes up to *width*."""
    label = f"--- {kind.value}"
    if error_code is not None:
        label += f"({error_code})"
    rest = f": {title} " if title is not None else " "
    fill = "-" * max(width - len(label) - len(rest), 0)
    return paint(label, _COLORS[kind], color=color) + rest + fill


@dataclass(frozen=True)
class FriendlyError:
    """A diagnostic message made of a header and optional sections.

    Sections are emitted in a fixed order (summary, description, snippets,
    docs link), each separated from the previous one by a blank line.
    """

    kind: ErrorKind = ErrorKind.ERROR
    title: str | None = None
    error_code: str | None = None
    summary: str | None = None
    description: str | None = None
    doc_url: str | None = None
    code_snippets: tuple[CodeSnippet, ...] = ()

    def with_kind(self, kind: ErrorKind) -> FriendlyError:
        return replace(self, kind=kind)

    def with_title(self, title: str) -> FriendlyError:
        return replace(self, title=title)

    def with_error_code(self, error_code: str) -> FriendlyError:
        return replace(self, error_code=error_code)

    def with_summary(self, summary: str) -> FriendlyError:
        return replace(self, summary=summary)

    def with_description(self, description: str) -> FriendlyError:
        return replace(self, description=description)

    def with_doc_url(self, doc_url: str) -> FriendlyError:
        return replace(self, doc_url=doc_url)

    def with_code_snippet(self, snippet: CodeSnippet) -> FriendlyError:
        return replace(self, code_snippets=self.code_snippets + (snippet,))

    def build(self, *, color: bool = False, header_width: int = HEADER_WIDTH) -> str:
        """Render the diagnostic. Raises DiagnosticBuildError if a snippet fails."""
        sections = [
            render_header(
                self.kind, self.error_code, self.title, width=header_width, color=color
            ),
            self.summary,
            self.description,
        ]
        for i, snippet in enumerate(self.code_snippets):
            try:
                block = snippet.build(color=color)
            except SnippetError as e:
                logger.debug("snippet %d failed: %s", i, e)
                raise DiagnosticBuildError(i, e) from e
            sections.append(block.rstrip("\n"))
        if self.doc_url is not None:
            sections.append(f"To learn more, read the docs at {self.doc_url}")
        return join_sections(sections)


def join_sections(sections: list[str | None]) -> str:
    """Join the non-empty sections with one blank line between each."""
    output = ""
    for section in sections:
        if not section:
            continue
        if output:
            output += "\n\n"
        output += section
    return output
