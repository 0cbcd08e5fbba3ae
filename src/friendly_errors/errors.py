"""Error types raised while building snippets and diagnostics."""

from __future__ import annotations


class SnippetError(Exception):
    """A code snippet could not be built from its configuration."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MissingStartPosition(SnippetError):
    """Neither ``index_start`` nor ``line_start`` was supplied."""

    def __init__(self) -> None:
        super().__init__("missing start position: set index_start or line_start")


class MissingEndPosition(SnippetError):
    """Neither ``index_end`` nor ``line_end`` was supplied."""

    def __init__(self) -> None:
        super().__init__("missing end position: set index_end or line_end")


class InvalidStartPosition(SnippetError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"invalid start position: {detail}")


class InvalidEndPosition(SnippetError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"invalid end position: {detail}")


class UnresolvedPositionError(RuntimeError):
    """A derived line offset was read before the resolve phase computed it.

    This signals a bug in the build sequence, never bad user input.
    """


class DiagnosticBuildError(Exception):
    """A diagnostic failed because one of its snippets failed to build."""

    def __init__(self, snippet_index: int, cause: SnippetError) -> None:
        self.snippet_index = snippet_index
        self.cause = cause
        super().__init__(f"code snippet #{snippet_index + 1}: {cause.message}")
