"""Compiler-style diagnostic messages with annotated source snippets."""

from __future__ import annotations

from friendly_errors.diagnostic import ErrorKind, FriendlyError
from friendly_errors.errors import (
    DiagnosticBuildError,
    InvalidEndPosition,
    InvalidStartPosition,
    MissingEndPosition,
    MissingStartPosition,
    SnippetError,
    UnresolvedPositionError,
)
from friendly_errors.layout import HighlightKind
from friendly_errors.resolver import (
    resolve_line_end_start_index,
    resolve_line_start_index,
)
from friendly_errors.snippet import CodeSnippet

__version__ = "0.1.0"

__all__ = [
    "CodeSnippet",
    "DiagnosticBuildError",
    "ErrorKind",
    "FriendlyError",
    "HighlightKind",
    "InvalidEndPosition",
    "InvalidStartPosition",
    "MissingEndPosition",
    "MissingStartPosition",
    "SnippetError",
    "UnresolvedPositionError",
    "resolve_line_end_start_index",
    "resolve_line_start_index",
]
