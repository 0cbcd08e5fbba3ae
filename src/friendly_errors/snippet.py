"""Code snippet configuration and the resolve/validate/render build."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from friendly_errors.errors import (
    InvalidEndPosition,
    InvalidStartPosition,
    MissingEndPosition,
    MissingStartPosition,
)
from friendly_errors.layout import (
    HighlightKind,
    indent_size,
    render_caption,
    render_excerpt,
    render_location,
)
from friendly_errors.resolver import (
    UNRESOLVED,
    LineOffset,
    line_end_index,
    resolve_line_end_start_index,
    resolve_line_start_index,
)

logger = logging.getLogger(__name__)


@dataclass
class DerivedPositions:
    """Line offsets computed during the resolve phase of a build."""

    line_start_start_index: LineOffset = UNRESOLVED
    line_end_start_index: LineOffset = UNRESOLVED


@dataclass(frozen=True)
class CodeSnippet:
    """A highlighted region of one file's text.

    Configure it with the ``with_*`` methods, each returning a new snippet,
    then call :meth:`build`. The start of the region comes from
    ``index_start`` or ``line_start`` and the end from ``index_end`` or
    ``line_end``; the two forms can be mixed.
    """

    file_contents: str
    file_path: str | None = None
    index_start: int | None = None
    index_end: int | None = None
    line_start: int | None = None
    line_end: int | None = None
    kind: HighlightKind = HighlightKind.ERROR
    caption: str | None = None

    # ── Configure ─────────────────────────────────────────────────

    def with_file_path(self, file_path: str) -> CodeSnippet:
        return replace(self, file_path=file_path)

    def with_index_start(self, index_start: int) -> CodeSnippet:
        return replace(self, index_start=index_start)

    def with_index_end(self, index_end: int) -> CodeSnippet:
        return replace(self, index_end=index_end)

    def with_line_start(self, line_start: int) -> CodeSnippet:
        return replace(self, line_start=line_start)

    def with_line_end(self, line_end: int) -> CodeSnippet:
        return replace(self, line_end=line_end)

    def with_kind(self, kind: HighlightKind) -> CodeSnippet:
        return replace(self, kind=kind)

    def with_caption(self, caption: str) -> CodeSnippet:
        return replace(self, caption=caption)

    # ── Build ─────────────────────────────────────────────────────

    def build(self, *, color: bool = False) -> str:
        """Resolve, validate and render the snippet.

        Raises a :class:`~friendly_errors.errors.SnippetError` subclass when
        a position is missing, names a line outside the file, or puts the
        end line before the start line.
        """
        positions = DerivedPositions()
        self.resolve(positions)
        self.validate(positions)
        return self.render(positions, color=color)

    def resolve(self, positions: DerivedPositions) -> None:
        text = self.file_contents
        positions.line_start_start_index = resolve_line_start_index(text, self.line_start)
        positions.line_end_start_index = resolve_line_end_start_index(text, self.line_end)

    def validate(self, positions: DerivedPositions) -> None:
        start = positions.line_start_start_index
        end = positions.line_end_start_index
        start_valid = start.is_valid()
        end_valid = end.is_valid()

        if self.index_start is None and self.line_start is None:
            raise MissingStartPosition()
        if self.line_start is not None and not start_valid:
            raise InvalidStartPosition(f"line {self.line_start} is not in the file")

        if self.index_end is None and self.line_end is None:
            raise MissingEndPosition()
        if self.line_end is not None and not end_valid:
            raise InvalidEndPosition(f"line {self.line_end} is not in the file")

        if start_valid and end_valid and start.offset_or(0) > end.offset_or(0):
            raise InvalidEndPosition(
                f"line {self.line_end} comes before line {self.line_start}"
            )

    def render(self, positions: DerivedPositions, *, color: bool = False) -> str:
        indent = indent_size(
            positions.line_start_start_index.offset_or(self.index_start or 0),
            positions.line_end_start_index.offset_or(self.index_end or 0),
        )
        region_start, region_end = self._region(positions)
        logger.debug(
            "rendering %s snippet over [%d, %d) with indent %d",
            self.kind.value, region_start, region_end, indent,
        )
        return (
            render_location(indent, self.file_path, self.line_start, self.index_start)
            + render_caption(indent, self.caption, color=color)
            + render_excerpt(
                self.file_contents,
                region_start,
                region_end,
                indent=indent,
                kind=self.kind,
                file_path=self.file_path,
                color=color,
            )
        )

    def _region(self, positions: DerivedPositions) -> tuple[int, int]:
        """Excerpt ``[start, end)`` offsets; index form wins when given.

        Offsets are clamped to the text and put in order, so a region the
        caller supplied backwards or past the end still renders.
        """
        if self.index_start is not None:
            start = self.index_start
        else:
            start = positions.line_start_start_index.offset_or(0)
        if self.index_end is not None:
            end = self.index_end
        else:
            end = line_end_index(
                self.file_contents, positions.line_end_start_index.offset_or(0)
            )
        length = len(self.file_contents)
        start, end = (min(max(offset, 0), length) for offset in (start, end))
        return min(start, end), max(start, end)
