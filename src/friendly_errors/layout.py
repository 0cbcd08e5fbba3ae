"""Text layout for a code snippet: location, caption, and source excerpt."""

from __future__ import annotations

from enum import Enum

from friendly_errors.highlight import highlight_line
from friendly_errors.resolver import line_end_index, line_number_at
from friendly_errors.styles import BOLD_BLUE, BOLD_CYAN, BOLD_RED, BOLD_YELLOW, paint

MIN_INDENT = 4


class HighlightKind(Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @property
    def marker(self) -> str:
        return _MARKERS[self]

    @property
    def style(self) -> str:
        return _STYLES[self]


_MARKERS = {
    HighlightKind.ERROR: "^",
    HighlightKind.WARNING: "~",
    HighlightKind.INFO: "-",
}

_STYLES = {
    HighlightKind.ERROR: BOLD_RED,
    HighlightKind.WARNING: BOLD_YELLOW,
    HighlightKind.INFO: BOLD_CYAN,
}


def digit_count(value: int) -> int:
    return len(str(abs(value)))


def indent_size(*offsets: int) -> int:
    """Gutter width for the largest offset: its digits plus one, at least 4."""
    largest = max(offsets, default=0)
    return max(digit_count(largest) + 1, MIN_INDENT)


def render_location(
    indent: int,
    file_path: str | None = None,
    line_start: int | None = None,
    index_start: int | None = None,
) -> str:
    """``<indent>path:line:index`` with only the fields that are present."""
    parts = [str(p) for p in (file_path, line_start, index_start) if p is not None]
    if not parts:
        return ""
    return " " * indent + ":".join(parts) + "\n"


def render_caption(indent: int, caption: str | None, *, color: bool = False) -> str:
    if caption is None:
        return ""
    arrow = paint("-->", BOLD_BLUE, color=color)
    return " " * max(indent - 2, 0) + f"{arrow} {caption}\n"


def render_excerpt(
    text: str,
    start: int,
    end: int,
    *,
    indent: int,
    kind: HighlightKind = HighlightKind.ERROR,
    file_path: str | None = None,
    color: bool = False,
) -> str:
    """Render the lines covering ``text[start:end]`` with a gutter and underline.

    Each line is prefixed by its number, right-aligned in ``indent - 2``
    columns, and `` | ``. Lines holding highlighted characters are followed
    by an underline of ``kind.marker``. A region with no visible characters
    (empty, or only newlines) still gets a single marker at *start*.
    """
    first_line = line_number_at(text, start)
    last_line = line_number_at(text, end - 1) if end > start else first_line
    width = max(indent - 2, digit_count(last_line))
    point = not text[start:end].replace("\n", "")

    def gutter(label: str = "") -> str:
        return paint(f"{label:>{width}} |", BOLD_BLUE, color=color)

    lines = [gutter()]
    number = first_line
    line_begin = text.rfind("\n", 0, start) + 1
    while True:
        line_stop = line_end_index(text, line_begin)
        source = text[line_begin:line_stop].rstrip("\r")
        code = highlight_line(source, file_path) if color else source
        lines.append(f"{gutter(str(number))} {code}" if code else gutter(str(number)))

        mark_from = max(start, line_begin) - line_begin
        mark_to = min(end, line_stop) - line_begin
        if point and number == first_line:
            mark_to = mark_from + 1
        if mark_to > mark_from:
            padding = "".join("\t" if ch == "\t" else " " for ch in source[:mark_from])
            markers = paint(kind.marker * (mark_to - mark_from), kind.style, color=color)
            lines.append(f"{gutter()} {padding}{markers}")

        if end <= line_stop + 1 or line_stop >= len(text):
            break
        line_begin = line_stop + 1
        number += 1

    return "\n".join(lines) + "\n"
