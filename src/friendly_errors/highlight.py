"""Terminal syntax highlighting for excerpt lines, backed by Pygments."""

from __future__ import annotations

from functools import lru_cache

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound

_FORMATTER = TerminalFormatter()


@lru_cache(maxsize=64)
def lexer_for(file_path: str | None) -> Lexer | None:
    """Pick a lexer from the file name, or None when nothing matches."""
    if not file_path:
        return None
    try:
        return get_lexer_for_filename(file_path, stripnl=False, ensurenl=False)
    except ClassNotFound:
        return None


def highlight_line(line: str, file_path: str | None) -> str:
    """Colorize a single source line. Lines with no known lexer pass through."""
    lexer = lexer_for(file_path)
    if lexer is None or not line:
        return line
    return highlight(line, lexer, _FORMATTER).rstrip("\n")
