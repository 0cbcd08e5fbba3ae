"""ANSI styling shared by the header and snippet renderers."""

from __future__ import annotations

# ANSI color codes
BOLD_RED = "\033[1;31m"
BOLD_YELLOW = "\033[1;33m"
BOLD_CYAN = "\033[1;36m"
BOLD_BLUE = "\033[1;34m"
RESET = "\033[0m"


def paint(text: str, code: str, *, color: bool) -> str:
    """Wrap *text* in *code* when color output is on."""
    if not color or not text:
        return text
    return f"{code}{text}{RESET}"
