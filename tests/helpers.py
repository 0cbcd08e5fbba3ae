"""Shared test helpers for the friendly-errors test suite."""

from __future__ import annotations

import re

HELLO_WORLD = '\nfn main() {\n    println!("Hello, world!");\n}\n'

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove ANSI color sequences from rendered output."""
    return _ANSI.sub("", text)
