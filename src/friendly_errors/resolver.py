"""Line number to character offset resolution.

Offsets are 0-based character indexes into the text; line numbers are
1-based. Only ``\\n`` ends a line, so a ``\\r`` before it stays part of the
line it terminates.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from friendly_errors.errors import UnresolvedPositionError

logger = logging.getLogger(__name__)


class LineOffset(ABC):
    """Derived start offset of a line: unresolved, resolved, or invalid."""

    @abstractmethod
    def is_valid(self) -> bool:
        ...

    @abstractmethod
    def offset_or(self, default: int) -> int:
        """The offset, or *default* when the line did not resolve."""


@dataclass(frozen=True, slots=True)
class Unresolved(LineOffset):
    """Not computed yet. Reading it is a bug in the caller."""

    def is_valid(self) -> bool:
        raise UnresolvedPositionError("line offset read before it was resolved")

    def offset_or(self, default: int) -> int:
        raise UnresolvedPositionError("line offset read before it was resolved")


@dataclass(frozen=True, slots=True)
class Resolved(LineOffset):
    offset: int

    def is_valid(self) -> bool:
        return True

    def offset_or(self, default: int) -> int:
        return self.offset


@dataclass(frozen=True, slots=True)
class Invalid(LineOffset):
    """The line number was missing, zero, or past the end of the text."""

    def is_valid(self) -> bool:
        return False

    def offset_or(self, default: int) -> int:
        return default


UNRESOLVED = Unresolved()
INVALID = Invalid()


def _scan_for_line(text: str, line_number: int | None) -> Resolved | Invalid:
    if line_number is None or line_number < 1:
        return INVALID
    line = 1
    for index, ch in enumerate(text):
        if line == line_number:
            return Resolved(index)
        if ch == "\n":
            line += 1
    return INVALID


def resolve_line_start_index(text: str, line_number: int | None) -> Resolved | Invalid:
    """Return the offset of the first character of *line_number*."""
    result = _scan_for_line(text, line_number)
    logger.debug("line_start %s resolved to %s", line_number, result)
    return result


def resolve_line_end_start_index(text: str, line_number: int | None) -> Resolved | Invalid:
    """Return the offset of the first character of the region's last line."""
    result = _scan_for_line(text, line_number)
    logger.debug("line_end %s resolved to %s", line_number, result)
    return result


def line_count(text: str) -> int:
    """Number of lines that can be resolved in *text*."""
    if not text:
        return 0
    count = text.count("\n")
    return count if text.endswith("\n") else count + 1


def line_end_index(text: str, start: int) -> int:
    """Offset of the newline ending the line that contains *start*."""
    end = text.find("\n", start)
    return len(text) if end == -1 else end


def line_number_at(text: str, index: int) -> int:
    """1-based number of the line containing *index*."""
    return text.count("\n", 0, index) + 1
