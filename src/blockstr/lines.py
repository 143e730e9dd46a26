"""Line data structures and indentation helpers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

# Only LF separates lines; CR and the other splitlines() breaks are content.
LINE_SEP = "\n"
INDENT_CHAR = " "


@dataclass(frozen=True, slots=True)
class UnindentedLine:
    """A line split into its leading-space count and the text after it."""

    level: int
    remainder: str

    @property
    def is_empty(self) -> bool:
        return not self.remainder

    def reindent(self, min_level: int) -> str:
        """Rebuild the line relative to *min_level* (which must not exceed level)."""
        return INDENT_CHAR * (self.level - min_level) + self.remainder


def split_lines(text: str) -> list[str]:
    """Split text on LF only. Empty text yields a single empty line."""
    return text.split(LINE_SEP)


def join_lines(lines: Iterable[str]) -> str:
    return LINE_SEP.join(lines)


def unindent(line: str) -> UnindentedLine:
    """Count leading spaces (tabs are not indentation) and split them off."""
    remainder = line.lstrip(INDENT_CHAR)
    return UnindentedLine(len(line) - len(remainder), remainder)


def min_level(lines: Iterable[UnindentedLine]) -> int:
    """Return the smallest level among *lines*, which must be non-empty."""
    return min(line.level for line in lines)
