"""Boundary trimming and re-indentation for block string literals."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from blockstr.lines import UnindentedLine, join_lines, min_level, split_lines, unindent


class BoundaryPolicy(Enum):
    KEEP_BOTH = auto()  # content after the opening marker, content before the closing one
    DROP_FIRST = auto()  # opening marker ends its line
    DROP_LAST = auto()  # closing marker sits on its own indented line
    DROP_BOTH = auto()  # both of the above

    @property
    def keeps_first(self) -> bool:
        return self in (BoundaryPolicy.KEEP_BOTH, BoundaryPolicy.DROP_LAST)

    @property
    def keeps_last(self) -> bool:
        return self in (BoundaryPolicy.KEEP_BOTH, BoundaryPolicy.DROP_FIRST)


def boundary_policy(first_line: str, last_remainder: str) -> BoundaryPolicy:
    """Pick the policy from the raw first line and the unindented last line.

    The first line only counts as empty when it has no characters at all;
    the last line counts as empty when nothing is left after its leading
    spaces are removed.
    """
    if first_line == "":
        if last_remainder == "":
            return BoundaryPolicy.DROP_BOTH
        return BoundaryPolicy.DROP_FIRST
    if last_remainder == "":
        return BoundaryPolicy.DROP_LAST
    return BoundaryPolicy.KEEP_BOTH


@dataclass(frozen=True, slots=True)
class BlockLayout:
    """Analysis of a multi-line block: the raw first line plus the unindented body."""

    first_line: str
    body: tuple[UnindentedLine, ...]
    min_level: int
    policy: BoundaryPolicy

    def __post_init__(self) -> None:
        # A multi-line block always has at least one line after the first.
        assert self.body, "block layout requires a non-empty body"

    def kept_body(self) -> tuple[UnindentedLine, ...]:
        if self.policy.keeps_last:
            return self.body
        return self.body[:-1]

    def render(self) -> str:
        out: list[str] = []
        if self.policy.keeps_first:
            out.append(self.first_line)
        out.extend(line.reindent(self.min_level) for line in self.kept_body())
        return join_lines(out)


def analyze(text: str) -> BlockLayout | None:
    """Split *text* into a BlockLayout, or return None for single-line text."""
    lines = split_lines(text)
    if len(lines) == 1:
        return None

    first_line, rest = lines[0], lines[1:]
    body = tuple(unindent(line) for line in rest)
    return BlockLayout(
        first_line=first_line,
        body=body,
        min_level=min_level(body),
        policy=boundary_policy(first_line, body[-1].remainder),
    )


def reindent(text: str) -> str:
    """Normalize the contents of a block string literal.

    Algorithm:
    1. Split into lines on LF. Single-line text is returned unchanged.
    2. Unindent every line after the first and take the minimum level,
       including the closing line even if it is dropped later.
    3. Drop an exactly-empty first line and a last line that is empty
       after unindenting.
    4. Re-indent the kept body lines to the minimum level and rejoin,
       the first line (if kept) verbatim.
    """
    layout = analyze(text)
    if layout is None:
        return text
    return layout.render()
