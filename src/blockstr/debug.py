"""--debug block analysis dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from blockstr.reindent import BlockLayout, analyze


def dump_layout(text: str, *, file: TextIO | None = None) -> None:
    """Print a human-readable analysis of *text* to *file* (default: stderr)."""
    if file is None:
        file = sys.stderr
    layout = analyze(text)
    if layout is None:
        file.write(f"SingleLine({text!r}) unchanged\n")
        return
    _dump_block(layout, file)


def _status(kept: bool) -> str:
    return "keep" if kept else "drop"


def _dump_block(layout: BlockLayout, f: TextIO) -> None:
    f.write(f"Block policy={layout.policy.name} min_level={layout.min_level}\n")
    f.write(f"  {_status(layout.policy.keeps_first)} first {layout.first_line!r}\n")
    last = len(layout.body) - 1
    for i, line in enumerate(layout.body):
        kept = i != last or layout.policy.keeps_last
        f.write(
            f"  {_status(kept)} {i + 2:>5} level={line.level} "
            f"remainder={line.remainder!r}\n"
        )
