"""Re-indentation of multi-line block string literals."""

from __future__ import annotations

from blockstr.reindent import analyze, reindent

__version__ = "0.1.0"

__all__ = ["analyze", "reindent", "__version__"]
