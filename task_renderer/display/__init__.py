"""
Terminal display helpers for the task list renderer.

Glyphs, spinner frames, line formatting and icon selection. All public
symbols are re-exported here.
"""

from .core import (
    FALLBACK_FIGURES,
    FIGURE_STYLES,
    FIGURES,
    SKIPPED_MARKER,
    SPINNER_FRAMES,
    console,
    figure_table,
    supports_unicode,
)
from .lines import dump_output, format_line
from .symbols import SpinnerRegistry, get_symbol, stopped_symbol

__all__ = [
    "FALLBACK_FIGURES",
    "FIGURES",
    "FIGURE_STYLES",
    "SKIPPED_MARKER",
    "SPINNER_FRAMES",
    "SpinnerRegistry",
    "console",
    "dump_output",
    "figure_table",
    "format_line",
    "get_symbol",
    "stopped_symbol",
    "supports_unicode",
]
