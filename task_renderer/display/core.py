"""
Core display components: console singleton, glyphs, and spinner frames.
"""

from rich.console import Console

# ─── Singleton Console ───────────────────────────────────────────

console = Console(highlight=False)

# ─── Constants ───────────────────────────────────────────────────

FIGURES = {
    "tick": "✔",
    "cross": "✖",
    "pointer": "❯",
    "pointer_small": "›",
    "warning": "⚠",
    "arrow_down": "↓",
    "question_mark_prefix": "?⃝",
    "square_small_filled": "◼",
}

# Used when the console cannot encode the unicode glyphs above
FALLBACK_FIGURES = {
    "tick": "√",
    "cross": "×",
    "pointer": ">",
    "pointer_small": "»",
    "warning": "‼",
    "arrow_down": "↓",
    "question_mark_prefix": "？",
    "square_small_filled": "■",
}

FIGURE_STYLES = {
    "tick": "green",
    "cross": "red",
    "pointer": "yellow",
    "warning": "yellow",
    "arrow_down": "yellow",
    "question_mark_prefix": "cyan",
    "square_small_filled": "dim",
    "spinner": "bright_yellow",
    "stopped": "red",
}

SPINNER_FRAMES = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"

SKIPPED_MARKER = "[SKIPPED]"


def supports_unicode(target: Console | None = None) -> bool:
    """Return True when the console encoding can represent the unicode glyphs."""
    encoding = (target if target is not None else console).encoding or ""
    return encoding.lower().startswith("utf")


def figure_table(target: Console | None = None) -> dict[str, str]:
    """Pick the glyph table the console can display."""
    return FIGURES if supports_unicode(target) else FALLBACK_FIGURES
