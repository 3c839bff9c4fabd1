"""
Icon selection for task lines, including the per-task spinner animation.
"""

from rich.text import Text

from ..config import RendererOptions
from .core import FIGURE_STYLES, FIGURES, SPINNER_FRAMES


class SpinnerRegistry:
    """Spinner animation positions, keyed by task id.

    Kept by the renderer so the task objects are never written to.
    """

    def __init__(self, frames: str = SPINNER_FRAMES):
        self._frames = frames
        self._positions: dict[str, int] = {}

    def __contains__(self, task_id: str) -> bool:
        return task_id in self._positions

    def __len__(self) -> int:
        return len(self._positions)

    def advance(self, task_id: str) -> str:
        """Step the task's spinner forward and return the new frame."""
        position = self._positions.get(task_id, -1) + 1
        self._positions[task_id] = position % len(self._frames)
        return self._frames[self._positions[task_id]]

    def frame(self, task_id: str) -> str | None:
        """Frame last shown for the task, or None if it never spun."""
        position = self._positions.get(task_id)
        return None if position is None else self._frames[position]

    def discard(self, task_id: str):
        self._positions.pop(task_id, None)


def _glyph(glyphs: dict[str, str], name: str, style: str | None = None) -> Text:
    return Text(glyphs[name], style=style or FIGURE_STYLES.get(name, ""))


def stopped_symbol(glyphs: dict[str, str] = FIGURES) -> Text:
    """Icon for a task halted because a sibling failed."""
    return _glyph(glyphs, "square_small_filled", FIGURE_STYLES["stopped"])


def get_symbol(
    task,
    options: RendererOptions,
    spinners: SpinnerRegistry,
    data: bool = False,
    glyphs: dict[str, str] = FIGURES,
) -> Text:
    """
    Pick the icon for a task's title line (``data=False``) or output line.

    Pending title lines advance the task's spinner by one frame.
    """
    if task.is_pending() and not data:
        if options.show_subtasks and task.has_subtasks():
            return _glyph(glyphs, "pointer")
        return Text(spinners.advance(task.id), style=FIGURE_STYLES["spinner"])

    if task.is_completed() and not data:
        if task.has_subtasks() and any(sub.is_failed() for sub in task.subtasks):
            return _glyph(glyphs, "warning")
        return _glyph(glyphs, "tick")

    if task.is_failed() and not data:
        if task.has_subtasks():
            return _glyph(glyphs, "pointer", "red")
        return _glyph(glyphs, "cross")

    if task.is_skipped():
        if not data and not options.collapse_skips:
            return _glyph(glyphs, "warning")
        return _glyph(glyphs, "arrow_down")

    if task.is_prompt():
        return _glyph(glyphs, "question_mark_prefix")

    if not data:
        return _glyph(glyphs, "square_small_filled")
    return Text(glyphs["pointer_small"])
