"""
Task tree rendering.

Walks the task forest once per tick and decides which titles and output
lines are visible, how deep they are indented, and which output goes to
the bottom bar or the prompt slot instead of inline.

Visibility rules live in the small predicates below so that each one can
be checked on its own; ``TreeRenderer`` only composes them.
"""

from rich.text import Text

from .config import (
    DEFAULT_RENDERER_OPTIONS,
    RendererOptions,
    TaskRendererOptions,
    get_task_options,
)
from .display.core import FIGURES, SKIPPED_MARKER
from .display.lines import dump_output, format_line
from .display.symbols import get_symbol, stopped_symbol
from .state import RenderState

# ─── Visibility Predicates ───────────────────────────────────────


def is_halted_by_sibling(task, siblings) -> bool:
    """True when a failed sibling stopped this task before it could finish."""
    return (
        any(sibling.is_failed() for sibling in siblings)
        and not task.is_failed()
        and getattr(task, "exit_on_error", True) is not False
        and not (task.is_completed() or task.is_skipped())
    )


def routes_to_bottom_bar(task, task_options: TaskRendererOptions) -> bool:
    # Untitled tasks always go to the bottom bar, even with persistent_output
    return task_options.is_bottom_bar or not task.has_title()


def shows_inline_output(task, task_options: TaskRendererOptions, options: RendererOptions) -> bool:
    if task.is_pending() or task_options.persistent_output:
        return True
    return task.is_skipped() and not options.collapse_skips


def should_expand_subtree(task, options: RendererOptions) -> bool:
    """Whether the task's subtasks are rendered below it."""
    if not options.show_subtasks or not task.has_subtasks():
        return False

    if task.is_pending() or task.is_failed():
        return True

    if not task.is_completed():
        return False

    subtask_options = [get_task_options(subtask) for subtask in task.subtasks]
    return (
        not task.has_title()
        or (not options.collapse and not any(o.collapse is True for o in subtask_options))
        or any(o.collapse is False for o in subtask_options)
        or any(subtask.is_failed() for subtask in task.subtasks)
    )


def keeps_bottom_bar_entry(task, task_options: TaskRendererOptions) -> bool:
    """Whether a finished task's bottom-bar lines stay on screen."""
    if task.is_failed():
        return False
    return task_options.persistent_output and not task_options.is_bottom_bar


def last_output_line(output: str | None) -> str | None:
    if not isinstance(output, str):
        return None
    lines = [line for line in output.split("\n") if line.strip()]
    return lines[-1] if lines else None


def visible_title(task, options: RendererOptions) -> str | Text:
    """The title as shown: collapsed skipped tasks show their last output line."""
    if task.is_skipped() and options.collapse_skips:
        title = Text.from_ansi(last_output_line(task.output) or task.title)
        title.append(" ")
        title.append(SKIPPED_MARKER, style="dim")
        return title
    return task.title


# ─── Renderer ────────────────────────────────────────────────────


class TreeRenderer:
    """Turns a task forest into display lines."""

    def __init__(
        self,
        options: RendererOptions = DEFAULT_RENDERER_OPTIONS,
        glyphs: dict[str, str] = FIGURES,
    ):
        self.options = options
        self.glyphs = glyphs

    def render(self, tasks, state: RenderState, width: int | None = None) -> list[Text]:
        """
        Render one tick of the whole forest.

        Bottom-bar output and prompt content are recorded in ``state``
        rather than returned.

        Returns:
            The visible lines in document order, or an empty list.
        """
        state.prompt.begin_tick()
        lines = self.render_level(tasks, state, 0, width)
        state.prompt.end_tick()
        return lines

    def render_text(self, tasks, state: RenderState, width: int | None = None) -> Text | None:
        lines = self.render(tasks, state, width)
        if not lines:
            return None
        return Text("\n").join(lines)

    def render_level(self, tasks, state: RenderState, level: int, width: int | None) -> list[Text]:
        output: list[Text] = []

        for task in tasks:
            if not task.is_enabled():
                continue

            task_options = get_task_options(task)

            if task.has_title():
                output.append(self._render_title(task, tasks, state, level, width))

            if task.output:
                output.extend(self._render_output(task, task_options, state, level, width))

            if should_expand_subtree(task, self.options):
                subtask_level = level if not task.has_title() else level + 1
                output.extend(self.render_level(task.subtasks, state, subtask_level, width))

            if task.is_completed() or task.is_failed():
                self._finish(task, task_options, state)

        return output

    def _render_title(
        self, task, siblings, state: RenderState, level: int, width: int | None
    ) -> Text:
        if is_halted_by_sibling(task, siblings):
            icon = stopped_symbol(self.glyphs)
        else:
            icon = get_symbol(task, self.options, state.spinners, glyphs=self.glyphs)
        title = visible_title(task, self.options)
        return format_line(title, icon, level, self.options.indentation, width)

    def _render_output(
        self,
        task,
        task_options: TaskRendererOptions,
        state: RenderState,
        level: int,
        width: int | None,
    ) -> list[Text]:
        if task.is_pending() and task.is_prompt():
            state.prompt.set(task.id, task.output)
            return []

        if routes_to_bottom_bar(task, task_options):
            state.bottom_bar.append(
                task.id,
                self._dump(task, state, -1, width),
                task_options.bottom_bar,
            )
            return []

        if shows_inline_output(task, task_options, self.options):
            return self._dump(task, state, level, width)

        return []

    def _dump(self, task, state: RenderState, level: int, width: int | None) -> list[Text]:
        icon = get_symbol(task, self.options, state.spinners, data=True, glyphs=self.glyphs)
        return dump_output(task.output, icon, level, self.options.indentation, width)

    def _finish(self, task, task_options: TaskRendererOptions, state: RenderState):
        state.prompt.release(task.id)
        state.spinners.discard(task.id)
        if not keeps_bottom_bar_entry(task, task_options):
            state.bottom_bar.remove(task.id)
