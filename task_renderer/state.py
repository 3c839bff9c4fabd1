"""
Renderer-owned state carried across render ticks.

Holds the bottom-bar buffers, the prompt slot, and the spinner positions.
Each renderer instance owns its own ``RenderState``.
"""

import logging
from dataclasses import dataclass, field

from rich.text import Text

from .config import capacity_from_hint
from .display.symbols import SpinnerRegistry

logger = logging.getLogger(__name__)


@dataclass
class BottomBarEntry:
    """Retained output lines of one task."""

    capacity: int | None = None
    lines: list[Text] = field(default_factory=list)

    def trim(self):
        if self.capacity is not None and len(self.lines) > self.capacity:
            self.lines = self.lines[-self.capacity :]


class BottomBarStore:
    """Bounded per-task output buffers shown below the task list."""

    def __init__(self):
        self._entries: dict[str, BottomBarEntry] = {}

    def __contains__(self, task_id: str) -> bool:
        return task_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def append(self, task_id: str, lines: list[Text], capacity_hint: bool | int | None = None):
        """
        Add output lines for a task, skipping lines already retained.

        The entry is created on first use; its capacity is fixed from
        ``capacity_hint`` at that moment and never changes afterwards.
        """
        entry = self._entries.get(task_id)
        if entry is None:
            entry = BottomBarEntry(capacity=capacity_from_hint(capacity_hint))
            self._entries[task_id] = entry
            logger.debug("Bottom bar entry created for %s (capacity=%s)", task_id, entry.capacity)

        retained = {line.plain for line in entry.lines}
        entry.lines.extend(line for line in lines if line.plain not in retained)

    def lines(self, task_id: str) -> list[Text]:
        entry = self._entries.get(task_id)
        return list(entry.lines) if entry else []

    def snapshot(self) -> list[Text]:
        """
        Trim every entry to its capacity and return the bar's lines.

        Lines come in entry insertion order behind one blank line. An empty
        store yields an empty list.
        """
        if not self._entries:
            return []

        rendered = [Text("")]
        for entry in self._entries.values():
            entry.trim()
            rendered.extend(entry.lines)
        return rendered

    def remove(self, task_id: str):
        if self._entries.pop(task_id, None) is not None:
            logger.debug("Bottom bar entry removed for %s", task_id)

    def clear(self):
        self._entries.clear()


class PromptSlot:
    """Holds the output of the task that is currently prompting, if any.

    The slot remembers which task filled it. A tick that visits no pending
    prompt task leaves the slot empty.
    """

    def __init__(self):
        self._owner: str | None = None
        self._content: str | None = None
        self._claimed = False

    def __bool__(self) -> bool:
        return bool(self._content)

    @property
    def content(self) -> str | None:
        return self._content

    @property
    def owner(self) -> str | None:
        return self._owner

    def set(self, owner: str, content: str):
        self._owner = owner
        self._content = content
        self._claimed = True

    def release(self, owner: str):
        """Clear the slot if ``owner`` filled it."""
        if self._owner == owner:
            self.clear()

    def clear(self):
        self._owner = None
        self._content = None

    def begin_tick(self):
        self._claimed = False

    def end_tick(self):
        if not self._claimed:
            self.clear()

    def render(self) -> list[Text]:
        """Prompt block: a blank separator line, then the prompt text."""
        if not self._content:
            return []
        return [Text(""), Text.from_ansi(self._content)]


@dataclass
class RenderState:
    """Everything a render tick reads and updates besides the task tree."""

    bottom_bar: BottomBarStore = field(default_factory=BottomBarStore)
    prompt: PromptSlot = field(default_factory=PromptSlot)
    spinners: SpinnerRegistry = field(default_factory=SpinnerRegistry)
