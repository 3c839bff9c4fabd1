"""
Task tree model read by the renderer.

The renderer only needs the read-side capabilities (``is_pending()``,
``output``, ``subtasks``...). The transitions on ``Task`` are what a task
engine calls as work progresses; the renderer never calls them.
"""

import json
import uuid
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .config import TaskRendererOptions
from .validators import validate_task_tree


class TaskState(str, Enum):
    WAITING = "waiting"
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    SKIPPED = "skipped"


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(eq=False)
class Task:
    """A single node of the task tree."""

    title: str | None = None
    output: str | None = None
    state: TaskState = TaskState.WAITING
    subtasks: list["Task"] = field(default_factory=list)
    enabled: bool = True
    exit_on_error: bool = True
    prompt: bool = False
    renderer_options: TaskRendererOptions = field(default_factory=TaskRendererOptions)
    id: str = field(default_factory=_new_id)

    # ── Read side ──

    def is_enabled(self) -> bool:
        return self.enabled

    def has_title(self) -> bool:
        return bool(self.title)

    def has_subtasks(self) -> bool:
        return len(self.subtasks) > 0

    def is_pending(self) -> bool:
        return self.state is TaskState.PENDING

    def is_completed(self) -> bool:
        return self.state is TaskState.COMPLETED

    def is_failed(self) -> bool:
        return self.state is TaskState.FAILED

    def is_skipped(self) -> bool:
        return self.state is TaskState.SKIPPED

    def is_prompt(self) -> bool:
        return self.prompt

    # ── Transitions (engine side) ──

    def start(self):
        self.state = TaskState.PENDING

    def report(self, output: str):
        """Replace the task's current output."""
        self.output = output

    def complete(self):
        self.prompt = False
        self.state = TaskState.COMPLETED

    def fail(self, output: str | None = None):
        if output is not None:
            self.output = output
        self.prompt = False
        self.state = TaskState.FAILED

    def skip(self, reason: str | None = None):
        if reason is not None:
            self.output = reason
        self.state = TaskState.SKIPPED

    def ask(self, prompt_text: str):
        """Turn the task into an interactive prompt showing ``prompt_text``."""
        self.prompt = True
        self.output = prompt_text

    def answer(self):
        self.prompt = False

    # ── Serialization ──

    def to_dict(self) -> dict:
        d = {"id": self.id, "state": self.state.value}
        if self.title:
            d["title"] = self.title
        if self.output is not None:
            d["output"] = self.output
        if not self.enabled:
            d["enabled"] = False
        if not self.exit_on_error:
            d["exit_on_error"] = False
        if self.prompt:
            d["prompt"] = True
        options = self.renderer_options.to_dict()
        if options:
            d["renderer_options"] = options
        if self.subtasks:
            d["subtasks"] = [t.to_dict() for t in self.subtasks]
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "Task":
        task = cls(
            title=d.get("title"),
            output=d.get("output"),
            state=TaskState(d.get("state", TaskState.WAITING.value)),
            subtasks=[cls.from_dict(t) for t in d.get("subtasks", [])],
            enabled=d.get("enabled", True),
            exit_on_error=d.get("exit_on_error", True),
            prompt=d.get("prompt", False),
            renderer_options=TaskRendererOptions.from_dict(d.get("renderer_options")),
        )
        if d.get("id"):
            task.id = str(d["id"])
        return task


# ─── Loading ─────────────────────────────────────────────────────


def load_task_tree(data: list[dict]) -> list[Task]:
    """
    Build a task forest from a list of task dicts.

    Raises:
        ValueError: If the data fails validation.
    """
    result = validate_task_tree(data)
    if not result.ok:
        raise ValueError("Invalid task tree: " + "; ".join(result.errors))
    return [Task.from_dict(d) for d in data]


def load_task_tree_file(path: Path) -> list[Task]:
    """
    Load a task forest from a JSON file.

    The file holds either a list of tasks or an object with a ``tasks`` list.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the content is not a valid task tree.
    """
    if not path.exists():
        raise FileNotFoundError(f"Task file not found: {path}")

    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("tasks")
    return load_task_tree(data)
