"""
Task list renderer — live, collapsible terminal view of a task tree.

Redraws a tree of tasks (pending, completed, failed, skipped) with their
streamed output, plus a bottom bar for retained log lines and a prompt bar
for interactive input.
"""

from .config import DEFAULT_RENDERER_OPTIONS, RendererOptions, TaskRendererOptions
from .renderer import DefaultRenderer
from .task import Task, TaskState, load_task_tree, load_task_tree_file

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_RENDERER_OPTIONS",
    "DefaultRenderer",
    "RendererOptions",
    "Task",
    "TaskRendererOptions",
    "TaskState",
    "load_task_tree",
    "load_task_tree_file",
]
