"""
Renderer configuration for the task list display.

Global options are fixed for the renderer's lifetime; per-task overrides
are looked up on every render tick.
"""

import logging
from dataclasses import asdict, dataclass, fields

from .validators import validate_renderer_options, validate_task_options

logger = logging.getLogger(__name__)

# Seconds between two repaints of the live display
REFRESH_INTERVAL = 0.1


@dataclass(frozen=True)
class RendererOptions:
    """Global renderer options."""

    indentation: int = 2
    clear_output: bool = False
    show_subtasks: bool = True
    collapse: bool = True
    collapse_skips: bool = True

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict | None) -> "RendererOptions":
        """Build options from a mapping, raising ValueError on invalid values."""
        if not d:
            return cls()
        result = validate_renderer_options(d)
        if not result.ok:
            raise ValueError("Invalid renderer options: " + "; ".join(result.errors))
        for warning in result.warnings:
            logger.warning(warning)
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in d.items() if k in known})


DEFAULT_RENDERER_OPTIONS = RendererOptions()


def capacity_from_hint(hint: bool | int | None) -> int | None:
    """Lines kept in a bottom-bar entry; None means unbounded.

    Any boolean keeps a single line, a positive integer keeps that many.
    Zero and negative counts are treated as "no limit".
    """
    if isinstance(hint, bool):
        return 1
    if not hint or hint < 0:
        return None
    return hint


@dataclass
class TaskRendererOptions:
    """Per-task renderer overrides.

    ``bottom_bar`` routes output to the bottom bar: ``True`` keeps one line,
    an integer keeps that many. ``collapse`` is read by the *parent* when
    deciding whether a completed task stays expanded.
    """

    bottom_bar: bool | int | None = None
    persistent_output: bool = False
    collapse: bool | None = None

    @property
    def is_bottom_bar(self) -> bool:
        if isinstance(self.bottom_bar, bool):
            return self.bottom_bar
        return bool(self.bottom_bar)

    @property
    def bottom_bar_capacity(self) -> int | None:
        return capacity_from_hint(self.bottom_bar)

    def to_dict(self) -> dict:
        d = {}
        if self.bottom_bar is not None:
            d["bottom_bar"] = self.bottom_bar
        if self.persistent_output:
            d["persistent_output"] = True
        if self.collapse is not None:
            d["collapse"] = self.collapse
        return d

    @classmethod
    def from_dict(cls, d: dict | None) -> "TaskRendererOptions":
        if not d:
            return cls()
        result = validate_task_options(d)
        if not result.ok:
            raise ValueError("Invalid task renderer options: " + "; ".join(result.errors))
        for warning in result.warnings:
            logger.warning(warning)
        return cls(
            bottom_bar=d.get("bottom_bar"),
            persistent_output=d.get("persistent_output") is True,
            collapse=d.get("collapse"),
        )


_DEFAULT_TASK_OPTIONS = TaskRendererOptions()


def get_renderer_options(options) -> RendererOptions:
    """Accept a RendererOptions, a mapping, or None."""
    if isinstance(options, RendererOptions):
        return options
    return RendererOptions.from_dict(options)


def get_task_options(task) -> TaskRendererOptions:
    """Resolve a task's renderer overrides, falling back to defaults.

    Tasks may carry a TaskRendererOptions, a plain mapping, or nothing at all.
    """
    options = getattr(task, "renderer_options", None)
    if isinstance(options, TaskRendererOptions):
        return options
    if isinstance(options, dict) and options:
        return TaskRendererOptions(
            bottom_bar=options.get("bottom_bar"),
            persistent_output=options.get("persistent_output") is True,
            collapse=options.get("collapse"),
        )
    return _DEFAULT_TASK_OPTIONS
