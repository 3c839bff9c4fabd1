"""
Validation framework for renderer configuration and task trees.

Validators never raise; they collect errors and warnings into a
``ValidationResult`` that callers inspect or turn into an exception.
"""

from dataclasses import dataclass, field


@dataclass
class ValidationResult:
    """Collects errors and warnings from validation checks."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return len(self.errors) == 0

    def add_error(self, msg: str):
        self.errors.append(msg)

    def add_warning(self, msg: str):
        self.warnings.append(msg)

    def merge(self, other: "ValidationResult"):
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)


RENDERER_OPTION_TYPES = {
    "indentation": int,
    "clear_output": bool,
    "show_subtasks": bool,
    "collapse": bool,
    "collapse_skips": bool,
}
TASK_OPTION_KEYS = {"bottom_bar", "persistent_output", "collapse"}
VALID_TASK_STATES = {"waiting", "pending", "completed", "failed", "skipped"}
TASK_KEYS = {
    "id",
    "title",
    "output",
    "state",
    "enabled",
    "exit_on_error",
    "prompt",
    "renderer_options",
    "subtasks",
}


def _is_int(value) -> bool:
    # bool is an int subclass; reject it where a count is expected
    return isinstance(value, int) and not isinstance(value, bool)


def validate_renderer_options(data) -> ValidationResult:
    """Validate a mapping of global renderer options."""
    result = ValidationResult()

    if not isinstance(data, dict):
        result.add_error("Renderer options must be a mapping")
        return result

    for key, value in data.items():
        expected = RENDERER_OPTION_TYPES.get(key)
        if expected is None:
            result.add_warning(f"Unknown renderer option '{key}' is ignored")
            continue
        if expected is int:
            if not _is_int(value):
                result.add_error(f"'{key}' must be an integer, got {type(value).__name__}")
            elif value < 0:
                result.add_error(f"'{key}' must be non-negative, got {value}")
        elif not isinstance(value, bool):
            result.add_error(f"'{key}' must be a boolean, got {type(value).__name__}")

    return result


def validate_task_options(data) -> ValidationResult:
    """Validate a mapping of per-task renderer overrides."""
    result = ValidationResult()

    if not isinstance(data, dict):
        result.add_error("Task renderer options must be a mapping")
        return result

    for key in data:
        if key not in TASK_OPTION_KEYS:
            result.add_warning(f"Unknown task renderer option '{key}' is ignored")

    bottom_bar = data.get("bottom_bar")
    if bottom_bar is not None and not isinstance(bottom_bar, bool):
        if not _is_int(bottom_bar):
            result.add_error(
                f"'bottom_bar' must be a boolean or an integer, got {type(bottom_bar).__name__}"
            )
        elif bottom_bar < 0:
            result.add_error(f"'bottom_bar' must be non-negative, got {bottom_bar}")

    persistent = data.get("persistent_output")
    if persistent is not None and not isinstance(persistent, bool):
        result.add_error(f"'persistent_output' must be a boolean, got {type(persistent).__name__}")

    collapse = data.get("collapse")
    if collapse is not None and not isinstance(collapse, bool):
        result.add_error(f"'collapse' must be a boolean or null, got {type(collapse).__name__}")

    return result


def validate_task_tree(data, path: str = "tasks") -> ValidationResult:
    """Validate a list of task dicts (recursively, including subtasks)."""
    result = ValidationResult()

    if not isinstance(data, list):
        result.add_error(f"'{path}' must be a list")
        return result

    for i, task in enumerate(data):
        where = f"{path}[{i}]"
        if not isinstance(task, dict):
            result.add_error(f"{where} is not a JSON object")
            continue

        for key in task:
            if key not in TASK_KEYS:
                result.add_warning(f"{where} has unknown key '{key}'")

        title = task.get("title")
        if title is not None and not isinstance(title, str):
            result.add_error(f"{where} 'title' must be a string")

        output = task.get("output")
        if output is not None and not isinstance(output, str):
            result.add_error(f"{where} 'output' must be a string")

        state = task.get("state", "waiting")
        if state not in VALID_TASK_STATES:
            result.add_error(
                f"{where} has invalid state '{state}'. "
                f"Must be one of: {', '.join(sorted(VALID_TASK_STATES))}"
            )

        options = task.get("renderer_options")
        if options is not None:
            nested = validate_task_options(options)
            result.errors.extend(f"{where}: {msg}" for msg in nested.errors)
            result.warnings.extend(f"{where}: {msg}" for msg in nested.warnings)

        if "subtasks" in task:
            result.merge(validate_task_tree(task["subtasks"], f"{where}.subtasks"))

    return result
