"""
Line formatting: one (icon, text, level) triple becomes one display line.
"""

from rich.text import Text


def format_line(
    text: str | Text,
    icon: str | Text,
    level: int,
    indentation: int = 2,
    width: int | None = None,
) -> Text:
    """
    Build a single display line: ``icon text`` indented by ``level * indentation``.

    Overflow is clipped with an ellipsis, never wrapped.

    Args:
        text: Line content. Strings may contain ANSI escapes.
        icon: Glyph shown before the text.
        level: Nesting level of the line.
        indentation: Spaces per nesting level.
        width: Maximum width in cells; None leaves the line unbounded.
    """
    body = text if isinstance(text, Text) else Text.from_ansi(text)
    line = Text(" " * (max(level, 0) * indentation), no_wrap=True)
    line.append_text(icon if isinstance(icon, Text) else Text(icon))
    line.append(" ")
    line.append_text(body)
    if width is not None and line.cell_len > width:
        line.truncate(width, overflow="ellipsis")
    return line


def dump_output(
    output: str | None,
    icon: str | Text,
    level: int,
    indentation: int = 2,
    width: int | None = None,
) -> list[Text]:
    """Format task output one level below ``level``.

    Empty lines are dropped. Only the first line carries ``icon``; the rest
    get a blank prefix so they line up under it.
    """
    if not isinstance(output, str):
        return []

    lines = [line for line in output.split("\n") if line]
    return [
        format_line(line, icon if i == 0 else " ", level + 1, indentation, width)
        for i, line in enumerate(lines)
    ]
