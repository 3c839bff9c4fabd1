"""Tests for task_renderer.display.lines module."""

from rich.text import Text

from task_renderer.display.lines import dump_output, format_line


class TestFormatLine:
    def test_level_zero(self):
        assert format_line("Build", ">", 0).plain == "> Build"

    def test_indented_by_level_and_width(self):
        assert format_line("Build", ">", 2, indentation=3).plain == "      > Build"

    def test_styled_icon_kept(self):
        line = format_line("Build", Text(">", style="green"), 0)
        assert line.plain == "> Build"
        assert any(span.style == "green" for span in line.spans)

    def test_truncated_with_ellipsis(self):
        line = format_line("abcdefghij", ">", 0, width=6)
        assert line.plain == "> abc…"
        assert line.cell_len == 6

    def test_fits_exactly_not_truncated(self):
        assert format_line("abcd", ">", 0, width=6).plain == "> abcd"

    def test_unbounded_width(self):
        text = "x" * 500
        assert format_line(text, ">", 0, width=None).plain == "> " + text

    def test_ansi_in_text_is_decoded(self):
        line = format_line("\x1b[31mred\x1b[0m", ">", 0)
        assert line.plain == "> red"

    def test_markup_is_not_interpreted(self):
        assert format_line("[bold]x[/bold]", ">", 0).plain == "> [bold]x[/bold]"


class TestDumpOutput:
    def test_first_line_has_icon(self):
        lines = dump_output("one\ntwo", ">", 0)
        assert [line.plain for line in lines] == ["  > one", "    two"]

    def test_empty_lines_dropped(self):
        lines = dump_output("one\n\ntwo\n", ">", 1)
        assert [line.plain for line in lines] == ["    > one", "      two"]

    def test_none_output(self):
        assert dump_output(None, ">", 0) == []

    def test_non_string_output(self):
        assert dump_output(42, ">", 0) == []

    def test_level_minus_one_is_flush_left(self):
        assert [line.plain for line in dump_output("42%", ">", -1)] == ["> 42%"]

    def test_lines_truncated(self):
        lines = dump_output("abcdefghij", ">", 0, width=8)
        assert lines[0].plain == "  > abc…"
