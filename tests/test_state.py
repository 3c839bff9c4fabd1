"""Tests for task_renderer.state module."""

import logging

from rich.text import Text

from task_renderer.state import BottomBarStore, PromptSlot, RenderState


def _lines(*values: str) -> list[Text]:
    return [Text(v) for v in values]


def _plain(lines: list[Text]) -> list[str]:
    return [line.plain for line in lines]


class TestBottomBarStore:
    def test_empty_snapshot(self):
        assert BottomBarStore().snapshot() == []

    def test_snapshot_has_leading_blank_line(self):
        store = BottomBarStore()
        store.append("t1", _lines("hello"), True)
        assert _plain(store.snapshot()) == ["", "hello"]

    def test_boolean_capacity_keeps_one_line(self):
        store = BottomBarStore()
        store.append("t1", _lines("a"), True)
        store.append("t1", _lines("b"), True)
        assert _plain(store.snapshot()) == ["", "b"]

    def test_capacity_fixed_at_creation(self):
        store = BottomBarStore()
        store.append("t1", _lines("a"), 1)
        store.append("t1", _lines("b", "c"), 5)
        assert _plain(store.snapshot()) == ["", "c"]

    def test_last_three_distinct_lines_in_arrival_order(self):
        store = BottomBarStore()
        for pct in ("10%", "42%", "77%", "99%"):
            store.append("download", _lines(pct), 3)
            store.snapshot()
        assert _plain(store.snapshot()) == ["", "42%", "77%", "99%"]

    def test_repeated_output_is_not_appended_twice(self):
        store = BottomBarStore()
        store.append("t1", _lines("42%"), 3)
        store.append("t1", _lines("42%"), 3)
        store.append("t1", _lines("42%", "43%"), 3)
        assert store.lines("t1")[0].plain == "42%"
        assert _plain(store.lines("t1")) == ["42%", "43%"]

    def test_dedup_is_against_buffer_not_batch(self):
        store = BottomBarStore()
        store.append("t1", _lines("x", "x"), 5)
        assert _plain(store.lines("t1")) == ["x", "x"]

    def test_unbounded_capacity(self):
        store = BottomBarStore()
        store.append("t1", _lines(*(str(i) for i in range(50))), None)
        assert len(store.snapshot()) == 51

    def test_negative_capacity_keeps_every_line(self):
        store = BottomBarStore()
        store.append("t1", _lines("a", "b", "c"), -2)
        assert _plain(store.snapshot()) == ["", "a", "b", "c"]

    def test_entries_in_insertion_order(self):
        store = BottomBarStore()
        store.append("b", _lines("from b"), True)
        store.append("a", _lines("from a"), True)
        assert _plain(store.snapshot()) == ["", "from b", "from a"]

    def test_remove(self, caplog):
        store = BottomBarStore()
        store.append("t1", _lines("x"), True)
        with caplog.at_level(logging.DEBUG, logger="task_renderer.state"):
            store.remove("t1")
        assert "t1" not in store
        assert store.snapshot() == []
        assert "removed" in caplog.text

    def test_remove_missing_is_noop(self):
        store = BottomBarStore()
        store.remove("ghost")
        assert len(store) == 0

    def test_lines_of_unknown_task(self):
        assert BottomBarStore().lines("ghost") == []


class TestPromptSlot:
    def test_empty_by_default(self):
        slot = PromptSlot()
        assert not slot
        assert slot.content is None
        assert slot.render() == []

    def test_set_and_render(self):
        slot = PromptSlot()
        slot.set("t1", "Proceed?")
        assert slot.content == "Proceed?"
        assert _plain(slot.render()) == ["", "Proceed?"]

    def test_release_by_owner(self):
        slot = PromptSlot()
        slot.set("t1", "Proceed?")
        slot.release("t1")
        assert slot.content is None

    def test_release_by_other_task_keeps_content(self):
        slot = PromptSlot()
        slot.set("t1", "Proceed?")
        slot.release("t2")
        assert slot.content == "Proceed?"

    def test_tick_without_claim_clears(self):
        slot = PromptSlot()
        slot.set("t1", "Proceed?")
        slot.begin_tick()
        slot.end_tick()
        assert slot.content is None

    def test_tick_with_claim_keeps(self):
        slot = PromptSlot()
        slot.begin_tick()
        slot.set("t1", "Proceed?")
        slot.end_tick()
        assert slot.owner == "t1"


class TestRenderState:
    def test_instances_do_not_share_state(self):
        a, b = RenderState(), RenderState()
        a.bottom_bar.append("t1", _lines("x"), True)
        a.prompt.set("t1", "?")
        assert len(b.bottom_bar) == 0
        assert b.prompt.content is None
