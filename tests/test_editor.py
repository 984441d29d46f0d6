"""Tests for structural outline edits."""

from __future__ import annotations

import logging

import pytest

from navletter.errors import ParagraphNotFoundError
from navletter.logging import ContextFilter
from navletter.models.paragraph import ParagraphNode
from navletter.outline.citations import citations
from navletter.outline.editor import OutlineEditor, clamp_level, level_for
from navletter.outline.store import ParagraphStore


def _editor(*levels: int) -> OutlineEditor:
    nodes = [ParagraphNode(id=i + 1, level=level, content=f"P{i + 1}") for i, level in enumerate(levels)]
    return OutlineEditor(ParagraphStore(nodes))


def _levels(editor: OutlineEditor) -> list[int]:
    return [node.level for node in editor.store]


def _ids(editor: OutlineEditor) -> list[int]:
    return [node.id for node in editor.store]


def test_new_store_holds_one_blank_main_paragraph() -> None:
    """The store is never empty."""

    store = ParagraphStore()
    assert len(store) == 1
    assert store.nodes[0].id == 1
    assert store.nodes[0].level == 1
    assert citations(store.nodes) == ["1."]
    with pytest.raises(ValueError):
        store.replace([])


def test_add_sub_paragraph_after_main() -> None:
    """A sub paragraph is one level deeper and lands right after its anchor."""

    editor = _editor(1)
    result = editor.add_paragraph("sub", after_id=1)
    assert result.node is not None
    assert result.node.id == 2
    assert result.node.level == 2
    assert _ids(editor) == [1, 2]
    assert len(result.warnings) == 1


def test_add_kinds_pick_levels() -> None:
    """main/same/sub/up map to the documented levels and clamp at the edges."""

    assert level_for("main", 5) == 1
    assert level_for("same", 3) == 3
    assert level_for("sub", 8) == 8
    assert level_for("up", 1) == 1
    assert level_for("up", 4) == 3
    with pytest.raises(ValueError):
        level_for("sideways", 1)  # type: ignore[arg-type]


def test_add_inserts_in_the_middle_with_next_id() -> None:
    """New ids are max + 1 even when inserted before higher ids."""

    editor = _editor(1, 2, 2)
    editor.add_paragraph("same", after_id=2)
    assert _ids(editor) == [1, 2, 4, 3]
    assert _levels(editor) == [1, 2, 2, 2]


def test_remove_sole_paragraph_clears_it() -> None:
    """Removing the last paragraph empties its text instead of the store."""

    editor = _editor(1)
    result = editor.remove_paragraph(1)
    assert result.action == "clear"
    assert result.committed
    assert len(editor.store) == 1
    assert editor.store.get(1).content == ""


def test_remove_is_two_phase() -> None:
    """Removal reports warnings and only changes the store on commit."""

    editor = _editor(1, 2, 2)
    result = editor.remove_paragraph(3)
    assert result.action == "remove"
    assert not result.committed
    assert [w.paragraph_id for w in result.warnings] == [2]
    assert _ids(editor) == [1, 2, 3]

    editor.commit(result)
    assert result.committed
    assert _ids(editor) == [1, 2]


def test_move_up_refuses_to_leave_parent() -> None:
    """A sub paragraph cannot move above the paragraph it belongs to."""

    editor = _editor(1, 2, 2)
    result = editor.move_up(2)
    assert result.action == "noop"
    assert _ids(editor) == [1, 2, 3]


def test_move_up_and_down_swap_neighbours() -> None:
    """Siblings swap places; levels stay untouched."""

    editor = _editor(1, 2, 2)
    editor.move_up(3)
    assert _ids(editor) == [1, 3, 2]
    editor.move_down(3)
    assert _ids(editor) == [1, 2, 3]
    assert _levels(editor) == [1, 2, 2]


def test_move_at_edges_is_noop() -> None:
    """The first paragraph cannot move up nor the last one down."""

    editor = _editor(1, 1)
    assert editor.move_up(1).action == "noop"
    assert editor.move_down(2).action == "noop"
    assert _ids(editor) == [1, 2]


def test_set_level_clamps() -> None:
    """Out-of-range levels are clamped into 1-8."""

    editor = _editor(1, 2)
    editor.set_level(2, 12)
    assert editor.store.get(2).level == 8
    editor.set_level(2, -3)
    assert editor.store.get(2).level == 1
    assert clamp_level(0) == 1


def test_update_content_normalizes_and_flags_acronyms() -> None:
    """Line breaks become spaces and undefined acronyms get an advisory."""

    editor = _editor(1, 1)
    editor.update_content(1, "Report to the\nCOC today.")
    node = editor.store.get(1)
    assert node.content == "Report to the COC today."
    assert node.warning is not None
    assert "COC" in node.warning

    editor.update_content(1, "Notify the Chain Of Command (COC).")
    editor.update_content(2, "The COC concurs.")
    assert editor.store.get(1).warning is None
    assert editor.store.get(2).warning is None


def test_unknown_id_raises() -> None:
    """Edits naming a missing paragraph are caller errors."""

    editor = _editor(1)
    with pytest.raises(ParagraphNotFoundError):
        editor.add_paragraph("main", after_id=99)
    with pytest.raises(KeyError):
        editor.remove_paragraph(99)


def test_commit_keeps_edits_made_after_planning() -> None:
    """A removal confirmed after other edits is applied to the current outline."""

    editor = _editor(1, 1, 1)
    plan = editor.remove_paragraph(3)
    editor.add_paragraph("main", after_id=1)
    assert _ids(editor) == [1, 4, 2, 3]

    editor.commit(plan)
    assert plan.committed
    assert _ids(editor) == [1, 4, 2]
    assert [node.id for node in plan.nodes] == [1, 4, 2]


def test_commit_of_already_removed_paragraph_raises() -> None:
    """Confirming a removal whose paragraph is gone is a caller error."""

    editor = _editor(1, 1, 1)
    first = editor.remove_paragraph(3)
    second = editor.remove_paragraph(3)
    editor.commit(first)
    with pytest.raises(ParagraphNotFoundError):
        editor.commit(second)
    assert _ids(editor) == [1, 2]


def test_edits_log_under_edit_stage(caplog: pytest.LogCaptureFixture) -> None:
    """Editor log records carry the edit stage."""

    caplog.set_level(logging.DEBUG, logger="navletter.outline.editor")
    caplog.handler.addFilter(ContextFilter())

    editor = _editor(1)
    editor.add_paragraph("sub", after_id=1)

    records = [r for r in caplog.records if r.name == "navletter.outline.editor"]
    assert records
    assert all(r.stage == "edit" for r in records)
