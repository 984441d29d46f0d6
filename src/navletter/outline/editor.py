"""Structural edits on the paragraph outline.

Edits that are always safe (insert, move, content changes) commit immediately. Removal is
two-phase: ``remove_paragraph`` computes the candidate outline and its structural warnings,
and the caller decides whether to ``commit`` it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from navletter.config import MAX_PARAGRAPH_LEVEL
from navletter.logging import get_logger, stage_context
from navletter.models.findings import StructuralWarning
from navletter.models.paragraph import ParagraphNode
from navletter.outline.acronyms import annotate_acronyms
from navletter.outline.store import ParagraphStore
from navletter.outline.validator import validate

logger = get_logger(__name__)

AddKind = Literal["main", "same", "sub", "up"]
EditAction = Literal["add", "remove", "clear", "move", "noop", "update", "set_level"]


def clamp_level(level: int) -> int:
    return max(1, min(level, MAX_PARAGRAPH_LEVEL))


def level_for(kind: AddKind, current: int) -> int:
    """Level of a paragraph inserted with ``kind`` after one at ``current``."""

    if kind == "main":
        return 1
    if kind == "same":
        return current
    if kind == "sub":
        return clamp_level(current + 1)
    if kind == "up":
        return clamp_level(current - 1)
    raise ValueError(f"unknown paragraph kind: {kind!r}")


@dataclass
class EditResult:
    """Outcome of an edit: the resulting outline and its advisory warnings."""

    action: EditAction
    nodes: list[ParagraphNode]
    warnings: list[StructuralWarning] = field(default_factory=list)
    node: ParagraphNode | None = None
    committed: bool = False
    # Paragraph ids in store order when a pending edit was planned
    snapshot: tuple[int, ...] = ()


class OutlineEditor:
    """Insert, remove, move and edit paragraphs in a :class:`ParagraphStore`."""

    def __init__(self, store: ParagraphStore) -> None:
        self.store = store

    def warnings(self) -> list[StructuralWarning]:
        return validate(self.store.nodes)

    def _ids(self) -> tuple[int, ...]:
        return tuple(node.id for node in self.store)

    @stage_context("edit")
    def add_paragraph(self, kind: AddKind, after_id: int) -> EditResult:
        """Insert a blank paragraph immediately after ``after_id``."""

        index = self.store.index_of(after_id)
        current = self.store.nodes[index]
        node = ParagraphNode(id=self.store.next_id(), level=level_for(kind, current.level))

        nodes = self.store.nodes
        nodes.insert(index + 1, node)
        self.store.replace(nodes)
        logger.debug("Added %s paragraph %d at level %d after %d", kind, node.id, node.level, after_id)
        return EditResult(action="add", nodes=nodes, warnings=validate(nodes), node=node, committed=True)

    @stage_context("edit")
    def remove_paragraph(self, paragraph_id: int) -> EditResult:
        """Plan the removal of ``paragraph_id``.

        The last remaining paragraph is cleared in place instead of removed, and that result
        is already committed. Otherwise nothing changes until :meth:`commit` is called.
        """

        index = self.store.index_of(paragraph_id)
        if len(self.store) == 1:
            node = self.store.get(paragraph_id)
            node.content = ""
            annotate_acronyms(self.store.nodes)
            logger.debug("Cleared sole paragraph %d instead of removing it", paragraph_id)
            return EditResult(action="clear", nodes=self.store.nodes, node=node, committed=True)

        snapshot = self._ids()
        nodes = self.store.nodes
        removed = nodes.pop(index)
        warnings = validate(nodes)
        if warnings:
            logger.debug("Removing paragraph %d would leave %d orphan(s)", paragraph_id, len(warnings))
        return EditResult(action="remove", nodes=nodes, warnings=warnings, node=removed, snapshot=snapshot)

    @stage_context("edit")
    def commit(self, result: EditResult) -> None:
        """Apply a planned edit to the store.

        If the outline changed since the removal was planned, the removal is planned again
        against the current paragraphs so later edits are kept.

        Raises:
            ParagraphNotFoundError: The paragraph to remove is no longer in the store.
        """

        if result.committed:
            return
        if result.snapshot and result.snapshot != self._ids() and result.node is not None:
            logger.debug("Outline changed since removal of %d was planned; planning again", result.node.id)
            fresh = self.remove_paragraph(result.node.id)
            result.action = fresh.action
            result.nodes = fresh.nodes
            result.warnings = fresh.warnings
            result.node = fresh.node
            result.snapshot = fresh.snapshot
            if fresh.committed:
                result.committed = True
                return
        self.store.replace(result.nodes)
        annotate_acronyms(result.nodes)
        result.committed = True
        logger.debug("Committed %s edit", result.action)

    @stage_context("edit")
    def move_up(self, paragraph_id: int) -> EditResult:
        """Swap with the paragraph above.

        A paragraph deeper than the one above it stays put, so a sub-paragraph cannot be
        moved above its parent.
        """

        index = self.store.index_of(paragraph_id)
        nodes = self.store.nodes
        if index == 0 or nodes[index].level > nodes[index - 1].level:
            return EditResult(action="noop", nodes=nodes, warnings=validate(nodes), node=nodes[index], committed=True)
        return self._swap(index - 1, index)

    @stage_context("edit")
    def move_down(self, paragraph_id: int) -> EditResult:
        """Swap with the paragraph below."""

        index = self.store.index_of(paragraph_id)
        nodes = self.store.nodes
        if index == len(nodes) - 1:
            return EditResult(action="noop", nodes=nodes, warnings=validate(nodes), node=nodes[index], committed=True)
        return self._swap(index, index + 1)

    def _swap(self, upper: int, lower: int) -> EditResult:
        nodes = self.store.nodes
        nodes[upper], nodes[lower] = nodes[lower], nodes[upper]
        self.store.replace(nodes)
        annotate_acronyms(nodes)
        return EditResult(action="move", nodes=nodes, warnings=validate(nodes), committed=True)

    @stage_context("edit")
    def update_content(self, paragraph_id: int, content: str) -> EditResult:
        """Replace a paragraph's text and refresh acronym advisories."""

        node = self.store.get(paragraph_id)
        node.content = content
        nodes = self.store.nodes
        annotate_acronyms(nodes)
        return EditResult(action="update", nodes=nodes, warnings=validate(nodes), node=node, committed=True)

    @stage_context("edit")
    def set_level(self, paragraph_id: int, level: int) -> EditResult:
        """Change a paragraph's level, clamping out-of-range values into 1-8."""

        node = self.store.get(paragraph_id)
        clamped = clamp_level(level)
        if clamped != level:
            logger.debug("Clamped level %d to %d for paragraph %d", level, clamped, paragraph_id)
        node.level = clamped
        nodes = self.store.nodes
        return EditResult(action="set_level", nodes=nodes, warnings=validate(nodes), node=node, committed=True)
