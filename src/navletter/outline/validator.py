"""Sibling-completeness validation.

A paragraph below the top level must share its level with at least one other paragraph
under the same parent: a ``1a`` requires a ``1b``, a ``1a(1)`` requires a ``1a(2)``.
"""

from __future__ import annotations

from typing import Sequence

from navletter.logging import get_logger
from navletter.models.findings import StructuralWarning
from navletter.models.paragraph import ParagraphNode
from navletter.outline.citations import ancestor_glyphs, citation_for

logger = get_logger(__name__)


def sibling_message(citation: str) -> str:
    return f"Paragraph {citation} requires at least one sibling paragraph at the same level."


def validate(nodes: Sequence[ParagraphNode]) -> list[StructuralWarning]:
    """Return one warning per non-top-level paragraph that has no sibling.

    Level-1 paragraphs are exempt; a letter may have a single main paragraph. Warnings are
    ordered by document position.
    """

    groups: dict[tuple[tuple[str, ...], int], list[int]] = {}
    for index, node in enumerate(nodes):
        key = (tuple(ancestor_glyphs(index, nodes)), node.level)
        groups.setdefault(key, []).append(index)

    warnings: list[StructuralWarning] = []
    for (_, level), indices in groups.items():
        if len(indices) != 1 or level == 1:
            continue
        index = indices[0]
        citation = citation_for(index, nodes)
        warnings.append(
            StructuralWarning(
                paragraph_id=nodes[index].id,
                index=index,
                citation=citation,
                message=sibling_message(citation),
            )
        )

    warnings.sort(key=lambda w: w.index)
    if warnings:
        logger.debug("Structure validation found %d orphan paragraph(s)", len(warnings))
    return warnings
