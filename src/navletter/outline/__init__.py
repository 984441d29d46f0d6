"""Paragraph outline: storage, numbering, validation and structural edits."""

from __future__ import annotations

from navletter.outline.citations import citation_for, citations, glyph_for
from navletter.outline.editor import EditResult, OutlineEditor
from navletter.outline.store import ParagraphStore
from navletter.outline.validator import validate

__all__ = [
    "EditResult",
    "OutlineEditor",
    "ParagraphStore",
    "citation_for",
    "citations",
    "glyph_for",
    "validate",
]
