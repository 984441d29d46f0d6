"""Pydantic models used across the project."""

from __future__ import annotations

from navletter.models.findings import PreconditionFailure, StructuralWarning
from navletter.models.letter import (
    EndorsementContext,
    FieldValidity,
    LetterDocument,
    LetterHeader,
    Letterhead,
    RoutingLists,
    SignatureBlock,
    compose_basic_letter_reference,
)
from navletter.models.lines import LineRecord, RenderedLetter, TextRun
from navletter.models.paragraph import ParagraphNode, normalize_content

__all__ = [
    "EndorsementContext",
    "FieldValidity",
    "LetterDocument",
    "LetterHeader",
    "Letterhead",
    "LineRecord",
    "ParagraphNode",
    "PreconditionFailure",
    "RenderedLetter",
    "RoutingLists",
    "SignatureBlock",
    "StructuralWarning",
    "TextRun",
    "compose_basic_letter_reference",
    "normalize_content",
]
