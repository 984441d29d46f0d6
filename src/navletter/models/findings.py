"""Advisory and precondition findings returned (never raised) by the engine."""

from __future__ import annotations

from pydantic import BaseModel


class StructuralWarning(BaseModel):
    """A sibling-completeness violation found by the structure validator."""

    paragraph_id: int
    index: int
    citation: str
    message: str


class PreconditionFailure(BaseModel):
    """A missing input that prevents a document from being serialized."""

    field: str
    reason: str
