"""Paragraph models."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from navletter.config import MAX_PARAGRAPH_LEVEL

# NBSP, figure space, narrow no-break space
_SPACE_LIKE_RE = re.compile("[\u00a0\u2007\u202f]")
_LINE_BREAK_RE = re.compile(r"\r\n|[\r\n]")


def normalize_content(text: str) -> str:
    """Collapse line breaks and space-like characters into plain spaces.

    Regular spaces are preserved as typed.
    """

    return _LINE_BREAK_RE.sub(" ", _SPACE_LIKE_RE.sub(" ", text))


class ParagraphNode(BaseModel):
    """One body paragraph in document order.

    Nesting is implied by ``level``: a node's parent is the nearest preceding node one level
    up. Citations are always derived from position and never stored here.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(ge=1)
    level: int = Field(default=1, ge=1, le=MAX_PARAGRAPH_LEVEL)
    content: str = ""
    warning: str | None = None

    @field_validator("content")
    @classmethod
    def _normalize(cls, value: str) -> str:
        return normalize_content(value)

    @property
    def has_content(self) -> bool:
        return bool(self.content.strip())
