"""Line records produced by the serializer.

A renderer (docx, PDF, print) consumes these in order. Measurements are in points.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

LineKind = Literal[
    "letterhead",
    "address",
    "endorsement",
    "routing",
    "subject",
    "reference",
    "enclosure",
    "paragraph",
    "signature",
    "copy_to",
    "blank",
]


class TextRun(BaseModel):
    """A contiguous run of text sharing one style."""

    text: str
    bold: bool = False
    underline: bool = False


class LineRecord(BaseModel):
    """One formatted output line."""

    kind: LineKind
    runs: list[TextRun] = Field(default_factory=list)
    indent: float = 0.0
    # Wrapped continuation lines start this far right of the first line
    hanging_indent: float = 0.0
    tab_stops: list[float] = Field(default_factory=list)
    alignment: Literal["left", "center"] = "left"
    font_size: float = 12.0

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)

    @classmethod
    def blank(cls) -> "LineRecord":
        return cls(kind="blank")


class RenderedLetter(BaseModel):
    """Serialized letter ready for a layout backend."""

    title: str
    font_family: str
    lines: list[LineRecord] = Field(default_factory=list)
    # Repeated at the top of every page after the first
    continuation_header: list[LineRecord] = Field(default_factory=list)
    starting_page_number: int = Field(default=1, ge=1)

    def plain_text(self) -> str:
        """Join the line texts with newlines."""

        return "\n".join(line.text for line in self.lines)
