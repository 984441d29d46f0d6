"""Letter header, routing and endorsement models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from navletter.config import HeaderType
from navletter.models.paragraph import ParagraphNode

ENDORSEMENT_ORDINALS = ("FIRST", "SECOND", "THIRD", "FOURTH", "FIFTH", "SIXTH")

DelegationKind = Literal["by_direction", "acting_commander", "acting_title", "signing_for"]

_DELEGATION_TEXT: dict[str, str] = {
    "by_direction": "By direction",
    "acting_commander": "Acting",
    "acting_title": "Acting",
    "signing_for": "For",
}

RoutingListName = Literal["vias", "references", "enclosures", "copy_tos"]


class FieldValidity(BaseModel):
    """Validity state computed by an external field validator."""

    is_valid: bool = False
    message: str = ""


class LetterHeader(BaseModel):
    """Header fields of a letter, already validated and normalized by collaborators."""

    ssic: str = ""
    originator_code: str = ""
    date: str = ""
    from_: str = Field(default="", alias="from")
    to: str = ""
    subject: str = ""

    validity: dict[str, FieldValidity] = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True)


class Letterhead(BaseModel):
    """Centered title block at the top of the first page."""

    header_type: HeaderType = "USMC"
    line1: str = ""
    line2: str = ""
    line3: str = ""

    @property
    def title(self) -> str:
        if self.header_type == "DON":
            return "DEPARTMENT OF THE NAVY"
        return "UNITED STATES MARINE CORPS"

    @property
    def address_lines(self) -> list[str]:
        return [line for line in (self.line1, self.line2, self.line3) if line]


class SignatureBlock(BaseModel):
    """Signer name and optional delegation line."""

    name: str = ""
    delegation: str = ""

    @staticmethod
    def delegation_text(kind: DelegationKind | str) -> str:
        """Map a delegation kind to the text printed under the signature."""

        return _DELEGATION_TEXT.get(kind, "")


def _keep_anchor(entries: list[str]) -> list[str]:
    return entries if entries else [""]


class RoutingLists(BaseModel):
    """Via, reference, enclosure and copy-to entries.

    Each list keeps at least one (possibly empty) slot as an edit anchor; blank entries are
    dropped only when the letter is serialized.
    """

    vias: list[str] = Field(default_factory=lambda: [""])
    references: list[str] = Field(default_factory=lambda: [""])
    enclosures: list[str] = Field(default_factory=lambda: [""])
    copy_tos: list[str] = Field(default_factory=lambda: [""])

    @field_validator("vias", "references", "enclosures", "copy_tos")
    @classmethod
    def _anchor(cls, value: list[str]) -> list[str]:
        return _keep_anchor(list(value))

    def filled(self, name: RoutingListName) -> list[str]:
        """Entries of ``name`` that carry text."""

        return [entry for entry in getattr(self, name) if entry.strip()]

    def add_entry(self, name: RoutingListName, value: str = "") -> None:
        getattr(self, name).append(value)

    def update_entry(self, name: RoutingListName, index: int, value: str) -> None:
        getattr(self, name)[index] = value

    def remove_entry(self, name: RoutingListName, index: int) -> None:
        entries = [e for i, e in enumerate(getattr(self, name)) if i != index]
        setattr(self, name, _keep_anchor(entries))


def compose_basic_letter_reference(who: str, kind: str, date: str) -> str:
    """Build the ``"{who}'s {kind} dtd {date}"`` phrase naming the endorsed letter.

    Returns an empty string until all three parts are present.
    """

    if not who or not kind or not date:
        return ""
    return f"{who}'s {kind} dtd {date}"


class EndorsementContext(BaseModel):
    """Continuation offsets for an endorsement appended to a basic letter."""

    level: int | None = Field(default=None, ge=1, le=len(ENDORSEMENT_ORDINALS))
    basic_letter_reference: str = ""
    starting_reference_letter: str = Field(default="a", pattern=r"^[a-z]$")
    starting_enclosure_number: int = Field(default=1, ge=1)
    starting_page_number: int = Field(default=1, ge=1)

    @property
    def ordinal(self) -> str:
        if self.level is None:
            return ""
        return ENDORSEMENT_ORDINALS[self.level - 1]

    @classmethod
    def for_level(
        cls,
        level: int,
        *,
        basic_letter_reference: str = "",
        starting_page_number: int = 1,
    ) -> "EndorsementContext":
        """Endorsement with numbering offsets defaulted from its ordinal.

        The n-th endorsement starts its references at the n-th letter and its enclosures at n.
        """

        return cls(
            level=level,
            basic_letter_reference=basic_letter_reference,
            starting_reference_letter=chr(ord("a") + level - 1),
            starting_enclosure_number=level,
            starting_page_number=starting_page_number,
        )


class LetterDocument(BaseModel):
    """Everything the serializer needs to lay out one letter or endorsement."""

    letterhead: Letterhead = Field(default_factory=Letterhead)
    header: LetterHeader = Field(default_factory=LetterHeader)
    routing: RoutingLists = Field(default_factory=RoutingLists)
    paragraphs: list[ParagraphNode] = Field(default_factory=lambda: [ParagraphNode(id=1)])
    signature: SignatureBlock | None = None
    endorsement: EndorsementContext | None = None
