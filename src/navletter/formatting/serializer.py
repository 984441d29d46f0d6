"""Letter serialization.

Turns a :class:`LetterDocument` into the ordered line records of a naval letter or
endorsement. The serializer is pure: identical inputs give identical output, and nothing is
emitted when a precondition fails.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from navletter.errors import PreconditionError
from navletter.formatting import layout
from navletter.formatting.spacing import SpacingProfile
from navletter.formatting.subject import split_subject
from navletter.logging import get_logger, stage_context
from navletter.models.findings import PreconditionFailure
from navletter.models.letter import EndorsementContext, LetterDocument
from navletter.models.lines import LineKind, LineRecord, RenderedLetter, TextRun
from navletter.outline.citations import glyph_for, is_underlined, letter, split_glyph

logger = get_logger(__name__)


class SerializationResult(BaseModel):
    """Either a rendered letter or the preconditions that blocked it."""

    rendered: RenderedLetter | None = None
    failures: list[PreconditionFailure] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def lines(self) -> list[LineRecord]:
        return self.rendered.lines if self.rendered else []

    def raise_for_failures(self) -> RenderedLetter:
        """Return the rendered letter, raising :class:`PreconditionError` if blocked."""

        if self.failures or self.rendered is None:
            raise PreconditionError(self.failures)
        return self.rendered


def check_preconditions(document: LetterDocument) -> list[PreconditionFailure]:
    """Missing inputs that make the document impossible to serialize."""

    failures: list[PreconditionFailure] = []
    endorsement = document.endorsement
    if endorsement is None:
        return failures
    if endorsement.level is None:
        failures.append(
            PreconditionFailure(
                field="endorsement.level",
                reason="Endorsement level is required to generate an endorsement.",
            )
        )
    if not endorsement.basic_letter_reference.strip():
        failures.append(
            PreconditionFailure(
                field="endorsement.basic_letter_reference",
                reason="Basic letter reference is required to generate an endorsement.",
            )
        )
    return failures


def reference_letter(start: str, index: int) -> str:
    """Letter of the ``index``-th reference when numbering starts at ``start``."""

    return letter(ord(start) - ord("a") + 1 + index)


def _runs(*parts: tuple[str, bool]) -> list[TextRun]:
    return [TextRun(text=text, underline=underline) for text, underline in parts if text]


class LetterSerializer:
    """Lay out a letter using one spacing profile."""

    def __init__(
        self,
        profile: SpacingProfile,
        *,
        subject_max_line_length: int = layout.SUBJECT_MAX_LINE_LENGTH,
    ) -> None:
        self.profile = profile
        self.subject_max_line_length = subject_max_line_length

    @stage_context("serialize")
    def serialize(self, document: LetterDocument) -> SerializationResult:
        failures = check_preconditions(document)
        if failures:
            for failure in failures:
                logger.warning("Cannot serialize letter: %s (%s)", failure.reason, failure.field)
            return SerializationResult(failures=failures)

        endorsement = document.endorsement
        lines: list[LineRecord] = []
        lines += self._letterhead(document)
        lines += self._address_block(document)
        if endorsement is not None:
            identification = f"{endorsement.ordinal} ENDORSEMENT on {endorsement.basic_letter_reference}"
            lines.append(self._text("endorsement", identification))
            lines.append(LineRecord.blank())
        lines += self._routing_block(document)
        lines.append(LineRecord.blank())
        lines += self._subject_block(document.header.subject)
        lines.append(LineRecord.blank())
        lines += self._reference_enclosure_block(document, endorsement)
        lines += self._body(document)
        lines += self._signature(document)
        lines += self._copy_to(document)

        rendered = RenderedLetter(
            title=self._title(document),
            font_family=self.profile.font_family,
            lines=lines,
            continuation_header=self._subject_block(document.header.subject) + [LineRecord.blank()],
            starting_page_number=endorsement.starting_page_number if endorsement else 1,
        )
        logger.info("Serialized %d lines (%s)", len(lines), self.profile.name)
        return SerializationResult(rendered=rendered)

    # Blocks

    def _text(
        self,
        kind: LineKind,
        text: str,
        *,
        tab_stops: list[float] | None = None,
        indent: float = 0.0,
        hanging_indent: float = 0.0,
    ) -> LineRecord:
        return LineRecord(
            kind=kind,
            runs=_runs((text, False)),
            tab_stops=tab_stops or [],
            indent=indent,
            hanging_indent=hanging_indent,
        )

    def _letterhead(self, document: LetterDocument) -> list[LineRecord]:
        letterhead = document.letterhead
        lines = [
            LineRecord(
                kind="letterhead",
                runs=[TextRun(text=letterhead.title, bold=True)],
                alignment="center",
                font_size=layout.FONT_SIZE_TITLE,
            )
        ]
        for address in letterhead.address_lines:
            lines.append(
                LineRecord(
                    kind="letterhead",
                    runs=[TextRun(text=address)],
                    alignment="center",
                    font_size=layout.FONT_SIZE_UNIT_LINES,
                )
            )
        lines.append(LineRecord.blank())
        return lines

    def _address_block(self, document: LetterDocument) -> list[LineRecord]:
        header = document.header
        lines = [
            self._text("address", value, indent=layout.SSIC_BLOCK_INDENT)
            for value in (header.ssic, header.originator_code, header.date)
        ]
        lines.append(LineRecord.blank())
        return lines

    def _routing_block(self, document: LetterDocument) -> list[LineRecord]:
        profile = self.profile
        header = document.header
        lines = [
            self._text("routing", profile.from_label() + header.from_, tab_stops=profile.label_tab_stops()),
            self._text("routing", profile.to_label() + header.to, tab_stops=profile.label_tab_stops()),
        ]
        vias = document.routing.filled("vias")
        for i, via in enumerate(vias):
            tab_stops = profile.label_tab_stops() if len(vias) == 1 else profile.marker_tab_stops()
            lines.append(self._text("routing", profile.via_label(i, len(vias)) + via, tab_stops=tab_stops))
        return lines

    def _subject_block(self, subject: str) -> list[LineRecord]:
        profile = self.profile
        tab_stops = profile.label_tab_stops()
        chunks = split_subject(subject, self.subject_max_line_length)
        if not chunks:
            return [self._text("subject", profile.subject_label(), tab_stops=tab_stops)]
        lines = [self._text("subject", profile.subject_label() + chunks[0], tab_stops=tab_stops)]
        for chunk in chunks[1:]:
            lines.append(self._text("subject", profile.subject_continuation() + chunk, tab_stops=tab_stops))
        return lines

    def _reference_enclosure_block(
        self,
        document: LetterDocument,
        endorsement: EndorsementContext | None,
    ) -> list[LineRecord]:
        profile = self.profile
        start_letter = endorsement.starting_reference_letter if endorsement else "a"
        start_number = endorsement.starting_enclosure_number if endorsement else 1
        references = document.routing.filled("references")
        enclosures = document.routing.filled("enclosures")
        hanging = profile.list_hanging_indent()

        lines: list[LineRecord] = []
        for i, ref in enumerate(references):
            label = profile.reference_label(reference_letter(start_letter, i), i)
            lines.append(
                self._text(
                    "reference",
                    label + ref,
                    tab_stops=profile.marker_tab_stops(),
                    hanging_indent=hanging,
                )
            )
        if enclosures and references:
            lines.append(LineRecord.blank())
        for i, encl in enumerate(enclosures):
            label = profile.enclosure_label(start_number + i, i)
            lines.append(
                self._text(
                    "enclosure",
                    label + encl,
                    tab_stops=profile.marker_tab_stops(),
                    hanging_indent=hanging,
                )
            )
        if references or enclosures:
            lines.append(LineRecord.blank())
        return lines

    def _body(self, document: LetterDocument) -> list[LineRecord]:
        profile = self.profile
        paragraphs = [p for p in document.paragraphs if p.has_content]
        lines: list[LineRecord] = []
        for i, paragraph in enumerate(paragraphs):
            glyph = glyph_for(i, paragraphs)
            lead = profile.paragraph_lead(paragraph.level)
            gap = profile.paragraph_gap(glyph)
            if is_underlined(paragraph.level):
                prefix, core, suffix = split_glyph(glyph)
                runs = _runs((lead + prefix, False), (core, True), (suffix + gap + paragraph.content, False))
            else:
                runs = _runs((lead + glyph + gap + paragraph.content, False))
            lines.append(
                LineRecord(
                    kind="paragraph",
                    runs=runs,
                    indent=profile.paragraph_indent(paragraph.level),
                    tab_stops=profile.paragraph_tab_stops(paragraph.level),
                )
            )
            lines.append(LineRecord.blank())
        return lines

    def _signature(self, document: LetterDocument) -> list[LineRecord]:
        signature = document.signature
        if signature is None or not signature.name:
            return []
        lines = [
            LineRecord.blank(),
            LineRecord.blank(),
            self._text("signature", signature.name.upper(), indent=layout.SIGNATURE_INDENT),
        ]
        if signature.delegation:
            lines.append(self._text("signature", signature.delegation, indent=layout.SIGNATURE_INDENT))
        return lines

    def _copy_to(self, document: LetterDocument) -> list[LineRecord]:
        copies = document.routing.filled("copy_tos")
        if not copies:
            return []
        prefix, indent = self.profile.copy_to_entry()
        lines = [LineRecord.blank(), self._text("copy_to", self.profile.copy_to_label())]
        lines += [self._text("copy_to", prefix + copy, indent=indent) for copy in copies]
        return lines

    def _title(self, document: LetterDocument) -> str:
        if document.endorsement is not None:
            return f"{document.endorsement.ordinal} ENDORSEMENT"
        return document.header.subject or "Naval Letter"


def serialize_letter(document: LetterDocument, profile: SpacingProfile) -> SerializationResult:
    """Serialize ``document`` with ``profile`` using the default subject line length."""

    return LetterSerializer(profile).serialize(document)
