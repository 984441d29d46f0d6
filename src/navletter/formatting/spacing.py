"""Spacing regimes for labels, markers and paragraph citations.

Times New Roman letters align with tab stops; Courier New letters align with literal
non-breaking spaces so that a renderer collapsing ordinary whitespace keeps the columns.
A profile is chosen once per document with :func:`select_profile`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from navletter.config import BodyFont, Settings
from navletter.formatting import layout

NBSP = "\u00a0"


class SpacingProfile(ABC):
    """Formatting strategy for one spacing regime."""

    name: BodyFont
    font_family: str

    # Field labels

    @abstractmethod
    def field_label(self, label: str) -> str:
        """Label followed by the gap to the content column (``From:``, ``To:``, ``Subj:``)."""

    @abstractmethod
    def single_label(self, section: str) -> str:
        """Section word for a list with exactly one entry, no marker."""

    @abstractmethod
    def list_label(self, section: str, marker: str, index: int) -> str:
        """Prefix for entry ``index`` of a numbered or lettered list.

        Only the first entry carries the section word; later entries get blank padding of
        the same visual width.
        """

    @abstractmethod
    def subject_continuation(self) -> str:
        """Prefix aligning wrapped subject lines under the first one."""

    @abstractmethod
    def list_hanging_indent(self) -> float:
        """Hanging indent for reference and enclosure entries that wrap."""

    @abstractmethod
    def copy_to_label(self) -> str: ...

    @abstractmethod
    def copy_to_entry(self) -> tuple[str, float]:
        """(prefix, indent) for each copy-to addressee."""

    # Tab stops

    @abstractmethod
    def label_tab_stops(self) -> list[float]: ...

    @abstractmethod
    def marker_tab_stops(self) -> list[float]: ...

    # Body paragraphs

    @abstractmethod
    def paragraph_lead(self, level: int) -> str:
        """Text placed before the citation glyph."""

    @abstractmethod
    def paragraph_gap(self, glyph: str) -> str:
        """Text placed between the citation glyph and the paragraph text."""

    @abstractmethod
    def paragraph_indent(self, level: int) -> float: ...

    @abstractmethod
    def paragraph_tab_stops(self, level: int) -> list[float]: ...

    # Shared rules

    def from_label(self) -> str:
        return self.field_label("From:")

    def to_label(self) -> str:
        return self.field_label("To:")

    def subject_label(self) -> str:
        return self.field_label("Subj:")

    def via_label(self, index: int, total: int) -> str:
        if total == 1:
            return self.single_label("Via:")
        return self.list_label("Via:", str(index + 1), index)

    def reference_label(self, letter: str, index: int) -> str:
        return self.list_label("Ref:", letter, index)

    def enclosure_label(self, number: int, index: int) -> str:
        return self.list_label("Encl:", str(number), index)


class ProportionalProfile(SpacingProfile):
    """Tab-stop alignment for a proportional font."""

    name: BodyFont = "times"
    font_family = "Times New Roman"

    def field_label(self, label: str) -> str:
        return f"{label}\t"

    def single_label(self, section: str) -> str:
        return f"{section}\t"

    def list_label(self, section: str, marker: str, index: int) -> str:
        word = section if index == 0 else ""
        return f"{word}\t({marker})\t"

    def subject_continuation(self) -> str:
        return "\t"

    def list_hanging_indent(self) -> float:
        return layout.LIST_HANGING_PROPORTIONAL

    def copy_to_label(self) -> str:
        return "Copy to:"

    def copy_to_entry(self) -> tuple[str, float]:
        return "", layout.COPY_TO_INDENT

    def label_tab_stops(self) -> list[float]:
        return [layout.TAB_STOP_LABEL]

    def marker_tab_stops(self) -> list[float]:
        return [layout.TAB_STOP_LABEL, layout.TAB_STOP_MARKER]

    def paragraph_lead(self, level: int) -> str:
        return ""

    def paragraph_gap(self, glyph: str) -> str:
        return "\t"

    def paragraph_indent(self, level: int) -> float:
        return layout.paragraph_tabs(level)[0]

    def paragraph_tab_stops(self, level: int) -> list[float]:
        return [layout.paragraph_tabs(level)[1]]


class FixedWidthProfile(SpacingProfile):
    """Literal non-breaking-space alignment for a monospace font.

    Every label is padded to a seven-character column, so ``From:`` and ``To:`` line up
    and list markers start in the same column as field content.
    """

    name: BodyFont = "courier"
    font_family = "Courier New"

    LABEL_COLUMN = 7
    INDENT_PER_LEVEL = 4

    def _pad(self, text: str) -> str:
        return text.ljust(self.LABEL_COLUMN, NBSP)

    def field_label(self, label: str) -> str:
        return self._pad(label)

    def single_label(self, section: str) -> str:
        return self._pad(section)

    def list_label(self, section: str, marker: str, index: int) -> str:
        word = section if index == 0 else ""
        return f"{self._pad(word)}({marker}){NBSP}"

    def subject_continuation(self) -> str:
        return NBSP * self.LABEL_COLUMN

    def list_hanging_indent(self) -> float:
        return layout.LIST_HANGING_FIXED

    def copy_to_label(self) -> str:
        return f"Copy to:{NBSP * 2}"

    def copy_to_entry(self) -> tuple[str, float]:
        return NBSP * self.LABEL_COLUMN, 0.0

    def label_tab_stops(self) -> list[float]:
        return []

    def marker_tab_stops(self) -> list[float]:
        return []

    def paragraph_lead(self, level: int) -> str:
        return NBSP * ((level - 1) * self.INDENT_PER_LEVEL)

    def paragraph_gap(self, glyph: str) -> str:
        return NBSP * 2 if glyph.endswith(".") else NBSP

    def paragraph_indent(self, level: int) -> float:
        return 0.0

    def paragraph_tab_stops(self, level: int) -> list[float]:
        return []


_PROFILES: dict[str, type[SpacingProfile]] = {
    "times": ProportionalProfile,
    "courier": FixedWidthProfile,
}


def select_profile(name: BodyFont | str) -> SpacingProfile:
    """Return the spacing profile for a body font name."""

    try:
        return _PROFILES[name]()
    except KeyError:
        raise ValueError(f"unknown body font: {name!r}") from None


def profile_for(settings: Settings) -> SpacingProfile:
    return select_profile(settings.body_font)
