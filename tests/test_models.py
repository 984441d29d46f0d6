"""Tests for letter models and settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from navletter.config import Settings, load_settings
from navletter.models.letter import (
    EndorsementContext,
    LetterHeader,
    Letterhead,
    RoutingLists,
    SignatureBlock,
    compose_basic_letter_reference,
)
from navletter.models.paragraph import ParagraphNode, normalize_content


def test_content_is_normalized_on_create_and_assign() -> None:
    """Line breaks and space-like characters become plain spaces."""

    node = ParagraphNode(id=1, content="one\r\ntwo\u00a0three")
    assert node.content == "one two three"
    node.content = "a\u2007b\u202fc\nd"
    assert node.content == "a b c d"
    assert normalize_content("keep  double") == "keep  double"


def test_paragraph_level_bounds() -> None:
    """Levels outside 1-8 are rejected by the model."""

    with pytest.raises(ValidationError):
        ParagraphNode(id=1, level=9)
    with pytest.raises(ValidationError):
        ParagraphNode(id=0)


def test_routing_lists_keep_an_anchor_slot() -> None:
    """Removing the last entry leaves one empty slot."""

    routing = RoutingLists(references=["MCO 1"])
    routing.remove_entry("references", 0)
    assert routing.references == [""]
    assert routing.filled("references") == []

    routing.add_entry("references", "MCO 2")
    routing.update_entry("references", 0, "  ")
    assert routing.filled("references") == ["MCO 2"]
    assert RoutingLists(vias=[]).vias == [""]


def test_endorsement_defaults_follow_level() -> None:
    """The n-th endorsement starts at the n-th letter and enclosure n."""

    context = EndorsementContext.for_level(3, basic_letter_reference="ref")
    assert context.ordinal == "THIRD"
    assert context.starting_reference_letter == "c"
    assert context.starting_enclosure_number == 3
    assert EndorsementContext().ordinal == ""
    with pytest.raises(ValidationError):
        EndorsementContext(level=7)
    with pytest.raises(ValidationError):
        EndorsementContext(starting_reference_letter="A")


def test_compose_basic_letter_reference() -> None:
    """The reference phrase is only built when every part is present."""

    assert compose_basic_letter_reference("CO", "ltr", "1 Jan 26") == "CO's ltr dtd 1 Jan 26"
    assert compose_basic_letter_reference("CO", "", "1 Jan 26") == ""


def test_signature_and_letterhead_text() -> None:
    """Delegation kinds and header types map to their printed text."""

    assert SignatureBlock.delegation_text("by_direction") == "By direction"
    assert SignatureBlock.delegation_text("acting_title") == "Acting"
    assert SignatureBlock.delegation_text("signing_for") == "For"
    assert SignatureBlock.delegation_text("unknown") == ""
    assert Letterhead(header_type="DON").title == "DEPARTMENT OF THE NAVY"
    assert Letterhead(line2="CAMP LEJEUNE").address_lines == ["CAMP LEJEUNE"]


def test_header_accepts_wire_name() -> None:
    """The sender field is populated from ``from`` or ``from_``."""

    assert LetterHeader(**{"from": "CO"}).from_ == "CO"
    assert LetterHeader(from_="CO").from_ == "CO"


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment variables with the NAVLETTER_ prefix configure settings."""

    monkeypatch.setenv("NAVLETTER_BODY_FONT", "courier")
    monkeypatch.setenv("NAVLETTER_SUBJECT_MAX_LINE_LENGTH", "40")
    settings = Settings()
    assert settings.body_font == "courier"
    assert settings.subject_max_line_length == 40


def test_load_settings_env_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """NAVLETTER_ENV_FILE points load_settings at a dotenv file."""

    env_file = tmp_path / "custom.env"
    env_file.write_text("NAVLETTER_BODY_FONT=courier\n", encoding="utf-8")
    monkeypatch.delenv("NAVLETTER_BODY_FONT", raising=False)
    monkeypatch.setenv("NAVLETTER_ENV_FILE", str(env_file))

    assert load_settings().body_font == "courier"

    monkeypatch.delenv("NAVLETTER_ENV_FILE")
    monkeypatch.chdir(tmp_path)
    assert load_settings().body_font == "times"


def test_settings_fields_are_rendering_choices() -> None:
    """Settings carry only log level and rendering options."""

    assert set(Settings.model_fields) == {"log_level", "body_font", "subject_max_line_length"}
