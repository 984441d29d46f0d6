"""Tests for subject line wrapping."""

from __future__ import annotations

from navletter.formatting.subject import split_chunks, split_subject


def test_short_subject_is_one_line() -> None:
    """Subjects shorter than the limit stay on one upper-cased line."""

    assert split_subject("request for leave") == ["REQUEST FOR LEAVE"]


def test_empty_subject_has_no_lines() -> None:
    """An empty subject produces no chunks."""

    assert split_subject("") == []


def test_wrap_backs_off_to_last_space() -> None:
    """A boundary inside a word moves back to the previous space."""

    assert split_chunks("ALPHA BRAVO CHARLIE", 8) == ["ALPHA", "BRAVO", "CHARLIE"]


def test_boundary_on_space_keeps_full_chunk() -> None:
    """A boundary that falls on a space accepts the whole chunk."""

    assert split_chunks("ABCD EFGH", 4) == ["ABCD", "EFGH"]


def test_unbroken_word_is_cut_at_limit() -> None:
    """A chunk with no space is taken at full length."""

    assert split_chunks("ABCDEFGHIJ", 4) == ["ABCD", "EFGH", "IJ"]


def test_long_subject_respects_limit_and_words() -> None:
    """No line exceeds 57 characters and every word survives intact."""

    subject = (
        "request for authorization to conduct annual training at marine corps "
        "air ground combat center twentynine palms california"
    )
    lines = split_subject(subject)
    assert len(lines) > 1
    assert all(len(line) <= 57 for line in lines)
    assert " ".join(lines).split() == subject.upper().split()
