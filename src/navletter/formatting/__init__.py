"""Letter layout: spacing regimes, subject wrapping and line serialization."""

from __future__ import annotations

from navletter.formatting.serializer import LetterSerializer, SerializationResult, serialize_letter
from navletter.formatting.spacing import (
    FixedWidthProfile,
    ProportionalProfile,
    SpacingProfile,
    profile_for,
    select_profile,
)
from navletter.formatting.subject import split_subject

__all__ = [
    "FixedWidthProfile",
    "LetterSerializer",
    "ProportionalProfile",
    "SerializationResult",
    "SpacingProfile",
    "profile_for",
    "select_profile",
    "serialize_letter",
    "split_subject",
]
