"""Subject line wrapping."""

from __future__ import annotations

from navletter.formatting.layout import SUBJECT_MAX_LINE_LENGTH


def split_chunks(text: str, size: int) -> list[str]:
    """Split ``text`` into stripped chunks of at most ``size`` characters.

    Scans forward ``size`` characters at a time. When the boundary falls inside a word and
    the chunk holds a space, the chunk is cut back to its last space and scanning resumes
    just after it. A chunk without any space is accepted at full length. Chunks that are
    only whitespace are dropped.
    """

    if size < 1:
        raise ValueError("chunk size must be positive")

    chunks: list[str] = []
    i = 0
    while i < len(text):
        chunk = text[i : i + size]
        boundary = i + size
        if boundary < len(text) and text[boundary] != " " and " " in chunk:
            chunk = chunk[: chunk.rindex(" ")]
            i += len(chunk) + 1
        else:
            i += size
        chunk = chunk.strip()
        if chunk:
            chunks.append(chunk)
    return chunks


def split_subject(subject: str, size: int = SUBJECT_MAX_LINE_LENGTH) -> list[str]:
    """Upper-case the subject and wrap it into lines of at most ``size`` characters."""

    return split_chunks(subject.upper(), size)
