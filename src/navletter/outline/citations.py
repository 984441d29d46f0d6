"""Outline citation numbering.

Paragraph levels 1-8 follow SECNAV M-5216.5:

    level 1, 5   1.   2.   3.
    level 2, 6   a.   b.   c.
    level 3, 7   (1)  (2)  (3)
    level 4, 8   (a)  (b)  (c)

Levels 5-8 reuse the numbering of 1-4 and underline the glyph core when rendered.
"""

from __future__ import annotations

from typing import Protocol, Sequence

_PUNCTUATION = ".()"


class _Leveled(Protocol):
    level: int


def letter(n: int) -> str:
    """Return the n-th lowercase letter (1 -> ``a``).

    Past ``z`` the letter doubles for each further cycle (27 -> ``aa``, 28 -> ``bb``).
    """

    if n < 1:
        raise ValueError(f"ordinal must be positive, got {n}")
    cycle, offset = divmod(n - 1, 26)
    return chr(ord("a") + offset) * (cycle + 1)


def format_glyph(n: int, level: int) -> str:
    """Punctuated glyph for ordinal ``n`` at ``level``."""

    pattern = (level - 1) % 4
    if pattern == 0:
        return f"{n}."
    if pattern == 1:
        return f"{letter(n)}."
    if pattern == 2:
        return f"({n})"
    return f"({letter(n)})"


def is_underlined(level: int) -> bool:
    return level >= 5


def strip_punctuation(glyph: str) -> str:
    return "".join(ch for ch in glyph if ch not in _PUNCTUATION)


def split_glyph(glyph: str) -> tuple[str, str, str]:
    """Split ``"(a)"`` into ``("(", "a", ")")`` and ``"1."`` into ``("", "1", ".")``."""

    prefix = "(" if glyph.startswith("(") else ""
    suffix = glyph[-1] if glyph and glyph[-1] in ".)" else ""
    core = glyph[len(prefix) : len(glyph) - len(suffix)]
    return prefix, core, suffix


def group_start(index: int, nodes: Sequence[_Leveled]) -> int:
    """First position of the sibling group containing ``nodes[index]``.

    The group opens right after the nearest preceding node with a lower level.
    """

    level = nodes[index].level
    for i in range(index - 1, -1, -1):
        if nodes[i].level < level:
            return i + 1
    return 0


def sibling_ordinal(index: int, nodes: Sequence[_Leveled]) -> int:
    """1-based position of ``nodes[index]`` among its same-level siblings."""

    level = nodes[index].level
    start = group_start(index, nodes)
    return sum(1 for node in nodes[start : index + 1] if node.level == level)


def glyph_for(index: int, nodes: Sequence[_Leveled]) -> str:
    """The node's own punctuated glyph, as printed in front of the paragraph."""

    return format_glyph(sibling_ordinal(index, nodes), nodes[index].level)


def ancestor_glyphs(index: int, nodes: Sequence[_Leveled]) -> list[str]:
    """Stripped glyphs of the node's ancestors, outermost first."""

    path: list[str] = []
    parent_level = nodes[index].level - 1
    for i in range(index - 1, -1, -1):
        if parent_level == 0:
            break
        if nodes[i].level == parent_level:
            path.insert(0, strip_punctuation(glyph_for(i, nodes)))
            parent_level -= 1
    return path


def citation_for(index: int, nodes: Sequence[_Leveled]) -> str:
    """Citation identifying ``nodes[index]``.

    Levels 1 and 2 return their own glyph (``"1."``, ``"a."``). Deeper levels are prefixed
    with their ancestors' glyphs, e.g. ``"1a(1)"``. Content is ignored, so empty paragraphs
    still hold their number while being edited.
    """

    own = glyph_for(index, nodes)
    if nodes[index].level <= 2:
        return own
    return "".join(ancestor_glyphs(index, nodes)) + own


def citations(nodes: Sequence[_Leveled]) -> list[str]:
    return [citation_for(i, nodes) for i in range(len(nodes))]
