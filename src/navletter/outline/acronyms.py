"""Acronym advisories.

Correspondence style requires an acronym to be spelled out on first use, as in
``Table of Organization (TO)``. Paragraphs that use an acronym before it is defined get an
advisory warning; nothing is blocked.
"""

from __future__ import annotations

import re
from typing import Sequence

from navletter.models.paragraph import ParagraphNode

_ACRONYM_RE = re.compile(r"\b[A-Z]{2,}\b")


def _defines(content: str, acronym: str) -> bool:
    pattern = rf"\b([A-Za-z][a-z]+(?:\s[A-Za-z][a-z]+)*)\s*\(\s*{re.escape(acronym)}\s*\)"
    return re.search(pattern, content) is not None


def acronym_warning(content: str, defined: set[str]) -> str | None:
    """Check one paragraph, adding the acronyms it defines to ``defined``.

    Stops at the first undefined acronym.
    """

    for acronym in _ACRONYM_RE.findall(content):
        defining_now = _defines(content, acronym)
        if acronym not in defined and not defining_now:
            return (
                f'Acronym "{acronym}" used without being defined first. '
                f'Please define it as "Full Name ({acronym})".'
            )
        if defining_now:
            defined.add(acronym)
    return None


def annotate_acronyms(nodes: Sequence[ParagraphNode]) -> None:
    """Set each node's ``warning`` in place, in document order."""

    defined: set[str] = set()
    for node in nodes:
        node.warning = acronym_warning(node.content, defined)
