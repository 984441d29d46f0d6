"""Page geometry for naval correspondence, in points (1 inch = 72 points).

Tab stops and indents are Word template values converted from TWIPs (TWIPs / 20) and are
measured from the left margin, i.e. the content edge, with a 1 inch margin assumed.
"""

from __future__ import annotations

FONT_SIZE_TITLE = 10.0
FONT_SIZE_UNIT_LINES = 8.0

# Tab stop 1: From/To/Via/Subj/Ref/Encl labels. Tab stop 2: Via/Ref/Encl markers.
TAB_STOP_LABEL = 36.0
TAB_STOP_MARKER = 52.3

# The template's 7920 TWIPs (396pt) includes the 1 inch margin; this is from the content edge
SSIC_BLOCK_INDENT = 324.0
SIGNATURE_INDENT = 234.0
COPY_TO_INDENT = 36.0

# Hanging indent of wrapped reference and enclosure entries
LIST_HANGING_PROPORTIONAL = 54.0
LIST_HANGING_FIXED = 79.2

LEVEL_SPACING = 18.0

SUBJECT_MAX_LINE_LENGTH = 57


def paragraph_tabs(level: int) -> tuple[float, float]:
    """(citation position, text position) for a body paragraph at ``level``."""

    citation = (level - 1) * LEVEL_SPACING
    return citation, citation + LEVEL_SPACING
