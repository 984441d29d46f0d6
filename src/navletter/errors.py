"""Exception hierarchy.

Anticipated validation outcomes (structural warnings, missing endorsement fields) are
returned as data. Exceptions are reserved for caller bugs and malformed external input.
"""

from __future__ import annotations


class NavLetterError(Exception):
    """Base class for navletter errors."""


class ParagraphNotFoundError(NavLetterError, KeyError):
    """Raised when an edit names a paragraph id that is not in the store."""

    def __init__(self, paragraph_id: int) -> None:
        super().__init__(paragraph_id)
        self.paragraph_id = paragraph_id

    def __str__(self) -> str:
        return f"paragraph {self.paragraph_id} not found"


class BundleError(NavLetterError, ValueError):
    """Raised when an imported bundle is malformed or has an unsupported schema version."""


class PreconditionError(NavLetterError):
    """Raised by callers that prefer exceptions over precondition failure records."""

    def __init__(self, failures: list) -> None:
        self.failures = list(failures)
        reasons = "; ".join(f.reason for f in self.failures)
        super().__init__(reasons or "precondition failed")
