"""Tests for logging context binding."""

from __future__ import annotations

import logging

from navletter.logging import ContextFilter, document_context, stage_context


def _record() -> logging.LogRecord:
    record = logging.LogRecord("navletter.test", logging.INFO, __file__, 1, "msg", None, None)
    ContextFilter().filter(record)
    return record


def test_context_defaults_to_placeholders() -> None:
    """Records outside any context get ``-`` for document and stage."""

    record = _record()
    assert record.document_id == "-"
    assert record.stage == "-"


def test_stage_nests_inside_document_context() -> None:
    """A nested stage overrides the stage but keeps the document id, then restores both."""

    with document_context(document_id="ltr-7", stage="render"):
        with stage_context("serialize"):
            inner = _record()
        outer = _record()

    assert (inner.document_id, inner.stage) == ("ltr-7", "serialize")
    assert (outer.document_id, outer.stage) == ("ltr-7", "render")
    assert _record().document_id == "-"


def test_stage_context_as_decorator() -> None:
    """Decorated functions run with their stage bound."""

    @stage_context("edit")
    def capture() -> logging.LogRecord:
        return _record()

    assert capture().stage == "edit"
    assert _record().stage == "-"
