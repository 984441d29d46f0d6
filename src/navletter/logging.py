"""Logging utilities."""

from __future__ import annotations

import contextlib
import contextvars
import logging
from typing import Any

from rich.logging import RichHandler


_document_id_var: contextvars.ContextVar[str] = contextvars.ContextVar("navletter_document_id", default="-")
_stage_var: contextvars.ContextVar[str] = contextvars.ContextVar("navletter_stage", default="-")


class ContextFilter(logging.Filter):
    """Inject document context into log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.document_id = _document_id_var.get()  # type: ignore[attr-defined]
        record.stage = _stage_var.get()  # type: ignore[attr-defined]
        return True


@contextlib.contextmanager
def document_context(*, document_id: str, stage: str | None = None) -> Any:
    """Temporarily bind document context for structured logging.

    Args:
        document_id: Identifier of the letter being edited or rendered.
        stage: Optional stage name (e.g. ``serialize``).
    """

    token_doc = _document_id_var.set(document_id)
    token_stage = _stage_var.set(stage or _stage_var.get())
    try:
        yield
    finally:
        _document_id_var.reset(token_doc)
        _stage_var.reset(token_stage)


@contextlib.contextmanager
def stage_context(stage: str) -> Any:
    """Bind ``stage`` for the duration of a block, keeping the current document id.

    Also usable as a decorator, e.g. ``@stage_context("serialize")``.
    """

    token = _stage_var.set(stage)
    try:
        yield
    finally:
        _stage_var.reset(token)


def configure_logging(level: str = "INFO") -> None:
    """Configure application logging.

    Args:
        level: Logging level name.
    """

    handler = RichHandler(rich_tracebacks=True, show_time=True, show_level=True)
    handler.addFilter(ContextFilter())

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s doc=%(document_id)s stage=%(stage)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    # Avoid duplicate handlers if configure_logging is called multiple times
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(handler)
    else:
        for h in root.handlers:
            if isinstance(h, RichHandler):
                h.addFilter(ContextFilter())
                h.setFormatter(formatter)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""

    return logging.getLogger(name)

