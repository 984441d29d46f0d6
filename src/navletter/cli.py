"""CLI entrypoints for navletter."""

from __future__ import annotations

from pathlib import Path

import typer

from navletter.bundle import LetterBundle, import_bundle
from navletter.config import load_settings
from navletter.errors import BundleError, PreconditionError
from navletter.formatting.serializer import LetterSerializer, check_preconditions
from navletter.formatting.spacing import select_profile
from navletter.logging import configure_logging, document_context, get_logger
from navletter.outline.validator import validate

app = typer.Typer(add_completion=False, help="Naval correspondence formatter")
logger = get_logger(__name__)


def _load(bundle_path: Path) -> LetterBundle:
    try:
        return import_bundle(bundle_path.read_text(encoding="utf-8"))
    except BundleError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command()
def render(
    bundle_path: Path = typer.Argument(..., help="Letter bundle exported as JSON"),
    font: str | None = typer.Option(
        None,
        "--font",
        help="Body font: times or courier (overrides the bundle)",
    ),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write lines to this file"),
) -> None:
    """Render a bundle to plain-text lines."""

    settings = load_settings()
    configure_logging(settings.log_level)

    bundle = _load(bundle_path)
    try:
        profile = select_profile(font or bundle.body_font)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    serializer = LetterSerializer(profile, subject_max_line_length=settings.subject_max_line_length)
    with document_context(document_id=bundle_path.stem, stage="render"):
        try:
            rendered = serializer.serialize(bundle.document).raise_for_failures()
        except PreconditionError as exc:
            for failure in exc.failures:
                typer.echo(f"{failure.field}: {failure.reason}", err=True)
            raise typer.Exit(code=1) from exc

    text = rendered.plain_text()
    if output is None:
        typer.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    typer.echo(str(output))


@app.command()
def check(
    bundle_path: Path = typer.Argument(..., help="Letter bundle exported as JSON"),
) -> None:
    """Report structural warnings and blocking preconditions."""

    settings = load_settings()
    configure_logging(settings.log_level)

    bundle = _load(bundle_path)
    with document_context(document_id=bundle_path.stem, stage="check"):
        warnings = validate(bundle.document.paragraphs)
        failures = check_preconditions(bundle.document)

    for warning in warnings:
        typer.echo(f"warning: {warning.message}")
    for failure in failures:
        typer.echo(f"error: {failure.field}: {failure.reason}", err=True)
    if failures:
        raise typer.Exit(code=1)
    if not warnings:
        typer.echo("ok")


if __name__ == "__main__":
    app()
