"""Schema-versioned letter bundles for import and export.

A bundle is the JSON form of everything needed to re-serialize a letter: the document and
the body font it was laid out with.
"""

from __future__ import annotations

import json

from pydantic import BaseModel, Field, ValidationError

from navletter.config import BodyFont
from navletter.errors import BundleError
from navletter.logging import get_logger
from navletter.models.letter import LetterDocument

logger = get_logger(__name__)

SCHEMA_VERSION = "1.0"
SUPPORTED_SCHEMA_VERSIONS = frozenset({SCHEMA_VERSION})


class LetterBundle(BaseModel):
    """Exported letter."""

    schema_version: str = SCHEMA_VERSION
    body_font: BodyFont = "times"
    document: LetterDocument = Field(default_factory=LetterDocument)


def export_bundle(bundle: LetterBundle) -> str:
    """Serialize a bundle to JSON text."""

    return json.dumps(bundle.model_dump(mode="json", by_alias=True), ensure_ascii=False, indent=2)


def import_bundle(text: str) -> LetterBundle:
    """Parse JSON text produced by :func:`export_bundle`.

    Raises:
        BundleError: The text is not JSON, does not match the schema, or declares a schema
            version this release cannot read.
    """

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise BundleError(f"bundle is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise BundleError("bundle must be a JSON object")

    version = data.get("schema_version")
    if version not in SUPPORTED_SCHEMA_VERSIONS:
        raise BundleError(f"unsupported bundle schema version: {version!r}")

    try:
        bundle = LetterBundle.model_validate(data)
    except ValidationError as exc:
        raise BundleError(f"bundle does not match schema {version}: {exc}") from exc

    logger.debug("Imported bundle with %d paragraph(s)", len(bundle.document.paragraphs))
    return bundle
