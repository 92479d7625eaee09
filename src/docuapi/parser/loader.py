"""Read an OpenAPI/Swagger document from disk and decode it.

YAML files (``.yaml``/``.yml``) go through ``yaml.safe_load``; every other
extension is decoded as JSON. The result is the raw mapping, in document
order, which :func:`docuapi.parser.swagger.parse_spec` turns into models.
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from docuapi.exceptions import DecodeError, InputError, SpecNotFoundError
from docuapi.parser.detect import detect_format

logger = logging.getLogger(__name__)


def load_document(file_path: Path) -> dict[str, Any]:
    """Load and decode a document.

    Raises:
        SpecNotFoundError: If the file does not exist.
        InputError: If the file exists but cannot be read as UTF-8 text.
        DecodeError: If the content is not valid for the chosen decoder, its
            top level is not a mapping, or it refers to itself.
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise SpecNotFoundError(f"Spec file not found: {file_path}")

    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Failed to read spec file {file_path}: {exc}") from exc

    fmt = detect_format(file_path)
    logger.debug("Decoding %s as %s", file_path, fmt)
    doc = decode(text, fmt, source=str(file_path))

    if not isinstance(doc, dict):
        kind = "empty document" if doc is None else type(doc).__name__
        raise DecodeError(f"{file_path}: spec must be a mapping (got {kind})")
    if _is_cyclic(doc):
        raise DecodeError(f"{file_path}: spec contains a circular reference (self-referencing YAML anchor)")
    return doc


def _is_cyclic(node: Any, ancestors: frozenset = frozenset()) -> bool:
    # Shared anchors are fine; only a node that contains itself is rejected.
    if not isinstance(node, (dict, list)):
        return False
    if id(node) in ancestors:
        return True
    ancestors = ancestors | {id(node)}
    children = node.values() if isinstance(node, dict) else node
    return any(_is_cyclic(child, ancestors) for child in children)


def decode(text: str, fmt: str, source: str = "<string>") -> Any:
    """Decode ``text`` as ``fmt`` ('yaml' or 'json')."""
    if fmt == "yaml":
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise DecodeError(f"Invalid YAML in {source}: {exc}") from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"Invalid JSON in {source}: {exc}") from exc
