"""Small helpers shared by the renderers and registered as Jinja2 filters."""

import json
import re
from typing import Any

from markupsafe import Markup

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]")

_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def escape_html(value: Any) -> Markup:
    """Escape ``& < > " '`` for embedding in HTML text or attributes.

    Empty values render as an empty string. Values that are already
    ``Markup`` pass through untouched.
    """
    if isinstance(value, Markup):
        return value
    if value is None or value == "":
        return Markup("")
    text = str(value)
    for char, entity in _HTML_ESCAPES:
        text = text.replace(char, entity)
    return Markup(text)


def slugify(path: str) -> str:
    """Lowercase ``path`` and replace every char outside ``[a-z0-9]`` with ``-``."""
    return _NON_SLUG_CHARS.sub("-", path.lower())


def anchor(path: str, method: str) -> str:
    """In-page anchor of one operation."""
    return f"{slugify(path)}-{method}"


def status_class(status_code: str) -> str:
    """Bucket a response status code by its first character.

    Only 2xx and 4xx get their own class; 3xx and 5xx both land in ``server``.
    """
    code = str(status_code)
    if code.startswith("2"):
        return "success"
    if code.startswith("4"):
        return "client"
    return "server"


def to_json(value: Any) -> str:
    return json.dumps(_json_keys(value), indent=2, ensure_ascii=False, default=str)


def _json_keys(value: Any) -> Any:
    # YAML can produce keys json.dumps rejects, e.g. datetime.date for 2024-01-01.
    if isinstance(value, dict):
        return {
            key if isinstance(key, (str, int, float, bool)) or key is None else str(key): _json_keys(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [_json_keys(item) for item in value]
    return value
