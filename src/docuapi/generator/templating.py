"""Jinja2 environment shared by the HTML, CSS and JS renderers."""

from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

from docuapi.generator.filters import anchor, escape_html, slugify, status_class, to_json

TEMPLATE_DIR = Path(__file__).parent / "templates"


def _finalize(value: Any) -> Any:
    # Every {{ expression }} passes through here, so HTML output never
    # contains an unescaped free-text value.
    if value is None:
        return Markup("")
    return escape_html(value)


@lru_cache(maxsize=None)
def get_environment() -> Environment:
    """Create the template environment.

    Autoescape is on for ``.html.j2`` templates; ``finalize`` applies
    :func:`escape_html` to every expression so the entity forms are the same
    everywhere in the page.
    """
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape(enabled_extensions=("html.j2",), default_for_string=True),
        finalize=_finalize,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["slugify"] = slugify
    env.filters["anchor"] = anchor
    env.filters["status_class"] = status_class
    env.filters["to_json"] = to_json
    return env
