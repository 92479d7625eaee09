"""HTML document rendering."""

from pydantic import BaseModel

from docuapi.generator.templating import get_environment
from docuapi.parser.base import ApiSpec

DEFAULT_TITLE = "API Documentation"


class RenderOptions(BaseModel):
    """Options for a single generation run."""

    theme: str = "light"
    logo: str | None = None
    favicon: str | None = None
    try_it_out: bool = False
    search: bool = True
    toc: bool = True
    title: str | None = None


def document_title(spec: ApiSpec, options: RenderOptions) -> str:
    return options.title or spec.info.title or DEFAULT_TITLE


def render_html(spec: ApiSpec, options: RenderOptions) -> str:
    """Render index.html: sidebar, header, endpoints and schemas.

    Paths and methods appear in document order. Every text value is
    HTML-escaped by the template environment.
    """
    template = get_environment().get_template("index.html.j2")
    return template.render(
        spec=spec,
        options=options,
        title=document_title(spec, options),
    )
