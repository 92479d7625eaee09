"""Site generation: render a spec into its four artefacts and write them out.

:func:`render_site` is pure. :func:`generate_docs` runs the whole pipeline
for one input file:

1. Load and decode the document.
2. Run the advisory presence check and log any problems.
3. Parse it into an :class:`~docuapi.parser.base.ApiSpec`.
4. Render HTML, search index, CSS and JS.
5. Write them below the output directory.
"""

import json
import logging
from pathlib import Path

from pydantic import BaseModel

from docuapi.exceptions import OutputError
from docuapi.generator.html import RenderOptions, render_html
from docuapi.generator.search import SearchEntry, build_search_index, search_payload
from docuapi.generator.templating import get_environment
from docuapi.generator.theme import render_css
from docuapi.parser.base import ApiSpec
from docuapi.parser.loader import load_document
from docuapi.parser.swagger import parse_spec, validate_spec

logger = logging.getLogger(__name__)

INDEX_FILE = "index.html"
SEARCH_FILE = "search.json"
ASSETS_DIR = "assets"
CSS_FILE = "style.css"
JS_FILE = "app.js"


class RenderedSite(BaseModel):
    html: str
    search_index: list[SearchEntry]
    css: str
    js: str


class GenerationResult(BaseModel):
    output_dir: Path
    spec: ApiSpec
    files: list[Path]


def render_js() -> str:
    """Render the static behaviour script."""
    return get_environment().get_template("app.js.j2").render()


def render_site(spec: ApiSpec, options: RenderOptions) -> RenderedSite:
    """Render everything for one spec. The index is empty when search is off."""
    return RenderedSite(
        html=render_html(spec, options),
        search_index=build_search_index(spec) if options.search else [],
        css=render_css(options.theme),
        js=render_js(),
    )


def generate_docs(input_path: Path, output_dir: Path, options: RenderOptions) -> GenerationResult:
    """Generate the documentation site for one input document.

    Raises:
        InputError: If the input cannot be read.
        DecodeError: If the input is not valid YAML/JSON.
        OutputError: If the output files cannot be written.
    """
    input_path = Path(input_path)
    output_dir = Path(output_dir)

    doc = load_document(input_path)
    validation = validate_spec(doc)
    for problem in validation.errors:
        logger.warning("%s: %s", input_path, problem)

    spec = parse_spec(doc)
    logger.debug(
        "Parsed %s: %d paths, %d operations",
        input_path, len(spec.paths), sum(len(item.operations) for item in spec.paths),
    )
    site = render_site(spec, options)

    files = [output_dir / INDEX_FILE]
    contents = [site.html]
    if options.search:
        files.append(output_dir / SEARCH_FILE)
        contents.append(json.dumps(search_payload(site.search_index), indent=2, ensure_ascii=False))
    files += [output_dir / ASSETS_DIR / CSS_FILE, output_dir / ASSETS_DIR / JS_FILE]
    contents += [site.css, site.js]

    try:
        for file_path, content in zip(files, contents):
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding="utf-8")
            logger.debug("Wrote %s", file_path)
    except OSError as exc:
        raise OutputError(f"Failed to write documentation to {output_dir}: {exc}") from exc

    return GenerationResult(output_dir=output_dir, spec=spec, files=files)
