"""CLI entry point for docuapi."""

import logging
from pathlib import Path

import click
from click.core import ParameterSource

from docuapi.config import DocsConfig, load_config
from docuapi.exceptions import EXIT_FAILURE, DocuapiError
from docuapi.generator.html import RenderOptions
from docuapi.generator.site import generate_docs

__version__ = "1.0.0"

DEFAULT_OUTPUT = "docs/"


def _from_cli(ctx: click.Context, name: str) -> bool:
    """True when a parameter was given explicitly on the command line."""
    return ctx.get_parameter_source(name) not in (ParameterSource.DEFAULT, None)


def _pick(ctx: click.Context, name: str, cli_value, config_value):
    """Command line beats config file beats default."""
    if _from_cli(ctx, name) or config_value is None:
        return cli_value
    return config_value


def _build_options(ctx: click.Context, params: dict, config: DocsConfig) -> RenderOptions:
    opts = config.options
    return RenderOptions(
        theme=_pick(ctx, "theme", params["theme"], config.theme),
        logo=_pick(ctx, "logo", params["logo"], opts.logo),
        favicon=_pick(ctx, "favicon", params["favicon"], opts.favicon),
        try_it_out=_pick(ctx, "try_it_out", params["try_it_out"], opts.try_it_out),
        search=_pick(ctx, "search", params["search"], opts.search),
        toc=_pick(ctx, "toc", params["toc"], opts.toc),
        title=_pick(ctx, "title", params["title"], opts.title),
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("inputs", nargs=-1, type=click.Path(path_type=Path))
@click.option("-o", "--output", default=DEFAULT_OUTPUT, type=click.Path(file_okay=False, path_type=Path), help="Output directory.")
@click.option("-t", "--theme", default="light", help="Theme (light, dark, dracula, github).")
@click.option("--logo", default=None, help="Custom logo path or URL.")
@click.option("--favicon", default=None, help="Custom favicon path or URL.")
@click.option("--try-it-out", is_flag=True, default=False, help='Enable the "Try It Out" placeholder.')
@click.option("--search/--no-search", default=True, help="Generate the search box and search.json.")
@click.option("--toc/--no-toc", default=True, help="Render the table of contents.")
@click.option("--title", default=None, help="Custom documentation title.")
@click.option("-c", "--config", "config_path", default=None, type=click.Path(dir_okay=False, path_type=Path), help="YAML/JSON config file.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
@click.version_option(__version__, prog_name="docuapi")
@click.pass_context
def main(ctx: click.Context, inputs: tuple[Path, ...], output: Path, config_path: Path | None, verbose: bool, **params):
    """Generate API documentation from OpenAPI/Swagger specs (YAML or JSON)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(config_path) if config_path else DocsConfig()
        config_dir = config_path.parent if config_path else Path(".")
        input_paths = list(inputs) or config.input_paths(config_dir)
        if not input_paths:
            click.echo("Error: Please provide at least one input file", err=True)
            click.echo("Usage: docuapi <openapi.yaml|json> [options]", err=True)
            ctx.exit(EXIT_FAILURE)

        if not _from_cli(ctx, "output") and config.output:
            output = config.output_path(config_dir)
        options = _build_options(ctx, params, config)

        click.echo(f"DocuAPI v{__version__}\n")
        for input_path in input_paths:
            click.echo(f"Processing: {input_path}")
            generate_docs(input_path, output, options)
            click.echo(f"Generated docs for {input_path}")
    except DocuapiError as exc:
        click.echo(f"\nError: {exc}", err=True)
        hint = getattr(exc, "hint", None)
        if hint:
            click.echo(f"Hint: {hint}", err=True)
        ctx.exit(exc.exit_code)

    click.echo(f"\nDocumentation generated in: {output}")
    click.echo(f"\nTo view:\n  cd {output} && python -m http.server")
