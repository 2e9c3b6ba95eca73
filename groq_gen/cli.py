"""Command-line interface for groq-gen."""

import json
import logging
from pathlib import Path

import click

from .core.config import OUTPUT_FORMATS, GeneratorConfig
from .core.generator import query_name
from .core.hooks import ExcludeFieldsHook
from .core.parser import parse_sanity_schema
from .core.pipeline import GroqGenError, generate_snippets


def read_schema(schema: str) -> str:
    """Read schema source from a file path, or from stdin for '-'."""
    with click.open_file(schema, "r", encoding="utf-8") as f:
        return f.read()


@click.group()
@click.version_option(package_name="groq-gen")
def main():
    """GROQ query generator for Sanity schemas.

    Generate ready-to-paste GROQ queries from a defineType schema.
    """
    pass


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True, dir_okay=False, allow_dash=True),
    help="Path to a Sanity schema file, or '-' to read from stdin.",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    default="js",
    show_default=True,
    envvar="GROQ_GEN_FORMAT",
    type=click.Choice(OUTPUT_FORMATS),
    help="Snippet format.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(file_okay=False),
    help="Directory to write one file per query into (default: print to stdout).",
)
@click.option(
    "--header",
    help="Comment header to prepend to every snippet.",
)
@click.option(
    "--exclude",
    "-x",
    "exclude",
    multiple=True,
    metavar="PATTERN",
    help="Leave out fields whose dotted path matches this glob, e.g. '_*' or 'gallery.caption'. Repeatable.",
)
@click.option(
    "--helper",
    "helper_name",
    default="defineQuery",
    show_default=True,
    envvar="GROQ_GEN_HELPER",
    help="Query helper wrapped around ts/js snippets.",
)
@click.option(
    "--helper-module",
    default="sanity",
    show_default=True,
    envvar="GROQ_GEN_HELPER_MODULE",
    help="Module the query helper is imported from.",
)
@click.option(
    "--template-dir",
    type=click.Path(file_okay=False),
    envvar="GROQ_GEN_TEMPLATE_DIR",
    help="Directory with Jinja2 templates overriding the built-in ones.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    schema: str,
    output_format: str,
    output: str | None,
    header: str | None,
    exclude: tuple[str, ...],
    helper_name: str,
    helper_module: str,
    template_dir: str | None,
    verbose: bool,
):
    """Generate GROQ queries from a Sanity schema.

    Examples:

        groq-gen generate --schema ./schemas/post.ts

        groq-gen generate -s ./schemas/post.ts -f ts -o ./queries

        groq-gen generate -s ./schemas/post.ts -x '_*' -x 'gallery.caption'

        cat post.ts | groq-gen generate -s - -f groq
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    config = GeneratorConfig(
        output_format=output_format,
        helper_name=helper_name,
        helper_module=helper_module,
        template_dir=template_dir,
        header=header,
    )
    hooks = [ExcludeFieldsHook(exclude)] if exclude else []

    try:
        snippets = generate_snippets(read_schema(schema), config=config, hooks=hooks)
    except GroqGenError as e:
        raise click.ClickException(str(e)) from e

    if verbose:
        click.echo(f"Type: {snippets.type_name}", err=True)
        click.echo(f"  Queries: {len(snippets.items())}", err=True)
        for warning in snippets.warnings:
            click.echo(f"  Warning: {warning}", err=True)

    if output is None:
        for kind, snippet in snippets.items():
            click.echo(f"// {kind.value}")
            click.echo(snippet)
            click.echo()
        return

    output_path = Path(output).resolve()
    output_path.mkdir(parents=True, exist_ok=True)
    for kind, snippet in snippets.items():
        file_path = output_path / f"{query_name(snippets.type_name, kind.value)}{config.file_extension}"
        file_path.write_text(snippet + "\n", encoding="utf-8")
        if verbose:
            click.echo(f"  Wrote {file_path}", err=True)

    click.echo(f"Done! Generated {len(snippets.items())} queries in {output_path}")


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True, dir_okay=False, allow_dash=True),
    help="Path to a Sanity schema file, or '-' to read from stdin.",
)
def parse(schema: str):
    """Print the parsed schema structure as JSON.

    Exits with an error when the schema cannot be parsed.
    """
    description = parse_sanity_schema(read_schema(schema))
    click.echo(json.dumps(description.to_dict(), indent=2))
    if description.is_unparsed:
        raise click.ClickException("Could not parse schema correctly. Please check your input.")


if __name__ == "__main__":
    main()
