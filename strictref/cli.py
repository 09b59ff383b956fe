"""Command-line interface for strictref."""

import logging
import sys

import click

from .integrity.errors import ConfigurationError, ReferenceIntegrityError
from .output.formatter import (
    format_foreign_keys,
    format_validation_result,
    format_write_outcome,
)
from .schema.errors import SchemaLoadError, SchemaValidationError

FORMAT_OPTION = click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)


def _schema_error_exit(e: Exception) -> None:
    """Report a load or schema error and exit with code 2."""
    if isinstance(e, SchemaValidationError):
        click.echo(f"Schema validation error: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err.location}: {err.msg}", err=True)
    else:
        click.echo(f"Error loading file: {e}", err=True)
    sys.exit(2)


@click.group()
@click.version_option()
@click.option(
    "--log-level",
    envvar="STRICTREF_LOG_LEVEL",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Logging level (defaults to STRICTREF_LOG_LEVEL env var)",
)
def main(log_level: str):
    """strictref: enforce that strict references point at existing documents."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@main.command()
@click.argument("schema_file", type=click.Path(exists=True))
@FORMAT_OPTION
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat warnings as errors",
)
def check(schema_file: str, output_format: str, strict: bool):
    """Check reference declarations in a schema file.

    SCHEMA_FILE is the path to a YAML schema file.

    Exit codes:
      0 - Check passed
      1 - Check failed (errors found)
      2 - File or schema error
    """
    from .validators.runner import validate_schema_file

    try:
        result = validate_schema_file(schema_file)
    except (SchemaLoadError, SchemaValidationError) as e:
        _schema_error_exit(e)

    click.echo(format_validation_result(result, output_format))  # type: ignore

    if result.has_errors:
        sys.exit(1)
    elif strict and result.has_warnings:
        sys.exit(1)
    else:
        sys.exit(0)


@main.command()
@click.argument("schema_file", type=click.Path(exists=True))
@FORMAT_OPTION
def inspect(schema_file: str, output_format: str):
    """List the strict references of each model and the fields pointing at it.

    SCHEMA_FILE is the path to a YAML schema file.
    """
    from .graph.builder import build_graph
    from .schema.loader import parse_schema

    try:
        schema = parse_schema(schema_file)
    except (SchemaLoadError, SchemaValidationError) as e:
        _schema_error_exit(e)

    graph = build_graph(schema)  # type: ignore
    click.echo(format_foreign_keys(schema, graph, output_format))  # type: ignore
    sys.exit(0)


@main.command()
@click.argument("schema_file", type=click.Path(exists=True))
@click.argument("data_file", type=click.Path(exists=True))
@click.argument("model")
@click.argument("write_file", type=click.Path(exists=True))
@FORMAT_OPTION
def verify(
    schema_file: str, data_file: str, model: str, write_file: str, output_format: str
):
    """Verify one write against a data snapshot.

    SCHEMA_FILE declares the models, DATA_FILE holds the existing records
    per model, MODEL is the model being written and WRITE_FILE holds either
    an 'insert' document or an 'update' operator map.

    Exit codes:
      0 - Write allowed
      1 - Write rejected (missing reference or failed lookup)
      2 - File, schema or configuration error
    """
    from .verify import verify_write

    try:
        verify_write(schema_file, data_file, model, write_file)
    except (SchemaLoadError, SchemaValidationError) as e:
        _schema_error_exit(e)
    except ConfigurationError as e:
        click.echo(format_write_outcome(model, e, output_format))  # type: ignore
        sys.exit(2)
    except ReferenceIntegrityError as e:
        click.echo(format_write_outcome(model, e, output_format))  # type: ignore
        sys.exit(1)

    click.echo(format_write_outcome(model, None, output_format))  # type: ignore
    sys.exit(0)


if __name__ == "__main__":
    main()
