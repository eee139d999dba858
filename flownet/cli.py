"""Command-line interface for flownet."""

import logging
import sys

import click

from .graph.builder import build_graph
from .output.formatter import format_edges, format_validation_result
from .schema.errors import SchemaLoadError, SchemaValidationError
from .schema.loader import parse_network
from .validators.runner import run_checks

FORMAT_OPTION = click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    envvar="FLOWNET_FORMAT",
    help="Output format (defaults to FLOWNET_FORMAT env var or text)",
)


def _load_graph(network_file: str):
    """Load and build a graph, exiting with code 2 on file or schema errors."""
    try:
        return build_graph(parse_network(network_file))
    except SchemaLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except SchemaValidationError as e:
        click.echo(f"Schema validation error: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
        sys.exit(2)


@click.group()
@click.version_option(package_name="flownet")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def main(verbose: bool):
    """flownet: edges with weight, capacity and flow."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


@main.command()
@click.argument("network_file", type=click.Path(exists=True))
@FORMAT_OPTION
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat warnings as errors",
)
def validate(network_file: str, output_format: str, strict: bool):
    """Check the edges of a network file.

    NETWORK_FILE is the path to a YAML network file.

    Exit codes:
      0 - Checks passed
      1 - Checks failed (errors found)
      2 - File or schema error
    """
    graph = _load_graph(network_file)
    result = run_checks(graph)

    output = format_validation_result(result, output_format)  # type: ignore
    click.echo(output)

    if result.has_errors:
        sys.exit(1)
    elif strict and result.has_warnings:
        sys.exit(1)
    else:
        sys.exit(0)


@main.command()
@click.argument("network_file", type=click.Path(exists=True))
@FORMAT_OPTION
def edges(network_file: str, output_format: str):
    """List the edges of a network file.

    Shows weight, capacity, flow and remaining capacity of every edge.
    """
    graph = _load_graph(network_file)
    click.echo(format_edges(graph, output_format))  # type: ignore


if __name__ == "__main__":
    main()
