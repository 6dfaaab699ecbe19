"""CLI entry point for rest-api-spec."""

import logging
from pathlib import Path

import click
import yaml

from rest_api_spec import __version__
from rest_api_spec.exceptions import RestSpecError
from rest_api_spec.loader import load_rest_spec, parse_file


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.version_option(version=__version__)
def main(verbose: bool):
    """Inspect and check REST API descriptor files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )


@main.command()
@click.argument("api_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--format", "fmt", default="json", type=click.Choice(["json", "yaml"]), help="Output format.")
def show(api_path: Path, fmt: str):
    """Print the descriptor parsed from a single api file."""
    try:
        api = parse_file(api_path)
    except RestSpecError as e:
        raise click.ClickException(str(e)) from e

    if fmt == "yaml":
        click.echo(yaml.safe_dump(api.model_dump(mode="json"), sort_keys=False), nl=False)
    else:
        click.echo(api.model_dump_json(indent=2))


@main.command()
@click.argument("api_dirs", nargs=-1, required=True, type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--list", "list_apis", is_flag=True, help="Print one line per api.")
def check(api_dirs: tuple[Path, ...], list_apis: bool):
    """Parse every api file in API_DIRS and report duplicates or malformed files."""
    try:
        rest_spec = load_rest_spec(*api_dirs)
    except RestSpecError as e:
        raise click.ClickException(str(e)) from e

    if list_apis:
        for api in rest_spec.apis.values():
            methods = ",".join(api.methods)
            click.echo(f"{api.name}  {methods}  {' '.join(api.paths)}  body={api.body.value}")

    click.echo(f"Found {len(rest_spec.apis)} apis.")
