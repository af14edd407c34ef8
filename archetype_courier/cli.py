"""
Archetype Courier CLI

Command line tool to package or extract composite data types and content
items stored as JSON/YAML files
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Callable, Dict, Optional

import click
import yaml

from . import __version__
from .config import CourierConfig, load_config_from_env, load_config_from_file, validate_config
from .core.diagnostics import DiagnosticCollector
from .core.direction import Direction
from .exceptions.errors import CourierError
from .resolvers.identifiers import InMemoryIdentifierMap
from .resolvers.manager import create_manager
from .serialization import (
    content_item_from_dict,
    content_item_to_dict,
    data_type_from_dict,
    data_type_to_dict,
    load_document,
    load_identifier_map,
)
from .utils.logging import configure_logging

_DIRECTION = click.Choice([d.value for d in Direction])


def _load_config(config_path: Optional[str]) -> CourierConfig:
    config = load_config_from_file(config_path) if config_path else load_config_from_env()
    issues = validate_config(config)
    if issues:
        raise click.UsageError("; ".join(issues))
    return config


def _run(
    document: str,
    direction: str,
    map_path: Optional[str],
    config_path: Optional[str],
    output: Optional[str],
    fmt: str,
    process: Callable[[Dict[str, Any], Any, Direction], Dict[str, Any]],
) -> None:
    try:
        config = _load_config(config_path)
        configure_logging(config.log_level, config.log_format, config.log_json)

        identifier_map = (
            load_identifier_map(map_path) if map_path else InMemoryIdentifierMap()
        )
        diagnostics = DiagnosticCollector()
        manager = create_manager(identifier_map, config, on_diagnostic=diagnostics)

        result = process(load_document(document), manager, Direction(direction))
        result["diagnostics"] = [d.to_dict() for d in diagnostics.diagnostics]
    except CourierError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    if fmt == "json":
        output_str = json.dumps(result, indent=2, ensure_ascii=False)
    else:
        output_str = yaml.safe_dump(result, allow_unicode=True, sort_keys=False)

    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(output_str)
        click.echo(f"Result saved to: {output}")
    else:
        click.echo(output_str)


def _common_options(func):
    func = click.option(
        "--format", "fmt", type=click.Choice(["json", "yaml"]), default="json",
        help="Output format",
    )(func)
    func = click.option("--output", "-o", type=click.Path(), help="Write result to file")(func)
    func = click.option(
        "--config", "-c", "config_path", type=click.Path(exists=True),
        help="Configuration file (YAML or JSON)",
    )(func)
    func = click.option(
        "--map", "-m", "map_path", type=click.Path(exists=True),
        help="Identifier map file ({kind: {local_id: stable_key}})",
    )(func)
    func = click.option(
        "--direction", "-d", type=_DIRECTION, default=Direction.PACKAGING.value,
        show_default=True, help="packaging (export) or extracting (import)",
    )(func)
    return func


@click.group()
@click.version_option(version=__version__)
def cli():
    """Archetype Courier - move composite property data between environments"""
    pass


@cli.command()
@click.argument("document", type=click.Path(exists=True))
@_common_options
def datatype(document, direction, map_path, config_path, output, fmt):
    """Rewrite the data type references of a composite data type"""

    def process(data, manager, resolved_direction):
        data_type = data_type_from_dict(data)
        manager.resolve_data_type(data_type, resolved_direction)
        return data_type_to_dict(data_type)

    _run(document, direction, map_path, config_path, output, fmt, process)


@cli.command()
@click.argument("document", type=click.Path(exists=True))
@_common_options
def content(document, direction, map_path, config_path, output, fmt):
    """Resolve the composite property values of a content item"""

    def process(data, manager, resolved_direction):
        item = content_item_from_dict(data)
        manager.resolve_item(item, resolved_direction)
        return content_item_to_dict(item)

    _run(document, direction, map_path, config_path, output, fmt, process)


@cli.command()
@click.option("--config", "-c", "config_path", type=click.Path(exists=True))
def show_config(config_path):
    """Show the effective configuration"""
    try:
        config = _load_config(config_path)
    except CourierError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    click.echo(yaml.safe_dump(asdict(config), sort_keys=False))


def main():
    """Entry point"""
    cli()


if __name__ == "__main__":
    main()
