"""sfident CLI: command-line interface powered by click and rich."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, NoReturn

import click
import yaml
from click.core import ParameterSource
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sfident._constants import CONFIG_FILENAMES, LEVELS
from sfident._sql_utils import is_simple_name, quote_for_statement
from sfident._version import __version__
from sfident.core import QualifiedName, parse, parse_strict
from sfident.errors import SfidentConfigError, SfidentError, SfidentSplitError
from sfident.splitter import split_qualified_string

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)


def _load_config() -> dict[str, Any]:
    """Load sfident.yaml if it exists."""
    for name in CONFIG_FILENAMES:
        path = Path(name)
        if not path.exists():
            continue
        try:
            config = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (yaml.YAMLError, UnicodeDecodeError) as exc:
            raise SfidentConfigError(f"Could not parse {name}: {exc}") from exc
        if config is None:
            return {}
        if not isinstance(config, dict):
            raise SfidentConfigError(
                f"{name} must contain a mapping at the top level, "
                f"got {type(config).__name__}."
            )
        return config
    return {}


def _try_load_config() -> dict[str, Any]:
    """Try to load config, return empty dict on failure."""
    try:
        return _load_config()
    except (OSError, SfidentConfigError) as exc:
        logger.debug("Could not load sfident.yaml: %s", exc)
        return {}


def _resolve_defaults(config: dict) -> dict[str, Any]:
    """Extract default parameters from config."""
    defaults = config.get("defaults", {})
    return defaults if isinstance(defaults, dict) else {}


def _resolve_flag(
    param: str, value: bool, defaults: dict[str, Any], key: str
) -> bool:
    """Explicit CLI flag wins over the config default."""
    ctx = click.get_current_context()
    if ctx.get_parameter_source(param) is not ParameterSource.DEFAULT:
        return value
    configured = defaults.get(key, value)
    if not isinstance(configured, bool):
        logger.debug(
            "Ignoring defaults.%s = %r in sfident.yaml: expected true or false",
            key,
            configured,
        )
        return value
    return configured


def _fail(message: str) -> NoReturn:
    err_console.print(
        f"[red]Error: {escape(message)}[/red]", highlight=False, soft_wrap=True
    )
    sys.exit(1)


def _name_to_dict(name: QualifiedName, with_quotes: bool) -> dict[str, Any]:
    result: dict[str, Any] = {level: getattr(name, level) for level in LEVELS}
    result["full_name"] = name.full_name(with_quotes=with_quotes)
    return result


@click.group()
@click.version_option(__version__, prog_name="sfident")
@click.option("-v", "--verbose", is_flag=True, help="Log progress at INFO level")
@click.option("--debug", is_flag=True, help="Log everything at DEBUG level")
def cli(verbose: bool, debug: bool):
    """sfident: parse and format quoted warehouse identifiers."""
    if debug:
        logging.basicConfig(level=logging.DEBUG)
    elif verbose:
        logging.basicConfig(level=logging.INFO)


@cli.command()
@click.argument("raw")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def split(raw: str, json_output: bool):
    """Split a qualified name into its raw segments."""
    defaults = _resolve_defaults(_try_load_config())
    json_output = _resolve_flag("json_output", json_output, defaults, "json")

    try:
        segments = split_qualified_string(raw)
    except SfidentSplitError as exc:
        if json_output:
            click.echo(
                json.dumps(
                    {"input": raw, "segments": exc.segments, "error": str(exc)},
                    indent=2,
                )
            )
            sys.exit(1)
        _fail(str(exc))

    if json_output:
        click.echo(json.dumps({"input": raw, "segments": segments}, indent=2))
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("#")
    table.add_column("Segment")
    for i, segment in enumerate(segments, start=1):
        table.add_row(str(i), escape(segment))
    console.print(table)


@cli.command(name="parse")
@click.argument("raw")
@click.option("--strict", is_flag=True, help="Exit code 1 on malformed input")
@click.option(
    "--quotes/--no-quotes", default=False, help="Render the full name with quotes"
)
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def parse_cmd(raw: str, strict: bool, quotes: bool, json_output: bool):
    """Parse a qualified name into database, schema, table and column."""
    defaults = _resolve_defaults(_try_load_config())
    quotes = _resolve_flag("quotes", quotes, defaults, "quotes")
    json_output = _resolve_flag("json_output", json_output, defaults, "json")

    if strict:
        try:
            name = parse_strict(raw)
        except SfidentSplitError as exc:
            _fail(str(exc))
    else:
        name = parse(raw)

    if json_output:
        click.echo(json.dumps(_name_to_dict(name, quotes), indent=2))
        return

    if name.is_empty:
        console.print("[yellow]No identifier recognized.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Level")
    table.add_column("Value")
    for level in LEVELS:
        value = getattr(name, level)
        table.add_row(level, "[dim]-[/dim]" if value is None else escape(repr(value)))
    console.print(table)
    console.print(
        f"\n[bold]Full name:[/bold] {escape(name.full_name(with_quotes=quotes))}"
    )


@cli.command(name="format")
@click.argument("segments", nargs=-1, required=True)
@click.option(
    "--quotes/--no-quotes", default=False, help="Quote and escape every level"
)
def format_cmd(segments: tuple[str, ...], quotes: bool):
    """Join decoded segment values into a qualified name."""
    defaults = _resolve_defaults(_try_load_config())
    quotes = _resolve_flag("quotes", quotes, defaults, "quotes")

    try:
        name = QualifiedName.from_parts(*segments)
    except SfidentError as exc:
        _fail(str(exc))
    click.echo(name.full_name(with_quotes=quotes))


@cli.command()
@click.argument("names", nargs=-1, required=True)
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def check(names: tuple[str, ...], json_output: bool):
    """Report which values can be used without quoting."""
    defaults = _resolve_defaults(_try_load_config())
    json_output = _resolve_flag("json_output", json_output, defaults, "json")

    verdicts = [(n, is_simple_name(n)) for n in names]
    if json_output:
        click.echo(json.dumps(dict(verdicts), indent=2))
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Name")
    table.add_column("Simple")
    for n, simple in verdicts:
        table.add_row(escape(n), "[green]yes[/green]" if simple else "[red]no[/red]")
    console.print(table)


@cli.command()
@click.argument("template")
@click.argument("values", nargs=-1)
@click.option(
    "--only-when-needed",
    is_flag=True,
    help="Leave simple names unquoted",
)
def quote(template: str, values: tuple[str, ...], only_when_needed: bool):
    """Fill TEMPLATE's {} placeholders with quoted identifiers."""
    try:
        statement = quote_for_statement(
            template, list(values), quote_simple=not only_when_needed
        )
    except SfidentError as exc:
        _fail(str(exc))
    click.echo(statement)


if __name__ == "__main__":
    cli()
