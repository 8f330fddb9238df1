"""rfc822addr command line interface."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from rfc822addr import __version__
from rfc822addr.address import parse_addresses
from rfc822addr.canonical import DefaultHost, canonicalizer_from_config
from rfc822addr.config import AddrConfig, find_config, load_config
from rfc822addr.errors import DiagnosticRenderer
from rfc822addr.lexer import Lexer
from rfc822addr.quoting import quote, unquote


def _load(config_path: str | None) -> AddrConfig:
    """Load the explicit config, or the nearest one, or the defaults."""
    if config_path is not None:
        return load_config(Path(config_path))
    try:
        return load_config(find_config())
    except FileNotFoundError:
        return AddrConfig()


def _read_field(field: str | None) -> str:
    if field is None or field == "-":
        return sys.stdin.read().rstrip("\n")
    return field


@click.group()
@click.version_option(__version__, prog_name="rfc822addr")
def main() -> None:
    """Parse and canonicalize RFC822 address header fields."""


@main.command()
@click.argument("field", required=False)
@click.option("--canonical-only", is_flag=True, help="Print only the canonical addresses.")
@click.option("--display-only", is_flag=True, help="Print only the normalized display form.")
@click.option("--default-host", default=None, help="Domain substituted for addresses without one.")
@click.option("--trace", is_flag=True, help="Trace grammar rules on stderr.")
@click.option("--config", "config_path", type=click.Path(exists=True), default=None,
              help="Path to rfc822addr.toml.")
def parse(
    field: str | None,
    canonical_only: bool,
    display_only: bool,
    default_host: str | None,
    trace: bool,
    config_path: str | None,
) -> None:
    """Parse an address FIELD (or stdin) and print its normalized forms."""
    config = _load(config_path)
    if trace or config.parse.trace:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    canonicalize = canonicalizer_from_config(config)
    if default_host is not None:
        canonicalize = DefaultHost(default_host)

    text = _read_field(field)
    outcome = parse_addresses(text, canonicalize)
    if not outcome:
        renderer = DiagnosticRenderer(color=config.output.color)
        for diag in outcome.diagnostics:
            click.echo(renderer.render(diag, text), err=True)
        raise SystemExit(1)

    if not canonical_only:
        click.echo(outcome.display)
    if not display_only:
        click.echo(outcome.canonical, nl=False)


@main.command()
@click.argument("field")
def tokens(field: str) -> None:
    """Dump the tokens of an address FIELD."""
    lexer = Lexer(field)
    result = lexer.lex()
    if result is None:
        renderer = DiagnosticRenderer(color=_load(None).output.color)
        for diag in lexer.diagnostics:
            click.echo(renderer.render(diag, field), err=True)
        raise SystemExit(1)

    for tok in result:
        if tok.value:
            click.echo(f"{tok.kind.name} {tok.value}")
        else:
            click.echo(tok.kind.name)


@main.command(name="quote")
@click.argument("text")
def quote_cmd(text: str) -> None:
    """Quote TEXT for use as a local-part."""
    click.echo(quote(text))


@main.command(name="unquote")
@click.argument("text")
def unquote_cmd(text: str) -> None:
    """Resolve the quoting of a quoted-string TEXT."""
    click.echo(unquote(text))
