"""daturl CLI -- inspect, validate and build dat:// URLs.

Thin wrapper around :mod:`daturl.protocol` using click.
"""

from __future__ import annotations

import json
import logging

import click

from daturl import __version__
from daturl.config import ParserConfig
from daturl.protocol import (
    DatUrl,
    DatUrlError,
    dat_url_to_dict,
    parse_dat_url,
    to_string,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _error(msg: str) -> None:
    """Print an error message to stderr and exit 1."""
    click.echo(msg, err=True)
    raise SystemExit(1)


def _policy_options(fn):
    """Attach the shared fingerprint policy flags to a command."""
    fn = click.option(
        "--require-fingerprint",
        is_flag=True,
        envvar="DATURL_REQUIRE_FINGERPRINT",
        help="Reject any host that is not a 64-hex fingerprint.",
    )(fn)
    fn = click.option(
        "--strict",
        is_flag=True,
        envvar="DATURL_STRICT",
        help="Reject 64-character hosts that are not valid hex.",
    )(fn)
    return fn


def _describe(url: DatUrl) -> list[str]:
    host_kind = "fingerprint" if url.is_fingerprint() else "name"
    version = url.version if url.has_version() else "(latest)"
    return [
        f"Host:     {url.host} ({host_kind})",
        f"Version:  {version}",
        f"Path:     {url.pathname if url.has_path() else '(none)'}",
        f"Query:    {url.query if url.has_query() else '(none)'}",
        f"Fragment: {url.fragment if url.has_fragment() else '(none)'}",
    ]


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(version=__version__, prog_name="daturl")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """daturl -- versioned dat:// URL tool."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


# ---------------------------------------------------------------------------
# daturl parse
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("url")
@_policy_options
@click.option("--json", "as_json", is_flag=True, help="Print the parsed fields as JSON.")
def parse(url: str, strict: bool, require_fingerprint: bool, as_json: bool) -> None:
    """Parse URL and print its components."""
    config = ParserConfig(strict=strict, require_fingerprint=require_fingerprint)
    try:
        parsed = parse_dat_url(url, config)
    except DatUrlError as exc:
        _error(f"Error: {exc}")

    if as_json:
        click.echo(json.dumps(dat_url_to_dict(parsed), indent=2))
        return
    for line in _describe(parsed):
        click.echo(line)


# ---------------------------------------------------------------------------
# daturl check
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("urls", nargs=-1, required=True)
@_policy_options
def check(urls: tuple[str, ...], strict: bool, require_fingerprint: bool) -> None:
    """Validate one or more URLs; exit 1 if any is invalid."""
    config = ParserConfig(strict=strict, require_fingerprint=require_fingerprint)
    failed = 0
    for url in urls:
        try:
            parse_dat_url(url, config)
        except DatUrlError as exc:
            failed += 1
            click.echo(f"{url}: error: {exc}")
        else:
            click.echo(f"{url}: ok")
    if failed:
        raise SystemExit(1)


# ---------------------------------------------------------------------------
# daturl build
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("host")
@click.option("--version-tag", "version", default=None, help="Version tag or sequence number.")
@click.option("--path", default=None, help="Slash-separated path, e.g. /docs/index.html.")
@click.option("--query", default=None, help="Raw query string (without '?').")
@click.option("--fragment", default=None, help="Raw fragment (without '#').")
def build(
    host: str,
    version: str | None,
    path: str | None,
    query: str | None,
    fragment: str | None,
) -> None:
    """Build a canonical URL from its components."""
    segments = None
    if path is not None:
        if not path.startswith("/"):
            _error(f"Error: path must start with '/': {path!r}")
        segments = path[1:].split("/")

    try:
        url = DatUrl(host=host, version=version, path=segments, query=query, fragment=fragment)
    except DatUrlError as exc:
        _error(f"Error: {exc}")

    click.echo(to_string(url))
