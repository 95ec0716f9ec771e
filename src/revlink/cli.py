"""CLI for revlink."""

import sys

import click
import structlog

from revlink.config.logging import configure_logging
from revlink.core.exceptions import RevlinkError

logger = structlog.get_logger(__name__)


def _create_service():
    """Create the link service from settings."""
    from revlink.config.settings import get_settings
    from revlink.services.linking import LinkService

    return LinkService(get_settings())


def _fail(exc: RevlinkError) -> None:
    click.echo(f"Broken link: {exc.message}", err=True)
    address = exc.details.get("address")
    if address:
        click.echo(f"  address: {address}", err=True)
    sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """revlink: links to files at a specific revision."""
    log_level = "DEBUG" if verbose else "WARNING"
    configure_logging(log_level=log_level)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--rev", "-r", help="Revision to pin (default: HEAD)")
def store(file: str, rev: str | None) -> None:
    """Print the link address of FILE at a revision."""
    try:
        link = _create_service().store_link(file, revision=rev)
    except RevlinkError as exc:
        _fail(exc)
        return
    click.echo(link.address)
    click.echo(f"  {link.description}")


@cli.command()
@click.argument("address")
@click.option("--strict", is_flag=True, help="Reject addresses missing required fields")
def decode(address: str, strict: bool) -> None:
    """Show the fields of a link ADDRESS."""
    from revlink.address.codec import decode as decode_address

    try:
        decoded = decode_address(address, strict=strict)
    except RevlinkError as exc:
        _fail(exc)
        return
    click.echo(f"Repository: {decoded.repository_identifier}")
    click.echo(f"Revision:   {decoded.revision}")
    click.echo(f"File:       {decoded.file_path}")
    click.echo(f"Search:     {decoded.search_option or '-'}")


@cli.command()
@click.argument("address")
@click.option("--description", "-d", help="Link description")
@click.option("--format", "-f", "fmt", help="Output format (html, md, latex, texinfo, org, ascii)")
@click.option("--url-only", is_flag=True, help="Print the bare URL")
def export(address: str, description: str | None, fmt: str | None, url_only: bool) -> None:
    """Resolve ADDRESS to a public web URL."""
    try:
        link = _create_service().export_link(address, description=description, fmt=fmt)
    except RevlinkError as exc:
        _fail(exc)
        return
    click.echo(link.url if url_only else link.rendered)


@cli.command(name="open")
@click.argument("address")
@click.option("--context", "-C", default=5, help="Lines of context around the search hit")
def open_(address: str, context: int) -> None:
    """Print the file ADDRESS points at, positioned at its search option."""
    try:
        target = _create_service().open_link(address)
    except RevlinkError as exc:
        _fail(exc)
        return

    lines = target.lines
    if target.line is None:
        start, end = 0, len(lines)
        if target.address.search_option:
            click.echo(f"Search option not found: {target.address.search_option}", err=True)
    else:
        start = max(0, target.line - 1 - context)
        end = min(len(lines), target.line + context)

    for number in range(start, end):
        marker = ">" if target.line == number + 1 else " "
        click.echo(f"{marker}{number + 1:>6}  {lines[number]}")


@cli.command()
def serve() -> None:
    """Run the HTTP API."""
    from revlink.api.main import run

    run()


if __name__ == "__main__":
    cli()
