"""Command line interface.

Migrated dumps are written to files, stdout only carries the summary.
Logging goes to stderr and is quiet unless --debug or DUMPSWITCH_DEBUG=1.
"""

import logging
import os
import sys
from pathlib import Path

import typer

from dumpswitch import __version__
from dumpswitch.errors import DumpSwitchError, InvalidArgument
from dumpswitch.guess import guess_old_domain
from dumpswitch.migrate import migrate as migrate_dump
from dumpswitch.sites import load_sites, output_path, read_dump, switch_site, write_dump
from dumpswitch.urls import check_url

logger = logging.getLogger(__name__)

app = typer.Typer(
    name='dumpswitch',
    help='Move a WordPress database dump between domains, fixing serialized string lengths.',
    add_completion=False,
)

USAGE = (
    "Usage: dumpswitch migrate <PATH_TO_FILE> <NEW_URL>\n"
    "$ dumpswitch migrate /home/me/wordpress-dump.sql http://another.example.com\n"
)


def banner():
    typer.echo("\ndumpswitch: command line tool to migrate wordpress databases between domains.")
    typer.echo("# Version %s" % __version__)
    typer.echo("-" * 76)


def usage():
    typer.echo(USAGE)


def fail(message):
    typer.echo("\nERROR: %s\n" % message, err=True)
    banner()
    usage()
    raise typer.Exit(code=1)


def debug_enabled(debug):
    return debug or os.environ.get('DUMPSWITCH_DEBUG', '') not in ('', '0')


def setup_logging(debug=False):
    """Send log records to stderr, WARNING and up unless debugging."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root_logger.addHandler(handler)


def migrated_path(dump):
    dump = Path(dump)
    return dump.with_name(dump.stem + '-migrated' + dump.suffix)


def version_callback(value: bool):
    if value:
        typer.echo("dumpswitch %s" % __version__)
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    pass


@app.command()
def migrate(
    dump: Path = typer.Argument(..., help="Database dump to migrate"),
    new_url: str = typer.Argument(..., help="Domain the dump should point at"),
    old_url: str | None = typer.Option(
        None,
        "--old-url",
        help="Domain the dump points at now (guessed from siteurl when omitted)",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Where to write the result (default: <dump>-migrated.<ext>)",
    ),
    length_unit: str = typer.Option(
        "bytes",
        "--length-unit",
        help="Unit for serialized string lengths: bytes (PHP) or chars",
    ),
    debug: bool = typer.Option(False, "--debug", help="Log what is being done"),
) -> None:
    """Rewrite DUMP so it points at NEW_URL."""
    setup_logging(debug_enabled(debug))

    try:
        check_url(new_url, '<NEW_URL>')
        file_content = read_dump(dump)

        if not old_url:
            old_url = guess_old_domain(file_content)
            if not old_url:
                raise InvalidArgument(
                    'old_domain', "Couldn't find the old URL in %s, pass --old-url." % dump)
            logger.info("Guessed old URL %s", old_url)

        logger.debug("Migrating from %s to %s", old_url, new_url)
        result = migrate_dump(file_content, old_url, new_url, length_unit)
        logger.debug("Url character difference: %d", result.domain_length_delta)

        if output is None:
            output = migrated_path(dump)
        write_dump(output, result.rewritten_text)
    except DumpSwitchError as e:
        fail(e)
    except OSError as e:
        fail("%s: %s" % (e.filename or dump, e.strerror))

    banner()
    typer.echo("SUCCESS!")
    typer.echo("Original file: %s" % dump)
    typer.echo("Migrated file: %s" % output)
    typer.echo("Old URL: %s" % result.old_domain)
    typer.echo("New URL: %s" % result.new_domain)
    typer.echo("Serialized count: %d" % result.serialized_replacement_count)
    typer.echo("Replaced count: %d" % result.plain_replacement_count)


@app.command()
def guess(
    dump: Path = typer.Argument(..., help="Database dump to look at"),
) -> None:
    """Print the domain DUMP points at, as recorded in its siteurl option."""
    try:
        domain = guess_old_domain(read_dump(dump))
    except OSError as e:
        fail("%s: %s" % (e.filename or dump, e.strerror))

    if not domain:
        typer.echo("No siteurl found in %s" % dump, err=True)
        raise typer.Exit(code=1)

    typer.echo(domain)


@app.command()
def sites(
    config: Path = typer.Argument(..., help="INI file with one section per site"),
    length_unit: str = typer.Option(
        "bytes",
        "--length-unit",
        help="Unit for serialized string lengths: bytes (PHP) or chars",
    ),
    debug: bool = typer.Option(False, "--debug", help="Log what is being done"),
) -> None:
    """Migrate every site listed in CONFIG."""
    setup_logging(debug_enabled(debug))

    try:
        for site in load_sites(config):
            result = switch_site(site, length_unit)

            if result is None:
                typer.echo("%s: skipped, domain unchanged" % site.name)
                continue

            typer.echo("%s: %d serialized, %d replaced -> %s" % (
                site.name,
                result.serialized_replacement_count,
                result.plain_replacement_count,
                output_path(site),
            ))
    except DumpSwitchError as e:
        fail(e)
    except OSError as e:
        fail("%s: %s" % (e.filename or config, e.strerror))
