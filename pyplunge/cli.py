"""CLI interface for pyplunge."""

import logging
from typing import Any, TextIO

import click

from . import __version__
from .exceptions import PlungeError
from .output import OutputFormatter
from .sync import SyncConfig, SyncEngine
from .utils import read_relative_paths

logger = logging.getLogger(__name__)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("source", type=click.Path(file_okay=False))
@click.argument("dest", type=click.Path(file_okay=False))
@click.option(
    "--dry-run",
    "-n",
    is_flag=True,
    envvar="PLUNGE_DRY_RUN",
    help="Don't actually copy files; just output messages",
)
@click.option(
    "--purge",
    "-p",
    is_flag=True,
    envvar="PLUNGE_PURGE",
    help="Report files in destination directory to purge",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    envvar="PLUNGE_VERBOSE",
    help="Output messages for all files, whether copied or skipped",
)
@click.option(
    "--files-from",
    "-f",
    type=click.File("r", errors="surrogateescape"),
    default="-",
    help="Read relative pathnames from FILE instead of standard input",
)
@click.option("--debug", is_flag=True, help="Enable debug logging output")
@click.version_option(version=__version__)
@click.pass_context
def main(
    ctx: Any,
    source: str,
    dest: str,
    dry_run: bool,
    purge: bool,
    verbose: bool,
    files_from: TextIO,
    debug: bool,
) -> None:
    """Synchronize (copy) newer files of corresponding names from SOURCE into DEST.

    The relative pathname of each file to sync is read from standard input,
    one per line. Blank lines are ignored.

    \b
    Examples:
        find . -type f | plunge . /mnt/backup
        plunge -nv ./src ./dst < files.txt      # Preview, list every file
        plunge -p -f files.txt ./src ./dst      # Also report files to purge
    """
    # Configure logging based on debug flag
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )
        logging.getLogger("pyplunge").setLevel(logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)

    out = OutputFormatter()
    config = SyncConfig(verbose=verbose, dry_run=dry_run, purge=purge)
    logger.debug(f"Syncing {source} -> {dest} with {config}")

    try:
        relative_paths = read_relative_paths(files_from)
        engine = SyncEngine(source, dest, config, out)
        engine.run(relative_paths)
    except PlungeError as e:
        out.error(str(e))
        ctx.exit(1)


if __name__ == "__main__":
    main()
