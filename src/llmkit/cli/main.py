"""llmkit CLI entry point."""

import json
import logging
from pathlib import Path

import click

from .. import __version__
from ..config import load_capabilities
from ..convert import convert_map, split_target_list

log = logging.getLogger(__name__)


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option(
    "--file",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read input from file (default: stdin)",
)
@click.option("--targets", help="Comma-separated targets, e.g. json,yaml,csv")
@click.option(
    "--format",
    "single_format",
    help="Single target format (overrides --targets)",
)
@click.option("--permissive", is_flag=True, help="Allow permissive parsing")
@click.option(
    "--max-bytes",
    type=click.IntRange(min=0),
    help="Truncate input to N bytes before detection",
)
@click.option(
    "--disable",
    help="Comma-separated optional formats to switch off (yaml,toml,csv); "
    "overrides $LLMKIT_DISABLE",
)
@click.option("--verbose", "-v", is_flag=True, help="Log detection details to stderr")
@click.version_option(version=__version__, prog_name="llmkit")
def cli(file_path, targets, single_format, permissive, max_bytes, disable, verbose):
    """Detect the format of structured text and convert it.

    Reads from --file or stdin and prints a JSON object with the detected
    Format, the Original text, Beautified and normal JSON renderings, and
    one entry per target format.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )

    try:
        capabilities = load_capabilities(
            split_target_list(disable) if disable is not None else None
        )
    except ValueError as e:
        raise click.UsageError(str(e)) from e

    disabled = capabilities.disabled()
    if disabled:
        log.debug("Disabled formats: %s", ", ".join(disabled))

    if file_path is not None:
        data = file_path.read_bytes()
    else:
        data = click.get_binary_stream("stdin").read()

    if single_format:
        target_list = [single_format]
    elif targets is not None:
        target_list = split_target_list(targets)
    else:
        target_list = None

    result = convert_map(
        data,
        target_list,
        allow_permissive=permissive,
        max_bytes=max_bytes,
        capabilities=capabilities,
    )
    click.echo(json.dumps(result, indent=2, ensure_ascii=False))


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
