"""
Command-line entry point for jfmt.
"""

import sys
from typing import List, Optional, TextIO

import click
import yaml
from loguru import logger

from . import __version__
from .clipboard import detect_clipboard
from .config import FormatOptions, JfmtSettings, LoggingConfig, load_settings
from .diagnostics import describe_syntax_error
from .formatter import format_document
from .sources import acquire_input
from .types import ClipboardError, InputError, JsonSyntaxError, NoInputError, SerializationError

USAGE = """jfmt - JSON formatter in a flash

Usage:
  jfmt [options] [file|url]
  echo '{"a":1}' | jfmt
  jfmt                      # read from clipboard

Options:
  -c    Compact output (single line)
  -s    Sort object keys alphabetically
  -C    Copy result to clipboard
  -f    Fix common JSON issues (trailing commas, single quotes)
  -m    Monochrome output (no colors)
  -h    Show this help

  --config PATH   Read settings from a YAML file
  --debug         Enable debug logging
  --version       Show version and exit

Examples:
  jfmt data.json                    # format file
  jfmt -s data.json                 # format with sorted keys
  curl api.io/data | jfmt           # format from pipe
  jfmt https://api.github.com/zen   # fetch and format URL
  jfmt -C                           # clipboard in, formatted + copied out
"""


def setup_logging(config: LoggingConfig, debug: bool = False) -> None:
    """Send log records to stderr only; stdout carries the document."""
    logger.remove()
    logger.add(
        sink=sys.stderr,
        format=config.format,
        level="DEBUG" if debug else config.level,
    )


def _is_terminal(stream: TextIO) -> bool:
    return stream.isatty()


class JfmtCommand(click.Command):
    """Reports usage errors with the jfmt usage text and exit status 1."""

    def parse_args(self, ctx: click.Context, args: List[str]) -> List[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            click.echo(f"Error: {e.format_message()}", err=True)
            click.echo(USAGE, nl=False, err=True)
            ctx.exit(1)


@click.command(cls=JfmtCommand, add_help_option=False)
@click.argument("target", required=False)
@click.option("-c", "compact", is_flag=True, help="Compact output (single line)")
@click.option("-s", "sort_keys", is_flag=True, help="Sort object keys alphabetically")
@click.option("-C", "copy_to_clipboard", is_flag=True, help="Copy result to clipboard")
@click.option("-f", "attempt_repair", is_flag=True, help="Fix common JSON issues")
@click.option("-m", "monochrome", is_flag=True, help="Monochrome output (no colors)")
@click.option("-h", "--help", "show_help", is_flag=True, help="Show this help")
@click.option("--config", "config_file", type=click.Path(exists=True, dir_okay=False), help="Settings file")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(__version__, "--version", prog_name="jfmt")
def cli(
    target: Optional[str],
    compact: bool,
    sort_keys: bool,
    copy_to_clipboard: bool,
    attempt_repair: bool,
    monochrome: bool,
    show_help: bool,
    config_file: Optional[str],
    debug: bool,
):
    """Format, sort and highlight JSON from a file, URL, pipe or the clipboard."""
    options = FormatOptions(
        compact=compact,
        sort_keys=sort_keys,
        copy_to_clipboard=copy_to_clipboard,
        attempt_repair=attempt_repair,
        monochrome=monochrome,
        show_help=show_help,
    )

    if options.show_help:
        click.echo(USAGE, nl=False)
        sys.exit(0)

    setup_logging(LoggingConfig(), debug=debug)
    try:
        settings = load_settings(config_file)
    except (OSError, ValueError, yaml.YAMLError) as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(1)

    setup_logging(settings.logging, debug=debug)
    run(target, options, settings)


def run(target: Optional[str], options: FormatOptions, settings: JfmtSettings) -> None:
    """Acquire, format and print one document, exiting non-zero on failure."""
    clipboard = detect_clipboard()

    try:
        raw = acquire_input(
            target,
            sys.stdin.buffer,
            clipboard,
            http_timeout=settings.http_timeout,
        )
    except NoInputError as e:
        logger.debug(f"No input: {e}")
        click.echo(USAGE, nl=False)
        sys.exit(1)
    except InputError as e:
        click.echo(f"Error reading input: {e}", err=True)
        sys.exit(1)

    monochrome = options.monochrome or settings.force_monochrome
    use_color = not monochrome and _is_terminal(sys.stdout)

    try:
        document = format_document(raw, options, settings, color=use_color)
    except JsonSyntaxError as e:
        for line in describe_syntax_error(e, color=not monochrome):
            click.echo(line, err=True)
        sys.exit(1)
    except SerializationError as e:
        click.echo(f"Error formatting JSON: {e}", err=True)
        sys.exit(1)

    click.echo(document.rendered, color=use_color)

    if options.copy_to_clipboard:
        try:
            clipboard.write(document.serialized.encode("utf-8"))
        except ClipboardError as e:
            click.echo(f"Warning: could not copy to clipboard: {e}", err=True)
        else:
            note = "(copied to clipboard)"
            click.echo(note if monochrome else click.style(note, fg=245), err=True)


def main():
    """Main CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
