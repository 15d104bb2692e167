"""Main CLI entry point."""

import logging
import sys
from typing import Any, Optional

import rich_click as click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from xssencode import __version__
from xssencode.core.exceptions import UnknownContextError
from xssencode.core.hex import (
    CSS_FORMAT,
    HTML_ATTRIBUTE_FORMAT,
    JAVASCRIPT_FORMAT,
    URL_FORMAT,
    translation_table,
)
from xssencode.runtime.escape import Context, encode_for_context

console = Console()
err_console = Console(stderr=True)

log = logging.getLogger("xssencode")

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.STYLE_HELPTEXT_FIRST = True
click.rich_click.STYLE_COMMANDS_TABLE_SHOW_LINES = False
click.rich_click.STYLE_COMMANDS_TABLE_PAD_EDGE = False
click.rich_click.STYLE_COMMANDS_TABLE_BOX = None
click.rich_click.STYLE_COMMANDS_TABLE_HEADER = "bold magenta"
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.STYLE_ERRORS_SUGGESTION = "magenta italic"
click.rich_click.ERRORS_SUGGESTION = "Try running 'xssencode --help' for more information."
click.rich_click.STYLE_OPTIONS_TABLE_BOX = None
click.rich_click.STYLE_COMMANDS_PANEL_BOX = None
click.rich_click.STYLE_OPTIONS_PANEL_BOX = None

# Cyan theme
click.rich_click.STYLE_HEADER_TEXT = "bold cyan"
click.rich_click.STYLE_OPTION = "cyan"
click.rich_click.STYLE_SWITCH = "cyan"
click.rich_click.STYLE_METAVAR = "dim white"
click.rich_click.STYLE_USAGE_COMMAND = "cyan"
click.rich_click.STYLE_USAGE = "dim"

click.rich_click.COMMAND_GROUPS = {
    "xssencode": [
        {
            "name": "Commands",
            "commands": ["encode", "table"],
        }
    ]
}

# Hex table templates keyed by context, for the ``table`` command
_TABLE_TEMPLATES = {
    Context.HTML_ATTRIBUTE: HTML_ATTRIBUTE_FORMAT,
    Context.JAVASCRIPT: JAVASCRIPT_FORMAT,
    Context.CSS: CSS_FORMAT,
    Context.URL: URL_FORMAT,
}


def configure_logging(level: str) -> None:
    """Send xssencode logs to stderr through Rich."""
    handler = RichHandler(console=err_console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    log.handlers[:] = [handler]
    log.setLevel(level.upper())
    log.propagate = False


def parse_context(ctx: Any, param: Any, value: str) -> Context:
    """Click callback turning a context name or alias into a Context."""
    try:
        return Context.parse(value)
    except UnknownContextError as e:
        choices = ", ".join(c.value for c in Context)
        raise click.BadParameter(f"{e} (choose from {choices})", param_hint="CONTEXT")


@click.group(
    help=f"""
[bold white on cyan] xssencode [/] [bold cyan]v{__version__}[/] Encode untrusted text for HTML, attributes, JavaScript, CSS and URLs.

Run [bold cyan]xssencode encode html TEXT[/] to encode for element content.
Run [bold cyan]xssencode table url[/] to list the escapes used for a context.

[dim]CONTEXT is one of html, html_attribute (attr), javascript (js), css, url.[/dim]
"""
)
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--log-level",
    default="WARNING",
    envvar="XSSENCODE_LOG_LEVEL",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level (env: XSSENCODE_LOG_LEVEL)",
)
def cli(verbose: bool, log_level: str) -> None:
    configure_logging("DEBUG" if verbose else log_level)


@cli.command()
@click.argument("context", callback=parse_context)
@click.argument("text", required=False)
@click.option(
    "--strip-tags", is_flag=True, help="Remove tags before encoding (html only)"
)
def encode(context: Context, text: Optional[str], strip_tags: bool) -> None:
    """Encode TEXT (or stdin) for CONTEXT and print the result."""
    if text is None or text == "-":
        text = sys.stdin.read()
        log.debug("Read %d characters from stdin", len(text))

    if strip_tags and context is not Context.HTML:
        log.warning("--strip-tags is ignored for the %s context", context.value)

    click.echo(encode_for_context(text, context, strip_tags=strip_tags), nl=False)


@cli.command()
@click.argument("context", callback=parse_context)
def table(context: Context) -> None:
    """Show the escape table used for a hex-based CONTEXT."""
    if context not in _TABLE_TEMPLATES:
        raise click.BadParameter(
            "html uses entity encoding, not a hex table", param_hint="CONTEXT"
        )

    escapes = translation_table(_TABLE_TEMPLATES[context])

    grid = Table(title=f"{context.value} escapes", header_style="bold magenta")
    grid.add_column("Char", style="cyan")
    grid.add_column("Code", justify="right")
    grid.add_column("Escape", style="green")
    for code in sorted(escapes):
        char = "␠" if code == 32 else chr(code)
        grid.add_row(Text(char), str(code), Text(escapes[code]))

    console.print(grid)


if __name__ == "__main__":
    cli()
