"""
rosepine_zellij/cli.py

Command-line interface for installing Rose Pine themes into Zellij.

Usage:
    rosepine-zellij
    rosepine-zellij --variant rose-pine-moon
    rosepine-zellij -t rose-pine-dawn --debug
"""

import sys
import logging
from typing import Sequence

import click

from . import __version__
from .config import ZellijPaths
from .installer import NOT_SELECTED, UserAbort, run
from .theme.variants import load_variants

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DECLINED = 1
EXIT_ERROR = 2


def confirm_prompt(message: str, default: bool) -> bool:
    return click.confirm(message, default=default)


def choose_prompt(message: str, choices: Sequence[str], default: str) -> str:
    return click.prompt(
        message,
        type=click.Choice(list(choices)),
        default=default,
        show_choices=True,
    )


def setup_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-t", "--variant", default=NOT_SELECTED, metavar="<value>",
              help="Select <variant> type (prompts when omitted)")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(__version__, "-v", "--version", prog_name="rosepine-zellij")
def cli(variant, debug):
    """Install the Rose Pine theme variants for Zellij and select one."""
    setup_logging(debug)

    try:
        paths = ZellijPaths.from_home()
        variants = load_variants()
        run(paths, variants, variant, confirm=confirm_prompt, choose=choose_prompt)
    except UserAbort as e:
        logger.debug(f"Aborted: {e}")
        sys.exit(EXIT_DECLINED)
    except click.Abort:
        logger.debug("Prompt interrupted")
        click.echo("Aborted!", err=True)
        sys.exit(EXIT_ERROR)
    except click.ClickException:
        raise
    except Exception as e:
        logger.debug(f"Install failed: {e}", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_ERROR)

    sys.exit(EXIT_OK)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
