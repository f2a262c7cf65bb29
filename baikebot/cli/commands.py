"""CLI commands for baikebot."""

import asyncio
import sys
from pathlib import Path

import typer
from loguru import logger

from baikebot import __logo__, __version__

app = typer.Typer(
    name="baikebot",
    help=f"{__logo__} baikebot - Baidu Baike lookups",
    no_args_is_help=True,
)


def version_callback(value: bool):
    if value:
        typer.echo(f"{__logo__} baikebot v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
):
    """baikebot - encyclopedia lookups for chat channels."""
    pass


def _configure_logging(verbose: bool, level: str) -> None:
    logger.remove()
    if not verbose:
        logger.disable("baikebot")
        return
    logger.add(sys.stderr, level=level)
    logger.enable("baikebot")


@app.command()
def lookup(
    keyword: str = typer.Argument(..., help="Keyword to look up"),
    choice: int | None = typer.Option(
        None, "--choice", "-c", min=1, help="Pick the N-th candidate instead of asking"
    ),
    config_path: Path | None = typer.Option(None, "--config", help="Path to config.json"),
    locale: str | None = typer.Option(None, "--locale", "-l", help="Message locale (zh, en)"),
    verbose: bool = typer.Option(False, "--verbose", help="Show logs at the configured level"),
):
    """Look up KEYWORD on Baidu Baike."""
    from baikebot.agent.tools.baike import BaikeLookup
    from baikebot.channels import ConsoleSession
    from baikebot.config.loader import load_config
    from baikebot.i18n import Localizer

    config = load_config(config_path)
    _configure_logging(verbose, config.logging.level)

    localizer = Localizer(locale or config.i18n.locale)
    runner = BaikeLookup(config.baike, localizer=localizer)
    result = asyncio.run(runner.run(keyword, ConsoleSession(), choice))
    if result.text:
        typer.echo(result.text)


if __name__ == "__main__":
    app()
