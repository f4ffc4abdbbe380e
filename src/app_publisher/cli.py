"""Typer CLI for app-publisher."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console

from app_publisher.config import Settings

load_dotenv()

app = typer.Typer(
    name="app-publisher",
    help="Prepare and publish mobile apps: AI assets, store listings, fastlane and Maestro.",
    no_args_is_help=True,
)
console = Console()
# stdout carries the MCP protocol while serving
err_console = Console(stderr=True)

_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _configure_logging(debug: bool, log_file: Path | None) -> None:
    logger = logging.getLogger("app_publisher")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    stream_handler = logging.StreamHandler()  # stderr
    stream_handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(file_handler)

    if debug:
        import litellm as _litellm

        _litellm.suppress_debug_info = True
        _litellm.set_verbose = False


def _parse_or_exit(parser, value: str | None):
    try:
        return parser(value)
    except ValueError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(2) from None


@app.command()
def serve(
    debug: Annotated[
        bool, typer.Option("--debug", help="Log tool and model calls at DEBUG level")
    ] = False,
    log_file: Annotated[
        Path | None, typer.Option("--log-file", help="Also write logs to this file")
    ] = None,
) -> None:
    """Run the MCP server on stdio."""
    import asyncio

    from app_publisher.server import serve as serve_stdio

    _configure_logging(debug, log_file)
    asyncio.run(serve_stdio(Settings.load()))


@app.command()
def listing(
    project: Annotated[Path, typer.Argument(help="App project directory")],
    platform: Annotated[
        str, typer.Option("--platform", "-p", help="ios, android or both")
    ] = "both",
    language: Annotated[
        str, typer.Option("--language", "-l", help="en, ko, ja, zh or all")
    ] = "all",
) -> None:
    """Draft store listing text from a project's files."""
    from app_publisher.pipeline import generate_store_listing, parse_languages, parse_platform

    target = _parse_or_exit(parse_platform, platform)
    languages = _parse_or_exit(parse_languages, language)
    report = generate_store_listing(project, target, languages)
    console.print(report, markup=False, highlight=False, soft_wrap=True)
    if not project.is_dir():
        raise typer.Exit(1)


@app.command()
def guide(
    project: Annotated[Path, typer.Argument(help="App project directory")],
    language: Annotated[
        str, typer.Option("--language", "-l", help="en, ko, ja, zh or all")
    ] = "all",
) -> None:
    """Draft support page, privacy policy, review notes and rating answers."""
    from app_publisher.pipeline import generate_publishing_guide, parse_languages

    languages = _parse_or_exit(parse_languages, language)
    guide_text = generate_publishing_guide(project, languages)
    console.print(guide_text, markup=False, highlight=False, soft_wrap=True)
    if not project.is_dir():
        raise typer.Exit(1)


@app.command()
def status() -> None:
    """Show API key, model and tool availability."""
    from app_publisher.config import default_output_dir
    from app_publisher.tools.assets import format_status

    text = format_status(Settings.load(), default_output_dir())
    console.print(text, markup=False, highlight=False, soft_wrap=True)
