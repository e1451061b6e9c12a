"""Entrypoint for the command line interface."""

import asyncio
import json
import sys

import typer

from iconfinder.config_logging import configure_logging
from iconfinder.exceptions import IconResolutionError
from iconfinder.icons import build_resolver
from iconfinder.icons.models import IconResolution

cli = typer.Typer(no_args_is_help=True, add_completion=False)

show_all_option = typer.Option(
    False,
    "--all",
    help="Also print every icon candidate, best first",
)


async def _resolve(target: str) -> IconResolution:
    resolver = build_resolver()
    try:
        return await resolver.resolve(target)
    finally:
        await resolver.fetcher.close()


@cli.callback()
def setup():
    """CLI Entrypoint"""
    configure_logging(stream=sys.stderr)


@cli.command()
def resolve(
    url: str = typer.Argument(..., help="Page to find the icon of, with or without a scheme"),
    show_all: bool = show_all_option,
):
    """Find the best icon of a web page and print it as JSON"""
    try:
        resolution = asyncio.run(_resolve(url))
    except IconResolutionError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    output: dict = {"best_icon": resolution.best_icon.model_dump(mode="json")}
    if show_all:
        output["all_icons"] = [icon.model_dump(mode="json") for icon in resolution.icons]

    typer.echo(json.dumps(output, indent=2))


if __name__ == "__main__":
    cli()
