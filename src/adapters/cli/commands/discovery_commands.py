"""
Commande CLI de decouverte de films.
"""

import asyncio
from typing import Annotated, Optional

import typer
from rich.status import Status

from src.adapters.cli.helpers import (
    console,
    movies_table,
    parse_ids,
    suppress_loguru,
    with_container,
)


def discover(
    action: Annotated[
        str,
        typer.Argument(help="Action de decouverte (ex: upcoming, popular)"),
    ],
    library: Annotated[
        Optional[str],
        typer.Option("--library", "-l", help="IDs TMDB de la bibliotheque (603,604,...)"),
    ] = None,
    exclude: Annotated[
        Optional[str],
        typer.Option("--exclude", "-x", help="IDs TMDB exclus (603,604,...)"),
    ] = None,
) -> None:
    """Propose des films absents de la bibliotheque et des exclusions."""
    asyncio.run(_discover_async(action, parse_ids(library), parse_ids(exclude)))


@with_container()
async def _discover_async(
    container,
    action: str,
    library_ids: Optional[list[int]],
    excluded_ids: Optional[list[int]],
) -> None:
    """Implementation async de la commande discover."""
    service = container.discovery_service()

    with Status(f"[cyan]Decouverte '{action}'...", console=console):
        result = await service.discover(action, library_ids, excluded_ids)

    if result.failed:
        console.print(f"[red]Decouverte impossible:[/red] {result.failure.error}")
        raise typer.Exit(code=1)

    if not result.movies:
        console.print("[yellow]Aucun nouveau film propose.[/yellow]")
        return

    with suppress_loguru():
        console.print(movies_table(result.movies, title=f"Decouverte '{action}'"))
