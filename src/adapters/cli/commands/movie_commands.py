"""
Commandes CLI de resolution de films (search, info, find, changes).
"""

import asyncio
from datetime import datetime, timedelta
from typing import Annotated, Optional

import typer
from rich.status import Status

from src.adapters.cli.helpers import (
    console,
    movies_table,
    print_movie_detail,
    require_tmdb,
    suppress_loguru,
    with_container,
)
from src.core.exceptions import (
    MovieNotFoundError,
    ProviderTransportError,
    SearchFailedError,
)


def search(
    query: Annotated[
        str,
        typer.Argument(help="Titre, nom de release, imdb:tt... ou tmdb:..."),
    ],
) -> None:
    """Recherche des films sur TMDB."""
    asyncio.run(_search_async(query))


@with_container()
async def _search_async(container, query: str) -> None:
    """Implementation async de la commande search."""
    require_tmdb(container)
    service = container.movie_info_service()

    try:
        with Status(f"[cyan]Recherche de '{query}'...", console=console):
            movies = await service.search_by_query(query)
    except SearchFailedError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    if not movies:
        console.print("[yellow]Aucun film trouve.[/yellow]")
        return

    with suppress_loguru():
        console.print(movies_table(movies, title=f"Resultats pour '{query}'"))


def info(
    tmdb_id: Annotated[int, typer.Argument(help="ID TMDB du film")],
    predb: Annotated[
        bool,
        typer.Option("--predb", help="Considerer que des releases existent deja"),
    ] = False,
) -> None:
    """Affiche la fiche complete d'un film par ID TMDB."""
    asyncio.run(_info_async(tmdb_id, predb))


@with_container()
async def _info_async(container, tmdb_id: int, predb: bool) -> None:
    """Implementation async de la commande info."""
    require_tmdb(container)
    service = container.movie_info_service()

    try:
        result = await service.resolve_by_id(tmdb_id, has_predb_entry=predb)
    except MovieNotFoundError:
        console.print(f"[yellow]Film TMDB {tmdb_id} introuvable.[/yellow]")
        raise typer.Exit(code=1)
    except ProviderTransportError as e:
        console.print(f"[red]Erreur TMDB:[/red] {e}")
        raise typer.Exit(code=1)

    if result is None:
        console.print(f"[yellow]TMDB n'a pas renvoye de fiche pour {tmdb_id}.[/yellow]")
        raise typer.Exit(code=1)

    movie, credits = result
    with suppress_loguru():
        print_movie_detail(movie, credits)


def find(
    imdb_id: Annotated[str, typer.Argument(help="ID IMDb (ex: tt0133093)")],
) -> None:
    """Retrouve un film TMDB depuis son ID IMDb."""
    asyncio.run(_find_async(imdb_id))


@with_container()
async def _find_async(container, imdb_id: str) -> None:
    """Implementation async de la commande find."""
    require_tmdb(container)
    service = container.movie_info_service()

    try:
        movie = await service.resolve_by_external_id(imdb_id)
    except MovieNotFoundError:
        console.print(f"[yellow]Aucun film TMDB pour {imdb_id}.[/yellow]")
        raise typer.Exit(code=1)
    except ProviderTransportError as e:
        console.print(f"[red]Erreur TMDB:[/red] {e}")
        raise typer.Exit(code=1)

    if movie is None:
        console.print(f"[red]Reponse TMDB inexploitable pour {imdb_id}.[/red]")
        raise typer.Exit(code=1)

    with suppress_loguru():
        print_movie_detail(movie)


def changes(
    days: Annotated[
        int,
        typer.Option("--days", "-d", min=1, help="Fenetre de modifications en jours"),
    ] = 1,
    since: Annotated[
        Optional[datetime],
        typer.Option("--since", help="Date de debut (prioritaire sur --days)"),
    ] = None,
) -> None:
    """Liste les IDs TMDB des films modifies recemment."""
    start = since if since is not None else datetime.now() - timedelta(days=days)
    asyncio.run(_changes_async(start))


@with_container()
async def _changes_async(container, since: datetime) -> None:
    """Implementation async de la commande changes."""
    require_tmdb(container)
    service = container.movie_info_service()

    try:
        changed = await service.list_changed_ids(since)
    except (MovieNotFoundError, ProviderTransportError) as e:
        console.print(f"[red]Erreur TMDB:[/red] {e}")
        raise typer.Exit(code=1)

    console.print(
        f"[bold]{len(changed)}[/bold] film(s) modifie(s) depuis {since:%Y-%m-%d %H:%M}"
    )
    for tmdb_id in sorted(changed):
        console.print(f"  {tmdb_id}")
