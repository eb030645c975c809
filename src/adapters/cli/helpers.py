"""
Utilitaires partages pour les commandes CLI de CineHook.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container et fermant les clients HTTP
- parse_ids : conversion d'une liste "603,604" en IDs TMDB
- movies_table / credits_table / print_movie_detail : rendu Rich des entites
"""

from contextlib import contextmanager
from functools import wraps
from typing import Optional

import typer
from loguru import logger as loguru_logger
from rich.console import Console
from rich.table import Table

from src.container import Container
from src.core.entities.movie import Credit, CreditType, Movie, MovieStatus

console = Console()

_STATUS_STYLES = {
    MovieStatus.ANNOUNCED: "yellow",
    MovieStatus.IN_CINEMAS: "cyan",
    MovieStatus.RELEASED: "green",
}


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("src")
    try:
        yield
    finally:
        loguru_logger.enable("src")


def with_container():
    """
    Decorateur qui injecte un container en premier argument.

    Les clients HTTP (TMDB, decouverte) sont fermes a la fin de la commande.

    Usage:
        @with_container()
        async def my_command(container, ...):
            service = container.movie_info_service()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            try:
                return await func(container, *args, **kwargs)
            finally:
                await container.tmdb_client().close()
                await container.discovery_client().close()
        return wrapper
    return decorator


def require_tmdb(container: Container) -> None:
    """Interrompt la commande si la cle API TMDB n'est pas configuree."""
    if not container.config().tmdb_enabled:
        console.print("[red]Cle API TMDB absente.[/red] Definir CINEHOOK_TMDB_API_KEY.")
        raise typer.Exit(code=1)


def parse_ids(value: Optional[str]) -> Optional[list[int]]:
    """
    Convertit une liste d'IDs separes par des virgules.

    Returns:
        Liste d'IDs, ou None si l'option n'a pas ete fournie

    Raises:
        typer.BadParameter: Si un element n'est pas un entier
    """
    if value is None:
        return None
    try:
        return [int(part) for part in value.split(",") if part.strip()]
    except ValueError as e:
        raise typer.BadParameter(f"Liste d'IDs invalide: {value!r}") from e


def _format_date(movie: Movie) -> str:
    return movie.in_cinemas.strftime("%Y-%m-%d") if movie.in_cinemas else "-"


def _format_status(status: MovieStatus) -> str:
    style = _STATUS_STYLES.get(status, "white")
    return f"[{style}]{status.value}[/{style}]"


def movies_table(movies: list[Movie], title: str) -> Table:
    """Tableau Rich d'une liste de films."""
    table = Table(title=title, show_lines=False)
    table.add_column("TMDB", justify="right", style="dim")
    table.add_column("Titre", style="bold")
    table.add_column("Annee", justify="right")
    table.add_column("Sortie salles")
    table.add_column("Statut")
    table.add_column("Note", justify="right")

    for movie in movies:
        table.add_row(
            str(movie.tmdb_id),
            movie.title,
            str(movie.year) if movie.year else "-",
            _format_date(movie),
            _format_status(movie.status),
            f"{movie.ratings.value:.1f} ({movie.ratings.votes})",
        )
    return table


def credits_table(credits: list[Credit], limit: int = 10) -> Table:
    """Tableau Rich des principaux credits (cast puis realisation)."""
    table = Table(title="Credits")
    table.add_column("Nom", style="bold")
    table.add_column("Role")

    cast = [credit for credit in credits if credit.type == CreditType.CAST][:limit]
    directors = [
        credit for credit in credits
        if credit.type == CreditType.CREW and credit.job == "Director"
    ]
    for credit in directors:
        table.add_row(credit.name, "[magenta]Director[/magenta]")
    for credit in cast:
        table.add_row(credit.name, credit.character or "")
    return table


def print_movie_detail(movie: Movie, credits: Optional[list[Credit]] = None) -> None:
    """Affiche la fiche complete d'un film."""
    console.print(f"\n[bold cyan]{movie.title}[/bold cyan] ({movie.year or '?'})")
    console.print(f"  TMDB: {movie.tmdb_id}  IMDb: {movie.imdb_id or '-'}  Slug: {movie.title_slug}")
    console.print(f"  Statut: {_format_status(movie.status)}")
    console.print(f"  Sortie salles: {_format_date(movie)}")
    if movie.physical_release:
        note = f" ({movie.physical_release_note})" if movie.physical_release_note else ""
        console.print(f"  Sortie physique: {movie.physical_release:%Y-%m-%d}{note}")
    if movie.runtime:
        console.print(f"  Duree: {movie.runtime} min")
    if movie.genres:
        console.print(f"  Genres: {', '.join(movie.genres)}")
    if movie.studio:
        console.print(f"  Studio: {movie.studio}")
    if movie.collection:
        console.print(f"  Collection: {movie.collection.name}")
    if movie.youtube_trailer_id:
        console.print(f"  Bande-annonce: https://www.youtube.com/watch?v={movie.youtube_trailer_id}")
    if movie.alternative_titles:
        titles = ", ".join(
            f"{alt.title} [dim]({alt.language.code})[/dim]" for alt in movie.alternative_titles
        )
        console.print(f"  Titres alternatifs: {titles}")
    if movie.overview:
        console.print(f"\n[dim]{movie.overview}[/dim]")
    if credits:
        console.print()
        console.print(credits_table(credits))
