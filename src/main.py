"""
Point d'entrée CLI de CineHook.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from .adapters.cli.commands import changes, discover, find, info, search
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="cinehook",
    help="Resolution de films et de metadonnees TMDB",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """CineHook - Resolution de films TMDB."""
    settings = get_config()
    if quiet:
        log_level = "ERROR"
    elif verbose >= 2:
        log_level = "TRACE"
    elif verbose == 1:
        log_level = "DEBUG"
    else:
        log_level = settings.log_level

    configure_logging(
        log_level=log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


app.command()(search)
app.command()(info)
app.command()(find)
app.command()(changes)
app.command()(discover)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command(name="config")
def show_config() -> None:
    """Affiche la configuration actuelle."""
    settings = get_config()
    typer.echo(f"API TMDB : {'activée' if settings.tmdb_enabled else 'désactivée'}")
    typer.echo(f"URL TMDB : {settings.tmdb_base_url}")
    typer.echo(f"Langue : {settings.tmdb_language}")
    typer.echo(f"Images : {settings.tmdb_image_base_url}{settings.tmdb_image_size}")
    typer.echo(f"Découverte : {settings.discovery_base_url}")
    typer.echo(
        f"Quota : pause de {settings.rate_limit_cooldown_seconds}s "
        f"sous {settings.rate_limit_threshold} requêtes restantes"
    )
    typer.echo(f"Niveau de log : {settings.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo("CineHook v0.1.0")


def main() -> None:
    """Point d'entrée de l'application."""
    logger.debug("Démarrage de CineHook")
    app()


if __name__ == "__main__":
    main()
