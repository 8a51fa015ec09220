"""
Point d'entrée CLI de StreamCat.

Configure le logging et fournit les commandes CLI (serveur, configuration,
consultation du catalogue et des favoris).
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import catalog, favorites
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="streamcat",
    help="Catalogue de films et séries avec favoris",
)
container = Container()


@app.callback()
def main_callback() -> None:
    """StreamCat - Catalogue de films et séries."""


# Consultation
app.command()(catalog)
app.command()(favorites)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration StreamCat")
    typer.echo(f"Stockage : {config.storage_backend}")
    if config.persistent:
        typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Catalogue : {config.catalog_file or 'catalogue embarqué'}")
    typer.echo(f"Lecteur : {config.embed_base_url}")
    typer.echo(f"Utilisateur de démonstration : {config.demo_username}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"StreamCat v{__version__}")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur de l'API StreamCat."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    # log_config=None : uvicorn garde les handlers installes par configure_logging
    uvicorn.run(
        "streamcat.web.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_config=None,
    )


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Démarrage de StreamCat", version=__version__)

    app()


if __name__ == "__main__":
    main()
