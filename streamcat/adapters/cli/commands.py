"""
Commandes CLI de consultation du catalogue et des favoris.

Chaque commande construit son propre container : avec le stockage memoire,
les favoris ne survivent pas a la commande. Le backend SQLite
(STREAMCAT_STORAGE_BACKEND=sqlite) les conserve entre deux invocations.
"""

import asyncio
from typing import Annotated, Optional

import typer

from streamcat.adapters.cli.helpers import (
    console,
    content_table,
    suppress_loguru,
    with_container,
)
from streamcat.core.entities.content import ContentType
from streamcat.core.exceptions import StreamCatError


def catalog(
    content_type: Annotated[
        Optional[ContentType],
        typer.Option("--type", "-t", help="Filtrer par type (movie, series)"),
    ] = None,
    featured: Annotated[
        bool,
        typer.Option("--featured", "-f", help="Contenus mis en avant uniquement"),
    ] = False,
    search: Annotated[
        Optional[str],
        typer.Option("--search", "-s", help="Recherche dans titre, genre et casting"),
    ] = None,
) -> None:
    """Affiche le catalogue (recherche > type > mise en avant)."""
    asyncio.run(_catalog_async(content_type, featured, search))


@with_container()
async def _catalog_async(
    container,
    content_type: Optional[ContentType],
    featured: bool,
    search: Optional[str],
) -> None:
    """Implementation async de la commande catalog."""
    service = container.catalog_service()
    contents = await service.list_content(
        content_type=content_type.value if content_type else None,
        featured=featured,
        search=search or None,
    )

    if not contents:
        console.print("[yellow]Aucun contenu trouve.[/yellow]")
        raise typer.Exit(0)

    with suppress_loguru():
        console.print(content_table(contents, title="Catalogue"))
        console.print(f"\n[bold]Total: {len(contents)} contenu(s)[/bold]")


def favorites(
    add: Annotated[
        Optional[str],
        typer.Option("--add", "-a", help="ID du contenu a ajouter aux favoris"),
    ] = None,
    remove: Annotated[
        Optional[str],
        typer.Option("--remove", "-r", help="ID du contenu a retirer des favoris"),
    ] = None,
) -> None:
    """Affiche (et modifie) les favoris de l'utilisateur de demonstration."""
    asyncio.run(_favorites_async(add, remove))


@with_container()
async def _favorites_async(container, add: Optional[str], remove: Optional[str]) -> None:
    """Implementation async de la commande favorites."""
    service = container.catalog_service()
    user = await service.resolve_demo_user()

    try:
        if add is not None:
            await service.add_favorite(user, add)
            console.print(f"[green]Ajoute aux favoris:[/green] {add}")
        if remove is not None:
            await service.remove_favorite(user, remove)
            console.print(f"[green]Retire des favoris:[/green] {remove}")
    except StreamCatError as e:
        console.print(f"[red]Erreur: {e}[/red]")
        raise typer.Exit(1)

    contents = await service.get_favorites(user)
    if not contents:
        console.print("[yellow]Aucun favori.[/yellow]")
        raise typer.Exit(0)

    with suppress_loguru():
        console.print(content_table(contents, title=f"Favoris de {user.username}"))
