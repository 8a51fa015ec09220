"""
Utilitaires partages pour les commandes CLI de StreamCat.

Ce module fournit :
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container au catalogue amorce
- console : instance Rich Console partagee
- content_table : rendu Rich d'une liste de contenus
"""

from collections.abc import Iterable
from contextlib import contextmanager
from functools import wraps

from loguru import logger as loguru_logger
from rich.console import Console
from rich.table import Table

from streamcat.container import Container
from streamcat.core.entities.content import Content, ContentType

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("streamcat")
    try:
        yield
    finally:
        loguru_logger.enable("streamcat")


def with_container(seed: bool = True):
    """
    Decorateur qui injecte un container initialise en premier argument.

    Args:
        seed: Si True (defaut), amorce le catalogue du stockage.

    Usage:
        @with_container()
        async def my_command(container, ...):
            service = container.catalog_service()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            if seed:
                await container.catalog_service().seed(container.catalog())
            return await func(container, *args, **kwargs)
        return wrapper
    return decorator


def content_table(contents: Iterable[Content], title: str) -> Table:
    """Construit la table Rich d'une liste de contenus."""
    table = Table(title=title, show_header=True)
    table.add_column("ID", style="dim")
    table.add_column("Titre", style="bold")
    table.add_column("Type")
    table.add_column("Annee", justify="right")
    table.add_column("Note", justify="right")
    table.add_column("Genre")
    table.add_column("Classif.")
    table.add_column("Vedette", justify="center")

    for content in contents:
        kind = "Film" if content.type is ContentType.MOVIE else "Serie"
        table.add_row(
            content.id,
            content.title,
            kind,
            str(content.year),
            content.rating,
            content.genre,
            content.classification.value,
            "*" if content.featured else "",
        )
    return table
