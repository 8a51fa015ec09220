"""
Dépendances partagées de l'application web.

Fournit le service du catalogue depuis le Container attaché à l'application,
et l'identité de démonstration résolue une seule fois par requête.
"""

from fastapi import Depends, Request

from ..container import Container
from ..core.entities.user import User
from ..services.catalog import CatalogService
from .errors import server_errors


def get_container(request: Request) -> Container:
    """Container DI de l'application courante."""
    return request.app.state.container


def get_catalog_service(container: Container = Depends(get_container)) -> CatalogService:
    """Service du catalogue (singleton du container)."""
    return container.catalog_service()


async def get_current_user(
    service: CatalogService = Depends(get_catalog_service),
) -> User:
    """Utilisateur de démonstration, créé au premier accès."""
    with server_errors("Failed to resolve user"):
        return await service.resolve_demo_user()
